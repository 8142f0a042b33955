from collections.abc import Iterable, Mapping

from .models import ProblemRecord


def merge(
    online_catalog: Mapping[str, ProblemRecord], local_names: Iterable[str]
) -> dict[str, ProblemRecord]:
    """Fold local names into a copy of the online catalog.

    Known names keep their link and gain ``is_local``; unknown names become
    local-only records. Neither input is modified.
    """
    merged = dict(online_catalog)
    for name in local_names:
        existing = merged.get(name)
        if existing is not None:
            merged[name] = existing.model_copy(update={"is_local": True})
        else:
            merged[name] = ProblemRecord.local(name)
    return merged


def classify(
    merged: Mapping[str, ProblemRecord],
) -> tuple[list[ProblemRecord], list[ProblemRecord]]:
    local_only: list[ProblemRecord] = []
    online_only: list[ProblemRecord] = []
    for problem in merged.values():
        if problem.is_local and not problem.is_online:
            local_only.append(problem)
        elif problem.is_online and not problem.is_local:
            online_only.append(problem)
    return local_only, online_only
