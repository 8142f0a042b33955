from collections.abc import Sequence

from .models import ProblemRecord, SyncReport

HEADERS = ("Name", "URL", "Local", "Online")


def build_report(
    local_only: Sequence[ProblemRecord],
    online_only: Sequence[ProblemRecord],
    include_online: bool,
) -> SyncReport:
    return SyncReport(
        local_only=list(local_only),
        online_only=list(online_only) if include_online else [],
    )


def _row(problem: ProblemRecord) -> tuple[str, str, str, str]:
    return (
        problem.name,
        problem.link or "",
        str(problem.is_local).lower(),
        str(problem.is_online).lower(),
    )


def render_table(report: SyncReport) -> str:
    rows = [_row(p) for p in report.local_only + report.online_only]
    widths = [
        max(len(cell) for cell in column) for column in zip(HEADERS, *rows)
    ]

    def fmt(cells: Sequence[str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    lines = [rule, fmt(HEADERS), rule]
    lines.extend(fmt(r) for r in rows)
    lines.append(rule)
    return "\n".join(lines)
