import logging
from collections.abc import Mapping
from pathlib import Path

from .base import CacheFormatError, FilesystemError
from .models import ProblemRecord

logger = logging.getLogger(__name__)

SEPARATOR = ";"


def encode(records: Mapping[str, ProblemRecord]) -> str:
    lines: list[str] = []
    for problem in records.values():
        if problem.link is None:
            raise CacheFormatError(f"problem {problem.name!r} has no link to cache")
        lines.append(f"{problem.name}{SEPARATOR}{problem.link}\n")
    return "".join(lines)


def decode(text: str) -> dict[str, ProblemRecord]:
    problems: dict[str, ProblemRecord] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        name, sep, link = line.partition(SEPARATOR)
        if not sep:
            raise CacheFormatError(f"line {lineno}: missing {SEPARATOR!r} separator")
        problems[name] = ProblemRecord.online(name, link)
    return problems


def load(path: Path) -> dict[str, ProblemRecord]:
    logger.info("Reading online problems file...")
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CacheFormatError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise FilesystemError(f"cannot read {path}: {e}") from e

    problems = decode(text)
    logger.info("Found %d online problems", len(problems))
    return problems


def dump(path: Path, records: Mapping[str, ProblemRecord]) -> None:
    logger.info("Dumping problems file...")
    contents = encode(records)
    try:
        Path(path).write_text(contents, encoding="utf-8")
    except OSError as e:
        raise FilesystemError(f"cannot write {path}: {e}") from e
    logger.info("Dumped problems file")
