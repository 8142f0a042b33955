import logging
from pathlib import Path

from .base import FilesystemError

logger = logging.getLogger(__name__)


def scan_local(directory: Path) -> list[str]:
    logger.info("Getting local problems...")
    try:
        names = sorted(p.name for p in Path(directory).iterdir())
    except OSError as e:
        raise FilesystemError(f"cannot list {directory}: {e}") from e

    logger.info("Found %d local problems", len(names))
    return names
