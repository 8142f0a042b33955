from typing import Callable

PageSource = Callable[[int], str]


class SyncError(Exception):
    stage = "sync"


class TransportError(SyncError):
    """Request failed or the judge answered with a non-success status."""

    stage = "fetch"


class ParseError(SyncError):
    """A listing row exists but lacks the expected anchor."""

    stage = "parse"


class CacheFormatError(SyncError):
    stage = "cache"


class FilesystemError(SyncError):
    stage = "filesystem"
