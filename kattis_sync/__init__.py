from .base import (
    CacheFormatError,
    FilesystemError,
    ParseError,
    SyncError,
    TransportError,
)
from .catalog import build_from_cache, build_from_network, fetch_online_catalog
from .clients import KattisClient
from .kattis import parse_listing
from .local import scan_local
from .models import ListingEntry, ProblemRecord, SyncConfig, SyncReport
from .reconcile import classify, merge

__all__ = [
    "CacheFormatError",
    "FilesystemError",
    "KattisClient",
    "ListingEntry",
    "ParseError",
    "ProblemRecord",
    "SyncConfig",
    "SyncError",
    "SyncReport",
    "TransportError",
    "build_from_cache",
    "build_from_network",
    "classify",
    "fetch_online_catalog",
    "merge",
    "parse_listing",
    "scan_local",
]
