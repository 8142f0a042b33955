import itertools
import logging
from pathlib import Path
from typing import Callable

from . import cache
from .base import PageSource
from .clients import KattisClient
from .kattis import parse_listing
from .models import ListingEntry, ProblemRecord, SyncConfig

logger = logging.getLogger(__name__)


def build_from_network(
    fetch_page: PageSource,
    parse: Callable[[str], list[ListingEntry]] = parse_listing,
) -> dict[str, ProblemRecord]:
    """Walk the listing from page 0 until a page parses to no entries.

    Entries are upserted by name, so a later page replaces an earlier record
    with the same name. Transport and parse errors propagate unchanged.
    """
    logger.info("Getting online problems...")
    problems: dict[str, ProblemRecord] = {}

    for page in itertools.count():
        entries = parse(fetch_page(page))
        if not entries:
            logger.info("No problems found on page %d", page)
            break
        logger.info("Found %d problems on page %d", len(entries), page)
        for entry in entries:
            problems[entry.name] = ProblemRecord.online(entry.name, entry.link)

    logger.info("Found %d online problems", len(problems))
    return problems


def build_from_cache(path: Path) -> dict[str, ProblemRecord]:
    return cache.load(path)


def fetch_online_catalog(config: SyncConfig) -> dict[str, ProblemRecord]:
    with KattisClient(config) as client:
        return build_from_network(client.fetch_page)
