"""Station list scraping for www.vedur.is/vedur/stodvar."""

from __future__ import annotations

import re
from typing import List, Protocol

from ..domain.errors import ScrapePatternMismatch
from ..domain.models import StationRecord
from ..logger.app_logger import get_logger

logger = get_logger(__name__)

# Links to automatic stations are marked with the letter "A".
AUTOMATIC_STATION_SELECTOR = ".listtable td a:-soup-contains('A')"

ID_PATTERN = re.compile(r"station=(\d+)")
# Letters, digits, hyphens and spaces up to the last " -" separator.
TITLE_PATTERN = re.compile(r"^((?:[^\W_]|[\s-])*)\s-")


class _SoupLike(Protocol):
    def select(self, selector: str):
        ...


def parse_station_link(title: str | None, href: str | None) -> StationRecord:
    """Build a StationRecord from a link's ``title`` and ``href`` attributes.

    :raises ScrapePatternMismatch: when either attribute has an unexpected form
    """
    title_match = TITLE_PATTERN.match(title or "")
    id_match = ID_PATTERN.search(href or "")
    if not title_match or not id_match:
        logger.warning("Unexpected station link: title=%r href=%r", title, href)
        raise ScrapePatternMismatch("Parsing error -- Source is changed")
    return StationRecord(name=title_match.group(1).strip(), id=id_match.group(1))


def extract_stations(soup: _SoupLike) -> List[StationRecord]:
    """Return every automatic station on the page, in document order."""
    return [
        parse_station_link(link.get("title"), link.get("href"))
        for link in soup.select(AUTOMATIC_STATION_SELECTOR)
    ]
