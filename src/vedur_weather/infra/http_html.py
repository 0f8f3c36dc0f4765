"""HTML loading for the station list page."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from ..domain.errors import DomLoadError


def parse_html(html: str) -> BeautifulSoup:
    if not isinstance(html, str):
        raise DomLoadError("Error loading DOM")
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise DomLoadError("Error loading DOM") from exc
