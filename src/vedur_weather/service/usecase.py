"""The public operations: build URL, fetch, parse, normalize."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from ..domain.catalog import descriptions_for
from ..domain.models import ObservationQuery, ResponseEnvelope, StationQuery, TextQuery
from ..infra import url_builder
from ..infra.http_client import build_default_transport
from ..infra.http_html import parse_html
from ..infra.scrape_station import extract_stations
from ..infra.xml_parser import parse_xml
from ..logger.app_logger import get_logger
from . import normalize

logger = get_logger(__name__)

Transport = Callable[[str], str]
Options = Optional[Mapping[str, Any]]

_default_transport: Transport | None = None


def get_default_transport() -> Transport:
    global _default_transport
    if _default_transport is None:
        _default_transport = build_default_transport()
    return _default_transport


def _merge(options: Options, extra: Mapping[str, Any]) -> dict[str, Any]:
    return {**(options or {}), **extra}


def _fetch(url: str, transport: Optional[Transport]) -> str:
    logger.debug("Request URL: %s", url)
    return (transport or get_default_transport())(url)


def info(options: Options = None, *, transport: Optional[Transport] = None, **kwargs: Any) -> ResponseEnvelope:
    """Describe the library and the operations it offers; no request is made."""
    return ResponseEnvelope(results=[{
        "info": "This is an api for Icelandic weather reports and observations",
        "endpoints": {
            "forecasts": "forecasts",
            "observations": "observations",
            "texts": "texts",
        },
        "other": {
            "availableStations": "stations",
        },
    }])


def forecasts(options: Options = None, *, transport: Optional[Transport] = None, **kwargs: Any) -> ResponseEnvelope:
    """Fetch station forecasts.

    :param options: ``stations`` (required), ``lang``, ``descriptions``
    :raises MissingIdentifiers: no stations given
    :raises InvalidLanguage: ``lang`` is not 'is' or 'en'
    :raises TransportError, XmlParseError, SchemaMismatch: on upstream failure
    """
    query = StationQuery.from_options(_merge(options, kwargs))
    tree = parse_xml(_fetch(url_builder.build_forecast_url(query), transport))
    envelope = ResponseEnvelope(results=normalize.normalize_forecasts(tree, query.lang))
    if query.descriptions:
        envelope.descriptions = descriptions_for(query.lang)
    return envelope


def observations(options: Options = None, *, transport: Optional[Transport] = None, **kwargs: Any) -> ResponseEnvelope:
    """Fetch the latest station observations.

    :param options: ``stations`` (required), ``lang``, ``descriptions``,
        ``time`` ('1h' or '3h'), ``anytime`` ('0' or '1')
    """
    query = ObservationQuery.from_options(_merge(options, kwargs))
    tree = parse_xml(_fetch(url_builder.build_observation_url(query), transport))
    envelope = ResponseEnvelope(results=normalize.normalize_observations(tree, query.lang))
    if query.descriptions:
        envelope.descriptions = descriptions_for(query.lang)
    return envelope


def texts(options: Options = None, *, transport: Optional[Transport] = None, **kwargs: Any) -> ResponseEnvelope:
    """Fetch text bulletins; ``types`` lists ids from ``VALID_TEXT_TYPES``."""
    query = TextQuery.from_options(_merge(options, kwargs))
    tree = parse_xml(_fetch(url_builder.build_text_url(query), transport))
    return ResponseEnvelope(results=normalize.normalize_texts(tree))


def available_stations(options: Options = None, *, transport: Optional[Transport] = None, **kwargs: Any) -> ResponseEnvelope:
    """Scrape the list of automatic stations from the vedur.is station page.

    :raises TransportError: the page could not be fetched
    :raises DomLoadError: the page could not be parsed
    :raises ScrapePatternMismatch: a station link has an unexpected form
    """
    soup = parse_html(_fetch(url_builder.STATION_LIST_URL, transport))
    stations = extract_stations(soup)
    logger.debug("Found %d stations", len(stations))
    return ResponseEnvelope(results=stations)


OPERATIONS: dict[str, Callable[..., ResponseEnvelope]] = {
    "info": info,
    "forecasts": forecasts,
    "observations": observations,
    "texts": texts,
    "availableStations": available_stations,
}
