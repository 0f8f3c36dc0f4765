"""Icelandic weather forecasts, observations, text bulletins and stations from vedur.is."""

from .domain.catalog import MEASUREMENTS, VALID_TEXT_TYPES
from .domain.errors import (
    DomLoadError,
    InvalidLanguage,
    MissingIdentifiers,
    SchemaMismatch,
    ScrapePatternMismatch,
    TransportError,
    WeatherError,
    XmlParseError,
)
from .domain.models import ResponseEnvelope, StationRecord
from .service.dispatch import Outcome, call, dispatch
from .service.usecase import available_stations, forecasts, info, observations, texts
from .version import __version__

availableStations = available_stations

__all__ = [
    "MEASUREMENTS",
    "VALID_TEXT_TYPES",
    "DomLoadError",
    "InvalidLanguage",
    "MissingIdentifiers",
    "SchemaMismatch",
    "ScrapePatternMismatch",
    "TransportError",
    "WeatherError",
    "XmlParseError",
    "ResponseEnvelope",
    "StationRecord",
    "Outcome",
    "call",
    "dispatch",
    "available_stations",
    "availableStations",
    "forecasts",
    "info",
    "observations",
    "texts",
    "__version__",
]
