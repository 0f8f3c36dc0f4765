"""Static lookup tables: measurement labels and text bulletin types."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SUPPORTED_LANGUAGES: tuple[str, ...] = ("is", "en")
DEFAULT_LANGUAGE = "is"

# Text forecast ids (tegundir textaspáa)
VALID_TEXT_TYPES: tuple[str, ...] = (
    "2", "3", "5", "6", "7", "9", "10", "11", "12", "14", "27",
    "30", "31", "32", "33", "34", "35", "36", "37", "38", "39", "42",
)

MEASUREMENTS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "is": MappingProxyType({
        "F": "Vindhraði (m/s)",
        "FX": "Mesti vindhraði (m/s)",
        "FG": "Mesta vindhviða (m/s)",
        "D": "Vindstefna",
        "T": "Hiti (°C)",
        "W": "Veðurlýsing",
        "V": "Skyggni (km)",
        "N": "Skýjahula (%)",
        "P": "Loftþrýstingur (hPa)",
        "RH": "Rakastig (%)",
        "SNC": "Lýsing á snjó",
        "SND": "Snjódýpt",
        "SED": "Snjólag",
        "RTE": "Vegahiti (°C)",
        "TD": "Daggarmark (°C)",
        "R": "Uppsöfnuð úrkoma (mm/klst) úr sjálfvirkum mælum",
    }),
    "en": MappingProxyType({
        "F": "Wind speed (m/s)",
        "FX": "Top wind speed (m/s)",
        "FG": "Top wind gust (m/s)",
        "D": "Wind direction",
        "T": "Air temperature (°C)",
        "W": "Weather description",
        "V": "Visibility (km)",
        "N": "Cloud cover (%)",
        "P": "Air pressure",
        "RH": "Humidity (%)",
        "SNC": "Snow description",
        "SND": "Snow depth",
        "SED": "Snow type",
        "RTE": "Road temperature (°C)",
        "TD": "Dew limit (°C)",
        "R": "Cumulative precipitation (mm/h) from automatic measuring units",
    }),
})

# Parameter names sent upstream, always taken from the Icelandic table.
MEASUREMENT_CODES: tuple[str, ...] = tuple(MEASUREMENTS["is"])


def descriptions_for(lang: str) -> dict[str, str]:
    """Return a plain (JSON-serializable) copy of the labels for ``lang``."""
    return dict(MEASUREMENTS[lang])
