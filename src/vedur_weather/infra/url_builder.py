"""URL builders for the xmlweather service."""

from __future__ import annotations

from ..domain.catalog import MEASUREMENT_CODES
from ..domain.models import ObservationQuery, StationQuery, TextQuery

XML_WEATHER_URL = "http://xmlweather.vedur.is/"
STATION_LIST_URL = "http://www.vedur.is/vedur/stodvar?t=3"

FORECAST_TYPE = "forec"
OBSERVATION_TYPE = "obs"
TEXT_TYPE = "txt"


def build_base_url(kind: str, lang: str, ids: str) -> str:
    return f"{XML_WEATHER_URL}?op_w=xml&view=xml&type={kind}&lang={lang}&ids={ids}"


def measurement_params() -> str:
    return "&params=" + ";".join(MEASUREMENT_CODES)


def build_forecast_url(query: StationQuery) -> str:
    return build_base_url(FORECAST_TYPE, query.lang, query.stations) + measurement_params()


def build_observation_url(query: ObservationQuery) -> str:
    url = build_base_url(OBSERVATION_TYPE, query.lang, query.stations) + measurement_params()
    if query.time:
        url += f"&time={query.time}"
    if query.anytime:
        url += f"&anytime={query.anytime}"
    return url


def build_text_url(query: TextQuery) -> str:
    return build_base_url(TEXT_TYPE, query.lang, query.types)
