"""Domain models: validated request options and response shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .catalog import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from .errors import InvalidLanguage, MissingIdentifiers

_TRUE_STRINGS = {"1", "true", "yes", "on"}


def _resolve_lang(value: Any) -> str:
    if value is None or value == "":
        return DEFAULT_LANGUAGE
    lang = str(value).strip()
    if lang not in SUPPORTED_LANGUAGES:
        raise InvalidLanguage("Incorrect language -- only 'is' or 'en' allowed")
    return lang


def _join_ids(value: Any, label: str) -> str:
    """Accept ``"1,422"``, ``"1;422"`` or ``["1", "422"]`` and return the id string."""
    if value is None or value is False:
        raise MissingIdentifiers(f"No {label} supplied")
    if isinstance(value, str):
        ids = value.strip()
    elif isinstance(value, (list, tuple)):
        ids = ";".join(str(item).strip() for item in value if str(item).strip())
    else:
        ids = str(value).strip()
    if not ids:
        raise MissingIdentifiers(f"No {label} supplied")
    return ids


def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None or value == "" or value is False:
        return None
    return str(value)


@dataclass(frozen=True)
class StationQuery:
    """Options shared by the forecast and observation requests."""

    stations: str
    lang: str = DEFAULT_LANGUAGE
    descriptions: bool = False

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "StationQuery":
        stations = _join_ids(options.get("stations"), "stations")
        return cls(
            stations=stations,
            lang=_resolve_lang(options.get("lang")),
            descriptions=_as_flag(options.get("descriptions")),
        )


@dataclass(frozen=True)
class ObservationQuery(StationQuery):
    time: Optional[str] = None
    anytime: Optional[str] = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "ObservationQuery":
        base = StationQuery.from_options(options)
        anytime = options.get("anytime")
        if anytime is True:
            anytime = "1"
        return cls(
            stations=base.stations,
            lang=base.lang,
            descriptions=base.descriptions,
            time=_optional_text(options.get("time")),
            anytime=_optional_text(anytime),
        )


@dataclass(frozen=True)
class TextQuery:
    types: str
    lang: str = DEFAULT_LANGUAGE

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "TextQuery":
        types = _join_ids(options.get("types"), "types")
        return cls(types=types, lang=_resolve_lang(options.get("lang")))


@dataclass(frozen=True)
class StationRecord:
    """A station listed on the vedur.is station page."""

    name: str
    id: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "id": self.id}


@dataclass
class ResponseEnvelope:
    """Uniform return shape of every operation."""

    results: List[Any] = field(default_factory=list)
    descriptions: Optional[Dict[str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "results": [
                item.to_dict() if hasattr(item, "to_dict") else item
                for item in self.results
            ],
        }
        if self.descriptions is not None:
            payload["descriptions"] = dict(self.descriptions)
        return payload
