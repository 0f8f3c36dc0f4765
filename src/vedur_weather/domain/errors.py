"""Error taxonomy shared by all operations."""

from __future__ import annotations


class WeatherError(Exception):
    """Base class for every failure reported by this library."""


class MissingIdentifiers(WeatherError, ValueError):
    """No station ids or text types were supplied."""


class InvalidLanguage(WeatherError, ValueError):
    """A language other than 'is' or 'en' was requested."""


class TransportError(WeatherError):
    """The upstream server could not be reached or answered with an error."""

    def __init__(self, url: str, message: str | None = None) -> None:
        self.url = url
        super().__init__(message or f"{url} did not respond")


class XmlParseError(WeatherError):
    """The XML response body could not be parsed."""


class DomLoadError(WeatherError):
    """The station list page could not be loaded into a DOM."""


class ScrapePatternMismatch(WeatherError):
    """A station link did not match the expected markup; the source page changed."""


class SchemaMismatch(WeatherError):
    """The parsed XML does not have the expected wrapper structure."""
