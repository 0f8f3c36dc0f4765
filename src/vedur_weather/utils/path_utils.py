"""Project path helpers."""

from pathlib import Path
from typing import Iterable


_DEFAULT_MARKERS = ("pyproject.toml", "setup.cfg", ".git")


def get_package_root() -> Path:
    """Return the directory of the ``vedur_weather`` package."""
    return Path(__file__).resolve().parents[1]


def get_project_root(markers: Iterable[str] = _DEFAULT_MARKERS) -> Path:
    """Return the nearest ancestor containing a project marker.

    Falls back to the current working directory when the package is
    installed outside a checkout.
    """
    current = get_package_root()

    for directory in [current, *current.parents]:
        if any((directory / marker).exists() for marker in markers):
            return directory

    return Path.cwd()
