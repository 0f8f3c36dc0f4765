"""XML to nested-mapping conversion for xmlweather responses."""

from __future__ import annotations

from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from ..domain.errors import XmlParseError

ATTRIBUTES_KEY = "$"
TEXT_KEY = "_"
_ATTR_PREFIX = "@"


def _force_child_lists(path, key, value) -> bool:
    # Every element below the root becomes a list, even when it occurs once.
    return bool(path)


def _empty_as_string(path, key, value):
    return key, "" if value is None else value


def _group_attributes(node: Any) -> Any:
    """Move ``@name`` keys into a ``$`` sub-mapping, recursively."""
    if isinstance(node, list):
        return [_group_attributes(item) for item in node]
    if not isinstance(node, dict):
        return node

    grouped: dict[str, Any] = {}
    attributes: dict[str, Any] = {}
    for key, value in node.items():
        if key.startswith(_ATTR_PREFIX):
            attributes[key[len(_ATTR_PREFIX):]] = value
        else:
            grouped[key] = _group_attributes(value)
    if attributes:
        grouped[ATTRIBUTES_KEY] = attributes
    return grouped


def parse_xml(body: str) -> dict[str, Any]:
    """Parse ``body`` into ``{root_tag: {child_tag: [...], "$": {...}}}``.

    Child elements are always wrapped in lists, attributes are grouped under
    ``$`` and the text of mixed-content elements is stored under ``_``.
    Empty elements parse to ``""``.

    :raises XmlParseError: when ``body`` is not well-formed XML
    """
    try:
        tree = xmltodict.parse(
            body,
            attr_prefix=_ATTR_PREFIX,
            cdata_key=TEXT_KEY,
            force_list=_force_child_lists,
            postprocessor=_empty_as_string,
        )
    except ExpatError as exc:
        raise XmlParseError(f"Could not parse XML response: {exc}") from exc
    return _group_attributes(tree)
