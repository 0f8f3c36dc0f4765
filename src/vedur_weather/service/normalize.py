"""
Reshaping of parsed xmlweather trees into flat records.

The XML conversion wraps every child element in a list and keeps
attributes under ``$``; the functions here undo both so each record reads
``{"id": ..., "valid": ..., "T": "5.2", ...}``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from ..domain.errors import SchemaMismatch
from ..infra.xml_parser import ATTRIBUTES_KEY, TEXT_KEY

Record = Dict[str, Any]


def de_arrayfy(node: Any) -> Any:
    """Replace every one-element list with its element, recursively.

    Lists of any other length stay lists. Applying this twice gives the
    same result as applying it once.
    """
    if isinstance(node, list):
        items = [de_arrayfy(item) for item in node]
        if len(items) == 1:
            return items[0]
        return items
    if isinstance(node, dict):
        return {key: de_arrayfy(value) for key, value in node.items()}
    return node


def fix_decimals(value: Any) -> Any:
    """Turn Icelandic decimal commas into periods in every string below ``value``."""
    if isinstance(value, str):
        return value.replace(",", ".")
    if isinstance(value, list):
        return [fix_decimals(item) for item in value]
    if isinstance(value, dict):
        return {key: fix_decimals(item) for key, item in value.items()}
    return value


def extract_records(tree: Mapping[str, Any], wrapper: str, child: str) -> List[Any]:
    """Return the raw ``child`` nodes under the ``wrapper`` root element.

    An empty wrapper (no stations/texts matched) yields an empty list; a
    missing or unexpected root raises.

    :raises SchemaMismatch: the root element is not ``wrapper``
    """
    if not isinstance(tree, Mapping) or wrapper not in tree:
        found = list(tree) if isinstance(tree, Mapping) else type(tree).__name__
        raise SchemaMismatch(f"Expected <{wrapper}> root element, found {found}")

    container = tree[wrapper]
    if container is None or isinstance(container, str):
        return []
    if not isinstance(container, Mapping):
        raise SchemaMismatch(f"<{wrapper}> has an unexpected structure")

    records = container.get(child)
    if records is None:
        return []
    if not isinstance(records, list):
        records = [records]
    return records


def promote_attributes(record: Any, names: Iterable[str]) -> Record:
    """Copy the listed attributes to the top level and drop the ``$`` container.

    :raises SchemaMismatch: the record is not an element or has no ``id``
    """
    if not isinstance(record, Mapping):
        raise SchemaMismatch(f"Unexpected record: {record!r}")
    flat = {key: value for key, value in record.items() if key != ATTRIBUTES_KEY}
    attributes = record.get(ATTRIBUTES_KEY) or {}
    if "id" not in attributes:
        raise SchemaMismatch("Record without an id attribute")
    for name in names:
        if name in attributes:
            flat[name] = attributes[name]
    return flat


def _prepare(tree: Mapping[str, Any], wrapper: str, child: str, attributes: Iterable[str]) -> List[Record]:
    names = tuple(attributes)
    return [
        promote_attributes(de_arrayfy(record), names)
        for record in extract_records(tree, wrapper, child)
    ]


def normalize_forecasts(tree: Mapping[str, Any], lang: str) -> List[Record]:
    results = _prepare(tree, "forecasts", "station", ("id", "valid"))
    if lang == "is":
        for result in results:
            if "forecast" in result:
                result["forecast"] = fix_decimals(result["forecast"])
    return results


def normalize_observations(tree: Mapping[str, Any], lang: str) -> List[Record]:
    results = _prepare(tree, "observations", "station", ("id", "valid"))
    if lang == "is":
        results = [fix_decimals(result) for result in results]
    return results


def normalize_texts(tree: Mapping[str, Any]) -> List[Record]:
    results = _prepare(tree, "texts", "text", ("id",))
    for result in results:
        content = result.get("content")
        if isinstance(content, Mapping):
            # Line breaks inside the bulletin arrive as <br/> children.
            text = content.get(TEXT_KEY)
            result["content"] = text if isinstance(text, str) else ""
    return results
