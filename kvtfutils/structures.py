"""Conversions between schema-style data (plain dicts, lists, sets) and API values."""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Iterable, Mapping
from typing import Any

from kvtfutils.quantity import Quantity, new_quantity, parse_quantity


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _require_str(key: Any, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"value for {key!r} must be a string, got {value!r}")
    return value


def id_parts(resource_id: str) -> tuple[str, str]:
    """Split a ``namespace/name`` identifier into its two parts."""
    parts = resource_id.split("/")
    if len(parts) != 2:
        raise ValueError(
            f"Unexpected ID format ({_quote(resource_id)}), "
            f"expected {_quote('namespace/name')}."
        )
    namespace, name = parts
    return namespace, name


def build_id(namespace: str, name: str) -> str:
    """Join a namespace and a name into a ``namespace/name`` identifier."""
    return f"{namespace}/{name}"


def flatten_string_map(mapping: Mapping[str, str] | None) -> dict[str, Any] | None:
    """Copy a string map into a schema map; ``None`` stays ``None``."""
    if mapping is None:
        return None
    return dict(mapping)


def expand_string_map(mapping: Mapping[str, Any]) -> dict[str, str]:
    """Turn a schema map into a map of strings, rejecting non-string values."""
    return {key: _require_str(key, value) for key, value in mapping.items()}


def convert_map(mapping: Mapping[str, Any]) -> dict[str, str]:
    """Turn a schema map into a map of strings, rejecting non-string values."""
    return expand_string_map(mapping)


def expand_base64_map_to_byte_map(mapping: Mapping[str, Any]) -> dict[str, bytes]:
    """Decode base64 values; entries that do not decode are dropped."""
    result: dict[str, bytes] = {}
    for key, value in mapping.items():
        try:
            result[key] = base64.b64decode(_require_str(key, value), validate=True)
        except (binascii.Error, ValueError):
            continue
    return result


def expand_string_map_to_byte_map(mapping: Mapping[str, Any]) -> dict[str, bytes]:
    """Encode each string value as UTF-8 bytes."""
    return {key: _require_str(key, value).encode("utf-8") for key, value in mapping.items()}


def expand_string_slice(values: Iterable[Any]) -> list[str]:
    """Turn a schema list into strings; ``None`` entries become empty strings."""
    return ["" if value is None else _require_str(index, value) for index, value in enumerate(values)]


def flatten_byte_map_to_base64_map(mapping: Mapping[str, bytes]) -> dict[str, str]:
    """Encode each byte value as standard base64 text."""
    return {key: base64.b64encode(bytes(value)).decode("ascii") for key, value in mapping.items()}


def flatten_byte_map_to_string_map(mapping: Mapping[str, bytes]) -> dict[str, str]:
    """Decode each byte value as UTF-8 text."""
    return {key: bytes(value).decode("utf-8", errors="replace") for key, value in mapping.items()}


def slice_of_string(values: Iterable[Any]) -> list[str]:
    """Turn a schema list into strings, rejecting non-string entries."""
    return [_require_str(index, value) for index, value in enumerate(values)]


def base64_encode_string_map(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Base64-encode each string value of a schema map."""
    return {
        key: base64.b64encode(_require_str(key, value).encode("utf-8")).decode("ascii")
        for key, value in mapping.items()
    }


def new_string_set(values: Iterable[str]) -> set[str]:
    """Build a set of strings."""
    return {_require_str(index, value) for index, value in enumerate(values)}


def new_int64_set(values: Iterable[int]) -> set[int]:
    """Build a set of integers."""
    return {int(value) for value in values}


def schema_set_to_string_array(values: Iterable[Any]) -> list[str]:
    """List the strings of a set in a stable, sorted order."""
    return sorted(_require_str(index, value) for index, value in enumerate(values))


def schema_set_to_int64_array(values: Iterable[Any]) -> list[int]:
    """List the integers of a set in a stable, sorted order."""
    result = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"set element must be an integer, got {value!r}")
        result.append(value)
    return sorted(result)


def expand_map_to_resource_list(mapping: Mapping[str, Any]) -> dict[str, Quantity]:
    """Turn a map of ints and quantity strings into resource quantities.

    Raises :class:`~kvtfutils.quantity.QuantityError` for an unparsable string
    and :class:`TypeError` for a value that is neither int nor string.
    """
    resources: dict[str, Quantity] = {}
    for key, value in mapping.items():
        if isinstance(value, int) and not isinstance(value, bool):
            resources[key] = new_quantity(value)
        elif isinstance(value, str):
            resources[key] = parse_quantity(value)
        else:
            raise TypeError(f"Unexpected value type: {value!r}")
    return resources


def flatten_resource_list(resources: Mapping[str, Quantity]) -> dict[str, str]:
    """Render each resource quantity in its canonical text form."""
    return {key: str(value) for key, value in resources.items()}