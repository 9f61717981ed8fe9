"""JSON patch operations and a differ for string maps."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Mapping, Union

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _dumps(data: Any) -> str:
    text = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text


@dataclass(frozen=True)
class AddOperation:
    """Add ``value`` at ``path``."""

    path: str
    value: Any
    op: ClassVar[str] = "add"

    def to_dict(self) -> dict[str, Any]:
        """The operation as a plain dictionary."""
        return {"path": self.path, "value": self.value, "op": self.op}

    def to_json(self) -> str:
        """Render the operation as a compact JSON object."""
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()


@dataclass(frozen=True)
class ReplaceOperation:
    """Replace the value at ``path`` with ``value``."""

    path: str
    value: Any
    op: ClassVar[str] = "replace"

    def to_dict(self) -> dict[str, Any]:
        """The operation as a plain dictionary."""
        return {"path": self.path, "value": self.value, "op": self.op}

    def to_json(self) -> str:
        """Render the operation as a compact JSON object."""
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()


@dataclass(frozen=True)
class RemoveOperation:
    """Remove the value at ``path``."""

    path: str
    op: ClassVar[str] = "remove"

    def to_dict(self) -> dict[str, Any]:
        """The operation as a plain dictionary."""
        return {"path": self.path, "op": self.op}

    def to_json(self) -> str:
        """Render the operation as a compact JSON object."""
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()


PatchOperation = Union[AddOperation, ReplaceOperation, RemoveOperation]


def _by_path(operations: Iterable[PatchOperation]) -> list[PatchOperation]:
    return sorted(operations, key=lambda operation: operation.path)


class PatchOperations(list):
    """An ordered list of patch operations."""

    def to_json(self) -> str:
        """Render the operations as a JSON array."""
        return _dumps([operation.to_dict() for operation in self])

    def equal(self, ops: Iterable[PatchOperation]) -> bool:
        """Compare with other operations, ignoring their order."""
        return _by_path(self) == _by_path(ops)


def escape_json_pointer(path: str) -> str:
    """Escape a key for use inside a JSON pointer (RFC 6901)."""
    return path.replace("~", "~0").replace("/", "~1")


def diff_string_map(
    path_prefix: str, old: Mapping[str, Any], new: Mapping[str, Any]
) -> PatchOperations:
    """Build the operations that turn ``old`` into ``new`` under ``path_prefix``.

    Keys are touched one at a time so entries managed elsewhere are left alone;
    only an empty ``old`` map is replaced wholesale.
    """
    prefix = path_prefix.rstrip("/")
    if not old:
        return PatchOperations([AddOperation(path=prefix, value=dict(new))])

    ops = PatchOperations()
    ops.extend(
        RemoveOperation(path=f"{prefix}/{escape_json_pointer(key)}")
        for key in old
        if key not in new
    )

    for key, new_value in new.items():
        if not isinstance(new_value, str):
            raise TypeError(f"value for {key!r} must be a string, got {new_value!r}")
        path = f"{prefix}/{escape_json_pointer(key)}"
        old_value = old.get(key)
        if isinstance(old_value, str):
            if old_value != new_value:
                ops.append(ReplaceOperation(path=path, value=new_value))
        else:
            ops.append(AddOperation(path=path, value=new_value))
    return ops