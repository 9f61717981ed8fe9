"""Schema value validators.

Each validator takes a value and the attribute key and returns a
:class:`ValidationResult` of warnings and error messages.
"""

from __future__ import annotations

import base64
import binascii
import json
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any, NamedTuple

from kvtfutils.k8s_validation import (
    is_qualified_name,
    is_valid_label_value,
    is_valid_port_name,
    is_valid_port_num,
    name_is_dns_label,
    name_is_dns_subdomain,
)
from kvtfutils.quantity import QuantityError, parse_quantity


class ValidationResult(NamedTuple):
    """Warnings and errors produced by a validator."""

    warnings: list[str]
    errors: list[str]


Validator = Callable[[Any, str], ValidationResult]

_DIGITS = {10: re.compile(r"[+-]?[0-9]+"), 8: re.compile(r"[+-]?[0-7]+")}


class _ParseIntError(ValueError):
    def __init__(self, message: str, clamped: int) -> None:
        super().__init__(message)
        self.clamped = clamped


def _quote(text: Any) -> str:
    if isinstance(text, str):
        return json.dumps(text, ensure_ascii=False)
    return _go_repr(text)


def _go_repr(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _quote(value)
    return repr(value)


def _octal(value: int) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    return f"{sign}0{abs(value):o}"


def _parse_int(text: str, base: int, bits: int, func: str = "ParseInt") -> int:
    """Parse an integer with the given base and bit size, clamping on overflow."""
    if not _DIGITS[base].fullmatch(text):
        raise _ParseIntError(f"strconv.{func}: parsing {_quote(text)}: invalid syntax", 0)
    value = int(text, base)
    high = 2 ** (bits - 1) - 1
    low = -(2 ** (bits - 1))
    if value > high or value < low:
        clamped = high if value > high else low
        raise _ParseIntError(f"strconv.{func}: parsing {_quote(text)}: value out of range", clamped)
    return value


def _atoi(text: str) -> int:
    return _parse_int(text, 10, 64, "Atoi")


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


def _require_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def _require_mapping(value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"expected a map, got {value!r}")
    return value


def _result(errors: list[str] | None = None) -> ValidationResult:
    return ValidationResult([], errors or [])


def validate_annotations(value: Any, key: str) -> ValidationResult:
    """Check that every annotation key is a qualified name (case-insensitive)."""
    errors = [
        f"{key} ({_quote(k)}) {msg}"
        for k in _require_mapping(value)
        for msg in is_qualified_name(k.lower())
    ]
    return _result(errors)


def validate_base64_encoded(value: Any, key: str) -> ValidationResult:
    """Check that the value is a base64-encoded string."""
    if not isinstance(value, str):
        return _result([f"{key}: must be a non-nil base64-encoded string"])
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return _result([f"{key}: must be a base64-encoded string"])
    return _result()


def validate_base64_encoded_map(value: Any, key: str) -> ValidationResult:
    """Check that the value maps strings to base64-encoded strings."""
    if not isinstance(value, Mapping):
        return _result([f"{key}: must be a map of strings to base64 encoded strings"])
    errors = [
        f"{k} ({_quote(v)}) {error}"
        for k, v in value.items()
        for error in validate_base64_encoded(v, k).errors
    ]
    return _result(errors)


def validate_name(value: Any, key: str) -> ValidationResult:
    """Check an object name against DNS subdomain rules."""
    return _result([f"{key} {err}" for err in name_is_dns_subdomain(_require_str(value), False)])


def validate_generate_name(value: Any, key: str) -> ValidationResult:
    """Check a generated-name prefix against DNS label rules."""
    return _result([f"{key} {err}" for err in name_is_dns_label(_require_str(value), True)])


def validate_labels(value: Any, key: str) -> ValidationResult:
    """Check label keys and values; stops at the first non-string value."""
    errors: list[str] = []
    for k, v in _require_mapping(value).items():
        errors.extend(f"{key} ({_quote(k)}) {msg}" for msg in is_qualified_name(k))
        if not isinstance(v, str):
            errors.append(f"{key}.{k} ({_go_repr(v)}): Expected value to be string")
            break
        errors.extend(f"{key} ({_quote(v)}) {msg}" for msg in is_valid_label_value(v))
    return _result(errors)


def validate_port_num(value: Any, key: str) -> ValidationResult:
    """Check that the value is a valid port number."""
    return _result([f"{key} {err}" for err in is_valid_port_num(_require_int(value))])


def validate_port_name(value: Any, key: str) -> ValidationResult:
    """Check that the value is a valid port name."""
    return _result([f"{key} {err}" for err in is_valid_port_name(_require_str(value))])


def validate_port_num_or_name(value: Any, key: str) -> ValidationResult:
    """Check a port given as a number, a numeric string or a name."""
    if isinstance(value, str):
        try:
            number = _atoi(value)
        except ValueError:
            return validate_port_name(value, key)
        return validate_port_num(number, key)
    if isinstance(value, int) and not isinstance(value, bool):
        return validate_port_num(value, key)
    return _result([f"{key} must be defined of type string or int on the schema"])


def validate_resource_list(value: Any, key: str) -> ValidationResult:
    """Check that every entry is an int or a parsable quantity string."""
    errors: list[str] = []
    for k, v in _require_mapping(value).items():
        if isinstance(v, int) and not isinstance(v, bool):
            continue
        if isinstance(v, str):
            try:
                parse_quantity(v)
            except QuantityError as err:
                errors.append(f"{key}.{k} ({_quote(v)}): {err}")
            continue
        errors.append(f"{key}.{k} ({_go_repr(v)}): Value can be either string or int")
    return _result(errors)


def validate_resource_quantity(value: Any, key: str) -> ValidationResult:
    """Check that a string value parses as a quantity; other types pass."""
    if isinstance(value, str):
        try:
            parse_quantity(value)
        except QuantityError as err:
            return _result([f"{key}.{value} : {err}"])
    return _result()


def validate_non_negative_integer(value: Any, key: str) -> ValidationResult:
    """Check that the integer is at least zero."""
    if _require_int(value) < 0:
        return _result([f"{key} must be greater than or equal to 0"])
    return _result()


def validate_positive_integer(value: Any, key: str) -> ValidationResult:
    """Check that the integer is above zero."""
    if _require_int(value) <= 0:
        return _result([f"{key} must be greater than 0"])
    return _result()


def validate_termination_grace_period_seconds(value: Any, key: str) -> ValidationResult:
    """Check that the grace period is not negative."""
    return validate_non_negative_integer(value, key)


def validate_int_greater_than(min_value: int) -> Validator:
    """Build a validator requiring an integer of at least ``min_value``."""

    def validate(value: Any, key: str) -> ValidationResult:
        if _require_int(value) < min_value:
            return _result([f"{key} must be greater than or equal to {min_value}"])
        return _result()

    return validate


def validate_type_string_nullable_int(value: Any, key: str) -> ValidationResult:
    """Check a string holding an int, or empty for unset."""
    if not isinstance(value, str):
        return _result([f"expected type of {key} to be string"])
    if value == "":
        return _result()
    try:
        _parse_int(value, 10, 64)
    except _ParseIntError as err:
        return _result([f"{key}: cannot parse '{value}' as int: {err}"])
    return _result()


def validate_mode_bits(value: Any, key: str) -> ValidationResult:
    """Check an octal file mode between 0 and 0777 written with a leading zero."""
    text = _require_str(value)
    errors: list[str] = []
    if not text.startswith("0"):
        errors.append(f"{key}: value {text} should start with '0' (octal numeral)")
    try:
        mode = _parse_int(text, 8, 32)
    except _ParseIntError as err:
        errors.append(f"{key} :Cannot parse octal numeral ({_quote(text)}): {err}")
        mode = err.clamped
    if mode < 0 or mode > 0o777:
        errors.append(f"{key} ({_octal(mode)}) expects octal notation (a value between 0 and 0777)")
    return _result(errors)


def validate_attribute_value_does_not_contain(search: str) -> Validator:
    """Build a validator rejecting strings that contain ``search``."""

    def validate(value: Any, key: str) -> ValidationResult:
        if search in _require_str(value):
            return _result([f"{_quote(key)} must not contain {_quote(search)}"])
        return _result()

    return validate


def validate_attribute_value_is_in(valid_values: Sequence[str]) -> Validator:
    """Build a validator accepting only one of ``valid_values``."""
    allowed = list(valid_values)
    listing = "[]string{" + ", ".join(_quote(v) for v in allowed) + "}"

    def validate(value: Any, key: str) -> ValidationResult:
        text = _require_str(value)
        if text not in allowed:
            return _result([f"{_quote(key)} must contain a value from {listing}, got {_quote(text)}"])
        return _result()

    return validate


def validate_type_string_nullable_int_or_percent(value: Any, key: str) -> ValidationResult:
    """Check a string holding an int, a percentage below 100%, or empty."""
    if not isinstance(value, str):
        return _result([f"expected type of {key} to be string"])
    if value == "":
        return _result()
    errors: list[str] = []
    if value.endswith("%"):
        try:
            percent = _parse_int(value[:-1], 10, 32)
        except _ParseIntError as err:
            errors.append(f"{key}: cannot parse '{value}' as percent: {err}")
            percent = err.clamped
        if percent < 0 or percent >= 100:
            errors.append(f"{key}: '{value}' is not between 0% and 100%")
    else:
        try:
            _parse_int(value, 10, 32)
        except _ParseIntError as err:
            errors.append(f"{key}: cannot parse '{value}' as int or percent: {err}")
    return _result(errors)


def string_is_int_in_range(minimum: int, maximum: int) -> Validator:
    """Build a validator for a string holding an int within an inclusive range."""

    def validate(value: Any, key: str) -> ValidationResult:
        if not isinstance(value, str):
            return _result([f"expected type of {key} to be string"])
        try:
            number = _atoi(value)
        except ValueError:
            return _result([f"expected {key} to string representation of integer"])
        if number < minimum or number > maximum:
            return _result([f"expected {key} to be between {minimum} and {maximum} inclusive"])
        return _result()

    return validate