"""Resource quantities: parsing and canonical rendering of values such as ``10Gi`` or ``500m``."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from fractions import Fraction

_FORMAT_MESSAGE = (
    "quantities must match the regular expression "
    "'^([+-]?[0-9.]+)([eEinumkKMGTP]*[-+]?[0-9]*)$'"
)
_SUFFIX_MESSAGE = "unable to parse quantity's suffix"

_BINARY_SUFFIXES = {"Ki": 10, "Mi": 20, "Gi": 30, "Ti": 40, "Pi": 50, "Ei": 60}
_DECIMAL_SUFFIXES = {
    "n": -9, "u": -6, "m": -3, "": 0, "k": 3, "M": 6, "G": 9, "T": 12, "P": 15, "E": 18,
}
_BINARY_BY_SHIFT = {shift: suffix for suffix, shift in _BINARY_SUFFIXES.items()}
_BINARY_BY_SHIFT[0] = ""
_DECIMAL_BY_EXPONENT = {exp: suffix for suffix, exp in _DECIMAL_SUFFIXES.items()}

_NUMBER = re.compile(r"([+-]?)(\d*)(?:\.(\d*))?")
_EXPONENT = re.compile(r"[eE]([+-]?\d+)")

_MAX_BINARY_SHIFT = 60
_MAX_DECIMAL_EXPONENT = 18
_NANO = 10**9


class QuantityError(ValueError):
    """Raised when a quantity string cannot be parsed."""


class QuantityFormat(enum.Enum):
    """How a quantity prefers to be rendered."""

    DECIMAL_EXPONENT = "DecimalExponent"
    BINARY_SI = "BinarySI"
    DECIMAL_SI = "DecimalSI"


def _round_away_from_zero(value: Fraction) -> int:
    if value.denominator == 1:
        return value.numerator
    magnitude = math.ceil(abs(value))
    return magnitude if value > 0 else -magnitude


def _round_up_to_nano(value: Fraction) -> Fraction:
    return Fraction(_round_away_from_zero(value * _NANO), _NANO)


@dataclass(frozen=True)
class Quantity:
    """An exact amount together with its preferred rendering format."""

    value: Fraction
    format: QuantityFormat = QuantityFormat.DECIMAL_SI

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", Fraction(self.value))

    def canonical(self) -> str:
        """Return the shortest canonical text for this quantity."""
        value = self.value
        if (
            self.format is QuantityFormat.BINARY_SI
            and value.denominator == 1
            and abs(value) >= 1024
        ):
            number = value.numerator
            shift = 0
            while shift < _MAX_BINARY_SHIFT and number % 1024 == 0:
                number //= 1024
                shift += 10
            return f"{number}{_BINARY_BY_SHIFT[shift]}"

        scaled = _round_away_from_zero(value * _NANO)
        if scaled == 0:
            return "0"
        exponent = -9
        while scaled % 10 == 0:
            scaled //= 10
            exponent += 1
        remainder = exponent % 3
        scaled *= 10**remainder
        exponent -= remainder

        if self.format is QuantityFormat.DECIMAL_EXPONENT:
            suffix = f"e{exponent}" if exponent else ""
        else:
            if exponent > _MAX_DECIMAL_EXPONENT:
                scaled *= 10 ** (exponent - _MAX_DECIMAL_EXPONENT)
                exponent = _MAX_DECIMAL_EXPONENT
            suffix = _DECIMAL_BY_EXPONENT[exponent]
        return f"{scaled}{suffix}"

    def __str__(self) -> str:
        return self.canonical()


def parse_quantity(text: str) -> Quantity:
    """Parse a quantity such as ``10Gi``, ``20G``, ``500m`` or ``2e3``."""
    if not isinstance(text, str) or not text:
        raise QuantityError(_FORMAT_MESSAGE)
    match = _NUMBER.match(text)
    sign, whole, fraction = match.group(1), match.group(2), match.group(3) or ""
    if not whole and not fraction:
        raise QuantityError(_FORMAT_MESSAGE)

    number = Fraction(int(whole or "0"))
    if fraction:
        number += Fraction(int(fraction), 10 ** len(fraction))
    if sign == "-":
        number = -number

    suffix = text[match.end():]
    if suffix in _BINARY_SUFFIXES:
        value = number * 2 ** _BINARY_SUFFIXES[suffix]
        fmt = QuantityFormat.BINARY_SI
    elif suffix in _DECIMAL_SUFFIXES:
        value = number * Fraction(10) ** _DECIMAL_SUFFIXES[suffix]
        fmt = QuantityFormat.DECIMAL_SI
    else:
        exponent = _EXPONENT.fullmatch(suffix)
        if exponent is None:
            raise QuantityError(_SUFFIX_MESSAGE)
        value = number * Fraction(10) ** int(exponent.group(1))
        fmt = QuantityFormat.DECIMAL_EXPONENT

    return Quantity(_round_up_to_nano(value), fmt)


def new_quantity(value: int) -> Quantity:
    """Build an integer quantity rendered in decimal-exponent form."""
    return Quantity(Fraction(value), QuantityFormat.DECIMAL_EXPONENT)