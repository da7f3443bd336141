"""
Number punctuation for memory size display.

NumberFormat renders a non-negative number with a fixed count of fractional digits,
a configurable decimal point and an optional thousands separator.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from decimal import Decimal
from fractions import Fraction
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import InvalidOptionError
from .utils import fmt_type, fmt_value

# @formatter:off

NUMBER_FORMAT_KEYS = ("decimal_point", "thousands_separator")

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------


@dataclass
class NumberFormat:
    """
    Decimal point and thousands separator used to render numbers.

    Attributes:
        decimal_point: Character placed between the integer and fractional parts.
        thousands_separator: Inserted every 3 digits of the integer part; empty string disables grouping.

    Both attributes are plain strings; equal values are allowed and not validated.

    Examples:
        >>> NumberFormat().render(4384.0283, 2)
        '4384.03'
        >>> NumberFormat(decimal_point=",", thousands_separator=" ").render(4384.0283, 2)
        '4 384,03'
    """
    decimal_point: str = "."
    thousands_separator: str = ""

    def __post_init__(self):
        for f in fields(self):
            _validate_str(f.name, getattr(self, f.name))

    def copy(self) -> "NumberFormat":
        return replace(self)

    def update(self, options: Mapping[str, Any]) -> Self:
        """
        Set attributes from a mapping of number format options in place.

        Every key is checked before any attribute changes.

        Raises:
            InvalidOptionError: If a key is not one of decimal_point, thousands_separator,
                                or if a value is not a str.
        """
        if not isinstance(options, Mapping):
            raise InvalidOptionError.invalid("number_format", options, "NumberFormat or mapping")

        for key in options:
            if key not in NUMBER_FORMAT_KEYS:
                raise InvalidOptionError.unknown(key)

        for key, value in options.items():
            _validate_str(key, value)

        for key, value in options.items():
            setattr(self, key, value)
        return self

    def merge(self, options: Mapping[str, Any]) -> "NumberFormat":
        """Return a new NumberFormat with options applied over a copy of this one."""
        return self.copy().update(options)

    def render(self, value: int | float | Decimal | Fraction, decimals: int) -> str:
        """
        Render the magnitude of a number with exactly `decimals` fractional digits.

        Rounds half up on the exact value, so ties go away from zero. The sign of
        `value` is dropped: prefixing "-" is up to the caller.

        Args:
            value: Number to render; floats are read at their shortest repr, so 1.005 is treated as exactly 1.005.
            decimals: Count of digits after the decimal point, >= 0.

        Returns:
            Rendered string, e.g. '1,234.50' for decimal_point='.' and thousands_separator=','.

        Raises:
            TypeError: If value is not int | float | Decimal | Fraction, or decimals is not int.
            ValueError: If value is NaN or infinite, or decimals < 0.
        """
        steps = round_half_up(abs(_as_fraction(value)), decimals)
        digits = str(steps)

        if decimals == 0:
            return self._group(digits)

        digits = digits.rjust(decimals + 1, "0")
        return f"{self._group(digits[:-decimals])}{self.decimal_point}{digits[-decimals:]}"

    def _group(self, digits: str) -> str:
        """Insert thousands separator into a string of integer digits."""
        if not self.thousands_separator or len(digits) <= 3:
            return digits

        head = len(digits) % 3 or 3
        groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
        return self.thousands_separator.join(groups)


# Methods --------------------------------------------------------------------------------------------------------------

def round_half_up(value: int | float | Decimal | Fraction, decimals: int) -> int:
    """
    Round a non-negative number to a whole count of 10**-decimals steps.

    The rounding is exact (rational arithmetic) and ties round up.

    Examples:
        >>> round_half_up(1.205078125, 2)
        121
        >>> round_half_up(1.5, 0)
        2
        >>> round_half_up(2.5, 0)
        3

    Raises:
        TypeError: If value is not numeric or decimals is not int.
        ValueError: If value is negative, NaN or infinite, or decimals < 0.
    """
    if not isinstance(decimals, int) or isinstance(decimals, bool):
        raise TypeError(f"decimals must be int, got {fmt_type(decimals)}")
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")

    exact = _as_fraction(value)
    if exact < 0:
        raise ValueError(f"value must be non-negative, got {fmt_value(value)}")

    return math.floor(exact * 10 ** decimals + Fraction(1, 2))


# Private Methods ------------------------------------------------------------------------------------------------------

def _as_fraction(value: int | float | Decimal | Fraction) -> Fraction:
    """Convert a supported number to an exact Fraction."""
    if isinstance(value, bool):
        raise TypeError(f"value must be int | float | Decimal | Fraction, got {fmt_type(value)}")

    if isinstance(value, Fraction):
        return value

    if isinstance(value, int):
        return Fraction(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"value cannot be NaN or infinite, got {value}")
        # Shortest repr, so that 1.005 is not read as 1.00499999999999989...
        return Fraction(repr(value))

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"value cannot be NaN or infinite, got {value}")
        return Fraction(value)

    raise TypeError(f"value must be int | float | Decimal | Fraction, got {fmt_type(value)}")


def _validate_str(key: str, value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidOptionError.invalid(key, value, "str")
