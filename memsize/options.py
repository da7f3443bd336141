"""
Formatter configuration.

FormatterOptions aggregates the standard, decimal precision, number punctuation and unit separator
used by Formatter. Options are set from a mapping with a strict allow-list of keys, or through
validating properties; merge() layers per-call overrides over a copy.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import copy
from collections.abc import Mapping
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import InvalidOptionError
from .number_format import NumberFormat
from .standards import IEC, Standard, get_standard
from .utils import fmt_type

# @formatter:off

OPTION_KEYS = (
    "standard",
    "min_decimals",
    "max_decimals",
    "number_format",
    "unit_separator",
    "fixed_decimals",
)

DEFAULT_MIN_DECIMALS = 0
DEFAULT_MAX_DECIMALS = 2
DEFAULT_UNIT_SEPARATOR = " "

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------


class FormatterOptions:
    """
    Mutable configuration of a Formatter.

    Attributes:
        standard: Unit table, IEC by default. Accepts a Standard instance, subclass, or name ('iec', 'jedec', 'si').
        min_decimals: Minimum fractional digits; trailing zeros are kept down to this count. Default 0.
        max_decimals: Maximum fractional digits after rounding. Default 2.
        number_format: NumberFormat, or a mapping of its keys applied over the current one.
        unit_separator: String between number and unit label. Default ' '.
        fixed_decimals: Write-only shorthand accepted by update(); sets min_decimals and max_decimals
            to the same count and is not kept itself. None is ignored.

    max_decimals >= min_decimals is not enforced; when min_decimals is larger it wins.

    Examples:
        >>> opts = FormatterOptions({"standard": "jedec", "max_decimals": 1})
        >>> opts.merge({"number_format": {"decimal_point": ","}}).number_format.decimal_point
        ','
        >>> opts.number_format.decimal_point
        '.'
    """

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self._standard: Standard = IEC()
        self._min_decimals: int = DEFAULT_MIN_DECIMALS
        self._max_decimals: int = DEFAULT_MAX_DECIMALS
        self._number_format: NumberFormat = NumberFormat()
        self._unit_separator: str = DEFAULT_UNIT_SEPARATOR

        if options is not None:
            self.update(options)
        if kwargs:
            self.update(kwargs)

    # ----- Bulk configuration -----

    def update(self, options: Mapping[str, Any]) -> Self:
        """
        Set options from a mapping in place and return self.

        All keys are checked against the allow-list before any option changes, and values are
        staged on a copy, so a failed update leaves the options untouched.

        Raises:
            InvalidOptionError: On the first unknown key, or on the first invalid value.
        """
        if not isinstance(options, Mapping):
            raise InvalidOptionError(f"formatter options must be a mapping, got {fmt_type(options)}")

        for key in options:
            if key not in OPTION_KEYS:
                raise InvalidOptionError.unknown(key)

        staged = self.copy()
        for key, value in options.items():
            if key != "fixed_decimals":
                setattr(staged, key, value)
        # fixed_decimals wins over min/max given in the same mapping
        staged.fix_decimals(options.get("fixed_decimals"))

        self.__dict__.update(staged.__dict__)
        return self

    def merge(self, overrides: Mapping[str, Any] | None = None) -> "FormatterOptions":
        """
        Return a new options snapshot with overrides applied over a shallow copy.

        Overrides go through the same validation as update(); this instance is never mutated.
        """
        merged = self.copy()
        if overrides:
            merged.update(overrides)
        return merged

    def copy(self) -> "FormatterOptions":
        """Shallow copy; the NumberFormat and Standard objects are shared."""
        return copy.copy(self)

    def to_dict(self) -> dict[str, Any]:
        """Options as a plain dict, number_format nested as a dict."""
        return {
            "standard": self._standard,
            "min_decimals": self._min_decimals,
            "max_decimals": self._max_decimals,
            "number_format": {
                "decimal_point": self._number_format.decimal_point,
                "thousands_separator": self._number_format.thousands_separator,
            },
            "unit_separator": self._unit_separator,
        }

    def effective_decimals(self) -> tuple[int, int]:
        """The (min, max) fractional digits to format with; max is raised to min if below it."""
        return self._min_decimals, max(self._max_decimals, self._min_decimals)

    def fix_decimals(self, value: int | None) -> Self:
        """Set min_decimals and max_decimals to the same count and return self; None leaves both as they are."""
        if value is not None:
            self._min_decimals = self._max_decimals = _validate_decimals("fixed_decimals", value)
        return self

    # ----- Properties -----

    @property
    def standard(self) -> Standard:
        return self._standard

    @standard.setter
    def standard(self, value: "Standard | type[Standard] | str") -> None:
        self._standard = get_standard(value)

    @property
    def min_decimals(self) -> int:
        return self._min_decimals

    @min_decimals.setter
    def min_decimals(self, value: int) -> None:
        self._min_decimals = _validate_decimals("min_decimals", value)

    @property
    def max_decimals(self) -> int:
        return self._max_decimals

    @max_decimals.setter
    def max_decimals(self, value: int) -> None:
        self._max_decimals = _validate_decimals("max_decimals", value)

    @property
    def number_format(self) -> NumberFormat:
        return self._number_format

    @number_format.setter
    def number_format(self, value: NumberFormat | Mapping[str, Any]) -> None:
        # A mapping never mutates the current NumberFormat, it may be shared with a merged copy
        if isinstance(value, NumberFormat):
            self._number_format = value
        elif isinstance(value, Mapping):
            self._number_format = self._number_format.merge(value)
        else:
            raise InvalidOptionError.invalid("number_format", value, "NumberFormat or mapping")

    @property
    def unit_separator(self) -> str:
        return self._unit_separator

    @unit_separator.setter
    def unit_separator(self, value: str) -> None:
        if not isinstance(value, str):
            raise InvalidOptionError.invalid("unit_separator", value, "str")
        self._unit_separator = value

    # ----- Equality and representation -----

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FormatterOptions):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"FormatterOptions({args})"


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_decimals(key: str, value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidOptionError.invalid(key, value, "int >= 0")
    return value
