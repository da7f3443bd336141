"""
Memory size formatter: byte counts to human-readable strings.

Examples:
    >>> fmt = Formatter()
    >>> fmt.format(1234)
    '1.21 KiB'
    >>> fmt.format(4707319808, {"standard": "jedec"})
    '4.38 GB'
    >>> fmt.format(1048576, min_decimals=1)
    '1.0 MiB'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os
from collections.abc import Mapping
from fractions import Fraction
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .config import load_options
from .number_format import round_half_up
from .options import FormatterOptions


# Classes --------------------------------------------------------------------------------------------------------------

class Formatter:
    """
    Format byte counts as '<number><unit_separator><unit>' strings.

    Holds a base FormatterOptions. Per-call overrides are merged onto a transient copy
    and never change the base options; set_options() and the live `options` object do.

    Args:
        options: FormatterOptions instance to adopt as base options, or a mapping of option keys
                 applied over the defaults.
        **kwargs: Option keys applied after `options`.

    Raises:
        InvalidOptionError: On unknown option keys or invalid option values.
    """

    def __init__(self, options: FormatterOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        if isinstance(options, FormatterOptions):
            self._options = options
        else:
            self._options = FormatterOptions(options)
        if kwargs:
            self._options.update(kwargs)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str], table: str | None = "memsize") -> Self:
        """Create a Formatter with base options loaded from a TOML file, see config.load_options()."""
        return cls(load_options(path, table=table))

    @property
    def options(self) -> FormatterOptions:
        """The live base options; changes to it affect subsequent format() calls."""
        return self._options

    def get_options(self) -> FormatterOptions:
        return self._options

    def set_options(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> Self:
        """Update base options in place and return self."""
        if options is not None:
            self._options.update(options)
        if kwargs:
            self._options.update(kwargs)
        return self

    def format(self, byte_count: int, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> str:
        """
        Format a byte count with the base options, optionally overridden for this call.

        The largest unit whose threshold does not exceed |byte_count| is selected, the count is
        divided exactly, rounded half up to max_decimals, and trailing zeros are trimmed down
        to min_decimals. fixed_decimals forces both limits for this call.

        Args:
            byte_count: Number of bytes; negative counts are prefixed with '-'.
            overrides: Mapping of option keys for this call only.
            **kwargs: Option keys for this call only, applied after `overrides`.

        Returns:
            Formatted size, e.g. '1.21 KiB'.

        Raises:
            InvalidOptionError: On unknown override keys or invalid override values.

        Examples:
            >>> Formatter().format(1536)
            '1.5 KiB'
            >>> Formatter().format(-1234)
            '-1.21 KiB'
            >>> Formatter().format(1610612736, fixed_decimals=0)
            '2 GiB'
        """
        opts = self._options
        if overrides or kwargs:
            opts = opts.merge(overrides)
            if kwargs:
                opts.update(kwargs)

        sign = "-" if byte_count < 0 else ""
        magnitude = abs(byte_count)

        unit = opts.standard.unit_for(magnitude)
        scaled = _exact(magnitude) / unit.divisor

        min_decimals, max_decimals = opts.effective_decimals()
        decimals = _trimmed_decimals(scaled, min_decimals, max_decimals)

        number = opts.number_format.render(scaled, decimals)
        return f"{sign}{number}{opts.unit_separator}{unit.label}"

    __call__ = format

    def __repr__(self) -> str:
        return f"Formatter({self._options!r})"


# Methods --------------------------------------------------------------------------------------------------------------

_default_formatter = Formatter()


def format_size(byte_count: int, options: Mapping[str, Any] | None = None, **kwargs: Any) -> str:
    """
    Format a byte count with default options, optionally overridden.

    Examples:
        >>> format_size(65536)
        '64 KiB'
        >>> format_size(1500000, standard="si")
        '1.5 MB'
    """
    return _default_formatter.format(byte_count, options, **kwargs)


# Private Methods ------------------------------------------------------------------------------------------------------

def _exact(value: int | float) -> Fraction:
    if isinstance(value, float):
        return Fraction(repr(value))
    return Fraction(value)


def _trimmed_decimals(value: Fraction, min_decimals: int, max_decimals: int) -> int:
    """
    Count of fractional digits after rounding at max_decimals and dropping trailing zeros.

    Never fewer than min_decimals.

    Examples:
        >>> _trimmed_decimals(Fraction(64), 0, 2)
        0
        >>> _trimmed_decimals(Fraction(3, 2), 0, 2)
        1
        >>> _trimmed_decimals(Fraction(3, 2), 2, 2)
        2
    """
    steps = round_half_up(value, max_decimals)
    decimals = max_decimals
    while decimals > min_decimals and steps % 10 == 0:
        steps //= 10
        decimals -= 1
    return decimals
