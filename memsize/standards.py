"""
Unit standards for memory sizes.

A Standard is an ordered table of magnitude units (B, KiB, MiB, ...). Formatter picks the
largest unit whose threshold does not exceed the byte count.

Built-in standards:
    IEC:   binary divisors with binary names   - B, KiB, MiB, GiB, TiB, PiB, EiB, ZiB, YiB
    JEDEC: binary divisors with decimal names  - B, KB, MB, GB (GB is the largest unit)
    SI:    decimal divisors with decimal names - B, kB, MB, GB, TB, PB, EB, ZB, YB

New standards subclass Standard and implement units(), or use CustomStandard with a unit table.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import InvalidOptionError
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Unit:
    """
    Magnitude unit of a Standard.

    Attributes:
        label: Unit label as displayed, e.g. 'KiB'.
        divisor: Byte count of one unit, e.g. 1024 for KiB.
        threshold: Smallest byte count shown in this unit; the base unit has threshold 0.
    """
    label: str
    divisor: int
    threshold: int

    def __post_init__(self):
        if not isinstance(self.label, str):
            raise TypeError(f"unit label must be str, got {fmt_type(self.label)}")
        for name in ("divisor", "threshold"):
            val = getattr(self, name)
            if not isinstance(val, int) or isinstance(val, bool):
                raise TypeError(f"Unit.{name} must be an int, got {fmt_type(val)}")
        if self.divisor < 1:
            raise ValueError(f"Unit.divisor must be >= 1, but got {fmt_value(self.divisor)}")
        if self.threshold < 0:
            raise ValueError(f"Unit.threshold must be >= 0, but got {fmt_value(self.threshold)}")


class Standard(ABC):
    """
    Ordered table of magnitude units for memory sizes.

    Subclasses implement units(); the table must start with a base unit (divisor 1,
    threshold 0) and have strictly increasing thresholds.
    """

    name: str = ""

    @abstractmethod
    def units(self) -> tuple[Unit, ...]:
        """Units ordered ascending by threshold."""
        raise NotImplementedError

    def unit_for(self, magnitude: int | float) -> Unit:
        """
        Select the largest unit whose threshold is <= magnitude.

        Zero selects the base unit; at an exact threshold the larger unit wins.
        Magnitudes above the largest unit stay in the largest unit.

        Examples:
            >>> IEC().unit_for(1048575).label
            'KiB'
            >>> IEC().unit_for(1048576).label
            'MiB'
            >>> JEDEC().unit_for(1024 ** 5).label
            'GB'
        """
        units = self.units()
        selected = units[0]
        for unit in units[1:]:
            if unit.threshold > magnitude:
                break
            selected = unit
        return selected

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(unit.label for unit in self.units())

    @staticmethod
    def validate_units(units: Sequence[Unit]) -> None:
        """
        Check unit table invariants.

        Raises:
            ValueError: If the table is empty, does not start with a base unit,
                        or thresholds are not strictly increasing.
        """
        if not units:
            raise ValueError("unit table must not be empty")

        base = units[0]
        if base.threshold != 0 or base.divisor != 1:
            raise ValueError(f"first unit must have divisor 1 and threshold 0, but got {fmt_value(base)}")

        for prev, unit in zip(units, units[1:]):
            if unit.threshold <= prev.threshold:
                raise ValueError(f"unit thresholds must be strictly increasing, "
                                 f"but {unit.label!r} follows {prev.label!r}")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Standard):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name and self.units() == other.units()

    def __hash__(self) -> int:
        return hash((type(self), self.name, self.units()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IEC(Standard):
    """IEC 80000-13 binary units: 1 KiB = 1024 B."""

    name = "iec"

    def units(self) -> tuple[Unit, ...]:
        return _IEC_UNITS


class JEDEC(Standard):
    """JEDEC memory units: binary divisors named KB, MB, GB; GB is the largest unit."""

    name = "jedec"

    def units(self) -> tuple[Unit, ...]:
        return _JEDEC_UNITS


class SI(Standard):
    """SI decimal units: 1 kB = 1000 B."""

    name = "si"

    def units(self) -> tuple[Unit, ...]:
        return _SI_UNITS


class CustomStandard(Standard):
    """
    Standard built from a user supplied unit table.

    Units are given as Unit objects or (label, divisor) / (label, divisor, threshold) tuples.
    A missing threshold defaults to the divisor, or 0 for the base unit.

    Examples:
        >>> std = CustomStandard([("B", 1), ("KiB", 1024), ("MiB", 1024 ** 2)], name="small")
        >>> std.unit_for(5 * 1024 ** 3).label
        'MiB'
    """

    def __init__(self, units: Iterable[Unit | Sequence[Any]], name: str = "custom") -> None:
        table = tuple(_to_unit(u) for u in units)
        self.validate_units(table)
        self._units = table
        self.name = name

    def units(self) -> tuple[Unit, ...]:
        return self._units

    def __repr__(self) -> str:
        return f"CustomStandard({list(self.labels)!r}, name={self.name!r})"


# Methods --------------------------------------------------------------------------------------------------------------

def power_units(base: int, labels: Sequence[str]) -> tuple[Unit, ...]:
    """
    Build a unit table where unit n has divisor and threshold base**n.

    The first label is the base unit with threshold 0.

    Examples:
        >>> [u.divisor for u in power_units(1024, ["B", "KiB", "MiB"])]
        [1, 1024, 1048576]
    """
    return tuple(
        Unit(label, base ** n, base ** n if n else 0)
        for n, label in enumerate(labels)
    )


def get_standard(name: "str | Standard | type[Standard]") -> Standard:
    """
    Resolve a standard from a registry name, a Standard subclass, or an instance.

    Names are case-insensitive: 'iec', 'jedec', 'si'.

    Raises:
        InvalidOptionError: If the name is not registered or the value is not a standard.
    """
    if isinstance(name, Standard):
        return name

    if isinstance(name, type) and issubclass(name, Standard):
        return name()

    if isinstance(name, str):
        try:
            return STANDARDS[name.strip().lower()]()
        except KeyError:
            raise InvalidOptionError.invalid("standard", name, f"one of {sorted(STANDARDS)}") from None

    raise InvalidOptionError.invalid("standard", name, "Standard instance, subclass or name")


def _to_unit(item: Unit | Sequence[Any]) -> Unit:
    if isinstance(item, Unit):
        return item

    if isinstance(item, Sequence) and not isinstance(item, str) and len(item) in (2, 3):
        label, divisor, *rest = item
        threshold = rest[0] if rest else (0 if divisor == 1 else divisor)
        return Unit(label, divisor, threshold)

    raise TypeError(f"unit must be Unit or (label, divisor[, threshold]) tuple, got {fmt_value(item)}")


# @formatter:off

_IEC_UNITS = power_units(1024, ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"])
_JEDEC_UNITS = power_units(1024, ["B", "KB", "MB", "GB"])
_SI_UNITS = power_units(1000, ["B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"])

STANDARDS: dict[str, type[Standard]] = {
    "iec": IEC,
    "jedec": JEDEC,
    "si": SI,
}

# @formatter:on

# Module Sanity Checks -------------------------------------------------------------------------------------------------

for _units in (_IEC_UNITS, _JEDEC_UNITS, _SI_UNITS):
    Standard.validate_units(_units)
