"""
MemSize exceptions.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class InvalidOptionError(ValueError):
    """
    Raised when a formatter option key is unknown or its value is rejected.

    The offending key is always named in the message and kept in the `key` attribute.

    Examples:
        >>> raise InvalidOptionError.unknown("unknownOption")
        InvalidOptionError: Unknown memory-size formatter option "unknownOption"
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key

    @classmethod
    def unknown(cls, key: Any) -> "InvalidOptionError":
        return cls(f'Unknown memory-size formatter option "{key}"', key=key)

    @classmethod
    def invalid(cls, key: str, value: Any, expected: str) -> "InvalidOptionError":
        return cls(f'Invalid memory-size formatter option "{key}": expected {expected}, '
                   f'but found {fmt_value(value)}', key=key)
