"""
MemSize utilities shared across the package.

Small value formatters for exception messages, kept here to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Both `class_name(10)` and `class_name(int)` return 'int'. Builtins are never qualified.

    Examples:
        >>> from fractions import Fraction
        >>> class_name(Fraction(1, 2), fully_qualified=True)
        'fractions.Fraction'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__name__}"
    return cls.__name__


def fmt_type(obj: Any) -> str:
    """
    Format the type of an object for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(str)
        '<str>'
    """
    return f"<{class_name(obj)}>"


def fmt_value(obj: Any, max_repr: int = 80) -> str:
    """
    Format a value as a type-value pair for exception messages.

    Long reprs are truncated with an ellipsis; a broken __repr__ never raises.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("abc")
        "<str: 'abc'>"
    """
    try:
        repr_ = repr(obj)
    except Exception as exc:
        repr_ = f"<repr failed: {class_name(exc)}>"

    if len(repr_) > max_repr:
        repr_ = repr_[:max(max_repr - 1, 0)] + "…"

    return f"<{class_name(obj)}: {repr_}>"
