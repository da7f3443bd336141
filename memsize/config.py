"""
TOML configuration for memory size formatting.

Options live in a TOML table, by default [memsize]; inside pyproject.toml use table="tool.memsize".
Keys are the FormatterOptions keys, the standard is given by name:

    [memsize]
    standard = "jedec"
    max_decimals = 1

    [memsize.number_format]
    decimal_point = ","
    thousands_separator = " "
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os
from collections.abc import Mapping
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .options import FormatterOptions
from .standards import STANDARDS
from .utils import fmt_value

DEFAULT_TABLE = "memsize"


# Methods --------------------------------------------------------------------------------------------------------------

def load_options(path: str | os.PathLike[str], table: str | None = DEFAULT_TABLE) -> FormatterOptions:
    """
    Load FormatterOptions from a TOML file.

    Args:
        path: TOML file path.
        table: Dotted table name holding the options, e.g. 'tool.memsize'; None for the document root.

    Raises:
        FileNotFoundError: If the file does not exist.
        toml.TomlDecodeError: If the file is not valid TOML.
        KeyError: If the table is missing.
        InvalidOptionError: On unknown option keys or invalid values.
    """
    with open(path, "r", encoding="utf-8") as f:
        document = toml.load(f)
    return _options_from(document, table)


def loads_options(text: str, table: str | None = DEFAULT_TABLE) -> FormatterOptions:
    """Load FormatterOptions from a TOML string, see load_options()."""
    return _options_from(toml.loads(text), table)


def dumps_options(options: FormatterOptions, table: str | None = DEFAULT_TABLE) -> str:
    """
    Serialize FormatterOptions as a TOML string readable by loads_options().

    Raises:
        ValueError: If the standard is not one of the registered standards.
    """
    data = options.to_dict()

    standard = data["standard"]
    if STANDARDS.get(standard.name) is not type(standard):
        raise ValueError(f"only registered standards {sorted(STANDARDS)} can be written to TOML, "
                         f"but found {fmt_value(standard)}")
    data["standard"] = standard.name

    if table:
        for part in reversed(table.split(".")):
            data = {part: data}
    return toml.dumps(data)


# Private Methods ------------------------------------------------------------------------------------------------------

def _options_from(document: Mapping[str, Any], table: str | None) -> FormatterOptions:
    section: Any = document
    if table:
        for part in table.split("."):
            if not isinstance(section, Mapping) or part not in section:
                raise KeyError(f"TOML table not found: [{table}]")
            section = section[part]

    if not isinstance(section, Mapping):
        raise KeyError(f"TOML key is not a table: [{table}]")

    return FormatterOptions(section)
