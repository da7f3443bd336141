"""
MemSize: byte counts as human-readable memory sizes.

    >>> from memsize import Formatter, JEDEC
    >>> Formatter().format(1234)
    '1.21 KiB'
    >>> Formatter(standard=JEDEC(), number_format={"thousands_separator": ","}).format(4707319808000)
    '4,384.03 GB'
"""

from .config import dumps_options, load_options, loads_options
from .exceptions import InvalidOptionError
from .formatter import Formatter, format_size
from .number_format import NumberFormat, round_half_up
from .options import OPTION_KEYS, FormatterOptions
from .standards import IEC, JEDEC, SI, STANDARDS, CustomStandard, Standard, Unit, get_standard

__version__ = "0.1.0"

__all__ = [
    'CustomStandard',
    'Formatter',
    'FormatterOptions',
    'IEC',
    'InvalidOptionError',
    'JEDEC',
    'NumberFormat',
    'OPTION_KEYS',
    'SI',
    'STANDARDS',
    'Standard',
    'Unit',
    'dumps_options',
    'format_size',
    'get_standard',
    'load_options',
    'loads_options',
    'round_half_up',
]
