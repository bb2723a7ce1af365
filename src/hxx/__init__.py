"""
hxx - a small xxd-style hex dump tool.

Renders binary data as hex dump text and rebuilds binary data from it.
"""

__version__ = '0.1.0'

from .data_models import DumpLine, FormatConfig
from .errors import HxxError, InvalidConfig, IoFailure, MalformedInput
from .formatter import Formatter, dump_bytes, format_line, hex_dump
from .parser import Parser, load_bytes, parse_line, reverse_hex_dump

__all__ = [
    'DumpLine',
    'FormatConfig',
    'Formatter',
    'HxxError',
    'InvalidConfig',
    'IoFailure',
    'MalformedInput',
    'Parser',
    'dump_bytes',
    'format_line',
    'hex_dump',
    'load_bytes',
    'parse_line',
    'reverse_hex_dump',
]
