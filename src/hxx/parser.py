"""
Hex dump to binary conversion.

Only the hex field of each line is used. The offset is discarded without
being checked and the gutter is ignored, so hand-edited dumps can be turned
back into binary (patching).

A line is read as:

    [offset:] hex field [<two or more blanks> gutter]

The hex field may be grouped any way as long as groups are separated by a
single blank; the first run of two blanks starts the gutter. Lines without
an offset or without a gutter are accepted.
"""

import logging
import re
import string
from typing import BinaryIO, Iterable, Iterator

from .errors import MalformedInput

logger = logging.getLogger(__name__)

_OFFSET_FIELD = re.compile(r'^[ \t]*[^ \t:]*:')
_GUTTER_BOUNDARY = re.compile(r'[ \t]{2}')
_HEX_DIGITS = frozenset(string.hexdigits)
_BLANKS = ' \t'

# Latin-1 maps every byte to a character, so gutters never fail to decode
INPUT_ENCODING = 'latin-1'


def parse_line(text: str, line_number: int = 1) -> bytes:
    """
    Decode the hex field of one dump line.

    Args:
        text: Line of a hex dump, with or without its line ending
        line_number: Position of the line in its dump, for error messages

    Returns:
        Bytes encoded in the line

    Raises:
        MalformedInput: If the hex field holds anything but hex digits and
            single blanks, or an odd number of hex digits
    """
    line = text.rstrip('\r\n')

    offset = _OFFSET_FIELD.match(line)
    body = line[offset.end():] if offset else line
    body = body.lstrip(_BLANKS)

    boundary = _GUTTER_BOUNDARY.search(body)
    hex_field = body[:boundary.start()] if boundary else body

    digits = []
    for char in hex_field:
        if char in _BLANKS:
            continue
        if char not in _HEX_DIGITS:
            raise MalformedInput(line_number, line, f"invalid hex character {char!r}")
        digits.append(char)

    if len(digits) % 2:
        raise MalformedInput(line_number, line, "odd number of hex digits")

    return bytes.fromhex(''.join(digits))


class Parser:
    """
    Lazy iterator of the bytes encoded in each line of a dump.

    The source is anything iterating over raw (bytes) or decoded (str)
    lines, such as a binary file or a ByteReader.
    """

    def __init__(self, source: Iterable):
        self._lines = iter(source)
        self.line_number = 0

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = next(self._lines)
        self.line_number += 1
        if isinstance(line, bytes):
            line = line.decode(INPUT_ENCODING)
        return parse_line(line, self.line_number)


def reverse_hex_dump(source: BinaryIO, sink: BinaryIO) -> int:
    """
    Rebuild binary data from the hex dump in source and write it to sink.

    Bytes are written line by line, so a malformed line leaves everything
    before it in sink.

    Args:
        source: Byte source holding the dump text
        sink: Writable byte sink

    Returns:
        Number of bytes written to sink

    Raises:
        MalformedInput: On the first line that cannot be decoded
    """
    parser = Parser(source)
    total = 0
    for data in parser:
        if data:
            sink.write(data)
            total += len(data)
    logger.debug("Rebuilt %d bytes from %d lines", total, parser.line_number)
    return total


def load_bytes(text: str) -> bytes:
    """Rebuild binary data from dump text held in memory."""
    return b''.join(Parser(text.splitlines()))
