"""
Binary to hex dump conversion.

Each line holds an 8 digit offset, the octets as grouped lowercase hex and an
ASCII gutter, matching the default output of xxd:

    00000000: 4865 6c6c 6f2c 2057 6f72 6c64 210a       Hello, World!.
"""

import io
import logging
from typing import BinaryIO, Iterator, Optional

from .data_models import DumpLine, FormatConfig, OFFSET_WIDTH

logger = logging.getLogger(__name__)


def format_line(line: DumpLine, config: FormatConfig) -> str:
    """
    Render one dump line, without the line ending.

    The hex field of a short line is padded with spaces so its gutter lines
    up with the gutters of full lines.

    Args:
        line: Line to render
        config: Layout the line was read with

    Returns:
        Rendered line
    """
    hex_field = ' '.join(line.hex_groups(config.group_size))
    return f"{line.offset:0{OFFSET_WIDTH}x}: {hex_field:<{config.hex_width}}  {line.gutter}"


def _read_octets(source: BinaryIO, count: int) -> bytes:
    # Plain file objects may return short reads before the end of a pipe
    data = source.read(count)
    while data and len(data) < count:
        more = source.read(count - len(data))
        if not more:
            break
        data += more
    return data


class Formatter:
    """
    Lazy iterator of the dump lines of a byte source.

    Reads one line ahead so that the last line can be flagged as trailing.
    Not restartable: once the source is exhausted iteration stays finished.
    """

    def __init__(self, source: BinaryIO, config: FormatConfig):
        self.source = source
        self.config = config
        self.offset = 0
        self._pending: Optional[bytes] = None
        self._exhausted = False

    def __iter__(self) -> Iterator[DumpLine]:
        return self

    def __next__(self) -> DumpLine:
        if self._exhausted:
            raise StopIteration

        octets = self._pending
        if octets is None:
            octets = _read_octets(self.source, self.config.columns)
        if not octets:
            self._exhausted = True
            raise StopIteration

        self._pending = _read_octets(self.source, self.config.columns)
        trailing = not self._pending
        if trailing:
            self._exhausted = True

        line = DumpLine(offset=self.offset, octets=octets, trailing=trailing)
        self.offset += len(octets)
        return line

    def lines(self) -> Iterator[str]:
        """Rendered text of the remaining lines."""
        for line in self:
            yield format_line(line, self.config)


def hex_dump(source: BinaryIO, sink: BinaryIO, config: FormatConfig) -> int:
    """
    Write the hex dump of source to sink.

    Every line is written as soon as it is rendered.

    Args:
        source: Readable byte source
        sink: Writable byte sink
        config: Dump layout

    Returns:
        Number of bytes read from source
    """
    logger.debug("Dumping with %d columns, groups of %d", config.columns, config.group_size)
    formatter = Formatter(source, config)
    count = 0
    for text in formatter.lines():
        sink.write(text.encode('ascii') + b'\n')
        count += 1
    logger.debug("Dumped %d bytes in %d lines", formatter.offset, count)
    return formatter.offset


def dump_bytes(data: bytes, columns: int = 16, group_size: int = 2) -> str:
    """Hex dump of an in-memory buffer, one newline terminated line per row."""
    config = FormatConfig(columns=columns, group_size=group_size)
    return ''.join(text + '\n' for text in Formatter(io.BytesIO(data), config).lines())
