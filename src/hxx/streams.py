"""
Byte sources and sinks for hxx: a file, or the standard streams.
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from .errors import IoFailure

logger = logging.getLogger(__name__)


class ByteReader:
    """Readable byte source backed by a file or standard input."""

    def __init__(self, file_path: Optional[Path] = None):
        """
        Initialize byte reader.

        Args:
            file_path: Path to the input file, or None for standard input
        """
        self.file_path = Path(file_path) if file_path is not None else None
        self.file: Optional[BinaryIO] = None
        self._consumed = 0

    @property
    def name(self) -> str:
        return str(self.file_path) if self.file_path is not None else '<stdin>'

    def __enter__(self):
        """Context manager entry."""
        if self.file_path is None:
            self.file = sys.stdin.buffer
        else:
            try:
                self.file = open(self.file_path, 'rb')
            except OSError as err:
                raise IoFailure(f"failed to open file: {err}") from err
        logger.debug("Reading from %s", self.name)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        # Standard input belongs to the interpreter
        if self.file and self.file_path is not None:
            self.file.close()
        self.file = None

    def _require_open(self) -> BinaryIO:
        if not self.file:
            raise RuntimeError("Reader not open. Use as context manager.")
        return self.file

    def read(self, count: int) -> bytes:
        """Read up to count bytes. Returns b'' once the stream is exhausted."""
        file = self._require_open()
        try:
            data = file.read(count)
        except OSError as err:
            raise IoFailure(f"failed to read from input: {err}") from err
        self._consumed += len(data)
        return data

    def __iter__(self) -> Iterator[bytes]:
        """Iterate over raw lines, line endings included."""
        file = self._require_open()
        while True:
            try:
                line = file.readline()
            except OSError as err:
                raise IoFailure(f"failed to read from input: {err}") from err
            if not line:
                return
            self._consumed += len(line)
            yield line

    def tell(self) -> int:
        """Number of bytes consumed so far."""
        return self._consumed


class ByteWriter:
    """Writable byte sink backed by a file or standard output."""

    def __init__(self, file_path: Optional[Path] = None):
        """
        Initialize byte writer.

        An existing output file is appended to, a missing one is created.

        Args:
            file_path: Path to the output file, or None for standard output
        """
        self.file_path = Path(file_path) if file_path is not None else None
        self.file: Optional[BinaryIO] = None
        self.bytes_written = 0

    @property
    def name(self) -> str:
        return str(self.file_path) if self.file_path is not None else '<stdout>'

    def __enter__(self):
        """Context manager entry."""
        if self.file_path is None:
            self.file = sys.stdout.buffer
        else:
            try:
                self.file = open(self.file_path, 'ab')
            except OSError as err:
                raise IoFailure(f"failed to create file: {err}") from err
        logger.debug("Writing to %s", self.name)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if not self.file:
            return
        try:
            if self.file_path is None:
                self.file.flush()
            else:
                self.file.close()
        except OSError as err:
            if exc_type is None:
                raise IoFailure(f"failed to write to output: {err}") from err
            logger.debug("Ignoring failure while closing %s: %s", self.name, err)
        finally:
            self.file = None

    def write(self, data: bytes) -> int:
        """Write all of data."""
        if not self.file:
            raise RuntimeError("Writer not open. Use as context manager.")
        try:
            self.file.write(data)
        except OSError as err:
            raise IoFailure(f"failed to write to output: {err}") from err
        self.bytes_written += len(data)
        return len(data)
