"""
Data models for hex dumps.
"""

from dataclasses import dataclass
from typing import List

from .errors import InvalidConfig

DEFAULT_COLUMNS = 16
DEFAULT_GROUP_SIZE = 2
MIN_OCTETS = 1
MAX_OCTETS = 256
OFFSET_WIDTH = 8

# Printable ASCII: SP (0x20) to ~ (0x7e)
_GUTTER_TABLE = ''.join(chr(b) if 0x20 <= b <= 0x7e else '.' for b in range(256))


@dataclass(frozen=True)
class FormatConfig:
    """Layout of a dump: octets per line and octets per group."""
    columns: int = DEFAULT_COLUMNS
    group_size: int = DEFAULT_GROUP_SIZE

    def __post_init__(self):
        for name, value in (('columns', self.columns), ('group_size', self.group_size)):
            if not MIN_OCTETS <= value <= MAX_OCTETS:
                raise InvalidConfig(name, value, MIN_OCTETS, MAX_OCTETS)

    @property
    def hex_width(self) -> int:
        """Width of the hex field of a full line, group separators included."""
        groups = -(-self.columns // self.group_size)
        return 2 * self.columns + groups - 1


@dataclass
class DumpLine:
    """One line of a hex dump."""
    offset: int
    octets: bytes
    trailing: bool = False

    def hex_groups(self, group_size: int) -> List[str]:
        """Hex-encode the octets, one string per group."""
        return [
            self.octets[i:i + group_size].hex()
            for i in range(0, len(self.octets), group_size)
        ]

    @property
    def gutter(self) -> str:
        """ASCII rendering of the octets, '.' for anything not printable."""
        return ''.join(_GUTTER_TABLE[b] for b in self.octets)

    def __len__(self) -> int:
        return len(self.octets)
