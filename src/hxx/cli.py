#!/usr/bin/env python3
"""
Command-line interface for hxx.

    hxx [options] [infile [outfile]]
    hxx -r [infile [outfile]]
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .data_models import DEFAULT_COLUMNS, DEFAULT_GROUP_SIZE, MAX_OCTETS, FormatConfig
from .errors import HxxError, InvalidConfig
from .formatter import hex_dump
from .parser import reverse_hex_dump
from .streams import ByteReader, ByteWriter

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = 'HXX_LOG_LEVEL'


def setup_logging() -> None:
    """Send log records to stderr, at the level named by HXX_LOG_LEVEL."""
    level_name = os.environ.get(LOG_LEVEL_ENV, 'WARNING').upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(message)s', stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hxx',
        usage='%(prog)s [options] [infile [outfile]]\n   or: %(prog)s -r [infile [outfile]]',
        description='Make a hex dump of a file, or rebuild a file from its hex dump.',
    )
    parser.add_argument(
        '-c', dest='columns', metavar='cols', type=int, default=DEFAULT_COLUMNS,
        help=f'format <cols> octets per line (1-{MAX_OCTETS}, default {DEFAULT_COLUMNS})',
    )
    parser.add_argument(
        '-g', dest='group_size', metavar='bytes', type=int, default=DEFAULT_GROUP_SIZE,
        help=f'number of octets per group (1-{MAX_OCTETS}, default {DEFAULT_GROUP_SIZE})',
    )
    parser.add_argument(
        '-r', dest='reverse', action='store_true',
        help='reverse operation: convert (or patch) hexdump into binary',
    )
    parser.add_argument('-v', action='version', version=f'%(prog)s - {__version__}')
    parser.add_argument('infile', type=Path, nargs='?', help='input file (default: stdin)')
    parser.add_argument('outfile', type=Path, nargs='?', help='output file (default: stdout)')
    return parser


def run(args: argparse.Namespace) -> None:
    """Dump or rebuild, as selected by the parsed arguments."""
    config = FormatConfig(columns=args.columns, group_size=args.group_size)

    with ByteReader(args.infile) as reader, ByteWriter(args.outfile) as writer:
        if args.reverse:
            reverse_hex_dump(reader, writer)
        else:
            hex_dump(reader, writer, config)
        logger.debug("Read %d bytes from %s", reader.tell(), reader.name)
        logger.debug("Wrote %d bytes to %s", writer.bytes_written, writer.name)


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        run(args)
    except InvalidConfig as err:
        logger.error("ERROR: %s", err)
        parser.print_usage(sys.stderr)
        return 1
    except HxxError as err:
        logger.error("ERROR: %s", err)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
