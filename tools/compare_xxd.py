#!/usr/bin/env python3
"""
Compare hxx output with xxd on random files.

Each round writes 100 to 10000 random bytes to a temporary file, dumps it
with both tools and stops at the first difference.
"""

import argparse
import difflib
import os
import random
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from hxx.formatter import dump_bytes


def compare_once(xxd: str, data: bytes, columns: int, group_size: int) -> list:
    """
    Dump data with hxx and xxd.

    Returns:
        Lines of a unified diff, empty when the dumps match
    """
    with tempfile.NamedTemporaryFile(delete=False, suffix='.bin') as tmp:
        tmp.write(data)
        tmp_path = tmp.name

    try:
        result = subprocess.run(
            [xxd, '-c', str(columns), '-g', str(group_size), tmp_path],
            check=True, capture_output=True,
        )
    finally:
        os.unlink(tmp_path)

    expected = result.stdout.decode('ascii').splitlines()
    actual = dump_bytes(data, columns, group_size).splitlines()
    if expected == actual:
        return []
    return list(difflib.unified_diff(expected, actual, 'xxd', 'hxx', lineterm=''))


def main():
    parser = argparse.ArgumentParser(description='Compare hxx output with xxd')
    parser.add_argument('num_tests', type=int, help='Number of random files to compare')
    parser.add_argument('-c', '--columns', type=int, default=16, help='Octets per line (default: 16)')
    parser.add_argument('-g', '--group-size', type=int, default=2, help='Octets per group (default: 2)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')

    args = parser.parse_args()

    xxd = shutil.which('xxd')
    if xxd is None:
        print("Error: 'xxd' missing or unavailable in PATH", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    width = len(str(args.num_tests))

    for i in range(1, args.num_tests + 1):
        size = rng.randint(100, 10000)
        data = bytes(rng.getrandbits(8) for _ in range(size))

        diff = compare_once(xxd, data, args.columns, args.group_size)
        status = 'FAIL' if diff else 'PASS'
        print(f"[Test {i:0{width}d}] {size:5d} bytes: {status}")

        if diff:
            print('\n'.join(diff), file=sys.stderr)
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
