"""
Tests for rebuilding binary data from hex dumps.
"""

import io
import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

import pytest
from hxx.errors import MalformedInput
from hxx.formatter import dump_bytes
from hxx.parser import Parser, load_bytes, parse_line, reverse_hex_dump


def test_parse_hello():
    line = '00000000: 4865 6c6c 6f' + ' ' * 27 + '  Hello'
    assert parse_line(line) == b'Hello'


@pytest.mark.parametrize('columns, group_size', [(16, 2), (1, 1), (3, 2), (7, 256), (256, 4)])
def test_round_trip(columns, group_size):
    """Test that parsing a dump gives back the dumped bytes."""
    data = bytes(range(256)) * 3 + b'tail'
    assert load_bytes(dump_bytes(data, columns, group_size)) == data


def test_round_trip_spaces():
    """Test data whose gutter starts or ends with a blank."""
    for data in (b' ', b'  x  ', b'\x20' * 17):
        assert load_bytes(dump_bytes(data)) == data


def test_empty():
    assert load_bytes('') == b''
    assert list(Parser([])) == []


def test_blank_line():
    assert parse_line('\n') == b''
    assert parse_line('   ') == b''


def test_offset_ignored():
    """Test that offsets are neither checked nor required to increase."""
    text = (
        '00000010: 4142  AB\n'
        '00000000: 4344  CD\n'
        'ffffffff: 4546  EF\n'
    )
    assert load_bytes(text) == b'ABCDEF'


def test_missing_offset():
    assert parse_line('4865 6c6c  Hell') == b'Hell'


def test_missing_gutter():
    assert parse_line('00000000: 4865 6c6c') == b'Hell'
    assert parse_line('00000000: 4865 6c6c \n') == b'Hell'


def test_irregular_spacing():
    """Test hand-edited lines with their own grouping."""
    assert parse_line('00000000:48 65 6c6c') == b'Hell'
    assert parse_line('00000000:    4 8 6 5\t6c6c  Hell') == b'Hell'
    assert parse_line('0: 48656c6c  Hell') == b'Hell'


def test_uppercase_digits():
    assert parse_line('00000000: 4A4B  JK') == b'JK'


def test_gutter_content_ignored():
    """Test that the gutter may hold anything, including colons and non-hex text."""
    assert parse_line('00000000: 4865  zz: not hex') == b'He'


def test_crlf_line_endings():
    assert list(Parser([b'00000000: 4142  AB\r\n'])) == [b'AB']


def test_non_ascii_gutter():
    """Test that a gutter with raw high bytes still decodes."""
    assert list(Parser([b'00000000: ff  \xff\n'])) == [b'\xff']


def test_invalid_hex_character():
    """Test that a non-hex character in the hex field names its line."""
    with pytest.raises(MalformedInput) as excinfo:
        parse_line('00000000: 4865 6g6c  Hell', 3)
    assert excinfo.value.line_number == 3
    assert "'g'" in str(excinfo.value)
    assert str(excinfo.value).startswith('line 3:')


@pytest.mark.parametrize('separator', ['\x1f', '\x1c', '\x85', '\xa0', '\x0b', '\x0c'])
def test_control_characters_are_not_separators(separator):
    """Test that only spaces and tabs may separate groups."""
    with pytest.raises(MalformedInput) as excinfo:
        parse_line(f'00000000: 41{separator}42  AB')
    assert repr(separator) in str(excinfo.value)


def test_control_characters_do_not_start_gutter():
    with pytest.raises(MalformedInput):
        parse_line('00000000: 4142\xa0\xa0AB')


def test_odd_number_of_digits():
    with pytest.raises(MalformedInput) as excinfo:
        parse_line('00000000: 4865 6  He')
    assert 'odd number of hex digits' in excinfo.value.reason


def test_odd_number_of_spaced_digits():
    with pytest.raises(MalformedInput):
        parse_line('00000000: 4 8 6 5 6 c 6 c 6 f 2 0 7 7 6 f 7 2 6 c 6  \n')


def test_parser_counts_lines():
    """Test that the failing line number is reported across lines."""
    text = '00000000: 4142  AB\n\n00000002: 4x  ?\n'
    with pytest.raises(MalformedInput) as excinfo:
        load_bytes(text)
    assert excinfo.value.line_number == 3


def test_reverse_hex_dump():
    source = io.BytesIO(dump_bytes(b'Hello, World!\n' * 5).encode('ascii'))
    sink = io.BytesIO()
    assert reverse_hex_dump(source, sink) == 70
    assert sink.getvalue() == b'Hello, World!\n' * 5


def test_reverse_hex_dump_keeps_earlier_lines():
    """Test that bytes before a malformed line are already written."""
    source = io.BytesIO(b'00000000: 4142  AB\n00000002: zz\n')
    sink = io.BytesIO()
    with pytest.raises(MalformedInput) as excinfo:
        reverse_hex_dump(source, sink)
    assert excinfo.value.line_number == 2
    assert sink.getvalue() == b'AB'


if __name__ == '__main__':
    pytest.main([__file__])
