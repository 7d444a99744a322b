import pytest

BORDER = "+--------+" + "-" * 49 + "+" + "-" * 16 + "+"
HEADER = [
    "         +" + "-" * 49 + "+",
    "         |  0  1  2  3  4  5  6  7  8  9  a  b  c  d  e  f |",
    BORDER,
]


# ---------------- compact ----------------
def test_compact_dump_whole_buffer(dump):
    assert dump.compact_dump(b"\x00\xff\x10\xab") == "00ff10ab"

def test_compact_dump_range(dump):
    data = bytes(range(16))
    assert dump.compact_dump(data, 2, 3) == "020304"
    assert dump.compact_dump(data, 14) == "0e0f"

def test_compact_dump_all_byte_values(dump):
    assert dump.compact_dump(bytes(range(256))) == bytes(range(256)).hex()

def test_compact_dump_empty(dump):
    assert dump.compact_dump(b"") == ""
    assert dump.compact_dump(b"\x01\x02", 1, 0) == ""

@pytest.mark.parametrize("from_index,length", [(0, 5), (3, 2), (-1, 1), (0, -1)])
def test_compact_dump_bad_range(dump, from_index, length):
    with pytest.raises(dump.InvalidArgument):
        dump.compact_dump(b"\x01\x02\x03\x04", from_index, length)


# ---------------- pretty ----------------
def test_pretty_dump_zero_length_is_empty(dump):
    assert dump.pretty_dump(b"") == ""
    assert dump.pretty_dump(b"abc", 0, 0) == ""
    assert dump.pretty_dump(b"abc", 2, 0) == ""

def test_pretty_dump_header_layout(dump):
    lines = dump.pretty_dump(b"A").split("\n")
    assert lines[:3] == HEADER
    assert lines[-1] == BORDER
    assert [len(line) for line in lines] == [60, 60, 77, 77, 77]

def test_pretty_dump_short_row(dump):
    lines = dump.pretty_dump(b"Hello").split("\n")
    assert lines[3] == "|00000000| 48 65 6c 6c 6f" + "   " * 11 + " |Hello" + " " * 11 + "|"

def test_pretty_dump_seventeen_bytes(dump):
    data = bytes(range(0x40, 0x51))  # "@ABC...OP"
    lines = dump.pretty_dump(data).split("\n")
    assert len(lines) == 3 + 2 + 1
    assert lines[3] == (
        "|00000000| 40 41 42 43 44 45 46 47 48 49 4a 4b 4c 4d 4e 4f |@ABCDEFGHIJKLMNO|"
    )
    assert lines[4] == "|00000010| 50" + "   " * 15 + " |P" + " " * 15 + "|"
    assert len(lines[4]) == len(lines[3]) == 77

def test_pretty_dump_exact_row(dump):
    lines = dump.pretty_dump(bytes(16)).split("\n")
    assert len(lines) == 5
    assert lines[3] == "|00000000|" + " 00" * 16 + " |" + "." * 16 + "|"

def test_pretty_dump_ascii_column(dump):
    data = bytes([0x1F, 0x20, 0x7E, 0x7F, 0x80, 0xFF, 0x00, 0x41])
    row = dump.pretty_dump(data).split("\n")[3]
    assert row.endswith("|. ~....A" + " " * 8 + "|")

def test_pretty_dump_offsets_relative_to_from_index(dump):
    data = bytes(range(0x40, 0x51))
    lines = dump.pretty_dump(data, 1, 16).split("\n")
    assert len(lines) == 5
    assert lines[3].startswith("|00000000| 41 42")
    assert lines[3].endswith("|ABCDEFGHIJKLMNOP|")

def test_pretty_dump_default_length_is_rest_of_buffer(dump):
    data = bytes(range(0x40, 0x51))
    assert dump.pretty_dump(data, 1) == dump.pretty_dump(data, 1, 16)

@pytest.mark.parametrize("from_index,length", [(-1, 4), (5, 3), (0, -2)])
def test_pretty_dump_from_index_outside_length(dump, from_index, length):
    with pytest.raises(dump.InvalidArgument):
        dump.pretty_dump(bytes(32), from_index, length)

def test_pretty_dump_range_past_buffer(dump):
    with pytest.raises(dump.InvalidArgument, match="exceeds buffer size"):
        dump.pretty_dump(bytes(4), 0, 20)

def test_pretty_dump_rows_beyond_cached_prefixes(dump):
    data = bytes(dump.ROW_PREFIX_CACHE_ROWS * 16 + 16)
    lines = dump.pretty_dump(data).split("\n")
    assert lines[3 + dump.ROW_PREFIX_CACHE_ROWS - 1].startswith("|0000fff0|")
    assert lines[3 + dump.ROW_PREFIX_CACHE_ROWS].startswith("|00010000|")
    assert lines[-1] == BORDER
