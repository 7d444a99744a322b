# hex_codec/dump.py

from __future__ import annotations

from .codec import HEX_CHARS, BytesLike, InvalidArgument, _as_bytes

NEWLINE = "\n"
BYTES_PER_ROW = 16
ROW_PREFIX_CACHE_ROWS = 65536 >> 4   # offsets below 64 KiB
PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E


# ---------------- Lookup tables ----------------
def _build_hexdump_table() -> str:
    # two characters per byte value, 512 in total
    return "".join(HEX_CHARS[i >> 4] + HEX_CHARS[i & 0x0F] for i in range(256))

def _build_byte_to_char() -> tuple[str, ...]:
    return tuple(
        chr(i) if PRINTABLE_MIN <= i <= PRINTABLE_MAX else "." for i in range(256)
    )

def _row_prefix(offset: int) -> str:
    return f"{NEWLINE}|{offset & 0xFFFFFFFF:08x}|"

_HEXDUMP_TABLE = _build_hexdump_table()
_BYTE2HEX = tuple(" " + _HEXDUMP_TABLE[i << 1:(i << 1) + 2] for i in range(256))
_BYTE2CHAR = _build_byte_to_char()
_HEX_PADDING = tuple("   " * (BYTES_PER_ROW - i) for i in range(BYTES_PER_ROW))
_BYTE_PADDING = tuple(" " * (BYTES_PER_ROW - i) for i in range(BYTES_PER_ROW))
_ROW_PREFIXES = tuple(_row_prefix(row << 4) for row in range(ROW_PREFIX_CACHE_ROWS))

_HEADER = (
    "         +" + "-" * 49 + "+" + NEWLINE
    + "         |" + "".join(f"  {d}" for d in HEX_CHARS) + " |" + NEWLINE
    + "+--------+" + "-" * 49 + "+" + "-" * 16 + "+"
)
_FOOTER = NEWLINE + "+--------+" + "-" * 49 + "+" + "-" * 16 + "+"


def _checked_range(data: BytesLike, from_index: int, length: int | None):
    buf = _as_bytes(data)
    if length is None:
        length = len(buf) - from_index
    if length < 0:
        raise InvalidArgument(f"length({length}) must be >= 0")
    if from_index < 0 or from_index + length > len(buf):
        raise InvalidArgument(
            f"range from_index({from_index}) + length({length}) exceeds buffer size({len(buf)})"
        )
    return buf, length


# ---------------- Dumps ----------------
def compact_dump(data: BytesLike, from_index: int = 0, length: int | None = None) -> str:
    """Lower-case hex of ``length`` bytes from ``from_index``, no separators."""
    buf, length = _checked_range(data, from_index, length)
    if length == 0:
        return ""
    table = _HEXDUMP_TABLE
    return "".join(
        table[b << 1:(b << 1) + 2] for b in memoryview(buf)[from_index:from_index + length]
    )

def pretty_dump(data: BytesLike, from_index: int = 0, length: int | None = None) -> str:
    """Render bytes as an offset / hex / ASCII table, 16 bytes per row.

    ::

                 +-------------------------------------------------+
                 |  0  1  2  3  4  5  6  7  8  9  a  b  c  d  e  f |
        +--------+-------------------------------------------------+----------------+
        |00000000| 48 65 6c 6c 6f                                  |Hello           |
        +--------+-------------------------------------------------+----------------+

    Offsets count from ``from_index``. A zero length gives ``""``.
    """
    if length == 0:
        return ""
    buf = _as_bytes(data)
    if length is None:
        length = len(buf) - from_index
        if length == 0:
            return ""
    if not (0 <= from_index <= length):
        raise InvalidArgument(f"expected: 0 <= from_index({from_index}) <= length({length})")
    buf, length = _checked_range(buf, from_index, length)

    full_rows, remainder = divmod(length, BYTES_PER_ROW)
    out = [_HEADER]

    for row in range(full_rows):
        start = from_index + row * BYTES_PER_ROW
        _append_row(out, buf, row, start, start + BYTES_PER_ROW)

    if remainder:
        start = from_index + full_rows * BYTES_PER_ROW
        _append_row(out, buf, full_rows, start, start + remainder)

    out.append(_FOOTER)
    return "".join(out)

def _append_row(out: list[str], buf, row: int, start: int, end: int) -> None:
    chunk = memoryview(buf)[start:end]
    missing = BYTES_PER_ROW - len(chunk)

    out.append(_ROW_PREFIXES[row] if row < ROW_PREFIX_CACHE_ROWS else _row_prefix(row << 4))
    out.extend(_BYTE2HEX[b] for b in chunk)
    if missing:
        out.append(_HEX_PADDING[len(chunk)])
    out.append(" |")
    out.extend(_BYTE2CHAR[b] for b in chunk)
    if missing:
        out.append(_BYTE_PADDING[len(chunk)])
    out.append("|")
