# hex_codec/codec.py

from __future__ import annotations

import re
from typing import Iterable, Tuple, Union

HEX_PREFIX = "0x"
HEX_CHARS = "0123456789abcdef"
UPPER_HEX_CHARS = "0123456789ABCDEF"
HEX_RE = re.compile(r"(0[xX])?[0-9a-fA-F]+")

MAX_BYTES = 8

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class InvalidArgument(ValueError):
    """Raised for malformed hex text or out-of-range arguments."""


# ---------------- Lookup tables ----------------
def _build_pair_table(digits: str) -> tuple[str, ...]:
    return tuple(digits[i >> 4] + digits[i & 0x0F] for i in range(256))

def _build_digit_values() -> dict[str, int]:
    values = {ch: i for i, ch in enumerate(HEX_CHARS)}
    values.update({ch: i for i, ch in enumerate(UPPER_HEX_CHARS)})
    return values

_BYTE2HEX = _build_pair_table(HEX_CHARS)
_BYTE2HEX_UPPER = _build_pair_table(UPPER_HEX_CHARS)
_DIGIT_VALUES = _build_digit_values()


def _as_bytes(data: BytesLike) -> Union[bytes, bytearray, memoryview]:
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, memoryview):
        return data.cast("B")
    # signed byte sequences (-128..127) map onto their unsigned value
    return bytes(b & 0xFF for b in data)


# ---------------- Prefix helpers ----------------
def has_hex_prefix(text: str) -> bool:
    return text.startswith("0x") or text.startswith("0X")

def add_hex_prefix(text: str) -> str:
    """Prepend ``0x`` unless the text already starts with ``0x``/``0X``.

    >>> add_hex_prefix(add_hex_prefix("123"))
    '0x123'
    """
    return text if has_hex_prefix(text) else HEX_PREFIX + text

def remove_hex_prefix(text: str) -> str:
    """Remove one leading ``0x``/``0X``; ``"0x0x123"`` becomes ``"0x123"``."""
    return text[2:] if has_hex_prefix(text) else text

def is_valid_hex(text: str) -> bool:
    """True for one or more hex digits with an optional prefix.

    The empty string and a bare prefix are *not* valid here, even though
    :func:`decode` turns both into ``b""``.
    """
    return HEX_RE.fullmatch(text) is not None


# ---------------- Encoding ----------------
def encode_byte(value: int, upper_case: bool = False) -> str:
    """Encode one byte as two hex characters, high nibble first."""
    table = _BYTE2HEX_UPPER if upper_case else _BYTE2HEX
    return table[value & 0xFF]

def encode_bytes(
    data: BytesLike,
    use_prefix: bool = True,
    start: int = 0,
    length: int | None = None,
    upper_case: bool = False,
) -> str:
    """Encode ``data[start:length]`` as hex.

    ``length`` is the exclusive end index and is clamped to the buffer size,
    so ``encode_bytes(b"\\xab\\xcd\\xef", start=1, length=2) == "0xcd"`` and a
    length past the end simply encodes what exists.
    """
    buf = _as_bytes(data)
    size = len(buf)
    if length is None:
        length = size

    if start < 0:
        raise InvalidArgument(f"Start ({start}) must be >= 0")
    if length < 0:
        raise InvalidArgument(f"Length ({length}) must be >= 0")
    if size and start >= size:
        raise InvalidArgument(
            f"Start ({start}) position must be smaller than the size of the buffer ({size})"
        )

    end = min(length, size)
    table = _BYTE2HEX_UPPER if upper_case else _BYTE2HEX

    parts = [HEX_PREFIX] if use_prefix else []
    parts.extend(table[b] for b in memoryview(buf)[start:end])
    return "".join(parts)


# ---------------- Decoding ----------------
def hex_digit(char: str) -> int:
    """Return the value (0-15) of a single hexadecimal character."""
    try:
        return _DIGIT_VALUES[char]
    except KeyError:
        raise InvalidArgument(f"'{char}' is not a valid hexadecimal character") from None

def decode(text: str) -> bytes:
    """Parse hex text into bytes.

    Accepts:
      - "abcdef"   (no prefix)
      - "0xABCDEF" / "0Xabcdef" (one prefix, either case)
      - "" and "0x" (both give ``b""``)

    Raises InvalidArgument on an odd digit count or on the first character
    outside ``0-9a-fA-F``.
    """
    clean = remove_hex_prefix(text)
    if not clean:
        return b""

    if len(clean) % 2 != 0:
        raise InvalidArgument(f"hex-string '{text}' must have an even number of digits")

    out = bytearray(len(clean) // 2)
    for i in range(0, len(clean), 2):
        out[i // 2] = (hex_digit(clean[i]) << 4) | hex_digit(clean[i + 1])
    return bytes(out)


# ---------------- Integers ----------------
def int_range_for(width: int, signed: bool) -> Tuple[int, int]:
    """
    Return inclusive (lo, hi) range for a given byte width and signedness.

    Unsigned:        [0, 2^n - 1]
    2's complement:  [-(2^(n-1)), 2^(n-1) - 1]
    """
    if width < 1 or width > MAX_BYTES:
        raise InvalidArgument(f"width must be 1..{MAX_BYTES}")
    if signed:
        lo = -(1 << (8 * width - 1))
        hi = (1 << (8 * width - 1)) - 1
    else:
        lo = 0
        hi = (1 << (8 * width)) - 1
    return lo, hi

def to_hex_string(
    value: int,
    width: int = 4,
    signed: bool = True,
    use_prefix: bool = True,
    upper_case: bool = False,
) -> str:
    """Render an integer of the given kind as hex.

    Negative values use their two's complement at ``width`` bytes. Leading
    zero bytes are dropped but at least one byte is kept, so the digit count
    is always even: ``5 -> 0x05``, ``10 -> 0x0a``, ``256 -> 0x0100``.
    """
    lo, hi = int_range_for(width, signed)
    if not (lo <= value <= hi):
        kind = "signed" if signed else "unsigned"
        raise InvalidArgument(f"Value {value} out of range for {8 * width}-bit {kind}")

    raw = value.to_bytes(width, byteorder="big", signed=signed)
    trimmed = raw.lstrip(b"\x00") or b"\x00"
    return encode_bytes(trimmed, use_prefix=use_prefix, upper_case=upper_case)

def from_hex_string(text: str, width: int = 4, signed: bool = True) -> int:
    """Read hex text as a big-endian integer of the given kind.

    Missing leading bytes count as zero (``"0x01"`` is 1 at any width).
    """
    int_range_for(width, signed)
    data = decode(text)
    if not data:
        raise InvalidArgument(f"hex-string '{text}' holds no digits")
    if len(data) > width:
        raise InvalidArgument(
            f"hex-string '{text}' has {len(data)} bytes, more than fit in {8 * width} bits"
        )
    return int.from_bytes(data.rjust(width, b"\x00"), byteorder="big", signed=signed)


def byte_to_hex(value: int, use_prefix: bool = True, upper_case: bool = False) -> str:
    return to_hex_string(value, 1, True, use_prefix, upper_case)

def ubyte_to_hex(value: int, use_prefix: bool = True, upper_case: bool = False) -> str:
    return to_hex_string(value, 1, False, use_prefix, upper_case)

def short_to_hex(value: int, use_prefix: bool = True, upper_case: bool = False) -> str:
    return to_hex_string(value, 2, True, use_prefix, upper_case)

def ushort_to_hex(value: int, use_prefix: bool = True, upper_case: bool = False) -> str:
    return to_hex_string(value, 2, False, use_prefix, upper_case)

def int_to_hex(value: int, use_prefix: bool = True, upper_case: bool = False) -> str:
    return to_hex_string(value, 4, True, use_prefix, upper_case)

def uint_to_hex(value: int, use_prefix: bool = True, upper_case: bool = False) -> str:
    return to_hex_string(value, 4, False, use_prefix, upper_case)

def long_to_hex(value: int, use_prefix: bool = True, upper_case: bool = False) -> str:
    return to_hex_string(value, 8, True, use_prefix, upper_case)

def ulong_to_hex(value: int, use_prefix: bool = True, upper_case: bool = False) -> str:
    return to_hex_string(value, 8, False, use_prefix, upper_case)


def hex_to_byte(text: str) -> int:
    return from_hex_string(text, 1, True)

def hex_to_ubyte(text: str) -> int:
    return from_hex_string(text, 1, False)

def hex_to_short(text: str) -> int:
    return from_hex_string(text, 2, True)

def hex_to_ushort(text: str) -> int:
    return from_hex_string(text, 2, False)

def hex_to_int(text: str) -> int:
    return from_hex_string(text, 4, True)

def hex_to_uint(text: str) -> int:
    return from_hex_string(text, 4, False)

def hex_to_long(text: str) -> int:
    return from_hex_string(text, 8, True)

def hex_to_ulong(text: str) -> int:
    return from_hex_string(text, 8, False)
