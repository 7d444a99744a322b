# hex_codec/__init__.py

"""Hex Codec package.

Re-exports the codec and dump functions for convenient imports in tests or
other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .codec import (
    HEX_PREFIX,
    HEX_CHARS,
    UPPER_HEX_CHARS,
    MAX_BYTES,
    InvalidArgument,
    add_hex_prefix,
    decode,
    encode_byte,
    encode_bytes,
    from_hex_string,
    has_hex_prefix,
    hex_digit,
    int_range_for,
    is_valid_hex,
    remove_hex_prefix,
    to_hex_string,
    byte_to_hex, ubyte_to_hex, short_to_hex, ushort_to_hex,
    int_to_hex, uint_to_hex, long_to_hex, ulong_to_hex,
    hex_to_byte, hex_to_ubyte, hex_to_short, hex_to_ushort,
    hex_to_int, hex_to_uint, hex_to_long, hex_to_ulong,
)

from .dump import compact_dump, pretty_dump

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Codec
    "HEX_PREFIX", "HEX_CHARS", "UPPER_HEX_CHARS", "MAX_BYTES",
    "InvalidArgument",
    "add_hex_prefix", "decode", "encode_byte", "encode_bytes",
    "from_hex_string", "has_hex_prefix", "hex_digit", "int_range_for",
    "is_valid_hex", "remove_hex_prefix", "to_hex_string",
    "byte_to_hex", "ubyte_to_hex", "short_to_hex", "ushort_to_hex",
    "int_to_hex", "uint_to_hex", "long_to_hex", "ulong_to_hex",
    "hex_to_byte", "hex_to_ubyte", "hex_to_short", "hex_to_ushort",
    "hex_to_int", "hex_to_uint", "hex_to_long", "hex_to_ulong",
    # Dump
    "compact_dump", "pretty_dump",
]
