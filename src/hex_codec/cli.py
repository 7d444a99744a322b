# hex_codec/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Sequence

from .__about__ import APP_TITLE, DIST_NAME, __version__
from .codec import (
    decode,
    encode_bytes,
    from_hex_string,
    is_valid_hex,
    to_hex_string,
)
from .dump import compact_dump, pretty_dump

logger = logging.getLogger(__name__)


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _parse_int_maybe(text: str) -> int:
    """Parse an integer accepting 0x/0b/0o prefixes or decimal."""
    s = text.strip().replace("_", "")
    if not s:
        raise ValueError("Enter a number (e.g., 1234 or 0x4D2).")
    return int(s, 0)

def _as_ascii(data: bytes) -> str:
    return "".join(chr(b) if 0x20 <= b <= 0x7E else "." for b in data)

def _read_raw(text: str | None, path: str | None) -> bytes:
    """Bytes of a file, of TEXT (latin-1), or of stdin, in that order."""
    if path is not None:
        with open(path, "rb") as fh:
            return fh.read()
    if text is not None:
        return text.encode("latin-1", errors="replace")
    return sys.stdin.buffer.read()

def _read_hex(text: str | None) -> str:
    src = text if text is not None else sys.stdin.read()
    return src.strip()


# ---------- subcommands ----------
def cmd_encode(args: argparse.Namespace) -> int:
    data = _read_raw(args.text, args.file)
    logger.debug("encoding %d bytes (start=%s, length=%s)", len(data), args.start, args.length)
    print(encode_bytes(
        data,
        use_prefix=not args.no_prefix,
        start=args.start,
        length=args.length,
        upper_case=args.upper,
    ))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    src = _read_hex(args.hex)
    logger.debug("decoding %r", src)
    data = decode(src)

    _print_kv("Bytes", [f"{b:02x}" for b in data])
    _print_kv("Length", str(len(data)))
    if data:
        _print_kv("ASCII", _as_ascii(data))
    return 0


def cmd_number(args: argparse.Namespace) -> int:
    val = _parse_int_maybe(args.value)
    signed = not args.unsigned
    logger.debug("number %d as %d-byte %s", val, args.width, "signed" if signed else "unsigned")

    _print_kv("Hex", to_hex_string(
        val,
        width=args.width,
        signed=signed,
        use_prefix=not args.no_prefix,
        upper_case=args.upper,
    ))
    _print_kv("Dec", str(val))
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    signed = not args.unsigned
    logger.debug("parsing %r as %d-byte %s", args.hex, args.width, "signed" if signed else "unsigned")
    val = from_hex_string(args.hex, width=args.width, signed=signed)

    _print_kv("Dec", str(val))
    _print_kv("Hex", to_hex_string(val, width=args.width, signed=signed))
    return 0


def cmd_dump(args: argparse.Namespace) -> int:
    if args.file is not None:
        data = _read_raw(None, args.file)
    else:
        data = decode(_read_hex(args.hex))
    logger.debug("dumping %d bytes (from=%s, length=%s)", len(data), args.from_index, args.length)

    render = pretty_dump if args.pretty else compact_dump
    out = render(data, args.from_index, args.length)
    if out:
        print(out)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    ok = is_valid_hex(args.hex)
    print("valid" if ok else "invalid")
    return 0 if ok else 1


# ---------- parser ----------
def _add_format_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--no-prefix", action="store_true", help="omit the leading 0x")
    p.add_argument("--upper", action="store_true", help="upper-case hex digits (A-F)")

def _add_kind_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--width", type=int, choices=(1, 2, 4, 8), default=4,
        help="integer width in bytes (default: 4)"
    )
    p.add_argument("--unsigned", action="store_true", help="treat the integer as unsigned")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=DIST_NAME,
        description=f"{APP_TITLE} (CLI)"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")

    sp = p.add_subparsers(dest="cmd")

    # encode
    pe = sp.add_parser("encode", help="encode bytes (text, file or stdin) as hex")
    pe.add_argument("text", nargs="?", help="text to encode (latin-1); stdin when omitted")
    pe.add_argument("--file", help="read raw bytes from a file instead")
    pe.add_argument("--start", type=int, default=0, help="first byte to encode (default: 0)")
    pe.add_argument(
        "--length", type=int, default=None,
        help="end index, clamped to the input size (default: whole input)"
    )
    _add_format_args(pe)
    pe.set_defaults(func=cmd_encode)

    # decode
    pd = sp.add_parser("decode", help="decode hex text into bytes")
    pd.add_argument("hex", nargs="?", help="hex like 'abcdef' or '0xABCDEF'")
    pd.set_defaults(func=cmd_decode)

    # number
    pn = sp.add_parser("number", help="convert an integer → hex")
    pn.add_argument("value", help="number (dec or 0x… / 0b… / 0o…)")
    _add_kind_args(pn)
    _add_format_args(pn)
    pn.set_defaults(func=cmd_number)

    # parse
    pp = sp.add_parser("parse", help="read hex as a big-endian integer")
    pp.add_argument("hex", help="hex like '0x7f' or 'ffff'")
    _add_kind_args(pp)
    pp.set_defaults(func=cmd_parse)

    # dump
    pdump = sp.add_parser("dump", help="hex dump of hex text or a file")
    pdump.add_argument("hex", nargs="?", help="hex text to dump; stdin when omitted")
    pdump.add_argument("--file", help="dump the raw bytes of a file instead")
    pdump.add_argument("--pretty", action="store_true", help="offset / hex / ASCII table")
    pdump.add_argument("--from", dest="from_index", type=int, default=0, help="first byte (default: 0)")
    pdump.add_argument("--length", type=int, default=None, help="number of bytes (default: rest)")
    pdump.set_defaults(func=cmd_dump)

    # check
    pc = sp.add_parser("check", help="exit 0 if the text is valid hex")
    pc.add_argument("hex")
    pc.set_defaults(func=cmd_check)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except ValueError as exc:
        logger.debug("%s failed", args.cmd, exc_info=True)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
