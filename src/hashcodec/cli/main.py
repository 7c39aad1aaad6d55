"""Command line interface for encoding and decoding hashids."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..core.codec import Hashids
from ..domain.models import ConnectionConfig
from ..manager import HashidsManager, make_codec
from ..parser.config_loader import load_manager_config
from ..utils.constants import DEFAULT_ALPHABET, DEFAULT_PREFIX_SEPARATOR, SCHEMA_JSON_PATH
from ..utils.errors import ConfigurationError
from ..utils.logging import configure_logger, get_logger

LOG = get_logger()

EXIT_OK = 0
EXIT_EMPTY = 1
EXIT_CONFIG = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashcodec",
        description="Encode integers into salted hashids and decode them back",
    )
    parser.add_argument("--salt", "-s", default="", help="Salt used to shuffle the alphabet (default: empty)")
    parser.add_argument(
        "--min-length",
        "-m",
        type=int,
        default=0,
        help="Pad every hash to at least this many characters (default: 0)",
    )
    parser.add_argument("--alphabet", "-a", default=DEFAULT_ALPHABET, help="Base alphabet (>= 10 unique characters)")
    parser.add_argument("--prefix", "-p", default=None, help="Optional prefix prepended to every hash")
    parser.add_argument(
        "--prefix-separator",
        "-ps",
        default=DEFAULT_PREFIX_SEPARATOR,
        help=f"Separator placed after the prefix (default: {DEFAULT_PREFIX_SEPARATOR!r})",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="JSON file with named connections; overrides --salt/--min-length/--alphabet/--prefix",
    )
    parser.add_argument("--connection", "-n", help="Connection name from --config (default: the configured default)")
    parser.add_argument(
        "--schema",
        "-sc",
        type=Path,
        default=SCHEMA_JSON_PATH,
        help="Path to the JSON schema used to validate --config",
    )
    parser.add_argument(
        "--log-level",
        "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Console log level (default: WARNING)",
    )
    parser.add_argument("--no-console-log", "-nl", action="store_true", help="Disable console logging")
    parser.add_argument("--log-file", type=Path, help="Also write log records to this file")

    sub = parser.add_subparsers(dest="command", required=True)
    encode = sub.add_parser("encode", help="Encode one or more non-negative integers")
    encode.add_argument("numbers", nargs="+", help="Decimal integers (arbitrary size)")
    decode = sub.add_parser("decode", help="Decode a hash back into its integers")
    decode.add_argument("hashid")
    decode.add_argument("--first", action="store_true", help="Print only the first decoded number")
    encode_hex = sub.add_parser("encode-hex", help="Encode a hexadecimal string")
    encode_hex.add_argument("hex")
    decode_hex = sub.add_parser("decode-hex", help="Decode a hash produced by encode-hex")
    decode_hex.add_argument("hashid")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _build_codec(args: argparse.Namespace) -> Hashids:
    if args.config is not None:
        manager = HashidsManager(load_manager_config(args.config, args.schema))
        return manager.connection(args.connection)
    config = ConnectionConfig(
        name="cli",
        salt=args.salt,
        min_length=args.min_length,
        alphabet=args.alphabet,
        prefix=args.prefix,
    )
    return make_codec(config, args.prefix_separator)


def _run_encode(codec: Hashids, args: argparse.Namespace) -> str:
    return codec.encode(args.numbers)


def _run_decode(codec: Hashids, args: argparse.Namespace) -> str:
    if args.first:
        value = codec.decode(args.hashid)
        return "" if value is None else str(value)
    return " ".join(str(value) for value in codec.decode_all(args.hashid))


def _run_encode_hex(codec: Hashids, args: argparse.Namespace) -> str:
    return codec.encode_hex(args.hex)


def _run_decode_hex(codec: Hashids, args: argparse.Namespace) -> str:
    return codec.decode_hex(args.hashid)


_COMMANDS: Dict[str, Callable[[Hashids, argparse.Namespace], str]] = {
    "encode": _run_encode,
    "decode": _run_decode,
    "encode-hex": _run_encode_hex,
    "decode-hex": _run_decode_hex,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logger(
        args.log_file,
        console=not args.no_console_log,
        level=getattr(logging, args.log_level),
    )

    try:
        codec = _build_codec(args)
    except (ConfigurationError, ValueError) as exc:
        LOG.debug("codec construction failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    result = _COMMANDS[args.command](codec, args)
    if args.command == "encode" and codec.prefix is not None:
        # A prefix-only output carries no encoded numbers.
        empty = result == codec.prefix + codec.prefix_separator
    else:
        empty = not result
    print(result)
    if empty:
        LOG.warning("%s produced no output", args.command)
        return EXIT_EMPTY
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
