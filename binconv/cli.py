"""Command line entry point.

  binconv encode 50 --round-trip
  echo 110010 | binconv decode
  binconv demo --start 2 --end 10
  binconv serve --port 8000
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, TextIO

from .config import get_settings
from .exceptions import BinConvException, InvalidArgumentError
from .services.conversion_service import (
    DEFAULT_DEMO_END,
    DEFAULT_DEMO_START,
    ConversionService,
)
from .utils.binary import int_max
from .utils.logging import get_logger, setup_logging

logger = get_logger("cli")

_MAX_ECHO = 40


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binconv",
        description="Convert between decimal values and binary digits written as decimal integers.",
    )
    parser.add_argument(
        "--int-bits", type=int, default=None,
        help="emulate a signed integer of this width and fail on overflow",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log each conversion to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="decimal -> binary digits")
    enc.add_argument("value", nargs="?", help="value to encode (default: read stdin)")
    enc.add_argument("--round-trip", action="store_true", help="also print the value decoded again")

    dec = sub.add_parser("decode", help="binary digits -> decimal")
    dec.add_argument("value", nargs="?", help="value to decode (default: read stdin)")
    dec.add_argument("--strict", action="store_true", default=None,
                     help="reject digits other than 0 and 1")

    demo = sub.add_parser("demo", help="print encode and round trip for a range of values")
    demo.add_argument("--start", type=int, default=DEFAULT_DEMO_START)
    demo.add_argument("--end", type=int, default=DEFAULT_DEMO_END)

    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def _read_value(raw: Optional[str], stdin: TextIO) -> int:
    text = raw if raw is not None else stdin.readline()
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        shown = text if len(text) <= _MAX_ECHO else text[:_MAX_ECHO] + "..."
        raise InvalidArgumentError("value", f"Not an integer ({shown!r})") from None


def _serve(host: str, port: int, int_bits: Optional[int]) -> int:
    import uvicorn

    # The app reads its limits from the environment when uvicorn imports it.
    if int_bits is not None:
        os.environ["BinConv_IntBits"] = str(int_bits)
        get_settings.cache_clear()

    setup_logging()
    logger.info("Serving on %s:%s", host, port)
    uvicorn.run("binconv.main:app", host=host, port=port)
    return 0


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    args = _build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    # An encoding has about 3.3 times the digits of its input, so
    # inputs of a few thousand bits already pass the 4300-digit limit of
    # int <-> str conversion.
    sys.set_int_max_str_digits(0)

    try:
        if args.int_bits is not None:
            int_max(args.int_bits)
        if args.command == "serve":
            return _serve(args.host, args.port, args.int_bits)

        setup_logging(stream=sys.stderr, debug=True if args.verbose else None)
        service = ConversionService(get_settings(), int_bits=args.int_bits)
        if args.command == "encode":
            result = service.encode(_read_value(args.value, stdin))
            print(result.binary)
            if args.round_trip:
                print(service.decode(result.binary, strict=True).decimal)
        elif args.command == "decode":
            print(service.decode(_read_value(args.value, stdin), strict=args.strict).decimal)
        elif args.command == "demo":
            for row in service.demo(args.start, args.end):
                print(row.binary)
                print(row.roundTrip)
    except BinConvException as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
