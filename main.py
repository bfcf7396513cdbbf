#!/usr/bin/env python3
"""
Product Key Validation Tool - Main Entry Point.

Usage:
    python main.py validate <key> [keys...] [--json]
    python main.py checksum <digits>
    python main.py formats
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv
load_dotenv()  # Load .env file if present

from config.settings import DEFAULT_OUTPUT, LOG_FORMAT, LOG_LEVEL
from productkey import ProductKeyError, digit_sum, list_formats, validate
from productkey.checksum import key_bytes

logger = logging.getLogger(__name__)


# ============================================================
# Commands
# ============================================================

def _display(key: str) -> str:
    """Printable form of a key, with undecodable bytes shown as \\xNN."""
    return key_bytes(key).decode("utf-8", "backslashreplace")


def cmd_validate(args):
    """Validate one or more product keys."""
    results = [validate(key) for key in args.keys]

    for result in results:
        if not result.is_valid:
            logger.debug("Rejected %r: %s", result.product_key, result.error.description)

    if args.output == "json":
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for r in results:
            if r.is_valid:
                print(f"VALID   - {_display(r.product_key)}  release: {r.release.value}")
            else:
                print(f"INVALID - {_display(r.product_key)}  {r.error.value}: {r.error.description}")

    valid = sum(1 for r in results if r.is_valid)
    logger.info("Validated %d key(s): %d valid, %d invalid", len(results), valid, len(results) - valid)
    return 0 if valid == len(results) else 1


def cmd_checksum(args):
    """Show the mod-7 digit sum of a digit string."""
    try:
        total = digit_sum(args.digits)
    except ProductKeyError as exc:
        print(f"ERROR - {exc.reason.value}: {exc}")
        return 1
    status = "PASS" if total % 7 == 0 else "FAIL"
    print(f"Sum: {total}  ({total} % 7 = {total % 7})  [{status}]")
    return 0 if status == "PASS" else 1


def cmd_formats(args):
    """List known key formats."""
    formats = list_formats()
    print(f"\n{'Format':16s} {'Name':22s} {'Layout':32s} {'Status':12s}")
    print("-" * 84)
    for f in formats:
        status = "implemented" if f["implemented"] else "placeholder"
        print(f"{f['format']:16s} {f['name']:22s} {f['layout'] or '-':32s} {status:12s}")
    print(f"\nTotal: {len(formats)} format(s)")
    return 0


# ============================================================
# Parser
# ============================================================

def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Legacy product key validation tool"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    val = subparsers.add_parser("validate", help="Validate product keys")
    val.add_argument("keys", nargs="+", help="Product keys to validate")
    val.add_argument(
        "--json", dest="output", action="store_const", const="json", default=DEFAULT_OUTPUT,
        help="Print results as JSON",
    )
    val.set_defaults(func=cmd_validate)

    chk = subparsers.add_parser("checksum", help="Compute the mod-7 digit sum")
    chk.add_argument("digits", help="Digits to sum")
    chk.set_defaults(func=cmd_checksum)

    fmt = subparsers.add_parser("formats", help="List known key formats")
    fmt.set_defaults(func=cmd_formats)

    return parser


def main(argv=None):
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
