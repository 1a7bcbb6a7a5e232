#!/usr/bin/env python3

import argparse
import logging
import sys
from typing import List, Optional

from cliptext.config import get_settings
from cliptext.errors import ClipboardError
from cliptext.services.clipboard_service import ClipboardService
from cliptext.utils.codec import strip_trailing_newline

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cliptext",
        description="cliptext - Cross-platform text clipboard access"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser(
        "get",
        aliases=["get-clipboard-text"],
        help="Print the clipboard text"
    )
    get_parser.add_argument(
        "-r", "--raw",
        action="store_true",
        help="Print the text exactly as stored instead of line by line"
    )

    set_parser = subparsers.add_parser(
        "set",
        aliases=["set-clipboard-text"],
        help="Copy text to the clipboard (reads stdin when no items are given)"
    )
    set_parser.add_argument(
        "items",
        nargs="*",
        help="Text items, one per line"
    )
    set_parser.add_argument(
        "-w", "--width",
        type=positive_int,
        default=None,
        help="Maximum line width for formatted values (default: terminal width)"
    )
    set_parser.add_argument(
        "-p", "--pass-thru",
        action="store_true",
        help="Also print the text that was copied"
    )

    return parser.parse_args(argv)


def _run_get(service: ClipboardService, args: argparse.Namespace) -> None:
    result = service.get_text(raw=args.raw)
    if result is None:
        return
    if args.raw:
        sys.stdout.write(result)
        return
    for line in result:
        print(line)


def _run_set(service: ClipboardService, args: argparse.Namespace) -> None:
    items = args.items
    if not items and not sys.stdin.isatty():
        # Piped input carries its own final newline
        items = [strip_trailing_newline(sys.stdin.read())]

    result = service.set_text(items or None, width=args.width, pass_thru=args.pass_thru)
    if result is not None:
        print(result)


def main(argv: Optional[List[str]] = None, service: Optional[ClipboardService] = None) -> int:
    args = parse_args(argv)

    level = logging.INFO if args.verbose else get_settings().log_level
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    service = service or ClipboardService()

    try:
        if args.command in ("get", "get-clipboard-text"):
            _run_get(service, args)
        else:
            _run_set(service, args)
    except ClipboardError as e:
        logger.debug("Clipboard operation failed", exc_info=True)
        print(f"cliptext: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
