#!/usr/bin/env python3
"""CLI that composes a response from decorators and prints its wire form."""
# ruff: noqa: E402

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import LOG_LEVEL
from content_type import PRESETS, ContentTypeError, with_type
from decorators import with_body, with_headers, with_status
from response import HTTPResponse, empty_response, print_response


def build_response(args: argparse.Namespace) -> HTTPResponse:
    response = empty_response()
    if args.status is not None:
        response = with_status(response, args.status)
    if args.body is not None:
        response = with_body(response, args.body)
    if args.header:
        response = with_headers(response, *args.header)
    if args.type is not None:
        response = with_type(response, args.type, args.charset)
    elif args.preset is not None:
        response = PRESETS[args.preset](response, args.charset)
    return response


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--status", type=int, default=None)
    parser.add_argument("--body", default=None)
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        help="Raw 'Name: Value' line, may be repeated",
    )
    kind = parser.add_mutually_exclusive_group()
    kind.add_argument("--type", default=None, help="MIME type, e.g. text/html")
    kind.add_argument("--preset", choices=sorted(PRESETS), default=None)
    parser.add_argument("--charset", default=None)
    parser.add_argument("--log-level", default=LOG_LEVEL)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.charset is not None and args.type is None and args.preset is None:
        parser.error("--charset requires --type or --preset")
    logging.basicConfig(level=args.log_level.upper())
    try:
        response = build_response(args)
    except ContentTypeError as exc:
        print(f"Content type error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Invalid response: {exc}", file=sys.stderr)
        return 2
    sys.stdout.write(print_response(response))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
