from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .document import load_selector
from .errors import SelectorError
from .logging_config import configure_logging
from .settings import load_settings

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build CSS selectors from selector documents")
    parser.add_argument("--config", type=Path, default=None, help="Path to a TOML config file")
    parser.add_argument("--log-level", default=None, help="Override logging level")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject combinators other than ' ', '+', '~' and '>'",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Print the selector string for a document")
    build.add_argument("document", help="Path to a JSON selector document, or '-' for stdin")

    check = sub.add_parser("check", help="Validate a document without printing the selector")
    check.add_argument("document", help="Path to a JSON selector document, or '-' for stdin")
    return parser.parse_args(argv)


def _read_document(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    overrides: dict = {}
    if args.strict:
        overrides["strict_combinators"] = True
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}
    try:
        settings = load_settings(args.config, overrides)
    except (OSError, ValueError) as exc:
        print(f"error: invalid settings: {exc}", file=sys.stderr)
        return 2
    configure_logging(level=settings.logging.level, jsonl=settings.logging.jsonl)

    try:
        text = _read_document(args.document)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read document: {exc}", file=sys.stderr)
        return 2
    try:
        selector = load_selector(text, settings=settings)
    except ValidationError as exc:
        print(f"error: invalid selector document: {exc}", file=sys.stderr)
        return 2
    except SelectorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.command == "build":
        print(selector.stringify())
        return 0
    if args.command == "check":
        logger.debug("Document %s is valid", args.document)
        print("ok")
        return 0
    raise SystemExit(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
