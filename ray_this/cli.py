from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import PublishSettings
from .editor import (
    ConsolePresenter,
    FileTextSource,
    NullOpener,
    StreamTextSource,
    TextSource,
    WebBrowserOpener,
)
from .exception_handler import LanguageTableError, setup_logging
from .formatting import PrettierFormatter
from .language import load_language_table
from .orchestration import SnippetPublisher


logger = logging.getLogger("ray_this")

COLOR_CHOICES = ("candy", "breeze", "midnight", "sunset")
PADDING_CHOICES = ("16", "32", "64", "128")
BOOL_CHOICES = ("true", "false")


def parse_line_range(value: str) -> tuple[int, int]:
    """Parse ``START:END`` (or a single ``LINE``) into an inclusive range."""
    start_text, sep, end_text = value.partition(":")
    try:
        start = int(start_text)
        end = int(end_text) if sep else start
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid line range: {value}")
    if start < 1 or end < start:
        raise argparse.ArgumentTypeError(f"Invalid line range: {value}")
    return start, end


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ray-this",
        description="Publish a code selection as a ray.so screenshot URL",
    )
    parser.add_argument(
        "path",
        help="File containing the snippet, or '-' to read it from stdin",
    )
    parser.add_argument(
        "--lines",
        type=parse_line_range,
        default=None,
        help="Inclusive 1-based line range to publish, e.g. 10:24 (default: whole file)",
    )
    parser.add_argument(
        "--file-name",
        dest="file_name",
        default=None,
        help="File name used for language detection and the title when reading stdin",
    )
    parser.add_argument("--title", default=None, help="Snippet title (default: file name)")
    parser.add_argument(
        "--colors",
        choices=COLOR_CHOICES,
        default=None,
        help="Color scheme (defaults to RAY_THIS_COLORS or candy)",
    )
    parser.add_argument(
        "--padding",
        choices=PADDING_CHOICES,
        default=None,
        help="Padding around the code (defaults to RAY_THIS_PADDING or 32)",
    )
    parser.add_argument(
        "--background",
        choices=BOOL_CHOICES,
        default=None,
        help="Render an opaque background",
    )
    parser.add_argument(
        "--dark-mode",
        dest="dark_mode",
        choices=BOOL_CHOICES,
        default=None,
        help="Render the code on a dark window",
    )
    parser.add_argument(
        "--filetypes",
        default=None,
        help="Path to a JSON file type table (defaults to the bundled table)",
    )
    parser.add_argument(
        "--no-format",
        dest="format",
        action="store_false",
        help="Publish the selection without running prettier",
    )
    parser.add_argument(
        "--no-open",
        dest="open",
        action="store_false",
        help="Print the URL without opening a browser",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging level (defaults to RAY_THIS_LOG_LEVEL or WARNING)",
    )
    return parser


def build_settings(args: argparse.Namespace) -> PublishSettings:
    settings = PublishSettings.from_env()
    for field in ("colors", "padding", "background", "dark_mode", "log_level"):
        value = getattr(args, field)
        if value is not None:
            setattr(settings, field, value)
    if args.filetypes:
        settings.filetypes_path = args.filetypes
    return settings


def build_source(args: argparse.Namespace) -> TextSource:
    if args.path == "-":
        return StreamTextSource(sys.stdin, file_name=args.file_name)
    return FileTextSource(args.path, lines=args.lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = build_settings(args)
    setup_logging(settings.log_level)

    try:
        table = load_language_table(settings.filetypes_path)
    except LanguageTableError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    formatter = None
    if args.format:
        formatter = PrettierFormatter(
            settings.prettier_command,
            parser=settings.prettier_parser,
            timeout=settings.format_timeout,
        )

    publisher = SnippetPublisher(
        source=build_source(args),
        opener=WebBrowserOpener() if args.open else NullOpener(),
        presenter=ConsolePresenter(),
        formatter=formatter,
        table=table,
        settings=settings,
        options={"title": args.title} if args.title else None,
    )

    try:
        snippet = publisher.publish()
    except KeyboardInterrupt:
        print("\n⚠️ Interrupted", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Fatal error while publishing snippet")
        print("\n❌ Fatal error occurred. See log for details.", file=sys.stderr)
        return 1

    if snippet is None:
        return 1

    logger.debug("Published %s as %s", snippet.title, snippet.language)
    return 0


if __name__ == "__main__":
    sys.exit(main())
