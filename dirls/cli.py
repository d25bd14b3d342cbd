"""Command-line front door for dirls.

Parses flags, resolves the working directory, and runs the listing
pipeline: collect, order, render. This is the only place the process exits
on a filesystem error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_layout, load_show_hidden, load_theme_name
from .listing_model import collect_entries, order_entries, working_directory
from .options import options_from_args
from .render import write_listing
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

logger = logging.getLogger("dirls")


def configure_logging() -> None:
    """Attach a single stderr handler to the package logger."""
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirls",
        description="List entries of the current directory.",
    )
    parser.add_argument("-l", dest="long_format", action="store_true", help="Use a long listing format.")
    parser.add_argument("-S", dest="sort_by_size", action="store_true", help="Sort by file size, largest first.")
    parser.add_argument("-r", dest="reverse", action="store_true", help="Reverse order while sorting.")
    parser.add_argument("-R", dest="recursive", action="store_true", help="List subdirectories recursively.")
    parser.add_argument("-a", dest="show_hidden", action="store_true", help="Do not ignore entries starting with '.'.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    return parser


def _color_disabled(no_color_flag: bool) -> bool:
    if no_color_flag:
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return not (callable(isatty) and isatty())


def _tolerate_undecodable_names(*streams: object) -> None:
    """Let names that are not valid in the locale encoding pass through as raw bytes."""
    for stream in streams:
        reconfigure = getattr(stream, "reconfigure", None)
        if callable(reconfigure):
            reconfigure(errors="surrogateescape")


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI flags and print the listing for the working directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Filesystem errors are logged and end the process with
    exit status 1.
    """
    args = build_parser().parse_args(argv)
    _tolerate_undecodable_names(sys.stdout, sys.stderr)
    configure_logging()

    directory = default_path
    if directory is None:
        directory, error = working_directory()
        if error is not None:
            logger.error("%s", error)
            raise SystemExit(1)

    options = options_from_args(args, default_show_hidden=load_show_hidden())
    entries, error = collect_entries(directory, options)
    if error is not None:
        logger.error("%s", error)
        raise SystemExit(1)

    entries = order_entries(entries, options)
    theme = resolve_theme(args.theme or load_theme_name(), no_color=_color_disabled(args.no_color))
    write_listing(entries, directory, options, load_layout(), theme)


if __name__ == "__main__":
    main()
