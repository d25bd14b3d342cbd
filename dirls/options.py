"""Immutable listing options resolved once from command-line flags."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class Options:
    """Flags shared by collector, orderer, and renderer.

    ``reverse`` only has an effect together with ``sort_by_size``.
    """

    long_format: bool = False
    sort_by_size: bool = False
    reverse: bool = False
    recursive: bool = False
    show_hidden: bool = False


def options_from_args(args: argparse.Namespace, *, default_show_hidden: bool = False) -> Options:
    """Build ``Options`` from parsed CLI args.

    ``-a`` always enables hidden entries; without it the configured default
    applies.
    """
    return Options(
        long_format=bool(args.long_format),
        sort_by_size=bool(args.sort_by_size),
        reverse=bool(args.reverse),
        recursive=bool(args.recursive),
        show_hidden=bool(args.show_hidden) or default_show_hidden,
    )


__all__ = ["Options", "options_from_args"]
