"""
Command-line interface for the GitHub issue labels tool.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from . import __version__
from . import github_utils as ghu
from .labels import copy
from .utils import setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Copy GitHub issue labels between repositories")
    _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _ = parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="command")

    copy_parser = subparsers.add_parser(
        "copy",
        help="Copy issue labels from source to target repositories",
        description="Copy issue labels from source to target repositories",
    )

    # Positional arguments
    _ = copy_parser.add_argument("organization", help="GitHub organization owning the repositories")
    _ = copy_parser.add_argument("source", help="Repository name to copy labels from")
    _ = copy_parser.add_argument("target", help="Repository name to copy labels to, or '*' for all others")

    _ = copy_parser.add_argument(
        "--remove-defaults",
        action="store_true",
        default=False,
        help="Remove default GitHub issue labels not defined in source (by default do not)",
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    args = parse_arguments(argv)

    # Setup logging
    verbose: bool = getattr(args, "verbose", False)
    setup_logging(verbose=verbose)
    logger = logging.getLogger(__name__)

    try:
        client = ghu.get_client(ghu.get_token())

        statistics = copy(
            client,
            args.organization,
            args.source,
            args.target,
            remove_defaults=args.remove_defaults,
        )
    except Exception:
        logger.exception("Copying labels failed")
        sys.exit(1)

    logger.info(f"Done: {statistics.mutations} change(s) made ({statistics.summary()})")
    sys.exit(0)
