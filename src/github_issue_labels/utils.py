"""
Utility functions for the GitHub issue labels tool.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(*, verbose: bool = False) -> None:
    """Configure logging for the copy run."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # PyGithub and urllib3 log every request at DEBUG
    library_level = logging.DEBUG if verbose else logging.WARNING
    for name in ("github", "urllib3"):
        logging.getLogger(name).setLevel(library_level)
