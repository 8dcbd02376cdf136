"""
GitHub Issue Labels

Copies issue labels (name and color) from one repository to one or more
repositories of the same GitHub organization, optionally removing the GitHub
default labels first.
"""

from __future__ import annotations

# Package version
__version__ = "0.1.0"

from .exceptions import LabelCopyError
from .labels import DEFAULT_LABELS, copy, copy_labels, copy_labels_to_all
from .models import CopyStatistics, Label
from .utils import setup_logging

__all__ = [
    "DEFAULT_LABELS",
    "CopyStatistics",
    "Label",
    "LabelCopyError",
    "copy",
    "copy_labels",
    "copy_labels_to_all",
    "setup_logging",
]
