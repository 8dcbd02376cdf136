"""
Custom exception classes for the GitHub issue labels tool.
"""

from __future__ import annotations


class LabelCopyError(Exception):
    """Base exception for label copy errors."""
