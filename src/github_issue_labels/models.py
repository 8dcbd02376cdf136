"""Data models for labels and the outcome of copying them.

Labels are correlated across repositories by name only; the models carry no
repository identity of their own.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from github.Label import Label as GithubLabel


@dataclass(frozen=True)
class Label:
    """An issue label as defined in one repository."""

    name: str
    color: str  # Hex color without '#' prefix (e.g., "ff0000")

    @classmethod
    def from_github(cls, label: GithubLabel) -> Label:
        return cls(name=label.name, color=label.color)

    def matches(self, other: Label) -> bool:
        """Whether two labels carry the same name and color (color compared case-insensitively)."""
        return self.name == other.name and self.color.lower() == other.color.lower()


@dataclass
class CopyStatistics:
    """Counters of the actions taken while copying labels."""

    added: int = 0
    updated: int = 0
    unchanged: int = 0
    deleted: int = 0
    delete_failed: int = 0
    skipped: int = 0

    def __add__(self, other: CopyStatistics) -> CopyStatistics:
        return CopyStatistics(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})

    @property
    def mutations(self) -> int:
        """Number of create, update and delete calls that went through."""
        return self.added + self.updated + self.deleted

    def summary(self) -> str:
        return ", ".join(f"{f.name}={getattr(self, f.name)}" for f in fields(self))
