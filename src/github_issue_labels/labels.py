"""
Copying of issue labels between repositories of one organization.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from . import github_utils as ghu
from .models import CopyStatistics, Label
from .presentation import colorize_label

if TYPE_CHECKING:
    from github import Github

logger: logging.Logger = logging.getLogger(__name__)

WILDCARD: Final[str] = "*"

# Labels GitHub provisions in every new repository
DEFAULT_LABELS: Final[tuple[str, ...]] = (
    "bug",
    "duplicate",
    "enhancement",
    "help wanted",
    "invalid",
    "question",
    "wontfix",
)


def copy(
    client: Github,
    organization: str,
    source: str,
    target: str,
    *,
    remove_defaults: bool = False,
) -> CopyStatistics:
    """Copy labels from source to target, where target may be the wildcard '*'."""
    if target == WILDCARD:
        return copy_labels_to_all(client, organization, source, remove_defaults=remove_defaults)
    return copy_labels(client, organization, source, target, remove_defaults=remove_defaults)


def copy_labels_to_all(
    client: Github,
    organization: str,
    source: str,
    *,
    remove_defaults: bool = False,
) -> CopyStatistics:
    """Copy labels from source to every other repository of the organization.

    Targets are processed one after another in listing order. A failure on one
    target aborts the run; labels already copied to earlier targets stay.
    """
    statistics = CopyStatistics()
    for repo_name in ghu.get_organization_repo_names(client, organization):
        if repo_name == source:
            continue
        statistics += copy_labels(client, organization, source, repo_name, remove_defaults=remove_defaults)
    return statistics


def copy_labels(
    client: Github,
    organization: str,
    source: str,
    target: str,
    *,
    remove_defaults: bool = False,
) -> CopyStatistics:
    """Copy labels from one repository to another within the organization.

    Args:
        client: Authenticated GitHub client
        organization: Organization owning both repositories
        source: Name of the repository to read labels from
        target: Name of the repository to write labels to
        remove_defaults: Delete GitHub default labels from target unless source defines them

    Returns:
        CopyStatistics with one count per action taken
    """
    statistics = CopyStatistics()
    source_path = f"{organization}/{source}"
    target_path = f"{organization}/{target}"

    if source_path == target_path:
        logger.info(f"Skipping {source_path}")
        statistics.skipped += 1
        return statistics

    logger.info(f"Updating {target_path}")
    source_repo = client.get_repo(source_path)
    target_repo = client.get_repo(target_path)

    if remove_defaults:
        for label_name in DEFAULT_LABELS:
            if ghu.get_label(source_repo, label_name) is not None:
                continue
            current_label = ghu.get_label(target_repo, label_name)
            if current_label is None:
                continue
            colorized = colorize_label(Label.from_github(current_label))
            if ghu.delete_label(current_label):
                logger.info(f"{target_path}: {colorized} deleted")
                statistics.deleted += 1
            else:
                logger.error(f"{target_path}: {colorized} was not deleted by error")
                statistics.delete_failed += 1

    for source_label in source_repo.get_labels():
        label = Label.from_github(source_label)
        colorized = colorize_label(label)
        current_label = ghu.get_label(target_repo, label.name)

        if current_label is None:
            _ = target_repo.create_label(name=label.name, color=label.color)
            logger.info(f"{target_path}: {colorized} added")
            statistics.added += 1
            continue

        current = Label.from_github(current_label)
        if current.matches(label):
            logger.info(f"{target_path}: {colorized} was not changed")
            statistics.unchanged += 1
        else:
            current_label.edit(name=label.name, color=label.color)
            logger.info(f"{target_path}: {colorize_label(current)} updated to {colorized}")
            statistics.updated += 1

    return statistics
