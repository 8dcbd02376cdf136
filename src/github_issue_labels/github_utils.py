from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Final

from github import Auth, Github, GithubException, UnknownObjectException

from .exceptions import LabelCopyError

if TYPE_CHECKING:
    from github.Label import Label as GithubLabel
    from github.Repository import Repository

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)

_TOKEN_ENV_VARS: Final[tuple[str, ...]] = ("GH_TOKEN", "GITHUB_TOKEN")


def get_token() -> str | None:
    """Get GitHub token from env var GH_TOKEN, falling back to GITHUB_TOKEN."""
    for env_var in _TOKEN_ENV_VARS:
        token: str | None = os.environ.get(env_var)
        if token:
            return token

    logger.warning(f"No GitHub token found in {' or '.join(_TOKEN_ENV_VARS)}")
    return None


def get_client(token: str | None = None) -> Github:
    """Get a GitHub client using the token. PaginatedList results are drained on iteration."""
    if token:
        return Github(auth=Auth.Token(token))
    return Github()


def get_organization_repo_names(client: Github, organization: str) -> list[str]:
    """Names of all repositories in an organization, in the order GitHub lists them."""
    try:
        return [repo.name for repo in client.get_organization(organization).get_repos()]
    except GithubException as e:
        msg = f"Failed to list repositories of organization '{organization}': {e}"
        raise LabelCopyError(msg) from e


def get_label(repo: Repository, label_name: str) -> GithubLabel | None:
    """Fetch a label by exact name, or None when the repository has no such label."""
    try:
        return repo.get_label(label_name)
    except UnknownObjectException as e:
        if e.status == 404:
            return None
        raise


def delete_label(label: GithubLabel) -> bool:
    """Delete a label, reporting a vanished label through the return value.

    Only a 404 counts as a failed deletion; authentication, permission and
    server errors propagate and abort the run.
    """
    try:
        label.delete()
    except UnknownObjectException as e:
        if e.status != 404:
            raise
        logger.warning(f"Deleting label '{label.name}' failed: {e.status} {e.data}")
        return False
    return True
