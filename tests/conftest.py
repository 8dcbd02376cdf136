"""
Pytest configuration and fixtures.

Provides an in-memory stand-in for the parts of the PyGithub API the tool
touches, so that unit tests can assert on the resulting label state and on
the mutating calls made.
"""

from __future__ import annotations

import pytest
from github import UnknownObjectException


class FakeLabel:
    """Label object behaving like github.Label.Label."""

    def __init__(self, repo: FakeRepo, name: str, color: str) -> None:
        self._repo = repo
        self.name = name
        self.color = color

    def edit(self, name: str, color: str, description: str | None = None) -> None:
        self._repo.calls.append(("edit", self.name, name, color))
        del self._repo.labels[self.name]
        self.name = name
        self.color = color
        self._repo.labels[name] = self

    def delete(self) -> None:
        self._repo.calls.append(("delete", self.name))
        if self.name in self._repo.fail_deletes:
            raise UnknownObjectException(404, {"message": "Not Found"}, headers={})
        del self._repo.labels[self.name]


class FakeRepo:
    """Repository object behaving like github.Repository.Repository for labels."""

    def __init__(self, full_name: str, labels: dict[str, str] | None = None) -> None:
        self.full_name = full_name
        self.name = full_name.split("/", 1)[1]
        self.labels: dict[str, FakeLabel] = {}
        self.calls: list[tuple[str, ...]] = []
        self.fail_deletes: set[str] = set()
        for name, color in (labels or {}).items():
            self.labels[name] = FakeLabel(self, name, color)

    def get_labels(self) -> list[FakeLabel]:
        return list(self.labels.values())

    def get_label(self, name: str) -> FakeLabel:
        if name not in self.labels:
            raise UnknownObjectException(404, {"message": "Not Found"}, headers={})
        return self.labels[name]

    def create_label(self, name: str, color: str, description: str | None = None) -> FakeLabel:
        self.calls.append(("create", name, color))
        label = FakeLabel(self, name, color)
        self.labels[name] = label
        return label

    def label_state(self) -> dict[str, str]:
        return {name: label.color for name, label in self.labels.items()}


class FakeOrganization:
    def __init__(self, repos: list[FakeRepo]) -> None:
        self._repos = repos

    def get_repos(self) -> list[FakeRepo]:
        return list(self._repos)


class FakeGithub:
    """Client object behaving like github.Github for one organization."""

    def __init__(self, organization: str) -> None:
        self.organization = organization
        self.repos: dict[str, FakeRepo] = {}
        self.get_repo_calls: list[str] = []

    def add_repo(self, name: str, labels: dict[str, str] | None = None) -> FakeRepo:
        repo = FakeRepo(f"{self.organization}/{name}", labels)
        self.repos[repo.full_name] = repo
        return repo

    def get_repo(self, full_name: str) -> FakeRepo:
        self.get_repo_calls.append(full_name)
        if full_name not in self.repos:
            raise UnknownObjectException(404, {"message": "Not Found"}, headers={})
        return self.repos[full_name]

    def get_organization(self, login: str) -> FakeOrganization:
        if login != self.organization:
            raise UnknownObjectException(404, {"message": "Not Found"}, headers={})
        return FakeOrganization(list(self.repos.values()))


@pytest.fixture
def github() -> FakeGithub:
    """Fake GitHub client for the organization 'acme'."""
    return FakeGithub("acme")


@pytest.fixture(autouse=True)
def no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render labels as plain names so log lines can be compared verbatim."""
    monkeypatch.setenv("NO_COLOR", "1")

