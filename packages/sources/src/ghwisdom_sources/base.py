"""Abstract comment source interface.

Every backend (gh CLI, GitHub REST through PyGithub, JSON fixtures) implements
this interface. The pipeline depends on BaseSource — not on a concrete
backend — so backends are swappable and the pipeline is testable offline.

All methods return GitHub REST-shaped dicts:

  search item:  {"number", "title", "html_url", "pull_request"}
  comment:      {"body", "created_at", "user": {"login"}, "reactions": {"total_count"}}
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SourceError(Exception):
    """A backend call failed. The message is the backend's own error text."""


class BaseSource(ABC):
    """Read-only access to issues and comments on a hosted repository.

    Implementations raise SourceError for every failure they can detect so
    callers decide what is fatal and what is tolerated.
    """

    @abstractmethod
    def search_issues(self, query: str, limit: int) -> list[dict]:
        """Return search results for an issue/PR query, in backend order.

        Implementations may return more than ``limit`` items; callers truncate.
        """

    @abstractmethod
    def list_issue_comments(self, repo: str, number: int, author: str) -> list[dict]:
        """Return top-level discussion comments on an issue or PR written by ``author``."""

    @abstractmethod
    def list_review_comments(self, repo: str, number: int, author: str) -> list[dict]:
        """Return inline code-review comments on a PR written by ``author``."""

    def close(self) -> None:
        """Release any resources held by the source.

        Default is a no-op so callers can always call close() safely.
        """


def by_author(comments: list[dict], author: str) -> list[dict]:
    """Keep comments whose ``user.login`` equals ``author``."""
    return [c for c in comments if ((c.get("user") or {}).get("login")) == author]
