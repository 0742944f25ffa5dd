"""GithubApiSource — comments fetched through the GitHub REST API with PyGithub.

Useful where the gh CLI is not installed (containers, CI images) but a token
is available. Results are normalized to the same REST-shaped dicts the gh
source returns so the pipeline never sees PyGithub objects.

PyGithub raises GithubException for API errors but lets transport failures
from requests (connection resets, timeouts, exhausted retries) through
unchanged; both become SourceError.
"""

from __future__ import annotations

import itertools
import logging

from ghwisdom_sources.base import BaseSource, SourceError

logger = logging.getLogger(__name__)


class GithubApiSource(BaseSource):
    """Token-authenticated PyGithub client. One repo handle is cached per name."""

    def __init__(self, token: str):
        try:
            from github import Auth, Github
        except ImportError:
            raise ImportError("PyGithub is required for GithubApiSource. Install ghwisdom with its dependencies.")
        self._gh = Github(auth=Auth.Token(token), per_page=100)
        self._repos: dict = {}

    def search_issues(self, query: str, limit: int) -> list[dict]:
        from github import GithubException
        from requests.exceptions import RequestException

        try:
            results = self._gh.search_issues(query, sort="updated")
            return [_issue_to_dict(issue) for issue in itertools.islice(results, limit)]
        except (GithubException, RequestException) as e:
            raise SourceError(str(e))

    def list_issue_comments(self, repo: str, number: int, author: str) -> list[dict]:
        from github import GithubException
        from requests.exceptions import RequestException

        try:
            comments = self._get_repo(repo).get_issue(number).get_comments()
            return [_comment_to_dict(c) for c in comments if c.user is not None and c.user.login == author]
        except (GithubException, RequestException) as e:
            raise SourceError(str(e))

    def list_review_comments(self, repo: str, number: int, author: str) -> list[dict]:
        from github import GithubException
        from requests.exceptions import RequestException

        try:
            comments = self._get_repo(repo).get_pull(number).get_review_comments()
            return [_comment_to_dict(c) for c in comments if c.user is not None and c.user.login == author]
        except (GithubException, RequestException) as e:
            raise SourceError(str(e))

    def _get_repo(self, repo: str):
        if repo not in self._repos:
            self._repos[repo] = self._gh.get_repo(repo)
        return self._repos[repo]


def _issue_to_dict(issue) -> dict:
    return {
        "number": issue.number,
        "title": issue.title,
        "html_url": issue.html_url,
        # Non-None only for pull requests, matching the REST payload.
        "pull_request": {"html_url": issue.html_url} if issue.pull_request is not None else None,
    }


def _comment_to_dict(comment) -> dict:
    # One extra request per comment.
    total = comment.get_reactions().totalCount
    return {
        "body": comment.body,
        "created_at": comment.created_at.isoformat() if comment.created_at else "",
        "user": {"login": comment.user.login},
        "reactions": {"total_count": total},
    }
