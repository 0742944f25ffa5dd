"""GhCliSource — comments fetched by shelling out to the GitHub CLI.

Why gh as the default source:
- Zero config: anyone who ran `gh auth login` is already authenticated, and
  gh handles enterprise hosts, SSO and token refresh on its own.
- Pagination for free: `gh api --paginate` walks every page, and `--jq`
  reduces each page to a single JSON array line before it reaches us.

Output format: with --paginate and --jq, gh prints one JSON value per page on
its own line. Every line must decode to a JSON array; arrays are concatenated.
"""

from __future__ import annotations

import json
import logging
import subprocess

from ghwisdom_sources.base import BaseSource, SourceError

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 120


class GhCliSource(BaseSource):
    """Runs `gh api` subprocesses; every failure becomes a SourceError."""

    def __init__(self, gh_bin: str = "gh", timeout: float = _DEFAULT_TIMEOUT):
        self._gh_bin = gh_bin
        self._timeout = timeout

    def search_issues(self, query: str, limit: int) -> list[dict]:
        # The search endpoint has no server-side limit flag; gh walks every page
        # and the caller truncates.
        return self._api(
            "search/issues",
            "--paginate",
            "-X",
            "GET",
            "-f",
            f"q={query}",
            "-f",
            "per_page=100",
            "-f",
            "sort=updated",
            "--jq",
            ".items",
        )

    def list_issue_comments(self, repo: str, number: int, author: str) -> list[dict]:
        return self._api(f"repos/{repo}/issues/{number}/comments", "--paginate", "--jq", _author_filter(author))

    def list_review_comments(self, repo: str, number: int, author: str) -> list[dict]:
        return self._api(f"repos/{repo}/pulls/{number}/comments", "--paginate", "--jq", _author_filter(author))

    def _api(self, endpoint: str, *args: str) -> list[dict]:
        cmd = [self._gh_bin, "api", endpoint, *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True, timeout=self._timeout, check=False)
        except FileNotFoundError:
            raise SourceError(f"{self._gh_bin} not found. Install the GitHub CLI: https://cli.github.com/")
        except subprocess.TimeoutExpired:
            raise SourceError(f"gh api {endpoint} timed out after {self._timeout}s")

        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()
            raise SourceError(stderr or f"gh api {endpoint} exited with status {proc.returncode}")

        return decode_pages(proc.stdout)


def decode_pages(output: str) -> list[dict]:
    """Concatenate the JSON arrays printed one per line by `gh api --paginate --jq`."""
    items: list[dict] = []
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            page = json.loads(line)
        except json.JSONDecodeError as e:
            raise SourceError(f"Malformed JSON from gh: {e}")
        if not isinstance(page, list):
            raise SourceError(f"Expected a JSON array from gh, got {type(page).__name__}")
        items.extend(page)
    return items


def _author_filter(author: str) -> str:
    # json.dumps gives a correctly escaped jq string literal.
    return f"[.[] | select(.user.login == {json.dumps(author)})]"
