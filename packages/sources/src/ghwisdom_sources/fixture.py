"""FixtureSource — replays issues and comments from a JSON file.

Lets a report be regenerated without network access, and gives tests a
deterministic data source. File format:

    {
      "issues": [ <search item>, ... ],
      "issue_comments":  {"<number>": [ <comment>, ... ]},
      "review_comments": {"<number>": [ <comment>, ... ]}
    }

The search query is ignored: a fixture file represents a single query.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ghwisdom_sources.base import BaseSource, SourceError, by_author

logger = logging.getLogger(__name__)


class FixtureSource(BaseSource):
    def __init__(self, path: str):
        self._path = Path(path)
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as e:
            raise SourceError(f"Could not read fixture {path}: {e}")
        except json.JSONDecodeError as e:
            raise SourceError(f"Malformed fixture {path}: {e}")
        if not isinstance(data, dict):
            raise SourceError(f"Fixture {path} must contain a JSON object")
        self._issues = data.get("issues") or []
        self._issue_comments = data.get("issue_comments") or {}
        self._review_comments = data.get("review_comments") or {}

    def search_issues(self, query: str, limit: int) -> list[dict]:
        logger.debug("Replaying %d issue(s) from %s", len(self._issues), self._path)
        return list(self._issues[:limit])

    def list_issue_comments(self, repo: str, number: int, author: str) -> list[dict]:
        return by_author(self._issue_comments.get(str(number), []), author)

    def list_review_comments(self, repo: str, number: int, author: str) -> list[dict]:
        return by_author(self._review_comments.get(str(number), []), author)
