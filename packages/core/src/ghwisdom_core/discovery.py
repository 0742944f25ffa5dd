"""Issue discovery — find every issue/PR the target author commented on."""

from __future__ import annotations

import logging

from ghwisdom_core.models import Issue
from ghwisdom_sources.base import BaseSource, SourceError

logger = logging.getLogger(__name__)


def build_search_query(repo: str, user: str) -> str:
    return f"repo:{repo} commenter:{user}"


def discover_issues(source: BaseSource, config: dict) -> list[Issue]:
    """Return at most ``max_issues`` issues in backend (most recently updated) order.

    SourceError is not caught here: a failed search aborts the run. Search
    items without an issue number are malformed and abort it too.
    """
    query = build_search_query(config["repo"], config["user"])
    max_issues = config["max_issues"]
    logger.debug("Searching issues: %s (limit %d)", query, max_issues)
    items = source.search_issues(query, limit=max_issues)[:max_issues]
    try:
        return [Issue.from_api(item) for item in items]
    except (KeyError, TypeError, AttributeError) as e:
        raise SourceError(f"Malformed search result: {e!r}")
