"""Comment collection — the target author's comments on each discovered issue."""

from __future__ import annotations

import logging

from rich.console import Console

from ghwisdom_core.models import Comment, Issue
from ghwisdom_sources.base import BaseSource, SourceError

console = Console()
logger = logging.getLogger(__name__)

PROGRESS_EVERY = 10


def fetch_comments_for_issue(source: BaseSource, issue: Issue, repo: str, user: str) -> list[Comment]:
    """Top-level comments, then inline review comments for pull requests.

    A failed fetch for this issue yields no comments instead of aborting the
    run: every issue is independent of the others.
    """
    try:
        raw_comments = source.list_issue_comments(repo, issue.number, user)
        review_comments = source.list_review_comments(repo, issue.number, user) if issue.is_pull_request else []
    except SourceError as e:
        logger.warning("Could not fetch comments for #%d, skipping: %s", issue.number, e)
        return []

    comments = [Comment.from_api(c, issue) for c in raw_comments]
    comments += [Comment.from_api(c, issue, is_inline_review=True) for c in review_comments]
    # Author check repeated here for backends that filter loosely.
    return [c for c in comments if c.author == user]


def collect_comments(source: BaseSource, issues: list[Issue], config: dict) -> list[Comment]:
    repo = config["repo"]
    user = config["user"]
    total = len(issues)

    collected: list[Comment] = []
    for idx, issue in enumerate(issues, 1):
        if idx % PROGRESS_EVERY == 0:
            console.print(f"   {idx}/{total}...", end="")
        comments = fetch_comments_for_issue(source, issue, repo, user)
        logger.debug("#%d: %d comment(s)", issue.number, len(comments))
        collected.extend(comments)
    console.print()

    return collected
