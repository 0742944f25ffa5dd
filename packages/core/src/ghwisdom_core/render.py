"""Markdown rendering of categorized comments."""

from __future__ import annotations

from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional

from ghwisdom_core.models import Bucket, Comment

# Scores at or below this get no badge.
_SCORE_BADGE_THRESHOLD = 5


def format_comment(comment: Comment) -> str:
    type_badge = "🔍 Code Review" if comment.is_inline_review else "💬 Comment"
    day = comment.created_at[:10]
    reaction_badge = f" | 👍 {comment.reaction_count}" if comment.reaction_count > 0 else ""
    score_badge = f" | 📚 {comment.wisdom_score}" if comment.wisdom_score > _SCORE_BADGE_THRESHOLD else ""

    return (
        f"### [{comment.issue_title}]({comment.issue_url})\n"
        f"{type_badge} | {day}{reaction_badge}{score_badge}\n"
        f"\n"
        f"{comment.body.strip()}\n"
    )


def format_bucket(bucket: Bucket, limit: int) -> str:
    # The heading counts every member; only the first ``limit`` are rendered.
    rendered = "\n\n".join(format_comment(c) for c in bucket.comments[:limit])
    return f"## {bucket.label} ({len(bucket.comments)} comments)\n\n{rendered}\n"


def render_markdown(buckets: list[Bucket], config: dict, generated_on: Optional[date] = None) -> str:
    """Render the full document. ``generated_on`` defaults to today's UTC date."""
    generated_on = generated_on or datetime.now(timezone.utc).date()
    repo = config["repo"]
    limit = config.get("per_category_limit", 20)
    sections = "\n---\n\n".join(format_bucket(b, limit) for b in buckets)

    return (
        f"# {config.get('title', 'Phoenix Wisdom')} from {config['user']}\n"
        f"\n"
        f"> Auto-extracted substantive comments from [{repo}](https://github.com/{repo})\n"
        f"> Generated: {generated_on.isoformat()}\n"
        f"\n"
        f"---\n"
        f"\n"
        f"{sections}"
    )


def write_report(markdown: str, output_path: str) -> None:
    """Overwrite ``output_path`` with ``markdown``. OSError propagates to the caller."""
    Path(output_path).write_text(markdown, encoding="utf-8")
