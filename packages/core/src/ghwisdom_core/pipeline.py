"""One-shot wisdom extraction: discover → collect → score/filter → categorize → render."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from rich.console import Console

from ghwisdom_core.categorize import categorize_comments, compile_rules
from ghwisdom_core.collector import collect_comments
from ghwisdom_core.discovery import discover_issues
from ghwisdom_core.models import WisdomReport
from ghwisdom_core.render import render_markdown
from ghwisdom_core.scoring import filter_substantive
from ghwisdom_sources.base import BaseSource

console = Console()
logger = logging.getLogger(__name__)


def run_pipeline(source: BaseSource, config: dict, generated_on: Optional[date] = None) -> WisdomReport:
    """Run every stage in order and return the rendered report without writing it.

    Raises SourceError if discovery fails and ConfigError for unusable
    category rules; per-issue comment failures are tolerated by the collector.
    """
    # Compile first so a bad rule fails before any network traffic.
    rules = compile_rules(config.get("categories"))
    repo, user = config["repo"], config["user"]

    console.print(f"🔍 Fetching issues/PRs where {user} commented on {repo}...", markup=False)
    issues = discover_issues(source, config)
    console.print(f"   Found {len(issues)} issues/PRs")

    console.print("📝 Fetching comments...")
    comments = collect_comments(source, issues, config)
    console.print(f"   Found {len(comments)} comments")

    min_length = config["min_comment_length"]
    console.print(f"🧹 Filtering substantive comments (>={min_length} chars)...")
    kept = filter_substantive(comments, min_length)
    console.print(f"   Kept {len(kept)} substantive comments")

    console.print("📊 Categorizing by topic...")
    buckets = categorize_comments(kept, rules)
    logger.debug("Buckets: %s", ", ".join(f"{b.label}={len(b.comments)}" for b in buckets))

    return WisdomReport(
        issues_found=len(issues),
        comments_found=len(comments),
        comments_kept=len(kept),
        buckets=buckets,
        markdown=render_markdown(buckets, config, generated_on),
    )
