"""Topic classification by ordered regex rules.

Rules are evaluated in order against the comment body plus its issue title;
the first match wins and nothing matching lands in "Uncategorized". The
classifier is total and deterministic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ghwisdom_core.config import ConfigError
from ghwisdom_core.models import Bucket, Comment

UNCATEGORIZED = "Uncategorized"

DEFAULT_CATEGORIES: list[tuple[str, str]] = [
    ("LiveView", r"live_?view|live_?component|phx-|socket|assign|mount|handle_"),
    ("Channels & PubSub", r"channel|pubsub|socket|broadcast|presence"),
    ("Routing", r"route|plug|pipeline|scope|~p|verified_routes"),
    ("Controllers & Views", r"controller|view|render|template|layout|component"),
    ("Ecto Integration", r"ecto|repo|changeset|schema|query"),
    ("Testing", r"test|assert|mock|fixture|conn_?test"),
    ("Performance", r"perform|optimi|fast|slow|memory|cache"),
    ("Security", r"secur|auth|csrf|token|protect|sanitize"),
    ("Configuration", r"config|endpoint|application|env"),
    ("Error Handling", r"error|exception|rescue|catch|fault"),
    ("Best Practices", r"pattern|practice|recommend|should|prefer|avoid|instead"),
]


@dataclass(frozen=True)
class CategoryRule:
    label: str
    pattern: re.Pattern


def compile_rules(categories: Optional[list] = None) -> list[CategoryRule]:
    """Compile ``categories`` (a list of {label, pattern} mappings) or the built-in rules.

    Raises ConfigError for a malformed entry or an invalid regex.
    """
    if categories is None:
        pairs = DEFAULT_CATEGORIES
    else:
        pairs = []
        for entry in categories:
            if not isinstance(entry, dict) or not entry.get("label") or not entry.get("pattern"):
                raise ConfigError(f"Each category needs a label and a pattern, got: {entry!r}")
            pairs.append((str(entry["label"]), str(entry["pattern"])))

    rules = []
    for label, pattern in pairs:
        try:
            rules.append(CategoryRule(label, re.compile(pattern, re.IGNORECASE)))
        except re.error as e:
            raise ConfigError(f"Invalid pattern for category {label!r}: {e}")
    return rules


def classify(comment: Comment, rules: list[CategoryRule]) -> str:
    text = f"{comment.body} {comment.issue_title}"
    for rule in rules:
        if rule.pattern.search(text):
            return rule.label
    return UNCATEGORIZED


def categorize_comments(comments: list[Comment], rules: list[CategoryRule]) -> list[Bucket]:
    """Partition ``comments`` into non-empty buckets, largest first.

    Ties in size keep rule order, with Uncategorized after every rule. Members
    keep their incoming (score) order.
    """
    order = [rule.label for rule in rules]
    if UNCATEGORIZED not in order:
        order.append(UNCATEGORIZED)
    buckets = {label: Bucket(label) for label in order}

    for comment in comments:
        buckets[classify(comment, rules)].comments.append(comment)

    non_empty = [b for b in buckets.values() if b.comments]
    return sorted(non_empty, key=lambda b: len(b.comments), reverse=True)
