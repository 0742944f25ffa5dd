"""Substantive-comment filter and wisdom scoring."""

from __future__ import annotations

import re

from ghwisdom_core.models import Comment

# Explanatory/justification language. Matches are counted non-overlapping.
WISDOM_INDICATORS = re.compile(
    r"because|reason|issue|problem|pitfall|careful|note that|important|actually|instead|prefer|"
    r"recommend|avoid|should|better|the way|internally|design|meant to|intended|works by|how we",
    re.IGNORECASE,
)

REACTION_WEIGHT = 10
KEYWORD_WEIGHT = 5
LENGTH_UNIT = 100


def count_wisdom_keywords(body: str) -> int:
    return len(WISDOM_INDICATORS.findall(body))


def wisdom_score(comment: Comment) -> int:
    """reactions * 10 + keyword matches * 5 + one point per full 100 characters."""
    body = comment.body
    return (
        comment.reaction_count * REACTION_WEIGHT
        + count_wisdom_keywords(body) * KEYWORD_WEIGHT
        + len(body) // LENGTH_UNIT
    )


def filter_substantive(comments: list[Comment], min_length: int) -> list[Comment]:
    """Drop comments shorter than ``min_length``, score the rest, sort by score descending.

    The length threshold is inclusive. The sort is stable, so equal scores keep
    collection order.
    """
    kept = [c for c in comments if len(c.body) >= min_length]
    for c in kept:
        c.wisdom_score = wisdom_score(c)
    return sorted(kept, key=lambda c: c.wisdom_score, reverse=True)
