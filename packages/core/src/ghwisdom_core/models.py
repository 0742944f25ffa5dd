"""Pipeline data models.

Built from the REST-shaped dicts returned by ghwisdom_sources so no stage
after collection touches raw API payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Issue:
    """An issue or pull request the target author commented on."""

    number: int
    title: str
    url: str
    is_pull_request: bool

    @classmethod
    def from_api(cls, item: dict) -> Issue:
        return cls(
            number=item["number"],
            title=item.get("title") or "",
            url=item.get("html_url") or "",
            is_pull_request=item.get("pull_request") is not None,
        )


@dataclass
class Comment:
    """One comment by the target author, stamped with its parent issue.

    ``wisdom_score`` is filled in once by the scorer and not touched afterwards.
    """

    body: str
    author: str
    created_at: str  # ISO-8601 timestamp as returned by the API
    reaction_count: int
    is_inline_review: bool
    issue_number: int
    issue_title: str
    issue_url: str
    is_pull_request: bool
    wisdom_score: int = 0

    @classmethod
    def from_api(cls, raw: dict, issue: Issue, is_inline_review: bool = False) -> Comment:
        return cls(
            body=raw.get("body") or "",
            author=(raw.get("user") or {}).get("login", ""),
            created_at=raw.get("created_at") or "",
            reaction_count=(raw.get("reactions") or {}).get("total_count") or 0,
            is_inline_review=is_inline_review,
            issue_number=issue.number,
            issue_title=issue.title,
            issue_url=issue.url,
            is_pull_request=issue.is_pull_request,
        )


@dataclass
class Bucket:
    """A category label and the comments assigned to it, in score order."""

    label: str
    comments: list[Comment] = field(default_factory=list)


@dataclass
class WisdomReport:
    """Result of one pipeline run, handed back to the CLI for writing."""

    issues_found: int
    comments_found: int
    comments_kept: int
    buckets: list[Bucket]
    markdown: str
