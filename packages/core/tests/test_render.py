"""Tests for Markdown rendering and report writing."""

from datetime import date

import pytest

from ghwisdom_core.models import Bucket, Comment
from ghwisdom_core.render import format_bucket, format_comment, render_markdown, write_report

CONFIG = {"repo": "phoenixframework/phoenix", "user": "chrismccord", "title": "Phoenix Wisdom", "per_category_limit": 20}


def _make_comment(body="Some body", reactions=0, score=0, inline=False, title="Plug order") -> Comment:
    return Comment(
        body=body,
        author="chrismccord",
        created_at="2023-11-05T10:20:30Z",
        reaction_count=reactions,
        is_inline_review=inline,
        issue_number=42,
        issue_title=title,
        issue_url="https://github.com/phoenixframework/phoenix/issues/42",
        is_pull_request=inline,
        wisdom_score=score,
    )


class TestFormatComment:
    def test_heading_links_issue(self):
        text = format_comment(_make_comment())
        assert text.startswith("### [Plug order](https://github.com/phoenixframework/phoenix/issues/42)\n")

    def test_comment_badge_and_date(self):
        assert "💬 Comment | 2023-11-05\n" in format_comment(_make_comment())

    def test_code_review_badge(self):
        assert "🔍 Code Review | 2023-11-05" in format_comment(_make_comment(inline=True))

    def test_reaction_badge_only_when_positive(self):
        assert "👍" not in format_comment(_make_comment(reactions=0))
        assert " | 👍 3" in format_comment(_make_comment(reactions=3))

    def test_score_badge_only_above_five(self):
        assert "📚" not in format_comment(_make_comment(score=5))
        assert " | 📚 6" in format_comment(_make_comment(score=6))

    def test_body_is_stripped(self):
        text = format_comment(_make_comment(body="\n\n  Indented advice.  \n\n"))
        assert text.endswith("\nIndented advice.\n")


class TestFormatBucket:
    def test_heading_counts_all_members(self):
        bucket = Bucket("Routing", [_make_comment() for _ in range(25)])
        assert format_bucket(bucket, limit=20).startswith("## Routing (25 comments)\n")

    def test_truncates_to_limit(self):
        bucket = Bucket("Routing", [_make_comment() for _ in range(25)])
        assert format_bucket(bucket, limit=20).count("### [") == 20

    def test_fewer_than_limit_all_rendered(self):
        bucket = Bucket("Routing", [_make_comment() for _ in range(3)])
        assert format_bucket(bucket, limit=20).count("### [") == 3

    def test_members_in_given_order(self):
        bucket = Bucket("Routing", [_make_comment(body="first", score=9), _make_comment(body="second", score=7)])
        text = format_bucket(bucket, limit=20)
        assert text.index("first") < text.index("second")


class TestRenderMarkdown:
    def test_header(self):
        doc = render_markdown([], CONFIG, generated_on=date(2024, 2, 29))
        assert doc.startswith("# Phoenix Wisdom from chrismccord\n")
        assert "[phoenixframework/phoenix](https://github.com/phoenixframework/phoenix)" in doc
        assert "> Generated: 2024-02-29" in doc

    def test_sections_in_bucket_order_separated(self):
        buckets = [Bucket("Testing", [_make_comment(), _make_comment()]), Bucket("Routing", [_make_comment()])]
        doc = render_markdown(buckets, CONFIG, generated_on=date(2024, 1, 1))
        assert doc.index("## Testing (2 comments)") < doc.index("## Routing (1 comments)")
        assert "\n---\n\n## Routing" in doc

    def test_per_category_limit_from_config(self):
        buckets = [Bucket("Testing", [_make_comment() for _ in range(5)])]
        doc = render_markdown(buckets, {**CONFIG, "per_category_limit": 2}, generated_on=date(2024, 1, 1))
        assert doc.count("### [") == 2

    def test_same_input_same_output(self):
        buckets = [Bucket("Testing", [_make_comment(score=12, reactions=1)])]
        first = render_markdown(buckets, CONFIG, generated_on=date(2024, 1, 1))
        second = render_markdown(buckets, CONFIG, generated_on=date(2024, 1, 1))
        assert first == second

    def test_defaults_to_today(self):
        doc = render_markdown([], CONFIG)
        assert "> Generated: 20" in doc


class TestWriteReport:
    def test_writes_file(self, tmp_path):
        out = tmp_path / "wisdom.md"
        write_report("# Hello\n", str(out))
        assert out.read_text(encoding="utf-8") == "# Hello\n"

    def test_overwrites_existing_file(self, tmp_path):
        out = tmp_path / "wisdom.md"
        out.write_text("old content that is much longer than the new one")
        write_report("new", str(out))
        assert out.read_text(encoding="utf-8") == "new"

    def test_preserves_emoji(self, tmp_path):
        out = tmp_path / "wisdom.md"
        write_report("💬 Comment", str(out))
        assert out.read_text(encoding="utf-8") == "💬 Comment"

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            write_report("x", str(tmp_path / "missing" / "wisdom.md"))
