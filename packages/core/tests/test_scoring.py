"""Tests for the substantive-comment filter and wisdom scoring."""

from ghwisdom_core.models import Comment
from ghwisdom_core.scoring import count_wisdom_keywords, filter_substantive, wisdom_score


def _make_comment(body: str, reactions: int = 0, number: int = 1) -> Comment:
    return Comment(
        body=body,
        author="chrismccord",
        created_at="2024-01-02T03:04:05Z",
        reaction_count=reactions,
        is_inline_review=False,
        issue_number=number,
        issue_title="Question",
        issue_url=f"https://github.com/o/r/issues/{number}",
        is_pull_request=False,
    )


class TestThreshold:
    def test_comment_exactly_at_threshold_survives(self):
        kept = filter_substantive([_make_comment("x" * 100)], min_length=100)
        assert len(kept) == 1

    def test_comment_one_below_threshold_dropped(self):
        assert filter_substantive([_make_comment("x" * 99)], min_length=100) == []

    def test_zero_threshold_keeps_empty_body(self):
        assert len(filter_substantive([_make_comment("")], min_length=0)) == 1


class TestKeywords:
    def test_case_insensitive(self):
        assert count_wisdom_keywords("BECAUSE of a Pitfall") == 2

    def test_repeated_keyword_counted_each_time(self):
        assert count_wisdom_keywords("because because because") == 3

    def test_multi_word_keywords(self):
        assert count_wisdom_keywords("note that this works by magic") == 2

    def test_no_keywords(self):
        assert count_wisdom_keywords("x" * 300) == 0


class TestScore:
    def test_formula(self):
        comment = _make_comment("because pitfall " + "x" * 334, reactions=2)
        assert len(comment.body) == 350
        assert wisdom_score(comment) == 2 * 10 + 2 * 5 + 3

    def test_length_points_are_floored(self):
        assert wisdom_score(_make_comment("x" * 199)) == 1

    def test_more_reactions_never_lower_score(self):
        body = "prefer this " + "x" * 200
        scores = [wisdom_score(_make_comment(body, reactions=r)) for r in range(5)]
        assert scores == sorted(scores)

    def test_longer_body_never_lowers_score(self):
        scores = [wisdom_score(_make_comment("x" * n)) for n in range(0, 1000, 50)]
        assert scores == sorted(scores)

    def test_deterministic(self):
        comment = _make_comment("avoid this design " + "x" * 250, reactions=1)
        assert wisdom_score(comment) == wisdom_score(comment)


class TestFilterSubstantive:
    def test_end_to_end_scenario(self):
        a = _make_comment("because pitfall " + "x" * 334, reactions=2, number=1)
        b = _make_comment("y" * 90, number=2)
        c = _make_comment("z" * 200, reactions=10, number=3)

        kept = filter_substantive([a, b, c], min_length=100)

        assert kept == [c, a]
        assert c.wisdom_score == 102
        assert a.wisdom_score == 33

    def test_ties_keep_collection_order(self):
        first = _make_comment("x" * 150, number=1)
        second = _make_comment("y" * 150, number=2)
        third = _make_comment("z" * 150, number=3)
        kept = filter_substantive([first, second, third], min_length=100)
        assert [c.issue_number for c in kept] == [1, 2, 3]

    def test_sorted_descending(self):
        comments = [_make_comment("x" * 100, reactions=r, number=r) for r in (1, 5, 3)]
        kept = filter_substantive(comments, min_length=100)
        assert [c.wisdom_score for c in kept] == sorted((c.wisdom_score for c in kept), reverse=True)
