"""
Tests for remark/comment selection and the per-learner session.
"""

from commentbank.logic.contracts import CommentCandidate, ScoredCandidate
from commentbank.logic.ranker import rank_candidates
from commentbank.logic.selector import (
    find_remark,
    find_comment,
    select_remark,
    select_comment,
)
from commentbank.logic.session import SelectionContext
from commentbank.logic.constants import (
    PerformanceBand,
    SubjectCategory,
    TrendIndicator,
    FALLBACK_REMARK,
    FALLBACK_COMMENT,
)


def _rank(corpus):
    return rank_candidates(
        corpus, PerformanceBand.A, SubjectCategory.MATHEMATICS, TrendIndicator.UP, ["algebra"],
    )


def test_selects_top_ranked_text(small_corpus):
    ranked = _rank(small_corpus)
    session = SelectionContext()

    assert select_remark(ranked, session) == "Exceptional algebra skills shown clearly"
    assert select_comment(ranked, session) == "Excellent algebra work this term. Keep stretching yourself."


def test_selector_does_not_register(small_corpus):
    ranked = _rank(small_corpus)
    session = SelectionContext()

    select_remark(ranked, session)
    select_comment(ranked, session)

    assert session.used_remarks == set()
    assert session.used_comments == set()


def test_skips_used_text(small_corpus):
    ranked = _rank(small_corpus)
    session = SelectionContext()
    session.register(remark=ranked[0].candidate.short_remark)

    assert select_remark(ranked, session) == ranked[1].candidate.short_remark


def test_remark_and_comment_walk_independently(small_corpus):
    """Remark may come from one candidate and the comment from another."""
    ranked = _rank(small_corpus)
    session = SelectionContext()
    session.register(remark=ranked[0].candidate.short_remark)

    remark = select_remark(ranked, session)
    comment = select_comment(ranked, session)

    assert remark == ranked[1].candidate.short_remark
    assert comment == ranked[0].candidate.narrative_comment


def test_skips_invalid_text():
    """Entries built without the loader are still format-checked."""
    bad = CommentCandidate(
        band="A", category="Mathematics",
        short_remark="Too short",
        narrative_comment="Only one sentence.",
    )
    good = CommentCandidate(
        band="B", category="Mathematics",
        short_remark="Good algebra work this term",
        narrative_comment="Algebra is solid. Keep practising.",
    )
    ranked = [ScoredCandidate(candidate=bad, score=90), ScoredCandidate(candidate=good, score=60)]
    session = SelectionContext()

    assert select_remark(ranked, session) == good.short_remark
    assert select_comment(ranked, session) == good.narrative_comment


def test_exhausted_list_returns_none_then_fallback(small_corpus):
    ranked = _rank(small_corpus)
    session = SelectionContext()
    for scored in ranked:
        session.register(scored.candidate.short_remark, scored.candidate.narrative_comment)

    assert find_remark(ranked, session) is None
    assert find_comment(ranked, session) is None
    assert select_remark(ranked, session) == FALLBACK_REMARK
    assert select_comment(ranked, session) == FALLBACK_COMMENT


def test_empty_ranked_list_returns_fallback():
    session = SelectionContext()
    assert select_remark([], session) == FALLBACK_REMARK
    assert select_comment([], session) == FALLBACK_COMMENT


def test_session_never_registers_fallback():
    session = SelectionContext("learner-1")
    session.register(FALLBACK_REMARK, FALLBACK_COMMENT)

    assert not session.is_remark_used(FALLBACK_REMARK)
    assert not session.is_comment_used(FALLBACK_COMMENT)
    assert "learner-1" in repr(session)


def test_sessions_are_independent():
    first = SelectionContext("a")
    second = SelectionContext("b")
    first.register("Exceptional algebra skills shown clearly", "One. Two.")

    assert first.is_remark_used("Exceptional algebra skills shown clearly")
    assert not second.is_remark_used("Exceptional algebra skills shown clearly")
