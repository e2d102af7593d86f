"""
Ranker

Scores every comment candidate against one subject request and orders them
best first. Nothing is filtered out here: a zero score is still a candidate
the selector can fall back to.
"""

from typing import Iterable, List, Sequence
from .contracts import CommentCandidate, ScoredCandidate
from .classifier import band_distance
from .constants import (
    PerformanceBand,
    SubjectCategory,
    TrendIndicator,
    RANKING_WEIGHTS,
)


def _clean_tags(tags: Iterable[str]) -> List[str]:
    cleaned: List[str] = []
    for tag in tags or ():
        tag = tag.strip().lower()
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


def score_candidate(
    candidate: CommentCandidate,
    band: PerformanceBand,
    category: SubjectCategory,
    trend: TrendIndicator,
    strength_tags: Sequence[str] = (),
    weakness_tags: Sequence[str] = ()
) -> int:
    """
    Match score of one candidate.

    - Band: exact match, or one step away for partial credit
    - Category: exact match only
    - Trend: exact match (NONE only matches NONE)
    - Tags: one bonus per requested tag found on the candidate
    """
    score = 0

    distance = band_distance(candidate.band, band)
    if distance == 0:
        score += RANKING_WEIGHTS["band_exact"]
    elif distance == 1:
        score += RANKING_WEIGHTS["band_adjacent"]

    if candidate.category == category:
        score += RANKING_WEIGHTS["category_exact"]

    if candidate.trend == trend:
        score += RANKING_WEIGHTS["trend_exact"]

    for tag in strength_tags:
        if tag in candidate.strength_tags:
            score += RANKING_WEIGHTS["strength_tag"]

    for tag in weakness_tags:
        if tag in candidate.weakness_tags:
            score += RANKING_WEIGHTS["weakness_tag"]

    return score


def rank_candidates(
    candidates: Iterable[CommentCandidate],
    band: PerformanceBand,
    category: SubjectCategory,
    trend: TrendIndicator,
    strength_tags: Iterable[str] = (),
    weakness_tags: Iterable[str] = ()
) -> List[ScoredCandidate]:
    """
    Rank candidates by match score (descending).

    Equal scores keep their bank order, so identical requests always
    produce the same list.

    Args:
        candidates: Comment bank entries, in bank order
        band: Requested performance band
        category: Requested subject category
        trend: Requested trend
        strength_tags: Topics the learner is strong in
        weakness_tags: Topics the learner is weak in

    Returns:
        Every candidate with its score, best first
    """
    strengths = _clean_tags(strength_tags)
    weaknesses = _clean_tags(weakness_tags)

    scored = [
        ScoredCandidate(
            candidate=candidate,
            score=score_candidate(candidate, band, category, trend, strengths, weaknesses),
        )
        for candidate in candidates
    ]

    # sorted() is stable, including with reverse=True
    return sorted(scored, key=lambda x: x.score, reverse=True)
