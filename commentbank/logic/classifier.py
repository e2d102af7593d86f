"""
Classifier

Maps raw learner inputs onto the fixed comment bank taxonomy:
- Numeric score -> performance band (A-F)
- Free-text subject name -> subject category
- Current and reference score -> trend indicator
"""

import re
from typing import Optional
from .contracts import SubjectInput
from .constants import (
    PerformanceBand,
    TrendIndicator,
    SubjectCategory,
    BAND_THRESHOLDS,
    BAND_ORDER,
    TREND_THRESHOLD,
    SUBJECT_CATEGORY_RULES,
    DEFAULT_CATEGORY,
)


def score_to_band(score: float) -> PerformanceBand:
    """
    Classify a score into a performance band.

    Scores outside 0-100 are not rejected; they fall into the
    highest or lowest band through the same thresholds.

    Args:
        score: Raw score, normally a percentage

    Returns:
        PerformanceBand enum value
    """
    # Check thresholds from highest to lowest
    for band, minimum in BAND_THRESHOLDS:
        if score >= minimum:
            return band

    return PerformanceBand.F


def subject_to_category(name: Optional[str]) -> SubjectCategory:
    """
    Classify a free-text subject name into a subject category.

    Rules are tested in order and the first keyword found anywhere in the
    lower-cased name wins. Punctuation becomes spaces and the name is padded
    with a space at each end, so a keyword such as " ict " only matches a
    whole word. Unmatched names fall back to General.
    """
    if not name:
        return DEFAULT_CATEGORY

    normalized = " " + re.sub(r"[^a-z0-9]+", " ", name.lower()) + " "
    for keywords, category in SUBJECT_CATEGORY_RULES:
        if any(keyword in normalized for keyword in keywords):
            return category

    return DEFAULT_CATEGORY


def compute_trend(
    current: float,
    reference: Optional[float] = None
) -> TrendIndicator:
    """
    Compare a score against a reference score (e.g. last term).

    Args:
        current: Current score
        reference: Reference score, or None when there is nothing to compare

    Returns:
        UP / DOWN when the difference exceeds the threshold, FLAT otherwise,
        NONE without a reference
    """
    if reference is None:
        return TrendIndicator.NONE

    difference = current - reference
    if difference > TREND_THRESHOLD:
        return TrendIndicator.UP
    if difference < -TREND_THRESHOLD:
        return TrendIndicator.DOWN
    return TrendIndicator.FLAT


def resolve_trend(subject: SubjectInput) -> TrendIndicator:
    """Use the caller's explicit trend if given, otherwise compute it."""
    if subject.trend is not None:
        return TrendIndicator(subject.trend)
    return compute_trend(subject.score, subject.reference_score)


def band_distance(a: PerformanceBand, b: PerformanceBand) -> int:
    """Number of ordinal steps between two bands."""
    return abs(BAND_ORDER.index(a) - BAND_ORDER.index(b))
