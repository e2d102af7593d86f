"""
Data Contracts for the Comment Engine

Defines Pydantic models for the comment bank entries, the per-subject and
per-learner inputs, and the batch output. These contracts are the API boundary
for the comment engine.
"""

from typing import List, Optional, FrozenSet, Iterable
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    PerformanceBand,
    TrendIndicator,
    SubjectCategory,
    CommentSource,
    ENGINE_VERSION,
)


def _normalise_tags(value: Optional[Iterable[str]]) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    tags = []
    for tag in value:
        tag = str(tag).strip().lower()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


# =============================================================================
# COMMENT BANK
# =============================================================================

class CommentCandidate(BaseModel):
    """
    One pre-authored remark/comment pair with its matching metadata.
    Loaded once from the comment bank and never mutated.
    """
    band: PerformanceBand
    category: SubjectCategory
    trend: TrendIndicator = TrendIndicator.NONE
    strength_tags: FrozenSet[str] = Field(default_factory=frozenset)
    weakness_tags: FrozenSet[str] = Field(default_factory=frozenset)
    short_remark: str
    narrative_comment: str

    model_config = ConfigDict(frozen=True)

    @field_validator("trend", mode="before")
    @classmethod
    def _missing_trend_is_none(cls, value):
        # Bank entries author "no trend" as null
        return TrendIndicator.NONE if value is None else value

    @field_validator("strength_tags", "weakness_tags", mode="before")
    @classmethod
    def _lowercase_tags(cls, value):
        return frozenset(_normalise_tags(value))


class ScoredCandidate(BaseModel):
    """
    A comment candidate with its match score for one request.
    Only lives inside the ranker output.
    """
    candidate: CommentCandidate
    score: int = 0


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class SubjectInput(BaseModel):
    """
    One subject result for a learner.
    `trend` overrides the trend computed from `reference_score` when given.
    """
    subject: str
    score: float
    reference_score: Optional[float] = None
    trend: Optional[TrendIndicator] = None
    grade: Optional[str] = None  # informational only, band comes from score
    class_average: Optional[float] = None
    strength_tags: List[str] = Field(default_factory=list)
    weakness_tags: List[str] = Field(default_factory=list)

    @field_validator("strength_tags", "weakness_tags", mode="before")
    @classmethod
    def _clean_tags(cls, value):
        return _normalise_tags(value)


class LearnerInput(BaseModel):
    """All subjects for one learner, processed in the order given."""
    student_id: str
    subjects: List[SubjectInput] = Field(default_factory=list)


class BatchInput(BaseModel):
    """A class worth of learners for one term."""
    term: Optional[str] = None
    class_name: Optional[str] = None
    students: List[LearnerInput] = Field(default_factory=list)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class SubjectOutput(BaseModel):
    """Remark and comment chosen for one subject."""
    subject: str
    subject_remark: str
    teacher_comment: str

    # Diagnostics
    band: PerformanceBand
    category: SubjectCategory
    trend: TrendIndicator
    remark_is_fallback: bool = False
    comment_is_fallback: bool = False
    source: CommentSource = CommentSource.COMMENT_BANK

    model_config = ConfigDict(use_enum_values=True)


class LearnerOutput(BaseModel):
    """All subject outputs for one learner."""
    student_id: str
    items: List[SubjectOutput] = Field(default_factory=list)


class BatchOutput(BaseModel):
    """
    Output contract for a batch run.
    `results` keeps the order of the input learners.
    """
    results: List[LearnerOutput] = Field(default_factory=list)

    term: Optional[str] = None
    class_name: Optional[str] = None

    # Summary Statistics
    total_students: int = 0
    total_subjects: int = 0
    fallback_count: int = 0

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    warnings: List[str] = Field(default_factory=list)


class CommentQuality(BaseModel):
    """Format check result for a remark/comment pair."""
    remark_valid: bool
    comment_valid: bool
    remark_word_count: int
    comment_sentence_count: int
    errors: List[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.remark_valid and self.comment_valid
