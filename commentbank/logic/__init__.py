"""
Comment Bank Logic Module

Provides the deterministic selection engine for report-card remarks and comments.
"""

from .contracts import (
    CommentCandidate,
    ScoredCandidate,
    SubjectInput,
    SubjectOutput,
    LearnerInput,
    LearnerOutput,
    BatchInput,
    BatchOutput,
    CommentQuality,
)
from .constants import PerformanceBand, TrendIndicator, SubjectCategory, CommentSource
from .classifier import score_to_band, subject_to_category, compute_trend
from .corpus import CommentCorpus, CorpusLoadError, load_corpus, get_default_corpus
from .ranker import rank_candidates
from .selector import select_remark, select_comment
from .session import SelectionContext
from .validator import is_valid_remark, is_valid_comment, validate_comment_quality
from .engine import CommentEngine, generate_subject_remark, generate_teacher_comment
from .overall_comment import generate_rule_based_teacher_comment
from .runner import generate_batch_comments, generate_batch_comments_from_dict

__all__ = [
    # Main engine
    "CommentEngine",
    "generate_batch_comments",
    "generate_batch_comments_from_dict",
    "generate_subject_remark",
    "generate_teacher_comment",
    "generate_rule_based_teacher_comment",

    # Pipeline stages
    "score_to_band",
    "subject_to_category",
    "compute_trend",
    "rank_candidates",
    "select_remark",
    "select_comment",
    "SelectionContext",

    # Corpus
    "CommentCorpus",
    "CorpusLoadError",
    "load_corpus",
    "get_default_corpus",

    # Validator
    "is_valid_remark",
    "is_valid_comment",
    "validate_comment_quality",

    # Contracts
    "CommentCandidate",
    "ScoredCandidate",
    "SubjectInput",
    "SubjectOutput",
    "LearnerInput",
    "LearnerOutput",
    "BatchInput",
    "BatchOutput",
    "CommentQuality",

    # Enums
    "PerformanceBand",
    "TrendIndicator",
    "SubjectCategory",
    "CommentSource",
]
