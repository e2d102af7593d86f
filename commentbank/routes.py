"""
Comment Bank API Routes

Exposes the comment engine via REST API.
"""

import logging
from typing import Optional, List
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from .logic.contracts import (
    BatchInput,
    BatchOutput,
    SubjectInput,
    SubjectOutput,
    CommentQuality,
)
from .logic.corpus import get_default_corpus, CorpusLoadError
from .logic.engine import CommentEngine
from .logic.runner import generate_batch_comments
from .logic.session import SelectionContext
from .logic.validator import validate_comment_quality
from .logic.overall_comment import generate_rule_based_teacher_comment
from .logic.constants import ENGINE_VERSION

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/comments", tags=["comments"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class ValidateRequest(BaseModel):
    """Request body for the format check endpoint."""
    remark: str = Field(..., description="Subject remark to check (4-6 words)")
    comment: str = Field(..., description="Teacher comment to check (exactly 2 sentences)")


class OverallCommentRequest(BaseModel):
    """Request body for the overall term comment."""
    student_name: str
    average: float = Field(..., allow_inf_nan=False)
    position: Optional[int] = Field(default=None, ge=1)
    class_size: Optional[int] = Field(default=None, ge=1)
    attendance_rate: Optional[float] = Field(default=None, ge=0, le=100)
    two_sentence: bool = True


def _get_engine() -> CommentEngine:
    try:
        return CommentEngine(get_default_corpus())
    except CorpusLoadError as e:
        logger.error(f"Comment bank unavailable: {e}")
        raise HTTPException(status_code=503, detail="Comment bank unavailable")


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/batch", response_model=BatchOutput, summary="Generate remarks and comments for a class")
def generate_batch(
    batch: BatchInput,
    use_comment_bank: Optional[bool] = Query(
        default=None,
        description="True for the offline comment bank, False to try AI first"
    ),
):
    """
    Generate a remark and a two-sentence comment for every subject of every learner.

    **Request Body:**
    - `term`, `class_name`: Optional labels echoed back
    - `students`: Learners with their subject scores, trends and tags

    **Response:**
    - `results`: One entry per learner, items in subject order
    - Summary counters and warnings
    """
    engine = _get_engine()
    try:
        return generate_batch_comments(batch, use_comment_bank=use_comment_bank, engine=engine)
    except Exception as e:
        logger.exception(f"Batch comment generation failed: {e}")
        raise HTTPException(status_code=500, detail=f"Comment generation failed: {str(e)}")


@router.post("/subject", response_model=SubjectOutput, summary="Remark and comment for one subject")
def generate_subject(subject: SubjectInput):
    """Pick a remark and comment for a single subject with a fresh session."""
    engine = _get_engine()
    return engine.process_subject(subject, SelectionContext())


@router.post("/validate", response_model=CommentQuality, summary="Check remark/comment format")
def validate(request: ValidateRequest):
    """Check a remark and comment against the report-card format rules."""
    return validate_comment_quality(request.remark, request.comment)


@router.post("/overall", summary="Rule-based overall term comment")
def overall_comment(request: OverallCommentRequest):
    comment = generate_rule_based_teacher_comment(
        student_name=request.student_name,
        average=request.average,
        position=request.position,
        class_size=request.class_size,
        attendance_rate=request.attendance_rate,
        two_sentence=request.two_sentence,
    )
    return {"comment": comment}


@router.get("/corpus/stats", summary="Comment bank coverage")
def corpus_stats():
    """Entry counts per band and subject category."""
    return _get_engine().corpus.stats()


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Comment engine health check")
def health_check():
    """Check if comment engine is operational."""
    return {"status": "ok", "engine": "comment_bank", "version": ENGINE_VERSION}
