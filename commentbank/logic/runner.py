"""
Comment Runner

Chooses between the two comment paths for a batch:
1. Comment bank (default) - offline, deterministic, instant
2. AI generator - one request per subject, checked by the validator

AI output that is unavailable, malformed or already used for the learner is
replaced by the comment bank choice for that subject, so every subject always
gets valid text.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from .. import config
from ..ai.generator import AICommentGenerator, get_ai_generator
from .contracts import (
    BatchInput,
    BatchOutput,
    LearnerInput,
    LearnerOutput,
    SubjectInput,
    SubjectOutput,
)
from .engine import CommentEngine, assemble_batch_output
from .classifier import score_to_band, subject_to_category, resolve_trend
from .session import SelectionContext
from .validator import validate_comment_quality
from .constants import CommentSource

logger = logging.getLogger(__name__)


def _ai_subject(
    generator: AICommentGenerator,
    subject: SubjectInput,
    session: SelectionContext
) -> Optional[SubjectOutput]:
    """Ask the AI generator for one subject; None if the result is unusable."""
    band = score_to_band(subject.score)
    category = subject_to_category(subject.subject)
    trend = resolve_trend(subject)

    result = generator.generate(
        subject=subject.subject,
        band=band.value,
        category=category.value,
        trend=trend.value,
        strength_tags=subject.strength_tags,
        weakness_tags=subject.weakness_tags,
        avoid=session.used_remarks | session.used_comments,
    )
    if result is None:
        return None

    remark = result["subject_remark"]
    comment = result["teacher_comment"]

    quality = validate_comment_quality(remark, comment)
    if not quality.is_valid:
        logger.warning(f"⚠️ AI text for {subject.subject} rejected: {'; '.join(quality.errors)}")
        return None

    if session.is_remark_used(remark) or session.is_comment_used(comment):
        logger.warning(f"⚠️ AI text for {subject.subject} rejected: repeats earlier text")
        return None

    session.register(remark, comment)

    return SubjectOutput(
        subject=subject.subject,
        subject_remark=remark,
        teacher_comment=comment,
        band=band,
        category=category,
        trend=trend,
        source=CommentSource.AI,
    )


def _run_ai_learner(
    engine: CommentEngine,
    generator: AICommentGenerator,
    learner: LearnerInput
) -> LearnerOutput:
    session = SelectionContext(learner.student_id)
    items: List[SubjectOutput] = []

    for subject in learner.subjects:
        item = _ai_subject(generator, subject, session)
        if item is None:
            item = engine.process_subject(subject, session)
        items.append(item)

    return LearnerOutput(student_id=learner.student_id, items=items)


def generate_batch_comments(
    batch: BatchInput,
    use_comment_bank: Optional[bool] = None,
    engine: Optional[CommentEngine] = None,
    generator: Optional[AICommentGenerator] = None,
    max_workers: Optional[int] = None
) -> BatchOutput:
    """
    Main entry point: produce remarks and comments for a batch.

    Args:
        batch: Term, class and learners
        use_comment_bank: True for the offline bank, False to try the AI
            generator first. Defaults to USE_COMMENT_BANK.
        engine: Comment engine (defaults to one over the configured bank)
        generator: AI generator (defaults to the shared instance)
        max_workers: Learners processed in parallel on the comment bank path

    Returns:
        BatchOutput
    """
    if use_comment_bank is None:
        use_comment_bank = config.USE_COMMENT_BANK
    if max_workers is None:
        max_workers = config.COMMENT_BATCH_WORKERS

    engine = engine or CommentEngine()

    if use_comment_bank:
        return engine.generate(batch, max_workers=max_workers)

    generator = generator or get_ai_generator()
    if not generator.enabled:
        logger.warning("⚠️ AI comments requested but no generator is configured, using comment bank")
        output = engine.generate(batch, max_workers=max_workers)
        output.warnings.append("AI comment generation unavailable. Comment bank used instead.")
        return output

    start_time = time.perf_counter()
    logger.info(f"🤖 Generating AI comments for {len(batch.students)} students")

    # AI requests run sequentially; each learner still owns its own session
    results = [_run_ai_learner(engine, generator, learner) for learner in batch.students]

    processing_time = (time.perf_counter() - start_time) * 1000
    output = assemble_batch_output(batch, results, len(engine.corpus))
    output.processing_time_ms = round(processing_time, 2)

    ai_count = sum(
        1 for r in results for item in r.items
        if item.source == CommentSource.AI.value
    )
    if ai_count < output.total_subjects:
        output.warnings.append(
            f"{output.total_subjects - ai_count} subject(s) used the comment bank "
            f"because AI text was unavailable or invalid."
        )

    logger.info(f"✨ AI comment generation complete ({processing_time:.2f}ms)")
    return output


def generate_batch_comments_from_dict(
    data: Dict[str, Any],
    **kwargs
) -> Dict[str, Any]:
    """
    Convenience wrapper accepting and returning plain dicts.

    Input shape: {"term", "class_name", "students": [{"student_id", "subjects": [...]}]}
    Output shape: {"results": [{"student_id", "items": [{"subject",
    "subject_remark", "teacher_comment"}]}], ...summary}
    """
    batch = BatchInput(**data)
    return generate_batch_comments(batch, **kwargs).model_dump(mode="json")
