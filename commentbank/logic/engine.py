"""
Comment Engine

Main orchestrator that turns learner results into report-card text.
This is the primary entry point for the offline comment bank.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Set

from .contracts import (
    SubjectInput,
    SubjectOutput,
    LearnerInput,
    LearnerOutput,
    BatchInput,
    BatchOutput,
    ScoredCandidate,
)
from .corpus import CommentCorpus, get_default_corpus
from .classifier import score_to_band, subject_to_category, resolve_trend
from .ranker import rank_candidates
from .selector import find_remark, find_comment, select_remark, select_comment
from .session import SelectionContext
from .constants import TrendIndicator, FALLBACK_REMARK, FALLBACK_COMMENT, ENGINE_VERSION

logger = logging.getLogger(__name__)


class CommentEngine:
    """
    Comment engine that orchestrates the selection pipeline.

    Pipeline flow per subject:
    1. Classification - band, category and trend
    2. Ranking - score every bank entry against the request
    3. Selection - first unused, valid remark and comment
    4. Registration - mark the chosen text as used for this learner

    The corpus is shared and read-only. Each learner gets its own
    SelectionContext, so learners can run in parallel.
    """

    def __init__(self, corpus: Optional[CommentCorpus] = None):
        """
        Initialize the comment engine.

        Args:
            corpus: Comment bank to select from. If None, uses the configured bank.
        """
        self.corpus = corpus if corpus is not None else get_default_corpus()
        self.version = ENGINE_VERSION

    def process_subject(
        self,
        subject: SubjectInput,
        session: SelectionContext
    ) -> SubjectOutput:
        """
        Choose a remark and comment for one subject and register them.

        Args:
            subject: Subject result
            session: The current learner's selection context

        Returns:
            SubjectOutput
        """
        band = score_to_band(subject.score)
        category = subject_to_category(subject.subject)
        trend = resolve_trend(subject)

        ranked = rank_candidates(
            self.corpus,
            band,
            category,
            trend,
            subject.strength_tags,
            subject.weakness_tags,
        )

        remark = find_remark(ranked, session)
        comment = find_comment(ranked, session)

        if remark is None or comment is None:
            logger.info(
                f"🔁 Comment bank exhausted for {subject.subject} "
                f"(learner {session.learner_id or 'anonymous'}), using fallback"
            )

        # Register before the next subject is ranked
        session.register(remark, comment)

        return SubjectOutput(
            subject=subject.subject,
            subject_remark=remark if remark is not None else FALLBACK_REMARK,
            teacher_comment=comment if comment is not None else FALLBACK_COMMENT,
            band=band,
            category=category,
            trend=trend,
            remark_is_fallback=remark is None,
            comment_is_fallback=comment is None,
        )

    def process_learner(
        self,
        subjects: Iterable[SubjectInput],
        learner_id: Optional[str] = None
    ) -> List[SubjectOutput]:
        """
        Process one learner's subjects in the order supplied.

        Subjects run one after another against a fresh session so that
        no remark or comment repeats within this learner's report.
        """
        session = SelectionContext(learner_id)
        return [self.process_subject(subject, session) for subject in subjects]

    def process_batch(
        self,
        learners: List[LearnerInput],
        max_workers: int = 1
    ) -> List[LearnerOutput]:
        """
        Process many learners.

        Args:
            learners: Learners with their subjects
            max_workers: Learners processed in parallel. The unit of
                parallelism is always one learner's full subject list.

        Returns:
            One LearnerOutput per learner, in input order
        """
        def _run(learner: LearnerInput) -> LearnerOutput:
            items = self.process_learner(learner.subjects, learner.student_id)
            return LearnerOutput(student_id=learner.student_id, items=items)

        if max_workers <= 1 or len(learners) <= 1:
            return [_run(learner) for learner in learners]

        with ThreadPoolExecutor(max_workers=min(max_workers, len(learners))) as ex:
            return list(ex.map(_run, learners))

    def generate(self, batch: BatchInput, max_workers: int = 1) -> BatchOutput:
        """
        Run a full batch and attach summary statistics.

        Args:
            batch: Term, class and learners
            max_workers: Learners processed in parallel

        Returns:
            BatchOutput
        """
        start_time = time.perf_counter()

        logger.info(
            f"🚀 Generating comments for {len(batch.students)} students "
            f"({batch.class_name or 'unnamed class'}, {batch.term or 'no term'})"
        )

        results = self.process_batch(batch.students, max_workers=max_workers)

        processing_time = (time.perf_counter() - start_time) * 1000
        output = assemble_batch_output(batch, results, len(self.corpus))
        output.processing_time_ms = round(processing_time, 2)

        logger.info(f"✨ Comment generation complete ({processing_time:.2f}ms)")
        return output


def assemble_batch_output(
    batch: BatchInput,
    results: List[LearnerOutput],
    corpus_size: int
) -> BatchOutput:
    """Build the BatchOutput summary and warnings for a finished run."""
    total_subjects = sum(len(r.items) for r in results)
    fallback_count = sum(
        1 for r in results for item in r.items
        if item.remark_is_fallback or item.comment_is_fallback
    )

    warnings: List[str] = []
    if corpus_size == 0:
        warnings.append("Comment bank is empty. Every subject received the fallback text.")
    elif fallback_count:
        warnings.append(
            f"{fallback_count} subject(s) received fallback text because the comment bank "
            f"ran out of unused matches."
        )

    return BatchOutput(
        results=results,
        term=batch.term,
        class_name=batch.class_name,
        total_students=len(results),
        total_subjects=total_subjects,
        fallback_count=fallback_count,
        engine_version=ENGINE_VERSION,
        warnings=warnings,
    )


# Convenience functions for single-subject usage
def _single_subject(
    subject: str,
    score: float,
    trend: Optional[TrendIndicator],
    strength_tags: Iterable[str],
    weakness_tags: Iterable[str],
    engine: Optional[CommentEngine]
) -> List[ScoredCandidate]:
    engine = engine or CommentEngine()
    request = SubjectInput(
        subject=subject,
        score=score,
        trend=trend,
        strength_tags=list(strength_tags),
        weakness_tags=list(weakness_tags),
    )
    ranked = rank_candidates(
        engine.corpus,
        score_to_band(score),
        subject_to_category(subject),
        resolve_trend(request),
        request.strength_tags,
        request.weakness_tags,
    )
    return ranked


def generate_subject_remark(
    subject: str,
    score: float,
    trend: Optional[TrendIndicator] = None,
    strength_tags: Iterable[str] = (),
    weakness_tags: Iterable[str] = (),
    used_remarks: Optional[Set[str]] = None,
    engine: Optional[CommentEngine] = None
) -> str:
    """
    Pick one remark for a subject, skipping anything in `used_remarks`.

    The caller owns `used_remarks` and adds the returned text to it.
    """
    ranked = _single_subject(subject, score, trend, strength_tags, weakness_tags, engine)
    session = SelectionContext()
    session.used_remarks = used_remarks if used_remarks is not None else set()
    return select_remark(ranked, session)


def generate_teacher_comment(
    subject: str,
    score: float,
    trend: Optional[TrendIndicator] = None,
    strength_tags: Iterable[str] = (),
    weakness_tags: Iterable[str] = (),
    used_comments: Optional[Set[str]] = None,
    engine: Optional[CommentEngine] = None
) -> str:
    """
    Pick one two-sentence comment for a subject, skipping anything in `used_comments`.
    """
    ranked = _single_subject(subject, score, trend, strength_tags, weakness_tags, engine)
    session = SelectionContext()
    session.used_comments = used_comments if used_comments is not None else set()
    return select_comment(ranked, session)
