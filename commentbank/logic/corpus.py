"""
Comment Corpus

Loads the static comment bank and keeps it as an immutable, shared
collection of CommentCandidate entries.

Every entry is validated once at load time. Entries that fail the schema or
the format rules are logged and left out; loading never fails because of a
single bad entry.
"""

import json
import logging
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import ValidationError

from .. import config
from .contracts import CommentCandidate
from .constants import PerformanceBand, SubjectCategory
from .validator import is_valid_remark, is_valid_comment

logger = logging.getLogger(__name__)


class CommentBankError(Exception):
    """Base error for the comment bank."""


class CorpusLoadError(CommentBankError):
    """The comment bank file is missing or not a JSON list of entries."""


class CommentCorpus:
    """
    Read-only collection of comment candidates.

    Safe to share between threads: nothing mutates it after construction.
    """

    def __init__(self, candidates: Iterable[CommentCandidate] = (), rejected_count: int = 0):
        self._candidates: Tuple[CommentCandidate, ...] = tuple(candidates)
        self.rejected_count = rejected_count

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "CommentCorpus":
        """
        Build a corpus from raw dict records.

        Args:
            records: Bank entries as loaded from JSON

        Returns:
            CommentCorpus holding only the entries that passed validation
        """
        accepted: List[CommentCandidate] = []
        rejected = 0

        for index, record in enumerate(records):
            try:
                candidate = CommentCandidate(**record)
            except (ValidationError, TypeError) as e:
                rejected += 1
                logger.warning(f"⚠️ Comment bank entry {index} rejected (schema): {e}")
                continue

            if not is_valid_remark(candidate.short_remark):
                rejected += 1
                logger.warning(
                    f"⚠️ Comment bank entry {index} rejected: remark "
                    f"'{candidate.short_remark}' is not 4-6 words"
                )
                continue

            if not is_valid_comment(candidate.narrative_comment):
                rejected += 1
                logger.warning(
                    f"⚠️ Comment bank entry {index} rejected: comment is not exactly 2 sentences"
                )
                continue

            accepted.append(candidate)

        if rejected:
            logger.warning(f"⚠️ {rejected} comment bank entries rejected at load")

        return cls(accepted, rejected_count=rejected)

    @property
    def candidates(self) -> Tuple[CommentCandidate, ...]:
        return self._candidates

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[CommentCandidate]:
        return iter(self._candidates)

    def filter(
        self,
        band: Optional[PerformanceBand] = None,
        category: Optional[SubjectCategory] = None
    ) -> List[CommentCandidate]:
        """Entries for one band and/or category, in bank order."""
        return [
            c for c in self._candidates
            if (band is None or c.band == band)
            and (category is None or c.category == category)
        ]

    def stats(self) -> Dict[str, Any]:
        """Entry counts per band and per category."""
        return {
            "total": len(self._candidates),
            "rejected": self.rejected_count,
            "by_band": dict(Counter(c.band.value for c in self._candidates)),
            "by_category": dict(Counter(c.category.value for c in self._candidates)),
        }


def load_corpus(path: Optional[str] = None) -> CommentCorpus:
    """
    Load the comment bank from a JSON file.

    Args:
        path: JSON file holding a list of entries. Defaults to COMMENT_BANK_PATH.

    Returns:
        CommentCorpus

    Raises:
        CorpusLoadError: file missing, unreadable or not a JSON list
    """
    path = path or config.COMMENT_BANK_PATH

    try:
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CorpusLoadError(f"Could not load comment bank from {path}: {e}") from e

    if not isinstance(records, list):
        raise CorpusLoadError(f"Comment bank at {path} must be a JSON list of entries")

    corpus = CommentCorpus.from_records(records)
    logger.info(f"📚 Comment bank loaded: {len(corpus)} entries from {path}")
    return corpus


_default_corpus: Optional[CommentCorpus] = None


def get_default_corpus() -> CommentCorpus:
    """Load the configured comment bank once per process."""
    global _default_corpus
    if _default_corpus is None:
        _default_corpus = load_corpus()
    return _default_corpus


def reset_default_corpus() -> None:
    global _default_corpus
    _default_corpus = None
