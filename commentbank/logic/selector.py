"""
Selector

Walks a ranked candidate list and picks the first remark (or comment) that
this learner has not been given yet and that passes the format check.
Remarks and comments are walked independently, so one subject may get its
remark and its comment from different candidates.

The selector only reads the session. Registering accepted text is the
engine's job.
"""

from typing import Callable, List, Optional
from .contracts import CommentCandidate, ScoredCandidate
from .session import SelectionContext
from .validator import is_valid_remark, is_valid_comment
from .constants import FALLBACK_REMARK, FALLBACK_COMMENT


def _walk(
    ranked: List[ScoredCandidate],
    field: Callable[[CommentCandidate], str],
    is_used: Callable[[str], bool],
    is_valid: Callable[[str], bool]
) -> Optional[str]:
    for scored in ranked:
        text = field(scored.candidate)
        if is_used(text):
            continue
        # Bank entries are checked at load; this guards extended banks
        if not is_valid(text):
            continue
        return text
    return None


def find_remark(ranked: List[ScoredCandidate], session: SelectionContext) -> Optional[str]:
    """First unused, valid remark, or None when the list is exhausted."""
    return _walk(
        ranked,
        lambda c: c.short_remark,
        session.is_remark_used,
        is_valid_remark,
    )


def find_comment(ranked: List[ScoredCandidate], session: SelectionContext) -> Optional[str]:
    """First unused, valid comment, or None when the list is exhausted."""
    return _walk(
        ranked,
        lambda c: c.narrative_comment,
        session.is_comment_used,
        is_valid_comment,
    )


def select_remark(ranked: List[ScoredCandidate], session: SelectionContext) -> str:
    remark = find_remark(ranked, session)
    return remark if remark is not None else FALLBACK_REMARK


def select_comment(ranked: List[ScoredCandidate], session: SelectionContext) -> str:
    comment = find_comment(ranked, session)
    return comment if comment is not None else FALLBACK_COMMENT
