"""
Selection Session

Per-learner record of remarks and comments already handed out, so no text
repeats within one learner's report. Create one per learner and drop it once
that learner's subjects are done; never share one between learners.
"""

from typing import Optional, Set
from .constants import FALLBACK_REMARK, FALLBACK_COMMENT


class SelectionContext:
    """Used-text sets for one learner's processing pass."""

    def __init__(self, learner_id: Optional[str] = None):
        self.learner_id = learner_id
        self.used_remarks: Set[str] = set()
        self.used_comments: Set[str] = set()

    def is_remark_used(self, remark: str) -> bool:
        return remark in self.used_remarks

    def is_comment_used(self, comment: str) -> bool:
        return comment in self.used_comments

    def register(self, remark: Optional[str] = None, comment: Optional[str] = None) -> None:
        """
        Mark accepted text as used.

        Fallback strings are skipped so they stay available for every subject.
        """
        if remark and remark != FALLBACK_REMARK:
            self.used_remarks.add(remark)
        if comment and comment != FALLBACK_COMMENT:
            self.used_comments.add(comment)

    def __repr__(self) -> str:
        return (
            f"SelectionContext(learner_id={self.learner_id!r}, "
            f"remarks={len(self.used_remarks)}, comments={len(self.used_comments)})"
        )
