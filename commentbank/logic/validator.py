"""
Validator

Format checks shared by the comment bank loader, the selector and the AI
path. Remarks must be 4-6 words; comments must be exactly two sentences.

Sentences are counted as literal periods. Abbreviations or decimal numbers
inside a comment are therefore miscounted, and bank entries are authored
without them.
"""

from typing import Any, List
from .contracts import CommentQuality
from .constants import REMARK_MIN_WORDS, REMARK_MAX_WORDS, COMMENT_SENTENCES


def count_words(text: Any) -> int:
    """Whitespace-delimited word count of trimmed text."""
    if not isinstance(text, str):
        return 0
    return len(text.split())


def count_sentences(text: Any) -> int:
    """Number of period characters in the text."""
    if not isinstance(text, str):
        return 0
    return text.count(".")


def is_valid_remark(text: Any) -> bool:
    return REMARK_MIN_WORDS <= count_words(text) <= REMARK_MAX_WORDS


def is_valid_comment(text: Any) -> bool:
    return count_sentences(text) == COMMENT_SENTENCES


def validate_comment_quality(remark: Any, comment: Any) -> CommentQuality:
    """
    Check a remark/comment pair and explain any failure.

    Used by authoring tools before an entry is admitted to the bank and
    by the AI path before generated text is accepted.
    """
    word_count = count_words(remark)
    sentence_count = count_sentences(comment)
    remark_valid = REMARK_MIN_WORDS <= word_count <= REMARK_MAX_WORDS
    comment_valid = sentence_count == COMMENT_SENTENCES

    errors: List[str] = []
    if not remark_valid:
        errors.append(
            f"Remark must be {REMARK_MIN_WORDS}-{REMARK_MAX_WORDS} words, got {word_count}"
        )
    if not comment_valid:
        errors.append(
            f"Comment must be exactly {COMMENT_SENTENCES} sentences, got {sentence_count}"
        )

    return CommentQuality(
        remark_valid=remark_valid,
        comment_valid=comment_valid,
        remark_word_count=word_count,
        comment_sentence_count=sentence_count,
        errors=errors,
    )
