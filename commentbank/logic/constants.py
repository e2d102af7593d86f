"""
Comment Bank Constants

Defines the band thresholds, subject rules, ranking weights and enums used by
the comment engine. All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, List, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class PerformanceBand(str, Enum):
    """Ordinal performance band derived from a numeric score (A is best)."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class TrendIndicator(str, Enum):
    """Direction of change between the current and a reference score."""
    UP = "up"
    DOWN = "down"
    FLAT = "flat"
    NONE = "none"  # No reference score supplied


class SubjectCategory(str, Enum):
    """Canonical subject labels the comment bank is authored against."""
    MATHEMATICS = "Mathematics"
    PHYSICS = "Physics"
    CHEMISTRY = "Chemistry"
    BIOLOGY = "Biology"
    ENGLISH = "English"
    LITERATURE = "Literature"
    ECONOMICS = "Economics"
    COMMERCE = "Commerce"
    ACCOUNTING = "Accounting"
    GOVERNMENT = "Government"
    HISTORY = "History"
    GEOGRAPHY = "Geography"
    ICT = "ICT"
    TECHNICAL_DRAWING = "Technical Drawing"
    GENERAL = "General"


class CommentSource(str, Enum):
    """Where a remark/comment pair came from."""
    COMMENT_BANK = "comment_bank"
    AI = "ai"


# =============================================================================
# BAND THRESHOLDS
# =============================================================================

# Minimum score for each band, checked from best to worst
BAND_THRESHOLDS: List[Tuple[PerformanceBand, float]] = [
    (PerformanceBand.A, 85.0),
    (PerformanceBand.B, 70.0),
    (PerformanceBand.C, 55.0),
    (PerformanceBand.D, 40.0),
]

# Ordinal order used for one-step-away matching
BAND_ORDER: List[PerformanceBand] = [
    PerformanceBand.A,
    PerformanceBand.B,
    PerformanceBand.C,
    PerformanceBand.D,
    PerformanceBand.F,
]

# =============================================================================
# TREND
# =============================================================================

# Score difference (exclusive) beyond which a trend is up/down
TREND_THRESHOLD = 5.0

# =============================================================================
# SUBJECT CATEGORY RULES
# =============================================================================

# Ordered keyword rules, evaluated top to bottom against the lower-cased
# subject name. First substring hit wins. "literature" must stay above
# "english" so "Literature in English" is not filed under English.
SUBJECT_CATEGORY_RULES: List[Tuple[Tuple[str, ...], SubjectCategory]] = [
    (("math",), SubjectCategory.MATHEMATICS),
    (("physics",), SubjectCategory.PHYSICS),
    (("chem",), SubjectCategory.CHEMISTRY),
    (("bio",), SubjectCategory.BIOLOGY),
    (("literature",), SubjectCategory.LITERATURE),
    (("english",), SubjectCategory.ENGLISH),
    (("econ",), SubjectCategory.ECONOMICS),
    (("commerce",), SubjectCategory.COMMERCE),
    (("account", "book keeping", "bookkeeping"), SubjectCategory.ACCOUNTING),
    (("government", "civic"), SubjectCategory.GOVERNMENT),
    (("history",), SubjectCategory.HISTORY),
    (("geograph",), SubjectCategory.GEOGRAPHY),
    # " ict " is padded so it only matches the whole word
    ((" ict ", "computer", "information tech", "data processing"), SubjectCategory.ICT),
    (("technical drawing", "tech drawing"), SubjectCategory.TECHNICAL_DRAWING),
]

DEFAULT_CATEGORY = SubjectCategory.GENERAL

# =============================================================================
# RANKING WEIGHTS
# =============================================================================

# Match priority: category and band dominate, trend breaks ties,
# tags personalise within a band/category.
RANKING_WEIGHTS: Dict[str, int] = {
    "band_exact": 50,
    "band_adjacent": 20,
    "category_exact": 40,
    "trend_exact": 20,
    "strength_tag": 10,
    "weakness_tag": 10,
}

# =============================================================================
# FORMAT RULES
# =============================================================================

REMARK_MIN_WORDS = 4
REMARK_MAX_WORDS = 6
COMMENT_SENTENCES = 2

# =============================================================================
# FALLBACKS
# =============================================================================

# Returned when every ranked candidate is used or invalid for this learner.
# Never registered in a session, so they may repeat.
FALLBACK_REMARK = "Steady effort shown this term"
FALLBACK_COMMENT = (
    "Shows steady effort in this subject this term. "
    "Regular revision and practice will strengthen understanding."
)

ENGINE_VERSION = "1.0.0"
