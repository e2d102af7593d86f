"""
Overall Comment

Rule-based overall (form teacher) comment built from a learner's term
average, class position and attendance. Used when no AI service is enabled.
"""

from typing import Optional
from .classifier import score_to_band
from .constants import PerformanceBand


OPENINGS = {
    PerformanceBand.A: "has delivered an excellent overall performance this term",
    PerformanceBand.B: "has produced a very good overall performance this term",
    PerformanceBand.C: "has made fair progress across subjects this term",
    PerformanceBand.D: "has shown basic understanding across subjects this term",
    PerformanceBand.F: "has found this term very challenging across subjects",
}

ENCOURAGEMENT = {
    PerformanceBand.A: "Keep up this outstanding standard and continue to aim higher next term.",
    PerformanceBand.B: "Consistent revision will help turn this good work into excellent results.",
    PerformanceBand.C: "Greater focus and regular practice will lift performance next term.",
    PerformanceBand.D: "Steady effort with extra support at home and school is needed to improve.",
    PerformanceBand.F: "Urgent support and a parent-teacher meeting are strongly recommended.",
}

LOW_ATTENDANCE = 75.0
HIGH_ATTENDANCE = 90.0


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def generate_rule_based_teacher_comment(
    student_name: str,
    average: float,
    position: Optional[int] = None,
    class_size: Optional[int] = None,
    attendance_rate: Optional[float] = None,
    two_sentence: bool = True
) -> str:
    """
    Build an overall term comment without calling any AI service.

    With two_sentence=True the result is exactly two sentences. Periods are
    removed from the name and the average is shown as a whole number so the
    sentence count stays exact.

    Args:
        student_name: Learner's display name
        average: Term average across subjects
        position: Class position, if ranked
        class_size: Number of learners in the class
        attendance_rate: Attendance percentage
        two_sentence: Return the two-sentence form used on report cards

    Returns:
        Comment text
    """
    name = (student_name or "").replace(".", "").strip() or "This student"
    band = score_to_band(average)

    first = f"{name} {OPENINGS[band]} with an average of {round(average)}%"
    if position and class_size:
        first += f" and placed {_ordinal(position)} out of {class_size}"
    first += "."

    if attendance_rate is not None and attendance_rate < LOW_ATTENDANCE:
        second = "More regular attendance is needed to support steady progress next term."
    else:
        second = ENCOURAGEMENT[band]

    if two_sentence:
        return f"{first} {second}"

    parts = [first]
    if attendance_rate is not None and attendance_rate >= HIGH_ATTENDANCE:
        parts.append("Attendance has been excellent.")
    parts.append(second)
    return " ".join(parts)
