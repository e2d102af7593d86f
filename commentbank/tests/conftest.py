import pytest

from commentbank.logic.corpus import CommentCorpus, get_default_corpus


def make_record(band, category, remark, comment, trend=None, strengths=(), weaknesses=()):
    return {
        "band": band,
        "category": category,
        "trend": trend,
        "strength_tags": list(strengths),
        "weakness_tags": list(weaknesses),
        "short_remark": remark,
        "narrative_comment": comment,
    }


@pytest.fixture
def small_corpus():
    """Four Mathematics band A entries plus one English and one band C entry."""
    records = [
        make_record("A", "Mathematics", "Exceptional algebra skills shown clearly",
                    "Excellent algebra work this term. Keep stretching yourself.",
                    trend="up", strengths=["algebra"]),
        make_record("A", "Mathematics", "Outstanding geometry mastery shown clearly",
                    "Excellent geometry work this term. Keep aiming higher.",
                    trend="flat", strengths=["geometry"]),
        make_record("A", "Mathematics", "Remarkable statistics work this term",
                    "Strong statistics results this term. Continue the good habits."),
        make_record("A", "Mathematics", "Excellent calculus progress made steadily",
                    "Calculus work is excellent. Attempt harder problems next term.",
                    trend="down", weaknesses=["speed"]),
        make_record("A", "English", "Outstanding grammar mastery demonstrated clearly",
                    "Grammar is precise and confident. Keep reading widely."),
        make_record("C", "Mathematics", "Fair algebra work, keep practising",
                    "Algebra is developing steadily. Daily practice will help."),
    ]
    return CommentCorpus.from_records(records)


@pytest.fixture
def empty_corpus():
    return CommentCorpus()


@pytest.fixture(scope="session")
def default_corpus():
    return get_default_corpus()
