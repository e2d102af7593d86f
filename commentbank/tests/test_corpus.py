"""
Tests for loading and validating the comment bank.
"""

import json

import pytest

from commentbank.logic.corpus import CommentCorpus, CorpusLoadError, load_corpus
from commentbank.logic.constants import PerformanceBand, SubjectCategory, TrendIndicator
from commentbank.logic.validator import is_valid_remark, is_valid_comment


def make_record(band, category, remark, comment, trend=None, strengths=()):
    return {
        "band": band,
        "category": category,
        "trend": trend,
        "strength_tags": list(strengths),
        "weakness_tags": [],
        "short_remark": remark,
        "narrative_comment": comment,
    }


def test_default_bank_entries_are_valid(default_corpus):
    """Every packaged entry satisfies the remark and comment format rules."""
    assert len(default_corpus) > 0
    assert default_corpus.rejected_count == 0
    for candidate in default_corpus:
        assert is_valid_remark(candidate.short_remark), candidate.short_remark
        assert is_valid_comment(candidate.narrative_comment), candidate.narrative_comment


def test_default_bank_covers_every_band_and_category(default_corpus):
    stats = default_corpus.stats()
    assert set(stats["by_band"]) == {band.value for band in PerformanceBand}
    assert set(stats["by_category"]) == {category.value for category in SubjectCategory}


def test_default_bank_uses_british_spelling(default_corpus):
    americanisms = ["color", "center", "realize", "analyze", "organize", "practicing"]
    text = " ".join(
        f"{c.short_remark} {c.narrative_comment}".lower() for c in default_corpus
    )
    for word in americanisms:
        assert word not in text


def test_null_trend_loads_as_none():
    corpus = CommentCorpus.from_records([
        make_record("B", "Physics", "Good mechanics work this term",
                    "Mechanics is solid. Keep practising.", trend=None),
    ])
    assert corpus.candidates[0].trend == TrendIndicator.NONE


def test_tags_are_lowercased():
    corpus = CommentCorpus.from_records([
        make_record("B", "Physics", "Good mechanics work this term",
                    "Mechanics is solid. Keep practising.", strengths=[" Mechanics ", "WAVES"]),
    ])
    assert corpus.candidates[0].strength_tags == frozenset({"mechanics", "waves"})


def test_malformed_entries_are_rejected(caplog):
    records = [
        make_record("A", "Mathematics", "Exceptional algebra skills shown clearly",
                    "Excellent algebra work. Keep going."),
        make_record("Z", "Mathematics", "Exceptional algebra skills shown clearly",
                    "Excellent algebra work. Keep going."),
        make_record("A", "Mathematics", "Too short",
                    "Excellent algebra work. Keep going."),
        make_record("A", "Mathematics", "Exceptional geometry skills shown clearly",
                    "Only one sentence here."),
        "not a record",
    ]
    corpus = CommentCorpus.from_records(records)

    assert len(corpus) == 1
    assert corpus.rejected_count == 4
    assert "rejected" in caplog.text


def test_load_corpus_from_file(tmp_path):
    path = tmp_path / "bank.json"
    path.write_text(json.dumps([
        make_record("D", "History", "Limited chronology understanding needs support",
                    "Dates are often confused. Regular revision will help."),
    ]), encoding="utf-8")

    corpus = load_corpus(str(path))
    assert len(corpus) == 1
    assert corpus.candidates[0].category == SubjectCategory.HISTORY


def test_load_corpus_missing_file(tmp_path):
    with pytest.raises(CorpusLoadError):
        load_corpus(str(tmp_path / "missing.json"))


def test_load_corpus_rejects_non_list(tmp_path):
    path = tmp_path / "bank.json"
    path.write_text(json.dumps({"entries": []}), encoding="utf-8")
    with pytest.raises(CorpusLoadError):
        load_corpus(str(path))


def test_filter_by_band_and_category(small_corpus):
    maths_a = small_corpus.filter(band=PerformanceBand.A, category=SubjectCategory.MATHEMATICS)
    assert len(maths_a) == 4
    assert all(c.category == SubjectCategory.MATHEMATICS for c in maths_a)
