# tests/test_grader.py
from flashcard_srs.grader import grade, tolerance_for


def test_tolerance_by_length():
    assert tolerance_for("") == 0
    assert tolerance_for("paris") == 0
    assert tolerance_for("london") == 1
    assert tolerance_for("a" * 15) == 1
    assert tolerance_for("a" * 16) == 2


def test_grade_is_reflexive():
    for s in ["", "Paris", "  Mitochondria ", "the powerhouse of the cell", "?!"]:
        assert grade(s, s) is True


def test_grade_case_and_whitespace_insensitive():
    assert grade("paris", "Paris") is True
    assert grade("  new   york ", "New York") is True


def test_grade_short_answer_requires_exact():
    """Paris has 5 chars, so one typo fails."""
    assert grade("Pariz", "Paris") is False


def test_grade_medium_answer_allows_one_edit():
    assert grade("mitochondriaa", "Mitochondria") is True


def test_grade_medium_answer_transposition_is_two_edits():
    assert grade("mitochondira", "Mitochondria") is False


def test_grade_long_answer_allows_two_edits():
    target = "the powerhouse of the cell"
    assert grade("the powerhose of teh cell", target) is False
    assert grade("the powerhose of the cel", target) is True


def test_grade_empty_target_requires_exact():
    assert grade("", "   ") is True
    assert grade("a", "") is False


def test_grade_punctuation_counts():
    assert grade("St Louis", "St. Louis") is True  # 9 chars, one deletion
    assert grade("Rome", "Rome!") is False
