# tests/test_text.py
from flashcard_srs.text import normalize


def test_normalize_lowercases():
    assert normalize("PaRiS") == "paris"


def test_normalize_trims_and_collapses_whitespace():
    assert normalize("  New \t York\n City ") == "new york city"


def test_normalize_keeps_punctuation():
    assert normalize("St. Louis!") == "st. louis!"


def test_normalize_empty():
    assert normalize("   ") == ""
