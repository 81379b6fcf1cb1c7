"""Typed-answer grading with length-based typo tolerance."""
from flashcard_srs.distance import levenshtein
from flashcard_srs.text import normalize


def tolerance_for(target: str) -> int:
    """Allowed edit distance for a normalized target answer."""
    if len(target) <= 5:
        return 0
    elif len(target) <= 15:
        return 1
    return 2


def grade(typed_answer: str, correct_answer: str) -> bool:
    """Return True if the typed answer counts as correct."""
    given = normalize(typed_answer)
    target = normalize(correct_answer)
    if given == target:
        return True
    allowed = tolerance_for(target)
    return levenshtein(given, target, max_distance=allowed) <= allowed
