"""Answer text normalization."""
import re

_WHITESPACE = re.compile(r"\s+")


def normalize(s: str) -> str:
    """Lowercase, trim, and collapse whitespace runs to a single space.

    Punctuation is left alone: "St. Louis" and "St Louis" are different answers.
    """
    return _WHITESPACE.sub(" ", s.strip().lower())
