"""Levenshtein edit distance."""
from typing import Optional


def levenshtein(a: str, b: str, max_distance: Optional[int] = None) -> int:
    """Minimum number of single-character insertions, deletions or substitutions.

    Args:
        a: First string.
        b: Second string.
        max_distance: Optional cutoff. Once the distance is known to exceed it,
            ``max_distance + 1`` is returned instead of the exact value.

    Returns:
        The edit distance, or ``max_distance + 1`` if it exceeds the cutoff.
    """
    if a == b:
        return 0
    # Keep the row over the shorter string
    if len(a) < len(b):
        a, b = b, a
    if max_distance is not None and len(a) - len(b) > max_distance:
        return max_distance + 1
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,               # deletion
                current[j - 1] + 1,            # insertion
                previous[j - 1] + (ca != cb),  # substitution
            ))
        if max_distance is not None and min(current) > max_distance:
            return max_distance + 1
        previous = current

    result = previous[-1]
    if max_distance is not None and result > max_distance:
        return max_distance + 1
    return result
