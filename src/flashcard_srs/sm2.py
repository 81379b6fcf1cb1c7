"""SM-2 style schedule updates."""
from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP

from flashcard_srs.errors import InvalidOutcome
from flashcard_srs.models import Again, CardSchedule, Good, ReviewOutcome, Typed

MIN_EASE = 1.3
MAX_EASE = 3.0
EASE_PENALTY = 0.2
EASE_BONUS = 0.05
AGAIN_DELAY = timedelta(minutes=10)
# due_at has to stay inside the datetime range
MAX_INTERVAL_DAYS = 36500


def _clamp_ease(ease: float) -> float:
    return round(min(MAX_EASE, max(MIN_EASE, ease)), 2)


def _grown_interval(interval_days: int, ease: float) -> int:
    # In Decimal, exact halves (25 * 2.3 = 57.5) stay exact and round up
    grown = Decimal(interval_days) * Decimal(str(ease))
    return int(grown.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def next_interval(interval_days: int, ease: float) -> int:
    """Interval after a successful review: 1 day from scratch, else grown by ease."""
    if interval_days == 0:
        return 1
    return min(MAX_INTERVAL_DAYS, _grown_interval(interval_days, ease))


def apply_outcome(old: CardSchedule, outcome: ReviewOutcome, now: datetime) -> CardSchedule:
    """Calculate the schedule that follows a review.

    Args:
        old: Current schedule of the card.
        outcome: Again or Good. Typed answers must be graded first.
        now: Time of the review.

    Returns:
        A new schedule; ``old`` is not modified.
    """
    if isinstance(outcome, Again):
        return replace(
            old,
            lapses=old.lapses + 1,
            ease=_clamp_ease(old.ease - EASE_PENALTY),
            streak=0,
            interval_days=0,
            due_at=now + AGAIN_DELAY,
        )
    if isinstance(outcome, Good):
        interval = next_interval(old.interval_days, old.ease)
        return replace(
            old,
            streak=old.streak + 1,
            interval_days=interval,
            ease=_clamp_ease(old.ease + EASE_BONUS),
            due_at=now + timedelta(days=interval),
        )
    if isinstance(outcome, Typed):
        raise InvalidOutcome("typed answers must be graded before scheduling")
    raise InvalidOutcome(f"not a review outcome: {outcome!r}")
