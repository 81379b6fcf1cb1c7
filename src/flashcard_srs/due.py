"""Due-card selection for review mode and random picks for practice mode."""
import random
from datetime import datetime
from typing import Iterable, Optional, TypeVar

from flashcard_srs.models import CardSchedule

PRACTICE_BATCH_SIZE = 10

S = TypeVar("S", bound=CardSchedule)


def _due_order(schedule: CardSchedule):
    return (schedule.due_at, schedule.card_id)


def due_cards(schedules: Iterable[S], now: datetime, limit: int | None = None) -> list[S]:
    """Schedules with due_at <= now, earliest first, ties by card_id."""
    due = sorted((s for s in schedules if s.due_at <= now), key=_due_order)
    return due if limit is None else due[:limit]


def next_due(schedules: Iterable[S], now: datetime) -> Optional[S]:
    due = [s for s in schedules if s.due_at <= now]
    if not due:
        return None
    return min(due, key=_due_order)


def random_card(schedules: Iterable[S], rng: random.Random | None = None) -> Optional[S]:
    pool = list(schedules)
    if not pool:
        return None
    return (rng or random).choice(pool)


def random_cards(
    schedules: Iterable[S], limit: int = PRACTICE_BATCH_SIZE, rng: random.Random | None = None,
) -> list[S]:
    """Up to ``limit`` distinct schedules in random order."""
    pool = list(schedules)
    return (rng or random).sample(pool, min(limit, len(pool)))
