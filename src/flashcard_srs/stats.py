"""Project statistics derived from card schedules."""
from datetime import datetime
from typing import Iterable, Optional

from flashcard_srs.models import CardSchedule, Stats

MASTERED_STREAK = 5


def classify(schedule: CardSchedule) -> str:
    if schedule.streak == 0 and schedule.lapses == 0:
        return "new"
    elif schedule.streak >= MASTERED_STREAK:
        return "mastered"
    return "learning"


def aggregate(schedules: Iterable[CardSchedule], now: datetime) -> Stats:
    counts = {"new": 0, "learning": 0, "mastered": 0}
    total = 0
    due_now = 0
    next_due_at = None
    for s in schedules:
        total += 1
        counts[classify(s)] += 1
        if s.due_at <= now:
            due_now += 1
        elif next_due_at is None or s.due_at < next_due_at:
            next_due_at = s.due_at
    return Stats(
        total=total,
        due_now=due_now,
        new=counts["new"],
        learning=counts["learning"],
        mastered=counts["mastered"],
        next_due_at=next_due_at,
    )


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def time_until(due_at: Optional[datetime], now: datetime) -> str:
    """Human-readable wait until the next card, in the largest whole unit."""
    if due_at is None:
        return "no cards scheduled"
    minutes = int((due_at - now).total_seconds() // 60)
    hours = minutes // 60
    days = hours // 24
    if days > 0:
        return _plural(days, "day")
    elif hours > 0:
        return _plural(hours, "hour")
    elif minutes > 0:
        return _plural(minutes, "minute")
    return "soon"


def progress_shares(stats: Stats) -> dict:
    """Percentage of the project's cards in each class."""
    if not stats.total:
        return {"mastered": 0, "learning": 0, "new": 0}
    return {
        "mastered": round(stats.mastered / stats.total * 100),
        "learning": round(stats.learning / stats.total * 100),
        "new": round(stats.new / stats.total * 100),
    }
