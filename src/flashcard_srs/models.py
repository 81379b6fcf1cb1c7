"""Data classes for the scheduling domain model."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from flashcard_srs.errors import InvalidOutcome

INITIAL_EASE = 2.5


@dataclass(frozen=True)
class CardSchedule:
    card_id: str
    due_at: datetime
    interval_days: int = 0
    ease: float = INITIAL_EASE
    streak: int = 0
    lapses: int = 0
    version: int = 0


@dataclass(frozen=True)
class ReviewCard(CardSchedule):
    """A schedule joined with the text of the card it belongs to."""
    project_id: str = ""
    front: str = ""
    back: str = ""


@dataclass(frozen=True)
class Again:
    pass


@dataclass(frozen=True)
class Good:
    pass


@dataclass(frozen=True)
class Typed:
    answer: str


ReviewOutcome = Union[Again, Good, Typed]

OUTCOME_TYPES = (Again, Good, Typed)


@dataclass(frozen=True)
class Stats:
    total: int = 0
    due_now: int = 0
    new: int = 0
    learning: int = 0
    mastered: int = 0
    next_due_at: Optional[datetime] = None


@dataclass(frozen=True)
class ReviewResult:
    schedule: CardSchedule
    graded: Optional[bool] = None
    practice: bool = False


def new_schedule(card_id: str, now: datetime) -> CardSchedule:
    """Schedule for a freshly created card: due immediately, never reviewed."""
    return CardSchedule(card_id=card_id, due_at=now)


def parse_outcome(result: str, answer: Optional[str] = None) -> ReviewOutcome:
    """Turn the caller's result string ("again", "good", "type") into an outcome."""
    if result == "again":
        return Again()
    if result == "good":
        return Good()
    if result == "type":
        if answer is None:
            raise InvalidOutcome("typed result requires an answer")
        return Typed(answer=str(answer))
    raise InvalidOutcome(f"unknown review result: {result!r}")
