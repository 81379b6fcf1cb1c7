"""Review turns: grading, scheduling and persistence for one card at a time."""
import logging
import random
from typing import Optional

from flashcard_srs.clock import SystemClock
from flashcard_srs.due import PRACTICE_BATCH_SIZE, due_cards, next_due, random_card, random_cards
from flashcard_srs.errors import InvalidOutcome, StoreUnavailable
from flashcard_srs.grader import grade
from flashcard_srs.models import (
    OUTCOME_TYPES, Again, Good, ReviewCard, ReviewOutcome, ReviewResult, Stats, Typed,
)
from flashcard_srs.sm2 import apply_outcome
from flashcard_srs.stats import aggregate

logger = logging.getLogger(__name__)


class ReviewSession:
    """Entry point for callers: submit reviews and query a project's cards.

    ``store`` needs get_schedule, put_schedule and list_schedules_for_project;
    ``clock`` needs now().
    """

    def __init__(self, store, clock=None, rng: random.Random | None = None):
        self.store = store
        self.clock = clock or SystemClock()
        self.rng = rng

    def submit_review(
        self, card_id: str, outcome: ReviewOutcome, practice: bool = False,
    ) -> ReviewResult:
        """Grade and schedule one review.

        In practice mode the answer is still graded, but the stored schedule
        is left untouched.
        """
        if not isinstance(outcome, OUTCOME_TYPES):
            raise InvalidOutcome(f"not a review outcome: {outcome!r}")
        card = self.store.get_schedule(card_id)

        graded = None
        decision = outcome
        if isinstance(outcome, Typed):
            graded = grade(outcome.answer, card.back)
            decision = Good() if graded else Again()

        if practice:
            return ReviewResult(schedule=card, graded=graded, practice=True)

        now = self.clock.now()
        updated = apply_outcome(card, decision, now)
        try:
            stored = self.store.put_schedule(updated)
        except StoreUnavailable:
            logger.warning("discarding review of card %s: store unavailable", card_id)
            raise
        logger.debug(
            "card %s %s: interval %d->%d ease %.2f->%.2f streak %d lapses %d",
            card_id, type(decision).__name__.lower(), card.interval_days, stored.interval_days,
            card.ease, stored.ease, stored.streak, stored.lapses,
        )
        return ReviewResult(schedule=stored, graded=graded)

    def _cards(self, project_id: str) -> list[ReviewCard]:
        return self.store.list_schedules_for_project(project_id)

    def get_next_due(self, project_id: str) -> Optional[ReviewCard]:
        return next_due(self._cards(project_id), self.clock.now())

    def get_due(self, project_id: str, limit: int | None = None) -> list[ReviewCard]:
        """Every due card of the project, earliest first."""
        return due_cards(self._cards(project_id), self.clock.now(), limit=limit)

    def get_random_for_practice(self, project_id: str) -> Optional[ReviewCard]:
        return random_card(self._cards(project_id), rng=self.rng)

    def get_practice_batch(
        self, project_id: str, limit: int = PRACTICE_BATCH_SIZE,
    ) -> list[ReviewCard]:
        return random_cards(self._cards(project_id), limit=limit, rng=self.rng)

    def get_stats(self, project_id: str) -> Stats:
        return aggregate(self._cards(project_id), self.clock.now())
