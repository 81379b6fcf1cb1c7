"""Errors raised to callers of the review engine."""


class ReviewError(Exception):
    """Base class for all review engine errors."""


class NotFound(ReviewError):
    """No card or schedule exists for the given id."""

    def __init__(self, card_id: str):
        super().__init__(f"card not found: {card_id}")
        self.card_id = card_id


class InvalidOutcome(ReviewError):
    """The review outcome is not Again, Good or Typed."""


class StoreUnavailable(ReviewError):
    """The schedule store failed; nothing was written."""


class ScheduleConflict(ReviewError):
    """The schedule changed since it was read; the update was rejected."""

    def __init__(self, card_id: str, version: int):
        super().__init__(f"schedule for card {card_id} changed since version {version}")
        self.card_id = card_id
        self.version = version
