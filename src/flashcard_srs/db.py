"""SQLite schedule store."""
import sqlite3
import uuid
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from flashcard_srs.config import DEFAULT_DB_PATH
from flashcard_srs.errors import NotFound, ScheduleConflict, StoreUnavailable
from flashcard_srs.models import CardSchedule, ReviewCard, new_schedule

SCHEMA = """
CREATE TABLE IF NOT EXISTS card (
    id TEXT PRIMARY KEY,
    project_id TEXT NOT NULL,
    front TEXT NOT NULL,
    back TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_card_project ON card(project_id);

CREATE TABLE IF NOT EXISTS card_schedule (
    card_id TEXT PRIMARY KEY REFERENCES card(id) ON DELETE CASCADE,
    due_at TEXT NOT NULL,
    interval_days INTEGER NOT NULL DEFAULT 0,
    ease REAL NOT NULL DEFAULT 2.5,
    streak INTEGER NOT NULL DEFAULT 0,
    lapses INTEGER NOT NULL DEFAULT 0,
    version INTEGER NOT NULL DEFAULT 0
);
"""

SELECT_CARD = """SELECT c.id, c.project_id, c.front, c.back,
    s.due_at, s.interval_days, s.ease, s.streak, s.lapses, s.version
FROM card c JOIN card_schedule s ON s.card_id = c.id"""


def get_connection(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Return a SQLite connection with row factory and foreign keys enabled."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def to_iso(when: datetime) -> str:
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc).isoformat()


def from_iso(value: str) -> datetime:
    when = datetime.fromisoformat(value)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when


def _row_to_card(row: sqlite3.Row) -> ReviewCard:
    return ReviewCard(
        card_id=row["id"],
        project_id=row["project_id"],
        front=row["front"],
        back=row["back"],
        due_at=from_iso(row["due_at"]),
        interval_days=row["interval_days"],
        ease=row["ease"],
        streak=row["streak"],
        lapses=row["lapses"],
        version=row["version"],
    )


class ScheduleStore:
    """Card schedules kept in a SQLite file, one connection per call."""

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        self.db_path = db_path

    @contextmanager
    def _connect(self):
        try:
            conn = get_connection(self.db_path)
        except sqlite3.Error as exc:
            raise StoreUnavailable(f"cannot open {self.db_path}: {exc}") from exc
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreUnavailable(str(exc)) from exc
        finally:
            conn.close()

    def init(self) -> None:
        """Create the tables if they don't exist."""
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.executescript(SCHEMA)

    def add_card(
        self, project_id: str, front: str, back: str, now: datetime, card_id: str | None = None,
    ) -> ReviewCard:
        """Insert a card together with its creation-time schedule."""
        card_id = card_id or uuid.uuid4().hex
        schedule = new_schedule(card_id, now)
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO card (id, project_id, front, back) VALUES (?, ?, ?, ?)",
                (card_id, project_id, front, back),
            )
            conn.execute(
                """INSERT INTO card_schedule
                (card_id, due_at, interval_days, ease, streak, lapses, version)
                VALUES (?, ?, ?, ?, ?, ?, ?)""",
                (card_id, to_iso(schedule.due_at), schedule.interval_days, schedule.ease,
                 schedule.streak, schedule.lapses, schedule.version),
            )
        return ReviewCard(
            card_id=card_id, project_id=project_id, front=front, back=back,
            due_at=schedule.due_at, ease=schedule.ease,
        )

    def delete_card(self, card_id: str) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM card WHERE id = ?", (card_id,))

    def get_schedule(self, card_id: str) -> ReviewCard:
        with self._connect() as conn:
            row = conn.execute(SELECT_CARD + " WHERE c.id = ?", (card_id,)).fetchone()
        if row is None:
            raise NotFound(card_id)
        return _row_to_card(row)

    def put_schedule(self, schedule: CardSchedule) -> CardSchedule:
        """Write a schedule if nobody else has since the version it was read at.

        Returns the schedule as stored, with its version bumped.
        """
        with self._connect() as conn:
            cur = conn.execute(
                """UPDATE card_schedule
                SET due_at=?, interval_days=?, ease=?, streak=?, lapses=?, version=version + 1
                WHERE card_id=? AND version=?""",
                (to_iso(schedule.due_at), schedule.interval_days, schedule.ease,
                 schedule.streak, schedule.lapses, schedule.card_id, schedule.version),
            )
            if cur.rowcount == 0:
                exists = conn.execute(
                    "SELECT 1 FROM card_schedule WHERE card_id = ?", (schedule.card_id,)
                ).fetchone()
                if exists is None:
                    raise NotFound(schedule.card_id)
                raise ScheduleConflict(schedule.card_id, schedule.version)
        return replace(schedule, version=schedule.version + 1)

    def list_schedules_for_project(self, project_id: str) -> list[ReviewCard]:
        with self._connect() as conn:
            rows = conn.execute(
                SELECT_CARD + " WHERE c.project_id = ? ORDER BY c.id", (project_id,)
            ).fetchall()
        return [_row_to_card(r) for r in rows]
