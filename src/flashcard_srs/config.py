"""Runtime defaults, overridable through environment variables."""
import os
from pathlib import Path

DEFAULT_DB_PATH = os.environ.get(
    "FLASHCARD_SRS_DB", str(Path.home() / ".flashcard_srs" / "reviews.db")
)
DEFAULT_PROJECT = os.environ.get("FLASHCARD_SRS_PROJECT", "default")
LOG_LEVEL = os.environ.get("FLASHCARD_SRS_LOG_LEVEL", "WARNING").upper()
