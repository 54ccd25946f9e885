"""Runtime settings, read from the environment (or a .env file) with defaults."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from streaks import ANCHOR_LATEST, ANCHORS

log = logging.getLogger(__name__)

_PROJECT_ROOT = Path(__file__).resolve().parent
load_dotenv(_PROJECT_ROOT / ".env")


def _env(key: str, default: str = "") -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _env_choice(key: str, choices, default: str) -> str:
    value = os.getenv(key, default).strip().lower()
    if value not in choices:
        log.warning("%s=%r is not one of %s; using %r", key, value, ", ".join(choices), default)
        return default
    return value


# Storage
DATA_PATH = _env("HABIT_DATA_PATH", "data/habits.json")
HABITS_KEY = "habits"
NOTIFICATIONS_KEY = "notifications"

# "latest" anchors the streak walk at the most recent completion,
# "today" reproduces the stricter today-anchored count.
STREAK_ANCHOR = _env_choice("STREAK_ANCHOR", ANCHORS, ANCHOR_LATEST)

# Reminders
REMINDER_INTERVAL_MS = _env_int("REMINDER_INTERVAL_MS", 60_000)

LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
