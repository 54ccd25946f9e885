# models.py
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from dates import day_id, parse_day

EMOJIS = ["⭐", "💪", "📚", "🏃", "🧘", "💧", "🎯", "✍️", "🎨", "🎵", "🌱", "🔥"]
COLORS = [
    "#3b82f6",
    "#ef4444",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#ec4899",
    "#06b6d4",
    "#84cc16",
]
DEFAULT_EMOJI = EMOJIS[0]
DEFAULT_COLOR = COLORS[0]


def new_habit_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Habit:
    id: str
    name: str
    emoji: str = DEFAULT_EMOJI
    color: str = DEFAULT_COLOR
    completed_dates: List[str] = field(default_factory=list)
    reminder: Optional[str] = None   # "HH:MM" or None
    created_at: str = ""

    def to_dict(self) -> dict:
        raw = {
            "id": self.id,
            "name": self.name,
            "emoji": self.emoji,
            "color": self.color,
            "completedDates": list(self.completed_dates),
            "createdAt": self.created_at,
        }
        if self.reminder:
            raw["reminder"] = self.reminder
        return raw

    @classmethod
    def from_dict(cls, raw: dict) -> "Habit":
        """Build a Habit from a stored record. Raises KeyError/TypeError on bad records."""
        if not isinstance(raw, dict):
            raise TypeError(f"Habit record must be an object, got {type(raw).__name__}")
        days = raw.get("completedDates")
        if days is None:
            days = []
        if not isinstance(days, list):
            raise TypeError(f"completedDates must be a list, got {type(days).__name__}")
        # one entry per calendar day, first occurrence wins; unparsable days are dropped
        seen = []
        for day in days:
            parsed = parse_day(day) if isinstance(day, str) else None
            if parsed is not None and day_id(parsed) not in seen:
                seen.append(day_id(parsed))
        return cls(
            id=str(raw["id"]),
            name=str(raw["name"]),
            emoji=raw.get("emoji") or DEFAULT_EMOJI,
            color=raw.get("color") or DEFAULT_COLOR,
            completed_dates=seen,
            reminder=raw.get("reminder") or None,
            created_at=raw.get("createdAt", ""),
        )
