# store.py
import logging
from datetime import date, datetime
from typing import Callable, List, Optional

from dates import day_id, parse_reminder
from models import COLORS, DEFAULT_COLOR, DEFAULT_EMOJI, EMOJIS, Habit, new_habit_id

log = logging.getLogger(__name__)


class HabitStore:
    """Owns the habit list; every mutation rewrites the whole snapshot."""

    def __init__(self, backend, clock: Callable[[], date] = date.today):
        self.backend = backend
        self.clock = clock
        self.habits: List[Habit] = []

    # -------- Persistence --------
    def load(self) -> List[Habit]:
        raw = self.backend.load()
        self.habits = []
        if raw is None:
            return self.habits
        if not isinstance(raw, list):
            log.warning("Stored habits are not a list (%s); starting empty", type(raw).__name__)
            return self.habits

        seen_ids = set()
        for record in raw:
            try:
                habit = Habit.from_dict(record)
            except (KeyError, TypeError, ValueError) as exc:
                log.warning("Skipping malformed habit record %r: %s", record, exc)
                continue
            if habit.id in seen_ids:
                log.warning("Skipping duplicate habit id %s", habit.id)
                continue
            seen_ids.add(habit.id)
            self.habits.append(habit)
        log.info("Loaded %d habit(s)", len(self.habits))
        return self.habits

    def save(self):
        # an empty list is written too, so deleting the last habit sticks
        self.backend.save([h.to_dict() for h in self.habits])
        log.debug("Saved snapshot with %d habit(s)", len(self.habits))

    # -------- Reads --------
    def list_habits(self) -> List[Habit]:
        return list(self.habits)

    def get(self, habit_id: str) -> Optional[Habit]:
        for habit in self.habits:
            if habit.id == habit_id:
                return habit
        return None

    # -------- Mutations --------
    def add_habit(
        self,
        name: str,
        emoji: str = DEFAULT_EMOJI,
        color: str = DEFAULT_COLOR,
        reminder: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Optional[Habit]:
        name = (name or "").strip()
        if not name:
            return None
        created = now or datetime.now()
        habit = Habit(
            id=self._fresh_id(),
            name=name,
            emoji=emoji if emoji in EMOJIS else DEFAULT_EMOJI,
            color=color if color in COLORS else DEFAULT_COLOR,
            completed_dates=[],
            reminder=parse_reminder(reminder),
            created_at=created.isoformat(),
        )
        self.habits.append(habit)
        self.save()
        return habit

    def toggle_today(self, habit_id: str, today: Optional[date] = None) -> Optional[bool]:
        """Flip today's completion; returns the new state, or None for an unknown id."""
        habit = self.get(habit_id)
        if habit is None:
            return None
        key = day_id(today or self.clock())
        if key in habit.completed_dates:
            habit.completed_dates.remove(key)
            done = False
        else:
            habit.completed_dates.append(key)
            done = True
        self.save()
        return done

    def delete_habit(self, habit_id: str) -> bool:
        remaining = [h for h in self.habits if h.id != habit_id]
        if len(remaining) == len(self.habits):
            return False
        self.habits = remaining
        self.save()
        return True

    def _fresh_id(self) -> str:
        taken = {h.id for h in self.habits}
        hid = new_habit_id()
        while hid in taken:
            hid = new_habit_id()
        return hid
