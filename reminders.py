"""Reminder scan and the Tk timer that runs it once a minute."""

import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from dates import clock_hhmm, day_id
from streaks import ANCHOR_LATEST, current_streak, is_completed_today

log = logging.getLogger(__name__)

GRANTED = "granted"
DENIED = "denied"
MAX_CATCH_UP_MINUTES = 15
MINUTE = timedelta(minutes=1)


def due_reminders(habits, now: datetime) -> List:
    """Habits whose reminder is this minute and which aren't done today."""
    current = clock_hhmm(now)
    today = now.date()
    return [
        h for h in habits
        if h.reminder == current and not is_completed_today(h, today)
    ]


def reminder_message(habit, today, anchor: str = ANCHOR_LATEST):
    streak = current_streak(habit, today, anchor=anchor)
    return f"Time to {habit.name}!", f"Don't break your {streak} day streak!"


class NotificationPermission:
    """One-time yes/no grant, remembered in storage."""

    def __init__(self, storage, key: str = "notifications"):
        self.storage = storage
        self.key = key

    @property
    def state(self) -> Optional[str]:
        return self.storage.get_item(self.key)

    @property
    def granted(self) -> bool:
        return self.state == GRANTED

    def request(self, ask: Callable[[], bool]) -> bool:
        """Ask only if nobody has answered yet; returns whether notifications are allowed."""
        if self.state is None:
            answer = GRANTED if ask() else DENIED
            self.storage.set_item(self.key, answer)
            log.info("Notification permission %s", answer)
        return self.granted


class ReminderScheduler:
    """
    Re-arms itself with widget.after(); each tick is a read-only scan of the store.

    widget: anything with after(ms, fn) and after_cancel(id) (a Tk widget)
    notify: callable(title, body)
    """

    def __init__(
        self,
        widget,
        store,
        notify: Callable[[str, str], None],
        permission: NotificationPermission,
        interval_ms: int = 60_000,
        clock: Callable[[], datetime] = datetime.now,
        anchor: str = ANCHOR_LATEST,
    ):
        self.widget = widget
        self.store = store
        self.notify = notify
        self.permission = permission
        self.interval_ms = interval_ms
        self.clock = clock
        self.anchor = anchor
        self._after_id = None
        self._last_minute = None
        self._fired = set()  # (habit id, "YYYY-MM-DD HH:MM")

    @property
    def running(self) -> bool:
        return self._after_id is not None

    def start(self):
        if not self.running:
            # the first tick also covers the minute we started in
            self._last_minute = _minute(self.clock()) - MINUTE
            self._schedule()

    def stop(self):
        if self._after_id is not None:
            self.widget.after_cancel(self._after_id)
            self._after_id = None

    def _schedule(self):
        self._after_id = self.widget.after(self.interval_ms, self._tick)

    def _tick(self):
        # re-arm first: notify may run a nested event loop or raise
        self._schedule()
        try:
            self.catch_up(self.clock())
        except Exception:
            log.exception("Reminder check failed")

    def minutes_to_scan(self, now: datetime) -> List[datetime]:
        """Every minute after the last scanned one, up to and including now's minute."""
        current = _minute(now)
        last = self._last_minute
        if last is None or current <= last:
            # first scan, or the clock went backwards
            return [] if current == last else [current]
        gap = int((current - last) / MINUTE)
        if gap > MAX_CATCH_UP_MINUTES:
            log.warning("Reminder timer stalled for %d minutes; skipping to %s", gap, clock_hhmm(current))
            return [current]
        return [last + MINUTE * i for i in range(1, gap + 1)]

    def catch_up(self, now: datetime) -> int:
        fired = 0
        for minute in self.minutes_to_scan(now):
            self._last_minute = minute
            fired += self.check(minute)
        return fired

    def check(self, now: datetime) -> int:
        """Fire notifications for everything due at `now`; returns how many fired."""
        if not self.permission.granted:
            return 0
        minute = f"{day_id(now)} {clock_hhmm(now)}"
        self._fired = {key for key in self._fired if key[1] == minute}
        fired = 0
        for habit in due_reminders(self.store.list_habits(), now):
            key = (habit.id, minute)
            if key in self._fired:
                continue
            self._fired.add(key)
            title, body = reminder_message(habit, now.date(), anchor=self.anchor)
            log.info("Reminder for %s", habit.name)
            self.notify(title, body)
            fired += 1
        return fired


def _minute(moment: datetime) -> datetime:
    return moment.replace(second=0, microsecond=0)
