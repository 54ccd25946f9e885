"""Current-streak calculation over a habit's completion days.

Everything here is pure: "today" is always passed in.
"""

from dates import as_date, day_id, previous_day

ANCHOR_LATEST = "latest"
ANCHOR_TODAY = "today"
ANCHORS = (ANCHOR_LATEST, ANCHOR_TODAY)


def is_completed_today(habit, today) -> bool:
    return day_id(as_date(today)) in habit.completed_dates


def _sorted_desc(completed_dates):
    return sorted(set(completed_dates), reverse=True)


def current_streak(habit, today, anchor: str = ANCHOR_LATEST) -> int:
    """
    Consecutive completed days ending today or yesterday.

    anchor="latest" counts back from the most recent completion, so a run
    that ended yesterday still shows while today is open.
    anchor="today" counts back from today no matter what, which gives 0
    for a run that ended yesterday.
    """
    if anchor not in ANCHORS:
        raise ValueError(f"Unknown streak anchor: {anchor!r}")
    if not habit.completed_dates:
        return 0

    today_id = day_id(as_date(today))
    yesterday_id = previous_day(today_id)
    ordered = _sorted_desc(habit.completed_dates)
    most_recent = ordered[0]
    if most_recent not in (today_id, yesterday_id):
        return 0  # streak broken

    start = most_recent if anchor == ANCHOR_LATEST else today_id
    streak = 0
    for i, day in enumerate(ordered):
        if day != previous_day(start, i):
            break
        streak += 1
    return streak
