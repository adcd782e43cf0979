# Shared builders for test calendars.

from datetime import date, timedelta

from commitcraft.calendar import ActivityCalendar, Day

START = date(2024, 1, 7)  # a Sunday


class FixedRandom:
    """Stands in for random.Random: every draw returns the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def make_calendar(weeks):
    # weeks: list of 7-count lists
    out = []
    for w, counts in enumerate(weeks):
        week = []
        for d, count in enumerate(counts):
            iso = (START + timedelta(days=w * 7 + d)).isoformat()
            week.append(Day(iso, count, min(count, 4)))
        out.append(tuple(week))
    return ActivityCalendar(tuple(out), sum(sum(c) for c in weeks))
