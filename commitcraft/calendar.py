# calendar.py
# Activity calendar model and the sources it can be read from.

import json
import logging
import re
from collections import namedtuple
from datetime import date, timedelta

import requests
from bs4 import BeautifulSoup

log = logging.getLogger(__name__)

GRAPHQL_URL = "https://api.github.com/graphql"
CONTRIBUTIONS_URL = "https://github.com/users/{username}/contributions"

# GitHub calendar colours -> level 0..4
PALETTE = {
    "#ebedf0": 0,
    "#9be9a8": 1,
    "#40c463": 2,
    "#30a14e": 3,
    "#216e39": 4,
}

CONTRIBUTIONS_QUERY = """
query($username: String!, $from: DateTime, $to: DateTime) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
            color
          }
        }
      }
    }
  }
}
"""

Day = namedtuple("Day", ["date", "count", "level"])
ActivityCalendar = namedtuple("ActivityCalendar", ["weeks", "total"])


class CalendarFetchError(RuntimeError):
    pass


def color_to_level(color):
    return PALETTE.get((color or "").lower(), 0)


def day_count(calendar):
    return sum(len(week) for week in calendar.weeks)


def _week_start(iso):
    # GitHub weeks run Sunday..Saturday
    dt = date.fromisoformat(iso)
    return dt - timedelta(days=(dt.weekday() + 1) % 7)


def _fill_week(days):
    # place the days of one week in their weekday slots, padding gaps with empty days
    start = _week_start(days[0].date)
    by_date = {d.date: d for d in days}
    week = []
    for i in range(7):
        iso = (start + timedelta(days=i)).isoformat()
        week.append(by_date.get(iso, Day(iso, 0, 0)))
    return tuple(week)


def map_to_weeks(days):
    # group days (any order) into consecutive Sunday-started weeks
    weeks = []
    current = []
    key = None
    for day in sorted(days, key=lambda x: x.date):
        start = _week_start(day.date)
        if current and start != key:
            weeks.append(_fill_week(current))
            current = []
        key = start
        current.append(day)
    if current:
        weeks.append(_fill_week(current))
    return tuple(weeks)


def calendar_from_dict(data):
    """Build a calendar from GitHub's ``contributionCalendar`` JSON shape."""
    days = []
    for week in data.get("weeks", []):
        for raw in week.get("contributionDays", []):
            count = max(0, int(raw.get("contributionCount", 0)))
            days.append(Day(raw["date"], count, color_to_level(raw.get("color"))))
    total = data.get("totalContributions")
    if total is None:
        total = sum(d.count for d in days)
    return ActivityCalendar(map_to_weeks(days), total)


def calendar_from_response(payload, username=None):
    """Build a calendar from a full GraphQL response, rejecting error payloads."""
    if payload.get("errors"):
        messages = ", ".join(e.get("message", "") for e in payload["errors"])
        raise CalendarFetchError(f"GitHub GraphQL errors: {messages}")
    user = (payload.get("data") or {}).get("user")
    if not user:
        who = f' "{username}"' if username else ""
        raise CalendarFetchError(f"GitHub user{who} not found")
    return calendar_from_dict(user["contributionsCollection"]["contributionCalendar"])


def load_calendar(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    # accept both the bare calendar and a full GraphQL response
    if "data" in data or "errors" in data:
        return calendar_from_response(data)
    return calendar_from_dict(data)


_COUNT_RE = re.compile(r"(\d[\d,]*)\s+contribution")


def parse_contributions_html(html):
    soup = BeautifulSoup(html, "html.parser")
    cells = soup.find_all(class_="ContributionCalendar-day")
    if not cells:
        # fallback older class names
        cells = soup.find_all("rect", {"class": "day"})
    if not cells:
        raise CalendarFetchError("Could not find contribution graph in page.")

    # newer markup keeps counts in <tool-tip for="cell-id"> siblings
    tips = {}
    for tip in soup.find_all("tool-tip"):
        target = tip.get("for")
        if target:
            tips[target] = tip.get_text(" ", strip=True)

    days = []
    for cell in cells:
        iso = cell.get("data-date")
        if not iso:
            continue
        count = cell.get("data-count")
        if count is None:
            m = _COUNT_RE.search(tips.get(cell.get("id"), ""))
            count = m.group(1).replace(",", "") if m else 0
        level = cell.get("data-level")
        days.append(Day(iso, int(count), int(level) if level is not None else 0))
    return ActivityCalendar(map_to_weeks(days), sum(d.count for d in days))


def fetch_calendar(username, token=None, since=None, until=None, session=None, timeout=15):
    """Fetch a user's calendar from GitHub.

    With a token the GraphQL API is used; without one the public
    contributions fragment of the profile page is scraped.
    """
    if session is not None:
        return _fetch(session, username, token, since, until, timeout)
    with requests.Session() as http:
        return _fetch(http, username, token, since, until, timeout)


def _fetch(http, username, token, since, until, timeout):
    if token:
        return _fetch_graphql(http, username, token, since, until, timeout)
    return _fetch_html(http, username, since, until, timeout)


def _fetch_graphql(http, username, token, since, until, timeout):
    variables = {"username": username}
    if since:
        variables["from"] = f"{since}T00:00:00Z"
    if until:
        variables["to"] = f"{until}T23:59:59Z"
    log.info("Querying GitHub GraphQL for %s", username)
    r = http.post(
        GRAPHQL_URL,
        json={"query": CONTRIBUTIONS_QUERY, "variables": variables},
        headers={"Authorization": f"Bearer {token}"},
        timeout=timeout,
    )
    if r.status_code != 200:
        raise CalendarFetchError(f"GitHub API error ({r.status_code}): {r.text}")
    return calendar_from_response(r.json(), username)


def _fetch_html(http, username, since, until, timeout):
    url = CONTRIBUTIONS_URL.format(username=username)
    params = {}
    if since:
        params["from"] = since
    if until:
        params["to"] = until
    log.info("Fetching %s", url)
    r = http.get(url, params=params or None, timeout=timeout)
    if r.status_code == 404:
        raise CalendarFetchError(f'GitHub user "{username}" not found')
    if r.status_code != 200:
        raise CalendarFetchError(f"Failed to fetch {url} (status {r.status_code})")
    calendar = parse_contributions_html(r.text)
    log.debug("Scraped %d weeks for %s", len(calendar.weeks), username)
    return calendar
