"""Isometric voxel scenes from a yearly contribution calendar."""

__version__ = "0.1.0"

from .calendar import ActivityCalendar, CalendarFetchError, Day, fetch_calendar, load_calendar
from .render import SceneDocument, export_svg, render_scene, render_svg

__all__ = [
    "ActivityCalendar",
    "CalendarFetchError",
    "Day",
    "SceneDocument",
    "export_svg",
    "fetch_calendar",
    "load_calendar",
    "render_scene",
    "render_svg",
]
