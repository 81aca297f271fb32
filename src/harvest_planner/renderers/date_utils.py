"""Shared date and value formatting helpers for renderers."""

from __future__ import annotations

from datetime import date

#: Shown in place of a reading that is unavailable (never shown as 0).
UNAVAILABLE = "\u2013"


def format_short_day(day: str) -> str:
    """Short weekday plus day-first date, e.g. ``Thu 05.03.``."""
    return date.fromisoformat(day).strftime("%a %d.%m.")


def format_value(value: float | None, unit: str = "") -> str:
    """Format a reading with its unit, or the unavailable marker."""
    if value is None:
        return UNAVAILABLE
    return f"{value:g}{unit}"
