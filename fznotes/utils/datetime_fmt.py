"""Datetime formatting utilities for note filenames and headers."""

from __future__ import annotations

from datetime import date, datetime

# Filenames carry the local calendar day; the header carries local wall time.
_NOTE_DATE_FORMAT = "%Y-%m-%d"
_CREATED_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_local() -> datetime:
    """Return the current local time as a naive ``datetime``."""

    return datetime.now()


def format_note_date(day: date) -> str:
    """Format ``day`` for use as a filename prefix, e.g. "2024-01-31"."""

    return day.strftime(_NOTE_DATE_FORMAT)


def format_created(dt: datetime) -> str:
    return dt.strftime(_CREATED_FORMAT)
