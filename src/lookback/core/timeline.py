"""Derived views over the action collection - pure functions, no I/O."""

from datetime import date
from uuid import UUID

from .models import Action, Entry


def find_action(actions: list[Action], action_id: UUID) -> Action | None:
    """Return the action with the given id, or None."""
    return next((a for a in actions if a.id == action_id), None)


def find_entry(actions: list[Action], entry_id: UUID) -> Entry | None:
    """Return the first entry with the given id across all actions, or None."""
    for action in actions:
        for entry in action.entries:
            if entry.id == entry_id:
                return entry
    return None


def dates_with_entries(action: Action) -> list[date]:
    """Calendar days that have at least one entry, oldest first."""
    return sorted({e.timestamp.date() for e in action.entries})


def entries_for_date(action: Action, day: date) -> list[Entry]:
    """
    Entries whose timestamp falls on the given day.

    Keeps the stored insertion order rather than sorting by time.
    """
    return [e for e in action.entries if e.timestamp.date() == day]


def latest_date(action: Action) -> date | None:
    """Most recent day with entries, or None for an action with no entries."""
    days = dates_with_entries(action)
    return days[-1] if days else None
