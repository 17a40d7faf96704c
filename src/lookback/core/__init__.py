"""Functional core - pure domain logic with no I/O."""

from .models import Action, Entry, encode_actions, decode_actions
from .samples import sample_actions
from .timeline import (
    find_action,
    find_entry,
    dates_with_entries,
    entries_for_date,
    latest_date,
)

__all__ = [
    # Models
    "Action",
    "Entry",
    "encode_actions",
    "decode_actions",
    # Samples
    "sample_actions",
    # Timeline
    "find_action",
    "find_entry",
    "dates_with_entries",
    "entries_for_date",
    "latest_date",
]
