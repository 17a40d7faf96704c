"""Ports - interfaces/protocols for external dependencies."""

from .action_store import ActionStore, ChangeCallback

__all__ = [
    "ActionStore",
    "ChangeCallback",
]
