"""Adapters - I/O implementations of ports."""

from .json_store import JsonActionStore, StoreError, LoadError, SaveError

__all__ = [
    "JsonActionStore",
    "StoreError",
    "LoadError",
    "SaveError",
]
