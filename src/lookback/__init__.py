"""Look Back - a personal journal of actions and dated entries."""

__version__ = "0.1.0"
