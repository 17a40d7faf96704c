"""JSON file action storage adapter."""

import logging
import os
import tempfile
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable
from uuid import UUID

from lookback.core.models import Action, Entry, decode_actions, encode_actions
from lookback.core.samples import sample_actions
from lookback.core.timeline import find_action, find_entry
from lookback.ports.action_store import ChangeCallback

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for storage failures."""

    pass


class LoadError(StoreError):
    """Raised when the backing file is missing or unreadable."""

    pass


class SaveError(StoreError):
    """Raised when the collection cannot be written to the backing file."""

    pass


class JsonActionStore:
    """
    File-based action storage.

    Implements ActionStore protocol. Owns the in-memory collection and is the
    only writer of the backing file, which is rewritten in full after every
    mutation. Load and save failures never reach the caller: a bad file is
    replaced by sample data and a failed write is logged.
    """

    def __init__(self, path: Path | str, sample_factory: Callable[[], list[Action]] = sample_actions):
        self.path = Path(path).expanduser()
        self._sample_factory = sample_factory
        self._actions: list[Action] = []
        self._callbacks: list[ChangeCallback] = []
        self._lock = threading.RLock()
        self.load()

    @property
    def actions(self) -> list[Action]:
        """Live, ordered view of the current collection."""
        return self._actions

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register a change callback. Returns a function that unregisters it."""
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    # ============== Persistence ==============

    def load(self) -> None:
        """Replace the collection with the file contents, seeding samples if unusable."""
        with self._lock:
            try:
                self._actions = self._read()
                logger.debug(f"Loaded {len(self._actions)} actions from {self.path}")
            except LoadError as e:
                logger.warning(f"{e}; seeding sample actions")
                self._actions = self._sample_factory()
                logger.info(f"Seeded {len(self._actions)} sample actions")
                self.save()
        self._notify()

    def save(self) -> bool:
        """Write the whole collection to the backing file. Returns False on failure."""
        with self._lock:
            try:
                self._write(self._actions)
            except SaveError as e:
                logger.error(f"Failed to save actions: {e}")
                return False
        return True

    def _read(self) -> list[Action]:
        if not self.path.exists():
            raise LoadError(f"No action file at {self.path}")
        try:
            return decode_actions(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise LoadError(f"Could not read {self.path}: {e}") from e

    def _write(self, actions: list[Action]) -> None:
        """Write to a temp file beside the target, then atomically replace it."""
        try:
            content = encode_actions(actions)
        except (TypeError, ValueError, AttributeError) as e:
            raise SaveError(f"Could not serialize actions: {e}") from e

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SaveError(str(e)) from e

    def _notify(self) -> None:
        for callback in list(self._callbacks):
            try:
                callback(self._actions)
            except Exception as e:
                logger.error(f"Change callback {callback!r} failed: {e}")

    # ============== Mutations ==============

    def add_action(self, title: str) -> Action:
        """Create an action with no entries and an empty description."""
        action = Action(title=title)
        with self._lock:
            self._actions.append(action)
            self.save()
        self._notify()
        return action

    def add_entry(
        self,
        action_id: UUID,
        description: str,
        date: datetime,
        image_data: bytes | None = None,
    ) -> Entry | None:
        """Append an entry to an action. Returns None if the action is unknown."""
        with self._lock:
            action = find_action(self._actions, action_id)
            if action is None:
                logger.debug(f"add_entry: no action {action_id}")
                return None
            entry = Entry(timestamp=date, description=description, image_data=image_data)
            action.entries.append(entry)
            self.save()
        self._notify()
        return entry

    def update_entry_image(self, entry_id: UUID, image_data: bytes | None) -> bool:
        """Replace or clear an entry's image. Returns False if the entry is unknown."""
        with self._lock:
            entry = find_entry(self._actions, entry_id)
            if entry is None:
                logger.debug(f"update_entry_image: no entry {entry_id}")
                return False
            entry.image_data = image_data
            self.save()
        self._notify()
        return True

    def update_action_description(self, action_id: UUID, description: str) -> bool:
        """Replace an action's description. Returns False if the action is unknown."""
        with self._lock:
            action = find_action(self._actions, action_id)
            if action is None:
                logger.debug(f"update_action_description: no action {action_id}")
                return False
            action.description = description
            self.save()
        self._notify()
        return True
