"""Action storage interface."""

from datetime import datetime
from typing import Callable, Protocol
from uuid import UUID

from lookback.core.models import Action, Entry

ChangeCallback = Callable[[list[Action]], None]


class ActionStore(Protocol):
    """Interface the presentation layer uses to read and mutate actions."""

    @property
    def actions(self) -> list[Action]:
        """Live, ordered view of the current collection."""
        ...

    def add_action(self, title: str) -> Action:
        """Create an action with no entries and an empty description."""
        ...

    def add_entry(
        self,
        action_id: UUID,
        description: str,
        date: datetime,
        image_data: bytes | None = None,
    ) -> Entry | None:
        """Append an entry to an action. Returns None if the action is unknown."""
        ...

    def update_entry_image(self, entry_id: UUID, image_data: bytes | None) -> bool:
        """Replace or clear an entry's image. Returns False if the entry is unknown."""
        ...

    def update_action_description(self, action_id: UUID, description: str) -> bool:
        """Replace an action's description. Returns False if the action is unknown."""
        ...

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register a change callback. Returns a function that unregisters it."""
        ...
