"""Action and Entry domain objects and their JSON shape - no I/O."""

import base64
import binascii
import json
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


def _text(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {type(value).__name__}")
    return value


@dataclass
class Entry:
    """A single dated observation under an Action."""

    timestamp: datetime
    description: str
    image_data: bytes | None = None
    id: UUID = field(default_factory=uuid4)

    @property
    def has_image(self) -> bool:
        return self.image_data is not None

    def to_dict(self) -> dict:
        """Serialize to the persisted JSON shape."""
        data = {
            "id": str(self.id),
            "timestamp": self.timestamp.isoformat(),
            "description": self.description,
        }
        if self.image_data is not None:
            data["imageData"] = base64.b64encode(self.image_data).decode("ascii")
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        """Create Entry from its persisted JSON shape."""
        try:
            image = data.get("imageData")
            return cls(
                id=UUID(data["id"]),
                timestamp=datetime.fromisoformat(data["timestamp"]),
                description=_text(data, "description"),
                image_data=base64.b64decode(image, validate=True) if image is not None else None,
            )
        except (KeyError, TypeError, AttributeError, binascii.Error) as e:
            raise ValueError(f"Invalid entry: {e}") from e


@dataclass
class Action:
    """A named activity that aggregates dated entries in insertion order."""

    title: str
    description: str = ""
    entries: list[Entry] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)

    def to_dict(self) -> dict:
        """Serialize to the persisted JSON shape."""
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "entries": [e.to_dict() for e in self.entries],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Action":
        """Create Action from its persisted JSON shape."""
        try:
            entries = data["entries"]
            if not isinstance(entries, list):
                raise ValueError("entries must be a list")
            return cls(
                id=UUID(data["id"]),
                title=_text(data, "title"),
                description=_text(data, "description"),
                entries=[Entry.from_dict(e) for e in entries],
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid action: {e}") from e


def encode_actions(actions: list[Action]) -> str:
    """Serialize the whole collection to JSON text."""
    return json.dumps([a.to_dict() for a in actions], indent=2)


def decode_actions(content: str) -> list[Action]:
    """
    Parse JSON text produced by encode_actions.

    Raises ValueError on anything that is not a complete, valid collection.
    """
    try:
        data = json.loads(content)
    except RecursionError as e:
        raise ValueError("Invalid collection: nested too deeply") from e
    if not isinstance(data, list):
        raise ValueError("Invalid collection: expected a list of actions")
    actions = [Action.from_dict(item) for item in data]

    seen: set[UUID] = set()
    for action in actions:
        for item_id in [action.id, *(e.id for e in action.entries)]:
            if item_id in seen:
                raise ValueError(f"Invalid collection: duplicate id {item_id}")
            seen.add(item_id)

    return actions
