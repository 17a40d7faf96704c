"""Shared workflow layer between the CLI and other front ends."""

import logging
from datetime import date, datetime, time
from pathlib import Path
from uuid import UUID

from .adapters.json_store import JsonActionStore
from .config import Config
from .core.models import Entry
from .ports.action_store import ActionStore
from .images import compress_image

logger = logging.getLogger(__name__)


def get_store(config: Config) -> JsonActionStore:
    """Open the action store at the configured location."""
    return JsonActionStore(config.data_path)


def load_image(config: Config, path: Path | str) -> bytes:
    """Read and compress a photo using the configured quality and size."""
    image_data = compress_image(Path(path).expanduser(), config.image_quality, config.image_max_size)
    logger.info(f"Compressed {path} to {len(image_data)} bytes")
    return image_data


def entry_timestamp(day: date | None = None, now: datetime | None = None) -> datetime:
    """
    Timestamp for a new entry on the chosen day.

    Today's entries get the current time; entries for other days are placed
    at noon so they never drift across a day boundary.
    """
    now = now or datetime.now()
    if day is None or day == now.date():
        return now
    return datetime.combine(day, time(12, 0))


def log_entry(
    store: ActionStore,
    config: Config,
    action_id: UUID,
    description: str,
    day: date | None = None,
    image_path: Path | str | None = None,
) -> Entry | None:
    """Add an entry, compressing its photo first when one is given."""
    image_data = load_image(config, image_path) if image_path else None
    return store.add_entry(action_id, description, entry_timestamp(day), image_data)
