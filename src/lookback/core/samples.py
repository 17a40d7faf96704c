"""Illustrative actions used to seed an empty journal on first run."""

from datetime import datetime, timedelta

from .models import Action, Entry


def sample_actions(now: datetime | None = None) -> list[Action]:
    """Two example actions with entries dated relative to now."""
    now = now or datetime.now()
    return [
        Action(
            title="Completed a Big Task",
            description="Working on the core features",
            entries=[
                Entry(
                    timestamp=now - timedelta(days=1),
                    description="Finished coding a core feature.",
                ),
                Entry(
                    timestamp=now - timedelta(hours=1),
                    description="Reviewed and merged pull requests.",
                ),
            ],
        ),
        Action(
            title="Met an Old Friend",
            description="Coffee meetup",
            entries=[
                Entry(
                    timestamp=now - timedelta(days=2),
                    description="Had coffee and caught up on life.",
                ),
            ],
        ),
    ]
