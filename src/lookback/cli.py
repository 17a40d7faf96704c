"""Look Back CLI - personal action journal."""

import json
import logging
import sys
from datetime import date
from uuid import UUID

import click

from .config import load_config
from .core.models import Entry
from .core.timeline import dates_with_entries, entries_for_date, find_action, latest_date
from .workflows import get_store, load_image, log_entry


def _parse_id(ref: str, kind: str) -> UUID:
    try:
        return UUID(ref)
    except ValueError:
        click.echo(f"Error: invalid {kind} id {ref!r}", err=True)
        sys.exit(1)


def _parse_day(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        click.echo(f"Error: invalid date {value!r}, expected YYYY-MM-DD", err=True)
        sys.exit(1)


def _entry_json(entry: Entry) -> dict:
    return {
        "id": str(entry.id),
        "timestamp": entry.timestamp.isoformat(),
        "description": entry.description,
        "has_image": entry.has_image,
    }


def _format_entry(entry: Entry) -> str:
    photo = " [photo]" if entry.has_image else ""
    return f"  {entry.timestamp:%H:%M}  {entry.description}{photo}  ({entry.id})"


@click.group()
@click.version_option()
@click.pass_context
def main(ctx):
    """Look Back - reflect on the things you do."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, config.log_level),
    )
    ctx.obj = config


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def actions(config, as_json: bool):
    """List actions."""
    store = get_store(config)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "id": str(a.id),
                        "title": a.title,
                        "description": a.description,
                        "entries": len(a.entries),
                    }
                    for a in store.actions
                ],
                indent=2,
            )
        )
        return

    if not store.actions:
        click.echo("No actions yet.")
        return

    for action in store.actions:
        click.echo(f"{action.id}  {action.title} ({len(action.entries)} entries)")


@main.command("add-action")
@click.argument("title")
@click.pass_obj
def add_action(config, title: str):
    """Create a new action."""
    store = get_store(config)
    action = store.add_action(title)
    click.echo(f"Added action {action.id}")


@main.command("add-entry")
@click.argument("action_id")
@click.argument("description")
@click.option("--date", "day", help="Entry date (YYYY-MM-DD), defaults to today")
@click.option("--image", type=click.Path(exists=True, dir_okay=False), help="Photo to attach")
@click.pass_obj
def add_entry(config, action_id: str, description: str, day: str | None, image: str | None):
    """Log an entry against an action."""
    target = _parse_id(action_id, "action")
    store = get_store(config)
    try:
        entry = log_entry(store, config, target, description, _parse_day(day), image)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if entry is None:
        click.echo(f"Error: no action {action_id}", err=True)
        sys.exit(1)
    click.echo(f"Added entry {entry.id}")


@main.command("set-image")
@click.argument("entry_id")
@click.option("--image", type=click.Path(exists=True, dir_okay=False), help="Photo to attach")
@click.option("--clear", is_flag=True, help="Remove the entry's photo")
@click.pass_obj
def set_image(config, entry_id: str, image: str | None, clear: bool):
    """Replace or remove an entry's photo."""
    if bool(image) == clear:
        click.echo("Error: pass exactly one of --image or --clear", err=True)
        sys.exit(1)

    target = _parse_id(entry_id, "entry")
    image_data = None
    if image:
        try:
            image_data = load_image(config, image)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    store = get_store(config)
    if not store.update_entry_image(target, image_data):
        click.echo(f"Error: no entry {entry_id}", err=True)
        sys.exit(1)
    click.echo("Photo removed." if clear else "Photo updated.")


@main.command()
@click.argument("action_id")
@click.argument("description")
@click.pass_obj
def describe(config, action_id: str, description: str):
    """Set an action's description."""
    target = _parse_id(action_id, "action")
    store = get_store(config)
    if not store.update_action_description(target, description):
        click.echo(f"Error: no action {action_id}", err=True)
        sys.exit(1)
    click.echo("Description updated.")


@main.command()
@click.argument("action_id")
@click.option("--date", "day", help="Day to show (YYYY-MM-DD), defaults to the latest")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show(config, action_id: str, day: str | None, as_json: bool):
    """Show an action's entries for one day."""
    target = _parse_id(action_id, "action")
    store = get_store(config)
    action = find_action(store.actions, target)
    if action is None:
        click.echo(f"Error: no action {action_id}", err=True)
        sys.exit(1)

    selected = _parse_day(day) or latest_date(action)
    day_entries = entries_for_date(action, selected) if selected else []

    if as_json:
        click.echo(
            json.dumps(
                {
                    "id": str(action.id),
                    "title": action.title,
                    "description": action.description,
                    "dates": [d.isoformat() for d in dates_with_entries(action)],
                    "selected_date": selected.isoformat() if selected else None,
                    "entries": [_entry_json(e) for e in day_entries],
                },
                indent=2,
            )
        )
        return

    click.echo(action.title)
    if action.description:
        click.echo(action.description)
    click.echo("")

    days = dates_with_entries(action)
    if not days:
        click.echo("No entries yet.")
        return

    click.echo("Dates: " + ", ".join(d.isoformat() for d in days))
    click.echo(f"\n{selected.isoformat()}:")
    if not day_entries:
        click.echo("  No entries for this date.")
    for entry in day_entries:
        click.echo(_format_entry(entry))
