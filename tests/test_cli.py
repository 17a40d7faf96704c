"""Tests for the command line front end."""

import json
from uuid import uuid4

import pytest
from click.testing import CliRunner
from PIL import Image

from lookback.adapters.json_store import JsonActionStore
from lookback.cli import main
from lookback.config import Config


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "actions.json"
    path.write_text("[]")
    return path


@pytest.fixture
def run(data_file, monkeypatch):
    monkeypatch.setattr("lookback.cli.load_config", lambda: Config(data_file=str(data_file)))
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(main, list(args))

    return _run


def stored(data_file) -> JsonActionStore:
    return JsonActionStore(data_file)


class TestActions:
    def test_empty(self, run):
        result = run("actions")
        assert result.exit_code == 0
        assert "No actions yet." in result.output

    def test_add_and_list_json(self, run, data_file):
        result = run("add-action", "Read a Book")
        assert result.exit_code == 0

        result = run("actions", "--json")
        data = json.loads(result.output)
        assert data == [
            {
                "id": str(stored(data_file).actions[0].id),
                "title": "Read a Book",
                "description": "",
                "entries": 0,
            }
        ]


class TestAddEntry:
    def test_adds_entry_on_date(self, run, data_file):
        run("add-action", "Run")
        action_id = str(stored(data_file).actions[0].id)

        result = run("add-entry", action_id, "5k", "--date", "2025-01-10")

        assert result.exit_code == 0
        entry = stored(data_file).actions[0].entries[0]
        assert entry.description == "5k"
        assert entry.timestamp.date().isoformat() == "2025-01-10"

    def test_unknown_action(self, run, data_file):
        before = data_file.read_bytes()

        result = run("add-entry", str(uuid4()), "lost")

        assert result.exit_code == 1
        assert "no action" in result.output
        assert data_file.read_bytes() == before

    def test_bad_id(self, run):
        result = run("add-entry", "not-a-uuid", "x")
        assert result.exit_code == 1
        assert "invalid action id" in result.output

    def test_bad_date(self, run, data_file):
        run("add-action", "Run")
        action_id = str(stored(data_file).actions[0].id)

        result = run("add-entry", action_id, "x", "--date", "yesterday")

        assert result.exit_code == 1
        assert "invalid date" in result.output


class TestSetImage:
    @pytest.fixture
    def entry_id(self, run, data_file):
        run("add-action", "Photos")
        action_id = str(stored(data_file).actions[0].id)
        run("add-entry", action_id, "Sunset")
        return str(stored(data_file).actions[0].entries[0].id)

    def test_set_and_clear(self, run, data_file, entry_id, tmp_path):
        photo = tmp_path / "sunset.png"
        Image.new("RGB", (32, 32), (255, 120, 0)).save(photo)

        result = run("set-image", entry_id, "--image", str(photo))
        assert result.exit_code == 0
        assert stored(data_file).actions[0].entries[0].image_data[:2] == b"\xff\xd8"

        result = run("set-image", entry_id, "--clear")
        assert result.exit_code == 0
        assert stored(data_file).actions[0].entries[0].image_data is None

    def test_requires_one_option(self, run, entry_id):
        result = run("set-image", entry_id)
        assert result.exit_code == 1
        assert "exactly one" in result.output

    def test_unreadable_image(self, run, entry_id, tmp_path):
        bogus = tmp_path / "bogus.jpg"
        bogus.write_text("not an image")

        result = run("set-image", entry_id, "--image", str(bogus))

        assert result.exit_code == 1
        assert "Unreadable image" in result.output


class TestDescribeAndShow:
    def test_show_latest_day(self, run, data_file):
        run("add-action", "Run")
        action_id = str(stored(data_file).actions[0].id)
        run("describe", action_id, "Training log")
        run("add-entry", action_id, "Easy 5k", "--date", "2025-01-10")
        run("add-entry", action_id, "Intervals", "--date", "2025-01-12")

        result = run("show", action_id)

        assert result.exit_code == 0
        assert "Training log" in result.output
        assert "Dates: 2025-01-10, 2025-01-12" in result.output
        assert "Intervals" in result.output
        assert "Easy 5k" not in result.output

    def test_show_selected_day_json(self, run, data_file):
        run("add-action", "Run")
        action_id = str(stored(data_file).actions[0].id)
        run("add-entry", action_id, "Easy 5k", "--date", "2025-01-10")
        run("add-entry", action_id, "Intervals", "--date", "2025-01-12")

        result = run("show", action_id, "--date", "2025-01-10", "--json")

        data = json.loads(result.output)
        assert data["selected_date"] == "2025-01-10"
        assert [e["description"] for e in data["entries"]] == ["Easy 5k"]
        assert data["dates"] == ["2025-01-10", "2025-01-12"]

    def test_show_no_entries(self, run, data_file):
        run("add-action", "Fresh")
        action_id = str(stored(data_file).actions[0].id)

        result = run("show", action_id)

        assert "No entries yet." in result.output

    def test_describe_unknown_action(self, run):
        result = run("describe", str(uuid4()), "nothing")
        assert result.exit_code == 1
