"""Tests for the JSON key-value storage and shared date helpers."""

import json
import os
from datetime import date, datetime

import pytest

from dates import clock_hhmm, day_id, parse_day, parse_reminder, previous_day
from models import DEFAULT_COLOR, DEFAULT_EMOJI, Habit
from storage import JSONStorage, MemoryStorage, SnapshotSlot


class TestJSONStorage:
    def test_missing_file_reads_empty(self, tmp_path):
        storage = JSONStorage(str(tmp_path / "habits.json"))
        assert storage.get_item("habits") is None

    def test_set_get_remove(self, tmp_path):
        path = tmp_path / "habits.json"
        storage = JSONStorage(str(path))
        storage.set_item("habits", [{"id": "1"}])
        storage.set_item("notifications", "granted")
        assert storage.get_item("habits") == [{"id": "1"}]
        assert json.loads(path.read_text(encoding="utf-8"))["notifications"] == "granted"

        storage.remove_item("notifications")
        assert storage.get_item("notifications") is None
        assert storage.get_item("habits") == [{"id": "1"}]

    def test_no_temp_file_left_behind(self, tmp_path):
        path = tmp_path / "habits.json"
        JSONStorage(str(path)).set_item("habits", [])
        assert os.listdir(tmp_path) == ["habits.json"]

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "habits.json"
        path.write_text("{not json", encoding="utf-8")
        storage = JSONStorage(str(path))
        assert storage.get_item("habits") is None
        storage.set_item("habits", [])
        assert storage.get_item("habits") == []

    def test_non_object_file_reads_empty(self, tmp_path):
        path = tmp_path / "habits.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JSONStorage(str(path)).get_item("habits") is None

    def test_creates_parent_folder(self, tmp_path):
        path = tmp_path / "nested" / "habits.json"
        JSONStorage(str(path)).set_item("habits", [])
        assert path.exists()


class TestSnapshotSlot:
    def test_load_save(self):
        storage = MemoryStorage()
        slot = SnapshotSlot(storage, key="custom")
        assert slot.load() is None
        slot.save([{"id": "a"}])
        assert storage.items == {"custom": [{"id": "a"}]}

    def test_memory_storage_copies(self):
        storage = MemoryStorage()
        snapshot = [{"id": "a", "completedDates": []}]
        storage.set_item("habits", snapshot)
        snapshot[0]["completedDates"].append("2024-05-10")
        assert storage.get_item("habits")[0]["completedDates"] == []


class TestHabitRecord:
    def test_to_dict_uses_stored_keys(self):
        habit = Habit(id="1", name="Read", completed_dates=["2024-05-10"], created_at="x")
        raw = habit.to_dict()
        assert raw["completedDates"] == ["2024-05-10"]
        assert raw["createdAt"] == "x"
        assert "reminder" not in raw

    def test_from_dict_defaults(self):
        habit = Habit.from_dict({"id": 7, "name": "Read"})
        assert habit.id == "7"
        assert habit.emoji == DEFAULT_EMOJI
        assert habit.color == DEFAULT_COLOR
        assert habit.completed_dates == []
        assert habit.reminder is None

    def test_from_dict_drops_duplicates_and_junk(self):
        habit = Habit.from_dict(
            {"id": "1", "name": "Read", "completedDates": ["2024-05-09", 3, "2024-05-09", "2024-05-10"]}
        )
        assert habit.completed_dates == ["2024-05-09", "2024-05-10"]

    def test_from_dict_rejects_text_days(self):
        with pytest.raises(TypeError):
            Habit.from_dict({"id": "1", "name": "Read", "completedDates": "2024-05-10"})


class TestDates:
    def test_day_id(self):
        assert day_id(date(2024, 1, 2)) == "2024-01-02"
        assert day_id(datetime(2024, 1, 2, 23, 59)) == "2024-01-02"

    def test_parse_day(self):
        assert parse_day("2024-02-29") == date(2024, 2, 29)
        assert parse_day("2023-02-29") is None
        assert parse_day("yesterday") is None
        assert parse_day(None) is None

    def test_previous_day(self):
        assert previous_day("2024-03-01") == "2024-02-29"
        assert previous_day(date(2024, 1, 1), 2) == "2023-12-30"
        assert previous_day("2024-03-01", 0) == "2024-03-01"

    def test_clock(self):
        assert clock_hhmm(datetime(2024, 1, 1, 7, 5)) == "07:05"

    def test_parse_reminder(self):
        assert parse_reminder("07:30") == "07:30"
        assert parse_reminder(" 7:30 ") == "07:30"
        assert parse_reminder("") is None
        assert parse_reminder(None) is None
        assert parse_reminder("noon") is None

