"""Tests for adapters/epic_store.py — saving and reloading estimate files."""

from __future__ import annotations

import json
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path

import pytest

from epic_estimate.adapters.epic_store import (
    epic_filename,
    load_epic,
    load_epic_record,
    save_epic,
)
from epic_estimate.cli.commands._pipeline import run_estimate_pipeline
from epic_estimate.core.models import Epic, EpicInput
from epic_estimate.render.json_report import build_epic_record


@pytest.fixture
def epic(round_robin_input: EpicInput, fixed_today: date, fixed_created_at: datetime) -> Epic:
    return run_estimate_pipeline(
        round_robin_input, today=fixed_today, created_at=fixed_created_at
    )


class TestFilename:
    def test_slug_and_timestamp(self, epic: Epic) -> None:
        assert epic_filename(epic) == "checkout-revamp-2026-03-02-09-30-15.json"

    def test_punctuation_stripped(self, epic: Epic) -> None:
        renamed = replace(epic, name="Q3: Billing  & Invoices!")
        assert epic_filename(renamed) == "q3-billing-invoices-2026-03-02-09-30-15.json"

    def test_empty_slug_falls_back(self, epic: Epic) -> None:
        renamed = replace(epic, name="???")
        assert epic_filename(renamed).startswith("epic-2026-03-02")


class TestSaveEpic:
    def test_creates_directory_and_writes_record(self, epic: Epic, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "estimations"
        path = save_epic(epic, target)

        assert path.parent == target
        assert path.exists()
        record = json.loads(path.read_text(encoding="utf-8"))
        assert record == build_epic_record(epic)

    def test_tool_name_in_metadata(self, epic: Epic, tmp_path: Path) -> None:
        path = save_epic(epic, tmp_path, tool_name="Team Estimator")
        record = json.loads(path.read_text(encoding="utf-8"))
        assert record["metadata"]["tool"] == "Team Estimator"

    def test_unwritable_target_raises_oserror(self, epic: Epic, tmp_path: Path) -> None:
        blocker = tmp_path / "file.txt"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(OSError):
            save_epic(epic, blocker / "sub")


class TestLoadEpic:
    def test_saved_epic_loads_back_equal(self, epic: Epic, tmp_path: Path) -> None:
        loaded = load_epic(save_epic(epic, tmp_path))
        assert loaded == epic

    def test_accepts_full_timestamps_for_dates(self, epic: Epic, tmp_path: Path) -> None:
        record = build_epic_record(epic)
        record["estimatedDeliveryDate"] = "2026-03-08T10:00:00.000Z"
        record["parallelEstimate"]["deliveryDate"] = "2026-03-04T10:00:00.000Z"
        record["createdAt"] = "2026-03-02T09:30:15.000Z"
        path = tmp_path / "external.json"
        path.write_text(json.dumps(record), encoding="utf-8")

        loaded = load_epic(path)

        assert loaded.sequential.delivery_date == date(2026, 3, 8)
        assert loaded.parallel.delivery_date == date(2026, 3, 4)
        assert loaded.created_at.utcoffset() is not None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_epic(tmp_path / "none.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Malformed JSON"):
            load_epic(path)

    def test_wrong_version(self, epic: Epic, tmp_path: Path) -> None:
        record = build_epic_record(epic)
        record["version"] = "2.0"
        path = tmp_path / "v2.json"
        path.write_text(json.dumps(record), encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported estimate schema version"):
            load_epic(path)

    def test_missing_field(self, epic: Epic, tmp_path: Path) -> None:
        record = build_epic_record(epic)
        del record["parallelEstimate"]
        path = tmp_path / "partial.json"
        path.write_text(json.dumps(record), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid estimate file"):
            load_epic(path)

    def test_unreadable_path_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_epic(tmp_path)


class TestLoadEpicRecord:
    def test_returns_saved_tool_name(self, epic: Epic, tmp_path: Path) -> None:
        path = save_epic(epic, tmp_path, tool_name="Team Estimator")
        loaded, tool_name = load_epic_record(path)
        assert loaded == epic
        assert tool_name == "Team Estimator"

    def test_missing_metadata_uses_default_tool_name(self, epic: Epic, tmp_path: Path) -> None:
        record = build_epic_record(epic)
        del record["metadata"]
        path = tmp_path / "bare.json"
        path.write_text(json.dumps(record), encoding="utf-8")

        _, tool_name = load_epic_record(path)
        assert tool_name == "Epic Estimation Tool"
