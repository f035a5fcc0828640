"""Tests for the estimation pipeline wiring scoring, timelines and assembly."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from epic_estimate.cli.commands import _pipeline as pipeline_module
from epic_estimate.cli.commands._pipeline import run_estimate_pipeline
from epic_estimate.core.models import EpicInput


class TestRoundRobinScenario:
    """Two workers at 4 points/day; tasks of 5, 3, 3 points alternating workers."""

    def test_effort_units(self, round_robin_input: EpicInput, fixed_today: date) -> None:
        epic = run_estimate_pipeline(round_robin_input, today=fixed_today)
        assert [task.effort_unit for task in epic.tasks] == [5, 3, 3]
        assert [task.raw_score for task in epic.tasks] == pytest.approx([3.6, 2.2, 2.2])

    def test_parallel_breakdown(self, round_robin_input: EpicInput, fixed_today: date) -> None:
        epic = run_estimate_pipeline(round_robin_input, today=fixed_today)
        breakdown = epic.parallel.breakdown

        assert breakdown["dev-1"].points == 8
        assert breakdown["dev-1"].days == 2
        assert breakdown["dev-2"].points == 3
        assert breakdown["dev-2"].days == 1
        assert epic.parallel.total_days == 2
        assert epic.parallel.delivery_date == date(2026, 3, 4)

    def test_sequential_totals(self, round_robin_input: EpicInput, fixed_today: date) -> None:
        epic = run_estimate_pipeline(round_robin_input, today=fixed_today)

        assert epic.total_points == 11
        assert epic.sequential.total_days == pytest.approx(5.5)
        assert epic.sequential.delivery_date == date(2026, 3, 8)

    def test_created_at_passed_through(
        self,
        round_robin_input: EpicInput,
        fixed_today: date,
        fixed_created_at: datetime,
    ) -> None:
        epic = run_estimate_pipeline(
            round_robin_input, today=fixed_today, created_at=fixed_created_at
        )
        assert epic.created_at == fixed_created_at

    def test_repeatable(
        self,
        round_robin_input: EpicInput,
        fixed_today: date,
        fixed_created_at: datetime,
    ) -> None:
        first = run_estimate_pipeline(
            round_robin_input, today=fixed_today, created_at=fixed_created_at
        )
        second = run_estimate_pipeline(
            round_robin_input, today=fixed_today, created_at=fixed_created_at
        )
        assert first == second


def test_today_defaults_to_current_date(
    round_robin_input: EpicInput, fixed_today: date, monkeypatch: pytest.MonkeyPatch
) -> None:
    class _PinnedDate(date):
        @classmethod
        def today(cls) -> date:
            return fixed_today

    monkeypatch.setattr(pipeline_module, "date", _PinnedDate)
    epic = run_estimate_pipeline(round_robin_input)

    # Both timelines start from the same resolved day.
    assert epic.sequential.delivery_date == fixed_today + timedelta(days=6)
    assert epic.parallel.delivery_date == fixed_today + timedelta(days=2)


def test_epic_without_tasks(round_robin_input: EpicInput, fixed_today: date) -> None:
    empty = round_robin_input.model_copy(update={"tasks": []})
    epic = run_estimate_pipeline(empty, today=fixed_today)

    assert epic.tasks == ()
    assert epic.total_points == 0
    assert epic.total_days == 0.0
    assert epic.sequential.delivery_date == fixed_today
    assert epic.parallel.total_days == 0
    assert dict(epic.parallel.breakdown) == {}
