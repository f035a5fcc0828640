"""Shared fixtures for epic_estimate test suite."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone

import pytest

from epic_estimate.core.models import (
    Category,
    EffortDimension,
    EpicInput,
    TaskSpec,
    Worker,
)

FIXED_TODAY = date(2026, 3, 2)
FIXED_CREATED_AT = datetime(2026, 3, 2, 9, 30, 15, tzinfo=timezone.utc)


def rating(**overrides: int) -> dict[EffortDimension, int]:
    """A complete rating, zero everywhere except the given snake_case dimensions."""
    values = {d: 0 for d in EffortDimension}
    for key, value in overrides.items():
        values[EffortDimension(key)] = value
    return values


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo `--verbose` handlers bound to a finished CliRunner stream."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if type(h) is logging.StreamHandler]:
        root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


@pytest.fixture
def fixed_created_at() -> datetime:
    return FIXED_CREATED_AT


@pytest.fixture
def backend_workers() -> list[Worker]:
    """Two backend workers at the default capacity."""
    return [
        Worker(id="dev-1", name="Ada", role=Category.BACKEND, capacity=4),
        Worker(id="dev-2", name="Linus", role=Category.BACKEND, capacity=4),
    ]


@pytest.fixture
def round_robin_input(backend_workers: list[Worker]) -> EpicInput:
    """Three tasks scoring 5, 3 and 3 points, assigned dev-1, dev-2, dev-1."""
    return EpicInput(
        name="Checkout Revamp",
        workers=backend_workers,
        tasks=[
            TaskSpec(
                name="Payment API",
                category=Category.BACKEND,
                assigned_to="dev-1",
                # 3 x 0.8 + 2 x 0.6 = 3.6 -> 5
                factors=rating(uncertainty=3, complexity=2),
                notes={EffortDimension.UNCERTAINTY: "PSP docs pending"},
            ),
            TaskSpec(
                name="Order history",
                category=Category.BACKEND,
                assigned_to="dev-2",
                # 2 x 0.8 + 1 x 0.6 = 2.2 -> 3
                factors=rating(uncertainty=2, complexity=1),
            ),
            TaskSpec(
                name="Refund webhook",
                category=Category.BACKEND,
                assigned_to="dev-1",
                factors=rating(uncertainty=2, complexity=1),
            ),
        ],
    )
