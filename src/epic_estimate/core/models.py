"""Pydantic models for collected epic inputs and frozen estimate dataclasses."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
    model_validator,
)

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

#: Effort units a worker completes per day when no capacity is given.
DEFAULT_CAPACITY = 4.0

#: Inclusive bounds of a single dimension rating.
MIN_RATING = 0
MAX_RATING = 3

Rating = Annotated[int, Field(ge=MIN_RATING, le=MAX_RATING)]


def _normalize_token(value: str) -> str:
    return re.sub(r"[^a-z0-9]", "", value.strip().lower())


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class EffortDimension(enum.Enum):
    """The eight fixed axes a task is rated on.

    Values are the camelCase keys used in persisted estimate records.
    """

    UNCERTAINTY = "uncertainty"
    COMPLEXITY = "complexity"
    TESTABILITY = "testability"
    LEGACY_IMPACT = "legacyImpact"
    INTEGRATION_DIFFICULTY = "integrationDifficulty"
    REFACTOR_EFFORT = "refactorEffort"
    DEPENDENCIES = "dependencies"
    REQUIREMENT_VOLATILITY = "requirementVolatility"

    @classmethod
    def _missing_(cls, value: object) -> "EffortDimension | None":
        """Accept snake_case, kebab-case and case-insensitive spellings."""
        if isinstance(value, str):
            token = _normalize_token(value)
            for member in cls:
                if _normalize_token(member.value) == token:
                    return member
        return None

    @property
    def label(self) -> str:
        """Human-readable title, e.g. ``Legacy Impact``."""
        return re.sub(r"(?<!^)(?=[A-Z])", " ", self.value).title()


class Category(enum.Enum):
    """Role tag shared by tasks and workers."""

    BACKEND = "Backend"
    FRONTEND = "Frontend"
    DESIGN = "Design"

    @classmethod
    def _missing_(cls, value: object) -> "Category | None":
        if isinstance(value, str):
            token = _normalize_token(value)
            for member in cls:
                if member.value.lower() == token:
                    return member
        return None


def _coerce_dimension_keys(value: Any) -> Any:
    if not isinstance(value, Mapping):
        return value
    coerced: dict[Any, Any] = {}
    for key, item in value.items():
        try:
            coerced[EffortDimension(key)] = item
        except ValueError:
            # Left as-is so pydantic reports the bad key against its location.
            coerced[key] = item
    return coerced


# ---------------------------------------------------------------------------
# Pydantic input models (validated at collection time)
# ---------------------------------------------------------------------------


class Worker(BaseModel):
    """One team member who can be assigned tasks of a matching category."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: NonEmptyStr
    name: NonEmptyStr
    role: Category
    capacity: Annotated[float, Field(gt=0)] = DEFAULT_CAPACITY

    @field_validator("role", mode="before")
    @classmethod
    def _parse_role(cls, value: Any) -> Any:
        return Category(value) if isinstance(value, str) else value


class TaskSpec(BaseModel):
    """A collected task: identity, assignment and a complete rating."""

    model_config = ConfigDict(extra="forbid")

    name: NonEmptyStr
    category: Category
    assigned_to: NonEmptyStr
    factors: dict[EffortDimension, Rating]
    notes: dict[EffortDimension, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: Any) -> Any:
        return Category(value) if isinstance(value, str) else value

    @field_validator("factors", "notes", mode="before")
    @classmethod
    def _parse_dimension_keys(cls, value: Any) -> Any:
        return _coerce_dimension_keys(value)

    @field_validator("factors")
    @classmethod
    def _require_every_dimension(
        cls, factors: dict[EffortDimension, int]
    ) -> dict[EffortDimension, int]:
        missing = [d.value for d in EffortDimension if d not in factors]
        if missing:
            raise ValueError(f"missing rating for: {', '.join(missing)}")
        return {d: factors[d] for d in EffortDimension}

    @field_validator("notes")
    @classmethod
    def _fill_notes(
        cls, notes: dict[EffortDimension, str], info: ValidationInfo
    ) -> dict[EffortDimension, str]:
        # A note only carries meaning for a dimension rated above zero.
        factors = info.data.get("factors") or {}
        return {
            d: notes.get(d, "").strip() if factors.get(d, 0) > 0 else ""
            for d in EffortDimension
        }


class EstimatorSettings(BaseModel):
    """Tool-level defaults, overridable from the command line."""

    model_config = ConfigDict(extra="forbid")

    default_capacity: Annotated[float, Field(gt=0)] = DEFAULT_CAPACITY
    output_dir: Path = Path("estimations")
    save: bool = True
    tool_name: NonEmptyStr = "Epic Estimation Tool"


class EpicInput(BaseModel):
    """Everything the collection phase hands to the estimation pipeline."""

    model_config = ConfigDict(extra="forbid")

    name: NonEmptyStr
    workers: list[Worker] = Field(min_length=1)
    tasks: list[TaskSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_assignments(self) -> "EpicInput":
        by_id: dict[str, Worker] = {}
        for worker in self.workers:
            if worker.id in by_id:
                raise ValueError(f"duplicate worker id {worker.id!r}")
            by_id[worker.id] = worker

        for task in self.tasks:
            worker = by_id.get(task.assigned_to)
            if worker is None:
                raise ValueError(
                    f"task {task.name!r} is assigned to unknown worker {task.assigned_to!r}"
                )
            if worker.role != task.category:
                raise ValueError(
                    f"task {task.name!r} is {task.category.value} work but "
                    f"{worker.name!r} is a {worker.role.value} worker"
                )
        return self


# ---------------------------------------------------------------------------
# Result dataclasses (frozen, output-only)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TaskScore:
    """Weighted raw score and its rounded effort unit."""

    raw_score: float
    effort_unit: int


@dataclass(frozen=True)
class EstimatedTask:
    """A task with its score computed once at creation."""

    name: str
    category: Category
    assigned_to: str
    factors: Mapping[EffortDimension, int]
    notes: Mapping[EffortDimension, str]
    raw_score: float
    effort_unit: int


@dataclass(frozen=True)
class SequentialEstimate:
    """Timeline assuming one worker handles every task in series."""

    total_points: int
    total_days: float
    delivery_date: date


@dataclass(frozen=True)
class WorkerLoad:
    """Per-worker share of a parallel estimate."""

    worker_id: str
    name: str
    points: int
    days: int


@dataclass(frozen=True)
class ParallelEstimate:
    """Timeline assuming every worker drains their own queue concurrently."""

    total_days: int
    delivery_date: date
    breakdown: Mapping[str, WorkerLoad]


@dataclass(frozen=True)
class Epic:
    """Assembled, immutable estimate record."""

    name: str
    tasks: tuple[EstimatedTask, ...]
    workers: tuple[Worker, ...]
    sequential: SequentialEstimate
    parallel: ParallelEstimate
    created_at: datetime

    @property
    def total_points(self) -> int:
        return self.sequential.total_points

    @property
    def total_days(self) -> float:
        return self.sequential.total_days

    def worker_name(self, worker_id: str) -> str | None:
        """Return the display name for ``worker_id`` or None when unknown."""
        for worker in self.workers:
            if worker.id == worker_id:
                return worker.name
        return None
