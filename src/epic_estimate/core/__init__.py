"""Core estimation models and algorithms."""

from epic_estimate.core.epic import assemble_epic
from epic_estimate.core.factors import (
    EFFORT_UNIT_DESCRIPTIONS,
    FACTOR_DESCRIPTIONS,
    FACTOR_WEIGHTS,
    FactorDescription,
    describe_effort_unit,
)
from epic_estimate.core.models import (
    DEFAULT_CAPACITY,
    Category,
    EffortDimension,
    Epic,
    EpicInput,
    EstimatedTask,
    EstimatorSettings,
    ParallelEstimate,
    SequentialEstimate,
    TaskScore,
    TaskSpec,
    Worker,
    WorkerLoad,
)
from epic_estimate.core.parallel import parallel_estimate
from epic_estimate.core.scoring import (
    EFFORT_UNITS,
    compute_raw_score,
    round_up_to_effort_unit,
    score_rating,
    score_task,
)
from epic_estimate.core.sequential import POINTS_TO_DAYS, points_to_days, sequential_estimate

__all__ = [
    "Category",
    "DEFAULT_CAPACITY",
    "EFFORT_UNITS",
    "EFFORT_UNIT_DESCRIPTIONS",
    "EffortDimension",
    "Epic",
    "EpicInput",
    "EstimatedTask",
    "EstimatorSettings",
    "FACTOR_DESCRIPTIONS",
    "FACTOR_WEIGHTS",
    "FactorDescription",
    "POINTS_TO_DAYS",
    "ParallelEstimate",
    "SequentialEstimate",
    "TaskScore",
    "TaskSpec",
    "Worker",
    "WorkerLoad",
    "assemble_epic",
    "compute_raw_score",
    "describe_effort_unit",
    "parallel_estimate",
    "points_to_days",
    "round_up_to_effort_unit",
    "score_rating",
    "score_task",
    "sequential_estimate",
]
