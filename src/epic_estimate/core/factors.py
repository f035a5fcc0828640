"""Fixed effort dimensions: weights, meanings and rating guidance."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from epic_estimate.core.models import EffortDimension

FACTOR_WEIGHTS: Mapping[EffortDimension, float] = MappingProxyType(
    {
        EffortDimension.UNCERTAINTY: 0.8,
        EffortDimension.COMPLEXITY: 0.6,
        EffortDimension.TESTABILITY: 0.4,
        EffortDimension.LEGACY_IMPACT: 0.5,
        EffortDimension.INTEGRATION_DIFFICULTY: 0.7,
        EffortDimension.REFACTOR_EFFORT: 0.4,
        EffortDimension.DEPENDENCIES: 0.5,
        EffortDimension.REQUIREMENT_VOLATILITY: 0.4,
    }
)


@dataclass(frozen=True)
class FactorDescription:
    """Guidance shown while rating one dimension."""

    meaning: str
    low_examples: tuple[str, ...]
    high_examples: tuple[str, ...]


FACTOR_DESCRIPTIONS: Mapping[EffortDimension, FactorDescription] = MappingProxyType(
    {
        EffortDimension.UNCERTAINTY: FactorDescription(
            meaning="How much we DON'T know about the business logic, requirements, or domain",
            low_examples=(
                "We know exactly what needs to be done",
                "Clear, well-defined requirements",
                "Familiar business domain",
            ),
            high_examples=(
                "We have little to no clarity",
                "Major unknowns about requirements",
                "Unfamiliar business domain",
            ),
        ),
        EffortDimension.COMPLEXITY: FactorDescription(
            meaning="Technical difficulty of implementing the feature",
            low_examples=(
                "Simple logic or UI tweak",
                "Basic CRUD operations",
                "Standard patterns",
            ),
            high_examples=(
                "Many moving parts",
                "Complex algorithms",
                "Architectural impact",
            ),
        ),
        EffortDimension.TESTABILITY: FactorDescription(
            meaning="How hard it is to test (manual + automated)",
            low_examples=(
                "Easy to automate",
                "Simple validation",
                "Clear test scenarios",
            ),
            high_examples=(
                "Requires complex setups",
                "Hard to replicate bugs",
                "Long manual testing cycles",
            ),
        ),
        EffortDimension.LEGACY_IMPACT: FactorDescription(
            meaning="How much legacy code we need to touch and how risky that is",
            low_examples=(
                "Isolated from legacy code",
                "New, clean implementation",
                "Well-documented existing code",
            ),
            high_examples=(
                "Deeply tied to fragile code",
                "Poorly documented legacy",
                "High risk of breaking changes",
            ),
        ),
        EffortDimension.INTEGRATION_DIFFICULTY: FactorDescription(
            meaning="Technical difficulty of connecting to other systems (internal or external)",
            low_examples=(
                "Well-documented, stable API",
                "Familiar patterns",
                "Simple data mapping",
            ),
            high_examples=(
                "Unstable/undocumented systems",
                "Complex authentication",
                "Data mapping issues",
            ),
        ),
        EffortDimension.REFACTOR_EFFORT: FactorDescription(
            meaning="How much refactoring is needed/opportunistic to do alongside this work",
            low_examples=(
                "No refactor needed",
                "Clean, maintainable code",
                "Minimal changes required",
            ),
            high_examples=(
                "Large, structural refactor",
                "Technical debt cleanup",
                "Major code reorganization",
            ),
        ),
        EffortDimension.DEPENDENCIES: FactorDescription(
            meaning="How much we rely on other teams or tasks before we can finish",
            low_examples=(
                "No blocking dependencies",
                "Self-contained work",
                "Clear handoff points",
            ),
            high_examples=(
                "Multiple critical dependencies",
                "High coordination risk",
                "Waiting on external teams",
            ),
        ),
        EffortDimension.REQUIREMENT_VOLATILITY: FactorDescription(
            meaning="Likelihood that requirements will change mid-work",
            low_examples=(
                "Frozen requirements",
                "Stable scope",
                "Clear acceptance criteria",
            ),
            high_examples=(
                "High chance of shifting goals",
                "Scope creep likely",
                "Requirements still being defined",
            ),
        ),
    }
)

# What each effort unit means in delivery terms
EFFORT_UNIT_DESCRIPTIONS: Mapping[int, str] = MappingProxyType(
    {
        1: "Quick to deliver and minimal complexity; on the order of an hour or so",
        2: "Quick to deliver and some complexity; on the order of multiple hours/half-day+",
        3: "Moderate time to deliver, moderate complexity, and possibly some uncertainty/unknowns",
        5: "Longer time to deliver, high complexity, and likely unknowns",
        8: "Long time to deliver, high complexity, critical unknowns",
    }
)


def describe_effort_unit(unit: int) -> str:
    """Return the delivery guidance for an effort unit."""
    description = EFFORT_UNIT_DESCRIPTIONS.get(unit)
    if description is None:
        return f"{unit} – unknown effort unit"
    return f"{unit} – {description}"
