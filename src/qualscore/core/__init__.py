"""Core qualification scoring engine components."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from .evidence import ReferenceGroup, SubjectEvidence
from .scoring import CategoryResult, ScoreVector, ScoringCore, ScoringOutcome
from .scorers import (
    CompetencyScorer,
    CulturalFitScorer,
    PerformanceScorer,
    ReferencesScorer,
    SkillsScorer,
)
from .validation import QualificationValidator, ValidationResult, ValidatorConfig


@runtime_checkable
class CategoryScorer(Protocol):
    """Scorer contract for one evidence family."""

    category: str

    def score(self, evidence: SubjectEvidence) -> dict[str, Any]:
        """Return the category score and its per-record breakdown."""


__all__ = [
    "CategoryScorer",
    "SubjectEvidence",
    "ReferenceGroup",
    "ScoringCore",
    "ScoringOutcome",
    "ScoreVector",
    "CategoryResult",
    "QualificationValidator",
    "ValidationResult",
    "ValidatorConfig",
    "SkillsScorer",
    "ReferencesScorer",
    "PerformanceScorer",
    "CompetencyScorer",
    "CulturalFitScorer",
]
