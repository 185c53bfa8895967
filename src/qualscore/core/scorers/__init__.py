"""Category scorer implementations for the scoring core."""

from .skills import SkillsScorer
from .references import ReferencesScorer
from .performance import PerformanceScorer
from .competency import CompetencyScorer
from .cultural_fit import CulturalFitScorer

__all__ = [
    "SkillsScorer",
    "ReferencesScorer",
    "PerformanceScorer",
    "CompetencyScorer",
    "CulturalFitScorer",
]
