"""Skill validation scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...schemas import SkillValidation
from ..evidence import SubjectEvidence
from ..utils import clamp, round_half_up, weighted_mean


@dataclass
class SkillsConfig:
    """Component weights, variance penalty and per-category weights."""

    validated_weight: float = 0.60
    evidence_quality_weight: float = 0.25
    industry_relevance_weight: float = 0.15
    variance_factor: float = 0.5
    variance_cap: float = 20.0
    default_weight: float = 1.0
    category_weights: dict[str, float] = field(
        default_factory=lambda: {
            "leadership": 1.3,
            "strategic": 1.2,
            "financial": 1.1,
            "operational": 1.0,
            "technical": 0.9,
        }
    )


class SkillsScorer:
    """Score validated skills, penalizing the gap between claimed and validated proficiency."""

    category = "skills"

    def __init__(self, *, config: SkillsConfig | None = None) -> None:
        self._config = config or SkillsConfig()

    def score(self, evidence: SubjectEvidence) -> dict[str, Any]:
        records = [self._score_record(skill) for skill in evidence.skills]
        aggregate = weighted_mean((item["score"], item["weight"]) for item in records)
        return {
            "category": self.category,
            "score": round_half_up(clamp(aggregate)),
            "metadata": {"records": records, "record_count": len(records)},
        }

    def individual_score(self, skill: SkillValidation) -> float:
        cfg = self._config
        base = (
            skill.validated_proficiency * cfg.validated_weight
            + skill.evidence_quality * cfg.evidence_quality_weight
            + skill.industry_relevance * cfg.industry_relevance_weight
        )
        return clamp(base - self.variance_penalty(skill))

    def variance_penalty(self, skill: SkillValidation) -> float:
        variance = abs(skill.claimed_proficiency - skill.validated_proficiency)
        return min(variance * self._config.variance_factor, self._config.variance_cap)

    def _score_record(self, skill: SkillValidation) -> dict[str, Any]:
        weight = self._config.category_weights.get(skill.skill_category, self._config.default_weight)
        return {
            "id": skill.id,
            "skill_name": skill.skill_name,
            "skill_category": skill.skill_category,
            "score": self.individual_score(skill),
            "variance_penalty": self.variance_penalty(skill),
            "weight": weight,
        }
