"""Behavioral competency scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from ...schemas import CompetencyValidation
from ..evidence import SubjectEvidence
from ..utils import clamp, round_half_up, weighted_mean


@dataclass
class CompetencyConfig:
    """Blend weights and category weights.

    Competency categories are free text coming from the assessor's framework, so
    anything outside ``category_weights`` gets ``default_weight``.
    """

    level_weight: float = 0.5
    assessor_confidence_weight: float = 0.3
    future_potential_weight: float = 0.2
    gap_penalty: float = 2.0
    default_weight: float = 1.0
    category_weights: dict[str, float] = field(
        default_factory=lambda: {
            "Leadership": 1.3,
            "Strategic": 1.2,
            "Execution": 1.1,
            "Financial": 1.0,
            "Technical": 0.9,
        }
    )


class CompetencyScorer:
    """Score demonstrated against required competency levels."""

    category = "competency"

    def __init__(self, *, config: CompetencyConfig | None = None) -> None:
        self._config = config or CompetencyConfig()
        self._logger = structlog.get_logger(__name__)

    def score(self, evidence: SubjectEvidence) -> dict[str, Any]:
        records = [
            {
                "id": record.id,
                "competency_name": record.competency_name,
                "competency_category": record.competency_category,
                "score": self.individual_score(record),
                "weight": self.category_weight(record.competency_category),
            }
            for record in evidence.competency
        ]
        aggregate = weighted_mean((item["score"], item["weight"]) for item in records)
        return {
            "category": self.category,
            "score": round_half_up(clamp(aggregate)),
            "metadata": {"records": records, "record_count": len(records)},
        }

    def category_weight(self, category: str) -> float:
        weight = self._config.category_weights.get(category)
        if weight is None:
            self._logger.warning(
                "competency.unknown_category",
                competency_category=category,
                default_weight=self._config.default_weight,
            )
            return self._config.default_weight
        return weight

    def individual_score(self, record: CompetencyValidation) -> float:
        cfg = self._config
        level_score = min(100.0, record.demonstrated_level / max(record.required_level, 1) * 100)
        score = (
            level_score * cfg.level_weight
            + record.assessor_confidence * 100 * cfg.assessor_confidence_weight
            + record.future_potential_score * cfg.future_potential_weight
        )
        return clamp(score - len(record.competency_gaps) * cfg.gap_penalty)
