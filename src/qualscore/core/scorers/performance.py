"""Historical performance validation scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import PerformanceValidation
from ..evidence import SubjectEvidence
from ..utils import clamp, mean, round_half_up


@dataclass
class PerformanceConfig:
    confidence_weight: float = 0.6
    stakeholder_weight: float = 0.4
    stakeholder_feedback_weight: float = 0.30
    peer_review_weight: float = 0.25
    subordinate_feedback_weight: float = 0.25
    client_satisfaction_weight: float = 0.20
    discrepancy_penalty: float = 3.0
    verification_bonus: float = 10.0


class PerformanceScorer:
    """Blend validation confidence with stakeholder feedback per role."""

    category = "performance"

    def __init__(self, *, config: PerformanceConfig | None = None) -> None:
        self._config = config or PerformanceConfig()

    def score(self, evidence: SubjectEvidence) -> dict[str, Any]:
        records = [
            {
                "id": record.id,
                "role_title": record.role_title,
                "company_name": record.company_name,
                "score": self.individual_score(record),
                "verification_rate": self.verification_rate(record),
            }
            for record in evidence.performance
        ]
        aggregate = mean(item["score"] for item in records)
        return {
            "category": self.category,
            "score": round_half_up(clamp(aggregate)),
            "metadata": {"records": records, "record_count": len(records)},
        }

    def stakeholder_composite(self, record: PerformanceValidation) -> float:
        cfg = self._config
        return (
            record.stakeholder_feedback_score * cfg.stakeholder_feedback_weight
            + record.peer_review_score * cfg.peer_review_weight
            + record.subordinate_feedback_score * cfg.subordinate_feedback_weight
            + record.client_satisfaction_score * cfg.client_satisfaction_weight
        )

    @staticmethod
    def verification_rate(record: PerformanceValidation) -> float:
        claimed = len(record.claimed_achievements)
        if claimed == 0:
            return 0.0
        return clamp(len(record.validated_achievements) / claimed, 0.0, 1.0)

    def individual_score(self, record: PerformanceValidation) -> float:
        cfg = self._config
        score = (
            record.validation_confidence * 100 * cfg.confidence_weight
            + self.stakeholder_composite(record) * cfg.stakeholder_weight
        )
        score -= len(record.discrepancies_found) * cfg.discrepancy_penalty
        score += self.verification_rate(record) * cfg.verification_bonus
        return clamp(score)
