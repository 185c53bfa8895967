"""Reference check scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...schemas import ReferenceCheck
from ..evidence import SubjectEvidence
from ..utils import clamp, mean, round_half_up


@dataclass
class ReferencesConfig:
    """Rating weights, rehire adjustments and relationship multipliers."""

    overall_weight: float = 0.4
    integrity_weight: float = 0.3
    performance_weight: float = 0.3
    rehire_bonus: float = 5.0
    no_rehire_penalty: float = 10.0
    red_flag_penalty: float = 5.0
    default_weight: float = 1.0
    relationship_weights: dict[str, float] = field(
        default_factory=lambda: {
            "direct_manager": 1.2,
            "board_member": 1.1,
            "client": 1.0,
            "peer": 0.9,
            "subordinate": 0.8,
        }
    )


class ReferencesScorer:
    """Average the completed references; anything not completed earns no credit."""

    category = "references"

    def __init__(self, *, config: ReferencesConfig | None = None) -> None:
        self._config = config or ReferencesConfig()

    def score(self, evidence: SubjectEvidence) -> dict[str, Any]:
        completed = [ref for ref in evidence.references if ref.response_status == "completed"]
        records = [
            {
                "id": ref.id,
                "reference_name": ref.reference_name,
                "relationship": ref.relationship_to_candidate,
                "score": self.individual_score(ref),
            }
            for ref in completed
        ]
        aggregate = mean(item["score"] for item in records)
        return {
            "category": self.category,
            "score": round_half_up(clamp(aggregate)),
            "metadata": {
                "records": records,
                "record_count": len(records),
                "ignored_count": len(evidence.references) - len(completed),
            },
        }

    def individual_score(self, reference: ReferenceCheck) -> float:
        cfg = self._config
        score = (
            reference.overall_rating * cfg.overall_weight
            + reference.integrity_rating * cfg.integrity_weight
            + reference.performance_rating * cfg.performance_weight
        )
        if reference.would_rehire is True:
            score += cfg.rehire_bonus
        elif reference.would_rehire is False:
            score -= cfg.no_rehire_penalty
        score -= len(reference.red_flags) * cfg.red_flag_penalty
        score *= cfg.relationship_weights.get(reference.relationship_to_candidate, cfg.default_weight)
        # Saturates at 100: a 95 from a direct manager (x1.2) does not exceed the scale.
        return clamp(score)
