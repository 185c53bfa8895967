"""Cultural fit scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CulturalFitAssessment
from ..evidence import SubjectEvidence
from ..utils import clamp, mean, round_half_up


@dataclass
class CulturalFitConfig:
    values_weight: float = 0.25
    work_style_weight: float = 0.20
    communication_weight: float = 0.20
    leadership_weight: float = 0.20
    team_integration_weight: float = 0.15
    red_flag_penalty: float = 5.0
    neutral_default: float = 75.0


class CulturalFitScorer:
    """Score cultural fit, falling back to a neutral prior when nothing was assessed."""

    category = "cultural_fit"

    def __init__(self, *, config: CulturalFitConfig | None = None) -> None:
        self._config = config or CulturalFitConfig()

    def score(self, evidence: SubjectEvidence) -> dict[str, Any]:
        records = [
            {"id": record.id, "score": self.individual_score(record)}
            for record in evidence.cultural_fit
        ]
        if not records:
            return {
                "category": self.category,
                "score": self._config.neutral_default,
                "metadata": {"records": [], "record_count": 0, "status": "neutral_default"},
            }
        return {
            "category": self.category,
            "score": round_half_up(clamp(mean(item["score"] for item in records))),
            "metadata": {"records": records, "record_count": len(records), "status": "assessed"},
        }

    def individual_score(self, record: CulturalFitAssessment) -> float:
        cfg = self._config
        score = (
            record.values_alignment_score * cfg.values_weight
            + record.work_style_compatibility * cfg.work_style_weight
            + record.communication_style_fit * cfg.communication_weight
            + record.leadership_style_fit * cfg.leadership_weight
            + record.team_integration_potential * cfg.team_integration_weight
        )
        return clamp(score - len(record.cultural_red_flags) * cfg.red_flag_penalty)
