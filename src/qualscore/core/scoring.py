"""Scoring core orchestration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .evidence import SubjectEvidence
from .utils import clamp, mean, round_half_up


@dataclass(frozen=True, slots=True)
class ScoreVector:
    """Subject-level scores written back to every assessment row."""

    overall: int = 0
    skills: float = 0.0
    references: float = 0.0
    performance: float = 0.0
    competency: float = 0.0
    cultural_fit: float = 0.0
    confidence: float = 0.0
    red_flag_count: int = 0
    verification_completeness: float = 0.0


@dataclass(slots=True)
class CategoryResult:
    """Normalized scorer output."""

    category: str
    score: float
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ScoringOutcome:
    """Score vector plus the per-category breakdown behind it."""

    subject_id: str
    vector: ScoreVector
    categories: list[CategoryResult]


class ScoringCore:
    """Runs the category scorers and combines them into a score vector."""

    DEFAULT_WEIGHTS: dict[str, float] = {
        "skills": 0.25,
        "references": 0.20,
        "performance": 0.25,
        "competency": 0.20,
        "cultural_fit": 0.10,
    }

    # cultural_fit is optional and never counts toward completeness
    REQUIRED_TYPES: tuple[str, ...] = ("skills", "references", "performance", "competency")

    def __init__(
        self,
        scorers: Iterable[Any],
        *,
        category_weights: dict[str, float] | None = None,
    ) -> None:
        self._scorers = list(scorers)
        overrides = dict(category_weights or {})
        unknown = sorted(set(overrides) - set(self.DEFAULT_WEIGHTS))
        if unknown:
            raise ValueError(f"Unknown score categories in weights: {unknown}")
        # Partial overrides keep the default weight for the categories they omit.
        self._category_weights = {**self.DEFAULT_WEIGHTS, **overrides}

    def compute(self, evidence: SubjectEvidence) -> ScoringOutcome:
        if not evidence.assessments:
            return ScoringOutcome(
                subject_id=evidence.subject_id,
                vector=ScoreVector(),
                categories=[],
            )

        categories = [
            self._normalize_category_result(scorer.score(evidence))
            for scorer in self._scorers
        ]
        scores = {result.category: result.score for result in categories}

        vector = ScoreVector(
            overall=self.overall_score(scores),
            skills=scores.get("skills", 0.0),
            references=scores.get("references", 0.0),
            performance=scores.get("performance", 0.0),
            competency=scores.get("competency", 0.0),
            cultural_fit=scores.get("cultural_fit", 0.0),
            confidence=self.confidence(evidence),
            red_flag_count=self.red_flag_count(evidence),
            verification_completeness=self.verification_completeness(evidence),
        )
        return ScoringOutcome(
            subject_id=evidence.subject_id,
            vector=vector,
            categories=categories,
        )

    def overall_score(self, scores: dict[str, float]) -> int:
        weighted = sum(
            scores.get(category, 0.0) * weight
            for category, weight in self._category_weights.items()
        )
        return int(round_half_up(clamp(weighted)))

    @staticmethod
    def confidence(evidence: SubjectEvidence) -> float:
        """Average self-reported confidence scaled by the share of completed assessments."""
        assessments = evidence.assessments
        if not assessments:
            return 0.0
        average = mean(assessment.intake_confidence for assessment in assessments)
        completed = sum(1 for a in assessments if a.verification_status == "completed")
        return round_half_up(clamp(average * completed / len(assessments), 0.0, 1.0), 2)

    @classmethod
    def verification_completeness(cls, evidence: SubjectEvidence) -> float:
        completed_types = {
            a.assessment_type
            for a in evidence.assessments
            if a.verification_status == "completed"
        }
        ratio = len(completed_types.intersection(cls.REQUIRED_TYPES)) / len(cls.REQUIRED_TYPES)
        return round_half_up(ratio, 2)

    @staticmethod
    def red_flag_count(evidence: SubjectEvidence) -> int:
        # Assessment-level tally only; the validator digs into the evidence records.
        return sum(len(assessment.intake_red_flags) for assessment in evidence.assessments)

    @staticmethod
    def _normalize_category_result(payload: dict[str, Any]) -> CategoryResult:
        category = payload.get("category")
        score = payload.get("score")
        metadata = payload.get("metadata") or {}
        if category is None:
            raise ValueError("Scorer result must include 'category'.")
        if score is None:
            raise ValueError(f"Scorer result for {category!r} must include 'score'.")
        return CategoryResult(
            category=str(category),
            score=clamp(float(score)),
            metadata=dict(metadata),
        )
