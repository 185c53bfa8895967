"""Rule-based qualification validation.

The validator re-reads the same evidence as the scoring core but derives its own
score, so a subject with a strong weighted score can still fail validation on red
flags. Both results are reported to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .evidence import SubjectEvidence
from .utils import clamp, round_half_up


@dataclass
class ValidatorConfig:
    """Deductions and thresholds applied by the validator."""

    required_types: tuple[str, ...] = ("skills", "references", "performance")
    missing_assessment_penalty: float = 15.0
    missing_assessment_confidence_penalty: float = 0.1
    skill_variance_threshold: float = 20.0
    skill_variance_penalty: float = 5.0
    evidence_quality_threshold: float = 60.0
    evidence_quality_penalty: float = 3.0
    min_completed_references: int = 2
    insufficient_references_penalty: float = 10.0
    insufficient_references_confidence_penalty: float = 0.15
    reference_red_flag_penalty: float = 5.0
    no_rehire_penalty: float = 15.0
    performance_confidence_threshold: float = 0.7
    performance_confidence_penalty: float = 8.0
    performance_confidence_confidence_penalty: float = 0.1
    max_performance_discrepancies: int = 3
    performance_discrepancy_penalty: float = 2.0
    recommend_below_score: float = 70.0
    recommend_above_red_flags: int = 2
    recommend_below_confidence: float = 0.7
    pass_score: float = 60.0
    max_red_flags: int = 3


@dataclass(slots=True)
class ValidationResult:
    """Verdict with the findings that produced it."""

    is_valid: bool
    score: float
    confidence: float
    discrepancies: list[str] = field(default_factory=list)
    red_flags: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


class QualificationValidator:
    """Walks a subject's evidence and applies deduction rules."""

    def __init__(self, *, config: ValidatorConfig | None = None) -> None:
        self._config = config or ValidatorConfig()

    def validate(self, evidence: SubjectEvidence) -> ValidationResult:
        cfg = self._config
        discrepancies: list[str] = []
        red_flags: list[str] = []
        score = 100.0
        confidence = 1.0

        present = evidence.assessment_types
        for assessment_type in cfg.required_types:
            if assessment_type not in present:
                discrepancies.append(f"Missing {assessment_type} assessment")
                score -= cfg.missing_assessment_penalty
                confidence -= cfg.missing_assessment_confidence_penalty

        for skill in evidence.skills:
            claimed = skill.claimed_proficiency
            validated = skill.validated_proficiency
            if abs(claimed - validated) > cfg.skill_variance_threshold:
                discrepancies.append(
                    f"Large variance in {skill.skill_name}: "
                    f"claimed {claimed:g}%, validated {validated:g}%"
                )
                score -= cfg.skill_variance_penalty
            if skill.evidence_quality < cfg.evidence_quality_threshold:
                red_flags.append(
                    f"Low evidence quality for {skill.skill_name}: {skill.evidence_quality:g}%"
                )
                score -= cfg.evidence_quality_penalty

        for group in evidence.reference_groups:
            completed = [ref for ref in group.references if ref.response_status == "completed"]
            if len(completed) < cfg.min_completed_references:
                discrepancies.append("Insufficient reference checks completed")
                score -= cfg.insufficient_references_penalty
                confidence -= cfg.insufficient_references_confidence_penalty

            for reference in completed:
                if reference.red_flags:
                    flags = ", ".join(str(flag) for flag in reference.red_flags)
                    red_flags.append(f"Reference red flags from {reference.reference_name}: {flags}")
                    score -= len(reference.red_flags) * cfg.reference_red_flag_penalty
                if reference.would_rehire is False:
                    red_flags.append(f"{reference.reference_name} would not rehire candidate")
                    score -= cfg.no_rehire_penalty

        for record in evidence.performance:
            if record.validation_confidence < cfg.performance_confidence_threshold:
                percent = round_half_up(record.validation_confidence * 100)
                discrepancies.append(f"Low performance validation confidence: {percent:g}%")
                score -= cfg.performance_confidence_penalty
                confidence -= cfg.performance_confidence_confidence_penalty
            found = len(record.discrepancies_found)
            if found > cfg.max_performance_discrepancies:
                red_flags.append(f"Multiple performance discrepancies found: {found} issues")
                score -= found * cfg.performance_discrepancy_penalty

        recommendations = self._recommend(score, len(red_flags), confidence)

        return ValidationResult(
            is_valid=score >= cfg.pass_score and len(red_flags) <= cfg.max_red_flags,
            score=max(0.0, score),
            confidence=round_half_up(clamp(confidence, 0.0, 1.0), 2),
            discrepancies=discrepancies,
            red_flags=red_flags,
            recommendations=recommendations,
        )

    def _recommend(self, score: float, red_flag_count: int, confidence: float) -> list[str]:
        cfg = self._config
        recommendations: list[str] = []
        if score < cfg.recommend_below_score:
            recommendations.append(
                "Conduct additional reference checks to improve validation confidence"
            )
            recommendations.append("Request additional documentation for performance claims")
        if red_flag_count > cfg.recommend_above_red_flags:
            recommendations.append("Investigate red flags thoroughly before proceeding")
            recommendations.append("Consider additional due diligence measures")
        if confidence < cfg.recommend_below_confidence:
            recommendations.append("Improve assessment completeness and evidence quality")
            recommendations.append("Consider third-party validation services")
        return recommendations
