"""Immutable evidence bundle for one subject."""

from __future__ import annotations

from dataclasses import dataclass

from ..schemas import (
    AssessmentType,
    CompetencyValidation,
    CulturalFitAssessment,
    PerformanceValidation,
    QualificationAssessment,
    ReferenceCheck,
    SkillValidation,
)


@dataclass(frozen=True, slots=True)
class ReferenceGroup:
    """Reference checks recorded under a single references assessment."""

    assessment_id: str
    references: tuple[ReferenceCheck, ...]


@dataclass(frozen=True, slots=True)
class SubjectEvidence:
    """Everything the scorers and validator read for one subject."""

    subject_id: str
    assessments: tuple[QualificationAssessment, ...] = ()
    skills: tuple[SkillValidation, ...] = ()
    reference_groups: tuple[ReferenceGroup, ...] = ()
    performance: tuple[PerformanceValidation, ...] = ()
    competency: tuple[CompetencyValidation, ...] = ()
    cultural_fit: tuple[CulturalFitAssessment, ...] = ()

    @property
    def references(self) -> tuple[ReferenceCheck, ...]:
        return tuple(ref for group in self.reference_groups for ref in group.references)

    @property
    def assessment_types(self) -> set[AssessmentType]:
        return {assessment.assessment_type for assessment in self.assessments}

    def has_assessment(self, assessment_type: AssessmentType) -> bool:
        return assessment_type in self.assessment_types
