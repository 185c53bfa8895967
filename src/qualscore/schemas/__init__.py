"""Pydantic schema definitions for assessments and evidence records."""

from __future__ import annotations

from .assessment import AssessmentType, QualificationAssessment, VerificationStatus
from .evidence import (
    CompetencyValidation,
    CulturalFitAssessment,
    PerformanceValidation,
    ReferenceCheck,
    SkillValidation,
)

__all__ = [
    "AssessmentType",
    "VerificationStatus",
    "QualificationAssessment",
    "SkillValidation",
    "ReferenceCheck",
    "PerformanceValidation",
    "CompetencyValidation",
    "CulturalFitAssessment",
]
