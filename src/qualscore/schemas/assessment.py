from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

AssessmentType = Literal["skills", "references", "performance", "competency", "cultural_fit"]
VerificationStatus = Literal["pending", "in_progress", "completed", "failed"]


class QualificationAssessment(BaseModel):
    """One evaluation pass of one evidence family for a subject."""

    id: str
    subject_id: str
    assessment_type: AssessmentType
    overall_qualification_score: float = 0.0
    verification_status: VerificationStatus = "pending"
    assessed_by: str | None = None
    methodology: str | None = None
    confidence_level: float = 0.0
    findings: list[Any] = Field(default_factory=list)
    recommendations: list[Any] = Field(default_factory=list)
    red_flags: list[Any] = Field(default_factory=list)
    validation_evidence: list[Any] = Field(default_factory=list)
    external_validation_required: bool = False
    updated_at: str | None = None
    # Intake values captured on the first write-back, which overwrites the live fields.
    reported_confidence: float | None = None
    reported_red_flags: list[Any] | None = None

    model_config = ConfigDict(extra="forbid")

    @property
    def intake_confidence(self) -> float:
        if self.reported_confidence is not None:
            return self.reported_confidence
        return self.confidence_level

    @property
    def intake_red_flags(self) -> list[Any]:
        if self.reported_red_flags is not None:
            return self.reported_red_flags
        return self.red_flags
