from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SkillCategory = Literal["technical", "leadership", "strategic", "financial", "operational"]
ResponseStatus = Literal["pending", "completed", "declined", "unreachable"]
Relationship = Literal["direct_manager", "board_member", "client", "peer", "subordinate"]


class SkillValidation(BaseModel):
    """One claimed skill and its validated proficiency."""

    id: str
    assessment_id: str
    skill_category: SkillCategory
    skill_name: str = ""
    claimed_proficiency: float = 0.0
    validated_proficiency: float = 0.0
    validation_method: str | None = None
    evidence_quality: float = 0.0
    industry_relevance: float = 0.0
    assessor_notes: str | None = None

    model_config = ConfigDict(extra="forbid")


class ReferenceCheck(BaseModel):
    """A reference contacted about the candidate.

    ``would_rehire`` is tri-state: ``None`` means the reference did not say.
    """

    id: str
    assessment_id: str
    reference_name: str = ""
    reference_position: str | None = None
    reference_company: str | None = None
    relationship_to_candidate: Relationship = "peer"
    response_status: ResponseStatus = "pending"
    overall_rating: float = 0.0
    integrity_rating: float = 0.0
    performance_rating: float = 0.0
    would_rehire: bool | None = None
    red_flags: list[Any] = Field(default_factory=list)
    specific_feedback: str | None = None

    model_config = ConfigDict(extra="forbid")


class PerformanceValidation(BaseModel):
    """Validated track record for one historical role."""

    id: str
    assessment_id: str
    company_name: str | None = None
    role_title: str | None = None
    validation_confidence: float = 0.0
    stakeholder_feedback_score: float = 0.0
    peer_review_score: float = 0.0
    subordinate_feedback_score: float = 0.0
    client_satisfaction_score: float = 0.0
    claimed_achievements: list[Any] = Field(default_factory=list)
    validated_achievements: list[Any] = Field(default_factory=list)
    discrepancies_found: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class CompetencyValidation(BaseModel):
    """One behavioral competency measured against its required level."""

    id: str
    assessment_id: str
    competency_category: str
    competency_name: str = ""
    required_level: float = 0.0
    demonstrated_level: float = 0.0
    assessor_confidence: float = 0.0
    future_potential_score: float = 0.0
    competency_gaps: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class CulturalFitAssessment(BaseModel):
    """Cultural fit sub-scores for a candidate."""

    id: str
    assessment_id: str
    values_alignment_score: float = 0.0
    work_style_compatibility: float = 0.0
    communication_style_fit: float = 0.0
    leadership_style_fit: float = 0.0
    team_integration_potential: float = 0.0
    cultural_red_flags: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
