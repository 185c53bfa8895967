from __future__ import annotations

import copy
from typing import Any

import pytest

from qualscore.core import ReferenceGroup, SubjectEvidence
from qualscore.schemas import QualificationAssessment
from qualscore.store import InMemoryEvidenceStore, JsonEvidenceLoader


EVIDENCE_DOCUMENT: dict[str, Any] = {
    "subjects": [
        {
            "subject_id": "TM-001",
            "name": "Alex Morgan",
            "assessments": [
                {
                    "id": "QA-1",
                    "assessment_type": "skills",
                    "verification_status": "completed",
                    "confidence_level": 0.9,
                    "skills": [
                        {
                            "skill_name": "Financial modelling",
                            "skill_category": "financial",
                            "claimed_proficiency": 90,
                            "validated_proficiency": 60,
                            "evidence_quality": 80,
                            "industry_relevance": 90,
                        },
                        {
                            "skill_name": "Board leadership",
                            "skill_category": "leadership",
                            "claimed_proficiency": 85,
                            "validated_proficiency": 85,
                            "evidence_quality": 90,
                            "industry_relevance": 80,
                        },
                    ],
                },
                {
                    "id": "QA-2",
                    "assessment_type": "references",
                    "verification_status": "completed",
                    "confidence_level": 0.8,
                    "red_flags": [{"description": "stale flag", "severity": "low"}],
                    "references": [
                        {
                            "reference_name": "Jane Doe",
                            "relationship_to_candidate": "direct_manager",
                            "response_status": "completed",
                            "overall_rating": 90,
                            "integrity_rating": 95,
                            "performance_rating": 85,
                            "would_rehire": True,
                        },
                        {
                            "reference_name": "Sam Lee",
                            "relationship_to_candidate": "peer",
                            "response_status": "completed",
                            "overall_rating": 90,
                            "integrity_rating": 95,
                            "performance_rating": 85,
                            "would_rehire": True,
                        },
                        {
                            "reference_name": "Pat Kim",
                            "relationship_to_candidate": "board_member",
                            "response_status": "pending",
                            "overall_rating": 10,
                        },
                    ],
                },
                {
                    "id": "QA-3",
                    "assessment_type": "performance",
                    "verification_status": "completed",
                    "confidence_level": 0.7,
                    "performance": [
                        {
                            "company_name": "Northwind",
                            "role_title": "CFO",
                            "validation_confidence": 0.8,
                            "stakeholder_feedback_score": 80,
                            "peer_review_score": 70,
                            "subordinate_feedback_score": 60,
                            "client_satisfaction_score": 90,
                            "discrepancies_found": ["revenue overstated", "team size"],
                            "claimed_achievements": ["a", "b", "c", "d"],
                            "validated_achievements": ["a", "b", "c"],
                        }
                    ],
                },
                {
                    "id": "QA-4",
                    "assessment_type": "competency",
                    "verification_status": "in_progress",
                    "confidence_level": 0.6,
                    "competency": [
                        {
                            "competency_name": "Leading through change",
                            "competency_category": "Leadership",
                            "required_level": 5,
                            "demonstrated_level": 4,
                            "assessor_confidence": 0.9,
                            "future_potential_score": 70,
                            "competency_gaps": ["delegation"],
                        }
                    ],
                },
            ],
        },
        {
            "subject_id": "TM-002",
            "name": "Riley Chen",
            "assessments": [
                {
                    "id": "QA-5",
                    "assessment_type": "references",
                    "verification_status": "completed",
                    "confidence_level": 0.5,
                    "references": [
                        {
                            "reference_name": "Chris Park",
                            "relationship_to_candidate": "client",
                            "response_status": "completed",
                            "overall_rating": 60,
                            "integrity_rating": 50,
                            "performance_rating": 55,
                            "would_rehire": False,
                            "red_flags": ["missed covenants"],
                        },
                        {
                            "reference_name": "Dana Ruiz",
                            "relationship_to_candidate": "subordinate",
                            "response_status": "declined",
                        },
                    ],
                }
            ],
        },
        {"subject_id": "TM-003", "name": "Jordan Blake", "assessments": []},
    ]
}


@pytest.fixture
def evidence_document() -> dict[str, Any]:
    return copy.deepcopy(EVIDENCE_DOCUMENT)


@pytest.fixture
def store(evidence_document: dict[str, Any]) -> InMemoryEvidenceStore:
    return JsonEvidenceLoader().build(evidence_document)


def build_assessment(assessment_type: str, **kwargs: Any) -> QualificationAssessment:
    defaults: dict[str, Any] = {
        "id": f"QA-{assessment_type}",
        "subject_id": "S-001",
        "assessment_type": assessment_type,
    }
    defaults.update(kwargs)
    return QualificationAssessment(**defaults)


def build_evidence(
    *,
    types: tuple[str, ...] = (),
    references: tuple[ReferenceGroup, ...] = (),
    **families: Any,
) -> SubjectEvidence:
    """Evidence bundle with one assessment per listed type."""
    assessments = tuple(build_assessment(t) for t in types)
    return SubjectEvidence(
        subject_id="S-001",
        assessments=assessments,
        reference_groups=references,
        **{name: tuple(records) for name, records in families.items()},
    )


@pytest.fixture
def make_evidence():
    return build_evidence


@pytest.fixture
def make_assessment():
    return build_assessment
