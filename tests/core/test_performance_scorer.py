from __future__ import annotations

from typing import Any

import pytest

from qualscore.core.scorers import PerformanceScorer
from qualscore.schemas import PerformanceValidation


def build_record(**kwargs: Any) -> PerformanceValidation:
    defaults: dict[str, Any] = {
        "id": "PV-1",
        "assessment_id": "QA-performance",
        "role_title": "CFO",
        "validation_confidence": 0.8,
        "stakeholder_feedback_score": 80,
        "peer_review_score": 70,
        "subordinate_feedback_score": 60,
        "client_satisfaction_score": 90,
    }
    defaults.update(kwargs)
    return PerformanceValidation(**defaults)


def test_blend_with_discrepancies_and_verification_bonus(make_evidence):
    record = build_record(
        discrepancies_found=["revenue overstated", "team size"],
        claimed_achievements=["a", "b", "c", "d"],
        validated_achievements=["a", "b", "c"],
    )
    scorer = PerformanceScorer()

    assert scorer.stakeholder_composite(record) == pytest.approx(74.5)
    # 0.6 * 80 + 0.4 * 74.5 - 2 * 3 + 0.75 * 10
    assert scorer.individual_score(record) == pytest.approx(79.3)
    assert scorer.score(make_evidence(performance=[record]))["score"] == 79


def test_no_claimed_achievements_means_no_bonus():
    record = build_record(validated_achievements=["unsolicited"])

    assert PerformanceScorer.verification_rate(record) == 0.0
    assert PerformanceScorer().individual_score(record) == pytest.approx(77.8)


def test_score_is_clamped_to_hundred():
    record = build_record(
        validation_confidence=1.0,
        stakeholder_feedback_score=100,
        peer_review_score=100,
        subordinate_feedback_score=100,
        client_satisfaction_score=100,
        claimed_achievements=["x"],
        validated_achievements=["x"],
    )

    assert PerformanceScorer().individual_score(record) == 100.0


def test_category_is_unweighted_mean(make_evidence):
    strong = build_record(id="PV-strong", validation_confidence=1.0)
    weak = build_record(id="PV-weak", validation_confidence=0.0)

    result = PerformanceScorer().score(make_evidence(performance=[strong, weak]))

    # (89.8 + 29.8) / 2
    assert result["score"] == 60
    assert result["metadata"]["record_count"] == 2
