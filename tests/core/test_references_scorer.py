from __future__ import annotations

from typing import Any

import pytest

from qualscore.core import ReferenceGroup
from qualscore.core.scorers import ReferencesScorer
from qualscore.schemas import ReferenceCheck


def build_reference(**kwargs: Any) -> ReferenceCheck:
    defaults: dict[str, Any] = {
        "id": "RC-1",
        "assessment_id": "QA-references",
        "reference_name": "Jane Doe",
        "relationship_to_candidate": "peer",
        "response_status": "completed",
        "overall_rating": 90,
        "integrity_rating": 95,
        "performance_rating": 85,
        "would_rehire": True,
    }
    defaults.update(kwargs)
    return ReferenceCheck(**defaults)


def group(*references: ReferenceCheck) -> ReferenceGroup:
    return ReferenceGroup(assessment_id="QA-references", references=references)


def test_identical_peer_references(make_evidence):
    references = [build_reference(id=f"RC-{i}") for i in range(3)]

    result = ReferencesScorer().score(make_evidence(references=(group(*references),)))

    scores = [r["score"] for r in result["metadata"]["records"]]
    assert scores == [pytest.approx(85.5)] * 3
    assert result["score"] == 86


@pytest.mark.parametrize("status", ["pending", "declined", "unreachable"])
def test_incomplete_references_never_count(make_evidence, status):
    completed = build_reference(id="RC-done", overall_rating=50, integrity_rating=50, performance_rating=50, would_rehire=None)
    outstanding = build_reference(id="RC-open", response_status=status, relationship_to_candidate="direct_manager")

    scorer = ReferencesScorer()
    alone = scorer.score(make_evidence(references=(group(completed),)))
    mixed = scorer.score(make_evidence(references=(group(completed, outstanding),)))
    only_outstanding = scorer.score(make_evidence(references=(group(outstanding),)))

    assert mixed["score"] == alone["score"] == 45
    assert mixed["metadata"]["ignored_count"] == 1
    assert only_outstanding["score"] == 0


def test_no_rehire_and_red_flags_are_penalized():
    reference = build_reference(
        relationship_to_candidate="client",
        overall_rating=80,
        integrity_rating=80,
        performance_rating=80,
        would_rehire=False,
        red_flags=["late filings", "staff turnover"],
    )

    assert ReferencesScorer().individual_score(reference) == pytest.approx(60.0)


def test_relationship_weight_saturates_at_hundred():
    reference = build_reference(relationship_to_candidate="direct_manager")

    assert ReferencesScorer().individual_score(reference) == 100.0


def test_score_floors_at_zero():
    reference = build_reference(
        overall_rating=10,
        integrity_rating=10,
        performance_rating=10,
        would_rehire=False,
        red_flags=["a", "b", "c"],
    )

    assert ReferencesScorer().individual_score(reference) == 0.0
