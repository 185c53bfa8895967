from __future__ import annotations

from typing import Any

import pytest

from qualscore.core.scorers import CulturalFitScorer
from qualscore.core.scorers.cultural_fit import CulturalFitConfig
from qualscore.schemas import CulturalFitAssessment


def build_fit(**kwargs: Any) -> CulturalFitAssessment:
    defaults: dict[str, Any] = {
        "id": "CF-1",
        "assessment_id": "QA-cultural_fit",
        "values_alignment_score": 80,
        "work_style_compatibility": 70,
        "communication_style_fit": 90,
        "leadership_style_fit": 60,
        "team_integration_potential": 100,
    }
    defaults.update(kwargs)
    return CulturalFitAssessment(**defaults)


def test_weighted_sub_scores_minus_red_flags(make_evidence):
    scorer = CulturalFitScorer()
    clean = build_fit()
    flagged = build_fit(id="CF-2", cultural_red_flags=["command style", "siloed"])

    assert scorer.individual_score(clean) == pytest.approx(79.0)
    assert scorer.individual_score(flagged) == pytest.approx(69.0)
    result = scorer.score(make_evidence(cultural_fit=[clean, flagged]))
    assert result["score"] == 74
    assert result["metadata"]["status"] == "assessed"


def test_missing_cultural_fit_uses_neutral_prior(make_evidence):
    result = CulturalFitScorer().score(make_evidence(types=("skills",)))

    assert result["score"] == 75
    assert result["metadata"]["status"] == "neutral_default"


def test_neutral_prior_is_configurable(make_evidence):
    scorer = CulturalFitScorer(config=CulturalFitConfig(neutral_default=50.0))

    assert scorer.score(make_evidence())["score"] == 50.0


def test_red_flags_floor_at_zero():
    record = build_fit(
        values_alignment_score=10,
        work_style_compatibility=10,
        communication_style_fit=10,
        leadership_style_fit=10,
        team_integration_potential=10,
        cultural_red_flags=["a", "b", "c"],
    )

    assert CulturalFitScorer().individual_score(record) == 0.0
