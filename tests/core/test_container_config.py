from __future__ import annotations

import pytest
from pydantic import ValidationError

from qualscore.config import ConfigManager
from qualscore.container import create_container
from qualscore.schemas.config import AppConfig, load_config


def test_create_container_with_overrides(store):
    container = create_container(
        settings={
            "core": {"category_weights": {"skills": 0.5, "references": 0.5}},
            "scorers": {
                "skills": {"variance_cap": 10.0},
                "references": {"rehire_bonus": 8.0},
                "performance": {"verification_bonus": 5.0},
                "competency": {"gap_penalty": 4.0},
                "cultural_fit": {"neutral_default": 60.0},
            },
            "validator": {"pass_score": 70.0},
            "write_back": {"default_severity": "high", "default_priority": "low"},
        },
        store=store,
    )

    assert container.skills_scorer()._config.variance_cap == 10.0
    assert container.references_scorer()._config.rehire_bonus == 8.0
    assert container.performance_scorer()._config.verification_bonus == 5.0
    assert container.competency_scorer()._config.gap_penalty == 4.0
    assert container.cultural_fit_scorer()._config.neutral_default == 60.0
    assert container.validator()._config.pass_score == 70.0
    assert container.scoring_core()._category_weights == {
        "skills": 0.5,
        "references": 0.5,
        "performance": 0.25,
        "competency": 0.20,
        "cultural_fit": 0.10,
    }
    assert container.assessment_writer()._default_severity == "high"
    assert container.pipeline().store is store


def test_default_container_uses_documented_weights():
    core = create_container().scoring_core()

    assert core._category_weights == {
        "skills": 0.25,
        "references": 0.20,
        "performance": 0.25,
        "competency": 0.20,
        "cultural_fit": 0.10,
    }


def test_load_config_validation():
    data = {
        "core": {"category_weights": {"skills": 0.3}},
        "scorers": {"skills": {"variance_factor": 0.4}},
        "write_back": {"default_severity": "high"},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["core"]["category_weights"]["skills"] == 0.3
    assert settings["scorers"] == {"skills": {"variance_factor": 0.4}}
    assert settings["write_back"] == {"default_severity": "high", "default_priority": "medium"}


def test_load_config_rejects_unknown_sections_and_non_mappings():
    with pytest.raises(ValidationError):
        load_config({"evaluators": {}})
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])


def test_config_manager_loads_profile(tmp_path):
    (tmp_path / "strict.yaml").write_text(
        "validator:\n  max_red_flags: 1\nscorers:\n  cultural_fit:\n    neutral_default: 50\n",
        encoding="utf-8",
    )

    settings = ConfigManager(tmp_path).load_settings("strict")

    assert settings == {
        "scorers": {"cultural_fit": {"neutral_default": 50}},
        "validator": {"max_red_flags": 1},
    }
