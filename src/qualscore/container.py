"""Dependency injection container for the qualification engine."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    CompetencyScorer,
    CulturalFitScorer,
    PerformanceScorer,
    QualificationValidator,
    ReferencesScorer,
    ScoringCore,
    SkillsScorer,
    ValidatorConfig,
)
from .core.scorers.competency import CompetencyConfig
from .core.scorers.cultural_fit import CulturalFitConfig
from .core.scorers.performance import PerformanceConfig
from .core.scorers.references import ReferencesConfig
from .core.scorers.skills import SkillsConfig
from .pipeline import QualificationPipeline
from .store import InMemoryEvidenceStore
from .writeback import AssessmentWriter


class QualificationContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    store = providers.Singleton(InMemoryEvidenceStore)

    skills_scorer = providers.Singleton(SkillsScorer)
    references_scorer = providers.Singleton(ReferencesScorer)
    performance_scorer = providers.Singleton(PerformanceScorer)
    competency_scorer = providers.Singleton(CompetencyScorer)
    cultural_fit_scorer = providers.Singleton(CulturalFitScorer)

    scorers = providers.List(
        skills_scorer,
        references_scorer,
        performance_scorer,
        competency_scorer,
        cultural_fit_scorer,
    )

    scoring_core = providers.Singleton(
        ScoringCore,
        scorers=scorers,
        category_weights=config.category_weights,
    )

    validator = providers.Singleton(QualificationValidator)

    assessment_writer = providers.Singleton(AssessmentWriter)

    pipeline = providers.Factory(
        QualificationPipeline,
        core=scoring_core,
        validator=validator,
        store=store,
        writer=assessment_writer,
    )


def create_container(
    *,
    settings: dict | None = None,
    store: object | None = None,
) -> QualificationContainer:
    """Instantiate container with optional overrides and evidence store."""

    container = QualificationContainer()

    if store is not None:
        container.store.override(providers.Object(store))

    if not settings:
        return container

    core_settings = settings.get("core", {}) if isinstance(settings, dict) else {}
    if core_settings:
        container.config.override(core_settings)

    scorer_settings = settings.get("scorers", {}) if isinstance(settings, dict) else {}

    if "skills" in scorer_settings:
        skills_config = SkillsConfig(**scorer_settings["skills"])
        container.skills_scorer.override(
            providers.Singleton(SkillsScorer, config=skills_config)
        )

    if "references" in scorer_settings:
        references_config = ReferencesConfig(**scorer_settings["references"])
        container.references_scorer.override(
            providers.Singleton(ReferencesScorer, config=references_config)
        )

    if "performance" in scorer_settings:
        performance_config = PerformanceConfig(**scorer_settings["performance"])
        container.performance_scorer.override(
            providers.Singleton(PerformanceScorer, config=performance_config)
        )

    if "competency" in scorer_settings:
        competency_config = CompetencyConfig(**scorer_settings["competency"])
        container.competency_scorer.override(
            providers.Singleton(CompetencyScorer, config=competency_config)
        )

    if "cultural_fit" in scorer_settings:
        cultural_fit_config = CulturalFitConfig(**scorer_settings["cultural_fit"])
        container.cultural_fit_scorer.override(
            providers.Singleton(CulturalFitScorer, config=cultural_fit_config)
        )

    validator_settings = settings.get("validator") if isinstance(settings, dict) else None
    if validator_settings:
        validator_config = ValidatorConfig(**validator_settings)
        container.validator.override(
            providers.Singleton(QualificationValidator, config=validator_config)
        )

    write_back_settings = settings.get("write_back") if isinstance(settings, dict) else None
    if write_back_settings:
        container.assessment_writer.override(
            providers.Singleton(AssessmentWriter, **write_back_settings)
        )

    return container
