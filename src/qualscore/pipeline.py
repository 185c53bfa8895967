"""Qualification pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Iterable

import pendulum
import structlog

from .core import (
    QualificationValidator,
    ReferenceGroup,
    ScoreVector,
    ScoringCore,
    ScoringOutcome,
    SubjectEvidence,
    ValidationResult,
)
from .core.utils import round_half_up
from .store import EvidenceStore, EvidenceStoreError
from .writeback import AssessmentWriter, WriteBackError
from . import __version__


class EvidenceCollector:
    """Load a subject's assessments and the evidence filed under each of them."""

    def __init__(self, store: EvidenceStore):
        self._store = store

    def collect(self, subject_id: str) -> SubjectEvidence:
        assessments = self._store.get_assessments_by_subject(subject_id)
        skills = []
        reference_groups = []
        performance = []
        competency = []
        cultural_fit = []

        for assessment in assessments:
            kind = assessment.assessment_type
            if kind == "skills":
                skills.extend(self._store.get_skills_by_assessment(assessment.id))
            elif kind == "references":
                reference_groups.append(
                    ReferenceGroup(
                        assessment_id=assessment.id,
                        references=tuple(self._store.get_references_by_assessment(assessment.id)),
                    )
                )
            elif kind == "performance":
                performance.extend(self._store.get_performance_by_assessment(assessment.id))
            elif kind == "competency":
                competency.extend(self._store.get_competency_by_assessment(assessment.id))
            elif kind == "cultural_fit":
                cultural_fit.extend(self._store.get_cultural_fit_by_assessment(assessment.id))

        return SubjectEvidence(
            subject_id=subject_id,
            assessments=tuple(assessments),
            skills=tuple(skills),
            reference_groups=tuple(reference_groups),
            performance=tuple(performance),
            competency=tuple(competency),
            cultural_fit=tuple(cultural_fit),
        )


@dataclass(slots=True)
class WriteBackReport:
    """Result of a refresh: what was computed and which rows received it."""

    subject_id: str
    assessment_ids: list[str]
    payload: dict[str, Any]
    score_vector: ScoreVector
    validation: ValidationResult


class OutputWriter:
    """Persist refresh results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class QualificationPipeline:
    """Scores, validates and persists qualification results for subjects."""

    def __init__(
        self,
        *,
        core: ScoringCore,
        validator: QualificationValidator,
        store: EvidenceStore,
        writer: AssessmentWriter | None = None,
        collector: EvidenceCollector | None = None,
        output: OutputWriter | None = None,
    ) -> None:
        self._core = core
        self._validator = validator
        self._store = store
        self._writer = writer or AssessmentWriter()
        self._collector = collector or EvidenceCollector(store)
        self._output = output or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    @property
    def store(self) -> EvidenceStore:
        return self._store

    def score(self, subject_id: str) -> ScoringOutcome:
        """Score vector plus per-category breakdown. Performs no writes."""
        outcome = self._core.compute(self._collector.collect(subject_id))
        self._logger.info("scoring.result", subject_id=subject_id, **asdict(outcome.vector))
        return outcome

    def compute_score_vector(self, subject_id: str) -> ScoreVector:
        return self.score(subject_id).vector

    def validate(self, subject_id: str) -> ValidationResult:
        result = self._validator.validate(self._collector.collect(subject_id))
        self._log_validation(subject_id, result)
        return result

    def refresh_and_persist(self, subject_id: str) -> WriteBackReport:
        evidence = self._collector.collect(subject_id)
        outcome = self._core.compute(evidence)
        validation = self._validator.validate(evidence)
        self._log_validation(subject_id, validation)

        payload = self._writer.build_payload(outcome.vector, validation)
        updated = self._writer.write(self._store, evidence.assessments, payload)

        self._logger.info(
            "scoring.result",
            subject_id=subject_id,
            rows_updated=len(updated),
            **asdict(outcome.vector),
        )
        return WriteBackReport(
            subject_id=subject_id,
            assessment_ids=updated,
            payload=payload,
            score_vector=outcome.vector,
            validation=validation,
        )

    def run(
        self,
        *,
        subject_ids: Iterable[str] | None = None,
        output_path: Path | None = None,
        audit_logger: "AuditLogger | None" = None,
    ) -> list[dict]:
        """Refresh every roster subject (or the given ones) and report team coverage."""
        targets = list(subject_ids) if subject_ids is not None else self._store.list_subjects()
        errors: list[str] = []
        serialized_results: list[dict] = []
        assessed = 0

        for subject_id in targets:
            try:
                report = self.refresh_and_persist(subject_id)
            except (EvidenceStoreError, WriteBackError) as exc:
                errors.append(f"{subject_id}: {exc}")
                self._logger.warning("pipeline.subject_failed", subject_id=subject_id, error=str(exc))
                continue

            if report.assessment_ids:
                assessed += 1

            serialized_results.append(asdict(report))

            if audit_logger:
                audit_logger.append(
                    {
                        "subject_id": subject_id,
                        "overall_qualification_score": report.score_vector.overall,
                        "confidence_level": report.score_vector.confidence,
                        "is_valid": report.validation.is_valid,
                        "validation_score": report.validation.score,
                        "red_flag_count": len(report.validation.red_flags),
                        "rows_updated": len(report.assessment_ids),
                    }
                )

        metadata = {
            "subject_count": len(targets),
            "assessed_count": assessed,
            "coverage": round_half_up(assessed / len(targets), 2) if targets else 0.0,
            "errors": errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }

        if output_path is not None:
            self._output.write(output_path, {"metadata": metadata, "results": serialized_results})
        return serialized_results

    def _log_validation(self, subject_id: str, result: ValidationResult) -> None:
        self._logger.info(
            "validation.result",
            subject_id=subject_id,
            is_valid=result.is_valid,
            score=result.score,
            confidence=result.confidence,
            red_flags=len(result.red_flags),
            discrepancies=len(result.discrepancies),
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")
