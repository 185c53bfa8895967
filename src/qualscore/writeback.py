"""Broadcast write-back of subject-level results to assessment rows.

Every assessment row of a subject receives the same score, confidence, red flags
and recommendations: the score belongs to the subject, not to one assessment
type. The intake confidence and red flags are kept aside on the first write so
that a re-run computes the same numbers. Rows are updated one at a time and a
failing row does not stop the rest.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Iterable

import structlog

from .core import ScoreVector, ValidationResult
from .schemas import QualificationAssessment
from .store import EvidenceStore


@dataclass(frozen=True, slots=True)
class WriteBackFailure:
    assessment_id: str
    error: str


class WriteBackError(RuntimeError):
    """Raised after write-back when one or more rows could not be updated."""

    def __init__(self, failures: list[WriteBackFailure], updated: list[str]):
        super().__init__("Write-back failed")
        self.failures = failures
        self.updated = updated

    def __str__(self) -> str:  # pragma: no cover - trivial
        rows = ", ".join(f"{f.assessment_id} ({f.error})" for f in self.failures)
        return f"Write-back failed for {len(self.failures)} row(s): {rows}"


class AssessmentWriter:
    """Render the write-back payload and apply it row by row."""

    def __init__(
        self,
        *,
        default_severity: str = "medium",
        default_priority: str = "medium",
    ) -> None:
        self._default_severity = default_severity
        self._default_priority = default_priority
        self._logger = structlog.get_logger(__name__)

    def build_payload(self, vector: ScoreVector, validation: ValidationResult) -> dict[str, Any]:
        return {
            "overall_qualification_score": vector.overall,
            "confidence_level": vector.confidence,
            "red_flags": [
                {"description": flag, "severity": self._default_severity}
                for flag in validation.red_flags
            ],
            "recommendations": [
                {"description": rec, "priority": self._default_priority}
                for rec in validation.recommendations
            ],
        }

    def write(
        self,
        store: EvidenceStore,
        assessments: Iterable[QualificationAssessment],
        payload: dict[str, Any],
    ) -> list[str]:
        updated: list[str] = []
        failures: list[WriteBackFailure] = []
        for assessment in assessments:
            fields = copy.deepcopy(payload)
            if assessment.reported_confidence is None:
                fields["reported_confidence"] = assessment.confidence_level
            if assessment.reported_red_flags is None:
                fields["reported_red_flags"] = list(assessment.red_flags)
            try:
                store.update_assessment(assessment.id, fields)
            except Exception as exc:  # noqa: BLE001
                failures.append(WriteBackFailure(assessment_id=assessment.id, error=str(exc)))
                self._logger.warning(
                    "write_back.row_failed",
                    assessment_id=assessment.id,
                    error=str(exc),
                )
                continue
            updated.append(assessment.id)

        if failures:
            raise WriteBackError(failures, updated)

        self._logger.info("write_back.completed", rows=len(updated))
        return updated
