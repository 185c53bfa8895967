"""Evidence store contract, in-memory implementation and JSON persistence."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import pendulum
from pydantic import BaseModel, ValidationError

from .schemas import (
    CompetencyValidation,
    CulturalFitAssessment,
    PerformanceValidation,
    QualificationAssessment,
    ReferenceCheck,
    SkillValidation,
)


class EvidenceStoreError(Exception):
    """Base exception for evidence store access."""


class SubjectNotFoundError(EvidenceStoreError):
    """Subject is not on the roster."""

    def __init__(self, subject_id: str):
        self.subject_id = subject_id
        super().__init__(f"Subject with ID {subject_id} not found")


class AssessmentNotFoundError(EvidenceStoreError):
    """Assessment record does not exist."""

    def __init__(self, assessment_id: str):
        self.assessment_id = assessment_id
        super().__init__(f"Assessment with ID {assessment_id} not found")


class DuplicateIdError(EvidenceStoreError):
    """Subject or assessment id is already taken."""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"Duplicate {kind} ID {identifier}")


class EvidenceLoadError(ValueError):
    """Raised when an evidence document contains invalid records."""

    def __init__(self, errors: list[str]):
        super().__init__("Evidence loading failed")
        self.errors = errors

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Evidence loading failed: {self.errors}"


@runtime_checkable
class EvidenceStore(Protocol):
    """Read/write contract the engine relies on."""

    def list_subjects(self) -> list[str]:
        """Return every subject id on the roster."""

    def get_assessments_by_subject(self, subject_id: str) -> list[QualificationAssessment]:
        """Return the subject's assessments; raise SubjectNotFoundError for unknown ids."""

    def get_skills_by_assessment(self, assessment_id: str) -> list[SkillValidation]:
        ...

    def get_references_by_assessment(self, assessment_id: str) -> list[ReferenceCheck]:
        ...

    def get_performance_by_assessment(self, assessment_id: str) -> list[PerformanceValidation]:
        ...

    def get_competency_by_assessment(self, assessment_id: str) -> list[CompetencyValidation]:
        ...

    def get_cultural_fit_by_assessment(self, assessment_id: str) -> list[CulturalFitAssessment]:
        ...

    def update_assessment(self, assessment_id: str, fields: dict[str, Any]) -> QualificationAssessment:
        """Apply a partial update to one assessment row."""


FAMILY_MODELS: dict[str, type[BaseModel]] = {
    "skills": SkillValidation,
    "references": ReferenceCheck,
    "performance": PerformanceValidation,
    "competency": CompetencyValidation,
    "cultural_fit": CulturalFitAssessment,
}


class InMemoryEvidenceStore:
    """Dict-backed evidence store. Single-row updates replace the stored model."""

    def __init__(self) -> None:
        self._subjects: dict[str, str | None] = {}
        self._assessments: dict[str, QualificationAssessment] = {}
        self._evidence: dict[str, dict[str, list[BaseModel]]] = {
            family: {} for family in FAMILY_MODELS
        }

    def add_subject(self, subject_id: str, name: str | None = None) -> None:
        if subject_id in self._subjects:
            raise DuplicateIdError("subject", subject_id)
        self._subjects[subject_id] = name

    def add_assessment(self, assessment: QualificationAssessment) -> None:
        if assessment.subject_id not in self._subjects:
            raise SubjectNotFoundError(assessment.subject_id)
        if assessment.id in self._assessments:
            raise DuplicateIdError("assessment", assessment.id)
        self._assessments[assessment.id] = assessment

    def add_evidence(self, family: str, record: BaseModel) -> None:
        if family not in FAMILY_MODELS:
            raise KeyError(f"Unknown evidence family: {family!r}")
        assessment_id = getattr(record, "assessment_id")
        self._require_assessment(assessment_id)
        self._evidence[family].setdefault(assessment_id, []).append(record)

    def list_subjects(self) -> list[str]:
        return list(self._subjects)

    def subject_name(self, subject_id: str) -> str | None:
        self._require_subject(subject_id)
        return self._subjects[subject_id]

    def get_assessments_by_subject(self, subject_id: str) -> list[QualificationAssessment]:
        self._require_subject(subject_id)
        return [a for a in self._assessments.values() if a.subject_id == subject_id]

    def get_skills_by_assessment(self, assessment_id: str) -> list[SkillValidation]:
        return self._records("skills", assessment_id)

    def get_references_by_assessment(self, assessment_id: str) -> list[ReferenceCheck]:
        return self._records("references", assessment_id)

    def get_performance_by_assessment(self, assessment_id: str) -> list[PerformanceValidation]:
        return self._records("performance", assessment_id)

    def get_competency_by_assessment(self, assessment_id: str) -> list[CompetencyValidation]:
        return self._records("competency", assessment_id)

    def get_cultural_fit_by_assessment(self, assessment_id: str) -> list[CulturalFitAssessment]:
        return self._records("cultural_fit", assessment_id)

    def update_assessment(self, assessment_id: str, fields: dict[str, Any]) -> QualificationAssessment:
        current = self._require_assessment(assessment_id)
        merged = current.model_dump(mode="python")
        merged.update({k: v for k, v in fields.items() if k not in {"id", "subject_id"}})
        merged["updated_at"] = pendulum.now("UTC").to_iso8601_string()
        updated = QualificationAssessment.model_validate(merged)
        self._assessments[assessment_id] = updated
        return updated

    def get_assessment(self, assessment_id: str) -> QualificationAssessment:
        return self._require_assessment(assessment_id)

    def to_document(self) -> dict[str, Any]:
        """Render the store in the JSON evidence document layout."""
        subjects: list[dict[str, Any]] = []
        for subject_id, name in self._subjects.items():
            assessments: list[dict[str, Any]] = []
            for assessment in self.get_assessments_by_subject(subject_id):
                entry = assessment.model_dump(mode="json", exclude={"subject_id"})
                for family in FAMILY_MODELS:
                    records = self._evidence[family].get(assessment.id, [])
                    if records:
                        entry[family] = [
                            record.model_dump(mode="json", exclude={"assessment_id"})
                            for record in records
                        ]
                assessments.append(entry)
            subjects.append({"subject_id": subject_id, "name": name, "assessments": assessments})
        return {"subjects": subjects}

    def _records(self, family: str, assessment_id: str) -> list[Any]:
        self._require_assessment(assessment_id)
        return list(self._evidence[family].get(assessment_id, []))

    def _require_subject(self, subject_id: str) -> None:
        if subject_id not in self._subjects:
            raise SubjectNotFoundError(subject_id)

    def _require_assessment(self, assessment_id: str) -> QualificationAssessment:
        try:
            return self._assessments[assessment_id]
        except KeyError as exc:
            raise AssessmentNotFoundError(assessment_id) from exc


class JsonEvidenceLoader:
    """Load an evidence document into an in-memory store.

    Assessment and record ids are optional in the document; missing ones are
    derived from their position so repeated loads produce the same ids.
    """

    def load(self, path: Path) -> InMemoryEvidenceStore:
        with path.open("r", encoding="utf-8") as handle:
            try:
                document = json.load(handle)
            except json.JSONDecodeError as exc:
                raise EvidenceLoadError([f"invalid JSON ({exc})"]) from exc
        return self.build(document)

    def build(self, document: Any) -> InMemoryEvidenceStore:
        if not isinstance(document, dict) or not isinstance(document.get("subjects"), list):
            raise EvidenceLoadError(["document must be an object with a 'subjects' list"])

        store = InMemoryEvidenceStore()
        errors: list[str] = []
        for s_idx, subject in enumerate(document["subjects"]):
            location = f"subjects[{s_idx}]"
            if not isinstance(subject, dict) or not subject.get("subject_id"):
                errors.append(f"{location}: missing subject_id")
                continue
            subject_id = str(subject["subject_id"])
            try:
                store.add_subject(subject_id, subject.get("name"))
            except DuplicateIdError as exc:
                errors.append(f"{location}: {exc}")
                continue
            for a_idx, raw in enumerate(subject.get("assessments") or []):
                self._load_assessment(store, subject_id, a_idx, raw, errors)
        if errors:
            raise EvidenceLoadError(errors)
        return store

    def _load_assessment(
        self,
        store: InMemoryEvidenceStore,
        subject_id: str,
        index: int,
        raw: Any,
        errors: list[str],
    ) -> None:
        location = f"subject {subject_id} assessments[{index}]"
        if not isinstance(raw, dict):
            errors.append(f"{location}: assessment must be an object")
            return
        fields = {k: v for k, v in raw.items() if k not in FAMILY_MODELS}
        fields.setdefault("id", f"{subject_id}-A{index}")
        fields["subject_id"] = subject_id
        try:
            assessment = QualificationAssessment.model_validate(fields)
        except ValidationError as exc:
            errors.append(f"{location}: {exc}")
            return
        try:
            store.add_assessment(assessment)
        except DuplicateIdError as exc:
            errors.append(f"{location}: {exc}")
            return

        for family, model in FAMILY_MODELS.items():
            for r_idx, record in enumerate(raw.get(family) or []):
                record_location = f"{location}.{family}[{r_idx}]"
                if not isinstance(record, dict):
                    errors.append(f"{record_location}: record must be an object")
                    continue
                payload = {"id": f"{assessment.id}-{family}-{r_idx}", **record}
                payload["assessment_id"] = assessment.id
                try:
                    store.add_evidence(family, model.model_validate(payload))
                except ValidationError as exc:
                    errors.append(f"{record_location}: {exc}")


class JsonEvidenceWriter:
    """Persist a store back to the evidence document layout."""

    def write(self, path: Path, store: InMemoryEvidenceStore) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(store.to_document(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
