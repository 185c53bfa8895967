"""Typer CLI entrypoint for the qualification engine."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .logging import configure_logging
from .pipeline import AuditLogger, QualificationPipeline
from .schemas.config import load_config
from .store import EvidenceLoadError, EvidenceStoreError, JsonEvidenceLoader, JsonEvidenceWriter

app = typer.Typer(help="Management-team qualification scoring CLI.")


def _evidence_option() -> Any:
    return typer.Option(..., exists=True, readable=True, dir_okay=False, help="Evidence JSON path.")


def _config_option() -> Any:
    return typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path.")


def _log_level_option() -> Any:
    return typer.Option("WARNING", help="Log level for structured logging.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_hint="config")
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


def _build_pipeline(evidence: Path, config: Path | None, log_level: str) -> QualificationPipeline:
    settings = _load_settings(config)
    configure_logging(log_level)
    try:
        store = JsonEvidenceLoader().load(evidence)
    except EvidenceLoadError as exc:
        raise typer.BadParameter("; ".join(exc.errors), param_hint="evidence") from exc
    container = create_container(settings=settings, store=store)
    return container.pipeline()


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
def score(
    evidence: Path = _evidence_option(),
    subject: str = typer.Option(..., help="Subject (team member) id."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
) -> None:
    """Print the score vector for one subject."""
    pipeline = _build_pipeline(evidence, config, log_level)
    try:
        outcome = pipeline.score(subject)
    except EvidenceStoreError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    _echo_json(
        {
            "subject_id": subject,
            "scores": asdict(outcome.vector),
            "categories": [asdict(result) for result in outcome.categories],
        }
    )


@app.command()
def validate(
    evidence: Path = _evidence_option(),
    subject: str = typer.Option(..., help="Subject (team member) id."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
) -> None:
    """Print the validation verdict for one subject."""
    pipeline = _build_pipeline(evidence, config, log_level)
    try:
        result = pipeline.validate(subject)
    except EvidenceStoreError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    _echo_json({"subject_id": subject, **asdict(result)})


@app.command()
def refresh(
    evidence: Path = _evidence_option(),
    subject: Optional[list[str]] = typer.Option(None, help="Subject id; repeat for several. Defaults to the whole roster."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, resolve_path=True, help="Output JSON path."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
    write: bool = typer.Option(False, "--write", help="Save updated assessments back into the evidence file."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
) -> None:
    """Score, validate and write results back to every assessment of each subject."""
    pipeline = _build_pipeline(evidence, config, log_level)
    audit_logger = AuditLogger(audit_log) if audit_log else None

    results = pipeline.run(
        subject_ids=subject or None,
        output_path=output,
        audit_logger=audit_logger,
    )

    if write:
        JsonEvidenceWriter().write(evidence, pipeline.store)

    destination = f" Results saved to {output}." if output else ""
    typer.echo(f"Refreshed {len(results)} subjects.{destination}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
