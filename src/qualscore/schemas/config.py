"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class CoreConfig(BaseModel):
    category_weights: dict[str, float] | None = None

    model_config = ConfigDict(extra="forbid")


class ScorerConfig(BaseModel):
    skills: dict[str, Any] | None = None
    references: dict[str, Any] | None = None
    performance: dict[str, Any] | None = None
    competency: dict[str, Any] | None = None
    cultural_fit: dict[str, Any] | None = None

    model_config = ConfigDict(extra="forbid")


class WriteBackConfig(BaseModel):
    default_severity: str = "medium"
    default_priority: str = "medium"

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    core: CoreConfig = Field(default_factory=CoreConfig)
    scorers: ScorerConfig = Field(default_factory=ScorerConfig)
    validator: dict[str, Any] | None = None
    write_back: WriteBackConfig | None = None

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.core.category_weights:
            settings["core"] = self.core.model_dump(exclude_none=True)
        scorer_settings = self.scorers.model_dump(exclude_none=True)
        if scorer_settings:
            settings["scorers"] = scorer_settings
        if self.validator:
            settings["validator"] = dict(self.validator)
        if self.write_back is not None:
            settings["write_back"] = self.write_back.model_dump()
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
