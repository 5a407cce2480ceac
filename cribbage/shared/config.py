"""
Configuration schema.

Defaults are defined as Pydantic field defaults. YAML files provide overrides only.
Validation constraints live next to each field.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

PositiveInt = Annotated[int, Field(gt=0)]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


def deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict with override merged onto base (override wins, recursive)."""
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


class StrictFrozenModel(BaseModel):
    """Base for all config models: immutable, extra keys forbidden."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class SolverConfig(StrictFrozenModel):
    """Discard solver settings."""

    top_n: PositiveInt = Field(default=3)
    best_starters: PositiveInt = Field(default=3)
    num_workers: PositiveInt = Field(default=1)
    show_progress: bool = Field(default=False)
    reject_duplicates: bool = Field(default=True)


class PracticeConfig(StrictFrozenModel):
    """Practice mode: deal seed and the table situation to practise."""

    seed: int | None = Field(default=None)
    is_dealer: bool = Field(default=True)
    include_crib: bool = Field(default=True)


class SystemConfig(StrictFrozenModel):
    config_name: str = Field(default="default")
    log_level: LogLevel = Field(default="WARNING")


class Config(StrictFrozenModel):
    """
    Complete configuration.

    All defaults are defined here in Python. YAML files provide only overrides.
    """

    solver: SolverConfig = Field(default_factory=SolverConfig)
    practice: PracticeConfig = Field(default_factory=PracticeConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    def to_dict(self) -> dict[str, Any]:
        """Serialize config to a plain dict (for JSON, logging, etc.)."""
        return self.model_dump()

    @classmethod
    def default(cls) -> "Config":
        return cls()

    def merge(self, overrides: dict[str, Any]) -> "Config":
        """Return a new Config with the provided overrides merged in."""
        return Config.model_validate(deep_merge_dicts(self.model_dump(), overrides))

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Config":
        """Create Config from a dict merged over defaults."""
        return cls.default().merge(config_dict)
