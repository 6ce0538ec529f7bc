"""
Pydantic models for skillcheck configuration.

Defines all configuration schemas using Pydantic v2 for validation,
defaults, and serialization.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class SkillsConfig(BaseModel):
    """Where skills live and the limits they are checked against."""

    root: Path = Field(
        default=Path(".github/skills"),
        description="Directory holding one subdirectory per skill",
    )
    skill_file: str = Field(
        default="SKILL.md",
        description="Definition file expected inside each skill directory",
    )
    max_lines: int = Field(
        default=500,
        ge=1,
        description="Maximum number of lines a definition file may have",
    )

    model_config = {"extra": "forbid"}

    @field_validator("skill_file")
    @classmethod
    def _plain_file_name(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"skill_file must be a plain file name, got '{v}'")
        return v


class LoggingConfig(BaseModel):
    """Logging system configuration."""

    level: Literal["debug", "info", "warn", "error"] = "warn"
    file: Path | None = None
    verbose: int = 0

    model_config = {"extra": "forbid"}


class AppConfig(BaseModel):
    """Complete application configuration.

    This is the root of the configuration tree. It combines all sections
    and is the entry point for validation.
    """

    skills: SkillsConfig = Field(default_factory=SkillsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}
