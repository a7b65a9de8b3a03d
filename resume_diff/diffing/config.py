"""Configuration settings for the diff engine."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from resume_diff.diffing.similarity import SIGNIFICANCE_THRESHOLD


class DiffConfig(BaseSettings):
    """Diff engine configuration.

    Settings can be overridden via environment variables with the `DIFF_`
    prefix or a .env file. The bullet match floor is not configurable.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    significance_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=SIGNIFICANCE_THRESHOLD,
        description="Word-set similarity at or below which a change is significant",
    )


_diff_config: DiffConfig | None = None


def get_diff_config() -> DiffConfig:
    """Get the diff configuration singleton."""
    global _diff_config
    if _diff_config is None:
        _diff_config = DiffConfig()
    return _diff_config


def reset_diff_config() -> None:
    """Reset the diff configuration singleton (useful for testing)."""
    global _diff_config
    _diff_config = None
