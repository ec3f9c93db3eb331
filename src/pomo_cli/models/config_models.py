"""Configuration models for pomo CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .interval import IntervalConfig


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True)
    progress_bar: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main pomo configuration"""

    intervals: IntervalConfig = Field(
        default_factory=IntervalConfig, description="Planned interval durations"
    )
    output: OutputConfig = Field(default_factory=OutputConfig)
