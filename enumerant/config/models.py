"""Typed configuration models for the enumerant demo entry point.

pydantic validates the YAML document and hands typed objects to the runtime.
Every section is optional; an empty document yields the defaults below.
"""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from enumerant.measure.measurer import MeasurementSystem


class TelemetryConfig(BaseModel):
    """Logging level and optional directory for the rotating JSON log file."""

    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value}")
        return level


class DemoConfig(BaseModel):
    """Settings for ``python -m enumerant.main``.

    ``measurement_system`` is resolved leniently (``" Imperial"`` and ``"2"``
    both select imperial) and stored as the member's primary name.
    """

    measurement_system: str = Field("metric", description="Name or value of a MeasurementSystem member")

    @field_validator("measurement_system", mode="before")
    @classmethod
    def _known_system(cls, value: object) -> str:
        member = MeasurementSystem.parse(value) if isinstance(value, (str, int)) else None
        if member is None:
            raise ValueError(f"Invalid system {value}")
        return member.name


class AppConfig(BaseModel):
    """Aggregated configuration consumed by the demo entry point."""

    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)

    model_config = ConfigDict(frozen=True)
