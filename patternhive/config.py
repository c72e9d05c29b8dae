"""Demo run configuration."""

from __future__ import annotations
import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "PATTERNHIVE_"


class DemoConfig(BaseModel):
    """Settings for a demo run."""

    log_level: str = Field("WARNING", description="stdlib logging level name")
    loan_days: int = Field(14, ge=1, description="Loan length for seeded book records")
    random_seed: Optional[int] = Field(
        None, description="Seed for the random module before the demos run"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DemoConfig":
        """Build a config from PATTERNHIVE_* environment variables."""
        environ = os.environ if environ is None else environ
        values = {}
        for field_name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + field_name.upper())
            if raw not in (None, ""):
                values[field_name] = raw
        return cls(**values)
