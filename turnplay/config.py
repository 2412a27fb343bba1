from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "TURNPLAY_"


class Settings(BaseModel):
    # Fixed seed for reproducible runs; None picks one at startup.
    seed: int | None = None
    log_level: str = "WARNING"
    max_decision_attempts: int = Field(3, ge=1)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from TURNPLAY_* environment variables.

    Unset or empty variables fall back to the model defaults.
    """

    source = os.environ if env is None else env
    raw: dict[str, str] = {}
    for field_name in Settings.model_fields:
        value = source.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value is not None and value.strip():
            raw[field_name] = value.strip()
    return Settings.model_validate(raw)
