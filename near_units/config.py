"""
Runtime settings, read from the environment and an optional ``.env`` file.

Variables:
    NEAR_UNITS_GAS_WARN_THRESHOLD     raw gas below this warns (default 300)
    NEAR_UNITS_NEAR_WARN_THRESHOLD    raw yoctoNEAR below this warns (default 10^20)
    NEAR_UNITS_PLAUSIBILITY_WARNINGS  "false"/"0"/"no" disables the warnings

Process environment wins over the dotenv file. ``get_settings`` falls back to
the defaults, logging an error, when a variable cannot be used.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from dotenv import dotenv_values
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "NEAR_UNITS_"

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class Settings(BaseModel):
    """Tunable thresholds for the plausibility checker."""

    gas_warn_threshold: int = Field(default=300, ge=0)
    near_warn_threshold: int = Field(default=10**20, ge=0)
    plausibility_warnings: bool = True

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> Settings:
        """Build settings from ``NEAR_UNITS_*`` variables.

        Args:
            env_file: Optional dotenv file whose values sit below the
                process environment.

        Raises:
            ValueError: If a threshold is not a non-negative integer.
        """
        values: dict[str, str | None] = {}
        if env_file is not None:
            values.update(dotenv_values(env_file))
        values.update(os.environ)

        kwargs: dict[str, object] = {}
        for field_name in cls.model_fields:
            raw = values.get(ENV_PREFIX + field_name.upper())
            if raw is None or raw.strip() == "":
                continue
            if field_name == "plausibility_warnings":
                kwargs[field_name] = raw.strip().lower() not in _FALSE_VALUES
            else:
                kwargs[field_name] = int(raw.strip())
        return cls(**kwargs)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment."""
    try:
        return Settings.from_env()
    except ValueError as e:
        logger.error("Ignoring invalid %s* settings, using defaults: %s", ENV_PREFIX, e)
        return Settings()
