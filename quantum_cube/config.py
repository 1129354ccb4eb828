"""Game configuration.

Settings come from explicit arguments or from ``QCUBE_*`` environment
variables:

    QCUBE_GRID_SIZE       cube edge length, only 3 is supported
    QCUBE_CELL_SIZE       cell edge length for renderers (default 2.0)
    QCUBE_GAP             gap between cells for renderers (default 1.0)
    QCUBE_MOVES_PER_TURN  moves each player makes before the turn passes (default 1)
    QCUBE_RNG_SEED        seed for the collapse RandomSource (default: unseeded)
    QCUBE_LOG_LEVEL       logging level name (default INFO)

Cell size and gap only matter to presentation layers; the rules engine
ignores them.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .models import GRID_SIZE

__all__ = ["ENV_PREFIX", "GameConfig"]

ENV_PREFIX = "QCUBE_"

_ENV_FIELDS = {
    "grid_size": "GRID_SIZE",
    "cell_size": "CELL_SIZE",
    "gap": "GAP",
    "moves_per_turn": "MOVES_PER_TURN",
    "rng_seed": "RNG_SEED",
    "log_level": "LOG_LEVEL",
}


class GameConfig(BaseModel):
    """Engine and presentation settings"""
    grid_size: int = GRID_SIZE
    cell_size: float = Field(2.0, gt=0)
    gap: float = Field(1.0, ge=0)
    moves_per_turn: int = Field(1, ge=1)
    rng_seed: Optional[int] = None
    log_level: str = "INFO"

    class Config:
        frozen = True

    @field_validator("grid_size")
    @classmethod
    def _fixed_grid(cls, value: int) -> int:
        if value != GRID_SIZE:
            raise ValueError(f"only a {GRID_SIZE}x{GRID_SIZE}x{GRID_SIZE} cube is supported")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def cell_pitch(self) -> float:
        """Distance between neighbouring cell centres."""
        return self.cell_size + self.gap

    @classmethod
    def build(cls, **values) -> "GameConfig":
        """Validate ``values`` and raise ConfigurationError on bad input."""
        try:
            return cls(**values)
        except ValidationError as exc:
            first = exc.errors()[0]
            setting = str(first["loc"][0]) if first.get("loc") else None
            raise ConfigurationError(first["msg"], setting=setting) from exc

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides,
    ) -> "GameConfig":
        """Read ``QCUBE_*`` variables; explicit ``overrides`` win when not None."""
        env = os.environ if environ is None else environ
        values = {}
        for field, suffix in _ENV_FIELDS.items():
            raw = env.get(ENV_PREFIX + suffix)
            if raw is not None and raw.strip() != "":
                values[field] = raw.strip()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.build(**values)
