"""Strict pydantic settings for a simulation run, plus the config-file reader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from constants import DEFAULT_MAX_ROUNDS, DEFAULT_SEED, MAX_ROUNDS_LIMIT
from logging_config import get_logger

logger = get_logger(__name__)

TURNS_KEY = "turns:"


class SimulationConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    max_rounds: int = Field(default=DEFAULT_MAX_ROUNDS, ge=1, le=MAX_ROUNDS_LIMIT)
    seed: int = DEFAULT_SEED
    turn_delay: float = Field(default=0.0, ge=0.0, le=5.0)


def read_turns_from_config(path: Union[str, Path]) -> Optional[int]:
    """Return the ``turns:`` value from *path*, or None when it is missing or unusable."""
    try:
        with open(path, encoding="utf-8") as fh:
            for raw in fh:
                line = raw.strip()
                if not line.lower().startswith(TURNS_KEY):
                    continue
                value = int(line[len(TURNS_KEY):].strip())
                if value < 1 or value > MAX_ROUNDS_LIMIT:
                    raise ValueError(f"turns must be in [1..{MAX_ROUNDS_LIMIT}]. Found: {value}")
                return value
    except (OSError, ValueError) as exc:
        logger.warning("config_read_failed", path=str(path), reason=str(exc))
    return None


def load_config(path: Optional[Union[str, Path]] = None, **overrides: Any) -> SimulationConfig:
    """Build a config from an optional file and keyword overrides.

    Invalid values fall back to the defaults instead of aborting the run.
    """
    values = {k: v for k, v in overrides.items() if v is not None}
    if path is not None:
        turns = read_turns_from_config(path)
        if turns is not None:
            values["max_rounds"] = turns
    try:
        return SimulationConfig(**values)
    except ValidationError as exc:
        bad = {err["loc"][0] for err in exc.errors() if err["loc"]}
        logger.warning("config_invalid", fields=sorted(str(b) for b in bad))
        return SimulationConfig(**{k: v for k, v in values.items() if k not in bad})
