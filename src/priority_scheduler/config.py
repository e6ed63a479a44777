"""Load optional scheduler configuration from `scheduler.yaml`."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, field_validator

CONFIG_FILE = "scheduler.yaml"
VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class SchedulerConfig(BaseModel):
    """Settings for the interactive scheduler."""

    log_level: str = "INFO"
    strict_cycles: bool = False  # raise on dependency cycles instead of degrading the order
    show_dependencies: bool = True

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got '{value}'")
        return level


def load_scheduler_config(path: Path | None = None) -> tuple[SchedulerConfig, str | None]:
    """Load the optional config file.

    Args:
        path: Config file location. Defaults to `scheduler.yaml` in the
            current directory.

    Returns:
        A tuple of `(config, error_message)`. A missing file returns defaults
        and no error; an unreadable or invalid file returns defaults and the
        error message.
    """
    path = Path(path) if path is not None else Path.cwd() / CONFIG_FILE
    if not path.exists():
        return SchedulerConfig(), None
    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        return SchedulerConfig(), f"Failed to read {path.name}: {exc}"
    if raw is None:
        return SchedulerConfig(), None
    if not isinstance(raw, dict):
        return SchedulerConfig(), f"{path.name} must contain a mapping"
    try:
        return SchedulerConfig.model_validate(raw), None
    except ValidationError as exc:
        return SchedulerConfig(), f"Invalid {path.name}: {exc}"
