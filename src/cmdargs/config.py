"""Delimiter configuration with env var + explicit override support."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_DELIMITERS: tuple[str, ...] = (" ",)


@dataclass
class ArgsConfig:
    delimiters: list[str] = field(default_factory=lambda: list(DEFAULT_DELIMITERS))


# Mapping: env var name -> field
_ENV_MAPPING: dict[str, str] = {
    "CMDARGS_DELIMITERS": "delimiters",
}


def load_config(overrides: dict[str, Any] | None = None) -> ArgsConfig:
    """Load configuration with priority: defaults < env vars < overrides.

    Args:
        overrides: Dict of field overrides, e.g. ``{"delimiters": [",", " "]}``.
            None values are skipped (means the option was not provided).
    """
    config = ArgsConfig()

    # 1. Apply env vars
    _apply_env_vars(config)

    # 2. Apply explicit overrides
    if overrides:
        for key, value in overrides.items():
            if value is None:
                continue
            _set_field_value(config, key, value)

    return config


def _apply_env_vars(config: ArgsConfig) -> None:
    """Apply environment variables to config."""
    for env_name, field_name in _ENV_MAPPING.items():
        value = os.environ.get(env_name)
        if value is None:
            continue
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            logger.warning("%s is not valid JSON, ignoring: %r", env_name, value)
            continue
        _set_field_value(config, field_name, decoded, source=env_name)


def _set_field_value(config: ArgsConfig, field_name: str, value: Any, source: str = "") -> None:
    """Set a field on the config, validating delimiter lists."""
    if field_name not in {f.name for f in fields(config)}:
        logger.debug("Unknown config field: %s", field_name)
        return

    if field_name == "delimiters":
        if not isinstance(value, (list, tuple)) or not all(isinstance(d, str) for d in value):
            logger.warning(
                "Delimiters from %s must be a list of strings, ignoring: %r",
                source or "overrides",
                value,
            )
            return
        value = list(value)

    setattr(config, field_name, value)
