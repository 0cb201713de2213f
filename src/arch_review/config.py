from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Mapping

from arch_review.models import RuleConfig


logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


def load_config(path: str | Path) -> RuleConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Config file is not valid JSON: {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config must be a JSON object")

    thresholds = raw.get("thresholds", raw)
    if not isinstance(thresholds, dict):
        raise ConfigError("'thresholds' must be an object")

    config = apply_overrides(RuleConfig(), thresholds)
    logger.debug("Loaded thresholds from %s: %s", config_path, config.to_dict())
    return config


def apply_overrides(base: RuleConfig, overrides: Mapping[str, Any]) -> RuleConfig:
    known = set(RuleConfig.field_names())
    unknown = sorted(key for key in overrides if key not in known)
    if unknown:
        raise ConfigError(f"Unknown threshold keys: {', '.join(unknown)}")

    values = {key: _positive_int(key, value) for key, value in overrides.items()}
    return replace(base, **values)


def parse_assignment(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ConfigError(f"Expected KEY=VALUE, got: {text!r}")
    return key, value.strip()


def _positive_int(key: str, value: object) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"'{key}' must be a positive integer") from exc
    if number <= 0 or (isinstance(value, float) and value != number):
        raise ConfigError(f"'{key}' must be a positive integer")
    return number
