from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from loopless.usecases.config_models import AppConfig

ALLOWED_TOP_LEVEL = {
    "version",
    "scenario",
    "pipeline",
    "generation",
    "sieve",
    "optimizer",
    "emitter",
    "render",
    "output",
    "logging",
}


# ConfigError is raised for invalid configuration: fail fast, before anything runs.
class ConfigError(ValueError):
    pass


def load_raw_config(path: Path) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return _validate_top_level(raw)


def load_config(path: Path | None = None) -> AppConfig:
    # No path => the packaged default config.
    if path is None:
        text = resources.files("loopless").joinpath("default_config.yml").read_text(encoding="utf-8")
        raw = _validate_top_level(yaml.safe_load(text))
    else:
        raw = load_raw_config(path)
    return parse_config(raw)


def parse_config(raw: dict[str, Any]) -> AppConfig:
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: object) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    unknown = set(raw.keys()) - ALLOWED_TOP_LEVEL
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

    missing = [key for key in ("version", "scenario", "pipeline", "generation") if key not in raw]
    if missing:
        raise ConfigError(f"Missing required top-level keys: {', '.join(missing)}")

    pipeline = raw.get("pipeline")
    if not isinstance(pipeline, dict) or "steps" not in pipeline:
        raise ConfigError("pipeline.steps is required")
    if not isinstance(pipeline.get("steps"), list):
        raise ConfigError("pipeline.steps must be a list")
    return raw
