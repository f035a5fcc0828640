"""YAML-backed settings loader."""

from __future__ import annotations

from importlib.resources import as_file, files
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from epic_estimate.core.models import EstimatorSettings

DEFAULT_SETTINGS_FILENAME = "default_settings.yaml"


def load_settings(path: str | Path) -> EstimatorSettings:
    """Load and validate an estimator settings file."""
    settings_path = Path(path)
    raw_data = read_yaml_mapping(settings_path, kind="settings")

    try:
        return EstimatorSettings.model_validate(raw_data)
    except ValidationError as exc:
        detail_text = format_validation_errors(exc)
        raise ValueError(f"Invalid settings file at {settings_path}:\n{detail_text}") from exc


def load_default_settings() -> EstimatorSettings:
    """Load the packaged default settings."""
    resource = files("epic_estimate").joinpath(DEFAULT_SETTINGS_FILENAME)
    with as_file(resource) as default_path:
        return load_settings(default_path)


def read_yaml_mapping(path: Path, *, kind: str) -> dict[str, Any]:
    """Read a YAML file whose root must be a mapping (empty files give ``{}``)."""
    if not path.exists():
        raise FileNotFoundError(f"{kind.capitalize()} file not found: {path}")

    try:
        raw_data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse YAML {kind} at {path}: {exc}") from exc
    except OSError as exc:
        raise OSError(f"Failed to read {kind} file {path}: {exc}") from exc

    if raw_data is None:
        raw_data = {}
    if not isinstance(raw_data, dict):
        raise ValueError(f"Invalid {kind} file at {path}: root must be a YAML mapping")
    return raw_data


def format_validation_errors(exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        details.append(f"{location}: {error['msg']}")
    return "\n".join(f"- {line}" for line in details)
