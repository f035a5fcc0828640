"""Tests for YAML settings loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from epic_estimate.adapters.config_loader import load_default_settings, load_settings

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")
    return path


def test_load_settings_valid_file() -> None:
    settings = load_settings(FIXTURES / "custom_settings.yaml")

    assert settings.default_capacity == pytest.approx(2.0)
    assert settings.output_dir == Path("saved-estimates")
    assert settings.save is False
    assert settings.tool_name == "Team Estimator"


def test_load_settings_partial_file_uses_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path, "partial.yaml", "default_capacity: 6\n")
    settings = load_settings(path)

    assert settings.default_capacity == 6.0
    assert settings.save is True
    assert settings.output_dir == Path("estimations")


def test_load_settings_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path, "empty.yaml", "")
    assert load_settings(path).default_capacity == 4.0


def test_load_settings_invalid_value_has_clear_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "bad.yaml", "default_capacity: 0\n")
    with pytest.raises(ValueError, match=r"- default_capacity: Input should be greater than 0"):
        load_settings(path)


def test_load_settings_unknown_key_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "extra.yaml", "colour: blue\n")
    with pytest.raises(ValueError, match="colour"):
        load_settings(path)


def test_load_settings_malformed_yaml(tmp_path: Path) -> None:
    path = _write(tmp_path, "broken.yaml", "default_capacity: [4\n")
    with pytest.raises(ValueError, match="Failed to parse YAML settings"):
        load_settings(path)


def test_load_settings_non_mapping_root(tmp_path: Path) -> None:
    path = _write(tmp_path, "list.yaml", "- 1\n- 2\n")
    with pytest.raises(ValueError, match="root must be a YAML mapping"):
        load_settings(path)


def test_load_settings_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Settings file not found"):
        load_settings(tmp_path / "nope.yaml")


def test_load_default_settings() -> None:
    settings = load_default_settings()
    assert settings.default_capacity == 4.0
    assert settings.output_dir == Path("estimations")
    assert settings.save is True
    assert settings.tool_name == "Epic Estimation Tool"
