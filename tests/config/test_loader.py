from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from specledger.config.loader import load_config
from specledger.config.models import ReporterConfig


def _write_yaml(path: Path, data: object) -> None:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def test_load_config_from_dir_resolves_paths(tmp_path: Path) -> None:
    _write_yaml(
        tmp_path / "specledger.yaml",
        {
            "global": {"root_dir": ".", "no_stack_trace": True, "output_dir": "out"},
            "project": {"root_dir": "pkg", "stack_trace_ignore_patterns": ["node_modules"]},
        },
    )

    config = load_config(tmp_path)

    assert config.global_config.no_stack_trace is True
    assert config.global_config.root_dir == str(tmp_path.resolve())
    assert config.global_config.output_dir == str((tmp_path / "out").resolve())
    assert config.project.root_dir == str((tmp_path / "pkg").resolve())
    assert config.project.stack_trace_ignore_patterns == ["node_modules"]


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("", encoding="utf-8")

    config = load_config(config_path)

    assert config == ReporterConfig()
    assert config.global_config.no_stack_trace is False


def test_load_config_rejects_unknown_keys(tmp_path: Path) -> None:
    _write_yaml(tmp_path / "specledger.yaml", {"global": {"colors": True}})

    with pytest.raises(ValueError):
        load_config(tmp_path)


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    _write_yaml(tmp_path / "specledger.yaml", ["global"])

    with pytest.raises(ValueError, match="Expected a YAML mapping"):
        load_config(tmp_path)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_config_is_immutable() -> None:
    config = ReporterConfig()

    with pytest.raises(ValueError):
        config.global_config.no_stack_trace = True  # type: ignore[misc]
