from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import ReporterConfig

CONFIG_FILENAME = "specledger.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def _resolve_dir(section: dict[str, Any], key: str, base_dir: Path) -> None:
    value = section.get(key)
    if isinstance(value, str) and not Path(value).is_absolute():
        section[key] = str((base_dir / value).resolve())


def load_config(path: Path) -> ReporterConfig:
    """Load reporter settings with directories resolved relative to the file."""
    config_path = path
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILENAME
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    data = _load_yaml(config_path)
    base_dir = config_path.parent

    global_section = data.get("global")
    if isinstance(global_section, dict):
        _resolve_dir(global_section, "root_dir", base_dir)
        _resolve_dir(global_section, "output_dir", base_dir)
    project_section = data.get("project")
    if isinstance(project_section, dict):
        _resolve_dir(project_section, "root_dir", base_dir)
    return ReporterConfig.model_validate(data)
