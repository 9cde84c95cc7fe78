from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from srtscrub.leader import DEFAULT_LEADER_MAX, DEFAULT_LEADER_TEXT

DEFAULT_CONFIG_NAME = "config.default.yaml"
LOCAL_CONFIG_NAME = "config.yaml"


def _read_yaml_dict(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping: {path}")
    return data


def deep_merge(base: Any, override: Any) -> Any:
    """Merge override onto base.

    - dicts merge recursively
    - lists are replaced whole
    - scalars override
    """
    if not (isinstance(base, dict) and isinstance(override, dict)):
        return override
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        merged[key] = deep_merge(base[key], value) if key in base else value
    return merged


def load_default_and_local(
    base_dir: Path,
    default_name: str = DEFAULT_CONFIG_NAME,
    local_name: str = LOCAL_CONFIG_NAME,
) -> Tuple[Dict[str, Any], Dict[str, Any], bool]:
    default_path = base_dir / default_name
    if not default_path.exists():
        raise FileNotFoundError(f"Missing required config: {default_path}")
    default_cfg = _read_yaml_dict(default_path)

    local_path = base_dir / local_name
    if not local_path.exists():
        return default_cfg, {}, False
    return default_cfg, _read_yaml_dict(local_path), True


def load_effective_config(
    base_dir: Path,
    default_name: str = DEFAULT_CONFIG_NAME,
    local_name: str = LOCAL_CONFIG_NAME,
) -> Tuple[Dict[str, Any], bool]:
    default_cfg, local_cfg, has_local = load_default_and_local(
        base_dir, default_name=default_name, local_name=local_name
    )
    return deep_merge(default_cfg, local_cfg), has_local


@dataclass
class PipelineSettings:
    """Effective options for one run, after config merge."""

    log_level: str = "info"
    patterns_file: Path = Path("drop-subs.txt")
    leader_enabled: bool = True
    leader_text: str = DEFAULT_LEADER_TEXT
    leader_max: timedelta = DEFAULT_LEADER_MAX
    backup: bool = False


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name)
    return value if isinstance(value, dict) else {}


def resolve_settings(cfg: Dict[str, Any], base_dir: Path) -> PipelineSettings:
    """Turn a merged config mapping into typed settings.

    Relative ``patterns_file`` paths are resolved against ``base_dir``.
    """
    settings = PipelineSettings()

    level = _section(cfg, "logging").get("level")
    if isinstance(level, str) and level.strip():
        settings.log_level = level.strip().lower()

    patterns_file = cfg.get("patterns_file")
    if isinstance(patterns_file, str) and patterns_file.strip():
        settings.patterns_file = Path(patterns_file.strip())
    if not settings.patterns_file.is_absolute():
        settings.patterns_file = base_dir / settings.patterns_file

    leader = _section(cfg, "leader")
    if "enabled" in leader:
        settings.leader_enabled = bool(leader["enabled"])
    text = leader.get("text")
    if isinstance(text, str) and text.strip():
        settings.leader_text = text
    max_seconds = leader.get("max_seconds")
    if max_seconds is not None:
        try:
            seconds = float(max_seconds)
        except (TypeError, ValueError):
            raise ValueError(f"leader.max_seconds must be a number, got {max_seconds!r}") from None
        if seconds <= 0:
            raise ValueError("leader.max_seconds must be positive")
        settings.leader_max = timedelta(seconds=seconds)

    settings.backup = bool(_section(cfg, "output").get("backup", False))
    return settings
