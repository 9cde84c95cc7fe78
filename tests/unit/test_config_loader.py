"""
Unit tests for scripts/config_loader.py.
"""

from datetime import timedelta
from pathlib import Path

import pytest

from scripts.config_loader import (
    deep_merge,
    load_default_and_local,
    load_effective_config,
    resolve_settings,
)


class TestDeepMerge:
    """Test recursive merging."""

    def test_nested_dicts_merge(self):
        base = {"leader": {"enabled": True, "text": "a"}, "x": 1}
        override = {"leader": {"text": "b"}}
        assert deep_merge(base, override) == {"leader": {"enabled": True, "text": "b"}, "x": 1}

    def test_lists_and_scalars_replace(self):
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}
        assert deep_merge({"a": {"b": 1}}, {"a": 5}) == {"a": 5}

    def test_inputs_not_mutated(self):
        base = {"a": {"b": 1}}
        deep_merge(base, {"a": {"c": 2}})
        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Test loading default and local YAML files."""

    def test_default_required(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_default_and_local(tmp_path)

    def test_local_overrides_default(self, config_dir):
        (config_dir / "config.yaml").write_text("leader:\n  enabled: false\n", encoding="utf-8")
        cfg, has_local = load_effective_config(config_dir)
        assert has_local
        assert cfg["leader"] == {"enabled": False, "text": "Subtitles loaded.", "max_seconds": 5}

    def test_without_local(self, config_dir):
        cfg, has_local = load_effective_config(config_dir)
        assert not has_local
        assert cfg["patterns_file"] == "drop-subs.txt"

    def test_non_mapping_root_rejected(self, tmp_path):
        (tmp_path / "config.default.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_default_and_local(tmp_path)

    def test_shipped_default_config_loads(self):
        root = Path(__file__).resolve().parents[2]
        cfg, _ = load_effective_config(root)
        settings = resolve_settings(cfg, root)
        assert settings.patterns_file == root / "drop-subs.txt"
        assert settings.leader_max == timedelta(seconds=5)


class TestResolveSettings:
    """Test typed settings resolution."""

    def test_defaults_for_empty_config(self, tmp_path):
        settings = resolve_settings({}, tmp_path)
        assert settings.log_level == "info"
        assert settings.patterns_file == tmp_path / "drop-subs.txt"
        assert settings.leader_enabled is True
        assert settings.leader_text == "Subtitles loaded."
        assert settings.leader_max == timedelta(seconds=5)
        assert settings.backup is False

    def test_values_from_config(self, tmp_path):
        cfg = {
            "logging": {"level": "DEBUG"},
            "patterns_file": "/etc/ads.txt",
            "leader": {"enabled": False, "text": "Hi", "max_seconds": 2.5},
            "output": {"backup": True},
        }
        settings = resolve_settings(cfg, tmp_path)
        assert settings.log_level == "debug"
        assert settings.patterns_file == Path("/etc/ads.txt")
        assert settings.leader_enabled is False
        assert settings.leader_text == "Hi"
        assert settings.leader_max == timedelta(seconds=2.5)
        assert settings.backup is True

    @pytest.mark.parametrize("value", ["soon", 0, -1])
    def test_bad_leader_limit(self, tmp_path, value):
        with pytest.raises(ValueError):
            resolve_settings({"leader": {"max_seconds": value}}, tmp_path)
