"""Tests for loading scheduler.yaml (config.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from priority_scheduler.config import CONFIG_FILE, SchedulerConfig, load_scheduler_config


class TestLoadSchedulerConfig:
    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        config, err = load_scheduler_config(tmp_path / CONFIG_FILE)
        assert err is None
        assert config == SchedulerConfig()
        assert config.log_level == "INFO"
        assert config.strict_cycles is False
        assert config.show_dependencies is True

    def test_default_path_is_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILE).write_text("strict_cycles: true\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        config, err = load_scheduler_config()
        assert err is None
        assert config.strict_cycles is True

    def test_values_are_read(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("log_level: debug\nshow_dependencies: false\n", encoding="utf-8")
        config, err = load_scheduler_config(path)
        assert err is None
        assert config.log_level == "DEBUG"
        assert config.show_dependencies is False

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILE
        path.write_text("", encoding="utf-8")
        config, err = load_scheduler_config(path)
        assert err is None
        assert config == SchedulerConfig()

    def test_invalid_yaml_reports_error(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILE
        path.write_text("log_level: [unclosed\n", encoding="utf-8")
        config, err = load_scheduler_config(path)
        assert err is not None
        assert config == SchedulerConfig()

    def test_non_mapping_reports_error(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILE
        path.write_text("- a\n- b\n", encoding="utf-8")
        _, err = load_scheduler_config(path)
        assert err is not None
        assert "mapping" in err

    def test_invalid_log_level_reports_error(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILE
        path.write_text("log_level: LOUD\n", encoding="utf-8")
        config, err = load_scheduler_config(path)
        assert err is not None
        assert config.log_level == "INFO"
