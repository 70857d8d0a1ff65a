"""Tests for config_manager.merger layer precedence."""

import json
import os
from pathlib import Path
from types import MappingProxyType
from unittest.mock import patch

from config_manager.env_loader import dotenv_loaded
from config_manager.merger import load_json_file, merge_sources


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadJsonFile:
    """Tests for reading the JSON file layer"""

    def test_no_path_returns_empty(self, recording_logger):
        assert load_json_file(None, recording_logger) == {}
        assert recording_logger.records == []

    def test_missing_file_returns_empty_without_warning(self, tmp_path, recording_logger):
        """A missing file is not an error and is not logged"""
        assert load_json_file(tmp_path / "absent.json", recording_logger) == {}
        assert recording_logger.records == []

    def test_reads_nested_object(self, tmp_path, recording_logger):
        path = _write_json(tmp_path / "config.json", {"PORT": "5000", "NESTED": {"FLAG": "true"}})

        data = load_json_file(path, recording_logger)

        assert data == {"PORT": "5000", "NESTED": {"FLAG": "true"}}

    def test_relative_path_resolved_against_cwd(self, tmp_path, recording_logger):
        _write_json(tmp_path / "config.json", {"A": "1"})
        assert load_json_file("config.json", recording_logger) == {"A": "1"}

    def test_invalid_json_warns_and_returns_empty(self, tmp_path, recording_logger):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        assert load_json_file(path, recording_logger) == {}

        assert recording_logger.levels() == ["WARNING"]
        _, message, extra = recording_logger.records[0]
        assert "Could not parse config file" in message
        assert extra["path"] == str(path.resolve())
        assert extra["error"]

    def test_top_level_array_ignored(self, tmp_path, recording_logger):
        path = _write_json(tmp_path / "list.json", [1, 2, 3])

        assert load_json_file(path, recording_logger) == {}
        assert recording_logger.levels() == ["WARNING"]
        assert recording_logger.records[0][2]["found"] == "list"


class TestMergeSources:
    """Tests for merge precedence across layers"""

    def test_environment_overrides_file(self, tmp_path, recording_logger):
        path = _write_json(tmp_path / "config.json", {"PORT": "6000", "DB_HOST": "filehost"})
        env = {"PORT": "7000", "DB_HOST": "envhost"}

        merged = merge_sources(path, env=env, logger=recording_logger)

        assert merged["PORT"] == "7000"
        assert merged["DB_HOST"] == "envhost"

    def test_file_only_keys_retained(self, tmp_path, recording_logger):
        path = _write_json(tmp_path / "config.json", {"DB_PORT": "5678", "NESTED": {"X": 1}})

        merged = merge_sources(path, env={"PORT": "7000"}, logger=recording_logger)

        assert merged == {"DB_PORT": "5678", "NESTED": {"X": 1}, "PORT": "7000"}

    def test_invalid_json_equals_environment_only(self, tmp_path, recording_logger):
        path = tmp_path / "broken.json"
        path.write_text('{"PORT": ', encoding="utf-8")
        env = {"PORT": "7000", "DB_HOST": "envhost"}

        merged = merge_sources(path, env=env, logger=recording_logger)

        assert merged == merge_sources(None, env=env, logger=recording_logger)
        assert merged == env

    def test_precedence_defaults_file_env_overrides(self, tmp_path, recording_logger):
        path = _write_json(tmp_path / "config.json", {"A": "file", "B": "file", "C": "file"})
        defaults = {"A": "default", "B": "default", "C": "default", "D": "default"}
        env = {"B": "env", "C": "env"}
        overrides = {"C": "override"}

        merged = merge_sources(
            path, env=env, defaults=defaults, overrides=overrides, logger=recording_logger
        )

        assert merged == {"A": "file", "B": "env", "C": "override", "D": "default"}

    def test_inputs_not_mutated(self, tmp_path, recording_logger):
        path = _write_json(tmp_path / "config.json", {"A": "file"})
        defaults = {"A": "default"}
        env = MappingProxyType({"B": "env"})
        overrides = {"A": "override"}

        merged = merge_sources(
            path, env=env, defaults=defaults, overrides=overrides, logger=recording_logger
        )
        merged["NEW"] = "value"

        assert defaults == {"A": "default"}
        assert dict(env) == {"B": "env"}
        assert overrides == {"A": "override"}

    def test_each_call_builds_a_new_mapping(self, recording_logger):
        env = {"A": "1"}
        first = merge_sources(env=env, logger=recording_logger)
        second = merge_sources(env=env, logger=recording_logger)
        assert first == second
        assert first is not second

    def test_defaults_to_process_environment(self, monkeypatch, recording_logger):
        monkeypatch.setenv("CONFIG_MANAGER_TEST_VALUE", "from-env")

        merged = merge_sources(logger=recording_logger)

        assert merged["CONFIG_MANAGER_TEST_VALUE"] == "from-env"

    def test_ingests_dotenv_before_snapshot(self, isolated_cwd, recording_logger):
        """Direct merge calls see .env values from the working directory"""
        (isolated_cwd / ".env").write_text("CM_MERGE_DOTENV=fromdotenv\n")

        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("CM_MERGE_DOTENV", None)

            merged = merge_sources(logger=recording_logger)

        assert merged["CM_MERGE_DOTENV"] == "fromdotenv"
        assert dotenv_loaded() is True

    def test_explicit_env_skips_dotenv(self, isolated_cwd, recording_logger):
        (isolated_cwd / ".env").write_text("CM_MERGE_DOTENV=fromdotenv\n")

        merged = merge_sources(env={"A": "1"}, logger=recording_logger)

        assert merged == {"A": "1"}
        assert dotenv_loaded() is False
