"""Unit tests for csv2xlsx CLI configuration management.

This module tests the configuration system including file discovery, loading,
key validation and priority handling.
"""

import argparse
import json
import logging
from pathlib import Path

import pytest

from csv2xlsx.cli.config import (
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    validate_config_keys,
)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test configuration file discovery functionality."""

    def test_find_in_current_directory(self, tmp_path: Path):
        """Test discovery of a dedicated config file."""
        config = tmp_path / ".csv2xlsx.toml"
        config.write_text('sheet_name = "Data"\n', encoding="utf-8")

        assert find_config_in_parents(tmp_path) == config

    def test_find_in_parent_directory(self, tmp_path: Path):
        """Test discovery walking up from a nested directory."""
        config = tmp_path / ".csv2xlsx.yaml"
        config.write_text("sheet_name: Data\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config

    def test_dedicated_file_preferred_over_pyproject(self, tmp_path: Path):
        """Test that .csv2xlsx files win over pyproject.toml in the same directory."""
        (tmp_path / "pyproject.toml").write_text('[tool.csv2xlsx]\nsheet_name = "P"\n', encoding="utf-8")
        config = tmp_path / ".csv2xlsx.json"
        config.write_text('{"sheet_name": "J"}', encoding="utf-8")

        assert find_config_in_parents(tmp_path) == config

    def test_pyproject_with_section(self, tmp_path: Path):
        """Test discovery of a pyproject.toml carrying [tool.csv2xlsx]."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n\n[tool.csv2xlsx]\nsheet_name = "P"\n', encoding="utf-8")

        assert find_config_in_parents(tmp_path) == pyproject

    def test_pyproject_without_section_is_skipped(self, tmp_path: Path):
        """Test that an unrelated pyproject.toml is not treated as config."""
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        config = tmp_path / ".csv2xlsx.toml"
        config.write_text('sheet_name = "Outer"\n', encoding="utf-8")

        assert find_config_in_parents(project) == config

    def test_home_directory_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test that the home directory is searched last."""
        home = tmp_path / "fake_home"
        home.mkdir()
        config = home / ".csv2xlsx.toml"
        config.write_text('sheet_name = "Home"\n', encoding="utf-8")
        workdir = tmp_path / "work"
        workdir.mkdir()
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
        monkeypatch.setattr("csv2xlsx.cli.config.find_config_in_parents", lambda start_dir=None: None)

        assert discover_config_file(workdir) == config


@pytest.mark.unit
@pytest.mark.cli
class TestConfigLoading:
    """Test loading each supported format."""

    def test_load_toml(self, tmp_path: Path):
        """Test TOML loading."""
        config = tmp_path / "c.toml"
        config.write_text('delimiter = ";"\ninfer_types = false\n', encoding="utf-8")

        assert load_config_file(config) == {"delimiter": ";", "infer_types": False}

    def test_load_yaml(self, tmp_path: Path):
        """Test YAML loading."""
        config = tmp_path / "c.yml"
        config.write_text("encoding: cp1252\nheader_style: false\n", encoding="utf-8")

        assert load_config_file(config) == {"encoding": "cp1252", "header_style": False}

    def test_load_empty_yaml(self, tmp_path: Path):
        """Test that an empty YAML file yields no settings."""
        config = tmp_path / "c.yaml"
        config.write_text("", encoding="utf-8")

        assert load_config_file(config) == {}

    def test_load_json(self, tmp_path: Path):
        """Test JSON loading."""
        config = tmp_path / "c.json"
        config.write_text(json.dumps({"sheet_name": "Data"}), encoding="utf-8")

        assert load_config_file(config) == {"sheet_name": "Data"}

    def test_load_pyproject_section(self, tmp_path: Path):
        """Test that only the tool section of pyproject.toml is returned."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n\n[tool.csv2xlsx]\nauto_fit_columns = false\n', encoding="utf-8")

        assert load_config_file(pyproject) == {"auto_fit_columns": False}

    @pytest.mark.parametrize(
        "name,content",
        [
            ("bad.toml", "delimiter = \n"),
            ("bad.json", "{not json"),
            ("list.json", "[1, 2]"),
            ("list.yaml", "- a\n- b\n"),
        ],
    )
    def test_invalid_content(self, tmp_path: Path, name: str, content: str):
        """Test that malformed or non-mapping configs are rejected."""
        config = tmp_path / name
        config.write_text(content, encoding="utf-8")

        with pytest.raises(argparse.ArgumentTypeError):
            load_config_file(config)

    def test_unsupported_extension(self, tmp_path: Path):
        """Test that unknown formats are rejected."""
        config = tmp_path / "c.ini"
        config.write_text("[x]\n", encoding="utf-8")

        with pytest.raises(argparse.ArgumentTypeError, match="Unsupported config file format"):
            load_config_file(config)

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing file is rejected."""
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "none.toml")

    def test_directory_path(self, tmp_path: Path):
        """Test that a directory is rejected."""
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPriority:
    """Test key validation and source priority."""

    def test_unknown_keys_dropped(self, caplog):
        """Test that unrecognized keys are removed with a warning."""
        with caplog.at_level(logging.WARNING, logger="csv2xlsx.cli.config"):
            config = validate_config_keys({"sheet_name": "Data", "colour": "red"}, source="test.toml")

        assert config == {"sheet_name": "Data"}
        assert "colour" in caplog.text

    def test_explicit_path_wins(self, tmp_path: Path):
        """Test that --config beats the environment variable."""
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"sheet_name": "Explicit"}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"sheet_name": "Env"}', encoding="utf-8")

        assert load_config_with_priority(str(explicit), str(env)) == {"sheet_name": "Explicit"}

    def test_env_path_used(self, tmp_path: Path):
        """Test that the environment path is used without --config."""
        env = tmp_path / "env.json"
        env.write_text('{"sheet_name": "Env"}', encoding="utf-8")

        assert load_config_with_priority(None, str(env)) == {"sheet_name": "Env"}

    def test_discovered_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test auto-discovery from the working directory."""
        (tmp_path / ".csv2xlsx.toml").write_text('sheet_name = "Found"\n', encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_config_with_priority() == {"sheet_name": "Found"}

    def test_nothing_found(self, monkeypatch: pytest.MonkeyPatch):
        """Test that no configuration yields an empty mapping."""
        monkeypatch.setattr("csv2xlsx.cli.config.discover_config_file", lambda start_dir=None: None)

        assert load_config_with_priority() == {}
