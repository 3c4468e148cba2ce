"""Tests for YAML configuration loading."""

from pathlib import Path

import pytest
import yaml

from commit_gate.config import (
    ConfigurationError,
    GateConfig,
    TaskConfig,
    load_config,
    parse_config,
    write_config,
)


class TestParseConfig:
    """Test validation of parsed documents."""

    def test_empty_document_gives_defaults(self) -> None:
        """Test that an empty file is the default configuration."""
        config = parse_config(None)

        assert config == GateConfig()
        assert config.tasks == {}
        assert config.git_dir == "."
        assert config.bin_dir == ".venv/bin"
        assert not config.parallel

    def test_parameters_key(self) -> None:
        """Test reading settings under the `parameters` key."""
        config = parse_config(
            {
                "parameters": {
                    "git_dir": ".",
                    "bin_dir": "bin",
                    "tasks": {"ruff": None, "pytest": {"args": ["-x"]}},
                }
            }
        )

        assert config.bin_dir == "bin"
        assert list(config.tasks) == ["ruff", "pytest"]
        assert config.task_config("ruff") == TaskConfig()
        assert config.task_config("pytest").args == ["-x"]

    def test_bare_parameters_mapping(self) -> None:
        """Test that the `parameters` key is optional."""
        config = parse_config({"parallel": True, "max_workers": 2})

        assert config.parallel
        assert config.max_workers == 2

    @pytest.mark.parametrize(
        "document, match",
        [
            (["ruff"], "expected a mapping"),
            ({"parameters": ["ruff"]}, "'parameters' must be a mapping"),
            ({"max_workers": 0}, "invalid configuration"),
            ({"unknown_option": 1}, "invalid configuration"),
            ({"tasks": {"ruff": {"timeout": -1}}}, "invalid configuration"),
            ({"tasks": {"ruff": {"command": []}}}, "invalid configuration"),
        ],
    )
    def test_invalid_documents(self, document: object, match: str) -> None:
        """Test that schema violations raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match=match):
            parse_config(document)


class TestLoadConfig:
    """Test reading configuration files."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test that a missing file is not an error."""
        assert load_config(tmp_path / "commit-gate.yml") == GateConfig()

    def test_load_file(self, tmp_path: Path) -> None:
        """Test loading a YAML file."""
        path = tmp_path / "commit-gate.yml"
        path.write_text(
            "parameters:\n"
            "  bin_dir: bin\n"
            "  task_timeout: 30\n"
            "  tasks:\n"
            "    ruff: ~\n"
            "    mypy:\n"
            "      exclude: ['migrations/*']\n"
        )

        config = load_config(path)

        assert config.task_timeout == 30
        assert config.task_config("mypy").exclude == ["migrations/*"]

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that unparsable YAML raises ConfigurationError."""
        path = tmp_path / "commit-gate.yml"
        path.write_text("parameters: [unclosed\n")

        with pytest.raises(ConfigurationError, match="invalid YAML"):
            load_config(path)

    def test_write_config(self, tmp_path: Path) -> None:
        """Test the written document layout."""
        path = tmp_path / "commit-gate.yml"
        config = GateConfig(
            git_dir=".",
            bin_dir="bin",
            tasks={"ruff": None, "pytest": TaskConfig(args=["-x"])},
        )

        write_config(config, path)

        document = yaml.safe_load(path.read_text())
        assert document == {
            "parameters": {
                "git_dir": ".",
                "bin_dir": "bin",
                "tasks": {"ruff": None, "pytest": {"args": ["-x"]}},
            }
        }
        assert load_config(path) == config
