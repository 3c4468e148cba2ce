"""
YAML configuration loader.
Reads the gate configuration file and validates it.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from commit_gate.config.domain.errors import ConfigurationError
from commit_gate.config.domain.settings import DEFAULT_CONFIG_FILE, GateConfig

logger = logging.getLogger(__name__)


def parse_config(document: Any, source: str = "<config>") -> GateConfig:
    """
    Validate a parsed configuration document.

    The settings live under a top-level `parameters` key. A document without
    that key is read as the parameters mapping itself.

    Args:
        document: Result of yaml.safe_load (None for an empty file).
        source: Name used in error messages.

    Returns:
        Validated GateConfig.

    Raises:
        ConfigurationError: If the document does not match the schema.
    """
    if document is None:
        return GateConfig()
    if not isinstance(document, dict):
        raise ConfigurationError(f"{source}: expected a mapping at the top level")

    parameters = document.get("parameters", document)
    if parameters is None:
        return GateConfig()
    if not isinstance(parameters, dict):
        raise ConfigurationError(f"{source}: 'parameters' must be a mapping")

    try:
        return GateConfig.model_validate(parameters)
    except ValidationError as e:
        raise ConfigurationError(f"{source}: invalid configuration\n{e}") from e


def load_config(path: str | Path = DEFAULT_CONFIG_FILE) -> GateConfig:
    """
    Load the gate configuration from a YAML file.

    A missing file yields the default configuration, which has no tasks.

    Args:
        path: Configuration file path.

    Returns:
        Validated GateConfig.

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated.
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.info("No configuration file at %s, using defaults", config_path)
        return GateConfig()

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Unable to read {config_path}: {e}") from e

    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{config_path}: invalid YAML: {e}") from e

    config = parse_config(document, source=str(config_path))
    logger.debug("Loaded configuration from %s with tasks %s", config_path, list(config.tasks))
    return config


def write_config(config: GateConfig, path: str | Path = DEFAULT_CONFIG_FILE) -> Path:
    """
    Write a configuration file.

    Args:
        config: Configuration to write.
        path: Target file path.

    Returns:
        The written path.

    Raises:
        OSError: If the file cannot be written.
    """
    config_path = Path(path)
    config_path.write_text(
        yaml.safe_dump(config.to_document(), sort_keys=False), encoding="utf-8"
    )
    return config_path
