"""
Gate configuration.

Loads and validates `commit-gate.yml`, builds the task registry from it and
provides the interactive configure wizard.
"""

from commit_gate.config.domain import (
    DEFAULT_BIN_DIR,
    DEFAULT_CONFIG_FILE,
    ConfigurationError,
    GateConfig,
    TaskConfig,
)
from commit_gate.config.infrastructure import (
    ConfigureWizard,
    build_registry,
    build_task,
    load_config,
    parse_config,
    write_config,
)

__all__ = [
    # Domain
    "GateConfig",
    "TaskConfig",
    "ConfigurationError",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_BIN_DIR",
    # Infrastructure
    "ConfigureWizard",
    "build_registry",
    "build_task",
    "load_config",
    "parse_config",
    "write_config",
]
