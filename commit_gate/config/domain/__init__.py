"""Domain layer for gate configuration."""

from commit_gate.config.domain.errors import ConfigurationError
from commit_gate.config.domain.settings import (
    DEFAULT_BIN_DIR,
    DEFAULT_CONFIG_FILE,
    GateConfig,
    TaskConfig,
)

__all__ = [
    "ConfigurationError",
    "GateConfig",
    "TaskConfig",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_BIN_DIR",
]
