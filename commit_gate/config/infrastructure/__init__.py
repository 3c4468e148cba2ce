"""Infrastructure layer for gate configuration."""

from commit_gate.config.infrastructure.configure_wizard import ConfigureWizard
from commit_gate.config.infrastructure.registry_builder import build_registry, build_task
from commit_gate.config.infrastructure.yaml_config_loader import (
    load_config,
    parse_config,
    write_config,
)

__all__ = [
    "ConfigureWizard",
    "build_registry",
    "build_task",
    "load_config",
    "parse_config",
    "write_config",
]
