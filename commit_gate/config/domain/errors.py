"""Configuration errors."""

from commit_gate.executor.domain.errors import GateError


class ConfigurationError(GateError):
    """The gate configuration is unreadable, malformed or names unknown tasks."""
