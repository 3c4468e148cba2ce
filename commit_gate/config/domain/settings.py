"""
Gate configuration models.
Validated with pydantic after the YAML document is parsed.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIG_FILE = "commit-gate.yml"
DEFAULT_BIN_DIR = ".venv/bin"


class TaskConfig(BaseModel):
    """
    Per-task configuration.

    Every field is optional; unset fields fall back to the catalogue preset
    for the task name.
    """

    model_config = ConfigDict(extra="forbid")

    command: list[str] | None = Field(
        default=None,
        description="Executable and fixed arguments, overrides the preset",
        examples=[["ruff", "check"]],
    )
    args: list[str] = Field(default_factory=list, description="Extra arguments")
    extensions: list[str] | None = Field(
        default=None, description="File extensions to check", examples=[[".py"]]
    )
    include: list[str] = Field(default_factory=list, description="Glob patterns to include")
    exclude: list[str] = Field(default_factory=list, description="Glob patterns to exclude")
    run_on_empty: bool | None = Field(
        default=None, description="Run even when no file matches"
    )
    pass_files: bool | None = Field(
        default=None, description="Append the matching paths to the command line"
    )
    timeout: float | None = Field(default=None, gt=0, description="Timeout in seconds")

    @field_validator("command")
    @classmethod
    def _command_not_empty(cls, value: list[str] | None) -> list[str] | None:
        if value is not None and not value:
            raise ValueError("command must not be empty")
        return value


class GateConfig(BaseModel):
    """
    Top-level gate configuration.

    Attributes:
        git_dir: Directory where git is initialized.
        bin_dir: Directory searched for tool executables before PATH.
        parallel: Run tasks concurrently instead of sequentially.
        max_workers: Maximum number of concurrent tasks.
        task_timeout: Per-task timeout for the concurrent runner.
        tasks: Task name to task configuration, in execution order.
    """

    model_config = ConfigDict(extra="forbid")

    git_dir: str = "."
    bin_dir: str = DEFAULT_BIN_DIR
    parallel: bool = False
    max_workers: int = Field(default=4, ge=1)
    task_timeout: float | None = Field(default=None, gt=0)
    tasks: dict[str, TaskConfig | None] = Field(default_factory=dict)

    def task_config(self, name: str) -> TaskConfig:
        """Get the configuration of a task, defaults when it was left empty."""
        return self.tasks.get(name) or TaskConfig()

    def to_document(self) -> dict[str, object]:
        """Build the YAML document written by the configure command."""
        parameters = self.model_dump(exclude_defaults=True, exclude={"tasks"})
        parameters["git_dir"] = self.git_dir
        parameters["bin_dir"] = self.bin_dir
        parameters["tasks"] = {
            name: (config.model_dump(exclude_defaults=True) or None) if config else None
            for name, config in self.tasks.items()
        }
        return {"parameters": parameters}
