"""
Configure wizard.
Asks the developer a few questions and writes the configuration file.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from commit_gate.config.domain.settings import DEFAULT_BIN_DIR, DEFAULT_CONFIG_FILE, GateConfig
from commit_gate.config.infrastructure.yaml_config_loader import write_config
from commit_gate.executor.domain.errors import FatalTaskError
from commit_gate.file_set.infrastructure.git_file_provider import GitFileProvider
from commit_gate.tasks.catalogue import available_tasks

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WRITE_FAILED = 2


class ConfigureWizard:
    """
    Interactive creation of the gate configuration file.

    Example:
        wizard = ConfigureWizard("commit-gate.yml")
        exit_code = wizard.execute()
    """

    def __init__(
        self,
        config_path: str | Path = DEFAULT_CONFIG_FILE,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
        interactive: bool = True,
        git_provider: GitFileProvider | None = None,
    ) -> None:
        """
        Initialize the wizard.

        Args:
            config_path: Where the configuration file is written.
            prompt: Function asking a question and returning the answer.
            echo: Function printing a line for the developer.
            interactive: When False, every question takes its default answer.
            git_provider: Provider used to guess the git directory.
        """
        self.config_path = Path(config_path)
        self.prompt = prompt
        self.echo = echo
        self.interactive = interactive
        self.git_provider = git_provider or GitFileProvider(".")
        self.defaults = GateConfig()

    def execute(self) -> int:
        """
        Run the wizard.

        Returns:
            Process exit code.
        """
        if self.config_path.exists():
            if self.interactive:
                self.echo(f"commit-gate is already configured ({self.config_path})")
            return EXIT_OK

        config = self.build_configuration()
        if config is None:
            self.echo("Skipped configuring commit-gate. Using default configuration.")
            return EXIT_OK

        try:
            write_config(config, self.config_path)
        except OSError as e:
            logger.error("Unable to write %s: %s", self.config_path, e)
            self.echo(f"The configuration file {self.config_path} could not be saved.")
            return EXIT_WRITE_FAILED

        if self.interactive:
            self.echo(f"commit-gate is configured and ready: {self.config_path}")
        return EXIT_OK

    def build_configuration(self) -> GateConfig | None:
        """
        Ask the questions and build the configuration.

        Returns:
            The new configuration, or None if the developer declined.
        """
        if not self.confirm(
            f"No {self.config_path.name} file could be found. Do you want to create one?",
            default=True,
        ):
            return None

        git_dir = self.ask(
            "In which folder is git initialized?", self.guess_git_dir(), self.validate_path
        )
        bin_dir = self.ask(
            "Where can we find the executables?", self.guess_bin_dir(), self.validate_path
        )
        tasks = self.choose_tasks("Which tasks do you want to run?", available_tasks())

        return GateConfig(git_dir=git_dir, bin_dir=bin_dir, tasks=dict.fromkeys(tasks))

    def guess_git_dir(self) -> str:
        """Guess the git directory from `git rev-parse --show-toplevel`."""
        try:
            toplevel = self.git_provider.toplevel()
        except FatalTaskError as e:
            logger.debug("Could not guess git dir: %s", e)
            return self.defaults.git_dir

        relative = os.path.relpath(toplevel, Path.cwd())
        return relative.rstrip("/") or self.defaults.git_dir

    def guess_bin_dir(self) -> str:
        """Guess where the tool executables are installed."""
        virtual_env = os.environ.get("VIRTUAL_ENV")
        if virtual_env:
            bin_dir = Path(virtual_env) / "bin"
            if bin_dir.is_dir():
                return os.path.relpath(bin_dir, Path.cwd())

        if Path(DEFAULT_BIN_DIR).is_dir():
            return DEFAULT_BIN_DIR
        return "bin"

    @staticmethod
    def validate_path(path: str) -> str:
        """
        Check that a path exists.

        Raises:
            ValueError: If the path does not exist.
        """
        if not Path(path).exists():
            raise ValueError(f"The path {path} could not be found!")
        return path

    def confirm(self, question: str, default: bool) -> bool:
        """Ask a yes/no question."""
        if not self.interactive:
            return default

        hint = "Yes" if default else "No"
        while True:
            answer = self.prompt(f"{question} [{hint}]: ").strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self.echo("Please answer yes or no.")

    def ask(self, question: str, default: str, validator: Callable[[str], str]) -> str:
        """Ask an open question until the validator accepts the answer."""
        if not self.interactive:
            return default

        while True:
            answer = self.prompt(f"{question} [{default}]: ").strip() or default
            try:
                return validator(answer)
            except ValueError as e:
                self.echo(str(e))

    def choose_tasks(self, question: str, choices: list[str]) -> list[str]:
        """Ask for a comma separated selection of tasks, by name or number."""
        if not self.interactive:
            return []

        listing = "\n".join(f"  [{i}] {name}" for i, name in enumerate(choices, start=1))
        while True:
            answer = self.prompt(f"{question}\n{listing}\n> ").strip()
            if not answer:
                return []

            selected: list[str] = []
            invalid: list[str] = []
            for item in (part.strip() for part in answer.split(",")):
                if not item:
                    continue
                if item.isdigit() and 1 <= int(item) <= len(choices):
                    item = choices[int(item) - 1]
                if item in choices:
                    if item not in selected:
                        selected.append(item)
                else:
                    invalid.append(item)

            if not invalid:
                return selected
            self.echo(f"Value(s) {', '.join(invalid)} are invalid.")
