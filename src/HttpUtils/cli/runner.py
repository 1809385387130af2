"""Command runner for coordinating CLI execution.

Configures logging per command and turns command failures into
``click.Abort`` at the CLI boundary.
"""

from __future__ import annotations

from typing import Protocol

import click

from HttpUtils.config import AppConfig
from HttpUtils.utils.log import configure_logging, log


class Command(Protocol):
    def execute(self) -> str: ...


class CommandRunner:
    """Runs one command with logging configured from the app config."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run(self, command: Command, *, action: str) -> str:
        """Execute ``command`` and return its output text.

        Args:
            command: Command object to execute.
            action: The CLI command name (e.g. ``request``), used for log files.

        Raises:
            click.Abort: When the command fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            return command.execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e
