"""CLI package for HttpUtils command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from HttpUtils.cli.runner import CommandRunner
from HttpUtils.cli.ui import cli


def main() -> None:
    """Run the HttpUtils CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
