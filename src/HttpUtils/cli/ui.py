"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from HttpUtils.cli.commands import CaseCommand, QueryCommand, RequestCommand
from HttpUtils.cli.runner import CommandRunner
from HttpUtils.config import load_config_with_defaults


@click.group(help="HttpUtils: JSON requests and query strings from the terminal.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Path to YAML config file merged over the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config,
    so header values can be read with ``value_env``.
    """
    load_dotenv()
    ctx.obj = CommandRunner(load_config_with_defaults(config_path))


@cli.command("request")
@click.argument("method")
@click.argument("url")
@click.option("--data", "-d", default=None, help="JSON request body.")
@click.option("--header", "-H", "headers", multiple=True, help="Extra header as 'Name: value'.")
@click.pass_context
def request_cmd(ctx: click.Context, method: str, url: str, data: str | None, headers: tuple[str, ...]) -> None:
    """Send METHOD to URL and print the status line and body."""
    runner: CommandRunner = ctx.obj
    command = RequestCommand(config=runner.config, method=method, url=url, data=data, headers=headers)
    click.echo(runner.run(command, action=ctx.command.name))


@cli.command("query")
@click.argument("params", nargs=-1)
@click.pass_context
def query_cmd(ctx: click.Context, params: tuple[str, ...]) -> None:
    """Print the query string for PARAMS given as name[:kind]=value.

    KIND is one of str, list, int32, int64, bigint, bool.
    """
    runner: CommandRunner = ctx.obj
    click.echo(runner.run(QueryCommand(config=runner.config, params=params), action=ctx.command.name))


@cli.command("case")
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def case_cmd(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Print the query parameter key for each CamelCase NAME."""
    runner: CommandRunner = ctx.obj
    click.echo(runner.run(CaseCommand(names=names), action=ctx.command.name))
