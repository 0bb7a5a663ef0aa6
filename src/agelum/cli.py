"""Root CLI group for agelum with global flags and command registration."""

from __future__ import annotations

import click

from agelum import __version__
from agelum.commands import register_commands
from agelum.commands._context import AppContext
from agelum.config.settings import AgelumSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="agelum")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting path.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and error codes.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--root-hint",
    default=None,
    help="Fallback repository root when no .git is found above the working directory.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    root_hint: str | None,
) -> None:
    """agelum: manage tasks, plans, and docs under <repo>/agelum."""
    ctx.ensure_object(dict)
    settings = AgelumSettings.from_cli(
        config_path=config_path,
        root_hint=root_hint,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
