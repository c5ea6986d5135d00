"""Root CLI group for cp-common with global flags and command registration."""

from __future__ import annotations

import click

from cpcommon import __version__
from cpcommon.commands import register_commands
from cpcommon.commands._context import AppContext
from cpcommon.config.settings import CommonSettings
from cpcommon.errors import ConfigurationError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="cp-common")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """cp-common — inspect typed-constant classifications."""
    try:
        settings = CommonSettings.load(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
