"""Commands: inspect classifications and their constants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cpcommon.commands._base import CommonCommand
from cpcommon.enums.lookup import LOOKUP_STRATEGIES
from cpcommon.enums.ordering import SORT_KEYS

if TYPE_CHECKING:
    from cpcommon.commands._context import AppContext


@click.command(
    cls=CommonCommand,
    examples="""\
  cp-common classifications
  cp-common --json classifications""",
)
@click.pass_obj
def classifications(app: AppContext) -> None:
    """List the available classifications."""
    app.emit(app.service.list_classifications())


@click.command(
    "list",
    cls=CommonCommand,
    examples="""\
  cp-common list Gender
  cp-common list continent --sort code
  cp-common --json list MaritalStatus""",
)
@click.argument("name")
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(sorted(SORT_KEYS)),
    default="sequence",
    help="Field to sort by.",
)
@click.pass_obj
def list_cmd(app: AppContext, name: str, sort_by: str) -> None:
    """List every constant of classification NAME."""
    app.emit(app.service.list_constants(name, sort_by=sort_by))


@click.command(
    cls=CommonCommand,
    examples="""\
  cp-common lookup Gender male
  cp-common lookup Gender 1 --by id
  cp-common lookup Race W --by external-code""",
)
@click.argument("name")
@click.argument("value")
@click.option(
    "--by",
    type=click.Choice(sorted(LOOKUP_STRATEGIES)),
    default="code",
    help="Field to match VALUE against.",
)
@click.pass_obj
def lookup(app: AppContext, name: str, value: str, by: str) -> None:
    """Find the constant of classification NAME whose field equals VALUE."""
    app.emit(app.service.lookup(name, value, by=by))


@click.command(
    cls=CommonCommand,
    examples="""\
  cp-common convert Gender M
  cp-common convert Gender 0
  cp-common convert Continent EU""",
)
@click.argument("name")
@click.argument("value")
@click.pass_obj
def convert(app: AppContext, name: str, value: str) -> None:
    """Convert VALUE (id, code or external code) into a constant of NAME."""
    app.emit(app.service.convert(name, value))
