"""Subcommand modules for cp-common.

Provides register_commands() which uses deferred imports to keep
``cp-common --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from cpcommon.commands.enums import classifications, convert, list_cmd, lookup

    cli.add_command(classifications)
    cli.add_command(list_cmd)
    cli.add_command(lookup)
    cli.add_command(convert)
