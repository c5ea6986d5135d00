"""Click command base with an ``--examples`` flag.

``cp-common lookup --examples`` prints sample invocations and exits, so
``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesOption(click.Option):
    """Eager flag that prints *examples* and exits before arguments are checked."""

    def __init__(self, examples: str) -> None:
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._show,
            help="Show usage examples.",
        )
        self.examples = examples

    def _show(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class CommonCommand(click.Command):
    """Command accepting an ``examples=`` text for its ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(ExamplesOption(examples))
