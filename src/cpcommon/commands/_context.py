"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to commands via
``@click.pass_obj``. Wires the composition root: logging, the
process-wide PropertyManager, and plugin-contributed factories.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cpcommon.output.formatters import format_result

if TYPE_CHECKING:
    from cpcommon.config.settings import CommonSettings
    from cpcommon.services.enums import EnumService
    from cpcommon.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CommonSettings, *, load_plugins: bool = True) -> None:
        self.settings = settings
        self._service: EnumService | None = None

        from cpcommon.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        from cpcommon.config.properties import PropertyManager, set_property_manager

        set_property_manager(PropertyManager.from_settings(settings))

        if load_plugins:
            from cpcommon.plugins.manager import PluginManager

            PluginManager().discover_and_load()

    @property
    def service(self) -> EnumService:
        """The EnumService (created lazily on first access)."""
        if self._service is None:
            from cpcommon.services.enums import EnumService

            self._service = EnumService()
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
