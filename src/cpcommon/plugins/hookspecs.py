"""Pluggy hook specifications for cp-common.

One setup-time hook lets plugins contribute classification factories
under short names that configuration can refer to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from cpcommon.enums.factory import ClassificationFactory

PROJECT_NAME = "cpcommon"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class CommonHookSpec:
    """Hook specifications for the cp-common plugin system."""

    @hookspec
    def register_enum_factories(self) -> dict[str, type[ClassificationFactory]] | None:
        """Return name -> ClassificationFactory mappings to extend FACTORY_REGISTRY."""
