"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) in the ``cpcommon.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from cpcommon.plugins.manager import PluginManager

__all__ = ["PluginManager"]
