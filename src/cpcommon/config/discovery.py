"""Locate ``cp-common.toml``.

The ``CPCOMMON_CONFIG`` env var names the file outright. Otherwise the
working directory and each of its ancestors are searched, nearest first.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "cp-common.toml"
CONFIG_ENV_VAR = "CPCOMMON_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies from *start* (default: cwd), or None.

    A ``CPCOMMON_CONFIG`` value that is not an existing file disables the
    search and yields None.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
