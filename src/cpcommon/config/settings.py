"""Unified settings — init kwargs, env vars, and TOML config in one object.

Sources, highest priority first:

  1. Init kwargs  — CLI flags or explicit overrides
  2. Env vars     — ``CPCOMMON_*`` prefix
  3. TOML file    — ``cp-common.toml`` discovered via walk-up
  4. Code defaults

The ``[properties]`` TOML table is the key/value store consulted by
factory resolution (see :mod:`cpcommon.config.properties`)::

    [properties]
    "cpcommon.enums.Gender.factory" = "sequential"
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from cpcommon.config.discovery import find_config
from cpcommon.errors import ConfigurationError

# TOML file for the CommonSettings currently being constructed by load().
_active_toml: ContextVar[Path | None] = ContextVar("cpcommon_active_toml", default=None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigurationError: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigurationError(msg) from exc


class CommonTomlSource(PydanticBaseSettingsSource):
    """Settings source backed by the parsed top level of a TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self.path = path
        self.values: dict[str, Any] = read_toml(path) if path and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.values.get(field_name), field_name, field_name in self.values

    def __call__(self) -> dict[str, Any]:
        known = self.settings_cls.model_fields
        return {name: value for name, value in self.values.items() if name in known}


class CommonSettings(BaseSettings):
    """Settings for cp-common, frozen after construction.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        json_output: Emit ServiceResults as JSON.
        verbose: DEBUG logging for the ``cpcommon`` logger.
        log_json: Render log records as JSON lines.
        properties: Flat string key/value pairs (the ``[properties]`` table).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CPCOMMON_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    properties: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs, then env vars, then the active TOML file."""
        return (
            init_settings,
            env_settings,
            CommonTomlSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> CommonSettings:
        """Construct settings, discovering ``cp-common.toml`` unless *config_path* is given.

        Raises:
            ConfigurationError: If an explicit *config_path* does not exist, or
                the TOML, env vars or overrides do not validate.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file {toml_path} does not exist"
                raise ConfigurationError(msg)
        else:
            toml_path = find_config(start)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            msg = f"Invalid settings (config file: {toml_path}): {exc}"
            raise ConfigurationError(msg) from exc
        finally:
            _active_toml.reset(token)
