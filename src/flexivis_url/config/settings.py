"""Settings for the CLI: flags over ``FLEXIVIS_URL_*`` env vars over ``flexivis.toml``.

The TOML file is the one given with ``--config``, else ``FLEXIVIS_URL_CONFIG``,
else the first ``flexivis.toml`` found walking up from the working directory.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsError,
    TomlConfigSettingsSource,
)

from flexivis_url.config.models import OutputConfig, ServiceConfig

CONFIG_FILENAME = "flexivis.toml"
CONFIG_ENV_VAR = "FLEXIVIS_URL_CONFIG"

_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


def find_config(start: Path | None = None) -> Path | None:
    """The config file named by ``FLEXIVIS_URL_CONFIG``, or the nearest ``flexivis.toml``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        if (directory / CONFIG_FILENAME).is_file():
            return directory / CONFIG_FILENAME
    return None


class FlexivisSettings(BaseSettings):
    model_config = {
        "frozen": True,
        "env_prefix": "FLEXIVIS_URL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_file = _toml_file.get()
        if toml_file is None:
            return init_settings, env_settings
        return init_settings, env_settings, TomlConfigSettingsSource(settings_cls, toml_file)

    @classmethod
    def from_cli(
        cls, *, config_path: Path | str | None = None, start: Path | None = None, **flags: Any
    ) -> FlexivisSettings:
        """Resolve the config file, then merge *flags* as the highest-priority source.

        Raises:
            click.ClickException: If the config file is not valid TOML.
        """
        toml_file = Path(config_path) if config_path else find_config(start)
        if toml_file is not None and not toml_file.is_file():
            toml_file = None
        token = _toml_file.set(toml_file)
        try:
            return cls(config_path=toml_file, **flags)
        except (tomllib.TOMLDecodeError, SettingsError) as exc:
            msg = f"Invalid TOML in {toml_file}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_file.reset(token)
