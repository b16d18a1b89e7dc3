"""YAML configuration file support for the command line interface.

Config file keys use the command line option names, e.g.:

    endpoint: https://example.com/graphql
    headers:
      - "Authorization: Bearer token"
    timeout: 10
    id-type: both
    nullable-array-items: true
"""

from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from gql2jsonschema import log
from gql2jsonschema.converter.models import IDTypeMapping

CONFIG_FILENAME = ".gql2jsonschema.yaml"
ENV_PREFIX = "GRAPHQL2JSON"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded or is invalid."""


class CliConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    input_path: Path | None = Field(None, alias="input")
    output: Path | None = None
    endpoint: str | None = None
    headers: list[str] | None = Field(None, validation_alias=AliasChoices("header", "headers"))
    timeout: int | None = Field(None, gt=0)
    ignore_internals: bool | None = Field(None, alias="ignore-internals")
    nullable_array_items: bool | None = Field(None, alias="nullable-array-items")
    id_type: IDTypeMapping | None = Field(None, alias="id-type")

    def to_default_map(self) -> dict[str, Any]:
        """Return the configured values keyed by command parameter name."""
        default_map: dict[str, Any] = {}
        for name, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, Path):
                value = str(value)
            elif isinstance(value, IDTypeMapping):
                value = value.value
            default_map[name] = value
        return default_map


def default_config_path() -> Path:
    return Path.home() / CONFIG_FILENAME


def load_config(config_path: Path) -> CliConfig:
    """
    Load and validate a YAML configuration file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        A validated CliConfig

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML or fails validation
    """
    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config file {config_path}: {e}") from e

    log.debug("Loaded config from %s", config_path)

    # Treat empty file or explicit YAML null as "defaults"
    if raw is None:
        return CliConfig()

    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping (YAML object), got {type(raw).__name__}")

    try:
        return CliConfig.model_validate(cast(dict[str, Any], raw))
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e


def resolve_config(config_path: Path | None) -> CliConfig | None:
    """
    Load the explicit config file, or the one in the home directory if it exists.

    Returns:
        The loaded config, or None when no config file applies
    """
    if config_path is None:
        config_path = default_config_path()
        if not config_path.is_file():
            return None

    log.debug(f"Using config file: {config_path}")
    return load_config(config_path)
