from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from dlconv.models.document import DEFAULT_COMMENT, DEFAULT_CREATED, DEFAULT_TAGS
from dlconv.render.markdown import OUTPUT_FILE

"""Config loader.

Responsibilities:
- Load the optional YAML config (default config/dlconv.yml)
- Validate it against the bundled JSON schema (config_schema.json)
- Apply defaults for every missing key

The row-block layout of the export is not configurable; see
dlconv.extract.layout.
"""

__all__ = [
    "ConfigError",
    "ConvertConfig",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_ENV_VAR",
    "SCHEMA_PATH",
    "load_config",
    "resolve_config_path",
]

DEFAULT_CONFIG_PATH = Path("config/dlconv.yml")
CONFIG_ENV_VAR = "DLCONV_CONFIG"
SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_TITLE = "Dive Log"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ConvertConfig:
    title: str = DEFAULT_TITLE
    output_file: str = OUTPUT_FILE
    created: str = DEFAULT_CREATED
    comment: str = DEFAULT_COMMENT
    tags: tuple[str, ...] = DEFAULT_TAGS

    @property
    def output_path(self) -> Path:
        return Path(self.output_file)


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: the schema file is missing or invalid, or the data
            violates the schema (unknown keys, wrong types)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def resolve_config_path(explicit: str | None = None) -> tuple[Path, bool]:
    """Pick the config file: --config, then $DLCONV_CONFIG, then the default.

    Returns:
        (path, required) where required is False only for the default path
    """
    if explicit:
        return Path(explicit), True
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env), True
    return DEFAULT_CONFIG_PATH, False


def load_config(path: Path = DEFAULT_CONFIG_PATH, *, required: bool = False) -> ConvertConfig:
    if not path.exists():
        if required:
            raise ConfigError(f"config file not found: {path}")
        return ConvertConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    defaults = ConvertConfig()
    return ConvertConfig(
        title=data.get("title", defaults.title),
        output_file=data.get("output_file", defaults.output_file),
        created=data.get("created", defaults.created),
        comment=data.get("comment", defaults.comment),
        tags=tuple(data.get("tags", defaults.tags)),
    )
