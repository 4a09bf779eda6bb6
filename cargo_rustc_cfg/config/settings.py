"""YAML settings for the cargo-rustc-cfg command-line front end.

Settings are resolved in increasing order of precedence:

1. Built-in defaults
2. The CARGO environment variable (set by Cargo for custom subcommands)
3. The settings file (``cargo-rustc-cfg.yaml`` in the current directory,
   or the file given with ``--config``)
4. Command-line options (applied by the CLI)

The library API never reads settings; callers pass everything explicitly.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from ..core.exceptions import ConfigError
from ..invoker import CARGO, CARGO_VARIABLE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "cargo-rustc-cfg.yaml"

OUTPUT_FORMATS = ["text", "json", "yaml"]


@dataclass
class Settings:
    """Resolved settings for a configuration query."""

    cargo: str = CARGO
    cargo_args: List[str] = field(default_factory=list)
    rustc_args: List[str] = field(default_factory=list)
    targets: List[str] = field(default_factory=list)
    format: str = "text"  # 'text', 'json', 'yaml'


def load_settings(
    config_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    search_dir: Optional[Path] = None,
) -> Settings:
    """
    Load settings from the environment and an optional YAML file.

    Args:
        config_file: Explicit settings file; must exist when given
        environ: Environment mapping (defaults to os.environ)
        search_dir: Directory searched for the default settings file
            (defaults to the current directory)

    Returns:
        Resolved Settings

    Raises:
        ConfigError: If the file is missing (when explicit), unreadable or invalid
    """
    if environ is None:
        environ = os.environ

    settings = Settings()
    cargo_from_env = environ.get(CARGO_VARIABLE)
    if cargo_from_env:
        logger.debug(f"Using Cargo from {CARGO_VARIABLE}: {cargo_from_env}")
        settings.cargo = cargo_from_env

    if config_file is not None:
        path = Path(config_file)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
    else:
        path = (search_dir or Path.cwd()) / DEFAULT_CONFIG_NAME
        if not path.exists():
            logger.debug(f"Config file not found (optional): {path}")
            return settings

    logger.debug(f"Loading settings from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}")

    if data is None:
        return settings
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    return apply_settings(settings, data)


def apply_settings(settings: Settings, data: Dict[str, Any]) -> Settings:
    """
    Validate a settings mapping and apply it on top of existing settings.

    Args:
        settings: Settings to update in place
        data: Parsed YAML mapping

    Returns:
        The updated settings

    Raises:
        ConfigError: On unknown keys or values of the wrong type
    """
    known = {"cargo", "cargo_args", "rustc_args", "targets", "format"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(map(str, unknown))}")

    if "cargo" in data:
        if not isinstance(data["cargo"], str) or not data["cargo"]:
            raise ConfigError("cargo must be a non-empty string")
        settings.cargo = data["cargo"]

    for key in ("cargo_args", "rustc_args", "targets"):
        if key in data:
            setattr(settings, key, _string_list(key, data[key]))

    if "format" in data:
        if data["format"] not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid format: {data['format']} (expected one of {OUTPUT_FORMATS})"
            )
        settings.format = data["format"]

    return settings


def _string_list(key: str, value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be a list of strings")
    return list(value)


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "OUTPUT_FORMATS",
    "Settings",
    "load_settings",
    "apply_settings",
]
