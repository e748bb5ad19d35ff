"""Runtime settings: ``.env`` file, optional YAML config, then environment variables."""
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .errors import InputShapeError

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "MAKEDECK_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    default_author: str = "makedeck"
    font_face: str = "Arial"
    log_level: str = "WARNING"


def _load_yaml(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        LOGGER.warning("Config file %s not found, using defaults", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise InputShapeError(f"Invalid config file {config_path}: {exc}") from exc

    if not isinstance(config, dict):
        raise InputShapeError(f"Config file {config_path} must contain a mapping")
    return config


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Build ``Settings``; environment variables override the YAML file."""
    load_dotenv(find_dotenv(usecwd=True))

    values: Dict[str, Any] = {}
    if config_path is not None:
        config = _load_yaml(Path(config_path))
        for key in ("default_author", "font_face", "log_level"):
            if config.get(key):
                values[key] = str(config[key])
        unknown = set(config) - {"default_author", "font_face", "log_level"}
        if unknown:
            LOGGER.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

    env_keys = {
        "default_author": ENV_PREFIX + "DEFAULT_AUTHOR",
        "font_face": ENV_PREFIX + "FONT_FACE",
        "log_level": ENV_PREFIX + "LOGLEVEL",
    }
    for field, env_key in env_keys.items():
        value = os.getenv(env_key)
        if value:
            values[field] = value

    settings = replace(Settings(), **values)
    level = settings.log_level.upper()
    if level not in LOG_LEVELS:
        raise InputShapeError(f"Unknown log level {settings.log_level!r}; expected one of {', '.join(LOG_LEVELS)}")
    return replace(settings, log_level=level)
