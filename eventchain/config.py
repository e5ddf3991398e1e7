"""Dispatch configuration with optional config.ini overrides."""

from __future__ import annotations

import configparser
import enum
import logging
import os
from typing import Any

CONFIG_SECTION = "EVENTCHAIN"


class Config:
    """Base configuration."""

    LOG_LISTENER_FAILURES = True
    LOG_TRACEBACKS = False
    INCLUDE_EXCEPTION_TYPE = False
    LOG_DISPATCH = False


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_TRACEBACKS = True
    LOG_DISPATCH = True


class ProductionConfig(Config):
    """Production configuration."""

    INCLUDE_EXCEPTION_TYPE = True


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LISTENER_FAILURES = False


class ConfigType(enum.Enum):
    DEVELOPMENT = DevelopmentConfig
    PRODUCTION = ProductionConfig
    TESTING = TestingConfig


def convert_value(val: Any) -> Any:
    """Convert a string to bool/int/float if applicable, otherwise return as-is."""
    if not isinstance(val, str):
        return val

    val_lower = val.lower()
    if val_lower in ("true", "yes", "on"):
        return True
    if val_lower in ("false", "no", "off"):
        return False

    # Try numeric conversion: integer first, then float
    stripped = val.lstrip("-")
    if stripped.isdigit():
        return int(val)
    if stripped.replace(".", "", 1).isdigit():
        return float(val)

    return val


def load_config(config_file_path: str, base: type[Config] = Config) -> type[Config]:
    """Build a config class from the [EVENTCHAIN] section of an ini file.

    Keys are matched case-insensitively against the attributes of ``base``;
    unknown keys are ignored with a warning. A missing file or section
    returns ``base`` unchanged.

    Args:
        config_file_path: Path to the ini file.
        base: Config class providing the defaults.

    Returns:
        A subclass of ``base`` with the overrides applied, or ``base`` itself.
    """
    if not os.path.exists(config_file_path):
        logging.debug(f"No config file at {config_file_path}, using {base.__name__}")
        return base

    parser = configparser.ConfigParser()
    parser.read(config_file_path, encoding="utf-8")
    if not parser.has_section(CONFIG_SECTION):
        return base

    overrides = {}
    for key, raw in parser.items(CONFIG_SECTION):
        attr = key.upper()
        if not hasattr(base, attr):
            logging.warning(f"Ignoring unknown config option << {key} >> in {config_file_path}")
            continue
        overrides[attr] = convert_value(raw)

    logging.debug(f"Loaded config overrides from {config_file_path}: {overrides}")
    return type(f"Loaded{base.__name__}", (base,), overrides)
