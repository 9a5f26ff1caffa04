"""Application configuration with YAML + env vars + CLI override support."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ParserConfig:
    workers: int = 1
    method_heading: str = "h5"
    introduction_heading: str = "h2"


@dataclass
class OutputConfig:
    format: str = "json"  # json | markdown
    indent: int = 2


@dataclass
class LoggingConfig:
    verbose: bool = False


@dataclass
class AppConfig:
    parser: ParserConfig = field(default_factory=ParserConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Mapping: env var name -> (section, field)
_ENV_MAPPING: dict[str, tuple[str, str]] = {
    "RUSTDOC_PAGE_WORKERS": ("parser", "workers"),
    "RUSTDOC_PAGE_METHOD_HEADING": ("parser", "method_heading"),
    "RUSTDOC_PAGE_INTRODUCTION_HEADING": ("parser", "introduction_heading"),
    "RUSTDOC_PAGE_FORMAT": ("output", "format"),
    "RUSTDOC_PAGE_INDENT": ("output", "indent"),
    "RUSTDOC_PAGE_VERBOSE": ("logging", "verbose"),
}


def load_config(
    config_path: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Load configuration with priority: YAML < env vars < CLI overrides.

    Args:
        config_path: Path to YAML config file. None to skip.
        cli_overrides: Dict of CLI overrides in format {"section.field": value}.
            None values are skipped (means CLI option was not provided).
    """
    config = AppConfig()

    if config_path:
        _apply_yaml(config, config_path)

    _apply_env_vars(config)

    if cli_overrides:
        _apply_overrides(config, cli_overrides)

    return config


def _apply_yaml(config: AppConfig, config_path: str) -> None:
    path = Path(config_path)
    if not path.is_file():
        logger.warning("Config file not found: %s, using defaults", config_path)
        return

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        logger.warning("Config file is not a valid YAML mapping: %s", config_path)
        return

    for section_name, section_data in data.items():
        if not isinstance(section_data, dict):
            continue
        section = getattr(config, section_name, None)
        if section is None:
            logger.debug("Unknown config section: %s", section_name)
            continue
        for key, value in section_data.items():
            if value is not None:
                _set_field_value(section, key, value)

    logger.info("Loaded config from %s", config_path)


def _apply_env_vars(config: AppConfig) -> None:
    for env_name, (section_name, field_name) in _ENV_MAPPING.items():
        value = os.environ.get(env_name)
        if value is None:
            continue
        _set_field_value(getattr(config, section_name), field_name, value)


def _apply_overrides(config: AppConfig, overrides: dict[str, Any]) -> None:
    """Apply CLI overrides in format {'section.field': value}."""
    for key, value in overrides.items():
        if value is None:
            continue
        section_name, _, field_name = key.partition(".")
        section = getattr(config, section_name, None)
        if section is None or not field_name:
            continue
        _set_field_value(section, field_name, value)


def _set_field_value(obj: Any, field_name: str, value: Any) -> None:
    """Set a field on a dataclass, coercing the value to the annotated type."""
    field_info = {f.name: f for f in fields(obj)}.get(field_name)
    if field_info is None:
        return
    setattr(obj, field_name, _coerce_value(value, field_info.type))


def _coerce_value(value: Any, type_hint: str | type | None) -> Any:
    type_str = str(type_hint) if type_hint else ""

    if "bool" in type_str:
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    if "int" in type_str:
        return int(value)

    return value
