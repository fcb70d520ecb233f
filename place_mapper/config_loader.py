"""
Configuration loader for the place mapper.

This module reads mapper settings from `config/mapper.yml`. The CLI and any
service embedding the mapper should use this helper so the decode policy is
chosen in one place.

Environment variables:
    PLACE_MAPPER_CONFIG: Path to the YAML file (overrides the default location)
    PLACE_MAPPER_DECODE_POLICY: Decode policy, overrides the file's value
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .mapper import DecodePolicy

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "PLACE_MAPPER_CONFIG"
DECODE_POLICY_ENV = "PLACE_MAPPER_DECODE_POLICY"


@dataclass
class MapperConfig:
    """Settings for decoding place payloads."""

    decode_policy: DecodePolicy = DecodePolicy.FALSY

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "MapperConfig":
        """Create MapperConfig from the `mapper` section of the YAML file."""
        return cls(decode_policy=_parse_policy(config_dict.get("decode_policy", DecodePolicy.FALSY.value)))


def _project_root() -> Path:
    """Return the project root path based on this file's location."""
    return Path(__file__).resolve().parent.parent


def _parse_policy(value: Any) -> DecodePolicy:
    if not isinstance(value, str):
        raise ValueError(f"`decode_policy` must be a string, got {type(value).__name__}")
    try:
        return DecodePolicy(value.strip().lower())
    except ValueError as exc:
        valid = ", ".join(p.value for p in DecodePolicy)
        raise ValueError(f"Invalid decode_policy '{value}' (expected one of: {valid})") from exc


def load_mapper_config(config_path: str | None = None) -> MapperConfig:
    """
    Load mapper configuration from YAML file.

    Args:
        config_path: Optional override for the config file path. When omitted,
            PLACE_MAPPER_CONFIG is used, then `config/mapper.yml` relative to
            the project root. A missing default file yields the defaults.

    Returns:
        MapperConfig with the decode policy to use.

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist.
        ValueError: If the YAML cannot be parsed or holds invalid values.
    """
    explicit = config_path or os.getenv(CONFIG_PATH_ENV)
    path = Path(explicit) if explicit else _project_root() / "config" / "mapper.yml"

    if not path.exists():
        if explicit:
            logger.error("Mapper configuration file not found: %s", path)
            raise FileNotFoundError(f"Mapper configuration file not found: {path}")
        logger.debug("No mapper configuration at %s, using defaults", path)
        raw_config: Mapping[str, Any] | None = None
    else:
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw_config = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            logger.error("Failed to parse mapper configuration: %s", exc)
            raise ValueError(f"Invalid YAML in mapper configuration: {exc}") from exc

        if not raw_config:
            logger.warning("Mapper configuration file is empty: %s", path)

    if raw_config and not isinstance(raw_config, Mapping):
        raise ValueError("Mapper configuration must be a mapping")

    section = (raw_config or {}).get("mapper", {})
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise ValueError("`mapper` section is invalid in mapper configuration")

    config = MapperConfig.from_dict(section)

    env_policy = os.getenv(DECODE_POLICY_ENV)
    if env_policy:
        config.decode_policy = _parse_policy(env_policy)

    logger.info(
        "Loaded mapper configuration",
        extra={
            "config_path": str(path),
            "decode_policy": config.decode_policy.value,
        },
    )
    return config


__all__ = ["MapperConfig", "load_mapper_config"]
