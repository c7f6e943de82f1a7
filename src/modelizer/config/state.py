"""
Unified configuration state management.

This module provides a single source of truth for modelizer configuration,
combining YAML files with environment overrides, type validation, and
sensible defaults. Components never read it directly: the composition root
turns it into value objects (HttpClientConfig, DecoderConfig).
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from modelizer.decoding.config.value_objects import DecoderConfig, HttpClientConfig

logger = logging.getLogger(__name__)


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class HttpSettings(BaseModel):
    """HTTP client settings."""

    model_config = ConfigDict(extra="allow")

    timeout: float = Field(default=30.0, gt=0)
    connect_timeout: float = Field(default=10.0, gt=0)
    verify_ssl: bool = Field(default=True)
    default_headers: dict[str, str] = Field(
        default_factory=lambda: {"Accept": "application/json"}
    )


class DecoderSettings(BaseModel):
    """Body decoding settings."""

    model_config = ConfigDict(extra="allow")

    allow_fragments: bool = Field(default=True)
    encoding: str = Field(default="utf-8")
    acceptable_status: tuple[int, int] | None = Field(default=None)

    @field_validator("acceptable_status")
    @classmethod
    def validate_status_range(cls, v):
        """Range must be two HTTP status codes, low first"""
        if v is None:
            return v
        low, high = v
        if not (100 <= low <= high <= 599):
            raise ValueError(f"acceptable_status must be within 100..599, got {v}")
        return v


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="allow")

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)
    include_timestamp: bool = Field(default=True)

    @field_validator("level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()


class ConfigState(BaseModel):
    """
    Root configuration state - single source of truth for all app config.
    """

    model_config = ConfigDict(extra="allow")

    http: HttpSettings = Field(default_factory=HttpSettings)
    decoder: DecoderSettings = Field(default_factory=DecoderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    env: str = Field(default="dev")
    config_dir: str = Field(default="config")

    def to_http_config(self) -> HttpClientConfig:
        return HttpClientConfig(
            timeout=self.http.timeout,
            connect_timeout=self.http.connect_timeout,
            verify_ssl=self.http.verify_ssl,
            default_headers=dict(self.http.default_headers),
        )

    def to_decoder_config(self) -> DecoderConfig:
        return DecoderConfig(
            allow_fragments=self.decoder.allow_fragments,
            encoding=self.decoder.encoding,
            acceptable_status=self.decoder.acceptable_status,
        )


# =============================================================================
# CONFIG LOADER - Clean, Validated Loading
# =============================================================================


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class ConfigLoader:
    """
    Load and validate configuration from YAML files.

    Merges:
      1. Global defaults (hardcoded)
      2. config_dir/modelizer.yaml
      3. config_dir/env/<env>.yaml
      4. Environment variable overrides
    """

    def __init__(self, config_dir: str = "config"):
        self.config_dir = Path(config_dir)
        self._yaml_cache: dict[Path, Any] = {}
        self.env = os.getenv("MODELIZER_ENV", "dev")

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML file with caching."""
        if path in self._yaml_cache:
            return self._yaml_cache[path]

        if not path.exists():
            logger.debug(f"Config file not found (using defaults): {path}")
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load {path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Ignoring {path}: top level must be a mapping")
            return {}

        self._yaml_cache[path] = data
        logger.debug(f"Loaded config: {path}")
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        if timeout := os.getenv("MODELIZER_HTTP_TIMEOUT"):
            config.setdefault("http", {})["timeout"] = float(timeout)

        if verify := os.getenv("MODELIZER_VERIFY_SSL"):
            config.setdefault("http", {})["verify_ssl"] = _parse_bool(verify)

        if fragments := os.getenv("MODELIZER_ALLOW_FRAGMENTS"):
            config.setdefault("decoder", {})["allow_fragments"] = _parse_bool(fragments)

        if log_level := os.getenv("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        return config

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Deep merge override into base dict."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def load(self) -> ConfigState:
        """
        Load complete configuration state.

        Returns:
            ConfigState: Validated configuration object

        Raises:
            ValidationError: If configuration is invalid
        """
        logger.info(f"Loading configuration from {self.config_dir} (env: {self.env})")

        config = self._load_yaml(self.config_dir / "modelizer.yaml")

        env_config = self._load_yaml(self.config_dir / "env" / f"{self.env}.yaml")
        config = self._merge_dicts(config, env_config)

        config = self._apply_env_overrides(copy.deepcopy(config))

        try:
            state = ConfigState(
                **{**config, "env": self.env, "config_dir": str(self.config_dir)}
            )
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

        logger.info(
            f"Configuration loaded: timeout={state.http.timeout}s, "
            f"fragments={state.decoder.allow_fragments}, "
            f"log_level={state.logging.level}"
        )
        return state


# =============================================================================
# ENTRY POINT
# =============================================================================


def get_config(config_dir: str | None = None) -> ConfigState:
    """
    Load and return the configuration state.

    Args:
        config_dir: Override config directory. Defaults to $MODELIZER_CONFIG_DIR or ./config

    Returns:
        ConfigState: Validated configuration object
    """
    if config_dir is None:
        config_dir = os.getenv("MODELIZER_CONFIG_DIR", "config")
        if not Path(config_dir).exists():
            logger.warning(f"Config directory not found at {config_dir}, using defaults")

    loader = ConfigLoader(config_dir=config_dir)
    return loader.load()


__all__ = [
    "ConfigLoader",
    "ConfigState",
    "DecoderSettings",
    "HttpSettings",
    "LoggingSettings",
    "get_config",
]
