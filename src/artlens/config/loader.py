"""
Configuration Loader for Artlens

Loads configuration from multiple sources with priority:
1. Environment variables (.env + ARTLENS_XXX, GEMINI_API_KEY)
2. YAML config file
3. Default values (lowest)

A missing API key is fatal: load_config() raises ConfigurationError and
the caller must not go on to serve requests.
"""

from pathlib import Path
from typing import Optional, Union
from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from ruamel.yaml import YAML
from loguru import logger

from artlens.config.schema import ArtlensConfig
from artlens.core.errors import ConfigurationError


class ArtlensSettings(BaseSettings):
    """
    Environment-based settings with ARTLENS_ prefix.

    Reads from:
    1. Environment variables (ARTLENS_XXX, plus GEMINI_API_KEY)
    2. .env file in current directory

    Example:
        GEMINI_API_KEY=...
        ARTLENS_LOG_LEVEL=DEBUG
        ARTLENS_MODEL=gemini-2.5-flash
    """
    model_config = SettingsConfigDict(
        env_prefix="ARTLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    config_file: Optional[str] = "artlens.yaml"

    # Log settings
    log_level: Optional[str] = None
    log_file: Optional[str] = None

    # Describer
    model: Optional[str] = None
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "ARTLENS_GEMINI_API_KEY"),
    )


def _read_yaml(path: Path) -> dict:
    yaml = YAML(typ="safe")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.load(f)
    except Exception as e:
        logger.warning(f"Failed to load config from {path}: {e}")
        return {}

    if not data:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {path}: top level must be a mapping")
        return {}

    logger.debug(f"Loaded config from {path}")
    return data


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    env_settings: Optional[ArtlensSettings] = None,
) -> ArtlensConfig:
    """
    Load Artlens configuration.

    Args:
        config_path: Path to YAML config file. If None, uses ARTLENS_CONFIG_FILE
                     or defaults to "artlens.yaml"
        env_settings: Pre-loaded environment settings

    Returns:
        ArtlensConfig instance

    Raises:
        ConfigurationError: Invalid config values or no API key
    """
    if env_settings is None:
        env_settings = ArtlensSettings()

    if config_path is None:
        config_path = env_settings.config_file

    config_data = {}
    if config_path:
        path = Path(config_path)
        if path.exists():
            config_data = _read_yaml(path)

    try:
        config = ArtlensConfig(**config_data)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    # Environment overrides
    if env_settings.log_level:
        config.log_level = env_settings.log_level
    if env_settings.log_file:
        config.log_file = env_settings.log_file
    if env_settings.model:
        config.describer.model = env_settings.model
    if env_settings.gemini_api_key:
        config.describer.api_key = env_settings.gemini_api_key

    if not config.describer.api_key:
        logger.error("GEMINI_API_KEY is not set; refusing to start")
        raise ConfigurationError(
            "GEMINI_API_KEY for Gemini is not defined in environment variables."
        )

    return config


# ============================================================
# Global config management
# ============================================================

_global_config: Optional[ArtlensConfig] = None


def get_config() -> ArtlensConfig:
    """
    Get global config (lazy load).

    Loaded once from .env / environment and artlens.yaml, never mutated after.
    """
    global _global_config
    if _global_config is None:
        _global_config = load_config()
    return _global_config


def set_config(config: Optional[ArtlensConfig]) -> None:
    """Set global config manually (None clears it)"""
    global _global_config
    _global_config = config


def reload_config() -> ArtlensConfig:
    """Force reload config from files"""
    global _global_config
    _global_config = load_config()
    return _global_config
