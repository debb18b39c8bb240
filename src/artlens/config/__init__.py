"""
Configuration management for Artlens

Usage:
    from artlens.config import load_config, get_config, ArtlensConfig

    # Load from file
    config = load_config("artlens.yaml")

    # Get global config (auto-loads from .env and artlens.yaml)
    config = get_config()

    print(config.describer.model)
"""

from artlens.config.schema import (
    ArtlensConfig,
    DescriberConfig,
)
from artlens.config.loader import (
    load_config,
    get_config,
    set_config,
    reload_config,
    ArtlensSettings,
)

__all__ = [
    # Schema
    "ArtlensConfig",
    "DescriberConfig",
    # Loader
    "load_config",
    "get_config",
    "set_config",
    "reload_config",
    "ArtlensSettings",
]
