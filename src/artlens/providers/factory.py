"""
Provider factory for creating providers from configuration
"""

from typing import Dict, Any
from loguru import logger
from artlens.providers.base import BaseProvider
from artlens.providers.registry import ProviderRegistry


_TYPE_CHECKS = {
    "string": (str,),
    "float": (int, float),
    "int": (int,),
    "bool": (bool,),
}

_TYPE_NAMES = {
    "string": "string",
    "float": "number",
    "int": "integer",
    "bool": "boolean",
}


class ProviderFactory:
    """
    Config-driven provider creation.
    """

    @staticmethod
    def create(provider_name: str, config: Dict[str, Any]) -> BaseProvider:
        """
        Create provider instance from configuration.

        Args:
            provider_name: Provider name (e.g., "gemini-vlm-remote")
            config: Keyword arguments for the provider constructor

        Returns:
            Provider instance

        Raises:
            ValueError: Provider not registered, or required config missing
            TypeError: Invalid configuration

        Example:
            describer = ProviderFactory.create("gemini-vlm-remote", {
                "api_key": "...",
            })
        """
        provider_class = ProviderRegistry.get(provider_name)

        if not provider_class:
            available = list(ProviderRegistry.list_providers().keys())
            raise ValueError(
                f"Provider '{provider_name}' not found. "
                f"Available providers: {available}"
            )

        schema = provider_class.get_config_schema()
        _validate_config(config, schema, provider_name)

        try:
            provider = provider_class(**config)
        except TypeError as e:
            raise TypeError(f"Invalid config for provider '{provider_name}': {e}") from e

        logger.info(
            f"Created provider: {provider_name} "
            f"(local={provider.is_local}, category={provider.category}, "
            f"stateful={provider.is_stateful})"
        )

        return provider


def _validate_config(config: Dict, schema: Dict, provider_name: str) -> None:
    """
    Validate configuration against schema.

    Raises:
        ValueError: Missing required config
        TypeError: Wrong type for config value
    """
    for key, spec in schema.items():
        if spec.get("required", False) and config.get(key) is None:
            raise ValueError(
                f"Provider '{provider_name}' missing required config: {key}"
            )

        if config.get(key) is None:
            continue

        value = config[key]
        expected_type = spec.get("type")
        allowed = _TYPE_CHECKS.get(expected_type)
        # bool is an int subclass; don't let True pass as a number
        if allowed and (not isinstance(value, allowed) or (expected_type != "bool" and isinstance(value, bool))):
            raise TypeError(
                f"Provider '{provider_name}' config '{key}' must be "
                f"{_TYPE_NAMES[expected_type]}, got {type(value)}"
            )
