"""
Provider registry for plugin system
"""

from typing import Dict, Type, Optional
from loguru import logger
from artlens.providers.base import BaseProvider


class ProviderRegistry:
    """
    Provider registry.

    Maps provider names (as used in config files) to provider classes.
    """

    _providers: Dict[str, Type[BaseProvider]] = {}

    @classmethod
    def register(cls, name: str, provider_class: Type[BaseProvider]):
        """
        Register a provider.

        Args:
            name: Provider unique identifier (e.g., "gemini-vlm-remote")
            provider_class: Provider class

        Raises:
            ValueError: If provider name already registered
            TypeError: If provider_class doesn't inherit BaseProvider
        """
        if name in cls._providers:
            raise ValueError(f"Provider '{name}' already registered")

        if not isinstance(provider_class, type) or not issubclass(provider_class, BaseProvider):
            raise TypeError(f"{provider_class} must inherit from BaseProvider")

        cls._providers[name] = provider_class
        logger.debug(f"Registered provider: {name} ({provider_class.__name__})")

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a provider registration, if present."""
        cls._providers.pop(name, None)

    @classmethod
    def get(cls, name: str) -> Optional[Type[BaseProvider]]:
        """
        Get provider class by name.

        Returns:
            Provider class or None if not found
        """
        return cls._providers.get(name)

    @classmethod
    def list_providers(cls) -> Dict[str, Type[BaseProvider]]:
        """Return a copy of {name: provider_class}."""
        return cls._providers.copy()

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if provider is registered"""
        return name in cls._providers


def register_provider(name: str):
    """
    Decorator for registering providers.

    Naming convention:
        - `-local`: In-process inference
        - `-remote`: Remote cloud API (e.g., gemini-vlm-remote)

    Usage:
        @register_provider("gemini-vlm-remote")
        class GeminiDescriber(VisionDescriber):
            ...

    The registered name is also used as the provider's default instance name.
    """
    def decorator(provider_class: Type[BaseProvider]):
        ProviderRegistry.register(name, provider_class)
        provider_class._registered_name = name
        return provider_class
    return decorator
