"""
Base provider class
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
from loguru import logger


class BaseProvider(ABC):
    """
    Base class for all model providers.

    Fixed properties (defined by subclass):
    - is_local: Whether the model runs in-process (True) or behind a cloud API (False)
    - is_stateful: Whether calls must be serialized
    - category: Provider category (currently only "vlm")
    """

    def __init__(self, name: Optional[str] = None):
        """
        Initialize provider.

        Args:
            name: Provider name for logging
        """
        self.name = name or getattr(self, "_registered_name", None) or self.__class__.__name__
        self.logger = logger.bind(component=self.name)

    @property
    @abstractmethod
    def is_local(self) -> bool:
        pass

    @property
    @abstractmethod
    def is_stateful(self) -> bool:
        pass

    @property
    @abstractmethod
    def category(self) -> str:
        pass

    @classmethod
    @abstractmethod
    def get_config_schema(cls) -> Dict[str, Any]:
        """
        Return configuration schema for this provider.

        Used by ProviderFactory to validate config before construction.

        Example:
            {
                "api_key": {
                    "type": "string",
                    "required": True,
                    "description": "API key"
                }
            }
        """
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare the provider (open sessions, warm up, etc.)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Release provider resources."""
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"

    def __repr__(self) -> str:
        return self.__str__()
