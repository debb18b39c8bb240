"""
Provider interfaces and implementations

This package contains:
1. Provider interfaces (base.py, vision.py)
2. Provider implementations (vision_describers/)
3. Provider registry and factory for plugin system

Usage:
    from artlens.providers import ProviderFactory

    describer = ProviderFactory.create("gemini-vlm-remote", {"api_key": "..."})
"""

from artlens.providers.base import BaseProvider
from artlens.providers.vision import (
    VisionDescriber,
    DescriptionRequest,
    GALLERY_PROMPT_TEMPLATE,
    build_prompt,
)
from artlens.providers.registry import ProviderRegistry, register_provider
from artlens.providers.factory import ProviderFactory

# Importing implementations registers them
from artlens.providers.vision_describers import GeminiDescriber

__all__ = [
    # Interfaces
    "BaseProvider",
    "VisionDescriber",
    "DescriptionRequest",
    "GALLERY_PROMPT_TEMPLATE",
    "build_prompt",
    # Registry / factory
    "ProviderRegistry",
    "register_provider",
    "ProviderFactory",
    # Implementations
    "GeminiDescriber",
]
