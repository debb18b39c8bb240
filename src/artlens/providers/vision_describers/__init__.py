"""
Vision describers - implementations for artwork description

Available describers:
- GeminiDescriber: Google Gemini via google-genai

Note: VisionDescriber base class is defined in providers.vision
"""

from artlens.providers.vision import VisionDescriber
from artlens.providers.vision_describers.gemini import GeminiDescriber, DEFAULT_MODEL

__all__ = [
    "VisionDescriber",
    "GeminiDescriber",
    "DEFAULT_MODEL",
]
