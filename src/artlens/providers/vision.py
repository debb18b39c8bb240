"""
Vision module - request payload and describer base class

This module provides:
- GALLERY_PROMPT_TEMPLATE / build_prompt: the fixed instruction sent with every image
- DescriptionRequest: transient payload for one describe() call
- VisionDescriber: base class for providers that turn an image into text
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any

from artlens.providers.base import BaseProvider


GALLERY_PROMPT_TEMPLATE = (
    "Analyze the following artwork.\n"
    "First, create a concise and creative title for this artwork and enclose it "
    "in double asterisks, like this: **Creative Artwork Title**.\n"
    "Then, provide a detailed description. Focus on its visual elements, style, "
    "potential mood, and theme.\n"
    'The original filename was "{title_hint}". You can use this for inspiration '
    "or ignore it if you come up with a better title.\n"
    "The description should be suitable for a gallery."
)


def build_prompt(title_hint: str) -> str:
    """
    Compose the gallery description instruction.

    Args:
        title_hint: Filename-derived title, used only as inspiration

    Returns:
        Prompt text
    """
    return GALLERY_PROMPT_TEMPLATE.format(title_hint=title_hint or "")


@dataclass(frozen=True)
class DescriptionRequest:
    """
    Payload for a single describe() call.

    Built per call by DescriptionGenerator and discarded afterwards. The image
    stays as raw bytes; the provider SDK base64-encodes it as inline data on
    the wire.

    Attributes:
        image_data: Raw image content
        mime_type: MIME type of the image
        prompt: Instruction text sent alongside the image
    """
    image_data: bytes
    mime_type: str
    prompt: str

    def __str__(self) -> str:
        return f"DescriptionRequest({self.mime_type}, {len(self.image_data)} bytes)"


class VisionDescriber(BaseProvider):
    """
    Vision describer base class.

    A describer performs exactly one remote round trip per describe() call
    and returns the raw text it got back (None if there was none). Trimming,
    emptiness checks and error wrapping belong to DescriptionGenerator.

    Default BaseProvider properties:
    - is_local: False (cloud API)
    - is_stateful: False
    - category: "vlm"
    """

    @property
    def is_local(self) -> bool:
        return False

    @property
    def is_stateful(self) -> bool:
        return False

    @property
    def category(self) -> str:
        return "vlm"

    @classmethod
    def get_config_schema(cls) -> Dict[str, Any]:
        return {}

    async def initialize(self) -> None:
        pass

    async def cleanup(self) -> None:
        pass

    @abstractmethod
    async def describe(self, request: DescriptionRequest) -> Optional[str]:
        """
        Send the request to the model.

        Args:
            request: Encoded image plus prompt

        Returns:
            Text returned by the model, or None
        """
        pass
