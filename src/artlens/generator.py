"""
Description generator

Turns an artwork image and a title hint into a gallery description:
1. Read the image fully into memory
2. Compose the request (image + fixed gallery prompt)
3. One describe() call on the injected VisionDescriber
4. Reject empty results
5. Return the trimmed text

Every failure is logged once where it is detected and raised as a
DescriptionError subclass. Nothing is retried or cached.
"""

from typing import Optional

from loguru import logger

from artlens.core.errors import (
    EmptyResponseError,
    FileReadError,
    ProviderInvocationError,
)
from artlens.core.image import ImageInput
from artlens.core.title import ParsedDescription, parse_description
from artlens.providers.vision import DescriptionRequest, VisionDescriber, build_prompt


class DescriptionGenerator:
    """
    Generates artwork descriptions through a VisionDescriber.

    Holds no per-call state, so one instance can serve concurrent calls.
    """

    def __init__(self, describer: VisionDescriber, name: Optional[str] = None):
        """
        Args:
            describer: Provider performing the remote call
            name: Component name for logging
        """
        self.describer = describer
        self.name = name or self.__class__.__name__
        self.logger = logger.bind(component=self.name)

    async def _read_image(self, image: ImageInput) -> bytes:
        try:
            data = await image.read()
        except Exception as e:
            self.logger.error(f"Failed to read image {image}: {e}")
            raise FileReadError(f"Failed to read image: {e}") from e

        if not data:
            self.logger.error(f"Image {image} is empty")
            raise FileReadError("Failed to read image: no content.")
        return data

    async def build_request(self, image: ImageInput, title_hint: str) -> DescriptionRequest:
        """
        Read the image and compose the request payload.

        Raises:
            FileReadError: Image content unreadable or empty
        """
        data = await self._read_image(image)
        return DescriptionRequest(
            image_data=data,
            mime_type=image.mime_type,
            prompt=build_prompt(title_hint),
        )

    async def generate_description(self, image: ImageInput, title_hint: str = "") -> str:
        """
        Generate a gallery description for an artwork.

        Args:
            image: Image to describe
            title_hint: Filename-derived title, used only as inspiration

        Returns:
            Description text, stripped, with the creative title in **...**

        Raises:
            FileReadError: Image could not be read (no provider call is made)
            ProviderInvocationError: The provider call raised
            EmptyResponseError: The provider returned no text
        """
        request = await self.build_request(image, title_hint)

        try:
            text = await self.describer.describe(request)
        except Exception as e:
            self.logger.error(f"Error generating description with {self.describer}: {e}")
            raise ProviderInvocationError(str(e)) from e

        if not isinstance(text, str) or not text.strip():
            self.logger.error(f"{self.describer} returned no text description.")
            raise EmptyResponseError("Failed to generate description: No text returned.")

        return text.strip()

    async def describe_with_title(self, image: ImageInput, title_hint: str = "") -> ParsedDescription:
        """Generate a description and split off its creative title."""
        return parse_description(await self.generate_description(image, title_hint))
