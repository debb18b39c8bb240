"""
Gemini vision describer

Uses the google-genai SDK (async client surface, `client.aio`):
- Image is sent as an inline-data part (bytes + MIME type)
- Prompt is sent as a text part after the image
- No generation config: the model's default sampling settings apply

The client can be injected, which is how tests substitute a double.
"""

from typing import Optional, Dict, Any

from google import genai
from google.genai import types

from artlens.core.errors import ConfigurationError
from artlens.providers.registry import register_provider
from artlens.providers.vision import DescriptionRequest, VisionDescriber


DEFAULT_MODEL = "gemini-2.5-flash-preview-04-17"


@register_provider("gemini-vlm-remote")
class GeminiDescriber(VisionDescriber):
    """
    Gemini multimodal describer.

    One generate_content call per describe(). Transport timeouts, connection
    reuse and quota handling are left to the SDK.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        client: Optional[Any] = None,
        name: Optional[str] = None,
    ):
        """
        Initialize Gemini describer.

        Args:
            api_key: Gemini API key, used only when no client is given
            model: Model identifier
            client: Pre-built genai.Client (or a compatible test double)
            name: Provider name for logging

        Raises:
            ConfigurationError: Neither client nor api_key given
        """
        super().__init__(name=name)

        if client is None:
            if not api_key:
                raise ConfigurationError(
                    "GEMINI_API_KEY for Gemini is not defined in environment variables."
                )
            client = genai.Client(api_key=api_key)

        self.client = client
        self.model = model

    @classmethod
    def get_config_schema(cls) -> Dict[str, Any]:
        """Return configuration schema for this provider."""
        return {
            "api_key": {
                "type": "string",
                "required": False,
                "description": "Gemini API key (required unless client is given)"
            },
            "model": {
                "type": "string",
                "required": False,
                "default": DEFAULT_MODEL,
                "description": "Vision-capable Gemini model"
            },
            "client": {
                "type": "object",
                "required": False,
                "description": "Pre-built google.genai.Client"
            },
        }

    def build_contents(self, request: DescriptionRequest) -> list:
        """Build the [image, prompt] parts for generate_content."""
        return [
            types.Part.from_bytes(data=request.image_data, mime_type=request.mime_type),
            types.Part(text=request.prompt),
        ]

    async def describe(self, request: DescriptionRequest) -> Optional[str]:
        """
        Describe an artwork with Gemini.

        Args:
            request: Encoded image plus prompt

        Returns:
            response.text from the SDK (None if the model returned no text)
        """
        self.logger.debug(f"Sending {request} to {self.model}")

        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=self.build_contents(request),
        )

        text = response.text
        if text:
            self.logger.debug(f"Gemini response: {text[:100]}...")
        return text
