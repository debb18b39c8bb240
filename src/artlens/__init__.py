"""
Artlens - gallery descriptions for artwork images

Design:
- ImageInput: in-memory bytes or an on-disk file, plus a MIME type
- VisionDescriber: provider doing one remote multimodal call (Gemini by default)
- DescriptionGenerator: read -> compose -> invoke -> check -> trim
- Title convention: the model embeds a creative title as **Title**,
  split off explicitly with parse_description()

Usage:
    import artlens

    artlens.init()  # fails fast on missing API key
    text = await artlens.generate_description(data, "image/png", "sunset.png")
    parsed = artlens.parse_description(text)
"""

__version__ = "0.1.0"

# Configure logger on import (skipped under pytest)
import artlens.utils.logger_config  # noqa: F401

from typing import Optional

from loguru import logger

from artlens.core import (
    ConfigurationError,
    DescriptionError,
    FileReadError,
    ProviderInvocationError,
    EmptyResponseError,
    ImageContent,
    ImageFile,
    ImageInput,
    title_hint_from_filename,
    ParsedDescription,
    parse_description,
    extract_title,
)
from artlens.config import ArtlensConfig, get_config
from artlens.utils.logger_config import configure_logger, reset_logger
from artlens.providers import ProviderFactory, VisionDescriber, GeminiDescriber
from artlens.generator import DescriptionGenerator


_default_generator: Optional[DescriptionGenerator] = None


def create_generator(config: Optional[ArtlensConfig] = None) -> DescriptionGenerator:
    """
    Build a DescriptionGenerator from configuration.

    Args:
        config: Configuration; the process-wide config is loaded if None

    Returns:
        DescriptionGenerator backed by the configured describer

    Raises:
        ConfigurationError: No API key or unusable describer settings
    """
    config = config or get_config()
    describer_config = config.describer

    try:
        describer = ProviderFactory.create(
            describer_config.type,
            {"api_key": describer_config.api_key, "model": describer_config.model},
        )
    except (ValueError, TypeError) as e:
        logger.error(f"Cannot create describer '{describer_config.type}': {e}")
        raise ConfigurationError(str(e)) from e

    return DescriptionGenerator(describer)


def init(config: Optional[ArtlensConfig] = None) -> DescriptionGenerator:
    """
    Start up the process-wide generator.

    Call once at startup. Applies the configured log level and log file,
    then builds the describer, so a missing API key fails here rather than
    on the first description request.

    Args:
        config: Configuration; the process-wide config is loaded if None

    Returns:
        The process-wide DescriptionGenerator

    Raises:
        ConfigurationError: No API key or unusable describer settings
    """
    global _default_generator
    config = config or get_config()

    reset_logger()
    configure_logger(level=config.log_level, log_file=config.log_file)

    _default_generator = create_generator(config)
    logger.info(f"Artlens initialized with describer '{config.describer.type}' ({config.describer.model})")
    return _default_generator


def get_generator() -> DescriptionGenerator:
    """
    Return the process-wide generator.

    Raises:
        DescriptionError: init() has not been called
    """
    if _default_generator is None:
        logger.error("Description requested before artlens.init()")
        raise DescriptionError("artlens.init() has not been called.")
    return _default_generator


def set_generator(generator: Optional[DescriptionGenerator]) -> None:
    """Replace (or clear, with None) the process-wide generator."""
    global _default_generator
    _default_generator = generator


async def generate_description(
    image_content: bytes,
    mime_type: str,
    title_hint: str,
    generator: Optional[DescriptionGenerator] = None,
) -> str:
    """
    Generate a gallery description for raw image bytes.

    Args:
        image_content: Raw image bytes
        mime_type: MIME type of the image (e.g., "image/png")
        title_hint: Filename-derived title, used only as inspiration
        generator: Generator to use; the process-wide one if None

    Returns:
        Trimmed description with the creative title in **...**

    Raises:
        DescriptionError: Any failure, including a missing init(); no
            description was produced
    """
    generator = generator or get_generator()
    return await generator.generate_description(
        ImageContent(data=image_content, mime_type=mime_type),
        title_hint,
    )


__all__ = [
    "__version__",
    # Entry points
    "init",
    "generate_description",
    "create_generator",
    "get_generator",
    "set_generator",
    "DescriptionGenerator",
    # Inputs
    "ImageContent",
    "ImageFile",
    "ImageInput",
    "title_hint_from_filename",
    # Title convention
    "ParsedDescription",
    "parse_description",
    "extract_title",
    # Providers
    "VisionDescriber",
    "GeminiDescriber",
    # Errors
    "ConfigurationError",
    "DescriptionError",
    "FileReadError",
    "ProviderInvocationError",
    "EmptyResponseError",
]
