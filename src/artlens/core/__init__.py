"""
Core building blocks: image inputs, title parsing and errors
"""

from artlens.core.errors import (
    ConfigurationError,
    DescriptionError,
    FileReadError,
    ProviderInvocationError,
    EmptyResponseError,
)
from artlens.core.image import (
    ImageContent,
    ImageFile,
    ImageInput,
    guess_mime_type,
    title_hint_from_filename,
)
from artlens.core.title import ParsedDescription, parse_description, extract_title

__all__ = [
    # Errors
    "ConfigurationError",
    "DescriptionError",
    "FileReadError",
    "ProviderInvocationError",
    "EmptyResponseError",
    # Image inputs
    "ImageContent",
    "ImageFile",
    "ImageInput",
    "guess_mime_type",
    "title_hint_from_filename",
    # Title convention
    "ParsedDescription",
    "parse_description",
    "extract_title",
]
