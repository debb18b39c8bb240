"""
Error types raised by Artlens.

ConfigurationError is a startup condition and is never raised per call.
Everything raised from a description call derives from DescriptionError,
so callers can treat any of them as "no description produced".
"""


class ConfigurationError(Exception):
    """Missing or invalid configuration (e.g., no API key)."""
    pass


class DescriptionError(Exception):
    """Base class for failures of a single description call."""

    PREFIX = "AI description generation failed: "

    def __init__(self, message: str):
        self.detail = message
        super().__init__(f"{self.PREFIX}{message}")


class FileReadError(DescriptionError):
    """Image content could not be read."""
    pass


class ProviderInvocationError(DescriptionError):
    """The generative model provider raised during the remote call."""
    pass


class EmptyResponseError(DescriptionError):
    """The provider answered but returned no usable text."""
    pass
