"""
Configuration Schema for Artlens

Defines the structure of configuration using Pydantic models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from artlens.providers.vision_describers.gemini import DEFAULT_MODEL


class DescriberConfig(BaseModel):
    """Vision describer configuration"""
    type: str = Field(default="gemini-vlm-remote", description="Describer provider type")
    model: str = Field(default=DEFAULT_MODEL, description="Model identifier")
    api_key: Optional[str] = Field(default=None, repr=False, description="Provider API key")


class ArtlensConfig(BaseModel):
    """
    Main Artlens configuration.

    Root configuration object holding all settings.
    """
    model_config = ConfigDict(extra="allow")

    describer: DescriberConfig = Field(default_factory=DescriberConfig)

    # Global settings
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[str] = Field(default=None, description="Log file path")
