"""
Image inputs - carriers for the artwork being described

Two forms are supported:
- ImageContent: bytes already in memory (e.g., an upload body)
- ImageFile: a file on disk, read lazily and off the event loop

Both expose the same small surface used by DescriptionGenerator:
`mime_type` and `async read() -> bytes`.
"""

import asyncio
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(path: Union[str, Path]) -> str:
    """
    Guess a MIME type from a file extension.

    Args:
        path: File path or name

    Returns:
        MIME type string, or application/octet-stream if unknown
    """
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type or DEFAULT_MIME_TYPE


def title_hint_from_filename(path: Union[str, Path]) -> str:
    """Return the base name of a file, used as the title hint."""
    return Path(path).name


@dataclass(frozen=True)
class ImageContent:
    """
    In-memory image content.

    Attributes:
        data: Raw image bytes
        mime_type: MIME type of the image (e.g., "image/png")
    """
    data: bytes
    mime_type: str

    async def read(self) -> bytes:
        if not isinstance(self.data, (bytes, bytearray)):
            raise TypeError(f"Image data must be bytes, got {type(self.data).__name__}")
        return bytes(self.data)

    def __str__(self) -> str:
        return f"ImageContent({self.mime_type}, {len(self.data)} bytes)"


@dataclass(frozen=True)
class ImageFile:
    """
    Image stored on disk.

    The file is read in a worker thread so the event loop is not blocked.
    The MIME type is guessed from the extension when not given.

    Attributes:
        path: Path to the image file
        mime_type: MIME type override
    """
    path: Path
    mime_type: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "path", Path(self.path))
        if not self.mime_type:
            object.__setattr__(self, "mime_type", guess_mime_type(self.path))

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def title_hint(self) -> str:
        return title_hint_from_filename(self.path)

    async def read(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)

    def __str__(self) -> str:
        return f"ImageFile({self.path}, {self.mime_type})"


ImageInput = Union[ImageContent, ImageFile]
