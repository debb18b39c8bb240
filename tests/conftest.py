"""
Pytest fixtures for testing
"""

import struct
import zlib
from typing import List, Optional

import pytest
from loguru import logger

from artlens.core.image import ImageContent
from artlens.providers.vision import DescriptionRequest, VisionDescriber


def make_png(width: int = 10, height: int = 10) -> bytes:
    """Build a minimal solid-colour RGB PNG."""
    def chunk(tag: bytes, data: bytes) -> bytes:
        body = tag + data
        return struct.pack(">I", len(data)) + body + struct.pack(">I", zlib.crc32(body) & 0xFFFFFFFF)

    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    rows = b"".join(b"\x00" + b"\xff\x99\x33" * width for _ in range(height))
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", header)
        + chunk(b"IDAT", zlib.compress(rows))
        + chunk(b"IEND", b"")
    )


class MockDescriber(VisionDescriber):
    """Mock describer returning a canned response or raising"""

    def __init__(self, response: Optional[str] = "**Untitled**\nA description.", error: Optional[Exception] = None):
        super().__init__(name="MockDescriber")
        self.response = response
        self.error = error
        self.requests: List[DescriptionRequest] = []

    async def describe(self, request: DescriptionRequest) -> Optional[str]:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def png_bytes():
    """10x10 PNG image"""
    return make_png(10, 10)


@pytest.fixture
def png_image(png_bytes):
    return ImageContent(data=png_bytes, mime_type="image/png")


@pytest.fixture
def png_file(tmp_path, png_bytes):
    path = tmp_path / "sunset.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during a test"""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and .env files"""
    for var in ("GEMINI_API_KEY", "ARTLENS_GEMINI_API_KEY", "ARTLENS_MODEL",
                "ARTLENS_LOG_LEVEL", "ARTLENS_LOG_FILE", "ARTLENS_CONFIG_FILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
