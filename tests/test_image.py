"""
Unit tests for image inputs
"""

import pytest

from artlens.core.image import (
    DEFAULT_MIME_TYPE,
    ImageContent,
    ImageFile,
    guess_mime_type,
    title_hint_from_filename,
)


@pytest.mark.asyncio
async def test_image_content_read(png_bytes):
    image = ImageContent(data=png_bytes, mime_type="image/png")

    assert await image.read() == png_bytes


def test_image_content_requires_mime_type(png_bytes):
    with pytest.raises(TypeError):
        ImageContent(data=png_bytes)


@pytest.mark.asyncio
async def test_image_content_rejects_non_bytes():
    image = ImageContent(data="not bytes", mime_type="image/png")

    with pytest.raises(TypeError):
        await image.read()


@pytest.mark.asyncio
async def test_image_file_read(png_file, png_bytes):
    image = ImageFile(png_file)

    assert await image.read() == png_bytes
    assert image.mime_type == "image/png"
    assert image.filename == "sunset.png"
    assert image.title_hint == "sunset.png"


@pytest.mark.asyncio
async def test_image_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        await ImageFile(tmp_path / "nope.png").read()


def test_image_file_accepts_str_path(png_file):
    image = ImageFile(str(png_file), mime_type="image/x-custom")

    assert image.path == png_file
    assert image.mime_type == "image/x-custom"


@pytest.mark.parametrize("name,expected", [
    ("a.png", "image/png"),
    ("a.JPG", "image/jpeg"),
    ("dir/b.jpeg", "image/jpeg"),
    ("c.gif", "image/gif"),
    ("no_extension", DEFAULT_MIME_TYPE),
])
def test_guess_mime_type(name, expected):
    assert guess_mime_type(name) == expected


def test_title_hint_from_filename():
    assert title_hint_from_filename("/uploads/2024/sunset.png") == "sunset.png"
    assert title_hint_from_filename("") == ""
