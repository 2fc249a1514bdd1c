# -*- coding: utf-8 -*-
"""
Tests for the image encoder.
"""

import base64
import io

import pytest

from services.exceptions import ImageDecodeException
from services.image_encoder import describe_source, encode_image, sniff_mime_type


class TestSniffing:
    """Test MIME detection from contents."""

    @pytest.mark.parametrize("data, expected", [
        (b"\x89PNG\r\n\x1a\n....", "image/png"),
        (b"\xff\xd8\xff\xe0....", "image/jpeg"),
        (b"GIF89a....", "image/gif"),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp"),
        (b"hello world", None),
    ])
    def test_signatures(self, data, expected):
        assert sniff_mime_type(data) == expected


class TestEncode:
    """Test encoding of each accepted input kind."""

    def test_bytes(self, png_bytes):
        image = encode_image(png_bytes)

        assert image.mime_type == "image/png"
        assert image.size_bytes == len(png_bytes)
        assert image.data_url.startswith("data:image/png;base64,")
        assert base64.b64decode(image.payload) == png_bytes

    def test_path(self, tmp_path, png_bytes):
        path = tmp_path / "lamp.png"
        path.write_bytes(png_bytes)

        image = encode_image(str(path))

        assert image.file_name == "lamp.png"
        assert image.mime_type == "image/png"

    def test_binary_stream_uses_its_name(self, png_bytes):
        stream = io.BytesIO(png_bytes)
        stream.name = "/tmp/uploads/front.png"

        image = encode_image(stream)

        assert image.file_name == "front.png"

    def test_unknown_contents_fall_back_to_extension(self):
        stream = io.BytesIO(b"\x00\x01\x02\x03")
        stream.name = "scan.jpg"

        assert encode_image(stream).mime_type == "image/jpeg"

    def test_each_encode_gets_its_own_id(self, png_bytes):
        assert encode_image(png_bytes).image_id != encode_image(png_bytes).image_id


class TestEncodeErrors:
    """Test inputs that cannot be encoded."""

    def test_empty_input(self):
        with pytest.raises(ImageDecodeException):
            encode_image(b"")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageDecodeException) as exc_info:
            encode_image(tmp_path / "missing.png")
        assert exc_info.value.file_name == "missing.png"
        assert isinstance(exc_info.value.original_error, OSError)

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("not an image")

        with pytest.raises(ImageDecodeException):
            encode_image(path)

    def test_text_stream(self):
        with pytest.raises(ImageDecodeException):
            encode_image(io.StringIO("abc"))

    def test_unsupported_input(self):
        with pytest.raises(ImageDecodeException):
            encode_image(42)


def test_describe_source():
    assert describe_source("/a/b/c.png") == "c.png"
    assert describe_source(b"...") == "image"
