# -*- coding: utf-8 -*-
"""
Shared fixtures for the listing wizard tests.

Environment overrides are applied before any application module is
imported: headless Qt, logs in a temp directory and a short publish delay.
"""

import os
import tempfile
import time

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("LOGS_DIR", os.path.join(tempfile.gettempdir(), "catalog_wizard_test_logs"))
os.environ.setdefault("SUBMIT_DELAY_MS", "20")

import pytest

from models.media import EncodedImage
from services.exceptions import ImageDecodeException

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


def fake_encode(source):
    """
    Encoder stand-in for decode tests.

    Sources are names, or (name, delay_seconds) pairs to control completion
    order. Names starting with "bad" fail to decode.
    """
    if isinstance(source, tuple):
        name, delay = source
        time.sleep(delay)
    else:
        name = str(source)
    if name.startswith("bad"):
        raise ImageDecodeException(f"{name} is not a supported image", file_name=name)
    return EncodedImage(
        data_url="data:image/png;base64,AAAA",
        file_name=name,
        mime_type="image/png",
        size_bytes=3,
    )


@pytest.fixture
def fake_encoder():
    return fake_encode


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def make_image():
    """Build an EncodedImage without going through a decode."""
    def _make(name="photo.png"):
        return fake_encode(name)
    return _make
