# -*- coding: utf-8 -*-
"""
Image encoder - turns selected files into inlined data URLs.

Accepted inputs:
- a filesystem path (str or Path)
- raw bytes
- a binary file-like object with read() (its .name is used when present)
"""

import base64
import mimetypes
from pathlib import Path
from typing import Any, Optional, Tuple

from models.media import EncodedImage
from services.exceptions import ImageDecodeException
from utils.logger import get_logger

logger = get_logger(__name__)

# Leading bytes of the formats the uploader offers
_SIGNATURES = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
)


def describe_source(source: Any) -> str:
    """Get a display name for a selected file."""
    if isinstance(source, (str, Path)):
        return Path(source).name
    name = getattr(source, "name", None)
    if isinstance(name, str) and name:
        return Path(name).name
    return "image"


def sniff_mime_type(data: bytes) -> Optional[str]:
    """Detect an image MIME type from file contents."""
    for signature, mime_type in _SIGNATURES:
        if data.startswith(signature):
            return mime_type
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return None


def _read_source(source: Any) -> Tuple[bytes, str]:
    """Read raw bytes and a file name from any accepted input."""
    file_name = describe_source(source)

    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source), file_name

    if isinstance(source, (str, Path)):
        try:
            return Path(source).read_bytes(), file_name
        except OSError as e:
            raise ImageDecodeException(f"Cannot read {file_name}: {e}",
                                       file_name=file_name, original_error=e)

    if hasattr(source, "read"):
        try:
            data = source.read()
        except OSError as e:
            raise ImageDecodeException(f"Cannot read {file_name}: {e}",
                                       file_name=file_name, original_error=e)
        if isinstance(data, str):
            raise ImageDecodeException(f"{file_name} was opened in text mode",
                                       file_name=file_name)
        return bytes(data), file_name

    raise ImageDecodeException(f"Unsupported file input: {type(source).__name__}",
                               file_name=file_name)


def encode_image(source: Any) -> EncodedImage:
    """
    Encode one selected file into an EncodedImage.

    Args:
        source: Path, bytes or binary stream

    Returns:
        EncodedImage with a base64 data URL

    Raises:
        ImageDecodeException: if the input is empty, unreadable or not an image
    """
    data, file_name = _read_source(source)
    if not data:
        raise ImageDecodeException(f"{file_name} is empty", file_name=file_name)

    mime_type = sniff_mime_type(data)
    if mime_type is None:
        guessed, _ = mimetypes.guess_type(file_name)
        if guessed and guessed.startswith("image/"):
            mime_type = guessed
    if mime_type is None:
        raise ImageDecodeException(f"{file_name} is not a supported image",
                                   file_name=file_name)

    payload = base64.b64encode(data).decode("ascii")
    logger.debug(f"Encoded {file_name} ({mime_type}, {len(data)} bytes)")

    return EncodedImage(
        data_url=f"data:{mime_type};base64,{payload}",
        file_name=file_name,
        mime_type=mime_type,
        size_bytes=len(data),
    )
