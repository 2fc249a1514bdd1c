# -*- coding: utf-8 -*-
"""
Encoded image model.
"""

from dataclasses import dataclass, field
from datetime import datetime
import uuid


@dataclass
class EncodedImage:
    """
    An uploaded image inlined as a data URL, ready to be stored with a listing.
    """

    data_url: str = ""
    file_name: str = ""
    mime_type: str = "application/octet-stream"
    size_bytes: int = 0

    image_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def payload(self) -> str:
        """Base64 part of the data URL."""
        _, _, data = self.data_url.partition(",")
        return data

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "image_id": self.image_id,
            "file_name": self.file_name,
            "mime_type": self.mime_type,
            "size_bytes": self.size_bytes,
            "data_url": self.data_url,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EncodedImage":
        """Create from dictionary."""
        created_at = data.get("created_at")
        return cls(
            data_url=data.get("data_url", ""),
            file_name=data.get("file_name", ""),
            mime_type=data.get("mime_type", "application/octet-stream"),
            size_bytes=data.get("size_bytes", 0),
            image_id=data.get("image_id") or str(uuid.uuid4()),
            created_at=datetime.fromisoformat(created_at) if created_at else datetime.now(),
        )
