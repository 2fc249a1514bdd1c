# -*- coding: utf-8 -*-
"""
Image uploader - thumbnail grid bound to one media slot.

Shows the slot's images with a remove button each, plus an upload tile
while the slot still has room. File selection is forwarded to the
controller; the grid redraws whenever the slot republishes its images.
"""

import base64
from typing import List

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFileDialog, QFrame
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPixmap

from app.config import Config
from models.listing import MediaSlotName
from models.media import EncodedImage
from utils.helpers import truncate_text
from utils.logger import get_logger

logger = get_logger(__name__)

THUMBNAIL_SIZE = 128


class ImageUploader(QWidget):
    """Thumbnail grid and upload button for one media slot."""

    def __init__(self, controller, slot: MediaSlotName, title: str,
                 required: bool = False, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.slot = controller.media_intake.slot(slot)
        self.title = title
        self.required = required
        self._thumbnails: List[QFrame] = []

        self._setup_ui()
        self.slot.images_changed.connect(self.refresh)
        # A failed decode frees its reserved place without republishing images
        self.slot.decode_failed.connect(self._update_upload_button)
        self.refresh(self.slot.images)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        title = QLabel(f"* {self.title}" if self.required else self.title)
        title.setStyleSheet("font-weight: bold;")
        layout.addWidget(title)

        self.grid_layout = QHBoxLayout()
        self.grid_layout.setSpacing(12)
        self.grid_layout.setAlignment(Qt.AlignLeft)

        self.upload_button = QPushButton("+\nUpload Image")
        self.upload_button.setFixedSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE)
        self.upload_button.setStyleSheet("border: 2px dashed #adb5bd; border-radius: 6px;")
        self.upload_button.clicked.connect(self._choose_files)
        self.grid_layout.addWidget(self.upload_button)
        layout.addLayout(self.grid_layout)

        extensions = ", ".join(ext.lstrip(".") for ext in Config.IMAGE_EXTENSIONS)
        size_mb = Config.IMAGE_SIZE_HINT_BYTES // (1024 * 1024)
        hint = QLabel(
            f"Supports {extensions} formats, maximum of {self.slot.cap} images, "
            f"each image should not exceed {size_mb}MB"
        )
        hint.setStyleSheet("color: #6c757d; font-size: 9pt;")
        layout.addWidget(hint)

    def _choose_files(self):
        patterns = " ".join(f"*{ext}" for ext in Config.IMAGE_EXTENSIONS)
        paths, _ = QFileDialog.getOpenFileNames(
            self, self.title, "", f"Images ({patterns})"
        )
        if paths:
            self.add_files(paths)

    def add_files(self, files: list):
        """Forward a file selection to the controller."""
        logger.debug(f"{self.slot.name.value}: {len(files)} file(s) selected")
        self.controller.add_images(self.slot.name, files)
        self._update_upload_button()

    def refresh(self, images: List[EncodedImage]):
        """Rebuild thumbnails from the slot's collection."""
        for frame in self._thumbnails:
            self.grid_layout.removeWidget(frame)
            frame.deleteLater()
        self._thumbnails = []

        for index, image in enumerate(images):
            frame = self._create_thumbnail(index, image)
            self.grid_layout.insertWidget(index, frame)
            self._thumbnails.append(frame)

        self._update_upload_button()

    def _create_thumbnail(self, index: int, image: EncodedImage) -> QFrame:
        frame = QFrame()
        frame.setFixedSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE)
        frame.setStyleSheet("border: 1px solid #dee2e6; border-radius: 6px;")

        preview = QLabel(frame)
        preview.setGeometry(0, 0, THUMBNAIL_SIZE, THUMBNAIL_SIZE)
        preview.setAlignment(Qt.AlignCenter)
        pixmap = QPixmap()
        if pixmap.loadFromData(base64.b64decode(image.payload)):
            preview.setPixmap(pixmap.scaled(
                THUMBNAIL_SIZE, THUMBNAIL_SIZE, Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation
            ))
        else:
            preview.setText(truncate_text(image.file_name, 16))
            preview.setWordWrap(True)
        preview.setToolTip(f"Uploaded {index + 1}: {image.file_name}")

        remove_button = QPushButton("×", frame)
        remove_button.setFixedSize(24, 24)
        remove_button.move(THUMBNAIL_SIZE - 28, 4)
        remove_button.setStyleSheet(
            "background-color: rgba(0, 0, 0, 128); color: white; border-radius: 12px;"
        )
        remove_button.clicked.connect(lambda _, i=index: self.controller.remove_image(self.slot.name, i))
        return frame

    def _update_upload_button(self, *_):
        self.upload_button.setVisible(not self.slot.is_full())

    def thumbnail_count(self) -> int:
        return len(self._thumbnails)
