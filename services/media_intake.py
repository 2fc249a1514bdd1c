# -*- coding: utf-8 -*-
"""
Media intake - capped image collections with background decoding.

Each media slot keeps an ordered list of encoded images. Selected files are
decoded on worker threads, one QThread per file. Completion signals are
delivered to the slot on its own thread (queued connection), so appending
and republishing the collection never interleaves between two decodes.

Order of the collection reflects decode completion time, not the order in
which files were selected.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from PyQt5.QtCore import QCoreApplication, QObject, QThread, pyqtSignal, pyqtSlot

from app.config import Config
from models.listing import MediaSlotName
from models.media import EncodedImage
from services.exceptions import (
    CapacityExceededException,
    ImageDecodeException,
    IndexOutOfRangeException,
)
from services.image_encoder import describe_source, encode_image
from utils.logger import get_logger

logger = get_logger(__name__)

Encoder = Callable[[Any], EncodedImage]


class ImageDecodeWorker(QThread):
    """Background worker decoding one selected file."""

    decoded = pyqtSignal(object)  # EncodedImage
    failed = pyqtSignal(str, str)  # file name, message

    def __init__(self, source: Any, encoder: Encoder = encode_image):
        super().__init__()
        self.source = source
        self.file_name = describe_source(source)
        self._encoder = encoder

    def run(self):
        """Decode in background."""
        try:
            image = self._encoder(self.source)
        except ImageDecodeException as e:
            self.failed.emit(e.file_name or self.file_name, e.message)
            return
        except Exception as e:
            logger.error(f"Unexpected error decoding {self.file_name}: {e}", exc_info=True)
            self.failed.emit(self.file_name, str(e))
            return
        self.decoded.emit(image)


class MediaSlot(QObject):
    """
    One capped, ordered image collection (primary or secondary).

    Signals:
        images_changed(list): full collection after every change
        decode_failed(str, str): file name and reason for a failed decode
    """

    images_changed = pyqtSignal(list)
    decode_failed = pyqtSignal(str, str)

    def __init__(self, name: MediaSlotName, cap: int,
                 encoder: Encoder = encode_image, parent: Optional[QObject] = None):
        super().__init__(parent)
        if cap <= 0:
            raise ValueError(f"Slot cap must be positive, got {cap}")
        self.name = name
        self._cap = cap
        self._encoder = encoder
        self._images: List[EncodedImage] = []
        self._pending = 0
        self._workers: set = set()

    @property
    def cap(self) -> int:
        return self._cap

    @property
    def images(self) -> List[EncodedImage]:
        """Copy of the current collection."""
        return list(self._images)

    @property
    def pending_count(self) -> int:
        """Number of decodes still in flight."""
        return self._pending

    def count(self) -> int:
        return len(self._images)

    def remaining(self) -> int:
        """How many more files may be selected right now."""
        return max(0, self._cap - len(self._images) - self._pending)

    def is_full(self) -> bool:
        return self.remaining() == 0

    def accept(self, files: Iterable[Any]) -> int:
        """
        Admit a batch of files and start decoding each one.

        The whole batch is rejected when it would overflow the cap; nothing
        is decoded in that case.

        Args:
            files: Paths, bytes or binary streams

        Returns:
            Number of decodes started

        Raises:
            CapacityExceededException: if the batch does not fit
        """
        batch = list(files)
        if not batch:
            return 0

        current_count = len(self._images) + self._pending
        if current_count + len(batch) > self._cap:
            logger.warning(
                f"{self.name.value}: rejected {len(batch)} file(s), "
                f"{current_count}/{self._cap} already used"
            )
            raise CapacityExceededException(self._cap, slot=self.name.value, requested=len(batch))

        for source in batch:
            worker = ImageDecodeWorker(source, self._encoder)
            worker.decoded.connect(self._on_decoded)
            worker.failed.connect(self._on_failed)
            worker.finished.connect(self._on_worker_finished)
            self._workers.add(worker)
            self._pending += 1
            worker.start()

        logger.info(f"{self.name.value}: decoding {len(batch)} file(s)")
        return len(batch)

    def remove(self, index: int) -> EncodedImage:
        """
        Remove the image at index and republish.

        Raises:
            IndexOutOfRangeException: if index is not in [0, count-1]
        """
        if not 0 <= index < len(self._images):
            raise IndexOutOfRangeException(index, len(self._images), slot=self.name.value)

        removed = self._images.pop(index)
        logger.debug(f"{self.name.value}: removed {removed.file_name} at {index}")
        self.images_changed.emit(list(self._images))
        return removed

    def wait_for_pending(self, timeout_ms: int = 30000) -> bool:
        """
        Block until running decodes finish and their results are applied.

        Returns:
            True if nothing is left in flight
        """
        for worker in list(self._workers):
            worker.wait(timeout_ms)
        QCoreApplication.processEvents()
        return self._pending == 0

    # =========================================================================
    # Worker signal handlers (run on the slot's thread)
    # =========================================================================

    @pyqtSlot(object)
    def _on_decoded(self, image: EncodedImage):
        self._pending -= 1
        self._images.append(image)
        logger.debug(
            f"{self.name.value}: decoded {image.file_name} "
            f"({len(self._images)}/{self._cap})"
        )
        self.images_changed.emit(list(self._images))

    @pyqtSlot(str, str)
    def _on_failed(self, file_name: str, message: str):
        self._pending -= 1
        logger.warning(f"{self.name.value}: failed to decode {file_name}: {message}")
        self.decode_failed.emit(file_name, message)

    @pyqtSlot()
    def _on_worker_finished(self):
        worker = self.sender()
        if worker is None:
            return
        # finished is emitted just before the thread exits
        worker.wait()
        self._workers.discard(worker)


class MediaIntake(QObject):
    """
    The primary and secondary media slots of a listing.

    Signals:
        images_changed(str, list): slot name and its full collection
        decode_failed(str, str, str): slot name, file name, reason
    """

    images_changed = pyqtSignal(str, list)
    decode_failed = pyqtSignal(str, str, str)

    def __init__(self, primary_cap: int = None, secondary_cap: int = None,
                 encoder: Encoder = encode_image, parent: Optional[QObject] = None):
        super().__init__(parent)
        caps = {
            MediaSlotName.PRIMARY: primary_cap or Config.PRIMARY_IMAGE_CAP,
            MediaSlotName.SECONDARY: secondary_cap or Config.SECONDARY_IMAGE_CAP,
        }
        self.slots: Dict[MediaSlotName, MediaSlot] = {}
        for name, cap in caps.items():
            slot = MediaSlot(name, cap, encoder, self)
            slot.images_changed.connect(
                lambda images, slot_name=name.value: self.images_changed.emit(slot_name, images)
            )
            slot.decode_failed.connect(
                lambda file_name, message, slot_name=name.value:
                    self.decode_failed.emit(slot_name, file_name, message)
            )
            self.slots[name] = slot

    def slot(self, name: Union[MediaSlotName, str]) -> MediaSlot:
        """Get a slot by enum member or name."""
        return self.slots[MediaSlotName(name)]

    def accept(self, name: Union[MediaSlotName, str], files: Iterable[Any]) -> int:
        return self.slot(name).accept(files)

    def remove(self, name: Union[MediaSlotName, str], index: int) -> EncodedImage:
        return self.slot(name).remove(index)

    def pending_count(self) -> int:
        return sum(slot.pending_count for slot in self.slots.values())

    def wait_for_pending(self, timeout_ms: int = 30000) -> bool:
        """Wait for in-flight decodes of every slot."""
        done = [slot.wait_for_pending(timeout_ms) for slot in self.slots.values()]
        return all(done)
