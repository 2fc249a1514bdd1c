# -*- coding: utf-8 -*-
"""
Submission service - publishes a finished listing.

There is no backend yet: publishing is simulated with a fixed delay and
always succeeds unless a custom publisher raises.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Optional
import uuid

from PyQt5.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from app.config import Config
from services.exceptions import SubmissionFailedException, WizardBusyException
from utils.logger import get_logger

logger = get_logger(__name__)

Publisher = Callable[[Dict[str, Any]], Dict[str, Any]]


def simulate_publish(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Stand-in publish call returning what a listing API would."""
    return {
        "listing_id": str(uuid.uuid4()),
        "published_at": datetime.now().isoformat(),
        "status": payload.get("status", "active"),
        "title": payload.get("general", {}).get("title", ""),
    }


class SubmissionService(QObject):
    """
    Runs one publish call at a time after a fixed latency.

    Signals:
        succeeded(dict): publisher response
        failed(str): error message
    """

    succeeded = pyqtSignal(dict)
    failed = pyqtSignal(str)

    def __init__(self, delay_ms: Optional[int] = None, publisher: Publisher = None,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.delay_ms = Config.SUBMIT_DELAY_MS if delay_ms is None else delay_ms
        self._publisher = publisher or simulate_publish
        self._payload: Optional[Dict[str, Any]] = None
        self._busy = False

    @property
    def is_busy(self) -> bool:
        return self._busy

    def publish(self, payload: Dict[str, Any]) -> None:
        """
        Schedule a publish call.

        Raises:
            WizardBusyException: if a publish is already in flight
        """
        if self._busy:
            raise WizardBusyException("submit")

        self._busy = True
        self._payload = payload
        logger.info(f"Publishing listing in {self.delay_ms} ms")
        QTimer.singleShot(self.delay_ms, self._complete)

    @pyqtSlot()
    def _complete(self):
        payload, self._payload = self._payload, None
        try:
            response = self._publisher(payload)
        except SubmissionFailedException as e:
            self._busy = False
            logger.error(f"Publish failed: {e.message}")
            self.failed.emit(e.message)
            return
        except Exception as e:
            self._busy = False
            logger.error(f"Publish failed: {e}", exc_info=True)
            self.failed.emit(str(e))
            return

        self._busy = False
        logger.info(f"Listing published: {response.get('listing_id')}")
        self.succeeded.emit(response or {})
