# -*- coding: utf-8 -*-
"""
Tests for Submission Service.
"""

import pytest

from services.exceptions import SubmissionFailedException, WizardBusyException
from services.submission_service import SubmissionService, simulate_publish


PAYLOAD = {"general": {"title": "Lamp"}, "status": "active"}


def test_simulated_publish_echoes_listing():
    response = simulate_publish(PAYLOAD)

    assert response["title"] == "Lamp"
    assert response["status"] == "active"
    assert response["listing_id"]


def test_publish_succeeds_after_delay(qtbot):
    service = SubmissionService(delay_ms=10)

    with qtbot.waitSignal(service.succeeded, timeout=2000) as blocker:
        service.publish(PAYLOAD)
        assert service.is_busy is True

    assert blocker.args[0]["title"] == "Lamp"
    assert service.is_busy is False


def test_second_publish_while_busy_is_rejected(qtbot):
    service = SubmissionService(delay_ms=10)

    with qtbot.waitSignal(service.succeeded, timeout=2000):
        service.publish(PAYLOAD)
        with pytest.raises(WizardBusyException):
            service.publish(PAYLOAD)


def test_publisher_failure_returns_to_idle(qtbot):
    def failing_publisher(payload):
        raise SubmissionFailedException("Network unreachable")

    service = SubmissionService(delay_ms=10, publisher=failing_publisher)

    with qtbot.waitSignal(service.failed, timeout=2000) as blocker:
        service.publish(PAYLOAD)

    assert blocker.args == ["Network unreachable"]
    assert service.is_busy is False


def test_unexpected_publisher_error_is_reported(qtbot):
    def broken_publisher(payload):
        raise RuntimeError("boom")

    service = SubmissionService(delay_ms=0, publisher=broken_publisher)

    with qtbot.waitSignal(service.failed, timeout=2000) as blocker:
        service.publish(PAYLOAD)

    assert blocker.args == ["boom"]
