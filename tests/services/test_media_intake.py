# -*- coding: utf-8 -*-
"""
Tests for Media Intake.

Tests cover:
- Batch admission against the slot cap
- Decode completion order
- Decode failures
- Removal by index
"""

import threading

import pytest

from models.listing import MediaSlotName
from services.exceptions import CapacityExceededException, IndexOutOfRangeException
from services.media_intake import MediaIntake, MediaSlot


@pytest.fixture
def slot(qtbot, fake_encoder):
    """Primary slot with the default cap of 5."""
    slot = MediaSlot(MediaSlotName.PRIMARY, 5, fake_encoder)
    yield slot
    slot.wait_for_pending()


def fill(qtbot, slot, names):
    slot.accept(names)
    qtbot.waitUntil(lambda: slot.pending_count == 0, timeout=5000)


class TestAdmission:
    """Test batch admission."""

    def test_accept_appends_every_file(self, qtbot, slot):
        fill(qtbot, slot, ["a.png", "b.png", "c.png"])

        assert slot.count() == 3
        assert sorted(image.file_name for image in slot.images) == ["a.png", "b.png", "c.png"]

    def test_batch_over_cap_is_rejected_whole(self, qtbot, slot):
        """Cap 5, 4 images held, batch of 2: rejected, collection unchanged."""
        fill(qtbot, slot, ["a", "b", "c", "d"])
        before = slot.images

        with pytest.raises(CapacityExceededException) as exc_info:
            slot.accept(["e", "f"])

        assert exc_info.value.cap == 5
        assert exc_info.value.slot == "primary"
        assert exc_info.value.requested == 2
        assert slot.count() == 4
        assert [image.image_id for image in slot.images] == [image.image_id for image in before]
        assert slot.pending_count == 0

    def test_batch_filling_exactly_to_cap_is_accepted(self, qtbot, slot):
        fill(qtbot, slot, ["a", "b", "c"])
        fill(qtbot, slot, ["d", "e"])

        assert slot.count() == 5
        assert slot.is_full()
        assert slot.remaining() == 0

    def test_empty_batch_starts_nothing(self, slot):
        assert slot.accept([]) == 0
        assert slot.pending_count == 0

    def test_pending_decodes_count_against_cap(self, qtbot, slot):
        release = threading.Event()

        def blocking_encoder(source):
            release.wait(5)
            return slot_encoder(source)

        slot_encoder = slot._encoder
        slot._encoder = blocking_encoder
        try:
            assert slot.accept(["a", "b", "c", "d", "e"]) == 5
            assert slot.count() == 0

            with pytest.raises(CapacityExceededException):
                slot.accept(["f"])
        finally:
            release.set()

        qtbot.waitUntil(lambda: slot.count() == 5, timeout=5000)
        assert slot.pending_count == 0

    def test_cap_must_be_positive(self, fake_encoder):
        with pytest.raises(ValueError):
            MediaSlot(MediaSlotName.SECONDARY, 0, fake_encoder)


class TestDecoding:
    """Test asynchronous decoding."""

    def test_order_follows_completion_time(self, qtbot, slot):
        fill(qtbot, slot, [("slow.png", 0.4), ("fast.png", 0.0)])

        assert [image.file_name for image in slot.images] == ["fast.png", "slow.png"]

    def test_every_completion_republishes_collection(self, qtbot, slot):
        published = []
        slot.images_changed.connect(lambda images: published.append(len(images)))

        fill(qtbot, slot, ["a", "b", "c"])

        assert published == [1, 2, 3]

    def test_failed_decode_is_reported_and_releases_capacity(self, qtbot, slot):
        with qtbot.waitSignal(slot.decode_failed, timeout=5000) as blocker:
            slot.accept(["bad.txt"])

        assert blocker.args[0] == "bad.txt"
        qtbot.waitUntil(lambda: slot.pending_count == 0, timeout=5000)
        assert slot.count() == 0
        assert slot.remaining() == 5

    def test_wait_for_pending_applies_results(self, slot):
        slot.accept(["a", "b"])

        assert slot.wait_for_pending() is True
        assert slot.count() == 2


class TestRemoval:
    """Test removal by index."""

    def test_remove_republishes(self, qtbot, slot):
        fill(qtbot, slot, ["a", "b"])
        first = slot.images[0]

        with qtbot.waitSignal(slot.images_changed) as blocker:
            removed = slot.remove(0)

        assert removed.image_id == first.image_id
        assert len(blocker.args[0]) == 1

    def test_remove_same_index_twice_never_noops(self, qtbot, slot):
        fill(qtbot, slot, ["a", "b"])
        second = slot.images[1]

        slot.remove(1)
        with pytest.raises(IndexOutOfRangeException):
            slot.remove(1)

        assert slot.count() == 1
        assert second.image_id not in [image.image_id for image in slot.images]

    def test_remove_shifts_later_images(self, qtbot, slot):
        fill(qtbot, slot, ["a", "b"])
        first, second = slot.images

        assert slot.remove(0).image_id == first.image_id
        assert slot.remove(0).image_id == second.image_id
        assert slot.count() == 0

    @pytest.mark.parametrize("index", [-1, 0, 3])
    def test_remove_from_empty_or_out_of_range(self, slot, index):
        with pytest.raises(IndexError):
            slot.remove(index)


class TestMediaIntake:
    """Test the two-slot intake."""

    def test_default_caps(self, fake_encoder):
        intake = MediaIntake(encoder=fake_encoder)

        assert intake.slot(MediaSlotName.PRIMARY).cap == 5
        assert intake.slot("secondary").cap == 8

    def test_slots_are_independent(self, qtbot, fake_encoder):
        intake = MediaIntake(encoder=fake_encoder)
        published = []
        intake.images_changed.connect(lambda name, images: published.append((name, len(images))))

        intake.accept("primary", ["a", "b", "c", "d", "e"])
        intake.accept("secondary", ["x"])
        intake.wait_for_pending()

        assert intake.slot("primary").count() == 5
        assert intake.slot("secondary").count() == 1
        assert ("secondary", 1) in published
        assert intake.pending_count() == 0

    def test_decode_failure_carries_slot_name(self, qtbot, fake_encoder):
        intake = MediaIntake(encoder=fake_encoder)

        with qtbot.waitSignal(intake.decode_failed, timeout=5000) as blocker:
            intake.accept("secondary", ["bad.gif"])
        intake.wait_for_pending()

        assert blocker.args[:2] == ["secondary", "bad.gif"]
