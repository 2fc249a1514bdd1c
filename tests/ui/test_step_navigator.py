# -*- coding: utf-8 -*-
"""
Tests for Step Navigator.

Tests cover:
- Cursor stays in range for any step count
- Saturating next/previous
- Clamped jumps
- Context synchronization
"""

import random

import pytest

from ui.wizards.framework.step_navigator import StepNavigator
from ui.wizards.listing.listing_context import ListingContext


def make_navigator(count, context=None):
    return StepNavigator([f"Step {i}" for i in range(count)], context)


@pytest.mark.parametrize("count", [1, 2, 5, 8])
def test_cursor_never_leaves_range(count):
    navigator = make_navigator(count)
    rng = random.Random(count)

    for _ in range(200):
        move = rng.choice(("next", "previous", "goto"))
        if move == "next":
            navigator.next_step()
        elif move == "previous":
            navigator.previous_step()
        else:
            navigator.goto_step(rng.randint(-10, count + 10))
        assert 0 <= navigator.current_index <= count - 1


def test_next_saturates_at_last_step():
    navigator = make_navigator(3)

    assert navigator.next_step() is True
    assert navigator.next_step() is True
    assert navigator.next_step() is False
    assert navigator.current_index == 2
    assert navigator.is_last_step()


def test_previous_saturates_at_first_step():
    navigator = make_navigator(3)

    assert navigator.previous_step() is False
    assert navigator.current_index == 0


@pytest.mark.parametrize("index, expected", [(-1, 0), (0, 0), (4, 4), (5, 4), (100, 4)])
def test_goto_clamps(index, expected):
    navigator = make_navigator(5)

    navigator.goto_step(index)

    assert navigator.current_index == expected


def test_goto_same_index_is_idempotent(qtbot):
    navigator = make_navigator(5)
    navigator.goto_step(3)

    with qtbot.assertNotEmitted(navigator.step_changed):
        assert navigator.goto_step(3) is False

    assert navigator.current_index == 3


def test_step_changed_signal(qtbot):
    navigator = make_navigator(5)

    with qtbot.waitSignal(navigator.step_changed) as blocker:
        navigator.next_step()

    assert blocker.args == [0, 1]


def test_context_follows_cursor():
    context = ListingContext()
    navigator = make_navigator(5, context)

    navigator.goto_step(3)
    assert context.current_step_index == 3

    navigator.reset()
    assert context.current_step_index == 0


def test_titles_and_progress():
    navigator = make_navigator(5)

    assert navigator.get_step_count() == 5
    assert navigator.get_step_title() == "Step 0"
    assert navigator.get_step_title(9) == ""
    assert navigator.get_progress_percentage() == 0.0

    navigator.goto_step(4)
    assert navigator.get_progress_percentage() == 100.0


def test_single_step_wizard():
    navigator = make_navigator(1)

    assert navigator.is_last_step()
    assert navigator.get_progress_percentage() == 100.0


def test_empty_step_list_is_rejected():
    with pytest.raises(ValueError):
        StepNavigator([])
