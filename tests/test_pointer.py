"""
Tests for Pointer Tracker
"""

import pytest
import pygame
from smokefield.core.constants import POINTER_OFFSCREEN
from smokefield.core.pointer import PointerTracker


@pytest.fixture
def tracker():
    return PointerTracker(pygame.Rect(100, 50, 400, 300))


def test_starts_inactive_offscreen(tracker):
    assert not tracker.active
    assert tracker.position == (POINTER_OFFSCREEN, POINTER_OFFSCREEN)
    assert tracker.speed == 0.0


def test_move_converts_to_surface_coordinates(tracker):
    tracker.move(150, 80)
    assert tracker.position == (50, 30)
    assert tracker.active


def test_first_sample_has_no_velocity(tracker):
    tracker.move(150, 80)
    assert tracker.velocity == (0.0, 0.0)


def test_velocity_is_smoothed_delta(tracker):
    tracker.move(150, 80)
    tracker.move(160, 75)
    assert tracker.vx == pytest.approx(6.0)
    assert tracker.vy == pytest.approx(-3.0)
    assert tracker.speed == pytest.approx((36 + 9) ** 0.5)


def test_decay(tracker):
    tracker.move(150, 80)
    tracker.move(200, 80)
    tracker.decay()
    assert tracker.vx == pytest.approx(30.0 * 0.82)


def test_leave_resets(tracker):
    tracker.move(150, 80)
    tracker.move(200, 80)
    tracker.leave()
    assert not tracker.active
    assert tracker.velocity == (0.0, 0.0)
    assert tracker.x == POINTER_OFFSCREEN


def test_moving_outside_bounded_region_leaves(tracker):
    tracker.move(150, 80)
    tracker.move(10, 10)
    assert not tracker.active


def test_unbounded_tracker_follows_everywhere():
    tracker = PointerTracker(pygame.Rect(0, 0, 100, 100), bounded=False)
    tracker.move(500, 500)
    assert tracker.active
    assert tracker.position == (500, 500)


def test_set_rect_changes_origin(tracker):
    tracker.set_rect(pygame.Rect(0, 0, 800, 600))
    tracker.move(150, 80)
    assert tracker.position == (150, 80)


def test_handle_mouse_motion_event(tracker):
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(300, 200), rel=(0, 0), buttons=(0, 0, 0))
    assert tracker.handle_event(event, (800, 600))
    assert tracker.position == (200, 150)


def test_handle_touch_event(tracker):
    event = pygame.event.Event(pygame.FINGERMOTION, x=0.5, y=0.5, dx=0.0, dy=0.0,
                               touch_id=0, finger_id=0)
    assert tracker.handle_event(event, (800, 600))
    assert tracker.position == (300, 250)


def test_handle_window_leave(tracker):
    tracker.move(150, 80)
    assert tracker.handle_event(pygame.event.Event(pygame.WINDOWLEAVE), (800, 600))
    assert not tracker.active


def test_ignores_other_events(tracker):
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)
    assert not tracker.handle_event(event, (800, 600))


def test_touch_echo_keeps_finger_velocity(tracker):
    window = (800, 600)
    tracker.handle_event(pygame.event.Event(pygame.FINGERMOTION, x=0.25, y=0.25, dx=0.0, dy=0.0,
                                            touch_id=0, finger_id=0), window)
    tracker.handle_event(pygame.event.Event(pygame.FINGERMOTION, x=0.3, y=0.25, dx=0.05, dy=0.0,
                                            touch_id=0, finger_id=0), window)
    assert tracker.vx == pytest.approx(40 * 0.6)

    echo = pygame.event.Event(pygame.MOUSEMOTION, pos=(240, 150), rel=(40, 0),
                              buttons=(1, 0, 0), touch=True)
    assert not tracker.handle_event(echo, window)
    assert tracker.vx == pytest.approx(40 * 0.6)


def test_repeated_sample_keeps_velocity(tracker):
    tracker.move(150, 80)
    tracker.move(160, 80)
    tracker.move(160, 80)
    assert tracker.vx == pytest.approx(6.0)


def test_mouse_focus_loss_leaves(tracker):
    tracker.move(150, 80)
    event = pygame.event.Event(pygame.ACTIVEEVENT, gain=0, state=pygame.APPMOUSEFOCUS)
    assert tracker.handle_event(event, (800, 600))
    assert not tracker.active


def test_mouse_focus_gain_is_ignored(tracker):
    tracker.move(150, 80)
    event = pygame.event.Event(pygame.ACTIVEEVENT, gain=1, state=pygame.APPMOUSEFOCUS)
    assert not tracker.handle_event(event, (800, 600))
    assert tracker.active
