import math

import pytest

from animekit.temperature_dial import (
    SHADOW_HOVER_BLUR,
    SHADOW_REST_BLUR,
    AnimationState,
    TemperatureDial,
    color_for_angle,
    interpolate_color,
)
from animekit.timer_animation import Color


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def dial(clock):
    return TemperatureDial(clock)


def test_knob_starts_below_centre(dial):
    assert dial.angle_in_degrees() == pytest.approx(90.0)
    assert dial.circle_center.x == pytest.approx(dial.center.x)
    assert dial.circle_center.y > dial.center.y


def test_knob_lies_on_ring(dial):
    distance = math.hypot(
        dial.circle_center.x - dial.center.x, dial.circle_center.y - dial.center.y
    )
    assert distance == pytest.approx(dial.radius)


def test_drag_moves_knob_to_pointer_direction(dial):
    dial.press(dial.circle_center.x, dial.circle_center.y)
    assert dial.dragging
    dial.move(dial.center.x + 50, dial.center.y)
    assert dial.angle_in_degrees() == pytest.approx(0.0, abs=1e-9)
    assert dial.circle_center.x == pytest.approx(dial.center.x + dial.radius)
    dial.move(dial.center.x, dial.center.y - 50)
    assert dial.angle_in_degrees() == pytest.approx(270.0)


def test_press_far_from_knob_does_not_grab(dial):
    before = dial.circle_center
    dial.press(dial.center.x, dial.center.y)
    assert not dial.dragging
    dial.move(dial.center.x + 50, dial.center.y)
    assert dial.circle_center == before


def test_release_ends_drag(dial):
    dial.press(dial.circle_center.x, dial.circle_center.y)
    dial.release()
    before = dial.circle_center
    dial.move(dial.center.x + 50, dial.center.y)
    assert not dial.dragging
    assert dial.circle_center == before


def test_interpolate_color_endpoints():
    start = Color(10, 20, 30, 40)
    end = Color(200, 100, 50, 255)
    assert interpolate_color(start, end, 0.0) == start
    assert interpolate_color(start, end, 1.0) == end


def test_interpolate_color_stays_between_endpoints():
    start = Color(0, 255, 10, 0)
    end = Color(255, 0, 200, 255)
    mid = interpolate_color(start, end, 0.37)
    assert 0 <= mid.red <= 255
    assert 0 <= mid.green <= 255
    assert 10 <= mid.blue <= 200


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0, Color(235, 255, 188)),
        (120, Color(255, 245, 188)),
        (240, Color(255, 216, 188)),
        (360, Color(235, 255, 188)),
    ],
)
def test_color_for_angle_anchors(angle, expected):
    assert color_for_angle(angle) == expected


def test_color_for_angle_truncates_fraction():
    assert color_for_angle(119.9) == color_for_angle(119)


def test_enter_emits_execute_and_deepens_shadow(dial, clock):
    seen = []
    dial.execute_animation_signal.connect(seen.append)
    dial.enter()
    assert seen == [AnimationState.EXECUTE]
    assert not dial.readout_live
    clock.now += 400
    dial.tick()
    assert dial.shadow.blur_radius == SHADOW_HOVER_BLUR


def test_leave_restores_shadow(dial, clock):
    seen = []
    dial.execute_animation_signal.connect(seen.append)
    dial.enter()
    clock.now += 400
    dial.tick()
    dial.leave()
    clock.now += 400
    dial.tick()
    assert seen == [AnimationState.EXECUTE, AnimationState.RESTORE]
    assert dial.shadow.blur_radius == SHADOW_REST_BLUR


def test_shadow_halfway_between(dial, clock):
    dial.enter()
    clock.now += 200
    dial.tick()
    assert SHADOW_REST_BLUR < dial.shadow.blur_radius < SHADOW_HOVER_BLUR


def test_readout_frozen_after_hover(dial):
    first = dial.readout()
    dial.enter()
    dial.press(dial.circle_center.x, dial.circle_center.y)
    dial.release()
    dial.readout_live = False
    dial.previous_angle = 0.0
    dial.resize(dial.width, dial.height)
    assert dial.readout() == first


def test_resize_keeps_angle_and_ratio(dial):
    ratio = dial.radius / dial.height
    dial.press(dial.circle_center.x, dial.circle_center.y)
    dial.move(dial.center.x + 50, dial.center.y + 50)
    dial.release()
    angle = dial.angle_in_degrees()
    dial.resize(200, 200)
    assert dial.center.x == pytest.approx(dial.width / 2)
    assert dial.radius / dial.height == pytest.approx(ratio)
    assert dial.angle_in_degrees() == pytest.approx(angle)
    distance = math.hypot(
        dial.circle_center.x - dial.center.x, dial.circle_center.y - dial.center.y
    )
    assert distance == pytest.approx(dial.radius)


def test_shadow_scale_notifies_only_on_change(dial):
    calls = []
    dial.shadow_scale_changed.connect(lambda: calls.append(dial.shadow_scale))
    dial.shadow_scale = 7
    dial.shadow_scale = 7
    assert calls == [7]