import math

import pytest

from animekit.timer_animation import Point
from animekit.zipper import CubicBezier, ZipperSlider


def test_line_length_equals_distance():
    line = CubicBezier.line(Point(0, 0), Point(0, 30))
    assert line.length() == pytest.approx(30)


def test_endpoints_at_zero_and_one():
    curve = CubicBezier(Point(0, 0), Point(10, 40), Point(50, 40), Point(60, 0))
    assert curve.point_at_percent(0) == Point(0, 0)
    assert curve.point_at_percent(1) == Point(60, 0)
    assert curve.point_at_percent(2) == Point(60, 0)


def test_percent_at_length_bounds():
    curve = CubicBezier(Point(0, 0), Point(10, 40), Point(50, 40), Point(60, 0))
    assert curve.percent_at_length(0) == 0.0
    assert curve.percent_at_length(-5) == 0.0
    assert curve.percent_at_length(curve.length() + 1) == 1.0


def test_line_round_trip_length_to_point():
    line = CubicBezier.line(Point(0, 0), Point(0, 100))
    point = line.point_at_percent(line.percent_at_length(40))
    assert point.y == pytest.approx(40, abs=1e-6)
    assert point.x == pytest.approx(0)


def test_curve_length_between_chord_and_control_polygon():
    curve = CubicBezier(Point(0, 0), Point(10, 40), Point(50, 40), Point(60, 0))
    chord = 60
    polygon = sum(
        math.hypot(b.x - a.x, b.y - a.y)
        for a, b in [(curve.p0, curve.p1), (curve.p1, curve.p2), (curve.p2, curve.p3)]
    )
    assert chord < curve.length() < polygon


def test_percent_at_length_is_monotonic():
    curve = CubicBezier(Point(0, 0), Point(10, 40), Point(50, 40), Point(60, 0))
    ts = [curve.percent_at_length(d) for d in range(0, int(curve.length()), 5)]
    assert ts == sorted(ts)


def test_set_offset_reshapes_opening():
    slider = ZipperSlider()
    before = slider.slider_y
    slider.set_offset(10)
    assert slider.slider_y == before - 10
    assert slider.rise == slider.slider_y - slider.end_y
    assert slider.spread == slider.rise / 2


def test_curves_are_mirrored_and_meet_at_slider():
    slider = ZipperSlider()
    right, left = slider.curves()
    assert right.p0 == left.p0 == Point(slider.slider_x, slider.slider_y)
    assert right.p3.x - slider.slider_x == pytest.approx(slider.slider_x - left.p3.x)
    assert right.p3.y == left.p3.y == slider.end_y


def test_slider_rect_centred_on_slider():
    slider = ZipperSlider()
    rect = slider.slider_rect()
    assert rect.x + rect.width / 2 == slider.slider_x
    assert rect.y == slider.slider_y
    assert (rect.width, rect.height) == (30, 10)


def test_no_straight_teeth_when_slider_at_anchor():
    assert ZipperSlider().straight_teeth() == []


def test_straight_teeth_follow_track():
    slider = ZipperSlider()
    slider.set_offset(20)
    teeth = slider.straight_teeth()
    assert len(teeth) == 3
    assert all(t.x == pytest.approx(slider.anchor_x - 5) for t in teeth)
    assert [t.y for t in teeth] == [slider.anchor_y - d - 1 for d in (0, 10, 20)]


def test_curve_teeth_spaced_by_rise():
    slider = ZipperSlider()
    right, left = slider.curves()
    teeth = slider.curve_teeth(right)
    assert len(teeth) == 31
    ys = [t.y for t in teeth]
    assert all(a - b == pytest.approx(10) for a, b in zip(ys, ys[1:]))
    assert teeth[0].x == pytest.approx(slider.slider_x - 5)
    assert all(t.x >= slider.slider_x - 5 - 1e-9 for t in teeth)
    assert all(t.x <= slider.slider_x - 5 + 1e-9 for t in slider.curve_teeth(left))


def test_no_curve_teeth_when_closed():
    slider = ZipperSlider()
    slider.set_offset(slider.slider_y - slider.end_y)
    right, _ = slider.curves()
    assert slider.curve_teeth(right) == []


def test_move_without_press_is_ignored():
    slider = ZipperSlider()
    slider.move(0, -100)
    assert slider.slider_y == 600


def test_drag_up_steps_slider():
    slider = ZipperSlider()
    before = slider.slider_y
    slider.press(0, 0)
    slider.move(0, -40)
    assert slider.slider_y == before - 10


def test_small_drag_does_not_step():
    slider = ZipperSlider()
    slider.press(0, 0)
    slider.move(0, -20)
    assert slider.slider_y == 600


def test_drag_down_at_anchor_is_held():
    slider = ZipperSlider()
    slider.press(0, 0)
    slider.move(0, 40)
    assert slider.slider_y == slider.anchor_y


def test_release_stops_drag():
    slider = ZipperSlider()
    slider.press(0, 0)
    slider.release()
    slider.move(0, -40)
    assert slider.slider_y == 600


def test_long_drag_up_stays_above_end():
    slider = ZipperSlider()
    slider.press(0, 0)
    y = 0
    for _ in range(100):
        y -= 40
        slider.move(0, y)
        assert slider.slider_y >= slider.end_y
    assert slider.slider_y == slider.end_y