import math

import pytest

from animekit.noise import Noise
from animekit.timer_animation import Point
from animekit.waves import WaveConfig, WaveField, WavePoint


def make_field(width=100, height=70, **config):
    return WaveField(width, height, WaveConfig(**config), Noise(0))


def test_grid_dimensions():
    field = make_field(x_gap=10, y_gap=10)
    assert len(field.lines) == 31
    assert all(len(line) == 11 for line in field.lines)


def test_grid_is_centred_horizontally_and_vertically():
    field = make_field(width=333, height=211)
    first, last = field.lines[0], field.lines[-1]
    assert first[0].x + last[0].x == pytest.approx(field.width)
    assert first[0].y + first[-1].y == pytest.approx(field.height)


def test_grid_spacing_matches_gaps():
    field = make_field()
    xs = [line[0].x for line in field.lines]
    ys = [p.y for p in field.lines[0]]
    assert all(b - a == pytest.approx(field.config.x_gap) for a, b in zip(xs, xs[1:]))
    assert all(b - a == pytest.approx(field.config.y_gap) for a, b in zip(ys, ys[1:]))


def test_resize_relays_lines():
    field = make_field(width=100, height=70)
    field.resize(400, 300)
    assert field.lines[0][0].x + field.lines[-1][0].x == pytest.approx(400)


def test_configure_gap_relays_lines():
    field = make_field()
    before = len(field.lines)
    field.configure(x_gap=field.config.x_gap * 2)
    assert len(field.lines) < before
    assert field.lines[1][0].x - field.lines[0][0].x == pytest.approx(field.config.x_gap)


def test_first_mouse_update_sets_smoothed_and_last():
    field = make_field()
    field.update_mouse(50, 60)
    assert (field.mouse.sx, field.mouse.sy, field.mouse.lx, field.mouse.ly) == (50, 60, 50, 60)
    assert field.mouse.set
    field.update_mouse(80, 90)
    assert (field.mouse.x, field.mouse.y) == (80, 90)
    assert (field.mouse.sx, field.mouse.lx) == (50, 50)


def test_tick_tracks_mouse_velocity_and_angle():
    field = make_field()
    field.update_mouse(0, 0)
    field.update_mouse(100, 0)
    field.tick(0)
    assert field.mouse.v == pytest.approx(100)
    assert field.mouse.a == pytest.approx(0.0)
    assert field.mouse.sx == pytest.approx(10)
    assert field.mouse.lx == 100


def test_wave_offset_lies_on_amplitude_ellipse():
    field = make_field()
    field.tick(1234)
    cfg = field.config
    for line in field.lines:
        for p in line:
            value = (p.wave_x / cfg.wave_amp_x) ** 2 + (p.wave_y / cfg.wave_amp_y) ** 2
            assert value == pytest.approx(1.0)


def test_still_mouse_far_away_leaves_cursor_at_rest():
    field = make_field()
    field.update_mouse(100000, 100000)
    for t in range(0, 200, 20):
        field.tick(t)
    assert all(p.cursor_x == 0 and p.cursor_y == 0 for line in field.lines for p in line)


def test_moving_mouse_pushes_points_within_limit():
    field = make_field(max_cursor_move=0.5)
    field.update_mouse(0, 0)
    for step in range(30):
        field.update_mouse(50 + (step % 2) * 80, 35 + (step % 3) * 40)
        field.tick(step * 16)
    offsets = [(p.cursor_x, p.cursor_y) for line in field.lines for p in line]
    assert all(abs(x) <= 0.5 and abs(y) <= 0.5 for x, y in offsets)
    assert any(x != 0 or y != 0 for x, y in offsets)


def test_moved_rounds_to_a_tenth_and_optionally_adds_cursor():
    field = make_field()
    point = WavePoint(x=10.04, y=20.0, wave_x=1.0, wave_y=-2.0, cursor_x=5.0, cursor_y=5.0)
    assert field.moved(point, False) == Point(11.0, 18.0)
    with_cursor = field.moved(point)
    assert with_cursor.x == pytest.approx(16.0)
    assert with_cursor.y == pytest.approx(23.0)


def test_paths_shape_and_endpoints():
    field = make_field()
    field.update_mouse(50, 35)
    field.update_mouse(70, 35)
    field.tick(500)
    paths = field.paths()
    assert len(paths) == len(field.lines)
    for path, line in zip(paths, field.lines):
        assert len(path) == len(line) + 1
        assert path[0] == field.moved(line[0], False)
        assert path[-1] == field.moved(line[-1], False)
        assert path[1] == field.moved(line[0], True)


def test_paths_values_are_rounded():
    field = make_field()
    field.tick(777)
    for path in field.paths():
        for p in path:
            assert math.isclose(p.x * 10, round(p.x * 10), abs_tol=1e-6)