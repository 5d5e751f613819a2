"""A field of vertical wavy lines driven by noise and pushed by the cursor."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .noise import Noise
from .timer_animation import Color, Point


@dataclass
class WaveConfig:
    line_color: Color = field(default_factory=lambda: Color(255, 255, 255))
    wave_speed_x: float = 0.02
    wave_speed_y: float = 0.01
    wave_amp_x: float = 40.0
    wave_amp_y: float = 20.0
    x_gap: float = 12.0
    y_gap: float = 36.0
    friction: float = 0.90
    tension: float = 0.01
    max_cursor_move: float = 120.0


@dataclass
class WavePoint:
    """A rest position with its noise offset and cursor spring state."""

    x: float
    y: float
    wave_x: float = 0.0
    wave_y: float = 0.0
    cursor_x: float = 0.0
    cursor_y: float = 0.0
    cursor_vx: float = 0.0
    cursor_vy: float = 0.0


@dataclass
class MouseState:
    x: float = -10.0
    y: float = 0.0
    lx: float = 0.0
    ly: float = 0.0
    sx: float = 0.0
    sy: float = 0.0
    v: float = 0.0
    vs: float = 0.0
    a: float = 0.0
    set: bool = False


def _round_tenth(value: float) -> float:
    scaled = value * 10
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 10.0


class WaveField:
    """Geometry and physics of the wave lines; the host draws :meth:`paths`."""

    def __init__(
        self,
        width: float,
        height: float,
        config: Optional[WaveConfig] = None,
        noise: Optional[Noise] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.config = config if config is not None else WaveConfig()
        self.noise = noise if noise is not None else Noise(random.random())
        self.mouse = MouseState()
        self.lines: list[list[WavePoint]] = []
        self.set_lines()

    def configure(self, **changes: Any) -> None:
        """Replace config fields; a change of gap lays the lines out again."""
        self.config = replace(self.config, **changes)
        if "x_gap" in changes or "y_gap" in changes:
            self.set_lines()

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.set_lines()

    def set_lines(self) -> None:
        """Lay out a grid of points wider and taller than the area, centred on it."""
        cfg = self.config
        total_lines = math.ceil((self.width + 200) / cfg.x_gap)
        total_points = math.ceil((self.height + 30) / cfg.y_gap)
        x_start = (self.width - cfg.x_gap * total_lines) / 2.0
        y_start = (self.height - cfg.y_gap * total_points) / 2.0
        self.lines = [
            [
                WavePoint(x_start + cfg.x_gap * i, y_start + cfg.y_gap * j)
                for j in range(total_points + 1)
            ]
            for i in range(total_lines + 1)
        ]

    def update_mouse(self, x: float, y: float) -> None:
        mouse = self.mouse
        mouse.x = x
        mouse.y = y
        if not mouse.set:
            mouse.sx = mouse.lx = x
            mouse.sy = mouse.ly = y
            mouse.set = True

    def tick(self, time_ms: float) -> None:
        """Smooth the cursor, measure its speed and direction, then move the points."""
        mouse = self.mouse
        mouse.sx += (mouse.x - mouse.sx) * 0.1
        mouse.sy += (mouse.y - mouse.sy) * 0.1

        dx = mouse.x - mouse.lx
        dy = mouse.y - mouse.ly
        distance = math.hypot(dx, dy)
        mouse.v = distance
        mouse.vs += (distance - mouse.vs) * 0.1
        mouse.vs = min(100.0, mouse.vs)
        mouse.lx = mouse.x
        mouse.ly = mouse.y
        mouse.a = math.atan2(dy, dx)

        self.move_points(time_ms)

    def move_points(self, time_ms: float) -> None:
        cfg = self.config
        mouse = self.mouse
        limit = cfg.max_cursor_move
        reach = max(175.0, mouse.vs)
        push_x = math.cos(mouse.a) * reach * mouse.vs * 0.00065
        push_y = math.sin(mouse.a) * reach * mouse.vs * 0.00065

        for point in (p for line in self.lines for p in line):
            move = self.noise.perlin2(
                (point.x + time_ms * cfg.wave_speed_x) * 0.002,
                (point.y + time_ms * cfg.wave_speed_y) * 0.0015,
            ) * 12
            point.wave_x = math.cos(move) * cfg.wave_amp_x
            point.wave_y = math.sin(move) * cfg.wave_amp_y

            dist = math.hypot(point.x - mouse.sx, point.y - mouse.sy)
            if dist < reach:
                strength = math.cos(dist * 0.001) * (1.0 - dist / reach)
                point.cursor_vx += push_x * strength
                point.cursor_vy += push_y * strength

            point.cursor_vx += (0.0 - point.cursor_x) * cfg.tension
            point.cursor_vy += (0.0 - point.cursor_y) * cfg.tension
            point.cursor_vx *= cfg.friction
            point.cursor_vy *= cfg.friction
            point.cursor_x += point.cursor_vx * 2
            point.cursor_y += point.cursor_vy * 2

            point.cursor_x = min(limit, max(-limit, point.cursor_x))
            point.cursor_y = min(limit, max(-limit, point.cursor_y))

    def moved(self, point: WavePoint, with_cursor: bool = True) -> Point:
        """Displayed position of a point, rounded to a tenth of a pixel."""
        x = point.x + point.wave_x + (point.cursor_x if with_cursor else 0)
        y = point.y + point.wave_y + (point.cursor_y if with_cursor else 0)
        return Point(_round_tenth(x), _round_tenth(y))

    def paths(self) -> list[list[Point]]:
        """Polylines to draw: a start point, then every point, the last one without cursor offset."""
        result = []
        for line in self.lines:
            if not line:
                continue
            last = len(line) - 1
            path = [self.moved(line[0], False)]
            path.extend(self.moved(p, idx != last) for idx, p in enumerate(line))
            result.append(path)
        return result