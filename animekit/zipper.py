"""Geometry of a zipper slider: two opening curves and teeth along them."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass
from functools import cached_property

from .timer_animation import Point, Rect

_SAMPLES = 256
_TOOTH_STEP = 10.0
_DRAG_THRESHOLD = 30
_DRAG_STEP = 10.0


@dataclass(frozen=True)
class CubicBezier:
    """A cubic Bezier segment from p0 to p3 with controls p1 and p2."""

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    @classmethod
    def line(cls, start: Point, end: Point) -> "CubicBezier":
        """A straight segment, parameterised uniformly along its length."""
        dx, dy = end.x - start.x, end.y - start.y
        return cls(
            start,
            Point(start.x + dx / 3, start.y + dy / 3),
            Point(start.x + 2 * dx / 3, start.y + 2 * dy / 3),
            end,
        )

    def point_at_percent(self, t: float) -> Point:
        """Point at curve parameter t, clamped to [0, 1]."""
        t = min(max(t, 0.0), 1.0)
        s = 1 - t
        a, b, c, d = s * s * s, 3 * s * s * t, 3 * s * t * t, t * t * t
        return Point(
            a * self.p0.x + b * self.p1.x + c * self.p2.x + d * self.p3.x,
            a * self.p0.y + b * self.p1.y + c * self.p2.y + d * self.p3.y,
        )

    @cached_property
    def _cumulative(self) -> list[float]:
        points = [self.point_at_percent(i / _SAMPLES) for i in range(_SAMPLES + 1)]
        lengths = [0.0]
        for a, b in zip(points, points[1:]):
            lengths.append(lengths[-1] + math.hypot(b.x - a.x, b.y - a.y))
        return lengths

    def length(self) -> float:
        return self._cumulative[-1]

    def percent_at_length(self, distance: float) -> float:
        """Curve parameter at which the arc length from p0 reaches ``distance``."""
        lengths = self._cumulative
        total = lengths[-1]
        if distance <= 0 or total <= 0:
            return 0.0
        if distance >= total:
            return 1.0
        index = bisect.bisect_left(lengths, distance)
        low, high = lengths[index - 1], lengths[index]
        fraction = (distance - low) / (high - low) if high > low else 0.0
        return (index - 1 + fraction) / _SAMPLES


class ZipperSlider:
    """A slider pulled along a vertical track; above it the zip opens into two curves.

    Vertical drags move the slider in steps of ten; it is held between the
    curves' end height and its anchor.
    """

    def __init__(self) -> None:
        self.end_y = 310.0
        self.spread = 150.0
        self.rise = 300.0
        self.slider_x = 600.0
        self.slider_y = 600.0
        self.anchor_x = 600.0
        self.anchor_y = 600.0
        self._dragging = False
        self._last = (0, 0)
        self._total = (0, 0)

    def set_offset(self, offset: float) -> None:
        """Move the slider up by ``offset`` and reshape the opening."""
        self.slider_y -= offset
        self.spread = (self.slider_y - self.end_y) / 2
        self.rise = self.slider_y - self.end_y

    def press(self, x: int, y: int) -> None:
        self._dragging = True
        self._last = (x, y)

    def release(self) -> None:
        self._dragging = False

    def move(self, x: int, y: int) -> None:
        """Accumulate drag motion; each threshold crossed steps the slider once."""
        if not self._dragging:
            return
        tx = self._total[0] + x - self._last[0]
        ty = self._total[1] + y - self._last[1]
        self._total = (tx, ty)

        if ty > _DRAG_THRESHOLD:
            self.set_offset(-_DRAG_STEP)
            if self.slider_y > self.anchor_y - _DRAG_STEP:
                self.slider_y = self.anchor_y
        elif ty < -_DRAG_THRESHOLD:
            self.set_offset(_DRAG_STEP)
            if self.slider_y < self.end_y + _DRAG_STEP:
                self.slider_y = self.end_y
        else:
            return
        self._total = (0, 0)
        self._last = (x, y)

    def curves(self) -> tuple[CubicBezier, CubicBezier]:
        """The right and left opening curves, from the slider up to the end height."""
        x, y = self.slider_x, self.slider_y

        def side(sign: int) -> CubicBezier:
            return CubicBezier(
                Point(x, y),
                Point(x + sign * self.spread * 0.05, y - self.rise * 0.1),
                Point(x + sign * self.spread * 0.15, y - self.rise * 0.5),
                Point(x + sign * self.spread, self.end_y),
            )

        return side(1), side(-1)

    def _track(self) -> CubicBezier:
        return CubicBezier.line(
            Point(self.anchor_x, self.anchor_y), Point(self.slider_x, self.slider_y)
        )

    def straight_teeth(self) -> list[Rect]:
        """Teeth along the closed part, from the anchor up to the slider."""
        track = self._track()
        total = track.length()
        if total <= 0:
            return []
        teeth = []
        steps = math.floor(total / _TOOTH_STEP)
        for k in range(steps + 1):
            d = k * _TOOTH_STEP
            pos = track.point_at_percent(track.percent_at_length(d))
            teeth.append(Rect(pos.x - 5, self.anchor_y - d - 1, 10, 2))
        return teeth

    def curve_teeth(self, curve: CubicBezier) -> list[Rect]:
        """Teeth along an opening curve, one every ten units of rise."""
        if self.rise <= 0:
            return []
        teeth = []
        steps = math.floor(self.rise / _TOOTH_STEP)
        for k in range(steps + 1):
            d = k * _TOOTH_STEP
            pos = curve.point_at_percent(curve.percent_at_length(d))
            teeth.append(Rect(pos.x - 5, self.slider_y - d - 2, 10, 2))
        return teeth

    def slider_rect(self) -> Rect:
        return Rect(self.slider_x - 15, self.slider_y, 30, 10)