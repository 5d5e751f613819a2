"""A round dial whose knob is dragged around a ring to pick an angle shown as a temperature."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from .timer_animation import Color, Direction, Point, Rect, Signal, TimerAnimation

Clock = Optional[Callable[[], float]]

DIAL_SIZE = 260
RING_RATIO = 0.41
FONT_RATIO = 0.1
KNOB_RADIUS = 9
GRAB_DISTANCE = 20
SHADOW_DURATION_MS = 400
SHADOW_REST_BLUR = 50
SHADOW_HOVER_BLUR = 150

_COOL = Color(235, 255, 188)
_MILD = Color(255, 245, 188)
_WARM = Color(255, 216, 188)


class AnimationState(Enum):
    EXECUTE = "execute"
    RESTORE = "restore"


def interpolate_color(start: Color, end: Color, t: float) -> Color:
    """Colour a fraction ``t`` of the way from ``start`` to ``end``, truncated to integers."""

    def mix(a: int, b: int) -> int:
        return int(a + t * (b - a))

    return Color(
        mix(start.red, end.red),
        mix(start.green, end.green),
        mix(start.blue, end.blue),
        mix(start.alpha, end.alpha),
    )


def color_for_angle(angle: float) -> Color:
    """Glow colour for a whole-degree angle: cool, mild, warm and back round the ring."""
    angle = int(angle)
    if angle <= 120:
        return interpolate_color(_COOL, _MILD, angle / 120.0)
    if angle <= 240:
        return interpolate_color(_MILD, _WARM, (angle - 120) / 120.0)
    return interpolate_color(_WARM, _COOL, (angle - 240) / 120.0)


@dataclass
class DropShadow:
    offset: Point = field(default_factory=lambda: Point(0, 19))
    blur_radius: int = SHADOW_REST_BLUR
    color: Color = field(default_factory=lambda: Color(213, 224, 254))


class TemperatureDial:
    """Dial state: knob position on its ring, the angle readout and the hover shadow.

    The host calls :meth:`tick` while the shadow animation runs and draws from
    the geometry held in the attributes.
    """

    def __init__(self, clock: Clock = None) -> None:
        self.pos = Point(0, 0)
        self.width = DIAL_SIZE
        self.height = DIAL_SIZE
        self.window = Rect(0, 0, DIAL_SIZE, DIAL_SIZE)
        self.center = Point(DIAL_SIZE / 2, DIAL_SIZE / 2)
        self.radius = DIAL_SIZE * RING_RATIO
        self.circle_center = Point(self.center.x, self.center.y + self.radius)
        self.previous_angle = math.pi / 2
        self.font_size = int(DIAL_SIZE * FONT_RATIO)
        self.knob_radius = KNOB_RADIUS
        self.dragging = False
        self.readout_live = True
        self.angle = self.angle_in_degrees()
        self.integer_part = ""
        self.decimal_part = ""
        self._shadow_scale = 0

        self.shadow_scale_changed = Signal()
        self.execute_animation_signal = Signal()

        self.shadow = DropShadow()
        self.shadow_animation = TimerAnimation(self.shadow, "blur_radius", clock)
        self.shadow_animation.duration = SHADOW_DURATION_MS
        self.shadow_animation.start_value = SHADOW_REST_BLUR
        self.shadow_animation.end_value = SHADOW_HOVER_BLUR
        self.shadow_animation.started.connect(self._on_shadow_started)

    def _on_shadow_started(self) -> None:
        self.readout_live = False
        self.previous_angle = math.atan2(
            self.circle_center.y - self.center.y, self.circle_center.x - self.center.x
        )

    @property
    def geometry(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, self.width, self.height)

    @geometry.setter
    def geometry(self, rect: Rect) -> None:
        self.pos = Point(rect.x, rect.y)
        if (rect.width, rect.height) != (self.width, self.height):
            self.resize(rect.width, rect.height)

    @property
    def shadow_scale(self) -> int:
        return self._shadow_scale

    @shadow_scale.setter
    def shadow_scale(self, value: int) -> None:
        if self._shadow_scale == value:
            return
        self._shadow_scale = value
        self.shadow_scale_changed.emit()

    @property
    def glow_color(self) -> Color:
        return color_for_angle(self.angle_in_degrees())

    def angle_in_degrees(self) -> float:
        """Knob angle about the centre in [0, 360), clockwise from the right."""
        dx = self.circle_center.x - self.center.x
        dy = self.circle_center.y - self.center.y
        degrees = math.degrees(math.atan2(dy, dx))
        if degrees < 0:
            degrees += 360.0
        return degrees

    def _place_knob(self) -> None:
        self.circle_center = Point(
            self.center.x + self.radius * math.cos(self.previous_angle),
            self.center.y + self.radius * math.sin(self.previous_angle),
        )

    def press(self, x: float, y: float) -> None:
        """A left press close enough to the knob grabs it."""
        if math.hypot(x - self.circle_center.x, y - self.circle_center.y) <= GRAB_DISTANCE:
            self.dragging = True
            self.readout_live = True

    def move(self, x: float, y: float) -> None:
        """While grabbed, the knob follows the pointer's direction from the centre."""
        if not self.dragging:
            return
        self.previous_angle = math.atan2(y - self.center.y, x - self.center.x)
        self._place_knob()

    def release(self) -> None:
        self.dragging = False

    def resize(self, width: float, height: float) -> None:
        """Refit the ring to a new size, keeping the knob's angle."""
        self.width = width
        self.height = height
        self.window = Rect(0, 0, width, height)
        self.center = Point(width / 2, height / 2)
        self.radius = height * RING_RATIO
        self._place_knob()
        self.font_size = int(height * FONT_RATIO)

    def enter(self) -> None:
        """The pointer entered: ask for the zoom and deepen the shadow."""
        self.execute_animation_signal.emit(AnimationState.EXECUTE)
        self.shadow_animation.set_direction(Direction.FORWARD)
        self.shadow_animation.start()

    def leave(self) -> None:
        """The pointer left: ask to zoom back and soften the shadow."""
        self.execute_animation_signal.emit(AnimationState.RESTORE)
        self.shadow_animation.set_direction(Direction.BACKWARD)
        self.shadow_animation.start()

    def readout(self) -> tuple[str, str]:
        """Integer and tenths digits to show.

        While the readout is live the digits come from the angle recorded at the
        previous call, and the angle is then refreshed, so they trail by one call.
        """
        if self.readout_live:
            whole = int(self.angle)
            self.integer_part = str(whole)
            self.decimal_part = f"{self.angle - whole:.1f}"[2:]
            self.angle = self.angle_in_degrees()
        return self.integer_part, self.decimal_part

    def tick(self) -> None:
        self.shadow_animation.tick()