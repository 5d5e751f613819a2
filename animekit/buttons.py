"""Animated buttons: a ripple that spreads from the click, and a rising wave fill."""

from __future__ import annotations

import math
from typing import Callable, Optional

from .timer_animation import Color, Point, Signal, State, TimerAnimation

Clock = Optional[Callable[[], float]]

RIPPLE_DURATION_MS = 400
RIPPLE_COLOR = Color(135, 206, 235)
WAVE_COLOR = Color(0, 0, 222)


class DiffusionButton:
    """A button whose click sends out a fading circle from the click point."""

    def __init__(self, clock: Clock = None) -> None:
        self.width = 130
        self.height = 42
        self.corner_radius = 21
        self.mouse_coordinates = Point(0, 0)
        self._radius = 0
        self._opacity = 255
        self.radius_changed = Signal()
        self.opacity_changed = Signal()

        self.radius_animation = TimerAnimation(self, "radius", clock)
        self.radius_animation.duration = RIPPLE_DURATION_MS
        self.radius_animation.start_value = self._radius
        self.radius_animation.end_value = self.width

        self.opacity_animation = TimerAnimation(self, "opacity", clock)
        self.opacity_animation.duration = RIPPLE_DURATION_MS
        self.opacity_animation.start_value = self._opacity
        self.opacity_animation.end_value = 0

        self.radius_animation.finished.connect(self.reset_animation)
        self.opacity_animation.finished.connect(self.reset_animation)

    @property
    def radius(self) -> int:
        return self._radius

    @radius.setter
    def radius(self, value: int) -> None:
        if self._radius == value:
            return
        self._radius = value
        self.radius_changed.emit()

    @property
    def opacity(self) -> int:
        return self._opacity

    @opacity.setter
    def opacity(self, value: int) -> None:
        if self._opacity == value:
            return
        self._opacity = value
        self.opacity_changed.emit()

    @property
    def ripple_color(self) -> Color:
        return Color(RIPPLE_COLOR.red, RIPPLE_COLOR.green, RIPPLE_COLOR.blue, self._opacity)

    def press(self, x: int, y: int) -> None:
        """A left click at (x, y) starts the ripple there."""
        self.mouse_coordinates = Point(x, y)
        self.radius_animation.start()
        self.opacity_animation.start()

    def reset_animation(self) -> None:
        self._radius = 0
        self._opacity = 255

    def tick(self) -> None:
        self.radius_animation.tick()
        self.opacity_animation.tick()


class WaveButton:
    """A button filled by two rotating rounded squares that rise and fall on clicks."""

    def __init__(self, clock: Clock = None) -> None:
        self._clock = clock
        self.width = 147
        self.height = 55
        self.corner_radius = 26
        self.click_status = True
        self.execution_time = 4000
        self._angle = 25
        self._right_angle = 1080
        self._wave_position = int(self.triangle_position())
        self._wave_transparency = 100
        self._animations: list[TimerAnimation] = []

        self.angle_changed = Signal()
        self.right_angle_changed = Signal()
        self.wave_position_changed = Signal()
        self.wave_transparency_changed = Signal()

    def _set(self, name: str, value: int, signal: Signal) -> None:
        if getattr(self, name) == value:
            return
        setattr(self, name, value)
        signal.emit()

    @property
    def angle(self) -> int:
        return self._angle

    @angle.setter
    def angle(self, value: int) -> None:
        self._set("_angle", value, self.angle_changed)

    @property
    def right_angle(self) -> int:
        return self._right_angle

    @right_angle.setter
    def right_angle(self, value: int) -> None:
        self._set("_right_angle", value, self.right_angle_changed)

    @property
    def wave_position(self) -> int:
        return self._wave_position

    @wave_position.setter
    def wave_position(self, value: int) -> None:
        self._set("_wave_position", value, self.wave_position_changed)

    @property
    def wave_transparency(self) -> int:
        return self._wave_transparency

    @wave_transparency.setter
    def wave_transparency(self, value: int) -> None:
        self._set("_wave_transparency", value, self.wave_transparency_changed)

    @property
    def color(self) -> Color:
        return Color(WAVE_COLOR.red, WAVE_COLOR.green, WAVE_COLOR.blue, self._wave_transparency)

    def triangle_position(self) -> float:
        """Resting height of the wave: half the diagonal of a width-sided square."""
        return math.sqrt(self.width**2 + self.width**2) / 2

    def _animate(self, name: str, end: int) -> None:
        animation = TimerAnimation(self, name, self._clock)
        animation.duration = self.execution_time
        animation.start_value = getattr(self, name)
        animation.end_value = end
        animation.start(True)
        self._animations.append(animation)

    def execute_animation(self) -> None:
        """Raise the wave over the whole button and make it opaque."""
        self._animate("angle", 1080)
        self._animate("right_angle", 25)
        self._animate("wave_position", -self.height)
        self._animate("wave_transparency", 255)

    def restore_animation(self) -> None:
        """Lower the wave back to rest and make it translucent again."""
        self._animate("angle", 25)
        self._animate("right_angle", 1080)
        self._animate("wave_position", round(self.triangle_position()))
        self._animate("wave_transparency", 100)

    def press(self) -> None:
        """A left click alternates between raising and lowering the wave."""
        if self.click_status:
            self.execute_animation()
            self.click_status = False
        else:
            self.restore_animation()
            self.click_status = True

    def tick(self) -> None:
        for animation in list(self._animations):
            animation.tick()
        self._animations = [a for a in self._animations if a.state is State.RUNNING]