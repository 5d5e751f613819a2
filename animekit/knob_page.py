"""A page holding a temperature dial that zooms in while hovered."""

from __future__ import annotations

from typing import Callable, Optional

from .temperature_dial import AnimationState, TemperatureDial
from .timer_animation import Color, Direction, Rect, TimerAnimation

Clock = Optional[Callable[[], float]]

PAGE_SIZE = 1000
ZOOM_DURATION_MS = 400
ZOOM_RATE = 40


class KnobPage:
    """Centres a dial and grows or shrinks it when the dial asks to."""

    def __init__(self, clock: Clock = None) -> None:
        self.width = PAGE_SIZE
        self.height = PAGE_SIZE
        self.background = Color(243, 246, 253)
        self.zoom_rate = ZOOM_RATE

        self.dial = TemperatureDial(clock)
        # Integer rectangle centre: the middle of the first and last pixel.
        center_x = (self.width - 1) // 2
        center_y = (self.height - 1) // 2
        dial = self.dial
        dial.geometry = Rect(
            center_x - dial.width // 2, center_y - dial.height // 2, dial.width, dial.height
        )

        self.animation = TimerAnimation(dial, "geometry", clock)
        self.animation.duration = ZOOM_DURATION_MS
        self.animation.start_value = dial.geometry
        self.animation.end_value = Rect(
            dial.pos.x - self.zoom_rate // 2,
            dial.pos.y - self.zoom_rate // 2,
            dial.width + self.zoom_rate,
            dial.height + self.zoom_rate,
        )
        dial.execute_animation_signal.connect(self.execute_animation)

    def execute_animation(self, state: AnimationState) -> None:
        """Zoom the dial in for EXECUTE and back out for RESTORE."""
        if state is AnimationState.EXECUTE:
            self.animation.set_direction(Direction.FORWARD)
            self.animation.start()
        elif state is AnimationState.RESTORE:
            self.animation.set_direction(Direction.BACKWARD)
            self.animation.start()

    def tick(self) -> None:
        self.dial.tick()
        self.animation.tick()