"""Text split into letters that leap up, spin and drop back one after another."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

from .easing import in_back, linear, out_back, out_elastic
from .timer_animation import Direction, Point, Signal

Clock = Optional[Callable[[], float]]

LETTER_SIZE = 160
LETTER_SPACING = 80
COLOR_DURATION_MS = 200
ROTATE_DURATION_MS = 400
BASE_JUMP_DURATION_MS = 350
JUMP_DURATION_STEP_MS = 20


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def _interpolate(start: Any, end: Any, progress: float) -> Any:
    if isinstance(start, Point):
        return Point(
            int(start.x + (end.x - start.x) * progress),
            int(start.y + (end.y - start.y) * progress),
        )
    return int(start + (end - start) * progress)


def _centered_start(width: int, count: int) -> int:
    return int((width - count * LETTER_SPACING) / 2)


class _Tween:
    """Eased animation of one attribute; keeps its time when turned around."""

    def __init__(
        self,
        target: Any,
        name: str,
        clock: Callable[[], float],
        duration: float,
        start: Any,
        end: Any,
        easing: Callable[[float], float] = linear,
    ) -> None:
        self.target = target
        self.name = name
        self.duration = duration
        self.start_value = start
        self.end_value = end
        self.easing = easing
        self.direction = Direction.FORWARD
        self.running = False
        self.finished = Signal()
        self._clock = clock
        self._time = 0.0
        self._last = 0.0

    def start(self) -> None:
        if self.running:
            return
        self._time = 0.0 if self.direction is Direction.FORWARD else float(self.duration)
        self._last = self._clock()
        self.running = True
        self._apply()

    def tick(self) -> None:
        if not self.running:
            return
        now = self._clock()
        step = now - self._last
        self._last = now
        if self.direction is Direction.FORWARD:
            self._time = min(float(self.duration), self._time + step)
            done = self._time >= self.duration
        else:
            self._time = max(0.0, self._time - step)
            done = self._time <= 0
        self._apply()
        if done:
            self.running = False
            self.finished.emit()

    def _apply(self) -> None:
        progress = self.easing(self._time / self.duration)
        setattr(self.target, self.name, _interpolate(self.start_value, self.end_value, progress))


class SingleText:
    """One letter that can fade its colour and spin about a point near its top."""

    def __init__(self, text: str, clock: Clock = None) -> None:
        self.text = text
        self.width = LETTER_SIZE
        self.height = LETTER_SIZE
        self.pos = Point(0, 0)
        self.color_progress = 255
        self.rotate_degree = 0
        self.center_x = self.width / 2.0
        self.center_y = self.height / 3.0
        self.font_pixel_size = self.height // 2
        self.rotate_finished = Signal()

        clock = clock or _monotonic_ms
        self._color = _Tween(self, "color_progress", clock, COLOR_DURATION_MS, 0, 255)
        self._rotate = _Tween(
            self, "rotate_degree", clock, ROTATE_DURATION_MS, 0, 360, out_back
        )
        self._rotate.finished.connect(self.rotate_finished.emit)

    def _run(self, tween: _Tween, direction: Direction) -> None:
        tween.direction = direction
        tween.start()

    def start_color_animation(self) -> None:
        self._run(self._color, Direction.FORWARD)

    def reset_color_animation(self) -> None:
        self._run(self._color, Direction.BACKWARD)

    def start_rotate_animation(self) -> None:
        self._run(self._rotate, Direction.FORWARD)

    def reset_rotate_animation(self) -> None:
        self._run(self._rotate, Direction.BACKWARD)

    def tick(self) -> None:
        self._color.tick()
        self._rotate.tick()


class SplitText:
    """A row of letters centred near the bottom of the window."""

    def __init__(self, clock: Clock = None, width: int = 700, height: int = 700) -> None:
        self._clock = clock or _monotonic_ms
        self.letters: list[SingleText] = []
        self._tweens: list[_Tween] = []
        self._dropping: set[int] = set()
        self.width = width
        self.height = height
        self.start_y = 0
        self.end_y = 0
        self.button_pos = Point(0, 0)
        self.input_pos = Point(0, 0)
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Lay out the controls and the letters for a new window size."""
        self.width = width
        self.height = height
        mid = width // 2
        self.start_y = height - 200
        self.end_y = height - 700
        self.button_pos = Point(mid - 100 * 2, height - 30 - 10)
        self.input_pos = Point(mid - 200 // 2, height - 30 - 10)
        self._place_letters()

    def _place_letters(self) -> None:
        start_x = _centered_start(self.width, len(self.letters))
        for i, letter in enumerate(self.letters):
            letter.pos = Point(start_x + i * LETTER_SPACING, self.height - 200)

    def set_text(self, text: str) -> None:
        """Replace the letters with one per character of ``text``."""
        self._tweens.clear()
        self._dropping.clear()
        self.letters = [SingleText(ch, self._clock) for ch in text]
        self._place_letters()

    def _start(self, tween: _Tween) -> None:
        tween.start()
        self._tweens.append(tween)

    def run_animation(self) -> None:
        """Make every letter leap up, spin on arrival and fall back elastically."""
        for i, letter in enumerate(self.letters):
            duration = BASE_JUMP_DURATION_MS + i * JUMP_DURATION_STEP_MS
            x = letter.pos.x
            rise = _Tween(
                letter,
                "pos",
                self._clock,
                duration,
                Point(x, self.start_y),
                Point(x, self.end_y),
                in_back,
            )
            rise.finished.connect(
                lambda letter=letter, duration=duration: self._on_risen(letter, duration)
            )
            self._start(rise)

    def _on_risen(self, letter: SingleText, duration: int) -> None:
        letter.start_rotate_animation()
        if id(letter) in self._dropping:
            return
        self._dropping.add(id(letter))
        letter.rotate_finished.connect(lambda: self._drop(letter, duration))

    def _drop(self, letter: SingleText, duration: int) -> None:
        if letter not in self.letters:
            return
        x = letter.pos.x
        self._start(
            _Tween(
                letter,
                "pos",
                self._clock,
                duration,
                Point(x, self.end_y),
                Point(x, self.start_y),
                out_elastic,
            )
        )

    def tick(self) -> None:
        for tween in list(self._tweens):
            tween.tick()
        for letter in list(self.letters):
            letter.tick()
        self._tweens = [t for t in self._tweens if t.running]