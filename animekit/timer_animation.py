"""Clock-driven property animation with interpolation of simple value types."""

from __future__ import annotations

import math
import time
import warnings
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Callable, Optional

DEFAULT_INTERVAL_MS = 16
DEFAULT_DURATION_MS = 1000
_DOUBLE_STEP = 0.5


class Signal:
    """A minimal observer list: connected slots are called on emit."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        self._slots.remove(slot)

    def is_connected(self, slot: Callable[..., Any]) -> bool:
        return slot in self._slots

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


class State(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class Color:
    """RGBA colour; components are not clamped so differences may be negative."""

    red: int
    green: int
    blue: int
    alpha: int = 255


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


_RECORDS = (Point, Size, Rect)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_integral(record: Any) -> bool:
    return all(_is_int(getattr(record, f.name)) for f in fields(record))


def _kind(value: Any) -> Any:
    """Classify a value the way the animation distinguishes value types."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    if isinstance(value, Color):
        return Color
    if isinstance(value, _RECORDS):
        return (type(value), _is_integral(value))
    return None


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _lerp_record(start: Any, end: Any, progress: float) -> Any:
    integral = _is_integral(start) and _is_integral(end)
    values = {}
    for f in fields(start):
        a = getattr(start, f.name)
        b = getattr(end, f.name)
        v = a + (b - a) * progress
        values[f.name] = int(v) if integral else v
    return type(start)(**values)


def calculate_increment(prev: Any, curr: Any) -> Any:
    """Return curr - prev for two values of the same kind, or None."""
    kind = _kind(prev)
    if kind is None or kind != _kind(curr):
        return None
    if kind in (int, float):
        return curr - prev
    return type(curr)(
        **{f.name: getattr(curr, f.name) - getattr(prev, f.name) for f in fields(curr)}
    )


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class TimerAnimation:
    """Animates an attribute of a target between two values over a duration.

    The animation does not own a timer: the host calls :meth:`tick` every
    :attr:`interval` milliseconds while the animation is running.
    """

    def __init__(
        self,
        target: Any = None,
        property_name: str = "",
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.target = target
        self.property_name = property_name
        self._clock = clock or _monotonic_ms
        self.start_value: Any = None
        self.end_value: Any = None
        self.interval = DEFAULT_INTERVAL_MS
        self.auto_delete = False
        self._duration = DEFAULT_DURATION_MS
        self._state = State.STOPPED
        self._direction = Direction.FORWARD
        self._start_time = 0.0
        self._paused_time = 0.0
        self._progress = 0.0
        self._previous: Any = None

        self.started = Signal()
        self.value_changed = Signal()
        self.increment_changed = Signal()
        self.finished = Signal()
        self.state_changed = Signal()

        if target is not None and property_name and not hasattr(target, property_name):
            warnings.warn(
                f"property {property_name!r} not found on target", RuntimeWarning, stacklevel=2
            )

    @property
    def duration(self) -> int:
        return self._duration

    @duration.setter
    def duration(self, msecs: int) -> None:
        if msecs > 0:
            self._duration = msecs

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def state(self) -> State:
        return self._state

    @state.setter
    def state(self, new_state: State) -> None:
        if self._state != new_state:
            self._state = new_state
            self.state_changed.emit(new_state)

    def _has_target(self) -> bool:
        return self.target is not None and bool(self.property_name)

    def _calculate_interval(self) -> None:
        if not self._has_target():
            return
        current = getattr(self.target, self.property_name, None)
        kind = _kind(current)
        if kind is int:
            delta = abs(int(self.end_value) - int(self.start_value))
            if delta == 0:
                return
            ideal = max(1, self._duration // delta)
            self.interval = min(max(1, ideal), DEFAULT_INTERVAL_MS)
        elif kind is float:
            delta = abs(float(self.end_value) - float(self.start_value))
            steps = math.ceil(delta / _DOUBLE_STEP)
            if steps == 0:
                return
            ideal = max(1, self._duration // steps)
            self.interval = min(max(1, ideal), DEFAULT_INTERVAL_MS)
        else:
            self.interval = DEFAULT_INTERVAL_MS

    def set_direction(self, direction: Direction) -> None:
        """Change direction; a running animation continues from its mirrored point."""
        if self._direction == direction:
            return
        self._direction = direction
        if self._state == State.RUNNING:
            now = self._clock()
            self._progress = (now - self._start_time) / self._duration
            self._start_time = now - self._duration * (1 - self._progress)

    def start(self, auto_delete: bool = False) -> None:
        """Start, or continue a paused animation from where it stopped."""
        if self._state == State.RUNNING:
            return
        self.auto_delete = auto_delete
        if not self._has_target():
            return
        if self.start_value is None or self.end_value is None:
            return

        self._previous = (
            self.start_value if self._direction == Direction.FORWARD else self.end_value
        )
        self._progress = 0.0
        if self._state == State.PAUSED:
            self._progress = (self._paused_time - self._start_time) / self._duration

        self._start_time = self._clock() - self._duration * self._progress
        self._calculate_interval()
        self.state = State.RUNNING
        self.started.emit()

    def pause(self) -> None:
        if self._state != State.RUNNING:
            return
        self._paused_time = self._clock()
        self.state = State.PAUSED

    def resume(self) -> None:
        if self._state != State.PAUSED:
            return
        self._start_time += self._clock() - self._paused_time
        self.state = State.RUNNING

    def stop(self) -> None:
        """Stop; with auto_delete the animation lets go of its target for good."""
        if self.auto_delete:
            self.target = None
        self._previous = None
        self.state = State.STOPPED

    def _emit_increment(self, value: Any) -> None:
        if self._previous is not None and _kind(self._previous) == _kind(value):
            self.increment_changed.emit(calculate_increment(self._previous, value))

    def tick(self) -> None:
        """Advance to the current clock time and write the value to the target."""
        if self._state != State.RUNNING or not self._has_target():
            return
        progress = (self._clock() - self._start_time) / self._duration
        forward = self._direction == Direction.FORWARD
        if not forward:
            progress = 1.0 - progress

        if (forward and progress >= 1.0) or (not forward and progress <= 0.0):
            final = self.end_value if forward else self.start_value
            setattr(self.target, self.property_name, final)
            self.value_changed.emit(final)
            self._emit_increment(final)
            self.stop()
            self.finished.emit()
            return

        value = self.interpolate(progress)
        if value is not None:
            setattr(self.target, self.property_name, value)
            self.value_changed.emit(value)
            self._emit_increment(value)
            self._previous = value

    def interpolate(self, progress: float) -> Any:
        """Value between start and end at ``progress``, or None if they differ in kind."""
        start, end = self.start_value, self.end_value
        kind = _kind(start)
        if kind is None or kind != _kind(end):
            return None
        if kind is int:
            return _round(start + (end - start) * progress)
        if kind is float:
            return start + (end - start) * progress
        if kind is Color:
            return Color(
                *(
                    min(max(0, int(a + (b - a) * progress)), 255)
                    for a, b in (
                        (start.red, end.red),
                        (start.green, end.green),
                        (start.blue, end.blue),
                        (start.alpha, end.alpha),
                    )
                )
            )
        return _lerp_record(start, end, progress)