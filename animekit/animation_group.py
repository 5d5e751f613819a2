"""Runs keyed groups of timer animations one group after another."""

from __future__ import annotations

from typing import Optional

from .timer_animation import Direction, Signal, TimerAnimation


class TimerAnimationGroup:
    """Animations sharing a key run together; keys run in ascending order,
    or descending when the group direction is backward."""

    def __init__(self) -> None:
        self._groups: dict[int, list[TimerAnimation]] = {}
        self._queue: list[int] = []
        self._direction = Direction.FORWARD
        self._index = -1
        self._active = 0
        self._running = False
        self._last_key: Optional[int] = None
        self._connected: set[int] = set()

        self.started = Signal()
        self.group_started = Signal()
        self.group_finished = Signal()
        self.finished = Signal()

    @property
    def group_direction(self) -> Direction:
        return self._direction

    @property
    def is_running(self) -> bool:
        return self._running

    def add_animation(self, key: int, animation: Optional[TimerAnimation]) -> None:
        if animation is None:
            return
        self._groups.setdefault(key, []).append(animation)

    def clear_animations(self) -> None:
        self._groups.clear()
        self._queue.clear()

    def start(self) -> None:
        if self._running:
            return
        self._queue = sorted(self._groups)
        if self._direction == Direction.BACKWARD:
            self._queue.reverse()
        self._index = -1
        self._running = True
        self.started.emit()
        self._process_next_group()

    def _process_next_group(self) -> None:
        while True:
            self._index += 1
            if self._index >= len(self._queue):
                self._running = False
                self.finished.emit()
                return
            key = self._queue[self._index]
            self._last_key = key
            group = self._groups.get(key, [])
            if group:
                break

        self._active = len(group)
        for animation in group:
            if id(animation) not in self._connected:
                animation.finished.connect(self._handle_animation_finished)
                self._connected.add(id(animation))
            animation.start()
        self.group_started.emit(key)

    def _rebuild_queue(self) -> None:
        self._queue = sorted(self._groups, reverse=self._direction == Direction.BACKWARD)

    def _restart_from_current(self) -> None:
        remaining: list[int] = []
        if self._last_key is not None and self._last_key in self._queue:
            remaining = self._queue[self._queue.index(self._last_key):]
        self._rebuild_queue()
        if remaining and remaining[0] in self._queue:
            self._queue = self._queue[self._queue.index(remaining[0]):]
        self._index = -1
        self._process_next_group()

    def _handle_animation_finished(self) -> None:
        self._active -= 1
        if self._active <= 0:
            self.group_finished.emit(self._last_key)
            self._process_next_group()

    def _current_group(self) -> list[TimerAnimation]:
        return self._groups.get(self._queue[self._index], [])

    def pause(self) -> None:
        if not self._running:
            return
        for animation in self._current_group():
            animation.pause()

    def resume(self) -> None:
        if not self._running:
            return
        for animation in self._current_group():
            animation.resume()

    def stop(self) -> None:
        if not self._running:
            return
        for animation in self._current_group():
            animation.stop()
        self._running = False
        self.finished.emit()

    def set_group_direction(self, direction: Direction) -> None:
        """Set the direction of every animation and of the key order."""
        if self._direction == direction:
            return
        self._direction = direction
        for group in self._groups.values():
            for animation in group:
                animation.set_direction(direction)
        if self._running:
            self._restart_from_current()