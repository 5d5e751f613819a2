"""Easing curves that map linear progress in [0, 1] onto eased progress."""

from __future__ import annotations

import math

OVERSHOOT = 1.70158
AMPLITUDE = 1.0
PERIOD = 0.3


def linear(t: float) -> float:
    return t


def in_back(t: float) -> float:
    """Pulls back below zero before accelerating towards one."""
    return t * t * ((OVERSHOOT + 1) * t - OVERSHOOT)


def out_back(t: float) -> float:
    """Decelerates past one, then settles back onto it."""
    t -= 1
    return t * t * ((OVERSHOOT + 1) * t + OVERSHOOT) + 1


def out_elastic(t: float) -> float:
    """A decaying sine wave that oscillates around one and settles on it."""
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    amplitude = AMPLITUDE
    period = PERIOD
    if amplitude < 1.0:
        amplitude = 1.0
        shift = period / 4.0
    else:
        shift = period / (2 * math.pi) * math.asin(1.0 / amplitude)
    return amplitude * 2.0 ** (-10 * t) * math.sin((t - shift) * (2 * math.pi) / period) + 1.0