"""Toolkit-free animation models: property animations, noise, waves, a zipper, a tree scene and animated widgets."""

__version__ = "0.1.0"

__all__ = [
    "animation_group",
    "buttons",
    "easing",
    "knob_page",
    "noise",
    "split_text",
    "temperature_dial",
    "timer_animation",
    "tree_scene",
    "waves",
    "zipper",
]