# animekit

State and geometry for a set of small UI animations, with no dependency on
any GUI toolkit. Each model keeps the values a renderer needs and advances
when you call its update or `tick()` methods, so you can draw it with
whatever canvas you like.

## What is inside

- `animekit.timer_animation` — `TimerAnimation`, a clock-driven animation of
  one attribute of a target object. It interpolates `int`, `float`, `Color`,
  `Point`, `Size` and `Rect` values, runs `Direction.FORWARD` or
  `Direction.BACKWARD`, can `pause()`, `resume()` and `stop()`, and reports
  through `Signal` objects (`started`, `value_changed`, `increment_changed`,
  `finished`, `state_changed`). `calculate_increment(prev, curr)` gives the
  difference between two values of the same kind.
- `animekit.animation_group` — `TimerAnimationGroup`: animations added under
  the same integer key run together; keys run in ascending order, or in
  descending order after `set_group_direction(Direction.BACKWARD)`.
- `animekit.noise` — `Noise`, seedable 2D Perlin noise (`perlin2`), with the
  helpers `fade` and `lerp`.
- `animekit.waves` — `WaveField`, a grid of vertical lines rippled by noise
  and pushed by the pointer (`update_mouse`, `tick`, `paths`), configured with
  `WaveConfig`.
- `animekit.zipper` — `ZipperSlider`, a zipper whose slider is dragged in
  steps of ten (`press`, `move`, `release`), giving its opening `curves()`,
  `straight_teeth()`, `curve_teeth()` and `slider_rect()`; and `CubicBezier`
  with point-at-parameter and arc-length lookups.
- `animekit.tree_scene` — `TreeScene`, a random binary tree that grows node
  by node, blossoms, then sways and drops sakura (`update_tree_growth`,
  `update_sakura_growth`, `update_tree_shake`, `drop_sakura`,
  `update_falling_sakura`, `branch_segments`, `blossoms`).
- `animekit.easing` — `linear`, `in_back`, `out_back`, `out_elastic`.
- `animekit.buttons` — `DiffusionButton`, whose click sends out a fading
  ripple, and `WaveButton`, whose clicks alternately raise and lower a
  rotating wave fill.
- `animekit.split_text` — `SplitText`, a row of `SingleText` letters that
  leap up, spin and fall back elastically on `run_animation()`.
- `animekit.temperature_dial` — `TemperatureDial`, a knob dragged round a
  ring whose angle is shown as a readout with a matching glow colour
  (`color_for_angle`, `interpolate_color`).
- `animekit.knob_page` — `KnobPage`, which centres a dial and zooms it in
  and out when the pointer enters and leaves it.

## Installing

    pip install animekit

For the tests:

    pip install "animekit[test]"
    pytest

## Example

```python
from animekit.timer_animation import TimerAnimation

class Box:
    width = 0

now = [0]
box = Box()
anim = TimerAnimation(box, "width", clock=lambda: now[0])
anim.start_value = 0
anim.end_value = 100
anim.duration = 400
anim.finished.connect(lambda: print("done"))
anim.start()

for t in range(0, 500, 16):
    now[0] = t
    anim.tick()
print(box.width)  # 100
```

The animated models take a `clock` callable returning milliseconds
(`TreeScene` takes a `random.Random` instead, and `WaveField` a time in
milliseconds on each `tick`), which makes them easy to drive from a real
timer or to step through in tests.

## What it does not do

animekit does no drawing and opens no windows. It has no event loop and no
timers of its own: the host calls `tick()` and the update methods at the
rates it wants, passes in pointer events, and paints from the points,
rectangles, colours and paths the models expose.