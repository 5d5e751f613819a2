import math

from animekit.buttons import DiffusionButton, WaveButton


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_diffusion_button_starts_at_rest():
    button = DiffusionButton(FakeClock())
    assert button.radius == 0
    assert button.opacity == 255
    assert (button.width, button.height) == (130, 42)


def test_diffusion_press_records_position():
    button = DiffusionButton(FakeClock())
    button.press(12, 30)
    assert (button.mouse_coordinates.x, button.mouse_coordinates.y) == (12, 30)


def test_diffusion_ripple_grows_as_it_fades():
    clock = FakeClock()
    button = DiffusionButton(clock)
    button.press(5, 5)
    clock.now = 200
    button.tick()
    assert 0 < button.radius < button.width
    assert 0 < button.opacity < 255
    assert abs(button.radius / button.width + button.opacity / 255 - 1) < 0.01
    assert button.ripple_color.alpha == button.opacity


def test_diffusion_ripple_resets_when_finished():
    clock = FakeClock()
    button = DiffusionButton(clock)
    grown = []
    button.radius_changed.connect(lambda: grown.append(button.radius))
    button.press(5, 5)
    clock.now = 100
    button.tick()
    clock.now = 400
    button.tick()
    assert button.width in grown
    assert button.radius == 0
    assert button.opacity == 255


def test_diffusion_setter_without_change_does_not_emit():
    button = DiffusionButton(FakeClock())
    calls = []
    button.opacity_changed.connect(lambda: calls.append(1))
    button.opacity = 255
    assert calls == []
    button.opacity = 10
    assert calls == [1]


def test_wave_button_initial_state():
    button = WaveButton(FakeClock())
    assert button.angle == 25
    assert button.right_angle == 1080
    assert button.wave_transparency == 100
    assert button.wave_position == int(button.triangle_position())
    assert button.click_status is True


def test_triangle_position_is_half_diagonal():
    button = WaveButton(FakeClock())
    assert math.isclose(button.triangle_position(), button.width / math.sqrt(2))


def test_wave_button_press_raises_wave():
    clock = FakeClock()
    button = WaveButton(clock)
    button.press()
    assert button.click_status is False
    clock.now = 2000
    button.tick()
    assert 25 < button.angle < 1080
    assert 25 < button.right_angle < 1080
    assert 100 < button.wave_transparency < 255
    clock.now = 4000
    button.tick()
    assert button.angle == 1080
    assert button.right_angle == 25
    assert button.wave_position == -button.height
    assert button.wave_transparency == 255
    assert button.color.alpha == 255


def test_wave_button_second_press_restores():
    clock = FakeClock()
    button = WaveButton(clock)
    button.press()
    clock.now = 4000
    button.tick()
    button.press()
    assert button.click_status is True
    clock.now = 8000
    button.tick()
    assert button.angle == 25
    assert button.right_angle == 1080
    assert button.wave_position == round(button.triangle_position())
    assert button.wave_transparency == 100


def test_wave_button_signals_fire_during_animation():
    clock = FakeClock()
    button = WaveButton(clock)
    seen = []
    button.wave_position_changed.connect(lambda: seen.append(button.wave_position))
    button.press()
    for step in range(1, 5):
        clock.now = step * 1000
        button.tick()
    assert seen == sorted(seen, reverse=True)
    assert seen[-1] == -button.height