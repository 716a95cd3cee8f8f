"""Tests for rendering algorithms."""

import pytest
from neostrip.buffer import PixelMode
from neostrip.colors import HueDirection, hsl, unpack_b, unpack_g, unpack_r
from neostrip.rendering import ease_factor, hue_step
from neostrip.strip import create


def grb(color: int) -> tuple[int, int, int]:
    """Buffer bytes of a color written at full brightness to a GRB strip."""
    return (unpack_g(color), unpack_r(color), unpack_b(color))


def _strip(transmitter, count: int, mode: PixelMode = PixelMode.RGB_GRB):
    s = create(18, count, mode, transmitter=transmitter)
    s.set_brightness(255)
    return s


class TestHueStep:
    """Tests for hue interpolation steps."""

    def test_clockwise(self):
        """Should step forward around the wheel."""
        assert hue_step(0, 90, 10) == 900
        assert hue_step(1, 360, 10) == 3590

    def test_counter_clockwise(self):
        """Should step backward around the wheel."""
        assert hue_step(0, 90, 10, HueDirection.COUNTER_CLOCKWISE) == -2700

    def test_shortest(self):
        """Should pick the smaller arc."""
        assert hue_step(0, 90, 10, HueDirection.SHORTEST) == 900
        assert hue_step(0, 270, 10, HueDirection.SHORTEST) == -900

    def test_truncates(self):
        """Should truncate the negative step toward zero."""
        assert hue_step(10, 0, 7, HueDirection.COUNTER_CLOCKWISE) == -142


class TestShowRainbow:
    """Tests for rainbow rendering."""

    def test_endpoints_exact(self, transmitter):
        """First and last pixels should get exactly the end hues."""
        strip = _strip(transmitter, 10)
        strip.show_rainbow(1, 360)

        assert strip.buffer.read_pixel(0) == grb(hsl(1, 100, 50))
        assert strip.buffer.read_pixel(9) == grb(hsl(360, 100, 50))

    def test_intermediate_pixels(self, transmitter):
        """Should accumulate the x100 hue step."""
        strip = _strip(transmitter, 10)
        strip.show_rainbow(1, 360)

        # step 3590: pixel 1 -> (100 + 3590) // 100 = 36
        assert strip.buffer.read_pixel(1) == grb(hsl(36, 100, 50))
        # pixel 5 -> (100 + 17950) // 100 = 180
        assert strip.buffer.read_pixel(5) == grb(hsl(180, 100, 50))

    def test_defaults(self, transmitter):
        """Should default to hues 1 through 360."""
        a = _strip(transmitter, 7)
        b = _strip(transmitter, 7)

        a.show_rainbow()
        b.show_rainbow(1, 360)

        assert bytes(a.buffer) == bytes(b.buffer)

    def test_single_pixel(self, transmitter):
        """A single pixel should get the hue one step past the start."""
        strip = _strip(transmitter, 1)
        strip.show_rainbow(1, 360)

        assert strip.buffer.read_pixel(0) == grb(hsl(1 + 35900, 100, 50))

    def test_empty_strip(self, transmitter):
        """Should do nothing at all for an empty strip."""
        strip = _strip(transmitter, 0)

        assert strip.show_rainbow() is None
        assert len(transmitter.frames) == 0

    def test_shows(self, transmitter):
        """Should flush once."""
        strip = _strip(transmitter, 5)
        result = strip.show_rainbow()

        assert result.ok
        assert len(transmitter.frames) == 1

    def test_counter_clockwise(self, transmitter):
        """Should step backward through the hue wheel."""
        strip = _strip(transmitter, 10)
        strip.show_rainbow(0, 270, HueDirection.COUNTER_CLOCKWISE)

        # step -900: pixel 1 -> -900 / 100 + 360 = 351
        assert strip.buffer.read_pixel(1) == grb(hsl(351, 100, 50))
        assert strip.buffer.read_pixel(9) == grb(hsl(270, 100, 50))

    def test_on_range(self, transmitter):
        """Should only paint the range."""
        strip = _strip(transmitter, 10)
        strip.range(3, 4).show_rainbow(1, 360)

        assert strip.buffer.read_pixel(2) == (0, 0, 0)
        assert strip.buffer.read_pixel(3) == grb(hsl(1, 100, 50))
        assert strip.buffer.read_pixel(6) == grb(hsl(360, 100, 50))
        assert strip.buffer.read_pixel(7) == (0, 0, 0)


class TestShowBarGraph:
    """Tests for bar graph rendering."""

    def test_invalid_scale(self, transmitter):
        """Should show a single yellow pixel when high <= 0."""
        strip = _strip(transmitter, 10)
        strip.show_color(0xFFFFFF)

        strip.show_bar_graph(0, 0)

        assert strip.buffer.read_pixel(0) == grb(0xFFFF00)
        assert all(strip.buffer.read_pixel(i) == (0, 0, 0) for i in range(1, 10))
        assert len(transmitter.frames) == 2

    def test_negative_scale(self, transmitter):
        """Should treat a negative scale as invalid."""
        strip = _strip(transmitter, 10)
        strip.show_bar_graph(5, -10)

        assert strip.buffer.read_pixel(0) == grb(0xFFFF00)

    def test_partial_bar(self, transmitter):
        """Should light pixels 0..v with a blue to red ramp."""
        strip = _strip(transmitter, 10)
        strip.show_bar_graph(128, 255)

        # v = 128 * 10 // 255 = 5, ramp over n - 1 = 9 pixels
        for i in range(6):
            b = i * 255 // 9
            assert strip.buffer.read_pixel(i) == grb((b << 16) | (255 - b))
        for i in range(6, 10):
            assert strip.buffer.read_pixel(i) == (0, 0, 0)

    def test_first_pixel_blue(self, transmitter):
        """Pixel 0 should be pure blue."""
        strip = _strip(transmitter, 10)
        strip.show_bar_graph(128, 255)

        assert strip.buffer.read_pixel(0) == grb(0x0000FF)

    def test_full_bar(self, transmitter):
        """A full scale value should end in pure red."""
        strip = _strip(transmitter, 10)
        strip.show_bar_graph(100, 100)

        assert strip.buffer.read_pixel(9) == grb(0xFF0000)

    def test_zero_value(self, transmitter):
        """Should show dim amber on pixel 0 when the bar is empty."""
        strip = _strip(transmitter, 10)
        strip.show_color(0xFFFFFF)

        strip.show_bar_graph(1, 100)

        assert strip.buffer.read_pixel(0) == grb(0x666600)
        assert all(strip.buffer.read_pixel(i) == (0, 0, 0) for i in range(1, 10))

    def test_negative_value(self, transmitter):
        """Should use the absolute value."""
        a = _strip(transmitter, 10)
        b = _strip(transmitter, 10)

        a.show_bar_graph(-128, 255)
        b.show_bar_graph(128, 255)

        assert bytes(a.buffer) == bytes(b.buffer)

    def test_single_pixel(self, transmitter):
        """Should not divide by zero on a one pixel strip."""
        strip = _strip(transmitter, 1)
        strip.show_bar_graph(5, 5)

        assert strip.buffer.read_pixel(0) == grb(0x0000FF)

    def test_shows(self, transmitter):
        """Should flush once."""
        strip = _strip(transmitter, 10)
        strip.show_bar_graph(3, 10)

        assert len(transmitter.frames) == 1


class TestEaseBrightness:
    """Tests for parabolic brightness easing."""

    @pytest.mark.parametrize("length,expected", [
        (5, [0, 63, 255, 63, 0]),
        (4, [0, 63, 255, 0]),
        (3, [0, 255, 0]),
        (1, [0]),
    ])
    def test_ease_factor(self, length, expected):
        """Should rise quadratically to the middle and fall back."""
        assert [ease_factor(k, length) for k in range(length)] == expected

    def test_rescales_buffer(self, transmitter):
        """Should multiply the stored channels."""
        strip = _strip(transmitter, 5)
        strip.show_color(0xC8C8C8)

        strip.ease_brightness()

        values = [strip.buffer.read_pixel(i)[0] for i in range(5)]
        assert values == [0, 49, 199, 49, 0]

    def test_does_not_show(self, transmitter):
        """Should not flush."""
        strip = _strip(transmitter, 5)
        strip.show_color(0xC8C8C8)
        strip.ease_brightness()

        assert len(transmitter.frames) == 1

    def test_eases_white(self, transmitter):
        """Should rescale the white channel too."""
        strip = _strip(transmitter, 5, PixelMode.RGBW)
        strip.show_white(200)

        strip.ease_brightness()

        assert strip.buffer.read_pixel(2) == (0, 0, 0, 199)
        assert strip.buffer.read_pixel(0) == (0, 0, 0, 0)

    def test_range_only(self, transmitter):
        """Should only ease pixels inside the range."""
        strip = _strip(transmitter, 10)
        strip.show_color(0xC8C8C8)

        strip.range(5, 5).ease_brightness()

        assert strip.buffer.read_pixel(4) == (200, 200, 200)
        assert strip.buffer.read_pixel(5) == (0, 0, 0)
        assert strip.buffer.read_pixel(7) == (199, 199, 199)
