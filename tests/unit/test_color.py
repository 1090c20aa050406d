"""Tests for color conversions and lighten/darken."""

import pytest

from neovim_theme_generator.color import (
    Color,
    color_from_hex,
    contrast_ratio,
    create_color,
    darken,
    hex_to_rgb,
    hsv_to_rgb,
    lighten,
    named_color,
    rgb_to_hex,
    with_hsv,
)

SAMPLES = ["#000000", "#ffffff", "#d8d8d8", "#181818", "#bf616a", "#1e90ff", "#7f7f80"]


class TestConversions:
    def test_hex_round_trip(self) -> None:
        assert hex_to_rgb("#bf616a") == (191, 97, 106)
        assert rgb_to_hex(191, 97, 106) == "#bf616a"

    def test_hex_is_lowercase(self) -> None:
        assert color_from_hex("#BF616A").hex == "#bf616a"

    def test_create_color_clamps_channels(self) -> None:
        assert create_color(-10, 300, 128).rgb == (0, 255, 128)

    def test_equality_is_structural(self) -> None:
        assert create_color(1, 2, 3) == color_from_hex("#010203")
        assert isinstance(create_color(1, 2, 3), Color)

    def test_named_color(self) -> None:
        assert named_color("dodgerblue").hex == "#1e90ff"
        assert named_color("crimson").rgb == (220, 20, 60)

    def test_contrast_ratio_extremes(self) -> None:
        black, white = color_from_hex("#000000"), color_from_hex("#ffffff")
        assert contrast_ratio(black.luminance, white.luminance) == pytest.approx(21.0)
        assert contrast_ratio(white.luminance, white.luminance) == pytest.approx(1.0)

    def test_color_fields(self) -> None:
        assert Color._fields == ("hex", "rgb", "luminance")

    def test_hsv_halves_round_up(self) -> None:
        # 0.3 * 255 == 76.5
        assert hsv_to_rgb(120, 0.3, 0.3) == (54, 77, 54)
        assert hsv_to_rgb(0, 0.0, 0.5) == (128, 128, 128)

    def test_with_hsv_keeps_hue(self) -> None:
        dimmed = with_hsv(named_color("red"), saturation=1.0, value=0.5)
        assert dimmed.rgb == (128, 0, 0)


class TestLightenDarken:
    @pytest.mark.parametrize("hex_color", SAMPLES)
    def test_zero_factor_is_identity(self, hex_color: str) -> None:
        color = color_from_hex(hex_color)
        assert lighten(color, 0.0) == color
        assert darken(color, 0.0) == color

    @pytest.mark.parametrize("hex_color", SAMPLES)
    def test_full_lighten_never_decreases_channels(self, hex_color: str) -> None:
        color = color_from_hex(hex_color)
        lighter = lighten(color, 1.0)
        assert all(a >= b for a, b in zip(lighter.rgb, color.rgb))
        assert lighter.hex == "#ffffff"

    @pytest.mark.parametrize("hex_color", SAMPLES)
    def test_full_darken_is_black(self, hex_color: str) -> None:
        assert darken(color_from_hex(hex_color), 1.0).hex == "#000000"

    def test_partial_darken_is_linear_light(self) -> None:
        assert darken(color_from_hex("#bf616a"), 0.95).hex == "#2d1214"

    def test_out_of_range_factor_saturates(self) -> None:
        color = color_from_hex("#808080")
        assert lighten(color, 3.0).hex == "#ffffff"
        assert darken(color, 3.0).hex == "#000000"

    def test_negative_factor_reverses_direction(self) -> None:
        color = color_from_hex("#808080")
        assert darken(color, -1.0).hex == "#ffffff"
        assert lighten(color, -1.0).hex == "#000000"

    def test_small_factor_moves_monotonically(self) -> None:
        color = color_from_hex("#181818")
        assert lighten(color, 0.1).rgb[0] > color.rgb[0]
        assert darken(color, 0.5).rgb[0] < color.rgb[0]
