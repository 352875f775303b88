"""Tests for the public color conversion API."""

import warnings

import numpy as np
import pytest

from shadercolor import (
    hsl2rgb,
    hsv2rgb,
    hue2rgb,
    lab2rgb,
    lab2xyz,
    rgb2hsl,
    rgb2hsv,
    rgb2lab,
    rgb2xyz,
    xyz2lab,
    xyz2rgb,
)

CONVERSIONS = [rgb2hsl, hsl2rgb, rgb2hsv, hsv2rgb, rgb2xyz, xyz2rgb, xyz2lab, lab2xyz, rgb2lab, lab2rgb]
SATURATING = [rgb2hsl, hsl2rgb, rgb2hsv, hsv2rgb]


@pytest.fixture
def rgb_grid():
    """All 16^3 combinations of evenly spaced channel values in [0, 1]."""
    levels = np.linspace(0.0, 1.0, 16)
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    return np.stack([r.ravel(), g.ravel(), b.ravel()], axis=1)


@pytest.fixture
def out_of_range_colors():
    """Random triples spanning well outside [0, 1]."""
    rng = np.random.default_rng(7)
    return rng.uniform(-1.0, 2.0, size=(500, 3))


class TestKnownValues:
    """Reference colors (single precision)."""

    def test_rgb2hsl_red(self):
        result = rgb2hsl(np.array([1.0, 0.0, 0.0], dtype=np.float32))
        np.testing.assert_allclose(result, [0.0, 1.0, 0.5], atol=5e-4)

    def test_rgb2hsl_gray(self):
        result = rgb2hsl(np.array([0.5, 0.5, 0.5], dtype=np.float32))
        # Saturation and lightness carry only the 1e-6 MAX floor
        np.testing.assert_allclose(result[1:], [0.0, 0.5], atol=5e-4)
        assert result[0] == pytest.approx(2.0 / 3.0, abs=5e-4)

    def test_rgb2hsv_green(self):
        result = rgb2hsv(np.array([0.0, 1.0, 0.0], dtype=np.float32))
        np.testing.assert_allclose(result, [1.0 / 3.0, 1.0, 1.0], atol=5e-4)

    def test_rgb2xyz_white(self):
        result = rgb2xyz(np.array([1.0, 1.0, 1.0], dtype=np.float32))
        np.testing.assert_allclose(result, [95.05, 100.0, 108.9], atol=1e-3)

    def test_rgb2lab_white(self):
        result = rgb2lab(np.array([1.0, 1.0, 1.0], dtype=np.float32))
        np.testing.assert_allclose(result, [1.0, 0.5, 0.5], atol=5e-4)

    def test_rgb2lab_black(self):
        result = rgb2lab(np.array([0.0, 0.0, 0.0], dtype=np.float32))
        np.testing.assert_allclose(result, [0.0, 0.5, 0.5], atol=5e-4)

    def test_rgb2lab_red(self):
        # Raw CIELAB for sRGB red is about (53.24, 80.09, 67.20)
        raw = xyz2lab(rgb2xyz([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(raw, [53.24, 80.09, 67.20], atol=0.5)

        normalized = rgb2lab([1.0, 0.0, 0.0])
        np.testing.assert_allclose(
            normalized, [raw[0] / 100.0, 0.5 + 0.5 * raw[1] / 127.0, 0.5 + 0.5 * raw[2] / 127.0]
        )

    def test_hue2rgb_scalar(self):
        assert hue2rgb(0.0, 1.0, 0.5) == pytest.approx(1.0)


class TestSaturation:
    """HSL and HSV converters clamp their input to [0, 1]."""

    @pytest.mark.parametrize("convert", SATURATING)
    def test_matches_clamped_input(self, convert, out_of_range_colors):
        clamped = np.clip(out_of_range_colors, 0.0, 1.0)
        np.testing.assert_array_equal(convert(out_of_range_colors), convert(clamped))

    def test_xyz_does_not_saturate(self):
        # rgb2xyz has no clamp: values above 1 produce XYZ above white
        bright = rgb2xyz([2.0, 2.0, 2.0])
        assert bright[1] > 100.0


class TestRoundTrip:
    """Forward then inverse conversion returns the input within tolerance."""

    def test_hsl_round_trip(self, rgb_grid):
        back = hsl2rgb(rgb2hsl(rgb_grid))
        assert np.max(np.abs(back - rgb_grid)) <= 1e-4

    def test_hsv_round_trip(self, rgb_grid):
        back = hsv2rgb(rgb2hsv(rgb_grid))
        assert np.max(np.abs(back - rgb_grid)) <= 1e-4

    def test_xyz_round_trip(self, rgb_grid):
        # Bounded by the 4-digit inverse matrix, amplified by the sRGB
        # linear-segment slope on channels near zero
        back = xyz2rgb(rgb2xyz(rgb_grid))
        assert np.max(np.abs(back - rgb_grid)) <= 1e-3

    def test_xyz_round_trip_away_from_black(self, rgb_grid):
        interior = rgb_grid[np.all(rgb_grid >= 0.25, axis=1)]
        back = xyz2rgb(rgb2xyz(interior))
        assert np.max(np.abs(back - interior)) <= 1e-4

    def test_lab_round_trip(self, rgb_grid):
        back = lab2rgb(rgb2lab(rgb_grid))
        assert np.max(np.abs(back - rgb_grid)) <= 1e-3

    def test_raw_lab_round_trip(self):
        xyz = rgb2xyz(np.random.default_rng(3).random((200, 3)))
        np.testing.assert_allclose(lab2xyz(xyz2lab(xyz)), xyz, atol=1e-3)

    def test_achromatic_hsl_round_trip(self):
        grays = np.repeat(np.linspace(0.0, 1.0, 33)[:, None], 3, axis=1)
        back = hsl2rgb(rgb2hsl(grays))
        # The 1e-6 MAX floor leaves a residual of at most about 1e-6, not zero
        np.testing.assert_allclose(back, grays, rtol=0, atol=1.5e-6)

    def test_achromatic_residual_on_single_channel(self):
        back = hsl2rgb(rgb2hsl([0.3, 0.3, 0.3]))
        # Gray hue is 2/3, so only the blue channel picks up q > l
        np.testing.assert_allclose(back[:2], [0.3, 0.3], rtol=0, atol=1e-12)
        assert 0.3 < back[2] <= 0.3 + 1.5e-6

    def test_normalized_lab_in_unit_cube(self, rgb_grid):
        lab = rgb2lab(rgb_grid)
        assert np.all(lab >= -1e-9)
        assert np.all(lab <= 1.0 + 1e-9)


class TestElementTypes:
    """Results keep the caller's floating-point precision."""

    @pytest.mark.parametrize("dtype", [np.float16, np.float32, np.float64])
    @pytest.mark.parametrize("convert", CONVERSIONS)
    def test_dtype_preserved(self, convert, dtype):
        colors = np.random.default_rng(11).random((32, 3)).astype(dtype)
        assert convert(colors).dtype == dtype

    @pytest.mark.parametrize("dtype, atol", [(np.float16, 2e-3), (np.float32, 1e-5)])
    def test_precision_matches_double(self, dtype, atol):
        colors = np.random.default_rng(12).random((256, 3))
        reduced = colors.astype(dtype)

        result = rgb2lab(reduced).astype(np.float64)
        reference = rgb2lab(reduced.astype(np.float64))

        np.testing.assert_allclose(result, reference, atol=atol)

    def test_integer_input_promoted_to_float32(self):
        result = rgb2hsv(np.array([[0, 1, 0]]))
        assert result.dtype == np.float32
        np.testing.assert_allclose(result, [[1.0 / 3.0, 1.0, 1.0]], atol=1e-6)

    def test_list_input(self):
        result = rgb2hsl([[1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
        assert isinstance(result, np.ndarray)
        np.testing.assert_allclose(result[:, 0], [0.0, 2.0 / 3.0])


class TestShapes:
    """Leading shape handling and shape errors."""

    @pytest.mark.parametrize("convert", CONVERSIONS)
    def test_single_triple(self, convert):
        assert convert(np.array([0.2, 0.4, 0.6])).shape == (3,)

    @pytest.mark.parametrize("convert", CONVERSIONS)
    def test_image_shape(self, convert):
        image = np.random.default_rng(5).random((8, 6, 3), dtype=np.float32)
        assert convert(image).shape == (8, 6, 3)

    def test_empty_batch(self):
        assert rgb2lab(np.empty((0, 3), dtype=np.float32)).shape == (0, 3)

    @pytest.mark.parametrize("bad", [np.zeros((4, 2)), np.zeros((4, 4)), np.float32(0.5)])
    def test_rejects_wrong_channel_count(self, bad):
        with pytest.raises(ValueError, match=r"\[\.\.\., 3\]"):
            rgb2lab(bad)

    def test_input_not_modified(self):
        colors = np.random.default_rng(9).random((100, 3))
        original = colors.copy()

        rgb2hsl(colors)
        rgb2lab(colors)

        np.testing.assert_array_equal(colors, original)

    def test_returns_new_array(self):
        colors = np.random.default_rng(10).random((10, 3))
        assert not np.shares_memory(rgb2xyz(colors), colors)


class TestIrregularValues:
    """Non-finite input never raises, even when warnings are errors."""

    @pytest.fixture(autouse=True)
    def warnings_as_errors(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            yield

    def test_nan_propagates_through_xyz(self):
        result = rgb2xyz([np.nan, 0.0, 0.0])
        assert np.all(np.isnan(result))

    def test_inf_does_not_raise(self):
        result = lab2rgb([np.inf, 0.5, 0.5])
        assert result.shape == (3,)

    @pytest.mark.parametrize("convert", CONVERSIONS)
    @pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
    def test_no_floating_point_warnings(self, convert, bad):
        colors = np.array([[bad, 0.5, 0.5], [0.5, bad, 0.5], [0.2, 0.4, 0.6]])

        result = convert(colors)

        assert result.shape == (3, 3)

    @pytest.mark.parametrize("dtype", [np.float16, np.float32])
    def test_reduced_precision_no_warnings(self, dtype):
        colors = np.array([[np.nan, np.nan, np.nan], [np.inf, 0.5, 0.5]], dtype=dtype)

        rgb2hsl(colors)
        rgb2hsv(colors)
        hsl2rgb(colors)
        lab2rgb(colors)
        xyz2lab(colors)
