import numpy as np
import pytest

from framefx.models.filter_result import FilterStatus
from framefx.models.frame_settings import FilterMode, FrameSettings
from framefx.pipeline.frame_pipeline import process_frame
from tests.helpers import make_image, horizontal_ramp


@pytest.mark.parametrize("mode", list(FilterMode))
def test_every_mode_produces_displayable_frame(random_image, mode):
    result = process_frame(random_image, FrameSettings(mode=mode))
    assert result.ok, result.message
    assert result.image.dtype == np.uint8
    assert result.image.same_geometry(random_image)


def test_none_returns_equal_copy(random_image):
    out = process_frame(random_image).unwrap()
    np.testing.assert_array_equal(out.pixels, random_image.pixels)
    assert out.pixels is not random_image.pixels


def test_emboss_of_flat_frame_is_mid_grey():
    out = process_frame(make_image(6, 6, value=90), FrameSettings(mode=FilterMode.EMBOSS)).unwrap()
    assert np.all(out.pixels == 128)


def test_magnitude_of_flat_frame_is_black():
    out = process_frame(make_image(6, 6, value=90), FrameSettings(mode=FilterMode.MAGNITUDE)).unwrap()
    assert not out.pixels.any()


def test_gradient_modes_show_absolute_values():
    ramp = horizontal_ramp(5, 6, step=10)
    out = process_frame(ramp, FrameSettings(mode=FilterMode.GRADIENT_X)).unwrap()
    assert np.all(out.pixels[1:-1, 1:-1] == 80)
    flipped = horizontal_ramp(5, 6, step=10)
    flipped.pixels = np.ascontiguousarray(flipped.pixels[:, ::-1])
    out = process_frame(flipped, FrameSettings(mode=FilterMode.GRADIENT_X)).unwrap()
    assert np.all(out.pixels[1:-1, 1:-1] == 80)


def test_brightness_is_applied_last():
    settings = FrameSettings(mode=FilterMode.NEGATIVE, brightness=0.5)
    out = process_frame(make_image(3, 3, value=105), settings).unwrap()
    assert np.all(out.pixels == 75)  # (255 - 105) * 0.5


def test_quantize_levels_come_from_settings(random_image):
    out = process_frame(random_image, FrameSettings(mode=FilterMode.BLUR_QUANTIZE, quantize_levels=1)).unwrap()
    assert not out.pixels.any()


def test_failures_are_returned_unchanged(random_image, empty_image):
    bad_levels = FrameSettings(mode=FilterMode.BLUR_QUANTIZE, quantize_levels=0)
    assert process_frame(random_image, bad_levels).status == FilterStatus.INVALID_PARAMETER
    for mode in FilterMode:
        assert process_frame(empty_image, FrameSettings(mode=mode)).status == FilterStatus.EMPTY_INPUT


def test_settings_accept_mode_names():
    assert FrameSettings(mode="sepia").mode is FilterMode.SEPIA
    with pytest.raises(ValueError):
        FrameSettings(mode="cartoon")


def test_settings_default_levels_from_environment(monkeypatch):
    monkeypatch.setenv("FRAMEFX_QUANTIZE_LEVELS", "7")
    assert FrameSettings().quantize_levels == 7
