import numpy as np
import pytest

from framefx.models.filter_result import FilterStatus
from framefx.models.image import Image
from framefx.services.gradient_service import GradientService
from tests.helpers import make_image, horizontal_ramp, vertical_ramp


@pytest.fixture
def service():
    return GradientService()


def test_horizontal_ramp(service):
    img = horizontal_ramp(5, 6, step=10)
    gx = service.sobel_x(img).unwrap()
    gy = service.sobel_y(img).unwrap()

    assert gx.dtype == np.int16 and gx.same_geometry(img)
    # (x+1 - (x-1)) * 10 per row, weighted 1 + 2 + 1
    assert np.all(gx.pixels[1:-1, 1:-1] == 80)
    assert np.all(gy.pixels == 0)


def test_vertical_ramp(service):
    img = vertical_ramp(6, 5, step=10)
    gx, gy = (r.unwrap() for r in service.gradients(img))
    assert np.all(gy.pixels[1:-1, 1:-1] == 80)
    assert np.all(gx.pixels == 0)


def test_border_is_left_at_zero(service, random_image):
    gx = service.sobel_x(random_image).unwrap().pixels
    assert not gx[0].any() and not gx[-1].any()
    assert not gx[:, 0].any() and not gx[:, -1].any()


def test_sign_follows_direction(service):
    img = make_image(3, 3)
    img.pixels[:, 0] = 255  # bright on the left
    assert service.sobel_x(img).unwrap().pixel(1, 1) == (-1020, -1020, -1020)

    img = make_image(3, 3)
    img.pixels[2, :] = 255  # bright at the bottom
    assert service.sobel_y(img).unwrap().pixel(1, 1) == (1020, 1020, 1020)


def test_matches_full_kernel_reference(service, random_image):
    from framefx.models.kernel import SOBEL_X_3X3

    reference = service.convolution_service.filter2d(
        random_image, SOBEL_X_3X3, dtype=np.int16, copy_border=False).unwrap()
    np.testing.assert_array_equal(service.sobel_x(random_image).unwrap().pixels, reference.pixels)


def test_channels_are_independent(service):
    img = make_image(3, 3)
    img.pixels[:, 2, 1] = 100  # only green, right column
    assert service.sobel_x(img).unwrap().pixel(1, 1) == (0, 400, 0)


def test_empty_input(service, empty_image):
    assert service.sobel_x(empty_image).status == FilterStatus.EMPTY_INPUT
    assert service.sobel_y(empty_image).status == FilterStatus.EMPTY_INPUT


def test_rejects_grey_frame(service):
    grey = Image(pixels=np.zeros((6, 6), dtype=np.uint8))
    gx, gy = service.gradients(grey)
    assert gx.status == gy.status == FilterStatus.INVALID_PARAMETER
