import pytest

from framefx.models.filter_result import (
    FilterResult,
    FilterStatus,
    EmptyInputError,
    DimensionMismatchError,
    InvalidParameterError,
)
from tests.helpers import make_image


def test_status_codes():
    assert FilterStatus.OK == 0
    assert FilterStatus.EMPTY_INPUT == -1
    assert FilterStatus.DIMENSION_MISMATCH == -2
    assert FilterStatus.INVALID_PARAMETER == -3


def test_success_unwraps_to_image():
    img = make_image(2, 2)
    result = FilterResult.success(img)
    assert result.ok and result.code == 0
    assert result.unwrap() is img


@pytest.mark.parametrize("status,error", [
    (FilterStatus.EMPTY_INPUT, EmptyInputError),
    (FilterStatus.DIMENSION_MISMATCH, DimensionMismatchError),
    (FilterStatus.INVALID_PARAMETER, InvalidParameterError),
])
def test_failure_unwrap_raises_matching_error(status, error):
    result = FilterResult.failure(status, "boom")
    assert not result.ok
    assert result.image is None
    with pytest.raises(error, match="boom"):
        result.unwrap()


def test_error_message_defaults_to_status_name():
    with pytest.raises(EmptyInputError, match="empty_input"):
        FilterResult.failure(FilterStatus.EMPTY_INPUT).unwrap()
