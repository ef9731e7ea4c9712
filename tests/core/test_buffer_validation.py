"""Boundary checks performed before any kernel runs."""

from array import array

import numpy as np
import pytest

from pixelfx import apply_filter, clamp, get_filter, invert, tint
from pixelfx.core.filters.utils import _resolve_pixel_buffer
from pixelfx.errors import (
    FilterArgumentError,
    InvalidBufferLengthError,
    OutOfBoundsError,
    PixelFxError,
    ReadOnlyBufferError,
    UnknownBackendError,
    UnknownFilterError,
    UnsupportedBufferError,
)


def test_length_must_be_whole_pixels():
    data = bytearray(8)
    with pytest.raises(InvalidBufferLengthError):
        invert(data, 6, 1.0)


def test_length_cannot_exceed_buffer():
    data = bytearray(8)
    with pytest.raises(OutOfBoundsError):
        invert(data, 12, 1.0)


def test_negative_length_is_out_of_bounds():
    with pytest.raises(OutOfBoundsError):
        invert(bytearray(8), -4, 1.0)


def test_read_only_buffer_rejected():
    with pytest.raises(ReadOnlyBufferError):
        invert(bytes(8), 8, 1.0)


def test_non_buffer_rejected():
    with pytest.raises(UnsupportedBufferError):
        invert([0, 0, 0, 0], 4, 1.0)


def test_non_contiguous_array_rejected():
    image = np.zeros((4, 8), dtype=np.uint8)[:, ::2]
    with pytest.raises(UnsupportedBufferError):
        apply_filter("invert", image, None, 1.0)


def test_errors_share_a_base_class():
    with pytest.raises(PixelFxError):
        invert(bytearray(5), 5, 1.0)


def test_buffer_is_untouched_when_validation_fails():
    data = bytearray([1, 2, 3, 4, 5, 6])
    with pytest.raises(InvalidBufferLengthError):
        invert(data, len(data), 1.0)
    assert data == bytearray([1, 2, 3, 4, 5, 6])


def test_resolve_defaults_to_full_length():
    data = array("B", range(16))
    view, guard = _resolve_pixel_buffer(data)
    assert guard is data
    assert len(view) == 16
    assert view.format == "B"


def test_resolve_flattens_wide_item_formats():
    data = array("I", [0, 0])
    view, _ = _resolve_pixel_buffer(data, 4)
    assert view.format == "B"
    assert len(view) == 4


def test_unknown_filter():
    with pytest.raises(UnknownFilterError):
        apply_filter("posterize", bytearray(4), 4, 1.0)


def test_unknown_backend():
    with pytest.raises(UnknownBackendError):
        apply_filter("invert", bytearray(4), 4, 1.0, backend="cuda")


def test_wrong_parameter_count():
    with pytest.raises(FilterArgumentError):
        apply_filter("tint", bytearray(4), 4, 1, 2)


def test_non_numeric_parameter():
    with pytest.raises(FilterArgumentError):
        apply_filter("contrast", bytearray(4), 4, "steep")


def test_tint_accepts_keyword_backend():
    data = bytearray([0, 0, 0, 0])
    tint(data, 4, 1, 2, 3, backend="numpy")
    assert list(data) == [1, 2, 3, 0]


def test_registry_exposes_families_and_identities():
    assert get_filter("sepia").family == "color"
    assert get_filter("solarize").identity == (1.0,)
    assert get_filter("tint").parameters == ("r", "g", "b")
    assert get_filter("brightness").integer is True


@pytest.mark.parametrize(
    "value, expected",
    [
        (-1, 0),
        (0, 0),
        (0.99, 0),
        (-0.5, 0),
        (127.9, 127),
        (255, 255),
        (255.5, 255),
        (1e12, 255),
        (float("inf"), 255),
        (float("-inf"), 0),
        (float("nan"), 0),
    ],
)
def test_clamp_truncates_and_bounds(value, expected):
    assert clamp(value) == expected
