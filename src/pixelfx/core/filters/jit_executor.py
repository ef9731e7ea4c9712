"""JIT-accelerated filter executor using Numba.

This module provides the fastest execution path for the filters, using Numba
JIT compilation to walk the caller's pixel buffer directly and mutate it in
place. Each public function receives a view that
:func:`~pixelfx.core.filters.utils._resolve_pixel_buffer` has already
validated.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np
from numba import jit
from numba.core.errors import NumbaError

from ...config import ALPHA_OFFSET, CHANNELS
from .algorithms import (
    blend_channel,
    contrast_channel,
    fade_channel,
    gamma_channel,
    gray_float,
    gray_int,
    invert_channel,
    offset_channel,
    saturate_channel,
    sepia_targets,
    solarize_channel,
    warm_shift,
)

_LOGGER = logging.getLogger(__name__)


def _as_array(view: memoryview) -> np.ndarray:
    """Wrap *view* without copying; writes go straight to the caller's memory."""

    return np.frombuffer(view, dtype=np.uint8, count=len(view))


# ---------------------------------------------------------------------------
# Tone/Core family
# ---------------------------------------------------------------------------


@jit(nopython=True, cache=True)
def _invert_kernel(buffer: np.ndarray, amount: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        for channel in range(ALPHA_OFFSET):
            index = offset + channel
            buffer[index] = invert_channel(buffer[index], amount)


@jit(nopython=True, cache=True)
def _grayscale_kernel(buffer: np.ndarray, amount: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        gray = float(gray_int(buffer[offset], buffer[offset + 1], buffer[offset + 2]))
        buffer[offset] = blend_channel(buffer[offset], gray, amount)
        buffer[offset + 1] = blend_channel(buffer[offset + 1], gray, amount)
        buffer[offset + 2] = blend_channel(buffer[offset + 2], gray, amount)


@jit(nopython=True, cache=True)
def _brightness_kernel(buffer: np.ndarray, delta: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        for channel in range(ALPHA_OFFSET):
            index = offset + channel
            buffer[index] = offset_channel(buffer[index], delta)


@jit(nopython=True, cache=True)
def _contrast_kernel(buffer: np.ndarray, factor: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        for channel in range(ALPHA_OFFSET):
            index = offset + channel
            buffer[index] = contrast_channel(buffer[index], factor)


@jit(nopython=True, cache=True)
def _gamma_kernel(buffer: np.ndarray, exponent: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        for channel in range(ALPHA_OFFSET):
            index = offset + channel
            buffer[index] = gamma_channel(buffer[index], exponent)


# ---------------------------------------------------------------------------
# Color family
# ---------------------------------------------------------------------------


@jit(nopython=True, cache=True)
def _sepia_kernel(buffer: np.ndarray, amount: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        r = buffer[offset]
        g = buffer[offset + 1]
        b = buffer[offset + 2]
        sr, sg, sb = sepia_targets(r, g, b)
        buffer[offset] = blend_channel(r, float(sr), amount)
        buffer[offset + 1] = blend_channel(g, float(sg), amount)
        buffer[offset + 2] = blend_channel(b, float(sb), amount)


@jit(nopython=True, cache=True)
def _saturation_kernel(buffer: np.ndarray, factor: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        gray = gray_float(buffer[offset], buffer[offset + 1], buffer[offset + 2])
        buffer[offset] = saturate_channel(buffer[offset], gray, factor)
        buffer[offset + 1] = saturate_channel(buffer[offset + 1], gray, factor)
        buffer[offset + 2] = saturate_channel(buffer[offset + 2], gray, factor)


@jit(nopython=True, cache=True)
def _tint_kernel(buffer: np.ndarray, delta_r: float, delta_g: float, delta_b: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        buffer[offset] = offset_channel(buffer[offset], delta_r)
        buffer[offset + 1] = offset_channel(buffer[offset + 1], delta_g)
        buffer[offset + 2] = offset_channel(buffer[offset + 2], delta_b)


@jit(nopython=True, cache=True)
def _temperature_kernel(buffer: np.ndarray, warmth: float) -> None:
    shift = warm_shift(warmth)
    for offset in range(0, buffer.size, CHANNELS):
        buffer[offset] = offset_channel(buffer[offset], shift)
        buffer[offset + 2] = offset_channel(buffer[offset + 2], -shift)


# ---------------------------------------------------------------------------
# Stylize family
# ---------------------------------------------------------------------------


@jit(nopython=True, cache=True)
def _fade_kernel(buffer: np.ndarray, amount: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        for channel in range(ALPHA_OFFSET):
            index = offset + channel
            buffer[index] = fade_channel(buffer[index], amount)


@jit(nopython=True, cache=True)
def _solarize_kernel(buffer: np.ndarray, threshold: float) -> None:
    for offset in range(0, buffer.size, CHANNELS):
        for channel in range(ALPHA_OFFSET):
            index = offset + channel
            buffer[index] = solarize_channel(buffer[index], threshold)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def invert(view: memoryview, amount: float) -> None:
    _invert_kernel(_as_array(view), float(amount))


def grayscale(view: memoryview, amount: float) -> None:
    _grayscale_kernel(_as_array(view), float(amount))


def brightness(view: memoryview, delta: int) -> None:
    _brightness_kernel(_as_array(view), float(delta))


def contrast(view: memoryview, factor: float) -> None:
    _contrast_kernel(_as_array(view), float(factor))


def gamma(view: memoryview, exponent: float) -> None:
    _gamma_kernel(_as_array(view), float(exponent))


def sepia(view: memoryview, amount: float) -> None:
    _sepia_kernel(_as_array(view), float(amount))


def saturation(view: memoryview, factor: float) -> None:
    _saturation_kernel(_as_array(view), float(factor))


def tint(view: memoryview, delta_r: int, delta_g: int, delta_b: int) -> None:
    _tint_kernel(_as_array(view), float(delta_r), float(delta_g), float(delta_b))


def temperature(view: memoryview, warmth: float) -> None:
    _temperature_kernel(_as_array(view), float(warmth))


def fade(view: memoryview, amount: float) -> None:
    _fade_kernel(_as_array(view), float(amount))


def solarize(view: memoryview, threshold: float) -> None:
    _solarize_kernel(_as_array(view), float(threshold))


KERNELS: dict[str, Callable[..., None]] = {
    "invert": invert,
    "grayscale": grayscale,
    "brightness": brightness,
    "contrast": contrast,
    "gamma": gamma,
    "sepia": sepia,
    "saturation": saturation,
    "tint": tint,
    "temperature": temperature,
    "fade": fade,
    "solarize": solarize,
}


def warm_up() -> bool:
    """Compile every kernel against a one-pixel scratch buffer.

    Returns ``True`` when all kernels compiled, ``False`` if Numba rejected
    one of them.
    """

    scratch = bytearray(CHANNELS)
    view = memoryview(scratch)
    try:
        for name, kernel in KERNELS.items():
            if name == "tint":
                kernel(view, 0, 0, 0)
            else:
                kernel(view, 0.0)
    except NumbaError:
        _LOGGER.exception("Failed to compile filter kernels")
        return False
    _LOGGER.info("Compiled %d filter kernels", len(KERNELS))
    return True
