"""NumPy vectorized filter executor.

This module provides vectorised implementations of the filters that operate
on an ``(N, 4)`` view of the caller's buffer. The RGB columns are promoted to
``float64``, transformed, clamped with the same truncating rule as the scalar
path and written back through the view, so the caller's memory is updated in
place and the alpha column is never touched.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from ...config import ALPHA_OFFSET, CHANNEL_MAX, CHANNELS, CONTRAST_PIVOT, SEPIA_MATRIX, TEMPERATURE_SCALE
from .algorithms import gamma_channel

_MAX = np.float64(CHANNEL_MAX)
_SEPIA = np.asarray(SEPIA_MATRIX, dtype=np.float64)


def _np_clamp_channel(values: np.ndarray) -> np.ndarray:
    """Vectorised equivalent of :func:`algorithms.clamp_channel`."""

    with np.errstate(invalid="ignore"):
        clamped = np.where(
            values >= _MAX,
            _MAX,
            np.where(values >= 1.0, np.trunc(values), 0.0),
        )
    return clamped.astype(np.uint8)


def _np_mix(a: np.ndarray, b: np.ndarray | float, t: float) -> np.ndarray:
    return a * (1.0 - t) + b * t


def _pixels(view: memoryview) -> np.ndarray:
    """Return an ``(N, 4)`` ``uint8`` array sharing memory with *view*."""

    buffer = np.frombuffer(view, dtype=np.uint8, count=len(view))
    return buffer.reshape((-1, CHANNELS))


def _rgb(pixels: np.ndarray) -> np.ndarray:
    return pixels[:, :ALPHA_OFFSET].astype(np.float64)


def _channel_sum(pixels: np.ndarray) -> np.ndarray:
    return pixels[:, :ALPHA_OFFSET].astype(np.int64).sum(axis=1)


def invert(view: memoryview, amount: float) -> None:
    pixels = _pixels(view)
    rgb = _rgb(pixels)
    pixels[:, :ALPHA_OFFSET] = _np_clamp_channel(_np_mix(rgb, _MAX - rgb, float(amount)))


def grayscale(view: memoryview, amount: float) -> None:
    pixels = _pixels(view)
    gray = (_channel_sum(pixels) // 3).astype(np.float64)[:, None]
    pixels[:, :ALPHA_OFFSET] = _np_clamp_channel(_np_mix(_rgb(pixels), gray, float(amount)))


def brightness(view: memoryview, delta: int) -> None:
    pixels = _pixels(view)
    pixels[:, :ALPHA_OFFSET] = _np_clamp_channel(_rgb(pixels) + float(delta))


def contrast(view: memoryview, factor: float) -> None:
    pixels = _pixels(view)
    pivot = float(CONTRAST_PIVOT)
    pixels[:, :ALPHA_OFFSET] = _np_clamp_channel((_rgb(pixels) - pivot) * float(factor) + pivot)


def gamma(view: memoryview, exponent: float) -> None:
    """Apply the gamma curve through a 256-entry table.

    ``np.power`` may round differently from the scalar ``pow`` by one ulp,
    which truncation can turn into an off-by-one channel. Tabulating the
    scalar rule keeps this path byte-identical to the others.
    """

    pixels = _pixels(view)
    exponent = float(exponent)
    table = np.fromiter(
        (gamma_channel(value, exponent) for value in range(CHANNEL_MAX + 1)),
        dtype=np.uint8,
        count=CHANNEL_MAX + 1,
    )
    pixels[:, :ALPHA_OFFSET] = table[pixels[:, :ALPHA_OFFSET]]


def sepia(view: memoryview, amount: float) -> None:
    pixels = _pixels(view)
    rgb = _rgb(pixels)
    r = rgb[:, 0]
    g = rgb[:, 1]
    b = rgb[:, 2]
    # Written out term by term to keep the scalar path's evaluation order.
    targets = np.stack(
        [np.trunc(row[0] * r + row[1] * g + row[2] * b) for row in _SEPIA],
        axis=1,
    )
    pixels[:, :ALPHA_OFFSET] = _np_clamp_channel(_np_mix(rgb, targets, float(amount)))


def saturation(view: memoryview, factor: float) -> None:
    pixels = _pixels(view)
    gray = (_channel_sum(pixels) / 3.0)[:, None]
    pixels[:, :ALPHA_OFFSET] = _np_clamp_channel(gray + (_rgb(pixels) - gray) * float(factor))


def tint(view: memoryview, delta_r: int, delta_g: int, delta_b: int) -> None:
    pixels = _pixels(view)
    deltas = np.array([delta_r, delta_g, delta_b], dtype=np.float64)
    pixels[:, :ALPHA_OFFSET] = _np_clamp_channel(_rgb(pixels) + deltas)


def temperature(view: memoryview, warmth: float) -> None:
    pixels = _pixels(view)
    shift = float(TEMPERATURE_SCALE) * float(warmth)
    pixels[:, 0] = _np_clamp_channel(pixels[:, 0].astype(np.float64) + shift)
    pixels[:, 2] = _np_clamp_channel(pixels[:, 2].astype(np.float64) + -shift)


def fade(view: memoryview, amount: float) -> None:
    pixels = _pixels(view)
    pixels[:, :ALPHA_OFFSET] = _np_clamp_channel(_np_mix(_rgb(pixels), _MAX, float(amount)))


def solarize(view: memoryview, threshold: float) -> None:
    pixels = _pixels(view)
    rgb = pixels[:, :ALPHA_OFFSET]
    bright = rgb.astype(np.float64) > float(threshold) * _MAX
    rgb[bright] = CHANNEL_MAX - rgb[bright]


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
