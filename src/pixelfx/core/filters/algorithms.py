"""Pure per-channel arithmetic shared by every filter executor.

This module contains the core mathematical rules of each transform,
implemented using Numba JIT compilation so the buffer kernels can inline
them. The helpers operate on plain numbers only (8-bit channel values and
scalar parameters) with no knowledge of buffers, Pillow or NumPy arrays,
which lets the LUT builder and the pure-Python fallback reuse them verbatim.
"""

from __future__ import annotations

import math

from numba import jit

from ...config import CHANNEL_MAX, CONTRAST_PIVOT, SEPIA_MATRIX, TEMPERATURE_SCALE

_MAX = float(CHANNEL_MAX)
_PIVOT = float(CONTRAST_PIVOT)
_TEMPERATURE = float(TEMPERATURE_SCALE)

_SEPIA_RR, _SEPIA_RG, _SEPIA_RB = SEPIA_MATRIX[0]
_SEPIA_GR, _SEPIA_GG, _SEPIA_GB = SEPIA_MATRIX[1]
_SEPIA_BR, _SEPIA_BG, _SEPIA_BB = SEPIA_MATRIX[2]


@jit(nopython=True, inline="always")
def clamp_channel(value: float) -> int:
    """Truncate *value* toward zero and bound it to ``[0, 255]``.

    Infinities saturate to the matching end of the range and ``NaN`` maps
    to ``0``.
    """

    if value >= _MAX:
        return CHANNEL_MAX
    # ``not >=`` also routes NaN to zero.
    if not value >= 1.0:
        return 0
    return int(value)


@jit(nopython=True, inline="always")
def _mix(original: float, target: float, amount: float) -> float:
    """Linear interpolation from *original* toward *target*.

    *amount* is not clamped; values outside ``[0, 1]`` extrapolate and are
    bounded only by the final channel clamp.
    """

    return original * (1.0 - amount) + target * amount


@jit(nopython=True, inline="always")
def blend_channel(value: int, target: float, amount: float) -> int:
    return clamp_channel(_mix(float(value), target, amount))


@jit(nopython=True, inline="always")
def gray_int(r: int, g: int, b: int) -> int:
    """Unweighted mean of the three colour channels, truncated."""

    return (int(r) + int(g) + int(b)) // 3


@jit(nopython=True, inline="always")
def gray_float(r: int, g: int, b: int) -> float:
    return (int(r) + int(g) + int(b)) / 3.0


@jit(nopython=True, inline="always")
def sepia_targets(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Return the fully-toned sepia triple, truncated to integers."""

    rf = float(r)
    gf = float(g)
    bf = float(b)
    sr = int(_SEPIA_RR * rf + _SEPIA_RG * gf + _SEPIA_RB * bf)
    sg = int(_SEPIA_GR * rf + _SEPIA_GG * gf + _SEPIA_GB * bf)
    sb = int(_SEPIA_BR * rf + _SEPIA_BG * gf + _SEPIA_BB * bf)
    return sr, sg, sb


@jit(nopython=True, inline="always")
def invert_channel(value: int, amount: float) -> int:
    return blend_channel(value, _MAX - float(value), amount)


@jit(nopython=True, inline="always")
def offset_channel(value: int, delta: float) -> int:
    """Add *delta* to *value*; shared by brightness, tint and temperature."""

    return clamp_channel(float(value) + delta)


@jit(nopython=True, inline="always")
def contrast_channel(value: int, factor: float) -> int:
    return clamp_channel((float(value) - _PIVOT) * factor + _PIVOT)


@jit(nopython=True, inline="always")
def gamma_channel(value: int, exponent: float) -> int:
    """Apply the power curve in the normalised ``[0, 1]`` domain."""

    return clamp_channel(math.pow(float(value) / _MAX, exponent) * _MAX)


@jit(nopython=True, inline="always")
def saturate_channel(value: int, gray: float, factor: float) -> int:
    return clamp_channel(gray + (float(value) - gray) * factor)


@jit(nopython=True, inline="always")
def warm_shift(warmth: float) -> float:
    """Return the red/blue offset produced by a temperature *warmth*."""

    return _TEMPERATURE * warmth


@jit(nopython=True, inline="always")
def fade_channel(value: int, amount: float) -> int:
    return blend_channel(value, _MAX, amount)


@jit(nopython=True, inline="always")
def solarize_channel(value: int, threshold: float) -> int:
    """Invert channels brighter than ``threshold * 255``; keep the rest."""

    if float(value) > threshold * _MAX:
        return CHANNEL_MAX - int(value)
    return int(value)
