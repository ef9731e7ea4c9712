"""Pure-Python filter executor.

This module provides a slow but dependable implementation that walks the byte
view one channel at a time, calling the shared scalar rules from
:mod:`.algorithms`. It needs nothing beyond a writable ``memoryview`` and
serves as the reference the vectorised executors are checked against.
"""

from __future__ import annotations

from typing import Callable

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


def _map_channels(view: memoryview, rule: Callable[[int, float], int], parameter: float) -> None:
    """Apply *rule* to every colour channel, skipping alpha."""

    for offset in range(0, len(view), CHANNELS):
        for index in range(offset, offset + ALPHA_OFFSET):
            view[index] = rule(view[index], parameter)


def invert(view: memoryview, amount: float) -> None:
    _map_channels(view, invert_channel, float(amount))


def grayscale(view: memoryview, amount: float) -> None:
    amount = float(amount)
    for offset in range(0, len(view), CHANNELS):
        r, g, b = view[offset], view[offset + 1], view[offset + 2]
        gray = float(gray_int(r, g, b))
        view[offset] = blend_channel(r, gray, amount)
        view[offset + 1] = blend_channel(g, gray, amount)
        view[offset + 2] = blend_channel(b, gray, amount)


def brightness(view: memoryview, delta: int) -> None:
    _map_channels(view, offset_channel, float(delta))


def contrast(view: memoryview, factor: float) -> None:
    _map_channels(view, contrast_channel, float(factor))


def gamma(view: memoryview, exponent: float) -> None:
    _map_channels(view, gamma_channel, float(exponent))


def sepia(view: memoryview, amount: float) -> None:
    amount = float(amount)
    for offset in range(0, len(view), CHANNELS):
        r, g, b = view[offset], view[offset + 1], view[offset + 2]
        sr, sg, sb = sepia_targets(r, g, b)
        view[offset] = blend_channel(r, float(sr), amount)
        view[offset + 1] = blend_channel(g, float(sg), amount)
        view[offset + 2] = blend_channel(b, float(sb), amount)


def saturation(view: memoryview, factor: float) -> None:
    factor = float(factor)
    for offset in range(0, len(view), CHANNELS):
        r, g, b = view[offset], view[offset + 1], view[offset + 2]
        gray = gray_float(r, g, b)
        view[offset] = saturate_channel(r, gray, factor)
        view[offset + 1] = saturate_channel(g, gray, factor)
        view[offset + 2] = saturate_channel(b, gray, factor)


def tint(view: memoryview, delta_r: int, delta_g: int, delta_b: int) -> None:
    deltas = (float(delta_r), float(delta_g), float(delta_b))
    for offset in range(0, len(view), CHANNELS):
        for channel, delta in enumerate(deltas):
            view[offset + channel] = offset_channel(view[offset + channel], delta)


def temperature(view: memoryview, warmth: float) -> None:
    shift = warm_shift(float(warmth))
    for offset in range(0, len(view), CHANNELS):
        view[offset] = offset_channel(view[offset], shift)
        view[offset + 2] = offset_channel(view[offset + 2], -shift)


def fade(view: memoryview, amount: float) -> None:
    _map_channels(view, fade_channel, float(amount))


def solarize(view: memoryview, threshold: float) -> None:
    _map_channels(view, solarize_channel, float(threshold))


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
