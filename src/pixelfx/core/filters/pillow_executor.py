"""Pillow-based filter executor using lookup tables (LUT).

Every filter whose output channel depends only on the same input channel can
be pre-computed for the 256 possible byte values and applied with Pillow's
C-optimised :meth:`PIL.Image.Image.point`. Filters that mix channels
(grayscale, sepia, saturation) have no table form; :func:`build_channel_luts`
returns ``None`` for them and the caller picks another executor.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable

from PIL import Image

from ...config import CHANNEL_MAX, CHANNELS
from .algorithms import (
    contrast_channel,
    fade_channel,
    gamma_channel,
    invert_channel,
    offset_channel,
    solarize_channel,
    warm_shift,
)

_IDENTITY: list[int] = list(range(CHANNEL_MAX + 1))


def _table(rule: Callable[[int, float], int], parameter: float) -> list[int]:
    """Pre-compute *rule* for every possible 8-bit channel value."""

    return [int(rule(value, parameter)) for value in range(CHANNEL_MAX + 1)]


def build_channel_luts(name: str, params: Sequence[float]) -> tuple[list[int], list[int], list[int]] | None:
    """Return the red, green and blue tables for filter *name*.

    ``None`` signals that the filter cannot be expressed per channel.
    """

    if name == "tint":
        delta_r, delta_g, delta_b = (float(value) for value in params)
        return (
            _table(offset_channel, delta_r),
            _table(offset_channel, delta_g),
            _table(offset_channel, delta_b),
        )

    if name == "temperature":
        shift = float(warm_shift(float(params[0])))
        return _table(offset_channel, shift), list(_IDENTITY), _table(offset_channel, -shift)

    rules: dict[str, Callable[[int, float], int]] = {
        "invert": invert_channel,
        "brightness": offset_channel,
        "contrast": contrast_channel,
        "gamma": gamma_channel,
        "fade": fade_channel,
        "solarize": solarize_channel,
    }
    rule = rules.get(name)
    if rule is None:
        return None
    shared = _table(rule, float(params[0]))
    return shared, list(shared), list(shared)


def apply_channel_luts(view: memoryview, luts: tuple[Sequence[int], Sequence[int], Sequence[int]]) -> None:
    """Run *view* through *luts* with Pillow and write the result back in place."""

    pixel_count = len(view) // CHANNELS
    if pixel_count == 0:
        return

    # The buffer is treated as a single row of RGBA pixels. ``point`` renders
    # into a new image whose bytes are copied back over the caller's view.
    image = Image.frombuffer("RGBA", (pixel_count, 1), view, "raw", "RGBA", 0, 1)

    # Identity table for alpha keeps transparency untouched.
    red, green, blue = luts
    table: list[int] = list(red) + list(green) + list(blue) + _IDENTITY
    result = image.point(table)

    view[:] = result.tobytes()
