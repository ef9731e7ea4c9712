"""In-place RGBA8 filters with the exported calling convention.

Every transform takes ``(buffer, byte_length, *parameters)``, mutates the
first *byte_length* bytes of *buffer* in place and returns ``None``. Alpha
bytes are never modified. Parameters are not range-checked: extreme values
produce clamped output rather than errors. The buffer itself is checked once
per call and raises a :class:`~pixelfx.errors.PixelFxError` subclass when
misused.
"""

from __future__ import annotations

from typing import Any

from ..config import DEFAULT_BACKEND
from .filters import apply_filter
from .filters.algorithms import clamp_channel


def clamp(value: float) -> int:
    """Bound *value* to ``[0, 255]``, truncating toward zero."""

    return int(clamp_channel(float(value)))


# ---------------------------------------------------------------------------
# Tone/Core family
# ---------------------------------------------------------------------------


def invert(buffer: Any, byte_length: int, amount: float, *, backend: str = DEFAULT_BACKEND) -> None:
    """Blend each channel toward its negative by *amount*."""

    apply_filter("invert", buffer, byte_length, amount, backend=backend)


def grayscale(buffer: Any, byte_length: int, amount: float, *, backend: str = DEFAULT_BACKEND) -> None:
    """Blend toward the truncated mean ``(R + G + B) // 3`` by *amount*."""

    apply_filter("grayscale", buffer, byte_length, amount, backend=backend)


def brightness(buffer: Any, byte_length: int, value: int, *, backend: str = DEFAULT_BACKEND) -> None:
    apply_filter("brightness", buffer, byte_length, value, backend=backend)


def contrast(buffer: Any, byte_length: int, factor: float, *, backend: str = DEFAULT_BACKEND) -> None:
    """Scale each channel's distance from 128 by *factor*."""

    apply_filter("contrast", buffer, byte_length, factor, backend=backend)


def gamma(buffer: Any, byte_length: int, exponent: float, *, backend: str = DEFAULT_BACKEND) -> None:
    apply_filter("gamma", buffer, byte_length, exponent, backend=backend)


# ---------------------------------------------------------------------------
# Color family
# ---------------------------------------------------------------------------


def sepia(buffer: Any, byte_length: int, amount: float, *, backend: str = DEFAULT_BACKEND) -> None:
    apply_filter("sepia", buffer, byte_length, amount, backend=backend)


def saturation(buffer: Any, byte_length: int, factor: float, *, backend: str = DEFAULT_BACKEND) -> None:
    """Push channels away from (``factor > 1``) or toward (``factor < 1``) the pixel mean."""

    apply_filter("saturation", buffer, byte_length, factor, backend=backend)


def tint(
    buffer: Any,
    byte_length: int,
    r: int,
    g: int,
    b: int,
    *,
    backend: str = DEFAULT_BACKEND,
) -> None:
    """Add fixed integer offsets to the red, green and blue channels."""

    apply_filter("tint", buffer, byte_length, r, g, b, backend=backend)


def temperature(buffer: Any, byte_length: int, warmth: float, *, backend: str = DEFAULT_BACKEND) -> None:
    """Shift red up and blue down by ``20 * warmth``; green is untouched."""

    apply_filter("temperature", buffer, byte_length, warmth, backend=backend)


# ---------------------------------------------------------------------------
# Stylize family
# ---------------------------------------------------------------------------


def fade(buffer: Any, byte_length: int, amount: float, *, backend: str = DEFAULT_BACKEND) -> None:
    apply_filter("fade", buffer, byte_length, amount, backend=backend)


def solarize(buffer: Any, byte_length: int, threshold: float, *, backend: str = DEFAULT_BACKEND) -> None:
    """Invert channels above ``threshold * 255``; *threshold* is a fraction in ``[0, 1]``."""

    apply_filter("solarize", buffer, byte_length, threshold, backend=backend)


__all__ = [
    "brightness",
    "clamp",
    "contrast",
    "fade",
    "gamma",
    "grayscale",
    "invert",
    "saturation",
    "sepia",
    "solarize",
    "temperature",
    "tint",
]
