"""In-place RGBA8 pixel filters."""

from __future__ import annotations

from .core.filters import BACKENDS, FILTER_NAMES, FILTERS, FilterSpec, apply_filter, get_filter
from .core.image_filters import (
    brightness,
    clamp,
    contrast,
    fade,
    gamma,
    grayscale,
    invert,
    saturation,
    sepia,
    solarize,
    temperature,
    tint,
)

__version__ = "0.1.0"

__all__ = [
    "BACKENDS",
    "FILTERS",
    "FILTER_NAMES",
    "FilterSpec",
    "apply_filter",
    "brightness",
    "clamp",
    "contrast",
    "fade",
    "gamma",
    "get_filter",
    "grayscale",
    "invert",
    "saturation",
    "sepia",
    "solarize",
    "temperature",
    "tint",
]
