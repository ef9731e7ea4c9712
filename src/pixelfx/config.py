"""Default configuration values for pixelfx."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Pixel layout
# ---------------------------------------------------------------------------

CHANNELS: Final[int] = 4
"""Interleaved samples per pixel (R, G, B, A)."""

ALPHA_OFFSET: Final[int] = CHANNELS - 1
CHANNEL_MAX: Final[int] = 255

# ---------------------------------------------------------------------------
# Filter constants
# ---------------------------------------------------------------------------

CONTRAST_PIVOT: Final[int] = 128
TEMPERATURE_SCALE: Final[float] = 20.0

SEPIA_MATRIX: Final[tuple[tuple[float, float, float], ...]] = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

# ---------------------------------------------------------------------------
# Execution and logging
# ---------------------------------------------------------------------------

DEFAULT_BACKEND: Final[str] = "jit"

LOGGER_NAME: Final[str] = "pixelfx"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# Matches the history depth the host-side worker logger kept in memory.
LOG_HISTORY_LIMIT: Final[int] = 1000
