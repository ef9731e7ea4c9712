"""Filter registry and backend dispatch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Final, Mapping

from ...config import CHANNEL_MAX, DEFAULT_BACKEND
from ...errors import FilterArgumentError, UnknownBackendError, UnknownFilterError
from . import fallback_executor, jit_executor, numpy_executor, pillow_executor
from .utils import _resolve_pixel_buffer

_LOGGER = logging.getLogger(__name__)

# Any delta beyond this saturates every channel, so larger values are equivalent.
_DELTA_LIMIT: Final[int] = 2 * CHANNEL_MAX


def _bounded_int(value: Any) -> int:
    """Truncate *value* to an integer delta bounded by ``_DELTA_LIMIT``.

    Infinities saturate to the matching bound; ``NaN`` raises ``ValueError``.
    """

    try:
        number = int(value)
    except OverflowError:
        number = _DELTA_LIMIT if value > 0 else -_DELTA_LIMIT
    return max(-_DELTA_LIMIT, min(_DELTA_LIMIT, number))


@dataclass(frozen=True)
class FilterSpec:
    """Describe one transform and the parameters it accepts."""

    name: str
    family: str
    parameters: tuple[str, ...]
    identity: tuple[float, ...]
    integer: bool = False
    """Whether parameters are integer deltas rather than real factors."""

    def coerce(self, params: tuple[Any, ...]) -> tuple[float, ...]:
        """Return *params* converted to the numeric type the kernels expect."""

        if len(params) != len(self.parameters):
            expected = ", ".join(self.parameters)
            raise FilterArgumentError(
                f"{self.name} expects {len(self.parameters)} parameter(s) ({expected}), "
                f"got {len(params)}"
            )
        convert: Callable[[Any], float] = _bounded_int if self.integer else float
        try:
            return tuple(convert(value) for value in params)
        except (TypeError, ValueError) as exc:
            raise FilterArgumentError(f"Invalid parameter for {self.name}: {exc}") from exc


FILTERS: Final[Mapping[str, FilterSpec]] = {
    spec.name: spec
    for spec in (
        FilterSpec("invert", "tone", ("amount",), (0.0,)),
        FilterSpec("grayscale", "tone", ("amount",), (0.0,)),
        FilterSpec("brightness", "tone", ("value",), (0,), integer=True),
        FilterSpec("contrast", "tone", ("factor",), (1.0,)),
        FilterSpec("gamma", "tone", ("exponent",), (1.0,)),
        FilterSpec("sepia", "color", ("amount",), (0.0,)),
        FilterSpec("saturation", "color", ("factor",), (1.0,)),
        FilterSpec("tint", "color", ("r", "g", "b"), (0, 0, 0), integer=True),
        FilterSpec("temperature", "color", ("warmth",), (0.0,)),
        FilterSpec("fade", "stylize", ("amount",), (0.0,)),
        FilterSpec("solarize", "stylize", ("threshold",), (1.0,)),
    )
}
"""Every available transform keyed by its exported name."""

FILTER_NAMES: Final[tuple[str, ...]] = tuple(FILTERS)

BACKENDS: Final[tuple[str, ...]] = ("jit", "numpy", "pillow", "python")

_KERNELS: Final[Mapping[str, Mapping[str, Callable[..., None]]]] = {
    "jit": jit_executor.KERNELS,
    "numpy": numpy_executor.KERNELS,
    "python": fallback_executor.KERNELS,
}


def get_filter(name: str) -> FilterSpec:
    """Return the :class:`FilterSpec` registered under *name*."""

    try:
        return FILTERS[name]
    except KeyError:
        raise UnknownFilterError(f"Unknown filter: {name!r}") from None


def apply_filter(
    name: str,
    buffer: Any,
    byte_length: int | None = None,
    *params: Any,
    backend: str = DEFAULT_BACKEND,
) -> None:
    """Apply filter *name* to the first *byte_length* bytes of *buffer* in place.

    *byte_length* defaults to the whole buffer. The buffer is validated once
    here; the executors assume a writable view whose length is a multiple of
    the channel count.
    """

    spec = get_filter(name)
    if backend not in BACKENDS:
        raise UnknownBackendError(f"Unknown backend: {backend!r}")
    values = spec.coerce(params)

    view, guard = _resolve_pixel_buffer(buffer, byte_length)
    # Holding ``guard`` keeps the exporting object alive while the executor
    # writes through ``view``.
    _ = guard

    if len(view) == 0:
        return

    _LOGGER.debug("Applying %s%r to %d bytes via %s", name, values, len(view), backend)

    if backend == "pillow":
        luts = pillow_executor.build_channel_luts(name, values)
        if luts is not None:
            pillow_executor.apply_channel_luts(view, luts)
            return
        _LOGGER.debug("%s has no lookup-table form; using the jit executor", name)
        backend = "jit"

    _KERNELS[backend][name](view, *values)
