"""Buffer handling utilities shared by the filter executors.

Callers hand over whatever object owns their pixels (``bytearray``, NumPy
arrays, ``array.array``, ctypes buffers, Qt image bits, ...). This module
normalises them to a flat, writable byte view and checks the declared length
once, so the kernels never have to bounds-check individual pixels.
"""

from __future__ import annotations

from typing import Any

from ...config import CHANNELS
from ...errors import (
    InvalidBufferLengthError,
    OutOfBoundsError,
    ReadOnlyBufferError,
    UnsupportedBufferError,
)


def _resolve_pixel_buffer(buffer: Any, byte_length: int | None = None) -> tuple[memoryview, object]:
    """Return a writable 1-D :class:`memoryview` over the first *byte_length* bytes.

    ``byte_length`` defaults to the full size of *buffer*. The tuple's second
    element is the object that owns the memory; callers keep it in scope for
    as long as they use the view so the exporter cannot be collected while a
    kernel is still writing through it.
    """

    guard: object = buffer

    if isinstance(buffer, memoryview):
        view = buffer
    else:
        try:
            view = memoryview(buffer)
        except TypeError:
            raise UnsupportedBufferError(
                f"{type(buffer).__name__} does not expose a byte buffer"
            ) from None

    if view.readonly:
        raise ReadOnlyBufferError("Pixel buffer is read-only")

    if not view.c_contiguous:
        raise UnsupportedBufferError("Pixel buffer must be C-contiguous")

    # Normalise the layout to unsigned bytes so per-channel offsets are
    # consistent regardless of the exporter's item format.
    try:
        view = view.cast("B")
    except TypeError:
        # Multi-dimensional views need the shape argument when recasting.
        view = view.cast("B", (view.nbytes,))

    total = len(view)
    if byte_length is None:
        byte_length = total
    byte_length = int(byte_length)

    if byte_length < 0:
        raise OutOfBoundsError(f"Byte length {byte_length} is negative")
    if byte_length % CHANNELS != 0:
        raise InvalidBufferLengthError(
            f"Byte length {byte_length} is not a multiple of {CHANNELS}"
        )
    if byte_length > total:
        raise OutOfBoundsError(
            f"Byte length {byte_length} is outside the {total}-byte buffer"
        )

    if byte_length < total:
        view = view[:byte_length]

    return view, guard
