"""Custom exception hierarchy for pixelfx."""

from __future__ import annotations


class PixelFxError(Exception):
    """Base class for all custom errors raised by pixelfx."""


class InvalidBufferLengthError(PixelFxError):
    """Raised when a byte length does not describe whole RGBA pixels."""


class OutOfBoundsError(PixelFxError):
    """Raised when the declared byte length exceeds the supplied buffer."""


class ReadOnlyBufferError(PixelFxError):
    """Raised when the pixel buffer cannot be mutated in place."""


class UnsupportedBufferError(PixelFxError):
    """Raised when an object does not expose a contiguous byte buffer."""


class UnknownFilterError(PixelFxError):
    """Raised when the requested filter name is not registered."""


class UnknownBackendError(PixelFxError):
    """Raised when the requested execution backend does not exist."""


class FilterArgumentError(PixelFxError):
    """Raised when a filter receives the wrong number of parameters."""
