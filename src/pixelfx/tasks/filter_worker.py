"""Worker that applies a filter job on a background thread."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from PySide6.QtCore import QObject, QRunnable, Signal

from ..config import DEFAULT_BACKEND
from ..core.filters import apply_filter
from ..core.filters.jit_executor import warm_up
from ..errors import PixelFxError
from ..utils.logging import get_logger

_LOGGER = get_logger()


@dataclass(frozen=True)
class FilterJobResult:
    """Outcome of one filter job, shaped like the host's reply message."""

    success: bool
    job: Optional[int]
    type: str
    buffer: Optional[bytes]
    error: Optional[str]
    prev_amount: Optional[float] = None
    current_amount: Optional[float] = None

    def as_message(self) -> dict[str, Any]:
        """Return the reply using the host's camelCase field names."""

        payload = asdict(self)
        payload["prevAmount"] = payload.pop("prev_amount")
        payload["currentAmount"] = payload.pop("current_amount")
        return payload


def process_image(
    buffer: bytes | bytearray | memoryview,
    filter_type: str,
    value: Any,
    job: Optional[int],
    *,
    backend: str = DEFAULT_BACKEND,
) -> FilterJobResult:
    """Apply *filter_type* to a private copy of *buffer*.

    The input is never mutated. *value* is a single parameter or, for
    multi-parameter filters such as ``tint``, a sequence of them.
    """

    _LOGGER.info("Processing %s filter (val: %s) for job %s", filter_type, value, job)
    working = bytearray(buffer)
    params = tuple(value) if isinstance(value, (list, tuple)) else (value,)
    try:
        apply_filter(filter_type, working, len(working), *params, backend=backend)
    except PixelFxError as exc:
        _LOGGER.error("Error processing %s filter: %s", filter_type, exc)
        return FilterJobResult(False, job, filter_type, None, str(exc) or "Unknown error occurred")

    _LOGGER.info("Successfully processed %s filter for job %s", filter_type, job)
    return FilterJobResult(True, job, filter_type, bytes(working), None)


def handle_message(message: Mapping[str, Any], *, backend: str = DEFAULT_BACKEND) -> dict[str, Any]:
    """Dispatch one request message and return the reply message.

    ``{"type": "init"}`` compiles the kernels ahead of the first job. Any
    other type names a filter and must carry a ``buffer``; ``prevAmount`` and
    ``currentAmount`` are echoed back untouched so the caller can match the
    reply to the slider state that produced it.
    """

    message_type = str(message.get("type", ""))
    job = message.get("job")

    if message_type == "init":
        _LOGGER.info("Initializing filter kernels")
        success = warm_up()
        return {
            "type": "init",
            "success": success,
            "job": job,
            "error": None if success else "Failed to compile filter kernels",
        }

    prev_amount = message.get("prevAmount")
    current_amount = message.get("currentAmount")
    buffer = message.get("buffer")
    if buffer is None:
        _LOGGER.error("No image data provided for %s job %s", message_type, job)
        result = FilterJobResult(False, job, message_type, None, "No image data provided")
    else:
        try:
            result = process_image(buffer, message_type, message.get("value"), job, backend=backend)
        except Exception as exc:
            _LOGGER.exception("Error in %s job %s", message_type, job)
            result = FilterJobResult(False, job, message_type, None, str(exc) or "Unknown error")

    return FilterJobResult(
        result.success,
        result.job,
        result.type,
        result.buffer,
        result.error,
        prev_amount,
        current_amount,
    ).as_message()


class FilterJobSignals(QObject):
    """Signals emitted by :class:`FilterJobWorker`."""

    finished = Signal(object)
    """Emitted with the reply message dictionary."""


class FilterJobWorker(QRunnable):
    """Run :func:`handle_message` for one request on a thread pool."""

    def __init__(self, message: Mapping[str, Any], *, backend: str = DEFAULT_BACKEND) -> None:
        super().__init__()
        self._message = dict(message)
        self._backend = backend
        self.signals = FilterJobSignals()

    @property
    def job(self) -> Optional[int]:
        return self._message.get("job")

    def run(self) -> None:  # type: ignore[override]
        """Process the request and notify listeners when done."""

        reply = handle_message(self._message, backend=self._backend)
        self.signals.finished.emit(reply)


__all__ = [
    "FilterJobResult",
    "FilterJobSignals",
    "FilterJobWorker",
    "handle_message",
    "process_image",
]
