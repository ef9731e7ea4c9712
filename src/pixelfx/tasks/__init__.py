"""Background worker helpers for filter jobs."""

from .filter_worker import (
    FilterJobResult,
    FilterJobSignals,
    FilterJobWorker,
    handle_message,
    process_image,
)

__all__ = [
    "FilterJobResult",
    "FilterJobSignals",
    "FilterJobWorker",
    "handle_message",
    "process_image",
]
