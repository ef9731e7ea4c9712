"""Modular pixel filter package.

This package provides the filter functionality through a clean separation
of concerns:
- algorithms: Pure per-channel arithmetic shared by every executor
- executors: Different implementation strategies (JIT, NumPy, Pillow, fallback)
- facade: Filter registry and backend dispatch
- utils: Buffer validation
"""

from __future__ import annotations

from .facade import BACKENDS, FILTER_NAMES, FILTERS, FilterSpec, apply_filter, get_filter

__all__ = ["BACKENDS", "FILTER_NAMES", "FILTERS", "FilterSpec", "apply_filter", "get_filter"]
