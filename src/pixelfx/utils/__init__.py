"""Shared helpers for pixelfx."""
