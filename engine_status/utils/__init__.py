"""Utility functions and helpers."""

from engine_status.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
