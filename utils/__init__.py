"""Utilities package - Logging setup helpers."""

from .logging_utils import JsonFormatter, setup_logging

__all__ = [
    'JsonFormatter',
    'setup_logging',
]
