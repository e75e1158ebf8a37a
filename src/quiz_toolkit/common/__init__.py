"""Shared helpers."""

from .logging_utils import configure_logging, detach_handlers

__all__ = ["configure_logging", "detach_handlers"]
