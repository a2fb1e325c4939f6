"""Logging adapter backed by lib_log_rich."""

from __future__ import annotations

from .setup import LoggingSettings, start_logging

__all__ = ["LoggingSettings", "start_logging"]
