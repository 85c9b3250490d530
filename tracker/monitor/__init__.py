"""Logging setup."""

from tracker.monitor.logger import JsonFormatter, setup_logging

__all__ = ["JsonFormatter", "setup_logging"]
