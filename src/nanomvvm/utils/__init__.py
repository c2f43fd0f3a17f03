"""Utilities for nanomvvm."""

from .logger import logger, setup_logging

__all__ = ["logger", "setup_logging"]
