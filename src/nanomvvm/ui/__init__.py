"""Bound view widgets for nanomvvm."""

from .bound_view import NanoMvvmView

__all__ = ["NanoMvvmView"]
