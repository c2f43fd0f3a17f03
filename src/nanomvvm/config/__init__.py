"""Configuration for nanomvvm."""

from .settings import DEFAULT_SETTINGS, BindingSettings

__all__ = ["BindingSettings", "DEFAULT_SETTINGS"]
