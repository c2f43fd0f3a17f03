"""Custom exceptions for nanomvvm.

This module defines a hierarchy of exceptions for the misuse cases of the
view-model and bound-view lifecycle, so hosts can catch them precisely
instead of observing silent corruption.
"""

from __future__ import annotations

from typing import Any


class NanoMvvmError(Exception):
    """Base exception for all nanomvvm errors.

    All custom exceptions inherit from this class, allowing code to catch
    all nanomvvm-specific errors with a single except clause.
    """

    def __init__(self, message: str = "", *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


def _describe(obj: Any) -> str:
    return type(obj).__name__


# ========== ViewModel Errors ==========


class ViewModelError(NanoMvvmError):
    """Base class for view-model lifecycle errors."""


class ViewModelDisposedError(ViewModelError):
    """Raised when a disposed view-model is used again."""

    def __init__(self, view_model: Any, operation: str):
        self.view_model = view_model
        self.operation = operation
        super().__init__(
            f"Cannot {operation}: {_describe(view_model)} has been disposed"
        )


class ViewModelLifecycleError(ViewModelError):
    """Raised when a lifecycle hook is invoked out of order."""

    def __init__(self, view_model: Any, reason: str):
        self.view_model = view_model
        self.reason = reason
        super().__init__(f"{_describe(view_model)} lifecycle error: {reason}")


class NotificationRecursionError(ViewModelError):
    """Raised when listeners keep re-triggering notify() past the depth limit."""

    def __init__(self, view_model: Any, depth: int):
        self.view_model = view_model
        self.depth = depth
        super().__init__(
            f"{_describe(view_model)}.notify() nested {depth} levels deep; "
            "a listener is probably mutating state it is notified about"
        )


# ========== Binding Errors ==========


class BindingError(NanoMvvmError):
    """Base class for view/view-model binding errors."""


class ViewModelAlreadyBoundError(BindingError):
    """Raised when a view-model is bound to a second mounted view."""

    def __init__(self, view_model: Any, bound_view: Any = None):
        self.view_model = view_model
        self.bound_view = bound_view
        msg = f"{_describe(view_model)} is already bound to a mounted view"
        if bound_view is not None:
            msg += f" ({_describe(bound_view)})"
        super().__init__(msg)


class ViewNotMountedError(BindingError):
    """Raised when an unmounted view is asked to bind again."""

    def __init__(self, view: Any, operation: str):
        self.view = view
        self.operation = operation
        super().__init__(f"Cannot {operation}: {_describe(view)} is not mounted")


# ========== Configuration Errors ==========


class ConfigurationError(NanoMvvmError):
    """Base class for configuration errors."""


class SettingsError(ConfigurationError):
    """Raised when binding settings are invalid."""

    def __init__(self, setting_name: str, reason: str):
        self.setting_name = setting_name
        self.reason = reason
        super().__init__(f"Settings error for '{setting_name}': {reason}")
