"""Core contracts for nanomvvm: exceptions and protocols."""

from .exceptions import (
    BindingError,
    ConfigurationError,
    NanoMvvmError,
    NotificationRecursionError,
    SettingsError,
    ViewModelAlreadyBoundError,
    ViewModelDisposedError,
    ViewModelError,
    ViewModelLifecycleError,
    ViewNotMountedError,
)
from .protocols import (
    LifecycleProtocol,
    Listener,
    ObservableProtocol,
    ViewBuilderProtocol,
    ViewModelProtocol,
)

__all__ = [
    # Protocols
    "Listener",
    "ObservableProtocol",
    "LifecycleProtocol",
    "ViewModelProtocol",
    "ViewBuilderProtocol",
    # Base exceptions
    "NanoMvvmError",
    # ViewModel exceptions
    "ViewModelError",
    "ViewModelDisposedError",
    "ViewModelLifecycleError",
    "NotificationRecursionError",
    # Binding exceptions
    "BindingError",
    "ViewModelAlreadyBoundError",
    "ViewNotMountedError",
    # Configuration exceptions
    "ConfigurationError",
    "SettingsError",
]
