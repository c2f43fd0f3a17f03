"""Protocol definitions for the view-model and view capabilities.

The base classes in :mod:`nanomvvm.viewmodels` and :mod:`nanomvvm.ui` are
one implementation of these interfaces. Code that only needs a capability
(notification, lifecycle, rendering) should type against the protocol so
test doubles and alternative implementations can be swapped in.

Usage:
    Instead of:
        def attach(view_model: NanoMvvmViewModel): ...

    Use:
        def attach(view_model: ObservableProtocol): ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

Listener = Callable[[], None]


# ========== ViewModel Protocols ==========


@runtime_checkable
class ObservableProtocol(Protocol):
    """Protocol for objects that broadcast change notifications."""

    def subscribe(self, callback: Listener) -> None: ...

    def unsubscribe(self, callback: Listener) -> None: ...

    def notify(self) -> None: ...


@runtime_checkable
class LifecycleProtocol(Protocol):
    """Protocol for objects with an init/dispose lifecycle."""

    def init(self) -> None: ...

    def dispose(self) -> None: ...


@runtime_checkable
class ViewModelProtocol(ObservableProtocol, LifecycleProtocol, Protocol):
    """Protocol for a complete view-model: observable plus lifecycle."""

    @property
    def is_loading(self) -> bool: ...


# ========== View Protocols ==========


@runtime_checkable
class ViewBuilderProtocol(Protocol):
    """Protocol for views that render from a view-model."""

    def build_view(self, view_model: Any) -> None: ...
