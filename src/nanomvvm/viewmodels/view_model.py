"""NanoMvvmViewModel: base class for observable view-models.

The view-model owns UI state and tells bound views when it changes. Views
register a zero-argument callback with subscribe() and re-render whenever
notify() runs. Qt code that prefers signals can connect to ``changed``
instead.
"""

from __future__ import annotations

import weakref
from collections.abc import Callable
from enum import Enum
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from ..config.settings import DEFAULT_SETTINGS, BindingSettings
from ..core.exceptions import (
    NotificationRecursionError,
    ViewModelAlreadyBoundError,
    ViewModelDisposedError,
    ViewModelLifecycleError,
)
from ..core.protocols import Listener, ViewBuilderProtocol
from ..utils.logger import logger


class ViewModelState(Enum):
    """Lifecycle states of a view-model."""

    CREATED = "created"
    ACTIVE = "active"
    DISPOSED = "disposed"


class NanoMvvmViewModel(QObject):
    """Base class for view-models bound to a NanoMvvmView.

    Owns and manages:
    - The generic busy flag (``is_loading``)
    - The listener registry used by bound views
    - The init/dispose lifecycle

    Emits signals for reactive UI binding:
    - changed: After every notify() pass
    - loading_changed: When is_loading flips (new value)

    Subclasses customize the lifecycle by overriding ``on_init`` and
    ``on_dispose`` rather than ``init``/``dispose``. Base cleanup always
    runs after subclass cleanup.
    """

    changed = pyqtSignal()
    loading_changed = pyqtSignal(bool)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: BindingSettings | None = None,
    ):
        """Initialize the view-model.

        Args:
            parent: Optional parent QObject
            settings: Binding settings; defaults to DEFAULT_SETTINGS
        """
        super().__init__(parent)

        self._settings = settings if settings is not None else DEFAULT_SETTINGS
        self._is_loading: bool = False
        self._state = ViewModelState.CREATED

        # dict keys keep insertion order and reject duplicates
        self._listeners: dict[Listener, None] = {}
        self._notify_depth = 0

        self._init_hooks: list[Callable[[], Any]] = []
        self._dispose_hooks: list[Callable[[], Any]] = []

        self._bound_view_ref: weakref.ref | None = None

    # ========== Busy Flag ==========

    @property
    def is_loading(self) -> bool:
        """Whether the view-model is busy with background work."""
        return self._is_loading

    @is_loading.setter
    def is_loading(self, value: bool) -> None:
        value = bool(value)
        if value == self._is_loading:
            return
        if self._state is ViewModelState.DISPOSED:
            self._reject_disposed("set is_loading")
            return

        self._is_loading = value
        self.notify()
        if self._state is not ViewModelState.DISPOSED:
            self.loading_changed.emit(value)

    # ========== Listener Registry ==========

    def subscribe(self, callback: Listener) -> None:
        """Register a callback invoked with no arguments on every notify().

        Subscribing a callback that is already registered does nothing.
        """
        if self._state is ViewModelState.DISPOSED:
            self._reject_disposed("subscribe")
            return
        self._listeners.setdefault(callback, None)

    def unsubscribe(self, callback: Listener) -> None:
        """Remove a callback. Unknown callbacks are ignored."""
        self._listeners.pop(callback, None)

    def has_listener(self, callback: Listener) -> bool:
        return callback in self._listeners

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def notify(self) -> None:
        """Call every registered listener in registration order.

        Listeners removed while the pass is running are skipped. Nested
        calls from listeners are allowed up to ``max_notify_depth``.

        Raises:
            NotificationRecursionError: If nesting exceeds the limit
            ViewModelDisposedError: If disposed and strict_disposal is set
        """
        if self._state is ViewModelState.DISPOSED:
            self._reject_disposed("notify")
            return
        if self._notify_depth >= self._settings.max_notify_depth:
            raise NotificationRecursionError(self, self._notify_depth + 1)

        self._notify_depth += 1
        try:
            for callback in list(self._listeners):
                if callback in self._listeners:
                    callback()
            if self._state is not ViewModelState.DISPOSED:
                self.changed.emit()
        finally:
            self._notify_depth -= 1

    # ========== Lifecycle ==========

    @property
    def state(self) -> ViewModelState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        """True once init() has run (including after dispose)."""
        return self._state is not ViewModelState.CREATED

    @property
    def is_disposed(self) -> bool:
        return self._state is ViewModelState.DISPOSED

    @property
    def settings(self) -> BindingSettings:
        return self._settings

    def add_init_hook(self, hook: Callable[[], Any]) -> None:
        """Run ``hook`` during init(), after on_init(), in registration order."""
        self._init_hooks.append(hook)

    def add_dispose_hook(self, hook: Callable[[], Any]) -> None:
        """Run ``hook`` during dispose(), after on_dispose(), before base cleanup."""
        self._dispose_hooks.append(hook)

    def init(self) -> None:
        """Initialize the view-model. Called once by the view that mounts it.

        Raises:
            ViewModelDisposedError: If the view-model was disposed
            ViewModelLifecycleError: If init() already ran
        """
        if self._state is ViewModelState.DISPOSED:
            raise ViewModelDisposedError(self, "init")
        if self._state is ViewModelState.ACTIVE:
            raise ViewModelLifecycleError(self, "init() called more than once")

        self._state = ViewModelState.ACTIVE
        try:
            self.on_init()
            for hook in list(self._init_hooks):
                hook()
        except BaseException:
            # A failed init can be retried
            self._state = ViewModelState.CREATED
            raise
        logger.debug(f"{type(self).__name__} initialized")

    def dispose(self) -> None:
        """Retire the view-model and release its listeners.

        Subclass cleanup (on_dispose, then dispose hooks) runs first. Base
        cleanup runs last even if subclass cleanup raises: is_loading is
        reset without notifying and all listeners are dropped.

        Raises:
            ViewModelDisposedError: If the view-model was already disposed
        """
        if self._state is ViewModelState.DISPOSED:
            raise ViewModelDisposedError(self, "dispose")

        try:
            self.on_dispose()
            for hook in list(self._dispose_hooks):
                hook()
        finally:
            self._release_base_state()
            logger.debug(f"{type(self).__name__} disposed")

    def on_init(self) -> None:
        """Override to load initial data or set up resources."""

    def on_dispose(self) -> None:
        """Override to release timers, workers or other owned resources."""

    def _release_base_state(self) -> None:
        self._is_loading = False
        self._listeners.clear()
        self._init_hooks.clear()
        self._dispose_hooks.clear()
        self._bound_view_ref = None
        self._state = ViewModelState.DISPOSED

        for signal in (self.changed, self.loading_changed):
            try:
                signal.disconnect()
            except TypeError:
                # No receivers connected
                pass

    def _reject_disposed(self, operation: str) -> None:
        if self._settings.strict_disposal:
            raise ViewModelDisposedError(self, operation)
        logger.warning(
            f"Ignoring {operation} on disposed {type(self).__name__}"
        )

    # ========== View Binding ==========

    @property
    def bound_view(self) -> ViewBuilderProtocol | None:
        """The mounted view currently bound to this view-model, if any."""
        if self._bound_view_ref is None:
            return None
        return self._bound_view_ref()

    def bind_view(self, view: ViewBuilderProtocol) -> None:
        """Record ``view`` as the owner of this view-model.

        Raises:
            ViewModelDisposedError: If the view-model was disposed
            ViewModelAlreadyBoundError: If another live view owns it
        """
        if self._state is ViewModelState.DISPOSED:
            raise ViewModelDisposedError(self, "bind a view")
        current = self.bound_view
        if current is not None and current is not view:
            raise ViewModelAlreadyBoundError(self, current)
        self._bound_view_ref = weakref.ref(view)

    def unbind_view(self, view: ViewBuilderProtocol) -> None:
        """Forget ``view`` if it is the current owner."""
        if self.bound_view is view:
            self._bound_view_ref = None
