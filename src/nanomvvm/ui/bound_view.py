"""NanoMvvmView: base widget that renders from a NanoMvvmViewModel.

The view subscribes to its view-model when it is created, re-renders on
every notification and disposes the view-model when it is unmounted.
Subclasses implement ``setup_ui`` to create child widgets once and
``build_view`` to copy view-model state onto them.

Usage:
    class ItemView(NanoMvvmView[ItemViewModel]):
        def setup_ui(self):
            self.label = QLabel(self)

        def build_view(self, view_model):
            self.label.setText(view_model.item_name)
"""

from __future__ import annotations

from typing import Generic, TypeVar

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QWidget

from ..config.settings import DEFAULT_SETTINGS, BindingSettings
from ..core.exceptions import ViewNotMountedError
from ..utils.logger import logger
from ..viewmodels.view_model import NanoMvvmViewModel

T = TypeVar("T", bound=NanoMvvmViewModel)


class NanoMvvmView(QWidget, Generic[T]):
    """Base widget bound to exactly one view-model at a time.

    Lifecycle:
    - mount (constructor): bind, subscribe, view_model.init() unless it
      already ran, first render
    - set_view_model: move the subscription to another view-model
    - notification: rebuild() while mounted, ignored afterwards
    - unmount (or close): unsubscribe, then view_model.dispose()

    A view-model must not be shared between two mounted views; binding it
    twice raises ViewModelAlreadyBoundError.
    """

    view_model_changed = pyqtSignal(object)  # Emits the newly bound view-model
    unmounted = pyqtSignal()

    def __init__(
        self,
        view_model: T,
        parent: QWidget | None = None,
        *,
        settings: BindingSettings | None = None,
    ):
        super().__init__(parent)
        self._settings = settings if settings is not None else DEFAULT_SETTINGS
        self._view_model: T = view_model
        self._mounted = False
        self._build_count = 0

        self.setup_ui()
        self._mount()

    # ========== Accessors ==========

    @property
    def view_model(self) -> T:
        """The view-model currently bound to this view."""
        return self._view_model

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def build_count(self) -> int:
        """Number of times build_view() has run."""
        return self._build_count

    @property
    def settings(self) -> BindingSettings:
        return self._settings

    # ========== Subclass API ==========

    def setup_ui(self) -> None:
        """Create child widgets. Called once, before the first render."""

    def build_view(self, view_model: T) -> None:
        """Render the current view-model state onto the widgets.

        Must only read from ``view_model``.
        """
        raise NotImplementedError(
            f"{type(self).__name__} must implement build_view()"
        )

    # ========== Lifecycle ==========

    def _mount(self) -> None:
        self._view_model.bind_view(self)
        self._view_model.subscribe(self._on_view_model_changed)
        self._mounted = True
        logger.debug(
            f"{type(self).__name__} mounted with {type(self._view_model).__name__}"
        )

        try:
            # A view-model released by another view's rebind is already active
            if not self._view_model.is_initialized:
                self._view_model.init()
            self.rebuild()
        except BaseException:
            # Leave the view-model free for another view
            self._mounted = False
            self._view_model.unsubscribe(self._on_view_model_changed)
            self._view_model.unbind_view(self)
            raise

    def set_view_model(self, view_model: T) -> None:
        """Bind the view to a different view-model.

        The old view-model is released but not disposed. The new one is
        initialized only when ``reinit_on_rebind`` is set and it has not
        been initialized yet.

        Args:
            view_model: The view-model to bind

        Raises:
            ViewNotMountedError: If the view was unmounted
            ViewModelAlreadyBoundError: If another view owns ``view_model``
        """
        if not self._mounted:
            raise ViewNotMountedError(self, "set view model")
        if view_model is self._view_model:
            return

        # Claim first so a rejected view-model leaves the old binding intact
        view_model.bind_view(self)

        old = self._view_model
        old.unsubscribe(self._on_view_model_changed)
        old.unbind_view(self)

        self._view_model = view_model
        view_model.subscribe(self._on_view_model_changed)
        logger.debug(
            f"{type(self).__name__} rebound from {type(old).__name__} "
            f"to {type(view_model).__name__}"
        )

        if self._settings.reinit_on_rebind and not view_model.is_initialized:
            view_model.init()

        self.view_model_changed.emit(view_model)
        self.rebuild()

    def unmount(self) -> None:
        """Detach from the view-model and dispose it.

        Calling unmount() on an unmounted view does nothing.

        Raises:
            ViewModelDisposedError: If the view-model was already disposed
                elsewhere
        """
        if not self._mounted:
            return
        self._mounted = False

        view_model = self._view_model
        view_model.unsubscribe(self._on_view_model_changed)
        view_model.unbind_view(self)
        logger.debug(f"{type(self).__name__} unmounted")

        try:
            view_model.dispose()
        finally:
            self.unmounted.emit()

    def rebuild(self) -> None:
        """Re-render from the bound view-model and schedule a repaint."""
        self._build_count += 1
        self.build_view(self._view_model)
        self.update()

    def _on_view_model_changed(self) -> None:
        # Late notifications can arrive after unmount (e.g. from timers)
        if self._mounted:
            self.rebuild()

    # ========== Qt Events ==========

    def closeEvent(self, event: QCloseEvent) -> None:
        """Unmount on close when dispose_on_close is enabled."""
        if self._settings.dispose_on_close and self._mounted:
            try:
                self.unmount()
            except Exception as e:
                # Exceptions escaping a Qt event handler abort the application
                logger.error(f"Error unmounting {type(self).__name__}: {e}")
        super().closeEvent(event)
