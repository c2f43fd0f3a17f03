"""Item list demo: one model, view-model and view per to-do item."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QCheckBox, QHBoxLayout, QLabel, QProgressBar

from .ui.bound_view import NanoMvvmView
from .utils.logger import logger
from .viewmodels.view_model import NanoMvvmViewModel

SELECTED_COLOR = "#b3e5fc"
UNSELECTED_COLOR = "#ffffff"


@dataclass
class Item:
    """A to-do item. Plain data, no UI knowledge."""

    name: str
    is_selected: bool = False


class ItemViewModel(NanoMvvmViewModel):
    """UI state and logic for a single Item."""

    DEFAULT_DELAY_MS = 1000

    def __init__(self, item: Item, delay_ms: int = DEFAULT_DELAY_MS, parent=None):
        super().__init__(parent)
        self._item = item
        self._delay_ms = delay_ms

        # Simulates a slow backend call
        self._toggle_timer = QTimer(self)
        self._toggle_timer.setSingleShot(True)
        self._toggle_timer.timeout.connect(self._finish_toggle)

    @property
    def item_name(self) -> str:
        return self._item.name

    @property
    def is_item_selected(self) -> bool:
        return self._item.is_selected

    def toggle_selection(self) -> None:
        """Flip the selection after a delay, showing the busy state meanwhile."""
        if self.is_disposed or self.is_loading:
            return
        self.is_loading = True
        self._toggle_timer.start(self._delay_ms)

    def _finish_toggle(self) -> None:
        if self.is_disposed:
            return
        self._item.is_selected = not self._item.is_selected
        self.is_loading = False

    def on_init(self) -> None:
        logger.info(f'ItemViewModel for "{self._item.name}" initialized')

    def on_dispose(self) -> None:
        self._toggle_timer.stop()
        logger.info(f'ItemViewModel for "{self._item.name}" disposed')


class ItemView(NanoMvvmView[ItemViewModel]):
    """Card-like row showing an item's name and selection state.

    Clicking the row or the checkbox toggles the selection. While the
    view-model is busy the checkbox is replaced by a progress indicator.
    """

    def setup_ui(self) -> None:
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self.name_label = QLabel()
        layout.addWidget(self.name_label, stretch=1)

        self.busy_indicator = QProgressBar()
        self.busy_indicator.setRange(0, 0)  # Indeterminate
        self.busy_indicator.setMaximumWidth(60)
        self.busy_indicator.setTextVisible(False)
        layout.addWidget(self.busy_indicator)

        self.checkbox = QCheckBox()
        # clicked only fires for user interaction, not setChecked()
        self.checkbox.clicked.connect(lambda _checked: self.view_model.toggle_selection())
        layout.addWidget(self.checkbox)

    def build_view(self, view_model: ItemViewModel) -> None:
        color = SELECTED_COLOR if view_model.is_item_selected else UNSELECTED_COLOR
        self.setStyleSheet(f"ItemView {{ background-color: {color}; }}")
        self.name_label.setText(view_model.item_name)

        self.checkbox.setChecked(view_model.is_item_selected)
        self.checkbox.setVisible(not view_model.is_loading)
        self.busy_indicator.setVisible(view_model.is_loading)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.view_model.toggle_selection()
        super().mousePressEvent(event)
