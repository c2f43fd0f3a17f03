"""Test configuration for pytest."""

import os
import sys

import pytest

# Add the src directory to the path so we can import the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

# Headless runs (CI) have no display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QLabel  # noqa: E402

from nanomvvm import NanoMvvmView, NanoMvvmViewModel  # noqa: E402


@pytest.fixture
def app(qapp):
    """Provide QApplication from pytest-qt for tests that need it.

    Uses pytest-qt's built-in qapp fixture which handles lifecycle properly.
    """
    return qapp


def pytest_sessionfinish(session, exitstatus):
    """Clean up Qt before session ends to prevent C++ runtime abort.

    This addresses the 'terminate called without an active exception' error
    that occurs with PyQt6 on Linux during Python shutdown.
    """
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is not None:
        app.processEvents()
        for widget in app.topLevelWidgets():
            widget.close()
        app.processEvents()
        app.quit()
        app.processEvents()


class CounterViewModel(NanoMvvmViewModel):
    """View-model that records its lifecycle calls."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.count = 0
        self.calls = []

    def increment(self):
        self.count += 1
        self.notify()

    def on_init(self):
        self.calls.append("init")

    def on_dispose(self):
        self.calls.append("dispose")


class CounterView(NanoMvvmView[CounterViewModel]):
    """View that records the state it observed on every render."""

    def setup_ui(self):
        self.label = QLabel(self)
        self.renders = []

    def build_view(self, view_model):
        self.renders.append((view_model.count, view_model.is_loading))
        self.label.setText(str(view_model.count))


@pytest.fixture
def view_model(app):
    """A fresh, unbound CounterViewModel."""
    return CounterViewModel()


@pytest.fixture
def make_view(qtbot):
    """Factory building CounterViews registered with qtbot for cleanup."""

    def _make(vm, **kwargs):
        view = CounterView(vm, **kwargs)
        qtbot.addWidget(view)
        return view

    return _make


@pytest.fixture
def view_model_cls():
    return CounterViewModel


@pytest.fixture
def view_cls():
    return CounterView
