"""ViewModels for nanomvvm.

ViewModels own application state and notify listeners when state changes.
Views (UI) bind to ViewModels and re-render automatically.
"""

from .view_model import NanoMvvmViewModel, ViewModelState

__all__ = [
    "NanoMvvmViewModel",
    "ViewModelState",
]
