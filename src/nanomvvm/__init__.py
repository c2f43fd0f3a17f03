"""nanomvvm - minimal MVVM bindings for PyQt6 widgets."""


def _get_version() -> str:
    """Get version using fallback strategies.

    Priority:
    1. importlib.metadata (works for pip-installed packages)
    2. Read pyproject.toml (works in development)
    3. Hardcoded fallback
    """
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("nanomvvm")
    except PackageNotFoundError:
        pass

    # Development checkout without an install
    import re
    from pathlib import Path

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        content = pyproject_path.read_text(encoding="utf-8")
        match = re.search(r'version\s*=\s*"([^"]+)"', content)
        if match:
            return match.group(1)

    return "unknown"


__version__ = _get_version()

from .config import DEFAULT_SETTINGS, BindingSettings  # noqa: E402
from .core import (  # noqa: E402
    BindingError,
    NanoMvvmError,
    NotificationRecursionError,
    ViewModelAlreadyBoundError,
    ViewModelDisposedError,
    ViewModelLifecycleError,
    ViewNotMountedError,
)
from .ui import NanoMvvmView  # noqa: E402
from .viewmodels import NanoMvvmViewModel, ViewModelState  # noqa: E402

__all__ = [
    "__version__",
    "NanoMvvmViewModel",
    "ViewModelState",
    "NanoMvvmView",
    "BindingSettings",
    "DEFAULT_SETTINGS",
    "NanoMvvmError",
    "BindingError",
    "NotificationRecursionError",
    "ViewModelAlreadyBoundError",
    "ViewModelDisposedError",
    "ViewModelLifecycleError",
    "ViewNotMountedError",
]
