"""Binding behavior settings for nanomvvm."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from ..core.exceptions import SettingsError


@dataclass(frozen=True)
class BindingSettings:
    """Options controlling view-model and view lifecycle edge cases.

    Attributes:
        reinit_on_rebind: Call init() on a view-model attached through
            set_view_model() if it has not been initialized yet. Mounting
            always calls init().
        strict_disposal: Raise ViewModelDisposedError when a disposed
            view-model is notified, subscribed to or mutated. When False
            these calls are logged and ignored.
        max_notify_depth: Maximum nesting of notify() calls caused by
            listeners mutating the view-model they observe.
        dispose_on_close: Unmount the view (and dispose its view-model)
            when the widget receives a close event.
    """

    reinit_on_rebind: bool = False
    strict_disposal: bool = False
    max_notify_depth: int = 32
    dispose_on_close: bool = True

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check field types and ranges.

        Raises:
            SettingsError: If a field holds an unusable value
        """
        for name in ("reinit_on_rebind", "strict_disposal", "dispose_on_close"):
            if not isinstance(getattr(self, name), bool):
                raise SettingsError(name, "must be a bool")
        depth = self.max_notify_depth
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise SettingsError("max_notify_depth", "must be an int")
        if depth < 1:
            raise SettingsError("max_notify_depth", "must be at least 1")

    def with_overrides(self, **overrides: Any) -> BindingSettings:
        """Return a copy with the given fields replaced."""
        unknown = set(overrides) - {f.name for f in fields(self)}
        if unknown:
            raise SettingsError(sorted(unknown)[0], "unknown setting")
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BindingSettings:
        """Build settings from a dict, ignoring keys that are not settings.

        Missing keys keep their defaults.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


DEFAULT_SETTINGS = BindingSettings()
