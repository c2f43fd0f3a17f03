"""Tests for NanoMvvmView (mount, rebuild, rebind, unmount)."""

import logging
from unittest.mock import MagicMock

import pytest
from PyQt6.QtWidgets import QWidget

from nanomvvm import (
    BindingSettings,
    NanoMvvmView,
    ViewModelAlreadyBoundError,
    ViewModelDisposedError,
    ViewModelState,
    ViewNotMountedError,
)


class TestMount:
    """Tests for view construction (mount)."""

    def test_mount_subscribes_and_inits(self, view_model, make_view):
        view = make_view(view_model)

        assert view.is_mounted
        assert view.view_model is view_model
        assert view_model.listener_count == 1
        assert view_model.calls == ["init"]
        assert view_model.bound_view is view

    def test_mount_renders_once(self, view_model, make_view):
        view = make_view(view_model)

        assert view.build_count == 1
        assert view.renders == [(0, False)]
        assert view.label.text() == "0"

    def test_view_is_a_qwidget(self, view_model, make_view):
        assert isinstance(make_view(view_model), QWidget)

    def test_init_that_notifies_renders_during_mount(self, view_model_cls, make_view):
        vm = view_model_cls()
        vm.add_init_hook(vm.increment)

        view = make_view(vm)

        assert view.renders == [(1, False), (1, False)]

    def test_missing_build_view_raises(self, view_model, qtbot):
        class NoBuildView(NanoMvvmView):
            pass

        with pytest.raises(NotImplementedError):
            NoBuildView(view_model)

    def test_mount_disposed_view_model_raises(self, view_model, view_cls):
        view_model.dispose()
        with pytest.raises(ViewModelDisposedError):
            view_cls(view_model)

    def test_sharing_view_model_between_views_raises(self, view_model, make_view, view_cls):
        first = make_view(view_model)

        with pytest.raises(ViewModelAlreadyBoundError) as exc_info:
            view_cls(view_model)

        assert exc_info.value.bound_view is first
        assert view_model.listener_count == 1
        assert view_model.calls == ["init"]

    def test_failed_render_releases_view_model(self, view_model, view_cls, make_view):
        class BrokenView(view_cls):
            def build_view(self, view_model):
                raise RuntimeError("render failed")

        with pytest.raises(RuntimeError):
            BrokenView(view_model)

        assert view_model.listener_count == 0
        assert view_model.bound_view is None

        view = make_view(view_model)
        assert view.is_mounted
        assert view_model.bound_view is view
        assert view_model.calls == ["init"]

    def test_failed_init_allows_mount_retry(self, view_model, view_cls, make_view):
        failing = MagicMock(side_effect=RuntimeError("init failed"))
        view_model.add_init_hook(failing)

        with pytest.raises(RuntimeError):
            view_cls(view_model)

        assert view_model.state is ViewModelState.CREATED
        assert view_model.listener_count == 0

        failing.side_effect = None
        view = make_view(view_model)
        assert view.is_mounted
        assert view_model.state is ViewModelState.ACTIVE

    def test_mount_skips_init_for_active_view_model(self, view_model, make_view):
        view_model.init()

        make_view(view_model)

        assert view_model.calls == ["init"]


class TestRebuild:
    """Tests for notification-driven re-rendering."""

    def test_notify_triggers_rebuild(self, view_model, make_view):
        view = make_view(view_model)

        view_model.increment()

        assert view.build_count == 2
        assert view.renders[-1] == (1, False)
        assert view.label.text() == "1"

    def test_render_observes_loading_flag(self, view_model, make_view):
        view = make_view(view_model)

        view_model.is_loading = True
        view_model.is_loading = False

        assert view.renders == [(0, False), (0, True), (0, False)]

    def test_same_value_write_does_not_rebuild(self, view_model, make_view):
        view = make_view(view_model)

        view_model.is_loading = False

        assert view.build_count == 1


class TestRebind:
    """Tests for set_view_model (reconfiguration)."""

    def test_rebind_moves_subscription(self, view_model, view_model_cls, make_view):
        view = make_view(view_model)
        other = view_model_cls()

        view.set_view_model(other)

        assert view.view_model is other
        assert view_model.listener_count == 0
        assert other.listener_count == 1
        assert view_model.bound_view is None
        assert other.bound_view is view

    def test_rebind_rebuilds_from_new_view_model(self, view_model, view_model_cls, make_view):
        view = make_view(view_model)
        other = view_model_cls()
        other.count = 7

        view.set_view_model(other)

        assert view.renders[-1] == (7, False)

    def test_old_view_model_no_longer_triggers_rebuild(
        self, view_model, view_model_cls, make_view
    ):
        view = make_view(view_model)
        view.set_view_model(view_model_cls())
        builds = view.build_count

        view_model.increment()

        assert view.build_count == builds

    def test_rebind_does_not_init_or_dispose_by_default(
        self, view_model, view_model_cls, make_view
    ):
        view = make_view(view_model)
        other = view_model_cls()

        view.set_view_model(other)

        assert other.state is ViewModelState.CREATED
        assert other.calls == []
        assert view_model.state is ViewModelState.ACTIVE
        assert view_model.calls == ["init"]

    def test_rebind_inits_when_configured(self, view_model, view_model_cls, make_view):
        view = make_view(view_model, settings=BindingSettings(reinit_on_rebind=True))
        other = view_model_cls()

        view.set_view_model(other)

        assert other.calls == ["init"]

    def test_reinit_skips_already_initialized(self, view_model, view_model_cls, make_view):
        view = make_view(view_model, settings=BindingSettings(reinit_on_rebind=True))
        other = view_model_cls()
        other.init()

        view.set_view_model(other)

        assert other.calls == ["init"]

    def test_rebind_same_view_model_is_noop(self, view_model, make_view):
        view = make_view(view_model)

        view.set_view_model(view_model)

        assert view.build_count == 1
        assert view_model.listener_count == 1

    def test_rebind_emits_signal(self, view_model, view_model_cls, make_view, qtbot):
        view = make_view(view_model)
        other = view_model_cls()

        with qtbot.waitSignal(view.view_model_changed, timeout=1000) as blocker:
            view.set_view_model(other)

        assert blocker.args == [other]

    def test_rebind_to_owned_view_model_keeps_old_binding(
        self, view_model, view_model_cls, make_view
    ):
        view = make_view(view_model)
        owned = view_model_cls()
        make_view(owned)

        with pytest.raises(ViewModelAlreadyBoundError):
            view.set_view_model(owned)

        assert view.view_model is view_model
        assert view_model.listener_count == 1
        assert owned.listener_count == 1

    def test_released_view_model_can_be_mounted_again(
        self, view_model, view_model_cls, make_view
    ):
        view = make_view(view_model)
        view.set_view_model(view_model_cls())

        second = make_view(view_model)

        assert second.view_model is view_model
        assert view_model.calls == ["init"]

    def test_rebind_after_unmount_raises(self, view_model, view_model_cls, make_view):
        view = make_view(view_model)
        view.unmount()

        with pytest.raises(ViewNotMountedError):
            view.set_view_model(view_model_cls())


class TestUnmount:
    """Tests for unmount and close handling."""

    def test_mount_and_unmount_call_init_and_dispose_once(self, view_model, make_view):
        view = make_view(view_model)

        view.unmount()

        assert view_model.calls == ["init", "dispose"]
        assert view_model.is_disposed
        assert not view.is_mounted

    def test_unmount_twice_is_noop(self, view_model, make_view):
        view = make_view(view_model)
        view.unmount()
        view.unmount()

        assert view_model.calls == ["init", "dispose"]

    def test_unmount_unsubscribes_before_dispose(self, view_model, make_view):
        view = make_view(view_model)
        seen = []
        view_model.add_dispose_hook(
            lambda: seen.append(view_model.has_listener(view._on_view_model_changed))
        )

        view.unmount()

        assert seen == [False]

    def test_unmount_emits_signal(self, view_model, make_view, qtbot):
        view = make_view(view_model)
        with qtbot.waitSignal(view.unmounted, timeout=1000):
            view.unmount()

    def test_late_notification_does_not_rebuild(self, view_model, make_view):
        view = make_view(view_model)
        callback = view._on_view_model_changed
        view.unmount()
        builds = view.build_count

        callback()
        view_model.is_loading = True

        assert view.build_count == builds

    def test_unmount_of_externally_disposed_view_model_raises(
        self, view_model, make_view
    ):
        view = make_view(view_model)
        view_model.dispose()

        with pytest.raises(ViewModelDisposedError):
            view.unmount()
        assert not view.is_mounted

    def test_close_unmounts(self, view_model, make_view):
        view = make_view(view_model)

        view.close()

        assert not view.is_mounted
        assert view_model.calls == ["init", "dispose"]

    def test_close_survives_failing_dispose(self, view_model, make_view, caplog):
        view = make_view(view_model)
        view_model.add_dispose_hook(MagicMock(side_effect=RuntimeError("cleanup failed")))

        with caplog.at_level(logging.ERROR, logger="nanomvvm"):
            view.close()

        assert not view.is_mounted
        assert view_model.is_disposed
        assert "cleanup failed" in caplog.text

    def test_close_keeps_mounted_when_disabled(self, view_model, make_view):
        view = make_view(view_model, settings=BindingSettings(dispose_on_close=False))

        view.close()

        assert view.is_mounted
        assert not view_model.is_disposed
        view.unmount()
