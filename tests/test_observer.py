"""Tests for the generic observer manager."""

from unittest.mock import Mock

import pytest

from soundboard.model_manager import ObserverManager


@pytest.mark.unit
class TestObserverManager:

    def test_register_is_idempotent(self):
        manager = ObserverManager(observer_type_name="test")
        observer = Mock()
        manager.register(observer)
        manager.register(observer)
        assert len(manager) == 1
        assert observer in manager

    def test_notify_in_subscription_order(self):
        manager = ObserverManager()
        calls = []
        first, second = Mock(), Mock()
        first.on_event.side_effect = lambda *a, **k: calls.append(("first", a, k))
        second.on_event.side_effect = lambda *a, **k: calls.append(("second", a, k))
        manager.register(first)
        manager.register(second)

        manager.notify("on_event", 1, key="v")

        assert calls == [("first", (1,), {"key": "v"}), ("second", (1,), {"key": "v"})]

    def test_failing_observer_does_not_stop_others(self):
        manager = ObserverManager()
        broken, healthy = Mock(), Mock()
        broken.on_event.side_effect = RuntimeError("boom")
        manager.register(broken)
        manager.register(healthy)

        manager.notify("on_event")

        healthy.on_event.assert_called_once()

    def test_unregister(self):
        manager = ObserverManager()
        observer = Mock()
        manager.register(observer)
        manager.unregister(observer)
        manager.notify("on_event")
        observer.on_event.assert_not_called()

    def test_unregister_unknown_is_ignored(self):
        manager = ObserverManager()
        manager.unregister(Mock())
        assert len(manager) == 0

    def test_observer_may_unsubscribe_during_notify(self):
        manager = ObserverManager()
        observer = Mock()
        observer.on_event.side_effect = lambda: manager.unregister(observer)
        manager.register(observer)

        manager.notify("on_event")

        assert observer not in manager

    def test_clear(self):
        manager = ObserverManager()
        manager.register(Mock())
        manager.clear()
        assert len(manager) == 0
