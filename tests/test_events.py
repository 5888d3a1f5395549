"""Tests for the event bus."""

from __future__ import annotations

import logging

import pytest

from sceneplay.core.events import Event, EventBus, EventType, scene_event


class TestEventBus:
    """Tests for EventBus."""

    def test_subscribe_and_emit(self) -> None:
        bus = EventBus()
        received = []
        bus.subscribe(EventType.SCENE_ENTERED, received.append)
        event = scene_event(EventType.SCENE_ENTERED, "intro", 0.0)
        bus.emit(event)
        bus.emit(scene_event(EventType.SCENE_EXITED, "intro", 1.0))
        assert received == [event]

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        received = []
        unsubscribe = bus.subscribe("custom", received.append)
        unsubscribe()
        bus.emit(Event("custom"))
        assert received == []

    def test_subscribe_all(self) -> None:
        bus = EventBus()
        received = []
        unsubscribe = bus.subscribe_all(received.append)
        bus.emit(Event(EventType.STAGE_CHANGED))
        bus.emit(Event("custom"))
        unsubscribe()
        bus.emit(Event("custom"))
        assert len(received) == 2

    def test_handler_error_is_logged_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        bus = EventBus()
        received = []

        def broken(event: Event) -> None:
            raise RuntimeError("boom")

        bus.subscribe(EventType.DEACTIVATED, broken)
        bus.subscribe(EventType.DEACTIVATED, received.append)
        with caplog.at_level(logging.ERROR):
            bus.emit(Event(EventType.DEACTIVATED))
        assert len(received) == 1
        assert "boom" in caplog.text

    def test_history_is_bounded(self) -> None:
        bus = EventBus(history_limit=3)
        for i in range(5):
            bus.emit(Event("tick", data={"i": i}))
        history = bus.get_history(limit=10)
        assert [e.data["i"] for e in history] == [2, 3, 4]
        bus.clear_history()
        assert bus.get_history() == []

    def test_scene_event_payload(self) -> None:
        event = scene_event(EventType.REVEAL_COMPLETE, "form", 3.5, field="title")
        assert event.data == {"scene": "form", "progress": 3.5, "field": "title"}
        assert event.source == "timeline"
        assert event.timestamp > 0
