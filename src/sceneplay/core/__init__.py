"""Core framework components for sceneplay."""

from .events import EventBus, Event, EventType

__all__ = ["EventBus", "Event", "EventType"]
