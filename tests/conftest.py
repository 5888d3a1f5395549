"""Shared pytest fixtures for sceneplay tests."""

from __future__ import annotations

import os

import pytest

from sceneplay.config.settings import get_settings
from sceneplay.core.events import EventBus
from sceneplay.timeline.orchestrator import Orchestrator
from sceneplay.timeline.phases import PhaseSpec
from sceneplay.timeline.reveal import TextSpec
from sceneplay.timeline.sampling import SampleSpec
from sceneplay.timeline.scenes import SceneDescriptor, SceneTable
from sceneplay.timeline.stages import BreakpointTable

# ============================================================================
# Scene Table Fixtures
# ============================================================================


@pytest.fixture
def intro_stages() -> BreakpointTable:
    """Breakpoints {0: 0, 2: 1, 5: 2}."""
    return BreakpointTable.from_mapping({0: 0, 2: 1, 5: 2})


@pytest.fixture
def scene_table(intro_stages: BreakpointTable) -> SceneTable:
    """Three contiguous scenes: intro [0, 9), form [9, 20), outro [20, 30)."""
    return SceneTable(
        [
            SceneDescriptor(
                "intro", 0, 9,
                stages=intro_stages,
                phases=[
                    PhaseSpec("header", 0.0, 2.0),
                    PhaseSpec("bar", 2.0, 3.0, stage=1),
                    PhaseSpec("flash", 5.0, 0.0, stage=2),
                ],
                texts=[TextSpec("caption", "Hello", stage=1)],
            ),
            SceneDescriptor(
                "form", 9, 20,
                stages=BreakpointTable.from_mapping({1.0: 1, 4.0: 2}),
                phases=[PhaseSpec("grid", 1.0, 4.0, stage=1)],
                texts=[
                    TextSpec("title", "Employee Survey", stage=1),
                    TextSpec("notes", "abcdefghij", stage=2, chunk_size=4),
                ],
                samples=[SampleSpec("picked", 20, 10, driver="grid")],
            ),
            SceneDescriptor("outro", 20, 30),
        ],
        name="test",
    )


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def orchestrator(scene_table: SceneTable, event_bus: EventBus) -> Orchestrator:
    return Orchestrator(scene_table, chunk_size=1, seed=42, event_bus=event_bus)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    for key in list(os.environ):
        if key.startswith("SCENEPLAY_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
