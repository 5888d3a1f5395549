"""Tests for scene selection and scene table validation."""

from __future__ import annotations

import logging

import pytest

from sceneplay.timeline.phases import PhaseSpec
from sceneplay.timeline.reveal import TextSpec
from sceneplay.timeline.sampling import SampleSpec
from sceneplay.timeline.scenes import SceneDescriptor, SceneTable, select_scene
from sceneplay.timeline.stages import Breakpoint, BreakpointTable
from sceneplay.timeline.validation import TimelineConfigError, check_breakpoints


class TestSelectScene:
    """Tests for select_scene."""

    def test_every_progress_selects_containing_scene(self, scene_table: SceneTable) -> None:
        for i in range(0, 300):
            progress = i * 0.1
            selected = select_scene(progress, scene_table)
            containing = [s for s in scene_table if s.contains(progress)]
            assert len(containing) == 1
            assert selected is containing[0]

    def test_boundaries_are_half_open(self, scene_table: SceneTable) -> None:
        assert select_scene(9.0, scene_table).name == "form"
        assert select_scene(8.999, scene_table).name == "intro"
        assert select_scene(20.0, scene_table).name == "outro"

    def test_before_first_clamps_to_first(self, scene_table: SceneTable) -> None:
        assert select_scene(-5.0, scene_table).name == "intro"

    def test_at_or_after_end_clamps_to_last(self, scene_table: SceneTable) -> None:
        assert select_scene(30.0, scene_table).name == "outro"
        assert select_scene(130.0, scene_table).name == "outro"

    def test_table_properties(self, scene_table: SceneTable) -> None:
        assert scene_table.start == 0
        assert scene_table.end == 30
        assert scene_table.duration == 30
        assert scene_table.names == ("intro", "form", "outro")
        assert len(scene_table) == 3
        assert scene_table[1].name == "form"
        assert scene_table.get("outro") is scene_table[2]
        assert scene_table.get("missing") is None

    def test_fractions(self, scene_table: SceneTable) -> None:
        assert scene_table.fraction(15.0) == pytest.approx(0.5)
        assert scene_table.fraction(-1.0) == 0.0
        assert scene_table.fraction(99.0) == 1.0
        form = scene_table.get("form")
        assert form.fraction(14.5) == pytest.approx(0.5)
        assert form.local(10.0) == pytest.approx(1.0)


def make_scene(name: str, start: float, end: float, **kwargs) -> SceneDescriptor:
    return SceneDescriptor(name, start, end, **kwargs)


class TestValidation:
    """Tests for startup validation of scene tables."""

    def test_empty_table(self) -> None:
        with pytest.raises(TimelineConfigError, match="scene table is empty"):
            SceneTable([])

    def test_gap_detected(self) -> None:
        with pytest.raises(TimelineConfigError, match="gap between 'a'"):
            SceneTable([make_scene("a", 0, 13), make_scene("b", 14, 20)])

    def test_overlap_detected(self) -> None:
        with pytest.raises(TimelineConfigError, match="overlaps"):
            SceneTable([make_scene("a", 0, 10), make_scene("b", 9, 20)])

    def test_unsorted_detected(self) -> None:
        with pytest.raises(TimelineConfigError, match="not sorted"):
            SceneTable([make_scene("b", 10, 20), make_scene("a", 0, 10)])

    def test_duplicate_names(self) -> None:
        with pytest.raises(TimelineConfigError, match="duplicate scene name"):
            SceneTable([make_scene("a", 0, 10), make_scene("a", 10, 20)])

    def test_empty_interval(self) -> None:
        with pytest.raises(TimelineConfigError, match="not after start"):
            SceneTable([make_scene("a", 5, 5)])

    def test_non_monotonic_breakpoints(self) -> None:
        stages = BreakpointTable([Breakpoint(0.0, 0), Breakpoint(3.0, 2), Breakpoint(2.0, 1)])
        with pytest.raises(TimelineConfigError) as exc_info:
            SceneTable([make_scene("a", 0, 10, stages=stages)])
        assert any("thresholds not increasing" in p for p in exc_info.value.problems)

    def test_decreasing_stage_ids(self) -> None:
        stages = BreakpointTable([Breakpoint(0.0, 2), Breakpoint(3.0, 1)])
        with pytest.raises(TimelineConfigError, match="stage ids decrease"):
            SceneTable([make_scene("a", 0, 10, stages=stages)])

    def test_empty_breakpoints(self) -> None:
        assert check_breakpoints(BreakpointTable(), "a") == ["scene 'a': breakpoint table is empty"]

    def test_phase_on_unknown_stage(self) -> None:
        with pytest.raises(TimelineConfigError, match="gated on unknown stage 4"):
            SceneTable([make_scene("a", 0, 10, phases=[PhaseSpec("p", 0, 1, stage=4)])])

    def test_unknown_easing_name(self) -> None:
        with pytest.raises(TimelineConfigError, match="Unknown easing function: bogus"):
            SceneTable([make_scene("a", 0, 10, phases=[PhaseSpec("p", 0, 1, easing="bogus")])])

    def test_easing_by_name_accepted(self) -> None:
        table = SceneTable([make_scene("a", 0, 10, phases=[PhaseSpec("p", 0, 2, easing="smooth")])])
        assert table.get("a").phases[0].eased(2.0) == pytest.approx(1.0)

    def test_text_on_unknown_stage(self) -> None:
        with pytest.raises(TimelineConfigError, match="owned by unknown stage 3"):
            SceneTable([make_scene("a", 0, 10, texts=[TextSpec("t", "x", stage=3)])])

    def test_sample_with_unknown_driver(self) -> None:
        with pytest.raises(TimelineConfigError, match="unknown phase 'grid'"):
            SceneTable([make_scene("a", 0, 10, samples=[SampleSpec("s", 10, 5, driver="grid")])])

    def test_sample_count_exceeds_population(self) -> None:
        scene = make_scene(
            "a", 0, 10,
            phases=[PhaseSpec("grid", 0, 1)],
            samples=[SampleSpec("s", 4, 5, driver="grid")],
        )
        with pytest.raises(TimelineConfigError, match="count exceeds population"):
            SceneTable([scene])

    def test_all_problems_reported_and_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            with pytest.raises(TimelineConfigError) as exc_info:
                SceneTable([make_scene("a", 0, 10), make_scene("a", 12, 11)])
        assert len(exc_info.value.problems) >= 3
        assert "Timeline config" in caplog.text

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(TimelineConfigError, ValueError)
