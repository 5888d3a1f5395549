"""Startup validation of scene tables.

Lookups on the hot path assume sorted, contiguous scenes and monotonic
breakpoints. Those assumptions are checked once here, when a table is
built, instead of on every evaluation.
"""

from typing import TYPE_CHECKING, List, Sequence
import logging
import math

from sceneplay.timeline.easing import get_easing

if TYPE_CHECKING:
    from sceneplay.timeline.scenes import SceneDescriptor
    from sceneplay.timeline.stages import BreakpointTable

logger = logging.getLogger(__name__)

# Tolerance when comparing one scene's end with the next scene's start
BOUNDARY_TOLERANCE = 1e-9


class TimelineConfigError(ValueError):
    """Raised when a scene table is malformed.

    Attributes:
        problems: Every problem found, one message each
    """

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(
            "Invalid timeline configuration:\n  - " + "\n  - ".join(self.problems)
        )


def check_breakpoints(table: "BreakpointTable", scene: str = "") -> List[str]:
    """Return problems with a breakpoint table (empty list when valid)."""
    prefix = f"scene '{scene}': " if scene else ""
    problems = []

    if len(table) == 0:
        problems.append(f"{prefix}breakpoint table is empty")
        return problems

    previous = None
    for bp in table:
        if not math.isfinite(bp.threshold):
            problems.append(f"{prefix}breakpoint threshold {bp.threshold} is not finite")
        if bp.stage < 0:
            problems.append(f"{prefix}stage id {bp.stage} is negative")
        if previous is not None:
            if bp.threshold <= previous.threshold:
                problems.append(
                    f"{prefix}thresholds not increasing: {previous.threshold} -> {bp.threshold}"
                )
            if bp.stage < previous.stage:
                problems.append(
                    f"{prefix}stage ids decrease: {previous.stage} -> {bp.stage}"
                    f" at {bp.threshold}s"
                )
        previous = bp

    return problems


def check_scene(scene: "SceneDescriptor") -> List[str]:
    """Return problems local to one scene."""
    problems = []
    name = scene.name

    if not name:
        problems.append("scene with empty name")
    if not (math.isfinite(scene.start) and math.isfinite(scene.end)):
        problems.append(f"scene '{name}': bounds must be finite")
    elif scene.end <= scene.start:
        problems.append(f"scene '{name}': end {scene.end} is not after start {scene.start}")

    problems.extend(check_breakpoints(scene.stages, name))
    stage_ids = scene.stages.stage_ids()

    phase_names = set()
    for spec in scene.phases:
        if spec.name in phase_names:
            problems.append(f"scene '{name}': duplicate phase '{spec.name}'")
        phase_names.add(spec.name)
        if spec.stage not in stage_ids:
            problems.append(f"scene '{name}': phase '{spec.name}' gated on unknown stage {spec.stage}")
        if spec.until_stage is not None and spec.until_stage <= spec.stage:
            problems.append(f"scene '{name}': phase '{spec.name}' until_stage must exceed stage")
        try:
            get_easing(spec.easing)
        except ValueError as e:
            problems.append(f"scene '{name}': phase '{spec.name}': {e}")

    text_names = set()
    for spec in scene.texts:
        if spec.name in text_names:
            problems.append(f"scene '{name}': duplicate text field '{spec.name}'")
        text_names.add(spec.name)
        if spec.stage not in stage_ids:
            problems.append(f"scene '{name}': text '{spec.name}' owned by unknown stage {spec.stage}")
        if spec.chunk_size is not None and spec.chunk_size < 1:
            problems.append(f"scene '{name}': text '{spec.name}' chunk_size must be >= 1")

    sample_names = set()
    for spec in scene.samples:
        if spec.name in sample_names:
            problems.append(f"scene '{name}': duplicate sample '{spec.name}'")
        sample_names.add(spec.name)
        if spec.driver not in phase_names:
            problems.append(f"scene '{name}': sample '{spec.name}' driven by unknown phase '{spec.driver}'")
        if spec.population < 0 or spec.count < 0:
            problems.append(f"scene '{name}': sample '{spec.name}' sizes must be non-negative")
        elif spec.count > spec.population:
            problems.append(f"scene '{name}': sample '{spec.name}' count exceeds population")

    return problems


def validate_scene_table(scenes: Sequence["SceneDescriptor"]) -> None:
    """Check sortedness, contiguity and per-scene consistency.

    Raises:
        TimelineConfigError: Listing every problem found
    """
    problems = []

    if not scenes:
        problems.append("scene table is empty")

    seen = set()
    for scene in scenes:
        if scene.name in seen:
            problems.append(f"duplicate scene name '{scene.name}'")
        seen.add(scene.name)
        problems.extend(check_scene(scene))

    for prev, scene in zip(scenes, scenes[1:]):
        if scene.start < prev.start:
            problems.append(f"scenes not sorted: '{scene.name}' starts before '{prev.name}'")
        elif scene.start - prev.end > BOUNDARY_TOLERANCE:
            problems.append(f"gap between '{prev.name}' ({prev.end}) and '{scene.name}' ({scene.start})")
        elif prev.end - scene.start > BOUNDARY_TOLERANCE:
            problems.append(f"'{prev.name}' ({prev.end}) overlaps '{scene.name}' ({scene.start})")

    if problems:
        for problem in problems:
            logger.error(f"Timeline config: {problem}")
        raise TimelineConfigError(problems)
