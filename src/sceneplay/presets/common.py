"""Shared building blocks for preset scene tables."""

from typing import Iterable, Mapping, Optional

from sceneplay.timeline.easing import Easing
from sceneplay.timeline.phases import PhaseSpec
from sceneplay.timeline.reveal import TextSpec
from sceneplay.timeline.sampling import SampleSpec
from sceneplay.timeline.scenes import SceneDescriptor
from sceneplay.timeline.stages import BreakpointTable

# Crossfade used by the player whenever a scene takes over
ENTER_DURATION = 0.6


def enter_phase() -> PhaseSpec:
    """Scene entrance fade, shared by every preset scene."""
    return PhaseSpec("enter", 0.0, ENTER_DURATION, easing=Easing.SMOOTH)


def scene(
    name: str,
    start: float,
    end: float,
    stages: Optional[Mapping[float, int]] = None,
    phases: Iterable[PhaseSpec] = (),
    texts: Iterable[TextSpec] = (),
    samples: Iterable[SampleSpec] = (),
) -> SceneDescriptor:
    """Build a scene descriptor with the entrance fade prepended."""
    table = BreakpointTable.from_mapping(stages) if stages else BreakpointTable.single()
    return SceneDescriptor(
        name=name,
        start=start,
        end=end,
        stages=table,
        phases=(enter_phase(), *phases),
        texts=tuple(texts),
        samples=tuple(samples),
    )
