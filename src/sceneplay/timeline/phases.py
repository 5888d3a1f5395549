"""Continuous sub-animation phases.

A phase is a linear [0, 1] ratio of how far a sub-animation (a fade, a bar
fill, a camera pan) has progressed. Phases are pure functions of elapsed
time and are recomputed on every evaluation.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from sceneplay.timeline.easing import Easing, get_easing


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


def phase(elapsed: float, start: float, duration: float) -> float:
    """Linear progress of a sub-animation.

    Args:
        elapsed: Seconds since the scene started
        start: Seconds (scene-local) at which the sub-animation begins
        duration: Length of the sub-animation in seconds

    Returns:
        ``clamp((elapsed - start) / duration, 0, 1)``. A non-positive
        duration is a step: 1.0 once ``elapsed >= start``, else 0.0.
    """
    if duration <= 0:
        return 1.0 if elapsed >= start else 0.0
    return clamp((elapsed - start) / duration)


@dataclass(frozen=True)
class PhaseSpec:
    """Declarative description of one phase within a scene.

    Attributes:
        name: Key under which the ratio is reported
        start: Scene-local start time in seconds
        duration: Seconds from 0 to 1
        stage: Minimum stage at which the phase is reported
        until_stage: Stage at which the phase stops being reported (exclusive)
        easing: Curve a renderer should apply; does not affect the ratio
    """

    name: str
    start: float
    duration: float
    stage: int = 0
    until_stage: Optional[int] = None
    easing: Easing | str = Easing.LINEAR

    def is_gated_in(self, stage: int) -> bool:
        if stage < self.stage:
            return False
        return self.until_stage is None or stage < self.until_stage

    def value(self, local_elapsed: float) -> float:
        return phase(local_elapsed, self.start, self.duration)

    def eased(self, local_elapsed: float) -> float:
        return get_easing(self.easing)(self.value(local_elapsed))

    @property
    def end(self) -> float:
        return self.start + max(self.duration, 0.0)


def compute_phases(
    specs: Iterable[PhaseSpec],
    local_elapsed: float,
    stage: int,
) -> Dict[str, float]:
    """Evaluate every phase gated in by ``stage``."""
    return {
        spec.name: spec.value(local_elapsed)
        for spec in specs
        if spec.is_gated_in(stage)
    }


def compute_eased_phases(
    specs: Iterable[PhaseSpec],
    local_elapsed: float,
    stage: int,
) -> Dict[str, float]:
    """Like :func:`compute_phases` but with each spec's easing applied."""
    return {
        spec.name: spec.eased(local_elapsed)
        for spec in specs
        if spec.is_gated_in(stage)
    }
