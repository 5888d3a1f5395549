"""Stage breakpoint tables.

A scene is split into discrete stages by a table of time breakpoints,
measured in seconds since the scene started. Thresholds are closed lower
bounds: at exactly ``threshold`` the breakpoint's stage is already active.
Anything before the first threshold (including negative elapsed time) is
stage 0.
"""

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Tuple


@dataclass(frozen=True)
class Breakpoint:
    """A single stage boundary.

    Attributes:
        threshold: Seconds since scene start at which the stage begins
        stage: Stage id that becomes active at ``threshold``
    """

    threshold: float
    stage: int


@dataclass(frozen=True)
class BreakpointTable:
    """Ordered breakpoints for one scene.

    Thresholds must be strictly increasing and stage ids non-decreasing;
    this is checked once by the configuration validator, not per lookup.
    """

    breakpoints: Tuple[Breakpoint, ...] = ()
    _thresholds: Tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "breakpoints", tuple(self.breakpoints))
        object.__setattr__(
            self, "_thresholds", tuple(bp.threshold for bp in self.breakpoints)
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[float, int]) -> "BreakpointTable":
        """Build a table from ``{threshold: stage}``.

        Example:
            BreakpointTable.from_mapping({0: 0, 2: 1, 5: 2})
        """
        return cls(
            tuple(Breakpoint(float(t), int(s)) for t, s in sorted(mapping.items()))
        )

    @classmethod
    def single(cls) -> "BreakpointTable":
        """Table for a scene with only stage 0."""
        return cls((Breakpoint(0.0, 0),))

    @property
    def thresholds(self) -> Tuple[float, ...]:
        return self._thresholds

    @property
    def stages(self) -> Tuple[int, ...]:
        return tuple(bp.stage for bp in self.breakpoints)

    @property
    def max_stage(self) -> int:
        return self.breakpoints[-1].stage if self.breakpoints else 0

    def stage_ids(self) -> frozenset:
        """All stage ids reachable in this scene, including the implicit 0."""
        return frozenset(self.stages) | {0}

    def resolve(self, local_elapsed: float) -> int:
        return resolve_stage(local_elapsed, self)

    def __len__(self) -> int:
        return len(self.breakpoints)

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(self.breakpoints)


def resolve_stage(local_elapsed: float, breakpoints: BreakpointTable) -> int:
    """Map time since scene start to a stage id.

    Returns the stage of the last breakpoint whose threshold is <=
    ``local_elapsed``, or 0 when ``local_elapsed`` precedes every threshold.

    Args:
        local_elapsed: Seconds since the scene started (may be negative)
        breakpoints: The scene's breakpoint table

    Returns:
        Integer stage id
    """
    index = bisect_right(breakpoints.thresholds, local_elapsed)
    if index == 0:
        return 0
    return breakpoints.breakpoints[index - 1].stage
