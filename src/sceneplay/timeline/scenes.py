"""Scene descriptors and the scene table."""

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple
import logging

from sceneplay.timeline.phases import PhaseSpec, clamp
from sceneplay.timeline.reveal import TextSpec
from sceneplay.timeline.sampling import SampleSpec
from sceneplay.timeline.stages import BreakpointTable
from sceneplay.timeline.validation import validate_scene_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneDescriptor:
    """One named, half-open interval ``[start, end)`` of progress.

    Attributes:
        name: Scene identifier
        start: Progress (seconds) at which the scene begins
        end: Progress at which the next scene takes over
        stages: Breakpoints mapping scene-local time to stages
        phases: Continuous sub-animations
        texts: Typewriter fields
        samples: Seeded highlight subsets
    """

    name: str
    start: float
    end: float
    stages: BreakpointTable = field(default_factory=BreakpointTable.single)
    phases: Tuple[PhaseSpec, ...] = ()
    texts: Tuple[TextSpec, ...] = ()
    samples: Tuple[SampleSpec, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "phases", tuple(self.phases))
        object.__setattr__(self, "texts", tuple(self.texts))
        object.__setattr__(self, "samples", tuple(self.samples))

    @property
    def duration(self) -> float:
        return self.end - self.start

    def contains(self, progress: float) -> bool:
        return self.start <= progress < self.end

    def local(self, progress: float) -> float:
        """Seconds since this scene started (negative before it)."""
        return progress - self.start

    def fraction(self, progress: float) -> float:
        """Portion of the scene elapsed, clamped to [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return clamp(self.local(progress) / self.duration)


class SceneTable:
    """Immutable, validated, sorted sequence of contiguous scenes.

    Construction runs the configuration validator once; lookups afterwards
    do no checking.
    """

    def __init__(self, scenes: Iterable[SceneDescriptor], name: str = "timeline"):
        self.name = name
        self._scenes: Tuple[SceneDescriptor, ...] = tuple(scenes)
        validate_scene_table(self._scenes)
        self._starts = [scene.start for scene in self._scenes]
        logger.debug(
            f"SceneTable '{name}' loaded: {len(self._scenes)} scenes, "
            f"{self.start}s - {self.end}s"
        )

    @property
    def scenes(self) -> Tuple[SceneDescriptor, ...]:
        return self._scenes

    @property
    def start(self) -> float:
        return self._scenes[0].start

    @property
    def end(self) -> float:
        return self._scenes[-1].end

    @property
    def duration(self) -> float:
        return self.end - self.start

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(scene.name for scene in self._scenes)

    def get(self, name: str) -> Optional[SceneDescriptor]:
        """Get a scene by name."""
        for scene in self._scenes:
            if scene.name == name:
                return scene
        return None

    def select(self, progress: float) -> SceneDescriptor:
        """Scene containing ``progress``, clamped to the first/last scene.

        O(log n) over the sorted scene starts.
        """
        index = bisect_right(self._starts, progress) - 1
        if index < 0:
            return self._scenes[0]
        return self._scenes[index]

    def fraction(self, progress: float) -> float:
        """Portion of the whole timeline elapsed, clamped to [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return clamp((progress - self.start) / self.duration)

    def __len__(self) -> int:
        return len(self._scenes)

    def __iter__(self) -> Iterator[SceneDescriptor]:
        return iter(self._scenes)

    def __getitem__(self, index: int) -> SceneDescriptor:
        return self._scenes[index]

    def __repr__(self) -> str:
        return f"SceneTable({self.name!r}, scenes={list(self.names)})"


def select_scene(progress: float, table: SceneTable) -> SceneDescriptor:
    """Scene whose ``[start, end)`` contains ``progress``.

    Progress before the first scene selects the first scene; progress at or
    after the last scene's end selects the last scene.
    """
    return table.select(progress)
