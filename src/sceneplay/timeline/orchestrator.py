"""Timeline orchestrator: progress in, render state out.

Everything except typewriter reveal is recomputed from scratch on each call,
so the host may evaluate any progress value in any order (seek, scrub,
replay). Reveal streams advance once per ``evaluate`` call and are the only
state that depends on call history; they are discarded when the scene
group is deactivated or the selected scene changes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple
import logging

from sceneplay.core.events import EventBus, EventType, scene_event
from sceneplay.timeline.phases import compute_eased_phases, compute_phases
from sceneplay.timeline.reveal import RevealStream
from sceneplay.timeline.sampling import sample_indices
from sceneplay.timeline.scenes import SceneDescriptor, SceneTable
from sceneplay.timeline.stages import resolve_stage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderState:
    """What the rendering layer should show for one progress value.

    Attributes:
        scene_name: Active scene, or None when nothing is rendered
        stage: Stage within the scene
        phases: Linear [0, 1] ratios keyed by phase name
        revealed_text: Visible prefix of each typewriter field
        eased_phases: Same phases with their easing curves applied
        samples: Highlighted indices keyed by sample name
        scene_progress: Portion of the active scene elapsed
        timeline_progress: Portion of the whole timeline elapsed
        progress: The progress value this state was computed for
    """

    scene_name: Optional[str]
    stage: int = 0
    phases: Dict[str, float] = field(default_factory=dict)
    revealed_text: Dict[str, str] = field(default_factory=dict)
    eased_phases: Dict[str, float] = field(default_factory=dict)
    samples: Dict[str, FrozenSet[int]] = field(default_factory=dict)
    scene_progress: float = 0.0
    timeline_progress: float = 0.0
    progress: float = 0.0

    @classmethod
    def empty(cls, progress: float = 0.0) -> "RenderState":
        """Neutral state: no scene rendered."""
        return cls(scene_name=None, progress=progress)

    @property
    def is_empty(self) -> bool:
        return self.scene_name is None

    def phase(self, name: str, default: float = 0.0) -> float:
        """Ratio of phase ``name``, or ``default`` if it is gated out."""
        return self.phases.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scene": self.scene_name,
            "stage": self.stage,
            "progress": self.progress,
            "scene_progress": self.scene_progress,
            "timeline_progress": self.timeline_progress,
            "phases": dict(self.phases),
            "eased_phases": dict(self.eased_phases),
            "revealed_text": dict(self.revealed_text),
            "samples": {name: sorted(indices) for name, indices in self.samples.items()},
        }


class Orchestrator:
    """Evaluates a :class:`SceneTable` for a host-supplied progress value.

    Usage:
        orchestrator = Orchestrator(get_preset("module2"), seed=7)

        # Once per animation frame:
        state = orchestrator.evaluate(clock.progress, is_active=True)
    """

    def __init__(
        self,
        table: SceneTable,
        chunk_size: int = 1,
        seed: int = 0,
        event_bus: Optional[EventBus] = None,
    ):
        self.table = table
        self.chunk_size = max(1, chunk_size)
        self.seed = seed
        self._event_bus = event_bus

        # Reveal streams of the active scene only, keyed by (scene, field)
        self._streams: Dict[Tuple[str, str], RevealStream] = {}
        self._active_scene: Optional[SceneDescriptor] = None
        self._last_stage: Optional[int] = None

    @property
    def active_scene(self) -> Optional[str]:
        return self._active_scene.name if self._active_scene else None

    @property
    def streams(self) -> Dict[Tuple[str, str], RevealStream]:
        """Live reveal streams (read-only view for inspection)."""
        return dict(self._streams)

    def evaluate(self, progress: float, is_active: bool) -> RenderState:
        """Compute the render state and advance typewriter fields one tick.

        Args:
            progress: Elapsed seconds; any real value, in any order
            is_active: Scene group activation flag. False tears down all
                reveal state and yields an empty render state.

        Returns:
            RenderState for ``progress``
        """
        if not is_active:
            self.deactivate(progress)
            return RenderState.empty(progress)

        scene = self.table.select(progress)
        local = scene.local(progress)
        stage = resolve_stage(local, scene.stages)

        if self._active_scene is None or self._active_scene.name != scene.name:
            self._enter_scene(scene, stage, progress)
        elif stage != self._last_stage:
            logger.debug(f"Stage change in '{scene.name}': {self._last_stage} -> {stage}")
            self._emit(EventType.STAGE_CHANGED, scene.name, progress,
                       previous=self._last_stage, stage=stage)
        self._last_stage = stage

        revealed = {}
        for (_, name), stream in self._streams.items():
            was_complete = stream.is_complete
            revealed[name] = stream.tick(stage)
            if stream.is_complete and not was_complete:
                self._emit(EventType.REVEAL_COMPLETE, scene.name, progress, field=name)

        return self._compose(scene, progress, local, stage, revealed)

    def peek(self, progress: float) -> RenderState:
        """Render state for ``progress`` without ticking any reveal stream.

        Typewriter fields show their current prefix when ``progress`` falls in
        the active scene and the next tick would not reset them, otherwise "".
        """
        scene = self.table.select(progress)
        local = scene.local(progress)
        stage = resolve_stage(local, scene.stages)

        revealed = {}
        for spec in scene.texts:
            stream = self._streams.get((scene.name, spec.name))
            revealed[spec.name] = stream.peek(stage) if stream is not None else ""

        return self._compose(scene, progress, local, stage, revealed)

    def deactivate(self, progress: float = 0.0) -> None:
        """Discard all reveal state. Safe to call repeatedly."""
        if self._active_scene is None:
            return
        logger.info(f"Deactivated in scene '{self._active_scene.name}'")
        self._emit(EventType.DEACTIVATED, self._active_scene.name, progress)
        self._drop_streams()
        self._active_scene = None
        self._last_stage = None

    def _enter_scene(self, scene: SceneDescriptor, stage: int, progress: float) -> None:
        if self._active_scene is not None:
            self._emit(EventType.SCENE_EXITED, self._active_scene.name, progress)
        self._drop_streams()

        logger.info(f"Scene entered: {scene.name} (stage {stage}, {progress:.2f}s)")
        self._active_scene = scene
        self._streams = {
            (scene.name, spec.name): RevealStream(spec, self.chunk_size)
            for spec in scene.texts
        }
        self._emit(EventType.SCENE_ENTERED, scene.name, progress, stage=stage)

    def _drop_streams(self) -> None:
        for stream in self._streams.values():
            stream.reset()
        self._streams = {}

    def _compose(
        self,
        scene: SceneDescriptor,
        progress: float,
        local: float,
        stage: int,
        revealed: Dict[str, str],
    ) -> RenderState:
        phases = compute_phases(scene.phases, local, stage)
        samples = {
            spec.name: sample_indices(
                self.seed,
                f"{scene.name}/{spec.name}",
                spec.population,
                spec.count,
                phases.get(spec.driver, 0.0),
            )
            for spec in scene.samples
        }
        return RenderState(
            scene_name=scene.name,
            stage=stage,
            phases=phases,
            revealed_text=revealed,
            eased_phases=compute_eased_phases(scene.phases, local, stage),
            samples=samples,
            scene_progress=scene.fraction(progress),
            timeline_progress=self.table.fraction(progress),
            progress=progress,
        )

    def _emit(self, event_type: EventType, scene: str, progress: float, **data: Any) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(scene_event(event_type, scene, progress, **data))
