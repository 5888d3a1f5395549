"""Timeline module for sceneplay."""

from sceneplay.timeline.stages import Breakpoint, BreakpointTable, resolve_stage
from sceneplay.timeline.phases import PhaseSpec, clamp, compute_phases, phase
from sceneplay.timeline.easing import CubicBezier, Easing, get_easing
from sceneplay.timeline.reveal import (
    RevealState,
    RevealStatus,
    RevealStream,
    TextSpec,
    advance,
)
from sceneplay.timeline.sampling import SampleSpec, sample_indices
from sceneplay.timeline.validation import TimelineConfigError, validate_scene_table
from sceneplay.timeline.scenes import SceneDescriptor, SceneTable, select_scene
from sceneplay.timeline.orchestrator import Orchestrator, RenderState
from sceneplay.timeline.clock import PlaybackClock, PlayState

__all__ = [
    # Stages
    "Breakpoint",
    "BreakpointTable",
    "resolve_stage",
    # Phases
    "PhaseSpec",
    "clamp",
    "compute_phases",
    "phase",
    # Easing
    "CubicBezier",
    "Easing",
    "get_easing",
    # Reveal
    "RevealState",
    "RevealStatus",
    "RevealStream",
    "TextSpec",
    "advance",
    # Samples
    "SampleSpec",
    "sample_indices",
    # Scenes
    "SceneDescriptor",
    "SceneTable",
    "select_scene",
    "TimelineConfigError",
    "validate_scene_table",
    # Orchestration
    "Orchestrator",
    "RenderState",
    "PlaybackClock",
    "PlayState",
]
