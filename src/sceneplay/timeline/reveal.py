"""Typewriter-style incremental text reveal.

Reveal speed is measured in characters per host tick, not per second, so
the revealed length cannot be derived from progress alone. This is the only
mutable state in the timeline and it is reset explicitly whenever the
owning stage is left backwards or the scene is deactivated.

States:
    IDLE: Owning stage not entered yet (nothing revealed)
    REVEALING: Growing by ``chunk_size`` characters per tick
    COMPLETE: Whole target text revealed, stable
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class RevealStatus(Enum):
    """Typewriter state."""
    IDLE = auto()
    REVEALING = auto()
    COMPLETE = auto()


@dataclass(frozen=True)
class RevealState:
    """Snapshot of one typewriter field.

    Attributes:
        target_text: Full text being revealed
        revealed_length: Number of leading characters visible
        last_stage_entered: Stage that was active when revealing began
        status: Current typewriter state
    """

    target_text: str
    revealed_length: int = 0
    last_stage_entered: Optional[int] = None
    status: RevealStatus = RevealStatus.IDLE

    @property
    def text(self) -> str:
        return self.target_text[:self.revealed_length]

    @property
    def is_complete(self) -> bool:
        return self.status is RevealStatus.COMPLETE


def reset(state: RevealState) -> RevealState:
    """Return ``state`` back in IDLE with nothing revealed."""
    return RevealState(state.target_text)


def advance(
    state: RevealState,
    is_stage_active: bool,
    chunk_size: int = 1,
    stage: Optional[int] = None,
) -> RevealState:
    """Apply one host tick to a reveal state.

    Args:
        state: Current state
        is_stage_active: Whether the owning stage is active on this tick
        chunk_size: Characters revealed per tick (values below 1 count as 1)
        stage: Stage resolved on this tick; a value lower than the stage at
            which revealing began is a regression and restarts the reveal

    Returns:
        The next state. Never raises.
    """
    if not is_stage_active:
        if state.status is RevealStatus.IDLE:
            return state
        return reset(state)

    if (
        stage is not None
        and state.last_stage_entered is not None
        and stage < state.last_stage_entered
    ):
        state = reset(state)

    target_length = len(state.target_text)

    # Entering: nothing is shown on the entry tick itself
    if state.status is RevealStatus.IDLE:
        status = RevealStatus.COMPLETE if target_length == 0 else RevealStatus.REVEALING
        return replace(state, revealed_length=0, last_stage_entered=stage, status=status)

    if state.status is RevealStatus.COMPLETE:
        return state

    length = min(state.revealed_length + max(chunk_size, 1), target_length)
    status = RevealStatus.COMPLETE if length == target_length else RevealStatus.REVEALING
    return replace(state, revealed_length=length, status=status)


@dataclass(frozen=True)
class TextSpec:
    """A text field revealed progressively once its stage is reached.

    Attributes:
        name: Key under which the revealed prefix is reported
        text: Full target text
        stage: Stage that owns the field; revealing runs while stage >= this
        chunk_size: Characters per tick, or None for the engine default
    """

    name: str
    text: str
    stage: int = 0
    chunk_size: Optional[int] = None


class RevealStream:
    """Owns one evolving :class:`RevealState`.

    Usage:
        stream = RevealStream(TextSpec("title", "Hello", stage=1))

        # Once per host tick:
        visible = stream.tick(current_stage)
    """

    def __init__(self, spec: TextSpec, chunk_size: int = 1):
        self.spec = spec
        self.chunk_size = spec.chunk_size if spec.chunk_size is not None else chunk_size
        self._state = RevealState(spec.text)

    @property
    def state(self) -> RevealState:
        return self._state

    @property
    def status(self) -> RevealStatus:
        return self._state.status

    @property
    def text(self) -> str:
        return self._state.text

    @property
    def revealed_length(self) -> int:
        return self._state.revealed_length

    @property
    def is_complete(self) -> bool:
        return self._state.is_complete

    def is_owned_stage_active(self, stage: int) -> bool:
        return stage >= self.spec.stage

    def peek(self, stage: int) -> str:
        """Visible prefix at ``stage`` without advancing.

        Returns "" whenever the next tick at ``stage`` would reset the field.
        """
        last = self._state.last_stage_entered
        if not self.is_owned_stage_active(stage) or (last is not None and stage < last):
            return ""
        return self._state.text

    def tick(self, stage: int) -> str:
        """Advance by one host tick and return the visible prefix."""
        previous = self._state
        self._state = advance(
            previous,
            self.is_owned_stage_active(stage),
            self.chunk_size,
            stage,
        )
        if self._state.revealed_length < previous.revealed_length:
            logger.debug(f"Reveal reset: {self.spec.name} (stage {stage})")
        elif self._state.is_complete and not previous.is_complete:
            logger.debug(f"Reveal complete: {self.spec.name}")
        return self._state.text

    def reset(self) -> None:
        """Drop back to IDLE, e.g. when the scene is deactivated."""
        self._state = reset(self._state)
