"""Playback clock that turns frame deltas into timeline progress.

The clock is a host-side helper: it never reads wall time itself, it only
accumulates the deltas it is given. Seeking is allowed in any state, which
is what makes scrubbing possible.
"""

from typing import Callable, Optional
from enum import Enum, auto
import logging

from sceneplay.core.events import EventBus, EventType, playback_event

logger = logging.getLogger(__name__)


class PlayState(Enum):
    """Clock playback state."""

    STOPPED = auto()
    PLAYING = auto()
    PAUSED = auto()
    FINISHED = auto()


class PlaybackClock:
    """Progress source for a timeline of ``duration`` seconds.

    Attributes:
        duration: Total length in seconds
        loop: Wrap to 0 instead of finishing
        on_complete: Called once when playback reaches ``duration``
    """

    def __init__(
        self,
        duration: float,
        speed: float = 1.0,
        loop: bool = False,
        on_complete: Optional[Callable[["PlaybackClock"], None]] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.duration = max(0.0, duration)
        self.loop = loop
        self.on_complete = on_complete
        self._event_bus = event_bus
        self._state = PlayState.STOPPED
        self._progress = 0.0
        self._speed = max(0.0, speed)

    def _emit(self, event_type: EventType) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(playback_event(event_type, self._progress))

    # Playback control
    def play(self, from_start: bool = False) -> "PlaybackClock":
        """Start or resume playback.

        Args:
            from_start: If True, restart from the beginning

        Returns:
            Self for method chaining
        """
        if from_start or self._state == PlayState.FINISHED:
            self._progress = 0.0
        self._state = PlayState.PLAYING
        self._emit(EventType.PLAYBACK_STARTED)
        return self

    def pause(self) -> "PlaybackClock":
        """Pause playback."""
        if self._state == PlayState.PLAYING:
            self._state = PlayState.PAUSED
            self._emit(EventType.PLAYBACK_PAUSED)
        return self

    def stop(self) -> "PlaybackClock":
        """Stop playback and rewind."""
        self._state = PlayState.STOPPED
        self._progress = 0.0
        return self

    def seek(self, seconds: float) -> "PlaybackClock":
        """Jump to ``seconds``, clamped to ``[0, duration]``.

        Seeking backwards out of FINISHED leaves the clock PAUSED there.
        """
        self._progress = max(0.0, min(seconds, self.duration))
        if self._state == PlayState.FINISHED and self._progress < self.duration:
            self._state = PlayState.PAUSED
        self._emit(EventType.PLAYBACK_SEEKED)
        return self

    @property
    def speed(self) -> float:
        """Playback speed multiplier."""
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._speed = max(0.0, value)

    @property
    def state(self) -> PlayState:
        return self._state

    @property
    def progress(self) -> float:
        """Current position in seconds."""
        return self._progress

    @property
    def fraction(self) -> float:
        """Normalized position (0.0 to 1.0)."""
        if self.duration <= 0:
            return 1.0
        return self._progress / self.duration

    @property
    def is_playing(self) -> bool:
        return self._state == PlayState.PLAYING

    @property
    def is_finished(self) -> bool:
        return self._state == PlayState.FINISHED

    def update(self, delta_seconds: float) -> float:
        """Advance by one frame and return the new progress.

        Args:
            delta_seconds: Host time elapsed since the previous frame
        """
        if self._state != PlayState.PLAYING:
            return self._progress

        self._progress += max(0.0, delta_seconds) * self._speed

        if self._progress >= self.duration:
            if self.loop and self.duration > 0:
                self._progress = self._progress % self.duration
            else:
                self._progress = self.duration
                self._state = PlayState.FINISHED
                logger.info(f"Playback complete at {self.duration:.2f}s")
                self._emit(EventType.PLAYBACK_COMPLETE)
                if self.on_complete:
                    self.on_complete(self)

        return self._progress
