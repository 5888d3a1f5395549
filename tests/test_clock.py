"""Tests for the playback clock."""

from __future__ import annotations

import pytest

from sceneplay.core.events import EventBus, EventType
from sceneplay.timeline.clock import PlaybackClock, PlayState


class TestPlaybackClock:
    """Tests for PlaybackClock."""

    def test_does_not_advance_until_playing(self) -> None:
        clock = PlaybackClock(10.0)
        assert clock.update(1.0) == 0.0
        assert clock.state is PlayState.STOPPED

    def test_advances_by_delta_times_speed(self) -> None:
        clock = PlaybackClock(10.0, speed=2.0).play()
        assert clock.update(0.5) == pytest.approx(1.0)
        assert clock.fraction == pytest.approx(0.1)

    def test_pause_holds_position(self) -> None:
        clock = PlaybackClock(10.0).play()
        clock.update(1.0)
        clock.pause()
        assert clock.update(1.0) == pytest.approx(1.0)
        assert clock.state is PlayState.PAUSED

    def test_finishes_once_and_clamps(self) -> None:
        completed = []
        clock = PlaybackClock(1.0, on_complete=completed.append).play()
        for _ in range(20):
            clock.update(0.1)
        assert clock.progress == 1.0
        assert clock.is_finished
        assert completed == [clock]

    def test_loop_wraps(self) -> None:
        clock = PlaybackClock(1.0, loop=True).play()
        clock.update(1.25)
        assert clock.progress == pytest.approx(0.25)
        assert clock.is_playing

    def test_seek_is_clamped(self) -> None:
        clock = PlaybackClock(10.0)
        assert clock.seek(-3.0).progress == 0.0
        assert clock.seek(30.0).progress == 10.0
        assert clock.seek(4.0).progress == 4.0

    def test_seek_backward_from_finished_pauses(self) -> None:
        clock = PlaybackClock(1.0).play()
        clock.update(5.0)
        assert clock.is_finished
        clock.seek(0.5)
        assert clock.state is PlayState.PAUSED
        clock.play()
        assert clock.update(0.25) == pytest.approx(0.75)

    def test_play_after_finish_restarts(self) -> None:
        clock = PlaybackClock(1.0).play()
        clock.update(2.0)
        clock.play()
        assert clock.progress == 0.0

    def test_stop_rewinds(self) -> None:
        clock = PlaybackClock(5.0).play()
        clock.update(2.0)
        clock.stop()
        assert clock.progress == 0.0
        assert clock.state is PlayState.STOPPED

    def test_negative_delta_ignored(self) -> None:
        clock = PlaybackClock(5.0).play()
        clock.update(2.0)
        assert clock.update(-1.0) == pytest.approx(2.0)

    def test_speed_never_negative(self) -> None:
        clock = PlaybackClock(5.0)
        clock.speed = -2.0
        assert clock.speed == 0.0

    def test_emits_playback_events(self) -> None:
        bus = EventBus()
        clock = PlaybackClock(1.0, event_bus=bus)
        clock.play()
        clock.seek(0.5)
        clock.pause()
        clock.play()
        clock.update(1.0)
        types = [e.type for e in bus.get_history(limit=10)]
        assert types == [
            EventType.PLAYBACK_STARTED,
            EventType.PLAYBACK_SEEKED,
            EventType.PLAYBACK_PAUSED,
            EventType.PLAYBACK_STARTED,
            EventType.PLAYBACK_COMPLETE,
        ]
        assert bus.get_history(EventType.PLAYBACK_COMPLETE)[0].data == {"progress": 1.0}
