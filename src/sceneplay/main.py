"""
Main entry point for sceneplay.

Plays a preset timeline headlessly: a playback clock drives the
orchestrator frame by frame and every scene or stage change is printed.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from sceneplay.config.settings import PlaybackSettings, Settings, get_settings
from sceneplay.core.events import Event, EventBus, EventType
from sceneplay.presets import PRESETS, get_preset
from sceneplay.timeline.clock import PlaybackClock
from sceneplay.timeline.orchestrator import Orchestrator, RenderState
from sceneplay.timeline.validation import TimelineConfigError


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sceneplay",
        description="Play a scene timeline headlessly and print its render states",
    )
    parser.add_argument("--preset", choices=PRESETS, default=None,
                        help="Scene table to play (default: SCENEPLAY_PRESET)")
    parser.add_argument("--seek", type=float, default=0.0,
                        help="Start playback at this many seconds")
    parser.add_argument("--until", type=float, default=None,
                        help="Stop once progress reaches this many seconds")
    parser.add_argument("--speed", type=float, default=None,
                        help="Playback speed multiplier")
    parser.add_argument("--fps", type=int, default=None,
                        help="Frames evaluated per second of playback")
    parser.add_argument("--realtime", action="store_true",
                        help="Sleep between frames instead of running flat out")
    parser.add_argument("--json", action="store_true",
                        help="Print every frame as a JSON line")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    return parser


def format_state(state: RenderState) -> str:
    """One human-readable line for a render state."""
    texts = ", ".join(
        f"{name}={text!r}" for name, text in state.revealed_text.items() if text
    )
    line = f"{state.progress:7.2f}s  {state.scene_name:<14} stage {state.stage}"
    return f"{line}  {texts}" if texts else line


async def run_player(
    settings: Settings,
    preset: str,
    seek: float = 0.0,
    until: Optional[float] = None,
    realtime: bool = False,
    as_json: bool = False,
) -> None:
    """Drive one preset from ``seek`` to its end (or ``until``)."""
    logger = logging.getLogger(__name__)

    table = get_preset(preset)
    event_bus = EventBus()

    # A looping clock never finishes; allow it only for open-ended realtime runs
    loop = settings.playback.loop and realtime and until is None
    if settings.playback.loop and not loop:
        logger.warning("Loop ignored: needs --realtime and no --until; playing one pass")

    orchestrator = Orchestrator(
        table,
        chunk_size=settings.reveal.chunk_size,
        seed=settings.sample_seed,
        event_bus=event_bus,
    )
    clock = PlaybackClock(
        table.end,
        speed=settings.playback.speed,
        loop=loop,
        event_bus=event_bus,
    )

    changes: list[Event] = []

    def on_change(event: Event) -> None:
        changes.append(event)

    event_bus.subscribe(EventType.SCENE_ENTERED, on_change)
    event_bus.subscribe(EventType.STAGE_CHANGED, on_change)

    frame_delay = 1.0 / settings.playback.fps
    stop_at = table.end if until is None else min(until, table.end)

    clock.seek(seek).play()
    logger.info(f"Playing '{preset}' from {clock.progress:.2f}s to {stop_at:.2f}s")

    while True:
        state = orchestrator.evaluate(clock.progress, is_active=True)
        if as_json:
            print(json.dumps(state.to_dict()))
        elif changes:
            print(format_state(state))
        changes.clear()

        if clock.is_finished or clock.progress >= stop_at:
            break
        if realtime:
            await asyncio.sleep(frame_delay)
        clock.update(frame_delay)

    orchestrator.evaluate(clock.progress, is_active=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging(args.debug)
        logging.getLogger(__name__).error(f"Invalid settings: {e}")
        return 1

    # CLI flags override environment settings
    overrides = {}
    if args.speed is not None:
        overrides["speed"] = args.speed
    if args.fps is not None:
        overrides["fps"] = args.fps
    if overrides:
        try:
            playback = PlaybackSettings.model_validate(
                {**settings.playback.model_dump(), **overrides}
            )
        except ValidationError as e:
            parser.error(str(e))
        settings = settings.model_copy(update={"playback": playback})

    setup_logging(args.debug or settings.debug)

    logger = logging.getLogger(__name__)
    preset = args.preset or settings.preset

    if preset not in PRESETS:
        logger.error(f"Unknown preset: {preset} (available: {', '.join(PRESETS)})")
        return 1

    try:
        asyncio.run(run_player(
            settings,
            preset,
            seek=args.seek,
            until=args.until,
            realtime=args.realtime,
            as_json=args.json,
        ))
    except TimelineConfigError as e:
        logger.error(f"Cannot play '{preset}': {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    logger.info("sceneplay stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
