"""Built-in scene tables for the presentation modules."""

from typing import Callable, Dict
import logging

from sceneplay.timeline.scenes import SceneTable

from sceneplay.presets import module1, module2, module4, survey

logger = logging.getLogger(__name__)

_BUILDERS: Dict[str, Callable[[], SceneTable]] = {
    "module1": module1.build,
    "module2": module2.build,
    "module4": module4.build,
    "survey": survey.build,
}

PRESETS = tuple(_BUILDERS)

_cache: Dict[str, SceneTable] = {}


def get_preset(name: str) -> SceneTable:
    """Get a validated preset scene table by name.

    Tables are built and validated once per process.

    Raises:
        KeyError: If ``name`` is not a known preset
        TimelineConfigError: If the preset is malformed
    """
    if name not in _BUILDERS:
        raise KeyError(f"Unknown preset: {name} (available: {', '.join(PRESETS)})")
    if name not in _cache:
        _cache[name] = _BUILDERS[name]()
        logger.debug(f"Preset loaded: {name}")
    return _cache[name]


__all__ = ["PRESETS", "get_preset"]
