"""Dashboards and risk insights scenes."""

from sceneplay.timeline.phases import PhaseSpec
from sceneplay.timeline.scenes import SceneTable

from sceneplay.presets.common import scene


def build() -> SceneTable:
    return SceneTable(
        [
            scene("intro", 0, 7),
            scene("dashboard", 7, 16, phases=[PhaseSpec("overview", 0.0, 9.0)]),
            scene("assessment", 16, 20.2),
            # Wages and harassment first, then the remaining categories
            scene("breakdown", 20.2, 30.64, stages={0.0: 1, 5.16: 2}),
            scene("heatmap", 30.64, 43.4),
            scene("metrics", 43.4, 59.4),
            scene("timeline", 59.4, 70.4),
            scene("nps", 70.4, 75.68),
            scene("trends", 75.68, 90.28),
            scene("export", 90.28, 96.4),
            scene("conclusion", 96.4, 102),
        ],
        name="module4",
    )
