"""Survey creation and sampling scenes."""

from sceneplay.timeline.phases import PhaseSpec
from sceneplay.timeline.reveal import TextSpec
from sceneplay.timeline.sampling import SampleSpec
from sceneplay.timeline.scenes import SceneTable

from sceneplay.presets.common import scene

GRID_SIZE = 64
# The sample slider settles at 50%
SAMPLE_COUNT = GRID_SIZE // 2


def build() -> SceneTable:
    return SceneTable(
        [
            scene("intro", 0, 9),
            scene(
                "creation", 9, 17,
                stages={1.5: 1, 3.0: 2, 5.0: 3, 6.5: 4},
                phases=[
                    PhaseSpec("form", 0.0, 2.0),
                    PhaseSpec("title_field", 1.5, 2.0, stage=1),
                    PhaseSpec("description_field", 3.0, 2.0, stage=2),
                    PhaseSpec("date_picker", 5.0, 2.0, stage=3),
                    PhaseSpec("submit", 6.5, 1.5, stage=4),
                ],
                texts=[
                    TextSpec("title", "Employee Wellbeing Survey", stage=1),
                    TextSpec(
                        "description",
                        "Quarterly satisfaction assessment for all departments...",
                        stage=2,
                        chunk_size=2,
                    ),
                ],
            ),
            scene("audience", 17, 33),
            scene(
                "sampling", 33, 46,
                stages={2.0: 1, 5.0: 2, 9.0: 3},
                phases=[
                    PhaseSpec("header", 0.0, 3.0),
                    PhaseSpec("slider", 2.0, 4.0, stage=1),
                    PhaseSpec("grid", 5.0, 4.0, stage=2),
                    PhaseSpec("stats", 9.0, 4.0, stage=3),
                ],
                samples=[SampleSpec("selected", GRID_SIZE, SAMPLE_COUNT, driver="grid")],
            ),
        ],
        name="survey",
    )
