"""Onboarding walkthrough: registration, upload and ID card scenes."""

from sceneplay.timeline.easing import Easing
from sceneplay.timeline.phases import PhaseSpec
from sceneplay.timeline.scenes import SceneTable

from sceneplay.presets.common import scene

# Upload scene stages, relative to the scene start at 2s
UPLOAD_STAGES = {
    0.0: 1,    # data registration
    3.0: 2,    # companies share their employee list
    7.0: 3,    # HRMS connects
    8.0: 4,    # API handshake
    10.0: 5,   # data stream through secure APIs
    13.5: 6,   # integration complete, celebration
    15.0: 7,   # upload starts
    16.5: 8,   # row validation
    19.0: 9,   # complete
}


def build() -> SceneTable:
    return SceneTable(
        [
            scene("hero", 0, 2),
            scene(
                "upload", 2, 22,
                stages=UPLOAD_STAGES,
                phases=[
                    PhaseSpec("file_stack", 0.2, 0.6, stage=1, until_stage=3),
                    PhaseSpec("file_organize", 0.8, 0.7, stage=1, until_stage=3),
                    PhaseSpec("handshake_lock", 8.5, 1.5, stage=4, until_stage=6,
                              easing=Easing.SNAP),
                    PhaseSpec("stream", 10.0, 3.0, stage=5, until_stage=7,
                              easing=Easing.EASE_IN_CUBIC),
                    PhaseSpec("upload_progress", 15.5, 1.0, stage=7),
                    PhaseSpec("row_1", 16.7, 0.6, stage=8),
                    PhaseSpec("row_2", 17.3, 0.6, stage=8),
                    PhaseSpec("row_3", 17.9, 0.6, stage=8),
                    PhaseSpec("row_4", 18.5, 0.5, stage=8),
                    PhaseSpec("celebration", 19.5, 0.5, stage=9, easing=Easing.BOUNCE),
                ],
            ),
            scene("sms", 22, 58),
            scene("card", 58, 83),
            scene("officers", 83, 101),
            scene("training", 101, 120),
            scene("portal", 120, 134),
            scene("io_training", 134, 149),
            scene("closing", 149, 152),
        ],
        name="module1",
    )
