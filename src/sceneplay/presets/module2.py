"""Grievance filing walkthrough: channels, assisted filing, anonymity,
review, ticketing and notification scenes."""

from sceneplay.timeline.easing import Easing
from sceneplay.timeline.phases import PhaseSpec
from sceneplay.timeline.reveal import TextSpec
from sceneplay.timeline.scenes import SceneTable

from sceneplay.presets.common import scene

OMNICHANNEL_STAGES = {
    4.0: 1,    # toll free hotline
    5.5: 2,    # SMS, WhatsApp
    7.0: 3,    # email
    8.5: 4,    # online complaint form
    11.0: 5,   # mobile application
    16.0: 6,   # channels merge
}

ASSISTED_STAGES = {
    0.1: 1,    # worker calling
    6.5: 2,    # officer enters
    9.5: 3,    # form slides in, basic details typed
    14.5: 4,   # category selected, complaint details typed
    20.0: 5,   # attachment upload
    22.0: 6,   # filed
}

# Fields the officer types while on the call
BASIC_FIELDS = [
    ("fos_id", "FOS-24-8921"),
    ("name", "Ahmed Khan"),
    ("company", "Pearl Textiles"),
    ("worker_type", "Operator"),
    ("department", "Spinning"),
    ("designation", "Senior Op"),
    ("gender", "Male"),
    ("mobile", "+92 300 123..."),
    ("date", "15 Nov 2024"),
]

COMPLAINT_FIELDS = [
    ("additional_comments", "Wages delayed for 2 months. Overtime not paid."),
    ("complaint_against", "Mr. Asif (Supervisor)"),
    ("concerned_dept", "Accounts / HR"),
    ("history", "First time reporting."),
    ("solution", "Immediate release of pending dues."),
]


def build() -> SceneTable:
    texts = [TextSpec(name, text, stage=3) for name, text in BASIC_FIELDS]
    texts += [TextSpec(name, text, stage=4) for name, text in COMPLAINT_FIELDS]

    return SceneTable(
        [
            scene(
                "intro", 0, 5,
                phases=[PhaseSpec("title", 0.5, 1.5, easing=Easing.EASE_OUT_CUBIC)],
            ),
            scene(
                "omnichannel", 5, 28,
                stages=OMNICHANNEL_STAGES,
                phases=[PhaseSpec("merge", 16.0, 1.0, stage=6, easing=Easing.SMOOTH)],
            ),
            scene(
                "assisted", 28, 57,
                stages=ASSISTED_STAGES,
                phases=[
                    PhaseSpec("form_slide", 9.5, 0.8, stage=3, easing=Easing.SMOOTH),
                    PhaseSpec("scroll", 14.5, 5.5, stage=4),
                    PhaseSpec("upload", 20.0, 2.0, stage=5),
                ],
                texts=texts,
            ),
            scene(
                "anonymity", 57, 77,
                stages={0.5: 1, 3.5: 2, 9.0: 3},
                phases=[
                    PhaseSpec("anonymize", 3.2, 0.3, stage=1),
                    PhaseSpec("protect_fields", 7.5, 1.0, stage=2),
                ],
                texts=[TextSpec("tracking_id", "FOS-ANON-2025-8947", stage=3)],
            ),
            scene(
                "review", 77, 95,
                stages={0.5: 1, 4.5: 2, 8.0: 3, 13.5: 4, 15.5: 5},
                phases=[PhaseSpec("ingest", 15.5, 2.5, stage=5, easing=Easing.EASE_IN_CUBIC)],
            ),
            scene(
                "ticket", 95, 113,
                stages={0.5: 1, 6.0: 2, 7.0: 3},
                phases=[PhaseSpec("ticket_reveal", 0.5, 0.6, stage=1, until_stage=2,
                                  easing=Easing.ELASTIC)],
            ),
            scene(
                "notification", 113, 132,
                stages={0.5: 1, 5.2: 2, 7.52: 3, 8.5: 4, 11.88: 5},
                phases=[
                    PhaseSpec("email_scroll", 5.2, 2.32, stage=2, until_stage=3),
                    PhaseSpec("cursor", 11.88, 1.0, stage=5),
                ],
            ),
        ],
        name="module2",
    )
