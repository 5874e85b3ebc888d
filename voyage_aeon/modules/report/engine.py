from __future__ import annotations

from voyage_aeon.modules.narrative.statistics import PathArchetype, RiskLevel, path_archetype, risk_level
from voyage_aeon.modules.session.state import SessionStatus, StorySession
from voyage_aeon.modules.story_domain.default_endings import TERMINATED_ENDING_NAME

OPENING_SENTENCE = "You began as a space explorer who detected a mysterious signal from deep space."
NO_DECISIONS_SUMMARY = "Mission was terminated before any major decisions were made."

PATH_SENTENCES = {
    PathArchetype.BOLD_EXPLORER: (
        "You chose the path of direct action, investigating signals immediately and taking bold risks."
    ),
    PathArchetype.DIPLOMATIC_PIONEER: (
        "You chose the diplomatic path, prioritizing communication and peaceful contact with alien entities."
    ),
    PathArchetype.CAUTIOUS_SCIENTIST: (
        "You chose the scientific approach, carefully analyzing situations before taking action."
    ),
    PathArchetype.BALANCED_APPROACH: (
        "You took a balanced approach, mixing caution with boldness as situations demanded."
    ),
}

# Matched against the final ending name in order.
ENDING_SENTENCES: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("Crystal", "Bio-Tech"),
        "Your journey led you to discover ancient crystal technology and form a symbiotic relationship "
        "with living bio-tech.",
    ),
    (("Knowledge",), "Your mission culminated in receiving vast ancient knowledge that will benefit all of humanity."),
    (("Consciousness",), "You achieved a transcendent state by merging with cosmic consciousness technology."),
    (("Terminated",), "You chose to end the mission early, prioritizing safety over discovery."),
)
DEFAULT_ENDING_SENTENCE = "Your unique path led to an extraordinary outcome that will shape the future of space exploration."

TERMINATED_ASSESSMENT = (
    "While your mission was cut short, you demonstrated good judgment in knowing when to prioritize safety. "
    "Sometimes the wisest choice is knowing when to stop."
)
NO_DECISIONS_ASSESSMENT = (
    "Your journey ended before any major decisions were made. "
    "Consider exploring the story further to discover the mysteries that await!"
)
PATH_ASSESSMENTS = {
    PathArchetype.BOLD_EXPLORER: (
        "Your bold and decisive approach led to remarkable discoveries. You have the courage needed for deep "
        "space exploration and aren't afraid to take calculated risks for the sake of knowledge."
    ),
    PathArchetype.DIPLOMATIC_PIONEER: (
        "Your diplomatic skills and peaceful approach opened doors that force never could. You have the wisdom "
        "to build bridges between species and create lasting alliances across the galaxy."
    ),
    PathArchetype.CAUTIOUS_SCIENTIST: (
        "Your methodical and scientific approach ensured safe exploration while still achieving significant "
        "discoveries. You balance curiosity with wisdom, making you an ideal deep space researcher."
    ),
    PathArchetype.BALANCED_APPROACH: (
        "Your balanced approach shows adaptability and good judgment. You know when to be bold and when to be "
        "cautious, making you a well-rounded space explorer."
    ),
}
RISK_ASSESSMENT_SUFFIXES = {
    RiskLevel.HIGH: "Your willingness to take risks led to extraordinary outcomes that more cautious explorers might never achieve.",
    RiskLevel.LOW: "Your careful approach ensured your safety while still making meaningful discoveries.",
}


def story_summary(choices: list[str], final_ending: str | None) -> str:
    if not choices:
        return NO_DECISIONS_SUMMARY

    ending = final_ending or ""
    ending_sentence = DEFAULT_ENDING_SENTENCE
    for fragments, sentence in ENDING_SENTENCES:
        if any(fragment in ending for fragment in fragments):
            ending_sentence = sentence
            break
    return " ".join([OPENING_SENTENCE, PATH_SENTENCES[path_archetype(choices)], ending_sentence])


def final_assessment(choices: list[str], final_ending: str | None) -> str:
    if final_ending == TERMINATED_ENDING_NAME:
        return TERMINATED_ASSESSMENT
    if not choices:
        return NO_DECISIONS_ASSESSMENT

    assessment = PATH_ASSESSMENTS[path_archetype(choices)]
    suffix = RISK_ASSESSMENT_SUFFIXES.get(risk_level(choices))
    if suffix:
        assessment = f"{assessment} {suffix}"
    return assessment


class MissionReportEngine:
    def build_report(self, session: StorySession) -> dict:
        graph = session.graph
        choices = list(session.choices)
        snapshot = session.statistics_snapshot()
        progress = session.progress()

        decision_points = []
        for index, detail in enumerate(session.choice_details, start=1):
            decision_points.append(
                {
                    "index": index,
                    "scene_key": detail.scene_key,
                    "scene_name": detail.scene_name,
                    "choice_label": detail.choice_label,
                    "description": detail.description,
                    "next_scene": detail.next_scene,
                    "led_to": graph.scene_name(detail.next_scene),
                }
            )

        return {
            "story_id": graph.story_id,
            "status": session.status.value,
            "completed": session.status == SessionStatus.ENDED,
            "final_ending": session.final_ending,
            "story_summary": story_summary(choices, session.final_ending),
            "decision_points": decision_points,
            "statistics": {
                "decision_count": len(decision_points),
                "path_archetype": snapshot["path_archetype"],
                "progress": progress,
                "exploration_style": snapshot["exploration_style"],
                "risk_level": snapshot["risk_level"],
                "risk_descriptor": snapshot["risk_descriptor"],
            },
            "achievements": snapshot["achievements"],
            "final_assessment": final_assessment(choices, session.final_ending),
            "timing": session.session_timing(),
        }


def build_mission_report(session: StorySession) -> dict:
    return MissionReportEngine().build_report(session)
