from __future__ import annotations

from voyage_aeon.modules.report.engine import (
    NO_DECISIONS_ASSESSMENT,
    NO_DECISIONS_SUMMARY,
    TERMINATED_ASSESSMENT,
    build_mission_report,
    final_assessment,
    story_summary,
)
from tests.support.story_fixtures import FakeClock, play, started_session


def test_report_for_crystal_path() -> None:
    session = play(started_session(clock=FakeClock()), "investigate", "board", "crystalStudy", "crystalTechEnding")

    report = build_mission_report(session)

    assert report["final_ending"] == "Bio-Tech Symbiosis Pioneer"
    assert report["completed"] is True
    assert report["story_summary"].startswith("You began as a space explorer")
    assert "direct action" in report["story_summary"]
    assert "crystal technology" in report["story_summary"]
    assert report["final_assessment"].startswith("Your bold and decisive approach")
    assert report["final_assessment"].endswith("more cautious explorers might never achieve.")

    first = report["decision_points"][0]
    assert first["index"] == 1
    assert first["scene_name"] == "Initial Signal Detection"
    assert first["led_to"] == "Direct Investigation"
    assert len(report["decision_points"]) == 4

    stats = report["statistics"]
    assert stats["decision_count"] == 4
    assert stats["path_archetype"] == "Bold Explorer"
    assert stats["risk_level"] == "High Risk"
    assert stats["progress"] == {"current": 5, "max": 15}
    assert report["timing"]["ended_at"] is not None


def test_report_for_immediate_stop() -> None:
    session = started_session()
    session.stop_story()

    report = build_mission_report(session)

    assert report["final_ending"] == "Mission Terminated by User"
    assert report["story_summary"] == NO_DECISIONS_SUMMARY
    assert report["final_assessment"] == TERMINATED_ASSESSMENT
    assert report["decision_points"] == []
    assert [a["achievement_id"] for a in report["achievements"]] == []


def test_summary_mentions_early_termination() -> None:
    summary = story_summary(["scan"], "Mission Terminated by User")
    assert "scientific approach" in summary
    assert summary.endswith("prioritizing safety over discovery.")


def test_summary_default_ending_sentence() -> None:
    summary = story_summary(["scan", "defensive", "defensiveProtocol", "guardianTraining"], "Galactic Guardian")
    assert summary.endswith("shape the future of space exploration.")


def test_assessment_variants() -> None:
    assert final_assessment([], None) == NO_DECISIONS_ASSESSMENT
    cautious = final_assessment(["scan", "defensive"], "Galactic Guardian")
    assert cautious.startswith("Your methodical and scientific approach")
    assert cautious.endswith("making meaningful discoveries.")
    moderate = final_assessment(["investigate", "communicate"], "Galactic Knowledge Keeper")
    assert moderate.endswith("deep space exploration and aren't afraid to take calculated risks for the sake of knowledge.")
