from __future__ import annotations

import pytest

from voyage_aeon.modules.narrative.statistics import (
    achievements,
    exploration_style,
    path_archetype,
    risk_level,
    statistics_snapshot,
)


def _ids(items: list[dict]) -> list[str]:
    return [item["achievement_id"] for item in items]


@pytest.mark.parametrize(
    ("choices", "expected"),
    [
        (["scan", "investigate"], "Bold Explorer"),
        (["investigate", "scan"], "Bold Explorer"),
        (["investigate", "peaceful"], "Bold Explorer"),
        (["scan", "peaceful"], "Diplomatic Pioneer"),
        (["scan", "defensive"], "Cautious Scientist"),
        (["crystalStudy"], "Balanced Approach"),
        ([], "Balanced Approach"),
    ],
)
def test_path_archetype_priority(choices, expected) -> None:
    assert path_archetype(choices).value == expected


@pytest.mark.parametrize(
    ("choices", "expected"),
    [
        (["investigate", "board"], "High Risk"),
        (["investigate", "communicate"], "Moderate Risk"),
        (["scan"], "Low Risk"),
        ([], "Low Risk"),
    ],
)
def test_risk_level_thresholds(choices, expected) -> None:
    assert risk_level(choices).value == expected


@pytest.mark.parametrize(
    ("choices", "expected"),
    [
        (["investigate", "board", "communicate"], "Risk-Taking Pioneer"),
        (["scan", "defensive", "investigate"], "Methodical Researcher"),
        (["investigate", "communicate"], "Adaptive Explorer"),
        ([], "Adaptive Explorer"),
    ],
)
def test_exploration_style_majority(choices, expected) -> None:
    assert exploration_style(choices).value == expected


def test_achievements_for_crystal_path() -> None:
    result = achievements(
        ["investigate", "board", "crystalStudy", "crystalTechEnding"],
        final_ending="Bio-Tech Symbiosis Pioneer",
        completed=True,
    )
    assert _ids(result) == [
        "fearless_pioneer",
        "quick_decision_maker",
        "bio_tech_symbiosis",
        "mission_complete",
        "decision_master",
    ]
    assert result[0] == {
        "achievement_id": "fearless_pioneer",
        "title": "Fearless Pioneer",
        "description": "Chose direct action over caution",
    }


def test_achievements_for_diplomatic_knowledge_ending() -> None:
    result = achievements(["scan", "peaceful", "coordinateGift", "ancientLibrary"], final_ending="Keeper of Galactic Knowledge", completed=True)
    assert _ids(result) == [
        "galactic_diplomat",
        "peace_ambassador",
        "safety_first",
        "cosmic_scholar",
        "mission_complete",
        "decision_master",
    ]


def test_terminated_session_is_not_mission_complete() -> None:
    result = achievements(["scan"], final_ending="Mission Terminated by User", completed=False)
    assert _ids(result) == ["methodical_researcher", "safety_first"]


def test_consciousness_ending_achievement() -> None:
    result = achievements([], final_ending="Cosmic Consciousness Transcendent")
    assert _ids(result) == ["transcendent_being"]


def test_empty_input_yields_defaults() -> None:
    assert statistics_snapshot([]) == {
        "path_archetype": "Balanced Approach",
        "risk_level": "Low Risk",
        "risk_descriptor": "Safety-Conscious Scientist",
        "exploration_style": "Adaptive Explorer",
        "achievements": [],
    }


def test_snapshot_carries_risk_descriptor() -> None:
    snapshot = statistics_snapshot(["investigate", "board"])
    assert snapshot["risk_level"] == "High Risk"
    assert snapshot["risk_descriptor"] == "Bold Adventurer"
    assert statistics_snapshot(["board"])["risk_descriptor"] == "Calculated Explorer"


def test_snapshot_is_idempotent() -> None:
    choices = ["scan", "defensive", "trustBuilding"]
    assert statistics_snapshot(choices, final_ending=None) == statistics_snapshot(choices, final_ending=None)
