from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum


class PathArchetype(str, Enum):
    BOLD_EXPLORER = "Bold Explorer"
    DIPLOMATIC_PIONEER = "Diplomatic Pioneer"
    CAUTIOUS_SCIENTIST = "Cautious Scientist"
    BALANCED_APPROACH = "Balanced Approach"


class RiskLevel(str, Enum):
    HIGH = "High Risk"
    MODERATE = "Moderate Risk"
    LOW = "Low Risk"


class ExplorationStyle(str, Enum):
    RISK_TAKING_PIONEER = "Risk-Taking Pioneer"
    METHODICAL_RESEARCHER = "Methodical Researcher"
    ADAPTIVE_EXPLORER = "Adaptive Explorer"


# First match wins; order is part of the classification.
ARCHETYPE_RULES: tuple[tuple[PathArchetype, frozenset[str]], ...] = (
    (PathArchetype.BOLD_EXPLORER, frozenset({"investigate", "board"})),
    (PathArchetype.DIPLOMATIC_PIONEER, frozenset({"communicate", "peaceful"})),
    (PathArchetype.CAUTIOUS_SCIENTIST, frozenset({"scan", "defensive"})),
)

HIGH_RISK_CHOICES = frozenset({"investigate", "board", "exploreEnding"})
CAUTIOUS_CHOICES = frozenset({"scan", "defensive", "communicate"})

RISK_DESCRIPTORS = {
    RiskLevel.HIGH: "Bold Adventurer",
    RiskLevel.MODERATE: "Calculated Explorer",
    RiskLevel.LOW: "Safety-Conscious Scientist",
}

DECISION_MASTER_THRESHOLD = 3


@dataclass(frozen=True, slots=True)
class PlaythroughFacts:
    choices: tuple[str, ...]
    final_ending: str
    completed: bool
    decision_count: int


@dataclass(frozen=True, slots=True)
class AchievementRule:
    achievement_id: str
    title: str
    description: str
    matches: Callable[[PlaythroughFacts], bool]

    def as_dict(self) -> dict:
        return {"achievement_id": self.achievement_id, "title": self.title, "description": self.description}


def _chose(key: str) -> Callable[[PlaythroughFacts], bool]:
    return lambda facts: key in facts.choices


def _archetype_is(archetype: PathArchetype) -> Callable[[PlaythroughFacts], bool]:
    return lambda facts: path_archetype(facts.choices) == archetype


def _ending_mentions(*fragments: str) -> Callable[[PlaythroughFacts], bool]:
    return lambda facts: any(fragment in facts.final_ending for fragment in fragments)


ACHIEVEMENT_RULES: tuple[AchievementRule, ...] = (
    AchievementRule(
        "fearless_pioneer", "Fearless Pioneer", "Chose direct action over caution",
        _archetype_is(PathArchetype.BOLD_EXPLORER),
    ),
    AchievementRule(
        "galactic_diplomat", "Galactic Diplomat", "Prioritized peaceful communication",
        _archetype_is(PathArchetype.DIPLOMATIC_PIONEER),
    ),
    AchievementRule(
        "methodical_researcher", "Methodical Researcher", "Applied scientific approach",
        _archetype_is(PathArchetype.CAUTIOUS_SCIENTIST),
    ),
    AchievementRule(
        "quick_decision_maker", "Quick Decision Maker", "Investigated signal immediately",
        _chose("investigate"),
    ),
    AchievementRule(
        "first_contact_specialist", "First Contact Specialist", "Attempted alien communication",
        _chose("communicate"),
    ),
    AchievementRule("peace_ambassador", "Peace Ambassador", "Extended peaceful greetings", _chose("peaceful")),
    AchievementRule("safety_first", "Safety First", "Prioritized caution and analysis", _chose("scan")),
    AchievementRule(
        "bio_tech_symbiosis", "Bio-Tech Symbiosis", "Merged with living crystal technology",
        # "Bio-Tech" also matches, so the Bio-Tech Symbiosis Pioneer ending earns it.
        _ending_mentions("Crystal", "Bio-Tech"),
    ),
    AchievementRule(
        "cosmic_scholar", "Cosmic Scholar", "Acquired ancient galactic knowledge",
        _ending_mentions("Knowledge"),
    ),
    AchievementRule(
        "transcendent_being", "Transcendent Being", "Achieved cosmic consciousness",
        _ending_mentions("Consciousness"),
    ),
    AchievementRule(
        "mission_complete", "Mission Complete", "Reached a story conclusion",
        # Story endings only; a user stop does not complete the mission.
        lambda facts: facts.completed,
    ),
    AchievementRule(
        "decision_master", "Decision Master", "Made multiple critical choices",
        lambda facts: facts.decision_count >= DECISION_MASTER_THRESHOLD,
    ),
)


def path_archetype(choices: Iterable[str]) -> PathArchetype:
    chosen = set(choices)
    for archetype, keys in ARCHETYPE_RULES:
        if chosen & keys:
            return archetype
    return PathArchetype.BALANCED_APPROACH


def risk_level(choices: Iterable[str]) -> RiskLevel:
    risky = sum(1 for key in choices if key in HIGH_RISK_CHOICES)
    if risky >= 2:
        return RiskLevel.HIGH
    if risky == 1:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def risk_descriptor(level: RiskLevel) -> str:
    return RISK_DESCRIPTORS[level]


def exploration_style(choices: Iterable[str]) -> ExplorationStyle:
    risk_count = 0
    caution_count = 0
    for key in choices:
        if key in HIGH_RISK_CHOICES:
            risk_count += 1
        elif key in CAUTIOUS_CHOICES:
            caution_count += 1

    if risk_count > caution_count:
        return ExplorationStyle.RISK_TAKING_PIONEER
    if caution_count > risk_count:
        return ExplorationStyle.METHODICAL_RESEARCHER
    return ExplorationStyle.ADAPTIVE_EXPLORER


def achievements(
    choices: Sequence[str],
    *,
    final_ending: str | None = None,
    completed: bool = False,
    decision_count: int | None = None,
) -> list[dict]:
    """Every rule that matches fires, in declaration order."""

    facts = PlaythroughFacts(
        choices=tuple(choices),
        final_ending=final_ending or "",
        completed=bool(completed),
        decision_count=len(choices) if decision_count is None else int(decision_count),
    )
    return [rule.as_dict() for rule in ACHIEVEMENT_RULES if rule.matches(facts)]


def statistics_snapshot(
    choices: Sequence[str],
    *,
    final_ending: str | None = None,
    completed: bool = False,
    decision_count: int | None = None,
) -> dict:
    level = risk_level(choices)
    return {
        "path_archetype": path_archetype(choices).value,
        "risk_level": level.value,
        "risk_descriptor": risk_descriptor(level),
        "exploration_style": exploration_style(choices).value,
        "achievements": achievements(
            choices,
            final_ending=final_ending,
            completed=completed,
            decision_count=decision_count,
        ),
    }
