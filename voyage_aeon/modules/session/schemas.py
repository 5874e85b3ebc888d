import uuid

from pydantic import BaseModel, ConfigDict, Field

from voyage_aeon.modules.story.schemas import ChoiceOut


class ChoiceRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    next_scene: str


class CurrentSceneOut(BaseModel):
    key: str
    name: str
    text: str
    is_terminal: bool
    choices: list[ChoiceOut] = Field(default_factory=list)


class ProgressOut(BaseModel):
    current: int
    max: int


class NavigationOut(BaseModel):
    can_go_back: bool
    can_go_forward: bool


class HistoryOut(BaseModel):
    entries: list[str] = Field(default_factory=list)
    cursor: int = -1


class TimingOut(BaseModel):
    started_at: str | None = None
    ended_at: str | None = None


class IntegrityWarningOut(BaseModel):
    kind: str
    key: str
    fallback: str


class SessionStateOut(BaseModel):
    id: uuid.UUID
    story_id: str
    status: str
    current_scene: CurrentSceneOut | None = None
    progress: ProgressOut
    navigation: NavigationOut
    history: HistoryOut
    final_ending: str | None = None
    choices: list[str] = Field(default_factory=list)
    timing: TimingOut
    warnings: list[IntegrityWarningOut] = Field(default_factory=list)


class AchievementOut(BaseModel):
    achievement_id: str
    title: str
    description: str


class StatisticsOut(BaseModel):
    path_archetype: str
    risk_level: str
    risk_descriptor: str
    exploration_style: str
    achievements: list[AchievementOut] = Field(default_factory=list)


class ChoiceDetailOut(BaseModel):
    scene_key: str
    scene_name: str
    choice_label: str
    description: str
    next_scene: str


class ChoiceLogOut(BaseModel):
    session_id: uuid.UUID
    choices: list[ChoiceDetailOut] = Field(default_factory=list)
