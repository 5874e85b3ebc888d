from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class StoryChoice(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str = Field(min_length=1)
    next: str = Field(min_length=1)


class StoryScene(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str = Field(min_length=1)
    choices: tuple[StoryChoice, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return len(self.choices) == 0

    @property
    def choice_targets(self) -> list[str]:
        return [choice.next for choice in self.choices]

    def choice_for(self, next_key: str) -> StoryChoice | None:
        for choice in self.choices:
            if choice.next == next_key:
                return choice
        return None


class StoryPack(BaseModel):
    model_config = ConfigDict(extra="forbid")

    story_id: str = Field(min_length=1)
    title: str = ""
    start_scene: str = Field(min_length=1)
    scenes: dict[str, StoryScene] = Field(min_length=1)
    scene_names: dict[str, str] = Field(default_factory=dict)
    ending_names: dict[str, str] = Field(default_factory=dict)
    choice_descriptions: dict[str, str] = Field(default_factory=dict)

    @field_validator("scenes")
    @classmethod
    def validate_scene_keys(cls, scenes: dict[str, StoryScene]) -> dict[str, StoryScene]:
        for key in scenes:
            if not str(key).strip():
                raise ValueError("scene keys must be non-empty")
        return scenes

    @model_validator(mode="after")
    def validate_references(self):
        if self.start_scene not in self.scenes:
            raise ValueError(f"start_scene '{self.start_scene}' is not a scene")
        for key, scene in self.scenes.items():
            for choice in scene.choices:
                if choice.next not in self.scenes:
                    raise ValueError(f"scene '{key}' offers dangling target '{choice.next}'")
        return self


class ChoiceOut(BaseModel):
    label: str
    next: str


class SceneOut(BaseModel):
    key: str
    name: str
    text: str
    is_terminal: bool
    choices: list[ChoiceOut] = Field(default_factory=list)


class StorySummaryOut(BaseModel):
    story_id: str
    title: str
    start_scene: str
    scene_count: int
    terminal_scene_count: int
    unreachable_scenes: list[str] = Field(default_factory=list)


class StoryDiagnosticsOut(BaseModel):
    story_id: str
    ok: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
