from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from voyage_aeon.modules.story.schemas import StoryPack, StoryScene
from voyage_aeon.modules.story_domain.default_endings import UNKNOWN_ENDING_NAME


def _mapping_or_empty(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


class StoryGraph:
    """Read-only table of scenes keyed by scene id, plus the lookup tables that label them.

    Raw scene mappings are kept next to their typed form so that a graph built from
    unchecked data can still be inspected: scenes that fail the schema have a raw entry
    and no typed entry, and validation reports them as malformed instead of crashing.
    """

    def __init__(
        self,
        *,
        story_id: str,
        start_key: str,
        scenes: Mapping[str, Any],
        title: str = "",
        scene_names: Mapping[str, str] | None = None,
        ending_names: Mapping[str, str] | None = None,
        choice_descriptions: Mapping[str, str] | None = None,
    ) -> None:
        self.story_id = str(story_id)
        self.title = str(title or "")
        self.start_key = str(start_key)

        raw: dict[str, Any] = {}
        typed: dict[str, StoryScene] = {}
        for key, scene in scenes.items():
            raw[str(key)] = scene
            if isinstance(scene, StoryScene):
                typed[str(key)] = scene
                continue
            try:
                typed[str(key)] = StoryScene.model_validate(scene)
            except ValidationError:
                continue

        self._raw = MappingProxyType(raw)
        self._typed = MappingProxyType(typed)
        self._scene_names = MappingProxyType(dict(scene_names or {}))
        self._ending_names = MappingProxyType(dict(ending_names or {}))
        self._choice_descriptions = MappingProxyType(dict(choice_descriptions or {}))

    @classmethod
    def from_pack(cls, pack: StoryPack | Mapping[str, Any]) -> "StoryGraph":
        validated = pack if isinstance(pack, StoryPack) else StoryPack.model_validate(pack)
        return cls(
            story_id=validated.story_id,
            title=validated.title,
            start_key=validated.start_scene,
            scenes=validated.scenes,
            scene_names=validated.scene_names,
            ending_names=validated.ending_names,
            choice_descriptions=validated.choice_descriptions,
        )

    @classmethod
    def from_unchecked(cls, pack: Mapping[str, Any]) -> "StoryGraph":
        return cls(
            story_id=str(pack.get("story_id") or "unchecked"),
            title=str(pack.get("title") or ""),
            start_key=str(pack.get("start_scene") or ""),
            scenes=_mapping_or_empty(pack.get("scenes")),
            scene_names=_mapping_or_empty(pack.get("scene_names")),
            ending_names=_mapping_or_empty(pack.get("ending_names")),
            choice_descriptions=_mapping_or_empty(pack.get("choice_descriptions")),
        )

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._raw

    def __len__(self) -> int:
        return len(self._raw)

    def scene_keys(self) -> list[str]:
        return list(self._raw.keys())

    def get_scene(self, key: str) -> StoryScene | None:
        if not isinstance(key, str):
            return None
        return self._typed.get(key)

    def raw_scene(self, key: str) -> Any | None:
        if not isinstance(key, str):
            return None
        return self._raw.get(key)

    def is_terminal(self, key: str) -> bool:
        scene = self.get_scene(key)
        return scene is not None and scene.is_terminal

    def scene_name(self, key: str) -> str:
        return self._scene_names.get(key, key)

    def ending_name(self, key: str) -> tuple[str, bool]:
        name = self._ending_names.get(key)
        if name is None:
            return UNKNOWN_ENDING_NAME, False
        return name, True

    def choice_description(self, key: str) -> tuple[str, bool]:
        description = self._choice_descriptions.get(key)
        if description is None:
            return key, False
        return description, True

    def ending_names(self) -> dict[str, str]:
        return dict(self._ending_names)

    def reachable_from(self, start_keys: Iterable[str] | None = None) -> set[str]:
        starts = [self.start_key] if start_keys is None else list(start_keys)
        seen: set[str] = set()
        queue = deque(key for key in starts if key in self._typed)
        while queue:
            key = queue.popleft()
            if key in seen:
                continue
            seen.add(key)
            for target in self._typed[key].choice_targets:
                if target in self._typed and target not in seen:
                    queue.append(target)
        return seen

    def unreachable_scenes(self) -> list[str]:
        reachable = self.reachable_from()
        return sorted(key for key in self._raw if key not in reachable)

    def terminal_keys(self) -> list[str]:
        return [key for key, scene in self._typed.items() if scene.is_terminal]
