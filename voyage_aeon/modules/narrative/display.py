from __future__ import annotations

import re
from collections.abc import Iterator

from voyage_aeon.modules.story.schemas import StoryScene

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_WHITESPACE = re.compile(r"\s+")


def split_paragraphs(text: str) -> list[str]:
    paragraphs: list[str] = []
    for chunk in _PARAGRAPH_BREAK.split(text or ""):
        normalized = _WHITESPACE.sub(" ", chunk).strip()
        if normalized:
            paragraphs.append(normalized)
    return paragraphs


def iter_scene_events(
    scene_key: str,
    scene: StoryScene,
    *,
    ending_name: str | None = None,
) -> Iterator[tuple[str, dict]]:
    """Yield display events for one scene without touching any session state.

    Paragraphs come first, then a single ``choices`` event, or an ``ending`` event
    for terminal scenes. Pacing is left to the consumer.
    """

    paragraphs = split_paragraphs(scene.text)
    for index, paragraph in enumerate(paragraphs):
        yield "paragraph", {
            "scene_key": scene_key,
            "index": index,
            "total": len(paragraphs),
            "text": paragraph,
        }

    if scene.is_terminal:
        yield "ending", {"scene_key": scene_key, "ending_name": ending_name}
        return

    yield "choices", {
        "scene_key": scene_key,
        "choices": [{"label": choice.label, "next": choice.next} for choice in scene.choices],
    }
