from __future__ import annotations

from dataclasses import dataclass, field

from voyage_aeon.modules.story.validation import ValidationKind


@dataclass(frozen=True, slots=True)
class HistoryMove:
    ok: bool
    kind: ValidationKind
    scene_key: str | None = None

    @property
    def message(self) -> str:
        if self.ok:
            return "ok"
        if self.kind == ValidationKind.AT_START:
            return "already at the first visited scene"
        return "already at the latest visited scene"


@dataclass(slots=True)
class NavigationHistory:
    """Back/forward stack over visited scenes with browser-style branch overwrite.

    The cursor stays in ``[-1, len(entries) - 1]`` and is ``-1`` only while empty.
    """

    entries: list[str] = field(default_factory=list)
    cursor: int = -1

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def current(self) -> str | None:
        if self.cursor < 0:
            return None
        return self.entries[self.cursor]

    def clear(self) -> None:
        self.entries = []
        self.cursor = -1

    def append(self, key: str) -> None:
        del self.entries[self.cursor + 1 :]
        self.entries.append(key)
        self.cursor = len(self.entries) - 1

    def go_back(self) -> HistoryMove:
        if self.cursor <= 0:
            return HistoryMove(ok=False, kind=ValidationKind.AT_START)
        self.cursor -= 1
        return HistoryMove(ok=True, kind=ValidationKind.OK, scene_key=self.entries[self.cursor])

    def go_forward(self) -> HistoryMove:
        if self.cursor >= len(self.entries) - 1:
            return HistoryMove(ok=False, kind=ValidationKind.AT_END)
        self.cursor += 1
        return HistoryMove(ok=True, kind=ValidationKind.OK, scene_key=self.entries[self.cursor])

    def can_go_back(self) -> bool:
        return self.cursor > 0

    def has_forward_entries(self) -> bool:
        return self.cursor < len(self.entries) - 1

    def snapshot(self) -> dict:
        return {"entries": list(self.entries), "cursor": self.cursor}
