from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

from voyage_aeon.utils.time import isoformat_or_none, utc_now_aware


def test_utc_now_aware_returns_aware_utc() -> None:
    now = utc_now_aware()
    assert now.tzinfo is not None
    assert now.utcoffset() == timezone.utc.utcoffset(now)


def test_isoformat_or_none_converts_to_utc() -> None:
    assert isoformat_or_none(None) is None
    local = datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert isoformat_or_none(local) == "2024-01-01T12:00:00+00:00"


def test_no_datetime_utcnow_in_package_code() -> None:
    banned = "datetime.utcnow("
    hits: list[str] = []
    for path in Path("voyage_aeon").rglob("*.py"):
        text = path.read_text(encoding="utf-8")
        if banned in text:
            hits.append(str(path))

    assert hits == []
