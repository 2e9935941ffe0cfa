from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso(value: datetime) -> str:
    """Serialize as sortable ISO-8601 UTC text, e.g. 2026-01-31T08:30:00.250Z."""
    return ensure_utc(value).isoformat().replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def elapsed_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between two instants, clamped at zero.

    A clock that went backwards between start and end (skew, manual edits)
    yields 0 rather than a negative duration.
    """
    seconds = (ensure_utc(end) - ensure_utc(start)).total_seconds()
    if seconds <= 0:
        return 0
    return int(seconds // 60)


def split_minutes(total_minutes: int) -> tuple[int, int]:
    return total_minutes // 60, total_minutes % 60
