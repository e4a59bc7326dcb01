"""Parsing helpers for user-supplied form values."""

from __future__ import annotations

import math
from datetime import UTC, datetime

from fetshub.models.base import now_millis


def parse_tech_stack(text: str | None) -> list[str]:
    """Split comma-separated tags, trimming and dropping empty segments.

    Order is preserved and duplicates are kept.
    """
    if not text:
        return []
    return [segment.strip() for segment in text.split(",") if segment.strip()]


def parse_timestamp(value: int | float | str | datetime | None) -> int:
    """Coerce a date input to epoch milliseconds, falling back to now."""
    if value is None or isinstance(value, bool):
        return now_millis()
    if isinstance(value, datetime):
        moment = value if value.tzinfo else value.replace(tzinfo=UTC)
        return int(moment.timestamp() * 1000)
    if isinstance(value, int | float):
        return int(value) if math.isfinite(value) else now_millis()

    text = value.strip()
    if not text:
        return now_millis()
    try:
        return parse_timestamp(float(text))
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return now_millis()
    return parse_timestamp(parsed)
