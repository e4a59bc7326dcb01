"""Process-wide UI preferences."""

from __future__ import annotations

from fetshub.models.base import CamelModel

DEFAULT_ACCENT_COLOR = "#E50914"


class AppSettings(CamelModel):
    """Persisted display preferences."""

    accent_color: str = DEFAULT_ACCENT_COLOR
    reduce_motion: bool = False
    enable_notifications: bool = True
