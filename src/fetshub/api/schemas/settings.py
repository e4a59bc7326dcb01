"""Settings API schemas."""

from __future__ import annotations

from fetshub.models.base import CamelModel


class SettingsUpdateRequest(CamelModel):
    """Partial update; omitted fields keep their value."""

    accent_color: str | None = None
    reduce_motion: bool | None = None
    enable_notifications: bool | None = None
