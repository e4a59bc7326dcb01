"""Shared pydantic base for catalog models."""

from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def now_millis() -> int:
    """Current instant as epoch milliseconds."""
    return int(time.time() * 1000)


class CamelModel(BaseModel):
    """Model exposed in camelCase, populated by either field name or alias."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
