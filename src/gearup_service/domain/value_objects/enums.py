from __future__ import annotations

from enum import StrEnum


class PostVisibility(StrEnum):
    DEFAULT = "default"
    PUBLIC = "public"
    PRIVATE = "private"
