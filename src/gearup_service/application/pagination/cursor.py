"""Opaque keyset pagination cursors.

Token format: URL-safe base64 (padding stripped) over the compact UTF-8 JSON
object ``{"created_at": "<iso-8601>", "id": "<uuid>"}``, keys in that order.
Changing the format invalidates every cursor already handed out.
"""
from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from gearup_service.application.exceptions import InvalidCursorError


@dataclass(frozen=True, slots=True)
class Cursor:
    created_at: datetime
    id: UUID


def as_utc(ts: datetime) -> datetime:
    """Treat naive timestamps as UTC; leave aware ones untouched."""
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


class _CursorPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    created_at: datetime
    id: UUID

    @field_validator("created_at")
    @classmethod
    def _representable_in_utc(cls, value: datetime) -> datetime:
        # Offsets near datetime.min/max push the UTC instant out of range.
        try:
            as_utc(value).astimezone(timezone.utc)
        except OverflowError as exc:
            raise ValueError("created_at is out of range") from exc
        return value


def encode_cursor(cursor: Cursor) -> str:
    raw = json.dumps(
        {"created_at": cursor.created_at.isoformat(), "id": str(cursor.id)},
        separators=(",", ":"),
    )
    token = base64.urlsafe_b64encode(raw.encode()).decode()
    return token.rstrip("=")


def decode_cursor(token: str | None) -> Cursor:
    """Decode a client-supplied token, raising InvalidCursorError on any defect."""
    if not token:
        raise InvalidCursorError("Cursor is empty")

    # Restore base64 padding if it was stripped
    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.b64decode(padded, altchars=b"-_", validate=True)
        payload = _CursorPayload.model_validate_json(raw)
    except (binascii.Error, ValueError, PydanticValidationError) as exc:
        raise InvalidCursorError("Invalid cursor") from exc
    return Cursor(created_at=payload.created_at, id=payload.id)


def try_decode_cursor(token: str | None) -> Cursor | None:
    """Decode a token; ``None`` means it was empty or malformed."""
    try:
        return decode_cursor(token)
    except InvalidCursorError:
        return None
