"""Cursor-based pagination helpers.

Cursor format: base64("<iso-timestamp>|<id>")
"""
from __future__ import annotations

import base64
from datetime import datetime

from school_service.application.exceptions import ValidationError


def encode_cursor(ts: datetime, row_id: str) -> str:
    raw = f"{ts.isoformat()}|{row_id}"
    return base64.urlsafe_b64encode(raw.encode()).decode().rstrip("=")


def decode_cursor(cursor: str) -> tuple[datetime, str]:
    # Restore base64 padding if it was stripped
    cursor += "=" * ((4 - len(cursor) % 4) % 4)
    try:
        raw = base64.urlsafe_b64decode(cursor.encode()).decode()
        ts_str, row_id = raw.split("|", 1)
        return datetime.fromisoformat(ts_str), row_id
    except ValueError as exc:
        raise ValidationError("Invalid cursor") from exc
