from __future__ import annotations

import uuid


def new_id() -> str:
    """Primary keys are stored as UUID strings."""
    return str(uuid.uuid4())
