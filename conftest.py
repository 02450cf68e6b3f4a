"""Root conftest: test settings must be in the environment before
``school_service.config`` is first imported."""
from __future__ import annotations

import os
from pathlib import Path

ENV_FILE = Path(__file__).resolve().parent / ".env.test"


def _load_env(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        key, sep, value = line.partition("=")
        if not sep or key.lstrip().startswith("#"):
            continue
        os.environ.setdefault(key.strip(), value.strip())


_load_env(ENV_FILE)
