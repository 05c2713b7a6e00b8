"""Read local overrides and defaults from ``.env`` / ``.env.defaults``.

Lookup order for a key is ``.env`` first, then ``.env.defaults``; the
process environment always wins and is consulted by the caller.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict

REPO_ROOT = Path(__file__).resolve().parents[1]
ENV_FILES = (".env", ".env.defaults")


def parse_env_file(path: Path) -> Dict[str, str]:
    if not path.exists():
        return {}

    values: Dict[str, str] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] in ('"', "'") and value[-1] == value[0]:
            value = value[1:-1]
        values[key.strip()] = value
    return values


@lru_cache(maxsize=1)
def _load_env_defaults() -> Dict[str, str]:
    merged: Dict[str, str] = {}
    # Later files only fill gaps left by earlier ones
    for name in ENV_FILES:
        for key, value in parse_env_file(REPO_ROOT / name).items():
            merged.setdefault(key, value)
    return merged


def get_env_default(key: str) -> str | None:
    return _load_env_defaults().get(key)
