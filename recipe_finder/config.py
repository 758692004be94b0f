from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppConfig:
    title: str = "Recipe Finder API"
    version: str = "1.0.0"
    session_secret: str = field(
        default_factory=lambda: os.getenv("SESSION_SECRET", "recipe-finder-secret")
    )
    session_max_age: int = field(
        default_factory=lambda: int(os.getenv("SESSION_MAX_AGE", str(24 * 60 * 60)))
    )
    seed_data: bool = field(default_factory=lambda: _env_bool("SEED_DATA", True))


DEFAULT_APP_CONFIG = AppConfig()
