# jsonfilter/config.py
# Environment-driven settings. Values come from the process environment,
# optionally seeded from a .env file.

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in ("true", "1", "yes"):
        return True
    if raw in ("false", "0", "no"):
        return False
    raise RuntimeError(f"{name} must be true or false, got {raw!r}")


def _env_depth(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        depth = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if depth < 1:
        raise RuntimeError(f"{name} must be at least 1, got {depth}")
    return depth


@dataclass(frozen=True)
class Settings:
    max_depth: Optional[int] = None  # None = unbounded nesting
    short_circuit: bool = True
    validate_schema: bool = True
    rules_file: Path = Path("config/rules.yaml")


DEFAULT_SETTINGS = Settings()


def load_settings(*, dotenv: bool = True) -> Settings:
    """
    Build Settings from JSONFILTER_* environment variables.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        max_depth=_env_depth("JSONFILTER_MAX_DEPTH"),
        short_circuit=_env_bool("JSONFILTER_SHORT_CIRCUIT", True),
        validate_schema=_env_bool("JSONFILTER_VALIDATE_SCHEMA", True),
        rules_file=Path(os.getenv("JSONFILTER_RULES_FILE", "config/rules.yaml")),
    )
