from __future__ import annotations
import logging
import os
from typing import Optional

DEFAULT_PROMPT = "lispy> "
DEFAULT_LOG_LEVEL = "WARNING"


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return raw if raw else default


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_prompt() -> str:
    return str_from_env("LISPY_PROMPT", DEFAULT_PROMPT)


def get_log_level() -> int:
    name = str_from_env("LISPY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    return int_from_env("LISPY_RECURSION_LIMIT")
