from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_INT_BITS = 64
_DEFAULT_PROMPT = "prompt> "
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 2:
        raise ValueError(f"{var} must be at least 2, got {value}")
    return value


def get_int_bits() -> int:
    return int_from_env('GUCI_INT_BITS', _DEFAULT_INT_BITS)


def get_int_range() -> tuple[int, int]:
    """Inclusive (min, max) bounds of a Number."""
    bits = get_int_bits()
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def get_prompt() -> str:
    return os.environ.get('GUCI_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get('GUCI_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
