from __future__ import annotations
import logging
import os


# Defaults
DEFAULT_PROMPT = "swisp> "
DEFAULT_DECIMAL_PRECISION = 38
DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get('SWISP_PROMPT', DEFAULT_PROMPT)


def get_decimal_precision() -> int:
    raw = os.environ.get('SWISP_DECIMAL_PRECISION')
    if not raw:
        return DEFAULT_DECIMAL_PRECISION
    try:
        precision = int(raw.strip())
    except ValueError:
        raise ValueError(f"SWISP_DECIMAL_PRECISION must be an integer, got {raw!r}")
    if precision < 1:
        raise ValueError(f"SWISP_DECIMAL_PRECISION must be positive, got {precision}")
    return precision


def get_log_level() -> int:
    name = os.environ.get('SWISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level <name>" for unknown names
    return level if isinstance(level, int) else logging.WARNING
