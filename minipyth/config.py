from __future__ import annotations
import os
from typing import Optional


_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    value = int(raw.strip())
    if value <= 0:
        raise ValueError(f'{var} must be a positive integer, got {raw!r}')
    return value


def get_iteration_limit() -> Optional[int]:
    # None means repeat/while/fixed-point may run until memory runs out
    return int_from_env('MINIPYTH_ITERATION_LIMIT')


def get_log_level() -> str:
    return os.environ.get('MINIPYTH_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL
