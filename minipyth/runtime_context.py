from __future__ import annotations
from typing import Optional

from minipyth.config import get_iteration_limit

# NOTE: process-global, like the evaluator itself this is single-threaded.
_unset = object()
_iteration_limit: object = _unset


def set_iteration_limit(limit: Optional[int]) -> None:
    global _iteration_limit
    _iteration_limit = limit


def reset_iteration_limit() -> None:
    global _iteration_limit
    _iteration_limit = _unset


def get_current_iteration_limit() -> Optional[int]:
    if _iteration_limit is _unset:
        return get_iteration_limit()
    return _iteration_limit
