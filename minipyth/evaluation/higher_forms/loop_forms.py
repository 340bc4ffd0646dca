"""Iterative higher-order forms: repeat, while, fixed-point.

All three collect the visited values into a List. fixed-point and while treat
an Error as a stop signal and absorb it; repeat has no stop condition besides
its count, so an Error produced along the way becomes the result.

The number of steps is capped by the runtime iteration limit (unbounded by
default); running past it raises MinipythResourceError rather than returning
a truncated list.
"""

from __future__ import annotations

import logging
from typing import Optional

from minipyth import EvaluatorFn, Value
from minipyth.errors import MinipythResourceError
from minipyth.runtime_context import get_current_iteration_limit
from minipyth.types.function import Function
from minipyth.types.value import DOMAIN, is_error, is_integer, is_list, is_truthy, make_error

logger = logging.getLogger(__name__)


class StepGuard:
    """Counts loop steps against the iteration limit."""

    def __init__(self, form: str, limit: Optional[int]):
        self.form = form
        self.limit = limit
        self.steps = 0

    def step(self) -> None:
        self.steps += 1
        if self.limit is not None and self.steps > self.limit:
            raise MinipythResourceError(
                f"{self.form} exceeded the iteration limit of {self.limit} steps"
            )


def _split_repeat_input(value: Value) -> tuple[Value, Value]:
    if is_list(value) and len(value) == 2:
        return value[0], value[1]
    return value, value


def repeat_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    """Apply f n times from start: [n, start] -> [start, f(start), ..., f^n(start)]."""
    if is_error(value):
        return value
    (func,) = args
    times, current = _split_repeat_input(value)
    if not is_integer(times) or times < 0:
        return make_error(DOMAIN, "repeat", times)
    guard = StepGuard("repeat", get_current_iteration_limit())
    sequence = [current]
    done = 0
    while done < times:
        guard.step()
        current = evaluate_fn(func, current)
        if is_error(current):
            logger.debug("repeat stopped by error after %d of %d steps", done, times)
            return current
        sequence.append(current)
        done += 1
    return tuple(sequence)


def while_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    """Step with f while cond holds; returns start plus every accepted value."""
    if is_error(value):
        return ()
    cond, func = args
    guard = StepGuard("while", get_current_iteration_limit())
    sequence = [value]
    current = value
    while is_truthy(evaluate_fn(cond, current)):
        guard.step()
        current = evaluate_fn(func, current)
        if is_error(current):
            logger.debug("while absorbed %r after %d steps", current, guard.steps)
            break
        sequence.append(current)
    return tuple(sequence)


def fixed_point_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    """Apply f until a value repeats (it is recorded once more) or f yields an Error."""
    if is_error(value):
        return ()
    (func,) = args
    guard = StepGuard("fixed-point", get_current_iteration_limit())
    seen = {value}
    sequence = [value]
    current = value
    while True:
        guard.step()
        current = evaluate_fn(func, current)
        if is_error(current):
            logger.debug("fixed-point absorbed %r after %d steps", current, guard.steps)
            break
        sequence.append(current)
        if current in seen:
            logger.debug("fixed-point closed a cycle after %d steps", guard.steps)
            break
        seen.add(current)
    return tuple(sequence)
