"""List-shaped higher-order forms: map, filter, order.

Each casts its input with to_list first; an Error input is returned as-is.
"""

from __future__ import annotations

from minipyth import EvaluatorFn, Value
from minipyth.types.function import Function
from minipyth.types.value import first_error, is_error, is_truthy, sort_key, to_list


def map_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    """Apply f to every element; the first error among the results wins."""
    if is_error(value):
        return value
    (func,) = args
    results = tuple(evaluate_fn(func, item) for item in to_list(value))
    err = first_error(results)
    return results if err is None else err


def filter_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    """Keep the elements whose image under f is truthy (errors count as falsy)."""
    if is_error(value):
        return value
    (func,) = args
    return tuple(item for item in to_list(value) if is_truthy(evaluate_fn(func, item)))


def _order_permutation(func: Function, items: tuple, evaluate_fn: EvaluatorFn) -> list[int]:
    keys = [sort_key(evaluate_fn(func, item)) for item in items]
    return sorted(range(len(items)), key=keys.__getitem__)


def order_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    """Stable sort by the image of each element under f."""
    if is_error(value):
        return value
    (func,) = args
    items = to_list(value)
    return tuple(items[index] for index in _order_permutation(func, items, evaluate_fn))


def order_inverse_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    """Apply the inverse of the permutation that order(f) would apply."""
    if is_error(value):
        return value
    (func,) = args
    items = to_list(value)
    permutation = _order_permutation(func, items, evaluate_fn)
    ranks = [0] * len(items)
    for rank, index in enumerate(permutation):
        ranks[index] = rank
    return tuple(items[rank] for rank in ranks)
