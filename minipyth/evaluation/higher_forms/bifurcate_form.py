from minipyth import EvaluatorFn, Value
from minipyth.types.function import Function
from minipyth.types.value import is_error


def bifurcate_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    """[f(x), g(x)] over the same input; an error from either side is the result."""
    if is_error(value):
        return value
    left, right = args
    first = evaluate_fn(left, value)
    if is_error(first):
        return first
    second = evaluate_fn(right, value)
    if is_error(second):
        return second
    return (first, second)
