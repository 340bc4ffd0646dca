from minipyth import EvaluatorFn, Value
from minipyth.types.function import Function


def inverse_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    (func,) = args
    return evaluate_fn(func, value, inverted=True)


def inverse_inverse_form(args: tuple[Function, ...], value: Value, evaluate_fn: EvaluatorFn) -> Value:
    # inverse(inverse(f)) is f
    (func,) = args
    return evaluate_fn(func, value)
