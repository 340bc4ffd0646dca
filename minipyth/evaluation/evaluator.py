"""Core evaluator for Minipyth composition trees.

Basic nodes dispatch to the operator table, HigherOrder nodes to the
higher-order form registry (handing over this evaluator), and Composite nodes
thread the value through their elements right-to-left. With `inverted=True`
the same walk runs the inverse: Composite elements left-to-right, basic
inverses, and higher-order forms over inverted arguments.
"""

from __future__ import annotations

from minipyth import Value
from minipyth.builtin.basic_builtin import apply_basic, invert_basic
from minipyth.evaluation.higher_forms import HIGHER_FORMS, INVERSE_FORMS
from minipyth.reader.opcodes import op_name
from minipyth.types.function import Basic, Composite, Function, HigherOrder

INVERSE = "i"


def evaluate(func: Function, value: Value, inverted: bool = False) -> Value:
    """Apply a composition tree (or its inverse) to a value."""
    match func:
        case Basic(op=op):
            if inverted:
                return invert_basic(op, value, op_name(op))
            return apply_basic(op, value)

        case Composite(funcs=funcs):
            for sub in (funcs if inverted else reversed(funcs)):
                value = evaluate(sub, value, inverted)
            return value

        case HigherOrder(op=op, args=args):
            if not inverted:
                return HIGHER_FORMS[op](args, value, evaluate)
            if op in INVERSE_FORMS:
                return INVERSE_FORMS[op](args, value, evaluate)
            inverted_args = tuple(HigherOrder(INVERSE, (arg,)) for arg in args)
            return HIGHER_FORMS[op](inverted_args, value, evaluate)

    raise TypeError(f"Not a composition tree node: {func!r}")
