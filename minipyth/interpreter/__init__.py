from __future__ import annotations

import logging
from typing import Callable, Optional

from minipyth import Value
from minipyth.debug_utils.pprint import format_value, pprint_function
from minipyth.errors import MinipythResourceError
from minipyth.evaluation.evaluator import evaluate
from minipyth.reader.parser import parse
from minipyth.reader.value_reader import read_input
from minipyth.runtime_context import get_current_iteration_limit, set_iteration_limit
from minipyth.types.function import Composite, Function
from minipyth.types.value import validate_value

logger = logging.getLogger(__name__)

_unset = object()


class Interpreter:
    """
    Orchestrates resolving and evaluating Minipyth programs via a pluggable evaluator.
    Compiled trees are immutable and may be run any number of times.
    """

    def __init__(
        self,
        eval_fn: Callable[[Function, Value], Value] | None = None,
        *,
        iteration_limit: Optional[int] | object = _unset,  # unset: keep the environment setting
    ):
        self.eval_fn = eval_fn if eval_fn is not None else evaluate
        if iteration_limit is not _unset:
            set_iteration_limit(iteration_limit)

    @property
    def iteration_limit(self) -> Optional[int]:
        return get_current_iteration_limit()

    def compile(self, program: str) -> Composite:
        """Resolve binders and build the composition tree; raises MinipythStructuralError."""
        func = parse(program)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("parse tree:\n%s", pprint_function(func))
        return func

    def run(self, func: Function, value: Value = 0) -> Value:
        """Apply a compiled tree; values nested past the interpreter stack are a resource error."""
        validate_value(value, where="input")
        try:
            result = self.eval_fn(func, value)
        except RecursionError as exc:
            raise MinipythResourceError("value nesting exceeds the interpreter stack") from exc
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("evaluated to %s", format_value(result))
        return result

    def eval(self, program: str, value: Value = 0) -> Value:
        """Compile and run in one go; the tree is fully built before anything runs."""
        return self.run(self.compile(program), value)

    def eval_input(self, program: str, source: Optional[str]) -> Value:
        """Like eval, reading the initial value from newline-separated literals."""
        func = self.compile(program)
        return self.run(func, read_input(source))
