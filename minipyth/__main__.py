"""Run a Minipyth program: python -m minipyth PROGRAM [INPUT]."""

from __future__ import annotations

import argparse
import logging
import sys

from minipyth.config import get_iteration_limit, get_log_level
from minipyth.debug_utils.pprint import format_value
from minipyth.errors import MinipythResourceError, MinipythStructuralError
from minipyth.interpreter import Interpreter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minipyth", description=__doc__)
    parser.add_argument("program", help="the program to run")
    parser.add_argument("input", nargs="?", help="input literal, e.g. 5 or [1, [2, 3]]")
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="read newline-separated input literals from standard input",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="log the parse tree")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if hasattr(sys, "set_int_max_str_digits"):
        # Integers are arbitrary precision on input and output
        sys.set_int_max_str_digits(0)

    try:
        interp = Interpreter(iteration_limit=get_iteration_limit())
    except ValueError as exc:
        print(f"ConfigError: {exc}", file=sys.stderr)
        return 2

    source = sys.stdin.read() if args.stdin else args.input
    try:
        result = interp.eval_input(args.program, source)
        output = format_value(result)
    except MinipythStructuralError as exc:
        print(f"StructuralError: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"InputError: {exc}", file=sys.stderr)
        return 2
    except (MinipythResourceError, MemoryError, RecursionError) as exc:
        print(f"ResourceError: {str(exc) or 'out of memory'}", file=sys.stderr)
        return 3

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
