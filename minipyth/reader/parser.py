"""
  Minipyth binder resolver

Turns the flat token stream into a composition tree in one left-to-right
scan over a stack of pending entries:

    - completed functions (Basic / HigherOrder / Composite nodes)
    - _Pending: a higher-order token still missing arguments
    - _QuoteMark: the open quote, at most one at a time

Binders never reach the tree:

    - z  pops completed functions back to the nearest _Pending and installs
         them, as one Composite, as its next argument
    - q  opens a quote span, the next q closes it; the span is composed on
         its own and becomes a single opaque Composite
    - the unmatched quote of an odd-quote program (always the first one)
      opens directly after the earliest _Pending and closes at once

Whatever is left is composed by the general rule: each higher-order token
claims the next functions to its right, and the unclaimed functions form
the root Composite.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from minipyth.errors import MinipythStructuralError
from minipyth.reader.lexer import Token, lex
from minipyth.reader.opcodes import arity_of, op_name
from minipyth.types.function import Basic, Composite, Function, HigherOrder

logger = logging.getLogger(__name__)


class _Pending:
    __slots__ = ("op", "arity", "args", "pos")

    def __init__(self, op: str, pos: int):
        self.op = op
        self.arity = arity_of(op)
        self.args: list[Function] = []
        self.pos = pos

    @property
    def missing(self) -> int:
        return self.arity - len(self.args)

    def bind(self, func: Function) -> Union["_Pending", HigherOrder]:
        """Install the next argument; returns the finished node once all are bound."""
        self.args.append(func)
        if self.missing == 0:
            return HigherOrder(self.op, tuple(self.args))
        return self

    def __repr__(self):
        return f"_Pending({self.op!r}, bound={len(self.args)}/{self.arity})"


class _QuoteMark:
    __slots__ = ("pos",)

    def __init__(self, pos: int):
        self.pos = pos

    def __repr__(self):
        return f"_QuoteMark(at {self.pos})"


Entry = Union[Function, _Pending, _QuoteMark]


def compose(entries: Iterable[Entry], end: int) -> list[Function]:
    """General composition rule: every pending token claims the functions right of it.

    Returns the unclaimed functions in program order. A pending token that runs
    out of functions is a structural error.
    """
    funcs: list[Function] = []
    open_higher: list[_Pending] = []
    for entry in entries:
        if isinstance(entry, _Pending):
            open_higher.append(entry)
            continue
        if isinstance(entry, _QuoteMark):
            raise MinipythStructuralError("Unpaired quote", entry.pos)
        working: Function = entry
        while open_higher:
            bound = open_higher[-1].bind(working)
            if isinstance(bound, _Pending):
                break
            open_higher.pop()
            working = bound
        else:
            funcs.append(working)
    if open_higher:
        pending = open_higher[-1]
        raise MinipythStructuralError(
            f"'{op_name(pending.op)}' is missing {pending.missing} argument(s) before position {end}",
            pending.pos,
        )
    return funcs


class Resolver:
    """Single-use binder resolver over a lexed token list."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.stack: list[Entry] = []

    def resolve(self) -> Composite:
        for tok in self.tokens:
            if tok.kind == "basic":
                self.stack.append(Basic(tok.char))
            elif tok.kind == "higher":
                self.stack.append(_Pending(tok.char, tok.pos))
            elif tok.kind == "bind":
                self._bind_eager(tok)
            elif tok.kind == "quote":
                if self._open_quote_index() is None:
                    self.stack.append(_QuoteMark(tok.pos))
                else:
                    self._close_quote(tok)
            elif tok.kind == "solo_quote":
                self._open_solo_quote(tok)
                self._close_quote(tok)
            else:
                raise MinipythStructuralError(f"Unknown token kind {tok.kind!r}", tok.pos)
        end = self.tokens[-1].pos + 1 if self.tokens else 0
        return Composite(tuple(compose(self.stack, end)))

    # ----------------- Stack helpers -----------------
    def _push_bound(self, pending: _Pending, func: Function) -> None:
        self.stack.append(pending.bind(func))

    def _open_quote_index(self) -> int | None:
        for index in range(len(self.stack) - 1, -1, -1):
            if isinstance(self.stack[index], _QuoteMark):
                return index
        return None

    # ----------------- Eager bind -----------------
    def _bind_eager(self, tok: Token) -> None:
        group: list[Function] = []
        while True:
            if not self.stack:
                raise MinipythStructuralError(
                    "Eager bind found no unbound higher-order function", tok.pos
                )
            entry = self.stack.pop()
            if isinstance(entry, _QuoteMark):
                raise MinipythStructuralError("Eager bind reached an open quote", tok.pos)
            if isinstance(entry, _Pending):
                group.reverse()
                self._push_bound(entry, Composite(tuple(group)))
                return
            group.append(entry)

    # ----------------- Quotes -----------------
    def _open_solo_quote(self, tok: Token) -> None:
        for index, entry in enumerate(self.stack):
            if isinstance(entry, _Pending):
                self.stack.insert(index + 1, _QuoteMark(tok.pos))
                return
        raise MinipythStructuralError(
            "Unmatched quote has no preceding unbound higher-order function", tok.pos
        )

    def _close_quote(self, tok: Token) -> None:
        index = self._open_quote_index()
        span = self.stack[index + 1:]
        del self.stack[index:]
        func = Composite(tuple(compose(span, tok.pos)))

        top = self.stack[-1] if self.stack else None
        if isinstance(top, _Pending):
            self._push_bound(self.stack.pop(), func)
            return
        below = self.stack[-2] if len(self.stack) >= 2 else None
        if isinstance(below, _Pending) and below.missing == 2 and not isinstance(top, _QuoteMark):
            first = self.stack.pop()
            pending = self.stack.pop()
            pending.bind(first)
            self._push_bound(pending, func)
            return
        self.stack.append(func)


def resolve(tokens: list[Token]) -> Composite:
    return Resolver(tokens).resolve()


def parse(program: str) -> Composite:
    """Lex and resolve a program into its root Composite."""
    root = resolve(lex(program))
    logger.debug("resolved %r into %r", program, root)
    return root
