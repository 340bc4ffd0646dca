"""
  Value literal reader (input adapter)

Literals:
    - integers   -> int, optional leading '-'
    - [a, b, c]  -> tuple, arbitrarily nested, trailing commas tolerated
    - blank      -> () (the empty list)

read_input applies the line framing: no input at all reads as 0, a single
line reads as its own value (a bare Integer for a numeric line) and several
lines read as the List of their values.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from minipyth import Value

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<int>-?\d+)"
    r"|(?P<lbrack>\[)"
    r"|(?P<rbrack>\])"
    r"|(?P<comma>,)"
    r")"
)


def lex_literal(text: str) -> Iterator[tuple[str, str]]:
    pos = 0
    n = len(text)
    while pos < n:
        if text[pos:].strip() == "":
            return
        m = TOKEN_RE.match(text, pos)
        if not m or m.end() == pos:
            raise ValueError(f"Unexpected char at {pos}: {text[pos:].lstrip()[:1]!r}")
        pos = m.end()
        for name in TOKEN_RE.groupindex:
            if m.group(name):
                yield name, m.group(name)
                break


class LiteralStream:
    def __init__(self, text: str):
        self.tokens = list(lex_literal(text))
        self.index = 0

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None, None

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        tok = self.peek()
        self.index += 1
        return tok

    def parse_value(self) -> Value:
        tok_type, tok_val = self.advance()
        if tok_type == "int":
            return int(tok_val)
        if tok_type == "lbrack":
            items = []
            while True:
                kind, _ = self.peek()
                if kind is None:
                    raise ValueError("Unmatched '['")
                if kind == "rbrack":
                    self.advance()
                    return tuple(items)
                if kind == "comma":
                    self.advance()
                    continue
                items.append(self.parse_value())
        raise ValueError(f"Unexpected token: {tok_type} {tok_val}")


def read_value(text: str) -> Value:
    """Read one literal; a blank literal is the empty list, `1, 2` reads as [1, 2]."""
    if "," in text and not text.lstrip().startswith("["):
        text = f"[{text}]"
    stream = LiteralStream(text)
    if stream.peek()[0] is None:
        return ()
    value = stream.parse_value()
    if stream.peek()[0] is not None:
        raise ValueError(f"Trailing input after literal: {text!r}")
    return value


def read_input(source: Optional[str]) -> Value:
    """Frame newline-separated literals into the program's initial value."""
    if source is None:
        return 0
    values = [read_value(line) for line in source.splitlines() if line.strip()]
    if len(values) == 1:
        return values[0]
    return tuple(values)
