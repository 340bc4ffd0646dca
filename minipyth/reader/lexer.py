"""
  Minipyth lexer

Every character is one token. Classification comes from the opcode catalog:

    - basic functions      -> "basic"
    - higher-order funcs   -> "higher"
    - q                    -> "quote", or "solo_quote" for the unmatched one
    - z                    -> "bind"

When a program holds an odd number of quotes the FIRST quote is the
unmatched one; the resolver pairs it backward instead of forward.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from minipyth.errors import MinipythSyntaxError
from minipyth.reader.opcodes import EAGER_BIND, OPCODES, QUOTE, OpKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    kind: str
    char: str
    pos: int


def _classify(char: str, pos: int) -> str:
    info = OPCODES.get(char)
    if info is None:
        raise MinipythSyntaxError(f"Unknown character {char!r}", pos)
    if info.kind is OpKind.BASIC:
        return "basic"
    if info.kind is OpKind.HIGHER:
        return "higher"
    if char == QUOTE:
        return "quote"
    if char == EAGER_BIND:
        return "bind"
    raise MinipythSyntaxError(f"Unclassified binder {char!r}", pos)


def lex(program: str) -> list[Token]:
    """Tokenize a program; raises MinipythSyntaxError on characters outside the catalog."""
    tokens = [Token(_classify(char, pos), char, pos) for pos, char in enumerate(program)]
    quotes = [index for index, tok in enumerate(tokens) if tok.kind == "quote"]
    if len(quotes) % 2 == 1:
        solo = tokens[quotes[0]]
        tokens[quotes[0]] = Token("solo_quote", solo.char, solo.pos)
    logger.debug("lexed %d tokens (%d quotes) from %r", len(tokens), len(quotes), program)
    return tokens
