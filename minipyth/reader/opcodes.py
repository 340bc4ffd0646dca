from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OpKind(str, Enum):
    BASIC = "basic"
    HIGHER = "higher"
    BINDER = "binder"


@dataclass(frozen=True)
class OpInfo:
    char: str
    name: str
    kind: OpKind
    arity: int = 0


QUOTE = "q"
EAGER_BIND = "z"

_CATALOG = (
    OpInfo("a", "all-pairs", OpKind.BASIC),
    OpInfo("b", "bifurcate", OpKind.HIGHER, 2),
    OpInfo("c", "combine", OpKind.BASIC),
    OpInfo("d", "deduplicate", OpKind.BASIC),
    OpInfo("e", "equal", OpKind.BASIC),
    OpInfo("f", "filter", OpKind.HIGHER, 1),
    OpInfo("h", "head", OpKind.BASIC),
    OpInfo("i", "inverse", OpKind.HIGHER, 1),
    OpInfo("l", "length", OpKind.BASIC),
    OpInfo("m", "map", OpKind.HIGHER, 1),
    OpInfo("n", "negate", OpKind.BASIC),
    OpInfo("o", "order", OpKind.HIGHER, 1),
    OpInfo("p", "product", OpKind.BASIC),
    OpInfo(QUOTE, "quote", OpKind.BINDER),
    OpInfo("r", "repeat", OpKind.HIGHER, 1),
    OpInfo("s", "sum", OpKind.BASIC),
    OpInfo("t", "tail", OpKind.BASIC),
    OpInfo("w", "while", OpKind.HIGHER, 2),
    OpInfo("x", "fixed-point", OpKind.HIGHER, 1),
    OpInfo("y", "power-set", OpKind.BASIC),
    OpInfo(EAGER_BIND, "eager-bind", OpKind.BINDER),
)

OPCODES: dict[str, OpInfo] = {info.char: info for info in _CATALOG}


def op_name(char: str) -> str:
    return OPCODES[char].name


def arity_of(char: str) -> int:
    return OPCODES[char].arity
