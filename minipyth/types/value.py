"""Runtime value model for Minipyth.

Values are plain Python objects:

    - Integer -> int
    - List    -> tuple of values
    - Error   -> ErrorValue

`bool` never appears as a value; predicates return the ints 1 and 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from minipyth import Value


UNIMPLEMENTED = "unimplemented"
DOMAIN = "domain"
EMPTY = "empty"


@dataclass(frozen=True)
class ErrorValue:
    """A first-class error value; compares structurally like every other value."""

    kind: str
    source: Optional[str] = None
    payload: Value = None

    def __bool__(self) -> bool:
        return False


def make_error(kind: str, source: str | None = None, payload: Value = None) -> ErrorValue:
    return ErrorValue(kind, source, payload)


class ValueKind(str, Enum):
    INTEGER = "integer"
    LIST = "list"
    ERROR = "error"


def is_integer(value: Value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_list(value: Value) -> bool:
    return isinstance(value, tuple)


def is_error(value: Value) -> bool:
    return isinstance(value, ErrorValue)


def kind_of(value: Value) -> ValueKind:
    if is_integer(value):
        return ValueKind.INTEGER
    if is_list(value):
        return ValueKind.LIST
    if is_error(value):
        return ValueKind.ERROR
    raise TypeError(f"{type(value).__name__} is not a Minipyth value")


def is_truthy(value: Value) -> bool:
    """Zero, the empty list and every error are falsy."""
    if is_error(value):
        return False
    return bool(value)


def to_bool(flag: bool) -> int:
    return 1 if flag else 0


def to_list(value: Value) -> tuple:
    """Cast an Integer to a range list; lists are returned unchanged.

    Non-negative i becomes [0, i); negative i becomes the reverse of to_list(-i).
    """
    if is_list(value):
        return value
    if is_integer(value):
        if value < 0:
            return tuple(range(-value - 1, -1, -1))
        return tuple(range(value))
    raise TypeError(f"to_list is undefined for {value!r}")


def first_error(values) -> Optional[ErrorValue]:
    for item in values:
        if is_error(item):
            return item
    return None


def sort_key(value: Value) -> tuple:
    """Total order used by `order`: Integers < Lists < Errors.

    Integers compare by value, lists lexicographically by element keys and
    all errors compare equal.
    """
    if is_integer(value):
        return (0, value, ())
    if is_list(value):
        return (1, 0, tuple(sort_key(item) for item in value))
    return (1, 1, ())


def _trail_path(where: str, trail) -> str:
    indices = []
    while trail is not None:
        idx, trail = trail
        indices.append(idx)
    return where + "".join(f"[{idx}]" for idx in reversed(indices))


def validate_value(value: object, *, where: str = "value") -> None:
    """Reject Python objects outside the value model, naming the offending path."""
    seen: set[int] = set()
    pending = [(value, None)]
    while pending:
        item, trail = pending.pop()
        try:
            kind = kind_of(item)
        except TypeError:
            raise TypeError(
                f"{_trail_path(where, trail)} has unsupported runtime type {type(item).__name__}"
            ) from None
        # lists are immutable, so a shared sublist only needs one visit
        if kind is ValueKind.LIST and id(item) not in seen:
            seen.add(id(item))
            pending.extend((sub, (idx, trail)) for idx, sub in enumerate(item))
