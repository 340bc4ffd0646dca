"""Basic (arity-1) operators and their inverses.

Each operator maps one value to one value and dispatches on the value kind.
Error inputs never reach these functions: `apply_basic` and `invert_basic`
hand them back unchanged. Combinations with no defined meaning produce an
`unimplemented` error value instead of raising.
"""
from __future__ import annotations

import itertools
from typing import Callable

from minipyth import Value
from minipyth.builtin.arith import (
    binary_digits,
    from_digits,
    is_prime,
    power_of_two,
    prime_factors,
    trunc_divmod,
)
from minipyth.types.value import (
    DOMAIN,
    EMPTY,
    UNIMPLEMENTED,
    first_error,
    is_error,
    is_integer,
    is_list,
    make_error,
    to_bool,
    to_list,
)


BasicFn = Callable[[Value], Value]


def _unimplemented(name: str, value: Value) -> Value:
    return make_error(UNIMPLEMENTED, name, value)


def _all_integers(items: tuple) -> bool:
    return all(is_integer(item) for item in items)


# -------------------------------
# Arithmetic and list access
# -------------------------------
def head(value: Value) -> Value:
    """Increment an Integer; first element of a List."""
    if is_integer(value):
        return value + 1
    if not value:
        return make_error(EMPTY, "head", value)
    return value[0]


def tail(value: Value) -> Value:
    """Decrement an Integer; drop the first element of a List."""
    if is_integer(value):
        return value - 1
    return value[1:]


def sum_(value: Value) -> Value:
    """Logical not of an Integer; sum of an Integer List, otherwise flatten one level."""
    if is_integer(value):
        return to_bool(value == 0)
    if _all_integers(value):
        return sum(value)
    flattened: list[Value] = []
    for item in value:
        if is_list(item):
            flattened.extend(item)
        else:
            flattened.append(item)
    return tuple(flattened)


def product(value: Value) -> Value:
    """Prime factors of an Integer; product of an Integer List, otherwise Cartesian product."""
    if is_integer(value):
        return tuple(prime_factors(value))
    if _all_integers(value):
        result = 1
        for item in value:
            result *= item
        return result
    err = first_error(value)
    if err is not None:
        return err
    return tuple(itertools.product(*(to_list(item) for item in value)))


def power_set(value: Value) -> Value:
    """2**i for an Integer; every sublist of a List, in binary counting order."""
    if is_integer(value):
        if value < 0:
            return make_error(DOMAIN, "power-set", value)
        return power_of_two(value)
    return tuple(
        tuple(item for index, item in enumerate(value) if mask >> index & 1)
        for mask in range(power_of_two(len(value)))
    )


def length(value: Value) -> Value:
    """Length of a List; binary digits of an Integer."""
    if is_integer(value):
        return tuple(binary_digits(value))
    return len(value)


def negate(value: Value) -> Value:
    if is_integer(value):
        return -value
    return value[::-1]


# -------------------------------
# Structural operators
# -------------------------------
def equal(value: Value) -> Value:
    """1 if every element equals the last one (vacuously true for []), else 0."""
    if is_integer(value):
        return _unimplemented("equal", value)
    if not value:
        return 1
    last = value[-1]
    return to_bool(all(item == last for item in value[:-1]))


def combine(value: Value) -> Value:
    """Transpose a List of Lists; bare Integers only contribute to the first row."""
    if is_integer(value):
        return _unimplemented("combine", value)
    err = first_error(value)
    if err is not None:
        return err
    if not value:
        return ()
    longest = max(len(item) if is_list(item) else 1 for item in value)
    rows = []
    for index in range(longest):
        row = []
        for item in value:
            if is_list(item):
                if index < len(item):
                    row.append(item[index])
            elif index == 0:
                row.append(item)
        rows.append(tuple(row))
    return tuple(rows)


def all_pairs(value: Value) -> Value:
    """Pair up elements; see the dispatch rules in the docs for the List cases."""
    if is_integer(value):
        return tuple((value, item) for item in to_list(value))
    err = first_error(value)
    if err is not None:
        return err
    if len(value) >= 2 and any(is_list(item) for item in value[1:]):
        first = value[0]
        groups = [tuple((first, item) for item in to_list(rest)) for rest in value[1:]]
    elif len(value) >= 2 and is_list(value[0]):
        second = value[1]
        rest = (value[0],) + value[2:]
        groups = [tuple((item, second) for item in to_list(other)) for other in rest]
    else:
        return tuple((value, item) for item in value)
    if len(groups) == 1:
        return groups[0]
    return tuple(groups)


def deduplicate(value: Value) -> Value:
    """Keep the first occurrence of each distinct element."""
    if is_integer(value):
        return _unimplemented("deduplicate", value)
    seen = set()
    unique = []
    for item in value:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return tuple(unique)


# -------------------------------
# Inverses
# -------------------------------
def head_inverse(value: Value) -> Value:
    """Decrement an Integer; last element of a List."""
    if is_integer(value):
        return value - 1
    if not value:
        return make_error(EMPTY, "inverse head", value)
    return value[-1]


def tail_inverse(value: Value) -> Value:
    if is_integer(value):
        return value + 1
    return value[:-1]


def sum_inverse(value: Value) -> Value:
    return (value,)


def product_inverse(value: Value) -> Value:
    """Primality test of an Integer; truncating divmod of an Integer pair."""
    if is_integer(value):
        return to_bool(is_prime(value))
    if len(value) == 2 and _all_integers(value):
        numerator, denominator = value
        if denominator == 0:
            return make_error(DOMAIN, "inverse product", value)
        return trunc_divmod(numerator, denominator)
    return _unimplemented("inverse product", value)


def length_inverse(value: Value) -> Value:
    """Read a List of Integers as binary digits."""
    if is_list(value) and _all_integers(value):
        return from_digits(value)
    return _unimplemented("inverse length", value)


BASIC_FUNCTIONS: dict[str, BasicFn] = {
    "a": all_pairs,
    "c": combine,
    "d": deduplicate,
    "e": equal,
    "h": head,
    "l": length,
    "n": negate,
    "p": product,
    "s": sum_,
    "t": tail,
    "y": power_set,
}

INVERSE_FUNCTIONS: dict[str, BasicFn] = {
    "h": head_inverse,
    "t": tail_inverse,
    "s": sum_inverse,
    "p": product_inverse,
    "l": length_inverse,
    "n": negate,
}


def apply_basic(op: str, value: Value) -> Value:
    if is_error(value):
        return value
    return BASIC_FUNCTIONS[op](value)


def invert_basic(op: str, value: Value, name: str | None = None) -> Value:
    if is_error(value):
        return value
    fn = INVERSE_FUNCTIONS.get(op)
    if fn is None:
        return _unimplemented(f"inverse {name or op}", value)
    return fn(value)
