"""Composition tree nodes produced by the binder resolver.

The tree is pure data: no closures, no shared nodes, immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Basic:
    op: str


@dataclass(frozen=True)
class HigherOrder:
    op: str
    args: tuple["Function", ...]


@dataclass(frozen=True)
class Composite:
    """A run of functions behaving as one; applied right-to-left."""

    funcs: tuple["Function", ...] = ()


Function = Union[Basic, HigherOrder, Composite]

IDENTITY = Composite(())
