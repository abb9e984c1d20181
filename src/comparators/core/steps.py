"""Immutable building blocks evaluated by a ``Comparator``.

Each step is a frozen dataclass that is itself a three-way compare
function. A comparator stores an ordered tuple of steps and returns the
first non-zero result, so a then-by chain is data rather than nested
closures.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..config import DEFAULT_ORDERING, OrderingConfig
from ..utils import is_null
from .natural import compare_natural

CompareFunction = Callable[[Any, Any], Any]
KeyExtractor = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class NaturalStep:
    config: OrderingConfig = DEFAULT_ORDERING

    def __call__(self, a: Any, b: Any) -> Any:
        return compare_natural(a, b, self.config)


@dataclass(frozen=True, slots=True)
class FunctionStep:
    """Arbitrary compare function, applied verbatim."""

    function: CompareFunction

    def __call__(self, a: Any, b: Any) -> Any:
        return self.function(a, b)


@dataclass(frozen=True, slots=True)
class KeyStep:
    extractor: KeyExtractor
    key_comparator: CompareFunction

    def __call__(self, a: Any, b: Any) -> Any:
        return self.key_comparator(self.extractor(a), self.extractor(b))


@dataclass(frozen=True, slots=True)
class ReversedStep:
    inner: CompareFunction

    def __call__(self, a: Any, b: Any) -> Any:
        return self.inner(b, a)


@dataclass(frozen=True, slots=True)
class NullsFirstStep:
    inner: CompareFunction

    def __call__(self, a: Any, b: Any) -> Any:
        if is_null(a) and is_null(b):
            return 0
        if is_null(a):
            return -1
        if is_null(b):
            return 1
        return self.inner(a, b)


@dataclass(frozen=True, slots=True)
class NullsLastStep:
    inner: CompareFunction

    def __call__(self, a: Any, b: Any) -> Any:
        if is_null(a) and is_null(b):
            return 0
        if is_null(a):
            return 1
        if is_null(b):
            return -1
        return self.inner(a, b)


__all__ = [
    "CompareFunction",
    "KeyExtractor",
    "NaturalStep",
    "FunctionStep",
    "KeyStep",
    "ReversedStep",
    "NullsFirstStep",
    "NullsLastStep",
]
