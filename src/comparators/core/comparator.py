"""Composable three-way comparators with natural, keyed and chained ordering."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Optional

from ..config import DEFAULT_ORDERING, OrderingConfig
from ..utils import key_reader
from .steps import (
    CompareFunction,
    FunctionStep,
    KeyExtractor,
    KeyStep,
    NaturalStep,
    NullsFirstStep,
    NullsLastStep,
    ReversedStep,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Comparator:
    """An immutable compare function ``(a, b) -> int``.

    Calling a comparator evaluates its steps in order and returns the first
    non-zero result. Every composition method returns a new comparator and
    leaves this one untouched.

    Usage:
        people.sort(
            key=comparing("last_name")
            .then_comparing(lambda p: p.age, reverse_order())
            .nulls_last()
            .as_key()
        )
    """

    steps: tuple[CompareFunction, ...]

    def __call__(self, a: Any, b: Any) -> Any:
        for step in self.steps:
            result = step(a, b)
            if result != 0:
                return result
        return 0

    def then_comparing(
        self,
        comparator_or_key: Any,
        key_comparator: Optional[CompareFunction] = None,
    ) -> "Comparator":
        """Break ties with a further comparison.

        Accepts a ``Comparator``, a key extractor (compared by natural order),
        a key name, or a key extractor/name together with the comparator to
        apply to the extracted keys. Plain two-argument functions must be
        wrapped with ``of`` to be used as comparators.
        """
        if key_comparator is not None:
            return self.then_comparing_by(_as_extractor(comparator_or_key), key_comparator)
        if isinstance(comparator_or_key, Comparator):
            logger.debug("Chaining comparator with %d step(s)", len(comparator_or_key.steps))
            return Comparator(self.steps + comparator_or_key.steps)
        return self.then_comparing_by(_as_extractor(comparator_or_key))

    def then_comparing_by(
        self, extractor: KeyExtractor, key_comparator: Optional[CompareFunction] = None
    ) -> "Comparator":
        step = KeyStep(extractor, key_comparator if key_comparator is not None else natural_order())
        logger.debug("Chaining key step %r", step)
        return Comparator(self.steps + (step,))

    def then_comparing_key(
        self, name: Any, key_comparator: Optional[CompareFunction] = None
    ) -> "Comparator":
        return self.then_comparing_by(key_reader(name), key_comparator)

    def reversed(self) -> "Comparator":
        step = self._as_step()
        if isinstance(step, ReversedStep):
            inner = step.inner
            return inner if isinstance(inner, Comparator) else Comparator((inner,))
        return Comparator((ReversedStep(step),))

    def nulls_first(self) -> "Comparator":
        return Comparator((NullsFirstStep(self._as_step()),))

    def nulls_last(self) -> "Comparator":
        return Comparator((NullsLastStep(self._as_step()),))

    def as_key(self) -> Callable[[Any], Any]:
        """Return a key wrapper for ``sorted``, ``list.sort``, ``min`` and ``max``."""
        return cmp_to_key(self)

    def _as_step(self) -> CompareFunction:
        if len(self.steps) == 1:
            return self.steps[0]
        return self


def natural_order(config: Optional[OrderingConfig] = None) -> Comparator:
    return Comparator((NaturalStep(config or DEFAULT_ORDERING),))


def reverse_order(config: Optional[OrderingConfig] = None) -> Comparator:
    return Comparator((ReversedStep(NaturalStep(config or DEFAULT_ORDERING)),))


def of(function: CompareFunction) -> Comparator:
    """Wrap an arbitrary compare function without adding any behaviour."""
    return Comparator((FunctionStep(function),))


def comparing(
    key_or_extractor: Any, key_comparator: Optional[CompareFunction] = None
) -> Comparator:
    """Compare entities by a projected key.

    ``key_or_extractor`` is either a callable or a key name read off each
    entity (mapping key, attribute or sequence index). Keys are compared with
    ``key_comparator``, natural order by default.
    """
    return comparing_by(_as_extractor(key_or_extractor), key_comparator)


def comparing_by(
    extractor: KeyExtractor, key_comparator: Optional[CompareFunction] = None
) -> Comparator:
    return Comparator(
        (KeyStep(extractor, key_comparator if key_comparator is not None else natural_order()),)
    )


def comparing_key(name: Any, key_comparator: Optional[CompareFunction] = None) -> Comparator:
    return comparing_by(key_reader(name), key_comparator)


def _as_extractor(key_or_extractor: Any) -> KeyExtractor:
    if callable(key_or_extractor):
        return key_or_extractor
    return key_reader(key_or_extractor)


__all__ = [
    "Comparator",
    "natural_order",
    "reverse_order",
    "of",
    "comparing",
    "comparing_by",
    "comparing_key",
]
