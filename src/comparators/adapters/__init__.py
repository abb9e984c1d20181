"""Protocol definitions for values that take part in natural ordering."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Comparable(Protocol):
    """Minimal interface for objects that define their own ordering.

    ``compare_to`` returns a negative number when ``self`` orders before
    ``other``, zero when they are equivalent and a positive number otherwise.
    """

    def compare_to(self, other: Any) -> int:
        ...


__all__ = ["Comparable"]
