"""Exceptions raised by comparators."""
from __future__ import annotations

from typing import Any


class UnsupportedComparisonError(TypeError):
    """Raised when natural ordering receives operands it has no rule for."""

    def __init__(self, left: Any, right: Any) -> None:
        self.left_type = type(left)
        self.right_type = type(right)
        super().__init__(
            f"Cannot compare {self.left_type.__name__!s} with {self.right_type.__name__!s} "
            "using natural order"
        )


__all__ = ["UnsupportedComparisonError"]
