"""Comparator construction and composition building blocks."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "Comparator",
    "natural_order",
    "reverse_order",
    "of",
    "comparing",
    "comparing_by",
    "comparing_key",
    "compare_natural",
    "compare_strings",
    "NaturalStep",
    "FunctionStep",
    "KeyStep",
    "ReversedStep",
    "NullsFirstStep",
    "NullsLastStep",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in {
        "Comparator",
        "natural_order",
        "reverse_order",
        "of",
        "comparing",
        "comparing_by",
        "comparing_key",
    }:
        module = import_module(".comparator", __name__)
        return getattr(module, name)
    if name in {"compare_natural", "compare_strings"}:
        module = import_module(".natural", __name__)
        return getattr(module, name)
    if name in {
        "NaturalStep",
        "FunctionStep",
        "KeyStep",
        "ReversedStep",
        "NullsFirstStep",
        "NullsLastStep",
    }:
        module = import_module(".steps", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
