"""Composable Java-style comparators for ordering Python values."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import DEFAULT_ORDERING, OrderingConfig, SortConfig, SortKey
from .errors import UnsupportedComparisonError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ORDERING",
    "OrderingConfig",
    "SortConfig",
    "SortKey",
    "UnsupportedComparisonError",
    "Comparable",
    "Comparator",
    "natural_order",
    "reverse_order",
    "of",
    "comparing",
    "comparing_by",
    "comparing_key",
    "utils",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name in {
        "Comparator",
        "natural_order",
        "reverse_order",
        "of",
        "comparing",
        "comparing_by",
        "comparing_key",
    }:
        module = import_module(".core.comparator", __name__)
        return getattr(module, name)
    if name == "Comparable":
        module = import_module(".adapters", __name__)
        return module.Comparable
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
