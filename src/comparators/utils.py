"""Utility helpers shared by comparator construction and the CLI."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from numbers import Real
from typing import Any, Callable

from .config import SortKey

_DESCENDING_SUFFIXES = {"desc", "descending"}
_ASCENDING_SUFFIXES = {"asc", "ascending"}


def is_null(value: Any) -> bool:
    return value is None


def is_number(value: Any) -> bool:
    """True for ints, floats, decimals and other reals; booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (Real, Decimal))


def sign(value: Any) -> int:
    if value != value:  # NaN
        return 0
    return (value > 0) - (value < 0)


def numeric_difference(a: Any, b: Any) -> Any:
    """Return ``a - b`` with the degenerate cases normalised to zero.

    Equal operands always give 0, which keeps ``inf`` against ``inf``
    reflexive. A NaN difference is treated as a tie. When the difference
    cannot be computed (an int beyond float range against a float, or a
    Decimal against a float) the exact sign of the comparison is returned.
    """
    if a == b:
        return 0
    if a != a or b != b:  # NaN
        return 0
    try:
        difference = a - b
    except (OverflowError, TypeError):
        return (a > b) - (a < b)
    if difference != difference:
        return 0
    return difference


def read_key(entity: Any, key: Any) -> Any:
    """Read ``key`` off ``entity``; anything missing reads as ``None``."""
    if entity is None:
        return None
    if isinstance(entity, Mapping):
        return entity.get(key)
    if isinstance(entity, Sequence) and not isinstance(entity, str):
        if isinstance(key, int) and -len(entity) <= key < len(entity):
            return entity[key]
        return None
    if isinstance(key, str):
        return getattr(entity, key, None)
    return None


def key_reader(key: Any) -> Callable[[Any], Any]:
    def _read(entity: Any) -> Any:
        return read_key(entity, key)

    _read.__name__ = f"read_{key}"
    return _read


def parse_sort_key(raw: str) -> SortKey:
    """Parse ``field`` or ``field:asc`` / ``field:desc`` into a SortKey."""
    text = raw.strip()
    field, _, direction = text.rpartition(":")
    if not field:
        if not direction or text.startswith(":"):
            raise ValueError(f"Sort key {raw!r} has no field name")
        return SortKey(field=direction)
    lowered = direction.lower()
    if lowered in _DESCENDING_SUFFIXES:
        return SortKey(field=field, descending=True)
    if lowered in _ASCENDING_SUFFIXES:
        return SortKey(field=field)
    # colon belongs to the field name
    return SortKey(field=text)
