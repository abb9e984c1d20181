"""Natural ordering rule shared by ``natural_order`` and ``reverse_order``."""
from __future__ import annotations

import locale
import logging
from typing import Any

from ..adapters import Comparable
from ..config import DEFAULT_ORDERING, OrderingConfig
from ..errors import UnsupportedComparisonError
from ..utils import is_null, is_number, numeric_difference, sign

logger = logging.getLogger(__name__)


def compare_natural(a: Any, b: Any, config: OrderingConfig = DEFAULT_ORDERING) -> Any:
    """Compare two values by their type's natural rule.

    ``None`` sorts after every other value. Numbers compare by difference,
    booleans put ``True`` first, strings use the active locale's collation
    (or code points) and objects implementing ``Comparable`` decide for
    themselves. Any other pairing raises ``UnsupportedComparisonError``.
    """
    a_null = is_null(a)
    b_null = is_null(b)
    if a_null and b_null:
        return 0
    if a_null:
        return 1
    if b_null:
        return -1

    if is_number(a) and is_number(b):
        difference = numeric_difference(a, b)
        return sign(difference) if config.clamp_numbers else difference

    if isinstance(a, bool) and isinstance(b, bool):
        if a == b:
            return 0
        return -1 if a else 1

    if isinstance(a, str) and isinstance(b, str):
        return compare_strings(a, b, config.collation)

    if isinstance(a, Comparable):
        return a.compare_to(b)

    logger.debug("No natural ordering between %s and %s", type(a).__name__, type(b).__name__)
    raise UnsupportedComparisonError(a, b)


def compare_strings(a: str, b: str, collation: str = "locale") -> int:
    if collation == "locale":
        return locale.strcoll(a, b)
    return (a > b) - (a < b)


__all__ = ["compare_natural", "compare_strings"]
