"""Configuration dataclasses for comparator construction and the sort CLI."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

COLLATIONS = ("locale", "codepoint")
NULL_PLACEMENTS = ("first", "last")


@dataclass(slots=True, frozen=True)
class OrderingConfig:
    collation: str = "locale"  # locale|codepoint
    clamp_numbers: bool = False  # return -1/0/1 instead of the raw difference

    def __post_init__(self) -> None:
        if self.collation not in COLLATIONS:
            raise ValueError(
                f"Unknown collation {self.collation!r}; expected one of {', '.join(COLLATIONS)}"
            )


DEFAULT_ORDERING = OrderingConfig()


@dataclass(slots=True)
class SortKey:
    field: str
    descending: bool = False


@dataclass(slots=True)
class SortConfig:
    keys: tuple[SortKey, ...] = tuple()
    nulls: str = "last"
    collation: str = "locale"
    clamp_numbers: bool = False
    output_path: Optional[str] = None
    indent: Optional[int] = 2

    def __post_init__(self) -> None:
        if self.nulls not in NULL_PLACEMENTS:
            raise ValueError(
                f"Unknown null placement {self.nulls!r}; expected one of {', '.join(NULL_PLACEMENTS)}"
            )

    def ordering(self) -> OrderingConfig:
        return OrderingConfig(collation=self.collation, clamp_numbers=self.clamp_numbers)
