"""Command-line interface: sort a JSON array of records by one or more keys."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from .config import COLLATIONS, NULL_PLACEMENTS, SortConfig
from .core.comparator import Comparator, comparing_key, natural_order, reverse_order
from .errors import UnsupportedComparisonError
from .utils import parse_sort_key

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sort a JSON array with chained comparators")
    parser.add_argument("input", nargs="?", default="-", help="Input JSON file path or '-' for stdin")
    parser.add_argument(
        "--key",
        dest="keys",
        action="append",
        required=True,
        type=parse_sort_key,
        help="Sort key as FIELD, FIELD:asc or FIELD:desc; repeat to break ties",
    )
    parser.add_argument("--nulls", choices=NULL_PLACEMENTS, default="last", help="Placement of null or missing values")
    parser.add_argument("--collation", choices=COLLATIONS, default="locale", help="String ordering rule")
    parser.add_argument("--clamp-numbers", action="store_true", help="Compare numbers by sign only")
    parser.add_argument("--output", type=Path, help="Path to write sorted JSON; prints to stdout if omitted")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (negative for compact output)")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def build_comparator(config: SortConfig) -> Comparator:
    """Chain one key comparator per configured sort key."""
    if not config.keys:
        raise ValueError("At least one sort key is required")
    ordering = config.ordering()
    comparator: Optional[Comparator] = None
    for sort_key in config.keys:
        key_comparator = reverse_order(ordering) if sort_key.descending else natural_order(ordering)
        # null placement is fixed regardless of direction
        if config.nulls == "first":
            key_comparator = key_comparator.nulls_first()
        else:
            key_comparator = key_comparator.nulls_last()
        if comparator is None:
            comparator = comparing_key(sort_key.field, key_comparator)
        else:
            comparator = comparator.then_comparing_key(sort_key.field, key_comparator)
    return comparator


def sort_records(records: list[Any], config: SortConfig) -> list[Any]:
    comparator = build_comparator(config)
    return sorted(records, key=comparator.as_key())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    config = SortConfig(
        keys=tuple(args.keys),
        nulls=args.nulls,
        collation=args.collation,
        clamp_numbers=args.clamp_numbers,
        output_path=str(args.output) if args.output else None,
        indent=args.indent if args.indent >= 0 else None,
    )

    try:
        records = _load_records(args.input)
    except (OSError, ValueError) as exc:
        logger.error("Failed to read input: %s", exc)
        return 1

    try:
        ordered = sort_records(records, config)
    except UnsupportedComparisonError as exc:
        logger.error("Failed to sort records: %s", exc)
        return 1
    logger.info("Sorted %d record(s) by %s", len(ordered), ", ".join(k.field for k in config.keys))

    payload = json.dumps(ordered, indent=config.indent, ensure_ascii=False)
    if config.output_path:
        output = Path(config.output_path)
        _ensure_parent(output)
        output.write_text(payload + "\n", encoding="utf-8")
        logger.info("Sorted output written to %s", output)
    else:
        print(payload)
    return 0


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_records(source: str) -> list[Any]:
    if source == "-":
        data = json.load(sys.stdin)
    else:
        data = json.loads(Path(source).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("Input JSON must be an array")
    return data


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
