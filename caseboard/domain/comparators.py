"""
comparators.py - Named sort orders
Single responsibility: build SortOrder entries for the per-screen comparator tables.
"""
from typing import Any

from caseboard.domain.listing import FieldRef, SortOrder, resolve_field
from caseboard.utils.time import parse_timestamp

PRIORITY_RANKS: dict[str, int] = {"urgent": 4, "high": 3, "medium": 2, "low": 1}


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def by_date(ref: FieldRef, newest_first: bool = True, label: str = "") -> SortOrder:
    return SortOrder(
        key=lambda r: parse_timestamp(resolve_field(r, ref)),
        reverse=newest_first,
        label=label,
    )


def by_rank(
    ref: FieldRef,
    ranks: dict[str, int] | None = None,
    highest_first: bool = True,
    label: str = "",
) -> SortOrder:
    ranks = ranks or PRIORITY_RANKS

    def key(record):
        raw = resolve_field(record, ref)
        if raw is None:
            return None
        return ranks.get(str(raw).lower())

    return SortOrder(key=key, reverse=highest_first, label=label)


def by_number(ref: FieldRef, descending: bool = True, label: str = "") -> SortOrder:
    return SortOrder(
        key=lambda r: _as_number(resolve_field(r, ref)),
        reverse=descending,
        label=label,
    )


def by_text(ref: FieldRef, label: str = "") -> SortOrder:
    def key(record):
        raw = resolve_field(record, ref)
        if raw is None:
            return None
        return str(raw).casefold()

    return SortOrder(key=key, reverse=False, label=label)
