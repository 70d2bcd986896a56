"""Filtered and sorted projections of a record collection.

Every function here is pure: it reads the records it is given and returns a
new list. Filtering and ordering run on a pandas DataFrame built from the
records, and the resulting index is mapped back to the original objects.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, List, Optional, Sequence, TypeVar

import pandas as pd

R = TypeVar("R")

ASC = "asc"
DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """Active sort key and direction for a list page."""

    key: str
    direction: str = ASC

    def toggle(self, key: str) -> "SortState":
        """Same key flips direction; a different key starts ascending."""
        if key == self.key:
            return SortState(key, DESC if self.direction == ASC else ASC)
        return SortState(key, ASC)

    @property
    def arrow(self) -> str:
        return "↑" if self.direction == ASC else "↓"


def _row(record: Any) -> dict:
    if is_dataclass(record):
        return asdict(record)
    return dict(record)


def to_frame(records: Sequence[Any]) -> pd.DataFrame:
    """Build a DataFrame with one row per record, indexed by position."""
    return pd.DataFrame([_row(r) for r in records])


def filter_records(records: Sequence[R], search: str, fields: Sequence[str]) -> List[R]:
    """Keep records where `search` is a case-insensitive substring of any field."""
    records = list(records)
    term = (search or "").lower()
    if not term or not records:
        return records

    df = to_frame(records)
    mask = pd.Series(False, index=df.index)
    for field in fields:
        if field not in df.columns:
            continue
        values = df[field].fillna("").astype(str).str.lower()
        mask = mask | values.str.contains(term, regex=False, na=False)
    return [records[i] for i in df.index[mask.to_numpy()]]


def sort_records(records: Sequence[R], key: str, direction: str = ASC) -> List[R]:
    """Order records by `key` using the native ordering of its values.

    The sort is stable in both directions: records with equal keys keep
    their insertion order.
    """
    records = list(records)
    if not records:
        return records

    df = to_frame(records)
    if key not in df.columns:
        raise KeyError(f"Unknown sort key: {key}")
    ordered = df.sort_values(key, ascending=direction != DESC, kind="mergesort")
    return [records[i] for i in ordered.index]


def query(
    records: Sequence[R],
    search: str,
    searchable: Sequence[str],
    sort: Optional[SortState] = None,
) -> List[R]:
    """Filter then sort, as a list page displays them."""
    rows = filter_records(records, search, searchable)
    if sort is None:
        return rows
    return sort_records(rows, sort.key, sort.direction)
