"""Podium / also-ranked split of a final ranking."""

from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

from .config import RESULT_COUNT

T = TypeVar("T")


def partition_ranking(ranking: Sequence[T], size: int = RESULT_COUNT) -> Tuple[List[T], List[T]]:
    """Return (podium, rest): the first ``size`` entries and everything after."""
    if size < 0:
        raise ValueError(f"podium size must be >= 0, got {size}")
    items = list(ranking)
    return items[:size], items[size:]
