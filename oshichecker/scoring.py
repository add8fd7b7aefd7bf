from __future__ import annotations

"""
Rank-based "match percentage" for the result screen.

The percentage is a presentation score, not a measured affinity: it depends
only on how many members were ranked and where each one landed. A concave
power curve (gamma < 1) keeps the last places respectable, rounding
collisions are pushed down one point so ranks stay distinct, and everything
is clamped into [SCORE_LOWER, SCORE_UPPER]. For long rankings the clamp wins
over distinctness and the tail ties at the floor.
"""

import math
from functools import lru_cache
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple

import numpy as np
from loguru import logger

from .config import SCORE_GAMMA, SCORE_LOWER, SCORE_UPPER


class RankingValidationError(ValueError):
    """A ranking (or curve setting) violates the mapper's preconditions."""


def _check_curve(n: int, lower: int, upper: int, gamma: float) -> None:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
        raise RankingValidationError(f"ranking length must be a non-negative integer, got {n!r}")
    for name, value in (("lower", lower), ("upper", upper)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise RankingValidationError(f"{name} bound must be an integer, got {value!r}")
    if lower > upper:
        raise RankingValidationError(f"lower bound {lower} is above upper bound {upper}")
    if not math.isfinite(gamma) or not 0 < gamma <= 1:
        raise RankingValidationError(f"gamma must be in (0, 1], got {gamma!r}")


@lru_cache(maxsize=256)
def score_curve(
    n: int,
    lower: int = SCORE_LOWER,
    upper: int = SCORE_UPPER,
    gamma: float = SCORE_GAMMA,
) -> Tuple[int, ...]:
    """
    Percentages for ranks 1..n, best first.

    Pure in (n, lower, upper, gamma) so results are memoized; callers get
    an immutable tuple.
    """
    _check_curve(n, lower, upper, gamma)
    if n == 0:
        return ()

    if n == 1:
        t = np.ones(1, dtype=np.float64)
    else:
        t = 1.0 - np.arange(n, dtype=np.float64) / (n - 1)  # 1st -> 1.0, last -> 0.0

    raw = lower + (upper - lower) * np.power(t, gamma)
    # halves round up, not to even
    rounded = np.floor(raw + 0.5).astype(np.int64).tolist()

    values: List[int] = []
    prev: Optional[int] = None
    for pct in rounded:
        if prev is not None and pct >= prev:
            pct = prev - 1
        # prev tracks the unclamped sequence; the clamp only applies on output
        prev = pct
        values.append(int(min(upper, max(lower, pct))))

    return tuple(values)


def validate_ranking(
    ranking: Iterable,
    key: Optional[Callable[[object], Hashable]] = None,
) -> List[Hashable]:
    """Candidate ids in ranking order; rejects unordered input, unhashable ids and duplicates."""
    if isinstance(ranking, (set, frozenset)):
        raise RankingValidationError(
            f"ranking must be an ordered sequence, got {type(ranking).__name__}"
        )

    ids = [key(c) if key is not None else c for c in ranking]

    seen = set()
    duplicates: List[Hashable] = []
    for cid in ids:
        try:
            if cid in seen and cid not in duplicates:
                duplicates.append(cid)
            seen.add(cid)
        except TypeError as e:
            raise RankingValidationError(
                f"candidate ids must be hashable, got {type(cid).__name__}"
            ) from e
    if duplicates:
        raise RankingValidationError(f"duplicate candidate ids in ranking: {duplicates}")
    return ids


def map_scores(
    ranking: Iterable,
    key: Optional[Callable[[object], Hashable]] = None,
    *,
    lower: int = SCORE_LOWER,
    upper: int = SCORE_UPPER,
    gamma: float = SCORE_GAMMA,
) -> Dict[Hashable, int]:
    """
    Map an ordered ranking (most preferred first) to {candidate id: percent}.

    ``key`` extracts the identity from each element; by default the element
    itself is the identity. Duplicate identities and unordered inputs raise
    RankingValidationError. An empty ranking gives an empty dict.
    """
    ids = validate_ranking(ranking, key)
    values = score_curve(len(ids), lower, upper, gamma)
    logger.debug("Scored {} ranked candidates", len(ids))
    return dict(zip(ids, values))
