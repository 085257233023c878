"""Rank-based slot assignment and overflow reassignment for position labels."""

from __future__ import annotations

import math
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence


LabelRewrite = Callable[[Sequence[str]], List[str]]


def rank_positions(positions: Sequence[str]) -> List[int]:
    """Return the 1-based rank of each label within its group of equal labels.

    Ranks follow original index order, so the first occurrence of a label is
    always rank 1: ``["OF", "OF", "1B", "OF"] -> [1, 2, 1, 3]``.
    """

    counts: Dict[str, int] = {}
    ranks: List[int] = []
    # Walk in index order; the running count per label is the rank.
    for label in positions:
        counts[label] = counts.get(label, 0) + 1
        ranks.append(counts[label])
    return ranks


def capacity_for(label: str, capacities: Mapping[str, int]) -> float:
    """Maximum occupancy for ``label``; labels without an entry are unconstrained."""

    capacity: Optional[int] = capacities.get(label)
    if capacity is None:
        return math.inf
    return capacity


def reassign_overflow(
    positions: Sequence[str],
    ranks: Sequence[int],
    capacities: Mapping[str, int],
    wildcard: str,
) -> List[str]:
    """Swap in ``wildcard`` for every entry ranked beyond its label's capacity."""

    if len(positions) != len(ranks):
        raise ValueError(
            f"positions and ranks must have equal length, got {len(positions)} and {len(ranks)}"
        )
    return [
        wildcard if rank > capacity_for(label, capacities) else label
        for label, rank in zip(positions, ranks)
    ]


def normalize_positions(
    positions: Sequence[str],
    capacities: Mapping[str, int],
    wildcard: str,
) -> List[str]:
    """Rank then reassign overflow in a single pass.

    >>> normalize_positions(["P", "1B", "1B", "OF"], {"P": 1, "1B": 1}, "UTIL")
    ['P', '1B', 'UTIL', 'OF']
    """

    return reassign_overflow(positions, rank_positions(positions), capacities, wildcard)


def identity_labels(positions: Sequence[str]) -> List[str]:
    return list(positions)


def merge_labels(target: str, sources: Iterable[str]) -> LabelRewrite:
    """Build a rewrite collapsing any label in ``sources`` into ``target``.

    Matching is on whole labels and ``target`` always belongs to the merged
    group, so applying the rewrite twice gives the same result as once.
    """

    group = frozenset(sources) | {target}

    def _rewrite(positions: Sequence[str]) -> List[str]:
        return [target if label in group else label for label in positions]

    _rewrite.__name__ = f"merge_{target.replace('/', '_').lower()}"
    return _rewrite


merge_wings = merge_labels("W", ("RW", "LW"))
merge_corner_infield = merge_labels("C/1B", ("C", "1B"))


__all__ = [
    "LabelRewrite",
    "capacity_for",
    "identity_labels",
    "merge_corner_infield",
    "merge_labels",
    "merge_wings",
    "normalize_positions",
    "rank_positions",
    "reassign_overflow",
]
