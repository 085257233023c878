"""Roster normalization against site/sport slot profiles."""

from .service import (
    RosterSizeError,
    group_by_lineup,
    normalize_lineup,
    normalize_lineup_positions,
    normalize_roster,
    order_lineup,
)

__all__ = [
    "RosterSizeError",
    "group_by_lineup",
    "normalize_lineup",
    "normalize_lineup_positions",
    "normalize_roster",
    "order_lineup",
]
