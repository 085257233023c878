"""Apply slot profiles to rosters: overflow normalization and canonical ordering."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Union

from rosterslots.config import Site, Sport, SportProfile, get_profile
from rosterslots.models import LineupKey, RosterEntry
from rosterslots.positions import normalize_positions


logger = logging.getLogger(__name__)


class RosterSizeError(ValueError):
    """Raised when a lineup does not have the profile's fixed roster size."""


def group_by_lineup(entries: Sequence[RosterEntry]) -> Dict[LineupKey, List[RosterEntry]]:
    """Partition entries by lineup id, keeping first-appearance order of ids."""

    groups: Dict[LineupKey, List[RosterEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.lineup_id, []).append(entry)
    return groups


def normalize_lineup_positions(positions: Sequence[str], profile: SportProfile) -> List[str]:
    """Run the profile's merge pass and overflow phases over one lineup's labels."""

    if profile.roster_size is not None and len(positions) != profile.roster_size:
        raise RosterSizeError(
            f"{profile.key} lineups need exactly {profile.roster_size} players, got {len(positions)}"
        )

    labels = profile.preprocessor(positions)
    for phase in profile.phases:
        labels = normalize_positions(labels, phase.capacities, phase.wildcard)
    return labels


def order_lineup(entries: Sequence[RosterEntry], slot_order: Sequence[str]) -> List[RosterEntry]:
    """Stable sort of entries by slot order; labels outside it go last."""

    index = {label: idx for idx, label in enumerate(slot_order)}
    unranked = len(index)
    return sorted(entries, key=lambda entry: index.get(entry.position, unranked))


def normalize_lineup(entries: Sequence[RosterEntry], profile: SportProfile) -> List[RosterEntry]:
    labels = normalize_lineup_positions([entry.position for entry in entries], profile)
    rewritten = [entry.with_position(label) for entry, label in zip(entries, labels)]
    return order_lineup(rewritten, profile.slot_order)


def normalize_roster(
    entries: Sequence[RosterEntry],
    *,
    site: Union[str, Site],
    sport: Union[str, Sport],
) -> List[RosterEntry]:
    """Normalize every lineup in ``entries`` for the given site and sport.

    The profile is resolved before any entry is inspected, so an unknown
    site/sport pair fails even for an empty roster. Lineups are returned in
    first-appearance order, each one ordered by the profile's slot order.
    """

    profile = get_profile(site, sport)
    groups = group_by_lineup(entries)
    logger.info(
        "Normalizing %d lineups (%d entries) with profile %s",
        len(groups),
        len(entries),
        profile.key,
    )

    normalized: List[RosterEntry] = []
    for lineup_id, lineup_entries in groups.items():
        try:
            normalized.extend(normalize_lineup(lineup_entries, profile))
        except RosterSizeError:
            logger.warning("Lineup %r rejected by profile %s", lineup_id, profile.key)
            raise
    return normalized


__all__ = [
    "RosterSizeError",
    "group_by_lineup",
    "normalize_lineup",
    "normalize_lineup_positions",
    "normalize_roster",
    "order_lineup",
]
