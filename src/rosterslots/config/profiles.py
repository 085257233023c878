"""Slot profiles for supported site/sport combinations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from rosterslots.positions import (
    LabelRewrite,
    capacity_for,
    identity_labels,
    merge_corner_infield,
    merge_wings,
)


class UnknownProfileError(ValueError):
    """Raised when no slot profile exists for a site/sport pair."""


class Site(str, Enum):
    DRAFTKINGS = "draftkings"
    FANDUEL = "fanduel"


class Sport(str, Enum):
    NFL = "nfl"
    MLB = "mlb"
    NBA = "nba"
    NHL = "nhl"


_SITE_ALIASES: Mapping[str, Site] = {
    "dk": Site.DRAFTKINGS,
    "fd": Site.FANDUEL,
}


@dataclass(frozen=True)
class OverflowPhase:
    capacities: Mapping[str, int]
    wildcard: str

    def __post_init__(self) -> None:
        # Profiles are shared process-wide; callers get a read-only view.
        object.__setattr__(self, "capacities", MappingProxyType(dict(self.capacities)))

    def capacity_for(self, label: str) -> float:
        return capacity_for(label, self.capacities)


@dataclass(frozen=True)
class SportProfile:
    site: Site
    sport: Sport
    slot_order: Tuple[str, ...]
    phases: Tuple[OverflowPhase, ...] = ()
    preprocessor: LabelRewrite = field(default=identity_labels, compare=False)
    roster_size: Optional[int] = None

    @property
    def key(self) -> str:
        return f"{self.site.value}_{self.sport.value}"

    @property
    def is_pass_through(self) -> bool:
        return not self.phases and self.preprocessor is identity_labels


_PROFILES: Dict[Tuple[Site, Sport], SportProfile] = {
    (Site.DRAFTKINGS, Sport.NFL): SportProfile(
        site=Site.DRAFTKINGS,
        sport=Sport.NFL,
        roster_size=9,
        phases=(
            OverflowPhase({"QB": 1, "RB": 2, "WR": 3, "TE": 1, "DST": 1}, "FLEX"),
        ),
        slot_order=("QB", "RB", "WR", "TE", "FLEX", "DST"),
    ),
    (Site.DRAFTKINGS, Sport.MLB): SportProfile(
        site=Site.DRAFTKINGS,
        sport=Sport.MLB,
        slot_order=("P", "C", "1B", "2B", "3B", "SS", "OF"),
    ),
    (Site.DRAFTKINGS, Sport.NBA): SportProfile(
        site=Site.DRAFTKINGS,
        sport=Sport.NBA,
        roster_size=8,
        phases=(
            OverflowPhase({"PG": 1, "SG": 1}, "G"),
            OverflowPhase({"SF": 1, "PF": 1}, "F"),
            OverflowPhase(
                {"PG": 1, "SG": 1, "SF": 1, "PF": 1, "C": 1, "G": 1, "F": 1},
                "UTIL",
            ),
        ),
        slot_order=("PG", "SG", "SF", "PF", "C", "G", "F", "UTIL"),
    ),
    (Site.DRAFTKINGS, Sport.NHL): SportProfile(
        site=Site.DRAFTKINGS,
        sport=Sport.NHL,
        roster_size=9,
        preprocessor=merge_wings,
        phases=(
            OverflowPhase({"C": 2, "W": 3, "D": 2, "G": 1}, "UTIL"),
        ),
        slot_order=("C", "W", "D", "G"),
    ),
    (Site.FANDUEL, Sport.NFL): SportProfile(
        site=Site.FANDUEL,
        sport=Sport.NFL,
        roster_size=9,
        phases=(
            OverflowPhase({"QB": 1, "RB": 2, "WR": 3, "TE": 1, "D": 1}, "FLEX"),
        ),
        slot_order=("QB", "RB", "WR", "TE", "FLEX", "D"),
    ),
    (Site.FANDUEL, Sport.MLB): SportProfile(
        site=Site.FANDUEL,
        sport=Sport.MLB,
        roster_size=9,
        preprocessor=merge_corner_infield,
        phases=(
            OverflowPhase(
                {"P": 1, "C/1B": 1, "2B": 1, "3B": 1, "SS": 1, "OF": 3},
                "UTIL",
            ),
        ),
        slot_order=("P", "C/1B", "1B", "2B", "3B", "SS", "OF", "UTIL"),
    ),
    (Site.FANDUEL, Sport.NBA): SportProfile(
        site=Site.FANDUEL,
        sport=Sport.NBA,
        slot_order=("PG", "SG", "SF", "PF", "C"),
    ),
    (Site.FANDUEL, Sport.NHL): SportProfile(
        site=Site.FANDUEL,
        sport=Sport.NHL,
        slot_order=("C", "W", "D", "G"),
    ),
}


def _coerce_site(site: Union[str, Site]) -> Site:
    if isinstance(site, Site):
        return site
    text = str(site).strip().lower()
    if text in _SITE_ALIASES:
        return _SITE_ALIASES[text]
    try:
        return Site(text)
    except ValueError:
        raise UnknownProfileError(f"Unknown site {site!r}") from None


def _coerce_sport(sport: Union[str, Sport]) -> Sport:
    if isinstance(sport, Sport):
        return sport
    try:
        return Sport(str(sport).strip().lower())
    except ValueError:
        raise UnknownProfileError(f"Unknown sport {sport!r}") from None


def iter_profiles() -> Iterable[SportProfile]:
    """Return an iterator of all configured profiles."""

    return _PROFILES.values()


def get_profile(site: Union[str, Site], sport: Union[str, Sport]) -> SportProfile:
    """Fetch the profile for a site/sport pair, raising UnknownProfileError if missing."""

    key = (_coerce_site(site), _coerce_sport(sport))
    if key not in _PROFILES:
        raise UnknownProfileError(
            f"No slot profile configured for site={site!r}, sport={sport!r}"
        )
    return _PROFILES[key]


def get_profile_by_key(profile_key: str) -> SportProfile:
    """Resolve a profile from its "site_sport" key, e.g. ``"draftkings_nfl"``."""

    site, sep, sport = profile_key.strip().partition("_")
    if not sep or not site or not sport:
        raise UnknownProfileError(
            f"Profile key must look like 'site_sport', got {profile_key!r}"
        )
    return get_profile(site, sport)
