"""Configuration helpers for site/sport slot profiles."""

from .profiles import (
    OverflowPhase,
    Site,
    Sport,
    SportProfile,
    UnknownProfileError,
    get_profile,
    get_profile_by_key,
    iter_profiles,
)

__all__ = [
    "OverflowPhase",
    "Site",
    "Sport",
    "SportProfile",
    "UnknownProfileError",
    "get_profile",
    "get_profile_by_key",
    "iter_profiles",
]
