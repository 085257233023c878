"""Slot normalization and submission export for DFS rosters."""

from rosterslots.config import get_profile
from rosterslots.export import write_lineups
from rosterslots.models import RosterEntry, SubmissionRow
from rosterslots.normalize import normalize_roster

__version__ = "0.1.0"

__all__ = [
    "RosterEntry",
    "SubmissionRow",
    "get_profile",
    "normalize_roster",
    "write_lineups",
]
