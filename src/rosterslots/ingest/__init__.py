"""Input adapters that turn raw roster files into roster entries."""

from .roster import (
    DEFAULT_ROSTER_MAPPING,
    RosterRow,
    load_roster_csv,
    parse_roster_csv,
    rows_to_entries,
)

__all__ = [
    "DEFAULT_ROSTER_MAPPING",
    "RosterRow",
    "load_roster_csv",
    "parse_roster_csv",
    "rows_to_entries",
]
