"""Roster and submission models."""

from .roster import LineupKey, RosterEntry, SubmissionRow

__all__ = ["LineupKey", "RosterEntry", "SubmissionRow"]
