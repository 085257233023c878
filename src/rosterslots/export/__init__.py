"""Submission export helpers (wide rows, CSV upload files)."""

from .submission import (
    SubmissionLayoutError,
    SubmissionTable,
    build_submission_table,
    serialize_lineups,
    write_lineups,
)

__all__ = [
    "SubmissionLayoutError",
    "SubmissionTable",
    "build_submission_table",
    "serialize_lineups",
    "write_lineups",
]
