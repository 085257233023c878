"""Pivot normalized rosters into wide submission rows and CSV uploads."""

from __future__ import annotations

import csv
import logging
import os
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from rosterslots.config import Site, Sport
from rosterslots.models import LineupKey, RosterEntry, SubmissionRow
from rosterslots.normalize import group_by_lineup, normalize_roster


logger = logging.getLogger(__name__)

_STRICT_LAYOUT_ENV = "ROSTERSLOTS_STRICT_LAYOUT"


class SubmissionLayoutError(ValueError):
    """Raised in strict mode when lineups disagree on their slot columns."""


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    text = raw.strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off", ""}:
        return False
    logger.warning("Invalid flag for %s: %s; using default %s", name, raw, default)
    return default


def strict_layout_default() -> bool:
    return _env_flag(_STRICT_LAYOUT_ENV, False)


@dataclass(frozen=True)
class SubmissionTable:
    """One row per lineup; headers may repeat to mirror upload templates."""

    headers: Tuple[str, ...]
    rows: List[List[Optional[str]]] = field(default_factory=list)
    lineup_ids: List[LineupKey] = field(default_factory=list)

    def to_csv(self) -> str:
        buffer = StringIO()
        writer = csv.writer(buffer)
        writer.writerow(self.headers)
        for row in self.rows:
            writer.writerow(["" if cell is None else cell for cell in row])
        return buffer.getvalue()

    def write_csv(self, path: Path) -> None:
        with path.open("w", newline="", encoding="utf-8") as f:
            f.write(self.to_csv())


def serialize_lineups(entries: Sequence[RosterEntry]) -> List[SubmissionRow]:
    """Build one submission row per lineup id, in first-appearance order.

    Entries are expected to be normalized and ordered already; each row
    takes the group's ``(position, player_id)`` pairs verbatim.
    """

    return [
        SubmissionRow(
            lineup_id=lineup_id,
            slots=[(entry.position, entry.player_id) for entry in group],
        )
        for lineup_id, group in group_by_lineup(entries).items()
    ]


def build_submission_table(
    rows: Sequence[SubmissionRow],
    *,
    strict: Optional[bool] = None,
) -> SubmissionTable:
    """Stack submission rows into a table laid out by the first row's labels.

    Rows with more slots than the current header extend it with their trailing
    labels; shorter rows are padded with ``None``. Cells are placed by
    position, so lineups with a different slot layout end up misaligned.
    That case is logged, or raised as SubmissionLayoutError when strict.
    """

    if strict is None:
        strict = strict_layout_default()
    if not rows:
        return SubmissionTable(headers=())

    headers: List[str] = list(rows[0].labels)
    for row in rows[1:]:
        labels = row.labels
        if labels != headers:
            message = (
                f"Lineup {row.lineup_id!r} slot layout {labels} does not match "
                f"columns {headers}"
            )
            if strict:
                raise SubmissionLayoutError(message)
            logger.warning("%s", message)
        if len(labels) > len(headers):
            headers.extend(labels[len(headers):])

    width = len(headers)
    table_rows: List[List[Optional[str]]] = []
    for row in rows:
        cells: List[Optional[str]] = list(row.player_ids)
        cells.extend([None] * (width - len(cells)))
        table_rows.append(cells)

    return SubmissionTable(
        headers=tuple(headers),
        rows=table_rows,
        lineup_ids=[row.lineup_id for row in rows],
    )


def write_lineups(
    entries: Sequence[RosterEntry],
    *,
    site: Union[str, Site, None] = None,
    sport: Union[str, Sport, None] = None,
    path: Optional[Path] = None,
    strict: Optional[bool] = None,
) -> SubmissionTable:
    """Convert a roster into a submission table, optionally writing it as CSV.

    When both ``site`` and ``sport`` are given the roster is normalized and
    ordered first; otherwise entries are taken as already normalized.
    """

    if (site is None) != (sport is None):
        raise ValueError("site and sport must be given together")
    if site is not None and sport is not None:
        entries = normalize_roster(entries, site=site, sport=sport)

    table = build_submission_table(serialize_lineups(entries), strict=strict)

    if path is not None:
        table.write_csv(Path(path))
        logger.info("Wrote %d lineups to %s", len(table.rows), path)

    return table


__all__ = [
    "SubmissionLayoutError",
    "SubmissionTable",
    "build_submission_table",
    "serialize_lineups",
    "write_lineups",
]
