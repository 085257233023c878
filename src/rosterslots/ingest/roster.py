"""Helpers to load roster CSVs and emit canonical roster entries."""

from __future__ import annotations

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from rosterslots.models import RosterEntry


logger = logging.getLogger(__name__)

DEFAULT_ROSTER_MAPPING = {
    "player_id": "player_id",
    "position": "position",
    "lineup_id": "lineup",
}


class RosterRow(BaseModel):
    raw_id: Optional[str] = None
    raw_position: Optional[str] = None
    raw_lineup: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "RosterRow":
        def extract(key: str) -> Optional[str]:
            column = mapping.get(key, DEFAULT_ROSTER_MAPPING[key])
            value = row.get(column)
            if value is None:
                return None
            value = value.strip()
            return value or None

        return cls(
            raw_id=extract("player_id"),
            raw_position=extract("position"),
            raw_lineup=extract("lineup_id"),
        )


def _read_rows(lines: Iterable[str], mapping: Mapping[str, str]) -> List[RosterRow]:
    reader = csv.DictReader(lines)
    return [RosterRow.from_mapping(row, mapping) for row in reader]


def rows_to_entries(rows: Sequence[RosterRow]) -> List[RosterEntry]:
    entries: List[RosterEntry] = []
    for line_no, row in enumerate(rows, start=2):
        if not row.raw_id:
            raise ValueError(f"row {line_no} has no player id")
        if row.raw_lineup is None:
            raise ValueError(f"row {line_no} has no lineup")
        entries.append(
            RosterEntry(
                player_id=row.raw_id,
                position=(row.raw_position or "").upper(),
                lineup_id=row.raw_lineup,
            )
        )
    return entries


def parse_roster_csv(text: str, *, mapping: Mapping[str, str] | None = None) -> List[RosterEntry]:
    rows = _read_rows(StringIO(text), mapping or DEFAULT_ROSTER_MAPPING)
    return rows_to_entries(rows)


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterEntry]:
    """Read a long-format roster file: one row per drafted player per lineup."""

    with path.open(newline="", encoding="utf-8") as f:
        rows = _read_rows(f, mapping or DEFAULT_ROSTER_MAPPING)
    entries = rows_to_entries(rows)
    logger.info("Loaded %d roster entries from %s", len(entries), path)
    return entries
