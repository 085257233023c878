"""Shared roster builders for tests."""

from __future__ import annotations

from typing import Sequence

from rosterslots.models import RosterEntry


DK_NFL_POSITIONS = ["QB", "RB", "RB", "RB", "WR", "WR", "WR", "WR", "TE"]


def make_lineup(positions: Sequence[str], lineup_id="L1", prefix: str = "p") -> list[RosterEntry]:
    return [
        RosterEntry(player_id=f"{prefix}{idx}", position=position, lineup_id=lineup_id)
        for idx, position in enumerate(positions, start=1)
    ]


def positions_of(entries: Sequence[RosterEntry]) -> list[str]:
    return [entry.position for entry in entries]


def ids_of(entries: Sequence[RosterEntry]) -> list[str]:
    return [entry.player_id for entry in entries]
