from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from rosterslots.models import LineupKey


class RosterEntryPayload(BaseModel):
    player_id: str = Field(..., min_length=1)
    position: str
    lineup_id: LineupKey


class NormalizeRequest(BaseModel):
    site: str = Field(default="draftkings")
    sport: str = Field(default="nfl")
    entries: List[RosterEntryPayload]
    strict: bool | None = None


class SubmissionResponse(BaseModel):
    headers: List[str]
    rows: List[List[str | None]]
    lineup_ids: List[LineupKey]


class NormalizeResponse(BaseModel):
    site: str
    sport: str
    entries: List[RosterEntryPayload]
    submission: SubmissionResponse
