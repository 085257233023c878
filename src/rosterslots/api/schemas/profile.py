from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel


class OverflowPhaseResponse(BaseModel):
    capacities: Dict[str, int]
    wildcard: str


class ProfileResponse(BaseModel):
    key: str
    site: str
    sport: str
    roster_size: int | None
    pass_through: bool
    phases: List[OverflowPhaseResponse]
    slot_order: List[str]
