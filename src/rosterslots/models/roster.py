"""Canonical roster models shared across normalization and export layers."""

from __future__ import annotations

from typing import List, Tuple, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


LineupKey = Union[int, str]


class RosterEntry(BaseModel):
    """One drafted player occupying a position in one lineup."""

    player_id: str = Field(..., min_length=1)
    position: str
    lineup_id: LineupKey

    model_config = ConfigDict(frozen=True)

    def with_position(self, position: str) -> "RosterEntry":
        if position == self.position:
            return self
        return self.model_copy(update={"position": position})


class SubmissionRow(BaseModel):
    """Wide upload record for a single lineup.

    Slots are kept as ordered ``(label, player_id)`` pairs because upload
    templates repeat labels (three ``OF`` columns, two ``FLEX`` columns).
    """

    lineup_id: LineupKey
    slots: List[Tuple[str, str]]

    model_config = ConfigDict(frozen=True)

    @property
    def labels(self) -> List[str]:
        return [label for label, _ in self.slots]

    @property
    def player_ids(self) -> List[str]:
        return [player_id for _, player_id in self.slots]
