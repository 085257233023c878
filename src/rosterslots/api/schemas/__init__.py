"""Pydantic models for API I/O."""

from .lineup import (
    NormalizeRequest,
    NormalizeResponse,
    RosterEntryPayload,
    SubmissionResponse,
)
from .profile import OverflowPhaseResponse, ProfileResponse

__all__ = [
    "NormalizeRequest",
    "NormalizeResponse",
    "OverflowPhaseResponse",
    "ProfileResponse",
    "RosterEntryPayload",
    "SubmissionResponse",
]
