"""Pairing modes and mode-change requests."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PairingMode(str, Enum):
    """Shape of the pairs a relation produces."""

    BULK_POSITIONAL = "bulk_positional"  # Default - n-th left joins n-th right
    SELF_PAIRED = "self_paired"  # Every selected column is paired with itself


class ModeChangeStatus(str, Enum):
    """Outcome of a mode-change request."""

    APPLIED = "applied"  # Switched immediately, nothing was discarded
    PENDING_CONFIRMATION = "pending_confirmation"  # Existing pairs would be discarded
    UNCHANGED = "unchanged"  # Requested mode is already active


class ModeChangeResult(BaseModel):
    """Result of requesting or confirming a mode change."""

    status: ModeChangeStatus
    current_mode: PairingMode
    pending_mode: Optional[PairingMode] = None
    discarded_pairs: int = Field(
        default=0,
        description="Pairs cleared (applied) or that will be cleared (pending)",
    )
    message: str = ""


__all__ = [
    "PairingMode",
    "ModeChangeStatus",
    "ModeChangeResult",
]
