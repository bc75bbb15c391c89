"""Data models for pairing relations."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..catalog import Column


class Side(str, Enum):
    """Side of a pending pairing."""

    LEFT = "left"  # Source or key columns
    RIGHT = "right"  # Target or validation columns


class ValidationReason(str, Enum):
    """Why a commit or add was refused."""

    COUNT_MISMATCH = "count_mismatch"
    EMPTY_SELECTION = "empty_selection"
    UNKNOWN_COLUMN = "unknown_column"
    MISSING_COLUMN = "missing_column"
    WRONG_MODE = "wrong_mode"


class Pair(BaseModel):
    """A committed association between a left and a right column."""

    model_config = ConfigDict(frozen=True)

    id: str
    left: Column
    right: Column
    color_index: Optional[int] = None  # Only set for colored relations

    @property
    def is_self_paired(self) -> bool:
        return self.left.id == self.right.id

    def recolored(self, color_index: Optional[int]) -> "Pair":
        """Return a copy of this pair with a different color index."""
        if color_index == self.color_index:
            return self
        return self.model_copy(update={"color_index": color_index})


class SelectionStatus(BaseModel):
    """Commit readiness of the staged selections."""

    left_count: int
    right_count: int
    can_commit: bool
    count_mismatch: bool
    message: Optional[str] = None


class PairingError(Exception):
    """Base exception for pairing operations."""

    pass


class PairingValidationError(PairingError, ValueError):
    """Exception raised when a commit or add is refused."""

    def __init__(
        self,
        reason: ValidationReason,
        message: str,
        left_count: Optional[int] = None,
        right_count: Optional[int] = None,
        column_ids: Optional[list[str]] = None,
    ):
        self.reason = reason
        self.left_count = left_count
        self.right_count = right_count
        self.column_ids = column_ids or []
        super().__init__(message)


class StaleReferenceError(PairingError, LookupError):
    """Exception raised in strict mode when an id is not in the referenced sequence."""

    def __init__(self, reference: str, context: str):
        self.reference = reference
        self.context = context
        super().__init__(f"'{reference}' not found in {context}")


class DestructiveModeChangeError(PairingError):
    """Exception raised when a mode would be switched while pairs exist."""

    pass
