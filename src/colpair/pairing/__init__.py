"""Ordered pairing of columns: selections, commits, colors, and relations."""

from .models import (
    Pair,
    Side,
    SelectionStatus,
    ValidationReason,
    PairingError,
    PairingValidationError,
    StaleReferenceError,
    DestructiveModeChangeError,
)
from .colors import MAPPING_PALETTE, color_index, color_name, assign_colors
from .selection import SelectionTracker
from .engine import PairingEngine, EngineState
from .relation import (
    Relation,
    RelationKind,
    RelationProfile,
    MAPPING_PROFILE,
    KEY_VALIDATION_PROFILE,
)
from .session import ConfigurationSession, SessionSummary

__all__ = [
    "Pair",
    "Side",
    "SelectionStatus",
    "ValidationReason",
    "PairingError",
    "PairingValidationError",
    "StaleReferenceError",
    "DestructiveModeChangeError",
    "MAPPING_PALETTE",
    "color_index",
    "color_name",
    "assign_colors",
    "SelectionTracker",
    "PairingEngine",
    "EngineState",
    "Relation",
    "RelationKind",
    "RelationProfile",
    "MAPPING_PROFILE",
    "KEY_VALIDATION_PROFILE",
    "ConfigurationSession",
    "SessionSummary",
]
