"""Positional display-color assignment for pairs."""

from typing import Iterable, Optional

from ..config import settings
from .models import Pair

# Reference palette, in slot order
MAPPING_PALETTE = (
    "blue",
    "green",
    "purple",
    "orange",
    "pink",
    "cyan",
    "yellow",
    "indigo",
    "teal",
    "rose",
)


def color_index(position: int, palette_size: Optional[int] = None) -> int:
    """Return the palette slot for a pair at the given list position."""
    size = palette_size if palette_size is not None else settings.palette_size
    if size < 1:
        raise ValueError(f"Palette size must be at least 1, got {size}")
    if position < 0:
        raise ValueError(f"Position must be non-negative, got {position}")
    return position % size


def color_name(index: int) -> str:
    """Name of the reference palette color for a slot index."""
    return MAPPING_PALETTE[index % len(MAPPING_PALETTE)]


def assign_colors(pairs: Iterable[Pair], palette_size: Optional[int] = None) -> list[Pair]:
    """
    Recompute every pair's color from its position.

    Colors are always rebuilt from scratch so the result is consistent after
    any structural change.
    """
    return [pair.recolored(color_index(i, palette_size)) for i, pair in enumerate(pairs)]
