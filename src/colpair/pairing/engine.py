"""Pairing engine: the ordered list of committed pairs for one relation."""

import itertools
import logging
from enum import Enum
from typing import Optional, Sequence

from ..catalog import ColumnCatalog, merge_catalogs
from ..config import settings
from ..modes import PairingMode
from .colors import color_index, assign_colors
from .models import (
    Pair,
    PairingValidationError,
    StaleReferenceError,
    DestructiveModeChangeError,
    ValidationReason,
)

logger = logging.getLogger(__name__)


class EngineState(str, Enum):
    """Lifecycle state of a relation's pair list."""

    EMPTY = "empty"  # No pairs and no explicit edit in progress
    EDITING = "editing"  # Staged selections are being edited
    COMMITTED = "committed"  # Pairs exist and the editor is closed


class PairingEngine:
    """
    Owns the committed pairs, the editing flag, and the pairing mode.

    Commits are atomic: a successful commit replaces the whole list, a
    refused commit leaves it untouched.
    """

    def __init__(
        self,
        left_catalog: ColumnCatalog,
        right_catalog: ColumnCatalog,
        mode: PairingMode = PairingMode.BULK_POSITIONAL,
        colored: bool = True,
        pair_prefix: str = "map",
        single_prefix: str = "map-single",
        self_catalog: Optional[ColumnCatalog] = None,
        palette_size: Optional[int] = None,
        strict: Optional[bool] = None,
    ):
        """
        Initialize the engine.

        Args:
            left_catalog: Columns allowed on the left of bulk pairs
            right_catalog: Columns allowed on the right of bulk pairs
            mode: Initial pairing mode
            colored: Whether pairs carry a display color index
            pair_prefix: Id prefix for bulk pairs
            single_prefix: Id prefix for self-paired pairs
            self_catalog: Columns allowed in self-paired mode (defaults to
                the merge of left and right)
            palette_size: Number of color slots (defaults to settings)
            strict: Raise on stale references (defaults to settings)
        """
        self.left_catalog = left_catalog
        self.right_catalog = right_catalog
        if self_catalog is None:
            self_catalog = merge_catalogs(left_catalog, right_catalog)
        self.self_catalog = self_catalog
        self.colored = colored
        self.pair_prefix = pair_prefix
        self.single_prefix = single_prefix
        self.palette_size = palette_size if palette_size is not None else settings.palette_size
        self._strict = settings.strict_references if strict is None else strict

        self._mode = PairingMode(mode)
        self._pairs: list[Pair] = []
        self._editing = False
        self._sequence = itertools.count()

    @property
    def mode(self) -> PairingMode:
        return self._mode

    @property
    def pairs(self) -> tuple[Pair, ...]:
        """Read-only snapshot of the committed pairs."""
        return tuple(self._pairs)

    @property
    def editing(self) -> bool:
        return self._editing

    @property
    def state(self) -> EngineState:
        if self._editing:
            return EngineState.EDITING
        if self._pairs:
            return EngineState.COMMITTED
        return EngineState.EMPTY

    def __len__(self) -> int:
        return len(self._pairs)

    def get_pair(self, pair_id: str) -> Optional[Pair]:
        for pair in self._pairs:
            if pair.id == pair_id:
                return pair
        return None

    def left_ids(self) -> list[str]:
        """Left column ids of the committed pairs, in pair order."""
        return [pair.left.id for pair in self._pairs]

    def right_ids(self) -> list[str]:
        """Right column ids of the committed pairs, in pair order."""
        return [pair.right.id for pair in self._pairs]

    # Commit operations

    def commit_bulk(self, left_order: Sequence[str], right_order: Sequence[str]) -> tuple[Pair, ...]:
        """
        Replace the pair list with positional pairs.

        Pair i joins left_order[i] with right_order[i].

        Raises:
            PairingValidationError: If the mode is wrong, either side is
                empty, the sides differ in length, or an id is unknown
        """
        left_order = list(left_order)
        right_order = list(right_order)

        if self._mode != PairingMode.BULK_POSITIONAL:
            raise PairingValidationError(
                ValidationReason.WRONG_MODE,
                f"Positional commit is not available in {self._mode.value} mode",
            )

        if not left_order or not right_order:
            raise self._refuse(
                ValidationReason.EMPTY_SELECTION,
                "Select at least one column on each side before committing",
                left_order,
                right_order,
            )

        if len(left_order) != len(right_order):
            raise self._refuse(
                ValidationReason.COUNT_MISMATCH,
                f"Both sides must have the same number of columns "
                f"(left {len(left_order)}, right {len(right_order)})",
                left_order,
                right_order,
            )

        unknown = self.left_catalog.missing(left_order) + self.right_catalog.missing(right_order)
        if unknown:
            raise self._refuse(
                ValidationReason.UNKNOWN_COLUMN,
                f"Unknown column ids: {', '.join(unknown)}",
                left_order,
                right_order,
                unknown,
            )

        new_pairs = []
        for index, (left_id, right_id) in enumerate(zip(left_order, right_order)):
            new_pairs.append(
                Pair(
                    id=f"{self.pair_prefix}-{left_id}-{right_id}-{next(self._sequence)}",
                    left=self.left_catalog.require(left_id),
                    right=self.right_catalog.require(right_id),
                    color_index=self._color(index),
                )
            )

        self._pairs = new_pairs
        self._editing = False
        logger.info(f"Committed {len(new_pairs)} positional pairs")
        return self.pairs

    def commit_self_paired(self, selection: Sequence[str]) -> tuple[Pair, ...]:
        """
        Replace the pair list with one self-pair per selected column.

        An empty selection commits an empty list.

        Raises:
            PairingValidationError: If the mode is wrong or an id is unknown
        """
        selection = list(dict.fromkeys(selection))

        if self._mode != PairingMode.SELF_PAIRED:
            raise PairingValidationError(
                ValidationReason.WRONG_MODE,
                f"Self-paired commit is not available in {self._mode.value} mode",
            )

        unknown = self.self_catalog.missing(selection)
        if unknown:
            raise self._refuse(
                ValidationReason.UNKNOWN_COLUMN,
                f"Unknown column ids: {', '.join(unknown)}",
                selection,
                selection,
                unknown,
            )

        new_pairs = []
        for index, column_id in enumerate(selection):
            column = self.self_catalog.require(column_id)
            new_pairs.append(
                Pair(
                    id=f"{self.single_prefix}-{column_id}-{next(self._sequence)}",
                    left=column,
                    right=column,
                    color_index=self._color(index),
                )
            )

        self._pairs = new_pairs
        self._editing = False
        logger.info(f"Committed {len(new_pairs)} self-paired columns")
        return self.pairs

    def add_pair(self, left_id: Optional[str], right_id: Optional[str]) -> Pair:
        """
        Append a single positional pair.

        Raises:
            PairingValidationError: If a side is missing or unknown, or the
                relation is in self-paired mode
        """
        if self._mode != PairingMode.BULK_POSITIONAL:
            raise PairingValidationError(
                ValidationReason.WRONG_MODE,
                f"Single pairs cannot be added in {self._mode.value} mode",
            )
        if not left_id:
            raise PairingValidationError(
                ValidationReason.MISSING_COLUMN, "Please select a left column"
            )
        if not right_id:
            raise PairingValidationError(
                ValidationReason.MISSING_COLUMN, "Please select a right column"
            )

        unknown = self.left_catalog.missing([left_id]) + self.right_catalog.missing([right_id])
        if unknown:
            raise PairingValidationError(
                ValidationReason.UNKNOWN_COLUMN,
                f"Unknown column ids: {', '.join(unknown)}",
                column_ids=unknown,
            )

        pair = Pair(
            id=f"{self.pair_prefix}-{left_id}-{right_id}-{next(self._sequence)}",
            left=self.left_catalog.require(left_id),
            right=self.right_catalog.require(right_id),
            color_index=self._color(len(self._pairs)),
        )
        self._pairs.append(pair)
        logger.info(f"Added pair {pair.id}")
        return pair

    # Structural edits

    def remove(self, pair_id: str) -> bool:
        """
        Remove a pair by id.

        Other pairs keep their ids and colors.

        Returns:
            True if a pair was removed
        """
        remaining = [pair for pair in self._pairs if pair.id != pair_id]
        if len(remaining) == len(self._pairs):
            self._stale(pair_id, "pair list")
            return False

        self._pairs = remaining
        logger.info(f"Removed pair {pair_id}")
        return True

    def reorder(self, ordered_ids: Sequence[str]) -> bool:
        """
        Re-sequence the pairs to match ordered_ids and recolor by position.

        ordered_ids must be a permutation of the current pair ids. An
        unchanged order is a no-op.

        Returns:
            True if the order changed
        """
        ordered_ids = list(ordered_ids)
        current_ids = [pair.id for pair in self._pairs]

        if ordered_ids == current_ids:
            return False

        by_id = {pair.id: pair for pair in self._pairs}
        if len(ordered_ids) != len(current_ids) or set(ordered_ids) != set(by_id):
            stale = next(
                (pair_id for pair_id in ordered_ids if pair_id not in by_id),
                next((pair_id for pair_id in current_ids if pair_id not in ordered_ids), ""),
            )
            self._stale(stale, "pair list")
            return False

        reordered = [by_id[pair_id] for pair_id in ordered_ids]
        self._pairs = assign_colors(reordered, self.palette_size) if self.colored else reordered
        logger.info(f"Reordered {len(self._pairs)} pairs")
        return True

    def move(self, active_id: str, over_id: str) -> bool:
        """Move one pair to the position currently held by another."""
        if active_id == over_id:
            return False

        ids = [pair.id for pair in self._pairs]
        for reference in (active_id, over_id):
            if reference not in ids:
                self._stale(reference, "pair list")
                return False

        new_index = ids.index(over_id)
        ids.insert(new_index, ids.pop(ids.index(active_id)))
        return self.reorder(ids)

    def clear(self) -> int:
        """Discard every pair. Returns the number discarded."""
        discarded = len(self._pairs)
        self._pairs = []
        if discarded:
            logger.info(f"Cleared {discarded} pairs")
        return discarded

    # Editing and mode

    def begin_edit(self) -> None:
        self._editing = True

    def end_edit(self) -> None:
        self._editing = False

    def set_mode(self, mode: PairingMode) -> None:
        """
        Switch the pairing mode.

        Raises:
            DestructiveModeChangeError: If pairs exist and the mode differs
        """
        mode = PairingMode(mode)
        if mode != self._mode and self._pairs:
            raise DestructiveModeChangeError(
                f"Cannot switch to {mode.value} mode while {len(self._pairs)} pairs exist"
            )
        self._mode = mode
        self._editing = False

    def _color(self, position: int) -> Optional[int]:
        if not self.colored:
            return None
        return color_index(position, self.palette_size)

    def _refuse(
        self,
        reason: ValidationReason,
        message: str,
        left_order: list[str],
        right_order: list[str],
        column_ids: Optional[list[str]] = None,
    ) -> PairingValidationError:
        logger.warning(f"Commit refused: {message}")
        return PairingValidationError(
            reason,
            message,
            left_count=len(left_order),
            right_count=len(right_order),
            column_ids=column_ids,
        )

    def _stale(self, reference: str, context: str) -> None:
        if self._strict:
            raise StaleReferenceError(reference, context)
        logger.warning(f"Ignoring stale reference '{reference}' in {context}")
