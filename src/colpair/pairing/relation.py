"""A pairing relation: engine, mode controller, and staged selections."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from ..catalog import Column, ColumnCatalog
from ..modes import PairingMode, ModeChangeResult, ModeChangeStatus
from ..modes.controller import ModeController
from .engine import PairingEngine, EngineState
from .models import (
    Pair,
    PairingValidationError,
    SelectionStatus,
    Side,
    ValidationReason,
)
from .selection import SelectionTracker

logger = logging.getLogger(__name__)

PairsListener = Callable[[tuple[Pair, ...]], None]


class RelationKind(str, Enum):
    """The two pairing contexts of a configuration session."""

    MAPPING = "mapping"
    KEY_VALIDATION = "key_validation"


@dataclass(frozen=True)
class RelationProfile:
    """Naming and pair shape of a relation."""

    kind: RelationKind
    left_label: str
    right_label: str
    pair_prefix: str
    single_prefix: str
    colored: bool


MAPPING_PROFILE = RelationProfile(
    kind=RelationKind.MAPPING,
    left_label="Source",
    right_label="Target",
    pair_prefix="map",
    single_prefix="map-single",
    colored=True,
)

KEY_VALIDATION_PROFILE = RelationProfile(
    kind=RelationKind.KEY_VALIDATION,
    left_label="Key",
    right_label="Validation",
    pair_prefix="pair",
    single_prefix="key-single",
    colored=False,
)


class Relation:
    """
    One pairing context.

    This is the entry point the interaction layer drives. Every change to
    the committed pair list is pushed to the subscribed listeners as an
    immutable snapshot.
    """

    def __init__(
        self,
        profile: RelationProfile,
        left_catalog: ColumnCatalog,
        right_catalog: ColumnCatalog,
        mode: Optional[PairingMode] = None,
        self_catalog: Optional[ColumnCatalog] = None,
        palette_size: Optional[int] = None,
        strict: Optional[bool] = None,
    ):
        self.profile = profile
        self.engine = PairingEngine(
            left_catalog,
            right_catalog,
            mode=mode or PairingMode.BULK_POSITIONAL,
            colored=profile.colored,
            pair_prefix=profile.pair_prefix,
            single_prefix=profile.single_prefix,
            self_catalog=self_catalog,
            palette_size=palette_size,
            strict=strict,
        )
        self.modes = ModeController(self.engine)
        self.left = SelectionTracker(
            left_catalog, self.engine.left_ids, name=profile.left_label.lower(), strict=strict
        )
        self.right = SelectionTracker(
            right_catalog, self.engine.right_ids, name=profile.right_label.lower(), strict=strict
        )
        self.single = SelectionTracker(
            self.engine.self_catalog, self.engine.left_ids, name="self-paired", strict=strict
        )
        self._listeners: list[PairsListener] = []

    def __repr__(self) -> str:
        return (
            f"Relation({self.profile.kind.value}, mode={self.mode.value}, "
            f"state={self.state.value}, pairs={len(self.engine)})"
        )

    # Read side

    @property
    def kind(self) -> RelationKind:
        return self.profile.kind

    @property
    def mode(self) -> PairingMode:
        return self.engine.mode

    @property
    def pending_mode(self) -> Optional[PairingMode]:
        return self.modes.pending_mode

    @property
    def state(self) -> EngineState:
        return self.engine.state

    @property
    def editing(self) -> bool:
        return self.engine.editing

    @property
    def is_self_paired(self) -> bool:
        return self.engine.mode == PairingMode.SELF_PAIRED

    @property
    def editor_visible(self) -> bool:
        """Whether staged selections are open for editing."""
        if self.is_self_paired:
            return True
        return self.engine.editing or len(self.engine) == 0

    @property
    def pairs(self) -> tuple[Pair, ...]:
        return self.engine.pairs

    def get_pairs(self) -> tuple[Pair, ...]:
        """Read-only snapshot of the committed pairs."""
        return self.engine.pairs

    def visible_pairs(self) -> tuple[Pair, ...]:
        """The finalized list as it should be shown; hidden while editing in bulk mode."""
        if self.engine.editing and not self.is_self_paired:
            return ()
        return self.engine.pairs

    def tracker(self, side: Side) -> SelectionTracker:
        """The selection for a side in the current mode."""
        side = Side(side)
        if self.is_self_paired:
            if side == Side.RIGHT:
                raise PairingValidationError(
                    ValidationReason.WRONG_MODE,
                    "Self-paired mode has no right-side selection",
                )
            return self.single
        return self.left if side == Side.LEFT else self.right

    def side_label(self, side: Side) -> str:
        return self.profile.left_label if Side(side) == Side.LEFT else self.profile.right_label

    def available_columns(self, side: Side) -> list[Column]:
        """Catalog columns on a side not yet used by a committed pair."""
        side = Side(side)
        tracker = self.left if side == Side.LEFT else self.right
        return tracker.available()

    def selectable_columns(self, side: Side) -> list[Column]:
        """Every column the editor offers for a side in the current mode."""
        return list(self.tracker(side).catalog)

    def selection_status(self) -> SelectionStatus:
        """Commit readiness of the staged selections."""
        if self.is_self_paired:
            count = len(self.single)
            return SelectionStatus(
                left_count=count, right_count=count, can_commit=True, count_mismatch=False
            )

        left_count, right_count = len(self.left), len(self.right)
        mismatch = left_count != right_count and (left_count > 0 or right_count > 0)
        message = None
        if mismatch:
            left_label, right_label = self.profile.left_label, self.profile.right_label
            message = (
                f"{left_label} and {right_label} must have the same number of columns. "
                f"Current: {left_label} ({left_count}), {right_label} ({right_count})."
            )
        return SelectionStatus(
            left_count=left_count,
            right_count=right_count,
            can_commit=left_count > 0 and left_count == right_count,
            count_mismatch=mismatch,
            message=message,
        )

    # Listeners

    def subscribe(self, listener: PairsListener) -> Callable[[], None]:
        """
        Register a listener for pair-list changes.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.engine.pairs
        for listener in list(self._listeners):
            listener(snapshot)

    # Selection editing

    def toggle_selection(self, side: Side, column_id: str) -> list[str]:
        """
        Toggle a column in a side's staged selection.

        In self-paired mode the change is committed immediately.

        Returns:
            The new selection order
        """
        tracker = self.tracker(side)

        if column_id not in tracker.catalog:
            self._stale(column_id, f"{tracker.name} catalog")
            return tracker.ids

        if not self.editor_visible:
            logger.warning(f"Ignoring selection of '{column_id}': editor is closed, call begin_edit()")
            return tracker.ids

        ids = tracker.toggle(column_id)
        if self.is_self_paired:
            self._commit_self_paired()
        return ids

    def reorder_selection(self, side: Side, from_id: str, to_id: str) -> bool:
        """
        Move a staged column to the position held by another.

        Returns:
            True if the selection changed
        """
        tracker = self.tracker(side)
        changed = tracker.reorder(from_id, to_id)
        if changed and self.is_self_paired:
            self._commit_self_paired()
        return changed

    # Commit and structural edits

    def commit(self) -> tuple[Pair, ...]:
        """
        Commit the staged selections as the new pair list.

        Raises:
            PairingValidationError: If the staged selections cannot be paired
        """
        if self.is_self_paired:
            return self._commit_self_paired()

        pairs = self.engine.commit_bulk(self.left.ids, self.right.ids)
        self._clear_staging()
        self._notify()
        return pairs

    def add_pair(self, left_id: Optional[str], right_id: Optional[str]) -> Pair:
        """
        Append a single pair.

        Raises:
            PairingValidationError: If a side is missing or unknown
        """
        if not left_id:
            raise PairingValidationError(
                ValidationReason.MISSING_COLUMN,
                f"Please select a {self.profile.left_label.lower()} column",
            )
        if not right_id:
            raise PairingValidationError(
                ValidationReason.MISSING_COLUMN,
                f"Please select a {self.profile.right_label.lower()} column",
            )
        pair = self.engine.add_pair(left_id, right_id)
        self._notify()
        return pair

    def remove(self, pair_id: str) -> bool:
        """Remove a pair; other pairs keep their ids and colors."""
        removed = self.engine.remove(pair_id)
        if removed:
            if self.is_self_paired:
                self.single.reset(self.engine.left_ids())
            self._notify()
        return removed

    def reorder(self, ordered_ids: Sequence[str]) -> bool:
        """Re-sequence the pairs by id and recolor them by position."""
        changed = self.engine.reorder(ordered_ids)
        if changed:
            if self.is_self_paired:
                self.single.reset(self.engine.left_ids())
            self._notify()
        return changed

    def move_pair(self, active_id: str, over_id: str) -> bool:
        """Move one pair to the position held by another (drag and drop)."""
        changed = self.engine.move(active_id, over_id)
        if changed:
            if self.is_self_paired:
                self.single.reset(self.engine.left_ids())
            self._notify()
        return changed

    def begin_edit(self) -> None:
        """Open the editor, seeding both selections from the committed pairs."""
        if self.is_self_paired:
            self.single.reset(self.engine.left_ids())
            return
        self.engine.begin_edit()
        self.left.reset(self.engine.left_ids())
        self.right.reset(self.engine.right_ids())
        logger.info(f"Editing {len(self.engine)} {self.kind.value} pairs")

    def end_edit(self) -> None:
        """Close the editor without committing."""
        self.engine.end_edit()
        self._clear_staging()

    # Mode switching

    def request_mode_change(self, mode: PairingMode) -> ModeChangeResult:
        result = self.modes.request_mode_change(mode)
        if result.status == ModeChangeStatus.APPLIED:
            self._after_mode_switch()
        return result

    def confirm_mode_change(self) -> Optional[ModeChangeResult]:
        result = self.modes.confirm()
        if result is not None:
            self._after_mode_switch()
            if result.discarded_pairs:
                self._notify()
        return result

    def cancel_mode_change(self) -> bool:
        return self.modes.cancel()

    def _after_mode_switch(self) -> None:
        self._clear_staging()
        self.single.clear()

    def _commit_self_paired(self) -> tuple[Pair, ...]:
        pairs = self.engine.commit_self_paired(self.single.ids)
        self._notify()
        return pairs

    def _clear_staging(self) -> None:
        self.left.clear()
        self.right.clear()

    def _stale(self, reference: str, context: str) -> None:
        self.engine._stale(reference, context)
