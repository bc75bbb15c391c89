"""Mode controller gating destructive pairing-mode switches."""

import logging
from typing import Optional, TYPE_CHECKING

from . import PairingMode, ModeChangeStatus, ModeChangeResult

if TYPE_CHECKING:
    from ..pairing.engine import PairingEngine

logger = logging.getLogger(__name__)


class ModeController:
    """
    Mediates mode switches for one relation.

    A switch that would discard committed pairs is held as pending until
    confirm() or cancel() is called.
    """

    def __init__(self, engine: "PairingEngine"):
        self.engine = engine
        self._pending: Optional[PairingMode] = None

    @property
    def mode(self) -> PairingMode:
        return self.engine.mode

    @property
    def pending_mode(self) -> Optional[PairingMode]:
        return self._pending

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    def request_mode_change(self, new_mode: PairingMode) -> ModeChangeResult:
        """
        Request a switch to new_mode.

        Switches immediately when the relation holds no pairs. Otherwise the
        request is held for confirmation and nothing changes yet. A request
        for the current mode withdraws any pending request.
        """
        new_mode = PairingMode(new_mode)

        if new_mode == self.engine.mode:
            if self._pending is not None:
                logger.info(f"Withdrew pending switch to {self._pending.value}")
                self._pending = None
            return self._result(ModeChangeStatus.UNCHANGED, f"Already in {new_mode.value} mode")

        pair_count = len(self.engine)
        if pair_count == 0:
            self._pending = None
            self.engine.set_mode(new_mode)
            logger.info(f"Switched to {new_mode.value} mode")
            return self._result(ModeChangeStatus.APPLIED, f"Switched to {new_mode.value} mode")

        self._pending = new_mode
        logger.info(
            f"Switch to {new_mode.value} mode awaiting confirmation "
            f"({pair_count} pairs would be cleared)"
        )
        return self._result(
            ModeChangeStatus.PENDING_CONFIRMATION,
            f"Changing the mode will clear all {pair_count} current pairs",
            discarded=pair_count,
        )

    def confirm(self) -> Optional[ModeChangeResult]:
        """
        Apply the pending mode, discarding every pair.

        Returns:
            The applied result, or None if nothing was pending
        """
        if self._pending is None:
            logger.warning("Confirm called with no pending mode change")
            return None

        new_mode = self._pending
        self._pending = None
        discarded = self.engine.clear()
        self.engine.set_mode(new_mode)
        logger.info(f"Switched to {new_mode.value} mode, cleared {discarded} pairs")
        return self._result(
            ModeChangeStatus.APPLIED,
            f"Switched to {new_mode.value} mode",
            discarded=discarded,
        )

    def cancel(self) -> bool:
        """
        Drop the pending request, leaving mode and pairs untouched.

        Returns:
            True if a request was pending
        """
        if self._pending is None:
            return False
        logger.info(f"Cancelled pending switch to {self._pending.value}")
        self._pending = None
        return True

    def _result(self, status: ModeChangeStatus, message: str, discarded: int = 0) -> ModeChangeResult:
        return ModeChangeResult(
            status=status,
            current_mode=self.engine.mode,
            pending_mode=self._pending,
            discarded_pairs=discarded,
            message=message,
        )


__all__ = ["ModeController"]
