"""Tests for pairing modes and the mode controller."""

import pytest

from colpair.modes import PairingMode, ModeChangeStatus, ModeChangeResult
from colpair.modes.controller import ModeController


@pytest.fixture
def controller(engine) -> ModeController:
    """Mode controller over the bulk engine fixture."""
    return ModeController(engine)


class TestPairingMode:
    """Tests for PairingMode enum."""

    def test_pairing_mode_values(self):
        assert PairingMode.BULK_POSITIONAL == "bulk_positional"
        assert PairingMode.SELF_PAIRED == "self_paired"

    def test_pairing_mode_from_string(self):
        assert PairingMode("self_paired") is PairingMode.SELF_PAIRED


class TestModeChangeResult:
    """Tests for ModeChangeResult model."""

    def test_result_defaults(self):
        result = ModeChangeResult(
            status=ModeChangeStatus.UNCHANGED,
            current_mode=PairingMode.BULK_POSITIONAL,
        )
        assert result.pending_mode is None
        assert result.discarded_pairs == 0


class TestModeController:
    """Tests for ModeController."""

    def test_switch_immediately_without_pairs(self, controller, engine):
        result = controller.request_mode_change(PairingMode.SELF_PAIRED)

        assert result.status == ModeChangeStatus.APPLIED
        assert engine.mode == PairingMode.SELF_PAIRED
        assert controller.is_pending is False

    def test_same_mode_is_unchanged(self, controller):
        result = controller.request_mode_change(PairingMode.BULK_POSITIONAL)
        assert result.status == ModeChangeStatus.UNCHANGED

    def test_switch_with_pairs_waits_for_confirmation(self, controller, engine):
        pairs = engine.commit_bulk(["s1"], ["t1"])

        result = controller.request_mode_change(PairingMode.SELF_PAIRED)

        assert result.status == ModeChangeStatus.PENDING_CONFIRMATION
        assert result.pending_mode == PairingMode.SELF_PAIRED
        assert result.discarded_pairs == 1
        assert engine.mode == PairingMode.BULK_POSITIONAL
        assert engine.pairs == pairs

    def test_confirm_clears_pairs_and_switches(self, controller, engine):
        engine.commit_bulk(["s1", "s2"], ["t1", "t2"])
        engine.begin_edit()
        controller.request_mode_change(PairingMode.SELF_PAIRED)

        result = controller.confirm()

        assert result.status == ModeChangeStatus.APPLIED
        assert result.discarded_pairs == 2
        assert engine.pairs == ()
        assert engine.mode == PairingMode.SELF_PAIRED
        assert engine.editing is False
        assert controller.pending_mode is None

    def test_cancel_keeps_mode_and_pairs(self, controller, engine):
        pairs = engine.commit_bulk(["s1"], ["t1"])
        controller.request_mode_change(PairingMode.SELF_PAIRED)

        assert controller.cancel() is True

        assert engine.mode == PairingMode.BULK_POSITIONAL
        assert engine.pairs == pairs
        assert controller.is_pending is False

    def test_confirm_without_pending_is_noop(self, controller, engine):
        engine.commit_bulk(["s1"], ["t1"])
        assert controller.confirm() is None
        assert len(engine) == 1

    def test_cancel_without_pending(self, controller):
        assert controller.cancel() is False

    def test_request_current_mode_withdraws_pending(self, controller, engine):
        engine.commit_bulk(["s1"], ["t1"])
        controller.request_mode_change(PairingMode.SELF_PAIRED)

        result = controller.request_mode_change(PairingMode.BULK_POSITIONAL)

        assert result.status == ModeChangeStatus.UNCHANGED
        assert controller.pending_mode is None
        assert controller.confirm() is None
        assert len(engine) == 1
