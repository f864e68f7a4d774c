"""
Tests for input mapping and clocks.
"""
import dataclasses

import pytest
from vent_escape.gameplay.controls import Action, InputSnapshot, KEY_BINDINGS, IDLE
from vent_escape.gameplay.clock import ManualClock, SystemClock


class TestInputSnapshot:
    """Tests for InputSnapshot."""

    def test_idle_default(self):
        assert IDLE == InputSnapshot()
        assert IDLE.is_idle
        assert not IDLE.sprint

    def test_from_keys_wasd(self):
        snapshot = InputSnapshot.from_keys({'w': True, 'd': True, 'shift': True, 's': False})
        assert snapshot == InputSnapshot(up=True, right=True, sprint=True)

    def test_from_keys_arrows(self):
        snapshot = InputSnapshot.from_keys({'ArrowLeft': True, 'arrowdown': True})
        assert snapshot.left
        assert snapshot.down
        assert not snapshot.up

    def test_unknown_keys_ignored(self):
        snapshot = InputSnapshot.from_keys({'q': True, ' ': True})
        assert snapshot == IDLE

    def test_sprint_alone_is_idle(self):
        """Sprint without a direction does not move the player."""
        assert InputSnapshot(sprint=True).is_idle

    def test_every_action_bound(self):
        assert set(KEY_BINDINGS.values()) == set(Action)

    def test_snapshot_is_frozen(self):
        snapshot = InputSnapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.up = True


class TestClocks:
    """Tests for clock sources."""

    def test_manual_clock(self):
        clock = ManualClock(100)
        assert clock.now_ms() == 100
        clock.advance(50)
        assert clock.now_ms() == 150

    def test_manual_clock_cannot_go_back(self):
        with pytest.raises(ValueError):
            ManualClock().advance(-1)

    def test_system_clock_is_monotonic(self):
        clock = SystemClock()
        first = clock.now_ms()
        assert clock.now_ms() >= first
