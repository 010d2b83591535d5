"""Test WallClock and SimClock."""

from datetime import datetime, timedelta, timezone

import pytest

from pattern_catalog.core.clock import CATALOG_EPOCH, SimClock, WallClock


class TestWallClock:
    def test_now_returns_utc(self):
        now = WallClock().now()
        assert now.tzinfo == timezone.utc

    def test_now_is_recent(self):
        diff = abs((datetime.now(timezone.utc) - WallClock().now()).total_seconds())
        assert diff < 1.0

    def test_advance_does_not_jump(self):
        clock = WallClock()
        before = clock.now()
        clock.advance(3600)
        assert (clock.now() - before).total_seconds() < 1.0

    def test_negative_advance_rejected(self):
        with pytest.raises(ValueError):
            WallClock().advance(-1)


class TestSimClock:
    def test_default_start(self):
        assert SimClock().now() == CATALOG_EPOCH == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_custom_start(self, sim_clock):
        assert sim_clock.now() == datetime(2024, 6, 1, tzinfo=timezone.utc)

    def test_now_does_not_drift(self, sim_clock):
        assert sim_clock.now() == sim_clock.now()

    def test_advance(self, sim_clock):
        start = sim_clock.now()
        sim_clock.advance(1)
        sim_clock.advance(0.5)
        assert sim_clock.now() == start + timedelta(seconds=1.5)

    def test_cannot_go_backwards(self, sim_clock):
        with pytest.raises(ValueError, match="cannot go backwards"):
            sim_clock.advance(-1)
