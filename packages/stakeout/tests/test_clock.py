"""Tests for the show clock and timecodes."""
from __future__ import annotations

import pytest

from stakeout.clock import Clock
from stakeout.types import TickContext, Timecode


class TestTimecode:
    def test_ordering_is_lexicographic(self) -> None:
        assert Timecode(0, 59, 59) < Timecode(1, 0, 0)
        assert Timecode(0, 1, 30) < Timecode(0, 2, 0)
        assert Timecode(1, 2, 3) == Timecode(1, 2, 3)

    def test_str(self) -> None:
        assert str(Timecode(1, 4, 5)) == "1:04.05"

    def test_frame_conversion(self) -> None:
        tc = Timecode(1, 14, 30)
        assert tc.to_frames(60) == (74 * 60) + 30
        assert Timecode.from_frames(tc.to_frames(60), 60) == tc

    def test_hashable(self) -> None:
        assert {Timecode(0, 1, 0): "a"}[Timecode(0, 1, 0)] == "a"


class TestClock:
    def test_starts_at_zero(self) -> None:
        clock = Clock()
        assert clock.tick_number == 0
        assert clock.timecode == Timecode(0, 0, 0)

    def test_advance_increments_frame(self) -> None:
        clock = Clock()
        assert clock.advance() == Timecode(0, 0, 1)
        assert clock.tick_number == 1

    def test_carry_into_seconds(self) -> None:
        clock = Clock(fps=60)
        for _ in range(60):
            clock.advance()
        assert clock.timecode == Timecode(0, 1, 0)
        assert clock.frames == 0
        assert clock.seconds == 1

    def test_carry_into_minutes(self) -> None:
        clock = Clock(fps=60)
        for _ in range(60 * 60):
            clock.advance()
        assert clock.timecode == Timecode(1, 0, 0)
        assert clock.minutes == 1

    def test_every_timecode_visited_in_order(self) -> None:
        clock = Clock(fps=60)
        seen = [clock.advance() for _ in range(3 * 60)]
        assert seen == [Timecode.from_frames(n, 60) for n in range(1, 3 * 60 + 1)]

    def test_frames_always_below_fps(self) -> None:
        clock = Clock(fps=24)
        for _ in range(500):
            clock.advance()
            assert 0 <= clock.frames < 24
            assert 0 <= clock.seconds < 60

    def test_tick_alias(self) -> None:
        clock = Clock()
        clock.tick()
        assert clock.tick_number == 1

    def test_reset(self) -> None:
        clock = Clock()
        for _ in range(100):
            clock.advance()
        clock.reset()
        assert clock.tick_number == 0
        assert clock.timecode == Timecode()

    def test_context(self) -> None:
        clock = Clock(fps=60)
        clock.advance()
        ctx = clock.context(lambda: None)
        assert isinstance(ctx, TickContext)
        assert ctx.tick_number == 1
        assert ctx.timecode == Timecode(0, 0, 1)
        assert ctx.dt == pytest.approx(1 / 60)

    def test_invalid_fps(self) -> None:
        with pytest.raises(ValueError):
            Clock(fps=0)
