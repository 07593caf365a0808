"""Tests for peripheral decoding and input translation."""
from __future__ import annotations

import pytest

from stakeout.inputs import (
    NO_COMMANDS,
    ByteFeed,
    ChannelBuffer,
    Commands,
    InputTranslator,
    Key,
    KeyboardState,
    PeripheralSource,
    decode,
)

# Light sensor uncovered, nothing pressed.
REST = 16


class TestDecode:
    def test_example_byte(self) -> None:
        reading = decode(37)
        assert (reading.snap, reading.light, reading.down,
                reading.left, reading.right, reading.up) == (1, 0, 0, 1, 0, 1)

    def test_single_bits(self) -> None:
        assert decode(1).up == 1
        assert decode(2).right == 1
        assert decode(4).left == 1
        assert decode(8).down == 1
        assert decode(16).light == 1
        assert decode(32).snap == 1

    def test_snap_takes_high_bits(self) -> None:
        assert decode(64).snap == 2
        assert decode(255).snap == 7

    def test_every_byte_reassembles(self) -> None:
        for b in range(256):
            r = decode(b)
            assert r.snap * 32 + r.light * 16 + r.down * 8 + r.left * 4 + r.right * 2 + r.up == b

    @pytest.mark.parametrize("bad", [-1, 256])
    def test_out_of_range(self, bad: int) -> None:
        with pytest.raises(ValueError):
            decode(bad)


class TestChannelBuffer:
    def test_rising_edge(self) -> None:
        buf = ChannelBuffer()
        buf.push(1)
        assert buf.rising()
        buf.push(1)
        assert not buf.rising()
        buf.push(0)
        assert not buf.rising()


class TestByteFeed:
    def test_conforms_to_protocol(self) -> None:
        assert isinstance(ByteFeed([]), PeripheralSource)

    def test_exhausted_returns_none(self) -> None:
        feed = ByteFeed([5])
        assert feed.poll() == 5
        assert feed.poll() is None


class TestKeyboard:
    def test_arrows(self) -> None:
        t = InputTranslator()
        cmd = t.translate(KeyboardState(pressed=[Key.LEFT, Key.DOWN]))
        assert cmd.focus_left and cmd.focus_down
        assert not cmd.focus_right and not cmd.focus_up

    def test_shutter_also_proceeds(self) -> None:
        cmd = InputTranslator().translate(KeyboardState(pressed=[Key.SHUTTER]))
        assert cmd.request_capture
        assert cmd.proceed

    def test_zoom_held(self) -> None:
        cmd = InputTranslator().translate(KeyboardState(zoom_held=True))
        assert cmd == Commands(zoom_held=True)

    def test_nothing_pressed(self) -> None:
        assert InputTranslator().translate(KeyboardState()) == NO_COMMANDS
        assert InputTranslator().translate() == NO_COMMANDS


class TestPeripheral:
    def _run(self, data: list[int | None]) -> list[Commands]:
        t = InputTranslator()
        feed = ByteFeed(data)
        return [t.translate(peripheral=feed) for _ in data]

    def test_press_fires_once(self) -> None:
        cmds = self._run([REST, REST + 1, REST + 1, REST + 1])
        assert [c.focus_up for c in cmds] == [False, True, False, False]

    def test_none_repeats_last_byte(self) -> None:
        cmds = self._run([REST, REST + 2, None, None])
        assert [c.focus_right for c in cmds] == [False, True, False, False]

    def test_release_and_press_again(self) -> None:
        cmds = self._run([REST, REST + 4, REST, REST + 4])
        assert [c.focus_left for c in cmds] == [False, True, False, True]

    def test_one_command_per_tick_by_priority(self) -> None:
        cmds = self._run([REST, REST + 1 + 2 + 4 + 8 + 32])
        assert cmds[1] == Commands(focus_up=True)

    def test_priority_order(self) -> None:
        assert self._run([REST, REST + 2 + 4])[1] == Commands(focus_right=True)
        assert self._run([REST, REST + 4 + 8])[1] == Commands(focus_left=True)
        assert self._run([REST, REST + 8 + 32])[1] == Commands(focus_down=True)
        assert self._run([REST, REST + 32])[1] == Commands(request_capture=True)

    def test_covered_light_sensor_zooms(self) -> None:
        cmds = self._run([REST, 0, 0])
        assert [c.zoom_held for c in cmds] == [False, True, True]

    def test_disconnected_is_ignored(self) -> None:
        t = InputTranslator()
        cmd = t.translate(peripheral=ByteFeed([0, 1], connected=False))
        assert cmd == NO_COMMANDS

    def test_keyboard_and_peripheral_merge(self) -> None:
        t = InputTranslator()
        feed = ByteFeed([REST, REST + 1])
        t.translate(peripheral=feed)
        cmd = t.translate(KeyboardState(pressed=[Key.LEFT]), feed)
        assert cmd.focus_left and cmd.focus_up

    def test_reset_clears_edges(self) -> None:
        t = InputTranslator()
        t.sample(REST + 1)
        t.reset()
        assert t.channel("up").current == 0
        assert t.channel("up").previous == 0
