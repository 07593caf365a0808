"""Tests for session lifecycle, tick order and end-to-end playback."""
from __future__ import annotations

import json

import pytest

from stakeout.config import StakeoutConfig
from stakeout.cues import Turn, at
from stakeout.house import DoorState
from stakeout.inputs import Commands
from stakeout.layout import Mark
from stakeout.session import Phase, Session
from stakeout.signals import AMBIENCE, FLASH, PHASE, SOUND
from stakeout.types import CueError, Timecode


def _run_to(session: Session, timecode: Timecode) -> None:
    while session.clock.timecode < timecode:
        session.step()


def _shoot_three_and_finish(session: Session) -> None:
    for _ in range(3):
        session.run(30)
        session.step(Commands(request_capture=True))
    session.play_through()


@pytest.fixture
def session() -> Session:
    s = Session(StakeoutConfig(seed=11))
    s.start()
    return s


class TestPhases:
    def test_starts_on_title(self) -> None:
        s = Session()
        assert s.phase is Phase.TITLE
        s.step()
        assert s.phase is Phase.TITLE
        assert s.clock.tick_number == 0

    def test_proceed_starts_show(self) -> None:
        s = Session()
        s.step(Commands(proceed=True))
        assert s.phase is Phase.SHOW
        assert s.clock.tick_number == 0

    def test_play_through_reaches_darkroom(self, session: Session) -> None:
        ran = session.play_through(limit=8000)
        assert session.phase is Phase.DARKROOM
        assert 103 * 60 < ran < 8000
        assert session.sheet.fired_count() == len(session.sheet)
        assert session.curtain == pytest.approx(1.0, abs=0.01)

    def test_darkroom_ignores_ticks_without_proceed(self, session: Session) -> None:
        session.play_through()
        tick = session.clock.tick_number
        session.run(5)
        assert session.phase is Phase.DARKROOM
        assert session.clock.tick_number == tick

    def test_proceed_from_darkroom_restarts(self, session: Session) -> None:
        session.step(Commands(request_capture=True))
        session.play_through()
        session.step(Commands(proceed=True))
        assert session.phase is Phase.SHOW
        assert session.clock.tick_number == 0
        assert session.film_remaining == 24
        assert session.photos == ()
        assert session.collage == ()

    def test_exact_firing_also_completes(self) -> None:
        s = Session(StakeoutConfig(firing="exact", seed=1))
        s.play_through()
        assert s.phase is Phase.DARKROOM
        assert s.sheet.fired_count() == len(s.sheet)


class TestCues:
    def test_first_cue_fires_at_one_second(self, session: Session) -> None:
        maroon = session.cast["maroon"]
        start = maroon.position
        session.run(59)
        assert not maroon.moving
        assert maroon.position == start
        session.step()
        assert session.clock.timecode == at(0, 1)
        assert maroon.moving
        assert maroon.velocity == (-1.0, 0.0)
        assert maroon.position == (start[0] - 1, start[1])

    def test_maroon_reaches_first_mark(self, session: Session) -> None:
        _run_to(session, at(0, 3, 59))
        maroon = session.cast["maroon"]
        target_x, target_y = session.layout.resolve(Mark(3, 4))
        assert not maroon.moving
        assert abs(maroon.position[0] - target_x) <= 1
        assert maroon.position[1] == target_y

    def test_light_cue(self, session: Session) -> None:
        _run_to(session, at(0, 39, 59))
        assert not session.house.is_lit(2, 4)
        session.step()
        assert session.house.is_lit(2, 4)
        assert session.house.is_lit(2, 5)

    def test_door_cues(self, session: Session) -> None:
        _run_to(session, at(0, 34, 14))
        assert session.house.door((2, 1)) is DoorState.CLOSED
        session.step()
        assert session.house.door((2, 1)) is DoorState.OPENING
        _run_to(session, at(0, 34, 44))
        assert session.house.door((2, 1)) is DoorState.OPENING
        session.step()
        assert session.house.door((2, 1)) is DoorState.OPEN
        assert session.house.door((2, 4)) is DoorState.CLOSED

    def test_sound_cue_reaches_subscribers(self, session: Session) -> None:
        clips: list[tuple[Timecode, str]] = []
        session.bus.subscribe(
            SOUND, lambda name, data: clips.append((session.clock.timecode, data["clip"]))
        )
        _run_to(session, at(1, 15))
        assert clips == [(at(1, 14, 30), "gunshot")]

    def test_bad_cue_sheet_rejected(self) -> None:
        with pytest.raises(CueError):
            Session(cues=[Turn(at(0, 1), "mauve", 1)])


class TestCapture:
    def test_shutter_command(self, session: Session) -> None:
        session.step(Commands(focus_right=True, request_capture=True))
        assert len(session.photos) == 1
        photo = session.photos[0]
        assert photo.window == (1, 0)
        assert photo.taken_at == Timecode(0, 0, 1)
        assert session.film.glare == 1.0
        assert session.film_remaining == 23

    def test_never_more_than_24(self, session: Session) -> None:
        results = [session.request_capture() for _ in range(30)]
        assert results.count(True) == 24
        assert session.film_remaining == 0
        session.step(Commands(request_capture=True))
        assert len(session.photos) == 24

    def test_refused_outside_show(self) -> None:
        s = Session()
        assert s.request_capture() is False
        assert s.photos == ()

    def test_frame_source(self) -> None:
        s = Session(frame_source=lambda: "frame")
        s.start()
        s.request_capture()
        assert s.photos[0].frame == "frame"

    def test_zoom_recorded(self, session: Session) -> None:
        session.step(Commands(zoom_held=True, request_capture=True))
        assert session.focus.zoomed
        assert session.photos[0].zoomed
        session.step()
        assert not session.focus.zoomed

    def test_flash_signal(self, session: Session) -> None:
        flashes: list[int] = []
        session.bus.subscribe(FLASH, lambda name, data: flashes.append(data["remaining"]))
        session.step(Commands(request_capture=True))
        assert flashes == [23]


class TestDarkroom:
    def _shoot_show(self, seed: int) -> Session:
        s = Session(StakeoutConfig(seed=seed))
        s.start()
        _shoot_three_and_finish(s)
        return s

    def test_collage_one_placement_per_photo(self) -> None:
        s = self._shoot_show(5)
        assert len(s.photos) == 3
        assert len(s.collage) == 3

    def test_collage_reproducible_from_seed(self) -> None:
        assert self._shoot_show(5).collage == self._shoot_show(5).collage

    def test_darkroom_hook_runs_once(self, session: Session) -> None:
        calls: list[Phase] = []
        session.on_darkroom(lambda s: calls.append(s.phase))
        session.play_through()
        session.run(10)
        assert calls == [Phase.DARKROOM]


class TestSignals:
    def test_lifecycle_signals(self, session: Session) -> None:
        received: list[tuple[str, dict]] = []
        session.bus.subscribe("*", lambda name, data: received.append((name, data)))
        session.restart()
        session.step()
        assert (PHASE, {"phase": "show"}) not in received
        assert (AMBIENCE, {"action": "play"}) in received

        session.play_through()
        assert received.count((AMBIENCE, {"action": "fade"})) == 1
        assert (PHASE, {"phase": "darkroom"}) in received

    def test_title_to_show_publishes_phase(self) -> None:
        s = Session()
        received: list[str] = []
        s.bus.subscribe(PHASE, lambda name, data: received.append(data["phase"]))
        s.step(Commands(proceed=True))
        s.step()
        assert received == ["show"]


class TestRestart:
    def test_restart_replays_identically(self, session: Session) -> None:
        session.run(900)
        first = session.snapshot()
        session.restart()
        session.run(900)
        assert session.snapshot() == first

    def test_restart_lays_out_the_same_collage(self) -> None:
        fresh = Session(StakeoutConfig(seed=5))
        fresh.start()
        _shoot_three_and_finish(fresh)

        replayed = Session(StakeoutConfig(seed=5))
        replayed.start()
        _shoot_three_and_finish(replayed)
        replayed.step(Commands(proceed=True))
        assert replayed.phase is Phase.SHOW
        _shoot_three_and_finish(replayed)

        assert replayed.collage == fresh.collage

    def test_start_hook(self) -> None:
        s = Session()
        starts: list[int] = []
        s.on_start(lambda sess: starts.append(sess.clock.tick_number))
        s.start()
        s.run(10)
        s.restart()
        assert starts == [0, 0]


class TestSystems:
    def test_extra_system_sees_post_tick_time(self, session: Session) -> None:
        seen: list[Timecode] = []
        session.add_system(lambda s, ctx: seen.append(ctx.timecode))
        session.run(2)
        assert seen == [Timecode(0, 0, 1), Timecode(0, 0, 2)]

    def test_request_stop_ends_run(self, session: Session) -> None:
        def stopper(s: Session, ctx) -> None:
            if ctx.tick_number == 3:
                ctx.request_stop()

        session.add_system(stopper)
        assert session.run(10) == 3


class TestSnapshot:
    def test_json_compatible(self, session: Session) -> None:
        session.run(120)
        snap = session.snapshot()
        assert json.loads(json.dumps(snap)) == snap
        assert snap["phase"] == "show"
        assert snap["timecode"] == "0:02.00"
        assert len(snap["characters"]) == 6
        assert snap["film_remaining"] == 24
