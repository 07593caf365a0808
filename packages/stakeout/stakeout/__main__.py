"""Headless replay of the show: ``python -m stakeout``.

Runs the full cue sheet with no renderer and prints where everyone ended
up. Useful for checking a cue sheet edit without opening a window.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from stakeout.config import FIRING_MODES, StakeoutConfig
from stakeout.inputs import Commands
from stakeout.session import Phase, Session
from stakeout.signals import SOUND


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="stakeout", description="Replay the stakeout show headless")
    p.add_argument("--ticks", type=int, default=None,
                   help="Stop after this many ticks (default: run to the darkroom)")
    p.add_argument("--firing", choices=FIRING_MODES, default="catch_up",
                   help="Cue firing policy (default: catch_up)")
    p.add_argument("--seed", type=int, default=None, help="Collage seed")
    p.add_argument("--shoot-every", type=int, default=0, metavar="N",
                   help="Take a photo every N ticks (default: never)")
    p.add_argument("--snapshot", action="store_true",
                   help="Print the final snapshot as JSON")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    session = Session(StakeoutConfig(firing=args.firing, seed=args.seed))
    sounds: list[str] = []
    session.bus.subscribe(SOUND, lambda name, data: sounds.append(data["clip"]))

    session.start()
    shutter = Commands(request_capture=True)
    ticks = 0
    while session.phase is Phase.SHOW:
        if args.ticks is not None and ticks >= args.ticks:
            break
        shoot = args.shoot_every > 0 and ticks % args.shoot_every == args.shoot_every - 1
        session.step(shutter if shoot else None)
        ticks += 1

    if args.snapshot:
        json.dump(session.snapshot(), sys.stdout, indent=2)
        print()
        return 0

    print(f"Stopped at {session.clock.timecode} after {ticks} ticks ({session.phase.value})")
    print(f"Cues fired: {session.sheet.fired_count()}/{len(session.sheet)}")
    print(f"Photos: {len(session.photos)}, film left: {session.film_remaining}")
    if sounds:
        print(f"Sounds: {', '.join(sounds)}")
    for character in session.cast:
        x, y = character.position
        print(f"  {session.cast.title(character.name):<16} ({x:7.1f}, {y:7.1f}) {character.state.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
