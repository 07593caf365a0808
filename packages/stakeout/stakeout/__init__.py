"""stakeout - a cue-scheduled puppet show watched through a camera viewfinder."""

from stakeout.beatsheet import BEAT_SHEET
from stakeout.capture import FilmRoll, Photo
from stakeout.cast import CAST, Cast, Character, MoveState
from stakeout.clock import Clock
from stakeout.config import StakeoutConfig
from stakeout.cues import Animate, Light, Move, Snap, Sound, Turn
from stakeout.house import DoorState, House
from stakeout.inputs import ByteFeed, Commands, InputTranslator, Key, KeyboardState, PeripheralSource
from stakeout.layout import HouseLayout, Mark
from stakeout.scheduler import CueDispatcher, CueSheet
from stakeout.session import Phase, Session
from stakeout.signals import SignalBus
from stakeout.types import CueError, TickContext, Timecode

__all__ = [
    "Session",
    "Phase",
    "StakeoutConfig",
    "Clock",
    "Timecode",
    "TickContext",
    "CueError",
    "HouseLayout",
    "Mark",
    "Cast",
    "Character",
    "MoveState",
    "CAST",
    "House",
    "DoorState",
    "Move",
    "Turn",
    "Snap",
    "Light",
    "Animate",
    "Sound",
    "CueSheet",
    "CueDispatcher",
    "BEAT_SHEET",
    "SignalBus",
    "FilmRoll",
    "Photo",
    "InputTranslator",
    "Commands",
    "Key",
    "KeyboardState",
    "PeripheralSource",
    "ByteFeed",
]
