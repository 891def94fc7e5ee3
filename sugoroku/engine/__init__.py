"""
Sugoroku Game Engine.

Pure Python game logic with zero UI/IO dependencies.
Handles die-roll resolution, area effects, goal arrivals and turn order.
"""

from sugoroku.engine.area import Area
from sugoroku.engine.base import PlayerStatus, Roster
from sugoroku.engine.effects import (
    EFFECT_TYPES,
    AreaEffect,
    GoToStart,
    NoEffect,
    PullOthersAll,
    PullSelf,
    PushOthersAll,
    PushSelf,
    SkipSelf,
    parse_effect,
)
from sugoroku.engine.errors import GameSystemError, OutOfRangeDiceError
from sugoroku.engine.locale import DEFAULT_LOCALE, Locale
from sugoroku.engine.session import GameSession, Phase, RollOutcome
from sugoroku.engine.turn_order import next_player
from sugoroku.engine.world import World

__all__ = [
    # State
    "PlayerStatus",
    "Roster",
    # Board
    "Area",
    "World",
    # Effects
    "AreaEffect",
    "EFFECT_TYPES",
    "NoEffect",
    "GoToStart",
    "SkipSelf",
    "PushSelf",
    "PullSelf",
    "PushOthersAll",
    "PullOthersAll",
    "parse_effect",
    # Turns
    "next_player",
    "GameSession",
    "Phase",
    "RollOutcome",
    # Errors
    "GameSystemError",
    "OutOfRangeDiceError",
    # Locale
    "DEFAULT_LOCALE",
    "Locale",
]
