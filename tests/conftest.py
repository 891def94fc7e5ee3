"""
Sugoroku - Test Configuration and Fixtures

Common boards, rosters and file contents for all test modules.
"""

import pytest

from sugoroku.engine.area import Area
from sugoroku.engine.base import Roster
from sugoroku.engine.effects import PushSelf
from sugoroku.engine.world import World


# =============================================================================
# BOARDS
# =============================================================================

@pytest.fixture
def push_world() -> World:
    """Start, one ``PushSelf: num=2`` square, goal."""
    return World.build(
        title="Push",
        opening_message="Go!",
        dice_max=6,
        start_description="Start",
        goal_description="Goal",
        areas=[Area("Tailwind", (PushSelf(2),))],
    )


@pytest.fixture
def plain_world() -> World:
    """Start, eight effect-free squares, goal (last index 9)."""
    return World.build(
        title="Plain",
        opening_message="",
        dice_max=6,
        start_description="Start",
        goal_description="Goal",
        areas=[Area(f"Square {i}") for i in range(1, 9)],
    )


def make_world(*areas: Area, dice_max: int = 6, min_dice: int = 1) -> World:
    """Board with the given squares between start and goal."""
    return World.build(
        title="Test",
        opening_message="",
        dice_max=dice_max,
        start_description="Start",
        goal_description="Goal",
        areas=areas,
        min_dice=min_dice,
    )


@pytest.fixture
def world_factory():
    return make_world


# =============================================================================
# ROSTERS
# =============================================================================

@pytest.fixture
def roster_ab() -> Roster:
    return Roster.from_names(["A", "B"])


@pytest.fixture
def roster_abc() -> Roster:
    return Roster.from_names(["A", "B", "C"])


# =============================================================================
# FILE CONTENTS
# =============================================================================

@pytest.fixture
def player_list_toml() -> str:
    return """
[[player]]
name = "Alice"

[[player]]
name = "Bob"
"""


@pytest.fixture
def world_toml() -> str:
    return """
[general]
title = "Test Board"
opening_msg = "Welcome"
start_description = "Start square"
goal_description = "Goal square"
dice_max = 6

[[area]]
description = "Plain field"

[[area]]
description = "Tailwind"
[[area.effect]]
element = "PushSelf: num=2"

[[area]]
description = "Tea house"
[[area.effect]]
element = "SkipSelf: times=1"
[[area.effect]]
element = "PullOthersAll: num=1"
"""
