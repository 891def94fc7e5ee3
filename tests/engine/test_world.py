"""
Sugoroku - World Tests

Tests for World construction and resolve_roll(), the engine's state
transition.
"""

import random

import pytest

from sugoroku.engine.area import Area
from sugoroku.engine.base import PlayerStatus, Roster
from sugoroku.engine.effects import (
    GoToStart,
    PullOthersAll,
    PullSelf,
    PushOthersAll,
    PushSelf,
    SkipSelf,
)
from sugoroku.engine.errors import (
    NotFoundPlayerError,
    OutOfRangeDiceError,
    OutOfRangePositionError,
)
from sugoroku.engine.locale import Locale
from sugoroku.engine.turn_order import next_player
from sugoroku.engine.world import World

EN = Locale.ENGLISH


def _positions(roster: Roster) -> dict[str, PlayerStatus]:
    return {name: PlayerStatus(**vars(status)) for name, status in roster.statuses.items()}


# === Construction ===


class TestWorldConstruction:
    def test_build_adds_start_and_goal(self, push_world):
        assert len(push_world.area_list) == 3
        assert push_world.area_list[0].description == "Start"
        assert push_world.area_list[-1].description == "Goal"
        assert push_world.last_index == 2

    def test_accessors(self, push_world):
        assert push_world.title == "Push"
        assert push_world.opening_message == "Go!"
        assert push_world.dice_max == 6
        assert push_world.min_dice == 1
        assert push_world.goal_arrivals == 0

    def test_start_description(self, push_world):
        assert push_world.start_description(EN).startswith("Start\n\nEffects\n")

    def test_needs_two_areas(self):
        with pytest.raises(ValueError, match="start and a goal"):
            World(title="", opening_message="", dice_max=6, area_list=(Area("only"),))

    def test_dice_max_must_be_positive(self):
        with pytest.raises(ValueError, match="dice_max"):
            World.build("", "", 0, "Start", "Goal")

    def test_min_dice_must_be_zero_or_one(self):
        with pytest.raises(ValueError, match="Minimum dice"):
            World.build("", "", 6, "Start", "Goal", min_dice=2)

    def test_roll_dice_in_range(self, push_world):
        values = {push_world.roll_dice() for _ in range(300)}
        assert values <= set(range(1, 7))
        assert len(values) > 1


# === Dice validation ===


class TestDiceValidation:
    @pytest.mark.parametrize("dice", [0, 7, 100, -3])
    def test_out_of_range_leaves_state_unchanged(self, push_world, roster_ab, dice):
        before = _positions(roster_ab)
        with pytest.raises(OutOfRangeDiceError) as exc_info:
            push_world.resolve_roll(EN, dice, "A", roster_ab.order, roster_ab.statuses)
        assert exc_info.value.value == dice
        assert roster_ab.statuses == before
        assert push_world.goal_arrivals == 0

    def test_zero_accepted_when_min_dice_is_zero(self, world_factory, roster_ab):
        world = world_factory(Area("One"), min_dice=0)
        description = world.resolve_roll(EN, 0, "A", roster_ab.order, roster_ab.statuses)
        assert roster_ab.status("A").position == 0
        assert description == world.start_description(EN)

    def test_dice_max_accepted(self, plain_world, roster_ab):
        plain_world.resolve_roll(EN, 6, "A", roster_ab.order, roster_ab.statuses)
        assert roster_ab.status("A").position == 6


# === Resolution ===


class TestResolveRoll:
    def test_push_square_reaches_goal(self, push_world, roster_ab):
        description = push_world.resolve_roll(EN, 1, "A", roster_ab.order, roster_ab.statuses)
        status = roster_ab.status("A")
        assert status.position == 2
        assert status.arrival_rank == 1
        assert description == push_world.area_list[2].describe(EN)
        assert next_player("A", roster_ab.order, roster_ab.statuses) == "B"

    def test_plain_move(self, plain_world, roster_ab):
        description = plain_world.resolve_roll(EN, 3, "A", roster_ab.order, roster_ab.statuses)
        assert roster_ab.status("A").position == 3
        assert roster_ab.status("B").position == 0
        assert description.startswith("Square 3\n")

    def test_overshoot_clamps_to_goal(self, plain_world, roster_ab):
        roster_ab.status("A").set_position(7)
        description = plain_world.resolve_roll(EN, 6, "A", roster_ab.order, roster_ab.statuses)
        assert roster_ab.status("A").position == 9
        assert roster_ab.status("A").arrival_rank == 1
        assert description.startswith("Goal\n")

    def test_only_landed_square_fires(self, world_factory, roster_ab):
        world = world_factory(Area("Jump", (PushSelf(1),)), Area("Rest", (SkipSelf(2),)))
        description = world.resolve_roll(EN, 1, "A", roster_ab.order, roster_ab.statuses)
        assert roster_ab.status("A").position == 2
        assert roster_ab.status("A").pending_skips == 0
        assert description.startswith("Rest\n")

    def test_go_to_start_returns_start_description(self, world_factory, roster_ab):
        world = world_factory(Area("Plain"), Area("Oops", (GoToStart(),)))
        description = world.resolve_roll(EN, 2, "A", roster_ab.order, roster_ab.statuses)
        assert roster_ab.status("A").position == 0
        assert description == world.start_description(EN)

    def test_pull_self(self, world_factory, roster_ab):
        world = world_factory(Area("One"), Area("Two"), Area("Back", (PullSelf(2),)))
        description = world.resolve_roll(EN, 3, "A", roster_ab.order, roster_ab.statuses)
        assert roster_ab.status("A").position == 1
        assert description.startswith("One\n")

    def test_skip_self(self, world_factory, roster_ab):
        world = world_factory(Area("Rest", (SkipSelf(2),)))
        world.resolve_roll(EN, 1, "A", roster_ab.order, roster_ab.statuses)
        assert roster_ab.status("A").pending_skips == 2

    def test_push_others_arrive_in_roster_order(self, world_factory):
        roster = Roster.from_names(["C", "A", "B"])
        world = world_factory(Area("Parade", (PushOthersAll(5),)))
        world.resolve_roll(EN, 1, "A", roster.order, roster.statuses)
        assert roster.status("C").arrival_rank == 1
        assert roster.status("B").arrival_rank == 2
        assert roster.status("A").arrival_rank is None
        assert roster.status("B").position == world.last_index
        assert world.goal_arrivals == 2

    def test_pull_others_all(self, roster_abc):
        roster_abc.status("B").set_position(3)
        roster_abc.status("C").set_position(1)
        world = World.build(
            "", "", 6, "Start", "Goal",
            areas=[Area("Storm", (PullOthersAll(2),)), Area("x"), Area("y")],
        )
        world.resolve_roll(EN, 1, "A", roster_abc.order, roster_abc.statuses)
        assert roster_abc.status("B").position == 1
        assert roster_abc.status("C").position == 0

    def test_ranks_continue_across_rolls(self, push_world, roster_abc):
        push_world.resolve_roll(EN, 2, "A", roster_abc.order, roster_abc.statuses)
        push_world.resolve_roll(EN, 5, "B", roster_abc.order, roster_abc.statuses)
        assert roster_abc.status("A").arrival_rank == 1
        assert roster_abc.status("B").arrival_rank == 2
        assert push_world.goal_arrivals == 2

    def test_arrived_rank_is_stable(self, world_factory, roster_ab):
        world = world_factory(Area("Storm", (PullOthersAll(3),)))
        world.resolve_roll(EN, 2, "B", roster_ab.order, roster_ab.statuses)
        world.resolve_roll(EN, 1, "A", roster_ab.order, roster_ab.statuses)
        assert roster_ab.status("B").arrival_rank == 1
        assert roster_ab.status("B").position == world.last_index

    def test_unknown_player(self, push_world, roster_ab):
        with pytest.raises(NotFoundPlayerError):
            push_world.resolve_roll(EN, 1, "Z", roster_ab.order, roster_ab.statuses)

    def test_position_out_of_range(self, push_world, roster_ab):
        status = roster_ab.status("A")
        status.set_arrival_rank(1)
        status.set_position(40)
        with pytest.raises(OutOfRangePositionError) as exc_info:
            push_world.resolve_roll(EN, 1, "A", roster_ab.order, roster_ab.statuses)
        assert exc_info.value.player == "A"
        assert exc_info.value.position == 41

    def test_check_goal_returns_new_arrivals(self, plain_world, roster_abc):
        roster_abc.status("C").set_position(12)
        roster_abc.status("A").set_position(9)
        assert plain_world.check_goal(roster_abc.order, roster_abc.statuses) == ["A", "C"]
        assert plain_world.check_goal(roster_abc.order, roster_abc.statuses) == []

    def test_check_goal_ranks_unlisted_players_last(self, plain_world):
        statuses = {
            "Z": PlayerStatus(position=9),
            "B": PlayerStatus(position=11),
            "Y": PlayerStatus(position=10),
            "A": PlayerStatus(position=9),
        }
        assert plain_world.check_goal(("A", "B"), statuses) == ["A", "B", "Z", "Y"]
        assert [statuses[name].arrival_rank for name in ("A", "B", "Z", "Y")] == [1, 2, 3, 4]
        assert all(status.position == plain_world.last_index for status in statuses.values())


# === Whole games ===


def _board() -> World:
    return World.build(
        "Mixed", "", 6, "Start", "Goal",
        areas=[
            Area("a"),
            Area("b", (PushSelf(2),)),
            Area("c", (SkipSelf(1),)),
            Area("d", (PullSelf(3),)),
            Area("e", (PushOthersAll(2), PushSelf(1))),
            Area("f", (PullOthersAll(2),)),
            Area("g", (GoToStart(),)),
            Area("h", (PushOthersAll(4),)),
        ],
    )


class TestWholeGames:
    @pytest.mark.parametrize("seed", range(20))
    def test_invariants_hold_until_game_over(self, seed):
        rng = random.Random(seed)
        world = _board()
        roster = Roster.from_names(["A", "B", "C", "D"])
        current = roster.first_player

        for _ in range(2000):
            world.resolve_roll(EN, rng.randint(1, 6), current, roster.order, roster.statuses)
            for status in roster.statuses.values():
                assert 0 <= status.position <= world.last_index
                if status.arrival_rank is not None:
                    assert status.position == world.last_index
            upcoming = next_player(current, roster.order, roster.statuses)
            while upcoming is None and not roster.finished():
                upcoming = next_player(current, roster.order, roster.statuses)
            if upcoming is None:
                break
            assert roster.status(upcoming).arrival_rank is None
            current = upcoming
        else:
            pytest.fail("game did not finish")

        ranks = sorted(s.arrival_rank for s in roster.statuses.values())
        assert ranks == [1, 2, 3, 4]
        assert world.goal_arrivals == 4
