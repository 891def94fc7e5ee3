"""
Sugoroku - World

The board and the single state transition of the game: resolving one die
roll for the current player, including area effects and goal arrivals.

The world owns no player data. The roster's status table is passed in
and mutated in place.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from sugoroku.engine.area import Area
from sugoroku.engine.base import StatusTable, lookup_status
from sugoroku.engine.errors import OutOfRangePositionError
from sugoroku.engine.locale import Locale
from sugoroku.engine.validators import validate_dice_bounds, validate_dice_value

logger = logging.getLogger(__name__)


@dataclass
class World:
    """
    A board and its goal bookkeeping.

    Attributes:
        title: Board title
        opening_message: Text shown before the first roll
        dice_max: Largest accepted die value (inclusive)
        area_list: Squares in order; index 0 is the start, the last is the goal
        min_dice: Smallest accepted die value, 1 unless configured as 0
        goal_arrivals: Number of players that have reached the goal so far
    """
    title: str
    opening_message: str
    dice_max: int
    area_list: tuple[Area, ...]
    min_dice: int = 1
    goal_arrivals: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Validate board shape."""
        self.area_list = tuple(self.area_list)
        if len(self.area_list) < 2:
            raise ValueError(
                f"A board needs at least a start and a goal square, got {len(self.area_list)} area(s)."
            )
        validate_dice_bounds(self.min_dice, self.dice_max)

    @classmethod
    def build(
        cls,
        title: str,
        opening_message: str,
        dice_max: int,
        start_description: str,
        goal_description: str,
        areas: Iterable[Area] = (),
        min_dice: int = 1,
    ) -> "World":
        """Create a world, adding the effect-free start and goal squares."""
        area_list = (Area(start_description), *areas, Area(goal_description))
        return cls(
            title=title,
            opening_message=opening_message,
            dice_max=dice_max,
            area_list=area_list,
            min_dice=min_dice,
        )

    @property
    def last_index(self) -> int:
        """Index of the goal square."""
        return len(self.area_list) - 1

    def start_description(self, locale: Locale) -> str:
        return self.area_list[0].describe(locale)

    def area_description(self, index: int, locale: Locale) -> str:
        return self.area_list[index].describe(locale)

    def roll_dice(self) -> int:
        """Roll a die uniformly in ``[max(min_dice, 1), dice_max]``."""
        return random.randint(max(self.min_dice, 1), self.dice_max)

    def resolve_roll(
        self,
        locale: Locale,
        dice: int,
        current_player: str,
        player_order: Sequence[str],
        status_map: StatusTable,
    ) -> str:
        """
        Move ``current_player`` by ``dice`` and resolve the square landed on.

        Effects run on the square reached by the die, before any movement
        they cause. Goal arrivals are recorded both after the die move and
        after the effects.

        Args:
            locale: Language of the returned description
            dice: Die value, validated against ``[min_dice, dice_max]``
            current_player: Player who rolled
            player_order: Fixed turn order (also the arrival tie-break)
            status_map: Status table, mutated in place

        Returns:
            Description of the square the current player stands on after
            all effects

        Raises:
            OutOfRangeDiceError: Before any mutation, if ``dice`` is out of range
            NotFoundPlayerError: If an involved player has no status
            OutOfRangePositionError: If a position does not index an area
        """
        validate_dice_value(dice, self.min_dice, self.dice_max)

        lookup_status(status_map, current_player).go_forward(dice)
        self.check_goal(player_order, status_map)

        landed = self._current_area(current_player, status_map)
        logger.debug("%s rolled %d and landed on square %d", current_player, dice,
                     lookup_status(status_map, current_player).position)
        landed.execute(current_player, player_order, status_map)
        self.check_goal(player_order, status_map)

        return self._current_area(current_player, status_map).describe(locale)

    def check_goal(self, player_order: Sequence[str], status_map: StatusTable) -> list[str]:
        """
        Record every player who reached or passed the goal.

        New arrivals are clamped to the goal square and ranked after all
        earlier arrivals. Players arriving together are ranked in roster
        order; players missing from the roster follow in table order.

        Returns:
            Names of the players that arrived in this pass, in rank order
        """
        ordered = [name for name in player_order if name in status_map]
        ordered += [name for name in status_map if name not in ordered]

        arrived: list[str] = []
        for name in ordered:
            status = status_map[name]
            if status.arrival_rank is None and status.position >= self.last_index:
                status.set_position(self.last_index)
                status.set_arrival_rank(self.goal_arrivals + len(arrived) + 1)
                arrived.append(name)
                logger.info("%s reached the goal in place %d", name, status.arrival_rank)

        self.goal_arrivals += len(arrived)
        return arrived

    def _current_area(self, player: str, status_map: StatusTable) -> Area:
        position = lookup_status(status_map, player).position
        if not 0 <= position < len(self.area_list):
            raise OutOfRangePositionError(player, position)
        return self.area_list[position]
