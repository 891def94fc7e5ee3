"""
Sugoroku - Game Session

Turn-phase driver used by the presentation layers. A session holds the
world, the roster and whose turn it is, and moves between phases as
rolls are submitted. ``World.resolve_roll`` and ``next_player`` remain
the only code paths that change player state.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from sugoroku.engine.base import Roster
from sugoroku.engine.errors import InvalidActionError, OutOfRangeDiceError
from sugoroku.engine.locale import DEFAULT_LOCALE, Locale, text
from sugoroku.engine.turn_order import next_player
from sugoroku.engine.world import World

logger = logging.getLogger(__name__)


class Phase(Enum):
    """What the session is waiting for."""
    TITLE = auto()          # title screen, waiting to start
    DICE_ROLL = auto()      # waiting for the current player's die value
    DICE_RESULT = auto()    # rejected die value shown, waiting for acknowledgement
    GAME_FINISHED = auto()  # nobody can move any more


@dataclass(frozen=True)
class PlayerRow:
    """One line of the player table."""
    name: str
    position: int
    pending_skips: int
    arrival_rank: int | None
    is_current: bool


@dataclass(frozen=True)
class RollOutcome:
    """
    Result of submitting a die value.

    Attributes:
        player: Player who rolled
        dice: Submitted value
        accepted: False if the value was out of range
        description: Description of the square the player ended on
        arrivals: Players who reached the goal during this roll, in rank order
        skipped: Players who sat out a turn while the next player was chosen
        next_player: Player whose turn it is now, ``None`` if the game is over
    """
    player: str
    dice: int
    accepted: bool
    description: str = ""
    arrivals: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()
    next_player: str | None = None


class GameSession:
    """
    Drives one game from the title screen to the final standings.

    Attributes:
        world: The board
        roster: Turn order and player statuses
        locale: Language of every rendered text
        current_player: Player whose turn it is
        phase: Current ``Phase``
        main_text: Body text (area description or notice)
        message: Prompt line shown under the body
    """

    def __init__(self, world: World, roster: Roster, locale: Locale = DEFAULT_LOCALE) -> None:
        self.world = world
        self.roster = roster
        self.locale = Locale(locale)
        self.current_player = roster.first_player
        self.phase = Phase.TITLE
        self.main_text = world.start_description(self.locale)
        self.message = ""

    @property
    def is_finished(self) -> bool:
        return self.phase is Phase.GAME_FINISHED

    def start(self) -> None:
        """Leave the title screen and prompt the first player."""
        self._require(Phase.TITLE)
        logger.info("Game %r started with %d player(s)", self.world.title, len(self.roster))
        self.phase = Phase.DICE_ROLL
        self.message = self._turn_prompt()

    def roll(self) -> RollOutcome:
        """Roll a random die for the current player."""
        return self.submit_roll(self.world.roll_dice())

    def submit_roll(self, dice: int) -> RollOutcome:
        """
        Resolve a die value for the current player and pass the turn.

        An out-of-range value leaves every status untouched and moves the
        session to ``DICE_RESULT``; the same player rolls again after
        ``acknowledge``.

        Raises:
            InvalidActionError: If the session is not waiting for a roll
        """
        self._require(Phase.DICE_ROLL)
        roller = self.current_player
        already_arrived = {name for name, s in self.roster.statuses.items() if s.has_arrived}

        try:
            description = self.world.resolve_roll(
                self.locale, dice, roller, self.roster.order, self.roster.statuses
            )
        except OutOfRangeDiceError as exc:
            logger.warning("Rejected dice value %d from %s", exc.value, roller)
            self.phase = Phase.DICE_RESULT
            self.main_text = text(self.locale, "message.dice_out_of_range", dice=exc.value)
            self.message = text(self.locale, "prompt.enter")
            return RollOutcome(player=roller, dice=dice, accepted=False)

        arrivals = tuple(
            name for _, name in self.roster.standings() if name not in already_arrived
        )
        self.main_text = description
        upcoming, skipped = self._change_player()

        lines = [
            text(self.locale, "message.arrived", player=name,
                 rank=self.roster.status(name).arrival_rank)
            for name in arrivals
        ]
        lines += [
            text(self.locale, "message.skip", player=name,
                 skips=self.roster.status(name).pending_skips)
            for name in skipped
        ]
        if upcoming is None:
            lines.append(text(self.locale, "prompt.finished"))
        else:
            lines.append(self._turn_prompt())
        self.message = "\n".join(lines)

        return RollOutcome(
            player=roller,
            dice=dice,
            accepted=True,
            description=description,
            arrivals=arrivals,
            skipped=skipped,
            next_player=upcoming,
        )

    def acknowledge(self) -> None:
        """Dismiss a rejected-roll notice and prompt the same player again."""
        self._require(Phase.DICE_RESULT)
        self.phase = Phase.DICE_ROLL
        self.main_text = self.world.area_description(
            self.roster.status(self.current_player).position, self.locale
        )
        self.message = self._turn_prompt()

    def player_rows(self) -> list[PlayerRow]:
        """Player table in roster order."""
        return [
            PlayerRow(
                name=name,
                position=status.position,
                pending_skips=status.pending_skips,
                arrival_rank=status.arrival_rank,
                is_current=name == self.current_player and not self.is_finished,
            )
            for name, status in ((n, self.roster.status(n)) for n in self.roster.order)
        ]

    def _change_player(self) -> tuple[str | None, tuple[str, ...]]:
        skips_before = {name: s.pending_skips for name, s in self.roster.statuses.items()}
        upcoming = next_player(self.current_player, self.roster.order, self.roster.statuses)
        # Everyone still in play was resting; each scan burns one skip apiece.
        while upcoming is None and not self.roster.finished():
            upcoming = next_player(self.current_player, self.roster.order, self.roster.statuses)
        skipped = tuple(
            name for name in self.roster.order
            if self.roster.status(name).pending_skips < skips_before[name]
        )

        if upcoming is None:
            logger.info("Game over: %s", self.roster.standings())
            self.phase = Phase.GAME_FINISHED
        else:
            self.current_player = upcoming
            self.phase = Phase.DICE_ROLL
        return upcoming, skipped

    def _turn_prompt(self) -> str:
        return (
            text(self.locale, "message.turn", player=self.current_player)
            + "\n"
            + text(self.locale, "prompt.roll", minimum=self.world.min_dice,
                   maximum=self.world.dice_max)
        )

    def _require(self, phase: Phase) -> None:
        if self.phase is not phase:
            raise InvalidActionError(f"Expected phase {phase.name}, session is in {self.phase.name}.")
