"""
Sugoroku - Board and Roster Files

Reads TOML roster and board files into a ``Roster`` and a ``World``.
The file shapes are described by Pydantic models; effect strings are
handed to the engine's effect parser.
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from sugoroku.engine.area import Area
from sugoroku.engine.base import Roster
from sugoroku.engine.errors import WorldFileError
from sugoroku.engine.locale import Locale
from sugoroku.engine.session import GameSession
from sugoroku.engine.world import World

logger = logging.getLogger(__name__)


class PlayerDescription(BaseModel):
    """One ``[[player]]`` table."""

    name: str = Field(min_length=1)


class PlayerListDescription(BaseModel):
    """Mirrors a roster file."""

    player: list[PlayerDescription] = Field(default_factory=list)


class AreaEffectDescription(BaseModel):
    """One ``[[area.effect]]`` table."""

    element: str


class AreaDescription(BaseModel):
    """One ``[[area]]`` table."""

    description: str
    effect: list[AreaEffectDescription] | None = None


class WorldSettingDescription(BaseModel):
    """The ``[general]`` table of a board file."""

    title: str
    opening_msg: str
    start_description: str
    goal_description: str
    dice_max: int = Field(ge=1)


class WorldDescription(BaseModel):
    """Mirrors a board file."""

    general: WorldSettingDescription
    area: list[AreaDescription] = Field(default_factory=list)


def _load_toml(text: str, source: str) -> dict:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise WorldFileError(source, f"invalid TOML: {exc}") from exc


def _read_text(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise WorldFileError(str(path), str(exc)) from exc


def parse_player_list(text: str, source: str = "<player list>") -> Roster:
    """
    Build a roster from TOML text.

    Raises:
        WorldFileError: If the text is not a valid roster file
        NoPlayerError: If no player is listed
        DuplicatePlayerError: If a name is listed twice
    """
    try:
        description = PlayerListDescription.model_validate(_load_toml(text, source))
    except ValidationError as exc:
        raise WorldFileError(source, str(exc)) from exc

    roster = Roster.from_names(p.name for p in description.player)
    logger.debug("Loaded %d player(s) from %s", len(roster), source)
    return roster


def parse_world(text: str, source: str = "<world>", min_dice: int = 1) -> World:
    """
    Build a world from TOML text.

    Areas without an ``effect`` list get a single ``NoEffect``; the start
    and goal squares are added around the configured areas.

    Raises:
        WorldFileError: If the text is not a valid board file
        GameSystemError: If an effect specification is invalid
    """
    try:
        description = WorldDescription.model_validate(_load_toml(text, source))
    except ValidationError as exc:
        raise WorldFileError(source, str(exc)) from exc

    general = description.general
    areas = [
        Area.from_specs(area.description, [e.element for e in area.effect or ()])
        for area in description.area
    ]
    world = World.build(
        title=general.title,
        opening_message=general.opening_msg,
        dice_max=general.dice_max,
        start_description=general.start_description,
        goal_description=general.goal_description,
        areas=areas,
        min_dice=min_dice,
    )
    logger.debug("Loaded board %r with %d area(s) from %s", world.title, len(world.area_list), source)
    return world


def read_player_list(path: Path) -> Roster:
    """Read a roster file."""
    return parse_player_list(_read_text(path), source=str(path))


def read_world(path: Path, min_dice: int = 1) -> World:
    """Read a board file."""
    return parse_world(_read_text(path), source=str(path), min_dice=min_dice)


def load_session(
    player_list_path: Path,
    world_path: Path,
    locale: Locale,
    min_dice: int = 1,
) -> GameSession:
    """Read both files and create a session on its title screen."""
    roster = read_player_list(player_list_path)
    world = read_world(world_path, min_dice=min_dice)
    return GameSession(world, roster, locale=locale)
