"""
Sugoroku - Area Effects

The closed set of effects a square can trigger, and the parser that
builds them from ``EffectName: key=value, ...`` specifications.

Effects are immutable. They never keep references to players; state is
read and changed only through ``apply``. Players who already reached the
goal are never moved.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterator, Sequence

from sugoroku.engine.base import PlayerStatus, StatusTable, lookup_status
from sugoroku.engine.errors import (
    DuplicateParameterError,
    EffectFormatError,
    MissingParameterError,
    NotFoundAreaTypeError,
    ParameterParseError,
    WrongParameterError,
)
from sugoroku.engine.locale import Locale, text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterSpec:
    """
    Expected shape of one effect parameter.

    Attributes:
        maximum: Largest accepted value, ``None`` for unbounded
        type_name: Name shown in parse error messages
    """
    maximum: int | None
    type_name: str

    def parse(self, effect: str, key: str, value: str) -> int:
        expected = f"<{key}: {self.type_name}>"
        if not value.isascii() or not value.isdigit():
            raise ParameterParseError(effect, key, value, expected)
        number = int(value)
        if self.maximum is not None and number > self.maximum:
            raise ParameterParseError(effect, key, value, expected)
        return number


_U8 = ParameterSpec(maximum=255, type_name="u8")
_USIZE = ParameterSpec(maximum=None, type_name="usize")


def _others_in_play(
    current_player: str, player_order: Sequence[str], status_map: StatusTable
) -> Iterator[PlayerStatus]:
    """Statuses of every other player, in roster order, that has not reached the goal."""
    for player in player_order:
        if player == current_player:
            continue
        status = lookup_status(status_map, player)
        if not status.has_arrived:
            yield status


@dataclass(frozen=True)
class NoEffect:
    """Nothing happens."""
    NAME: ClassVar[str] = "NoEffect"
    PARAMETERS: ClassVar[dict[str, ParameterSpec]] = {}

    def describe(self, locale: Locale) -> str:
        return text(locale, "effect.no_effect")

    def apply(self, current_player: str, player_order: Sequence[str], status_map: StatusTable) -> None:
        return None


@dataclass(frozen=True)
class GoToStart:
    """The current player goes back to the start square."""
    NAME: ClassVar[str] = "GoToStart"
    PARAMETERS: ClassVar[dict[str, ParameterSpec]] = {}

    def describe(self, locale: Locale) -> str:
        return text(locale, "effect.go_to_start")

    def apply(self, current_player: str, player_order: Sequence[str], status_map: StatusTable) -> None:
        status = lookup_status(status_map, current_player)
        if not status.has_arrived:
            status.set_position(0)
        logger.debug("%s returns to the start", current_player)


@dataclass(frozen=True)
class SkipSelf:
    """
    The current player sits out future turns.

    Attributes:
        times: Number of turns added to the player's pending skips
    """
    times: int
    NAME: ClassVar[str] = "SkipSelf"
    PARAMETERS: ClassVar[dict[str, ParameterSpec]] = {"times": _U8}

    def describe(self, locale: Locale) -> str:
        return text(locale, "effect.skip_self", times=self.times)

    def apply(self, current_player: str, player_order: Sequence[str], status_map: StatusTable) -> None:
        lookup_status(status_map, current_player).add_skip(self.times)
        logger.debug("%s skips %d more turn(s)", current_player, self.times)


@dataclass(frozen=True)
class PushSelf:
    """The current player moves forward ``num`` squares."""
    num: int
    NAME: ClassVar[str] = "PushSelf"
    PARAMETERS: ClassVar[dict[str, ParameterSpec]] = {"num": _USIZE}

    def describe(self, locale: Locale) -> str:
        return text(locale, "effect.push_self", num=self.num)

    def apply(self, current_player: str, player_order: Sequence[str], status_map: StatusTable) -> None:
        status = lookup_status(status_map, current_player)
        if not status.has_arrived:
            status.go_forward(self.num)
        logger.debug("%s moves forward %d", current_player, self.num)


@dataclass(frozen=True)
class PullSelf:
    """The current player moves back ``num`` squares."""
    num: int
    NAME: ClassVar[str] = "PullSelf"
    PARAMETERS: ClassVar[dict[str, ParameterSpec]] = {"num": _USIZE}

    def describe(self, locale: Locale) -> str:
        return text(locale, "effect.pull_self", num=self.num)

    def apply(self, current_player: str, player_order: Sequence[str], status_map: StatusTable) -> None:
        status = lookup_status(status_map, current_player)
        if not status.has_arrived:
            status.go_backward(self.num)
        logger.debug("%s moves back %d", current_player, self.num)


@dataclass(frozen=True)
class PushOthersAll:
    """Every other player still in play moves forward ``num`` squares, in roster order."""
    num: int
    NAME: ClassVar[str] = "PushOthersAll"
    PARAMETERS: ClassVar[dict[str, ParameterSpec]] = {"num": _USIZE}

    def describe(self, locale: Locale) -> str:
        return text(locale, "effect.push_others_all", num=self.num)

    def apply(self, current_player: str, player_order: Sequence[str], status_map: StatusTable) -> None:
        for status in _others_in_play(current_player, player_order, status_map):
            status.go_forward(self.num)
        logger.debug("Players other than %s move forward %d", current_player, self.num)


@dataclass(frozen=True)
class PullOthersAll:
    """Every other player still in play moves back ``num`` squares, in roster order."""
    num: int
    NAME: ClassVar[str] = "PullOthersAll"
    PARAMETERS: ClassVar[dict[str, ParameterSpec]] = {"num": _USIZE}

    def describe(self, locale: Locale) -> str:
        return text(locale, "effect.pull_others_all", num=self.num)

    def apply(self, current_player: str, player_order: Sequence[str], status_map: StatusTable) -> None:
        for status in _others_in_play(current_player, player_order, status_map):
            status.go_backward(self.num)
        logger.debug("Players other than %s move back %d", current_player, self.num)


AreaEffect = NoEffect | GoToStart | SkipSelf | PushSelf | PullSelf | PushOthersAll | PullOthersAll


EFFECT_TYPES: dict[str, type] = {
    "NoEffect": NoEffect,
    "GoToStart": GoToStart,
    "SkipSelf": SkipSelf,
    "PushSelf": PushSelf,
    "AdvanceSelf": PushSelf,
    "PullSelf": PullSelf,
    "DisadvanceSelf": PullSelf,
    "PushOthersAll": PushOthersAll,
    "PullOthersAll": PullOthersAll,
}


def _parse_parameters(effect_name: str, blob: str, spec: str) -> dict[str, str]:
    """Split ``key=value`` pairs, rejecting malformed, unknown and repeated keys."""
    if not blob:
        return {}

    effect_cls = EFFECT_TYPES[effect_name]
    raw: dict[str, str] = {}
    for item in blob.split(","):
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise EffectFormatError(spec, f"expected key=value, got {item!r}")
        if key not in effect_cls.PARAMETERS:
            raise WrongParameterError(effect_name, key)
        if key in raw:
            raise DuplicateParameterError(effect_name, key)
        raw[key] = value
    return raw


def parse_effect(spec: str) -> AreaEffect:
    """
    Build an effect from its textual specification.

    Whitespace anywhere in ``spec`` is ignored, so ``"PushSelf: num = 2"``
    and ``"PushSelf:num=2"`` are equivalent.

    Args:
        spec: ``EffectName: key1=val1, key2=val2, ...``

    Returns:
        The effect instance

    Raises:
        EffectFormatError: If the name/parameter split or a pair is malformed
        NotFoundAreaTypeError: If the effect name is unknown
        WrongParameterError: If a key does not belong to the effect
        DuplicateParameterError: If a key is given twice
        MissingParameterError: If a required key is absent
        ParameterParseError: If a value is not a valid number
    """
    compact = "".join(spec.split())
    parts = compact.split(":", 1)
    if len(parts) != 2:
        raise EffectFormatError(spec, "expected 'EffectName: key=value, ...'")

    name, blob = parts
    if name not in EFFECT_TYPES:
        raise NotFoundAreaTypeError(name)

    effect_cls = EFFECT_TYPES[name]
    raw = _parse_parameters(name, blob, spec)

    kwargs: dict[str, int] = {}
    for key, param_spec in effect_cls.PARAMETERS.items():
        if key not in raw:
            raise MissingParameterError(name, key)
        kwargs[key] = param_spec.parse(name, key, raw[key])

    return effect_cls(**kwargs)
