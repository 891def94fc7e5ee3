"""
Sugoroku - Board Squares

An ``Area`` is one square of the board: narrative text plus the effects
triggered when a player lands on it.
"""

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from sugoroku.engine.base import StatusTable
from sugoroku.engine.effects import AreaEffect, NoEffect, parse_effect
from sugoroku.engine.locale import Locale, text


@dataclass(frozen=True)
class Area:
    """
    Immutable board square.

    Attributes:
        description: Narrative text shown when a player lands here
        effects: Effects applied in order; a square without configured
            effects gets a single ``NoEffect``
    """
    description: str
    effects: tuple[AreaEffect, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        effects = tuple(self.effects)
        if not effects:
            effects = (NoEffect(),)
        object.__setattr__(self, "effects", effects)

    @classmethod
    def from_specs(cls, description: str, specs: Iterable[str] | None = None) -> "Area":
        """Create an area from ``EffectName: key=value`` strings."""
        return cls(description=description, effects=tuple(parse_effect(s) for s in specs or ()))

    def execute(self, current_player: str, player_order: Sequence[str], status_map: StatusTable) -> None:
        """
        Apply every effect in declared order.

        The first failing effect aborts the rest; effects already applied
        stay applied.
        """
        for effect in self.effects:
            effect.apply(current_player, player_order, status_map)

    def describe(self, locale: Locale) -> str:
        lines = [self.description, "", text(locale, "area.effects_heading")]
        lines.extend(f"- {effect.describe(locale)}" for effect in self.effects)
        return "\n".join(lines) + "\n"
