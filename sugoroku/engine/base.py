"""
Sugoroku - Engine Base Classes

Per-player state and the roster that owns it. Unlike the immutable
effect and area types, ``PlayerStatus`` is mutated in place by the world
and the turn-order resolver; all arithmetic on it saturates.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from sugoroku.engine.errors import NotFoundPlayerError
from sugoroku.engine.validators import validate_player_names

MAX_SKIPS = 255


@dataclass
class PlayerStatus:
    """
    Mutable state of a single player.

    Attributes:
        position: Index into the area list (0 is the start square)
        pending_skips: Turns the player still has to sit out
        arrival_rank: 1-based goal order, ``None`` while still playing
    """
    position: int = 0
    pending_skips: int = 0
    arrival_rank: int | None = None

    @property
    def has_arrived(self) -> bool:
        return self.arrival_rank is not None

    def go_forward(self, n: int) -> None:
        self.position += max(n, 0)

    def go_backward(self, n: int) -> None:
        self.position = max(self.position - max(n, 0), 0)

    def set_position(self, position: int) -> None:
        self.position = max(position, 0)

    def add_skip(self, n: int) -> None:
        self.pending_skips = min(self.pending_skips + max(n, 0), MAX_SKIPS)

    def sub_skip(self, n: int) -> None:
        self.pending_skips = max(self.pending_skips - max(n, 0), 0)

    def set_arrival_rank(self, rank: int) -> None:
        """Record the goal order. Later calls are ignored."""
        if self.arrival_rank is None:
            self.arrival_rank = rank


StatusTable = dict[str, PlayerStatus]


def lookup_status(status_map: StatusTable, name: str) -> PlayerStatus:
    """Return the status of ``name`` or raise ``NotFoundPlayerError``."""
    try:
        return status_map[name]
    except KeyError:
        raise NotFoundPlayerError(name) from None


@dataclass
class Roster:
    """
    Fixed turn order plus the status table keyed by player name.

    Attributes:
        order: Player names in turn order (insertion order of the roster)
        statuses: One ``PlayerStatus`` per name in ``order``
    """
    order: tuple[str, ...]
    statuses: StatusTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the roster and create missing statuses."""
        self.order = validate_player_names(self.order)
        extra = set(self.statuses) - set(self.order)
        if extra:
            raise ValueError(f"Statuses given for unknown players: {sorted(extra)}.")
        for name in self.order:
            self.statuses.setdefault(name, PlayerStatus())

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "Roster":
        """Create a fresh roster with every player on the start square."""
        return cls(order=tuple(names))

    def __len__(self) -> int:
        return len(self.order)

    def __iter__(self) -> Iterator[str]:
        return iter(self.order)

    @property
    def first_player(self) -> str:
        return self.order[0]

    def status(self, name: str) -> PlayerStatus:
        return lookup_status(self.statuses, name)

    def finished(self) -> bool:
        """True once every player has an arrival rank."""
        return all(s.has_arrived for s in self.statuses.values())

    def standings(self) -> list[tuple[int, str]]:
        """Arrived players as ``(rank, name)``, best rank first."""
        return sorted(
            (status.arrival_rank, name)
            for name, status in self.statuses.items()
            if status.arrival_rank is not None
        )
