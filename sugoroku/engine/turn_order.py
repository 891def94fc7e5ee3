"""
Sugoroku - Turn Order

Picks the next player to roll. Finished players are passed over for
free; players with pending skips are passed over and lose one skip.
"""

import logging
from typing import Sequence

from sugoroku.engine.base import StatusTable, lookup_status
from sugoroku.engine.errors import NotFoundPlayerError

logger = logging.getLogger(__name__)


def next_player(
    current_player: str,
    player_order: Sequence[str],
    status_map: StatusTable,
) -> str | None:
    """
    Find the next eligible player after ``current_player``.

    At most one full cycle of the roster is scanned, ending with
    ``current_player`` itself.

    Args:
        current_player: Player whose turn just ended
        player_order: Fixed turn order
        status_map: Status table, mutated when skips are consumed

    Returns:
        The next player's name, or ``None`` when nobody can move

    Raises:
        NotFoundPlayerError: If a scanned name has no status, or
            ``current_player`` is not in ``player_order``
    """
    try:
        start = list(player_order).index(current_player)
    except ValueError:
        raise NotFoundPlayerError(current_player) from None

    count = len(player_order)
    for offset in range(1, count + 1):
        candidate = player_order[(start + offset) % count]
        status = lookup_status(status_map, candidate)
        if status.has_arrived:
            continue
        if status.pending_skips > 0:
            status.sub_skip(1)
            logger.debug("%s skips a turn (%d left)", candidate, status.pending_skips)
            continue
        return candidate

    return None
