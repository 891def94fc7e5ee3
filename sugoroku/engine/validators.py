"""
Sugoroku - Input Validation Utilities

Provides validation functions for engine inputs. All validators either
return validated data or raise a descriptive exception.
"""

from typing import Iterable

from sugoroku.engine.errors import DuplicatePlayerError, NoPlayerError, OutOfRangeDiceError


def validate_player_names(names: Iterable[str]) -> tuple[str, ...]:
    """
    Validate a roster and normalize it to a tuple.

    Args:
        names: Player names in turn order

    Returns:
        Validated names as a tuple

    Raises:
        NoPlayerError: If there are no names
        DuplicatePlayerError: If a name appears twice
        ValueError: If a name is not a non-empty string
    """
    names_tuple = tuple(names)
    if not names_tuple:
        raise NoPlayerError()

    seen: set[str] = set()
    for i, name in enumerate(names_tuple):
        if not isinstance(name, str) or not name:
            raise ValueError(f"Player name at index {i} must be a non-empty string, got {name!r}.")
        if name in seen:
            raise DuplicatePlayerError(name)
        seen.add(name)

    return names_tuple


def validate_dice_value(value: int, minimum: int, maximum: int) -> int:
    """
    Validate a submitted die value.

    Args:
        value: The rolled value
        minimum: Smallest accepted value (inclusive)
        maximum: Largest accepted value (inclusive)

    Returns:
        Validated value

    Raises:
        TypeError: If value is not an integer
        OutOfRangeDiceError: If value is outside ``[minimum, maximum]``
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Dice value must be an integer, got {type(value).__name__}.")

    if not (minimum <= value <= maximum):
        raise OutOfRangeDiceError(value, minimum, maximum)

    return value


def validate_dice_bounds(min_dice: int, dice_max: int) -> tuple[int, int]:
    """
    Validate the accepted die range of a board.

    Raises:
        ValueError: If ``min_dice`` is not 0 or 1, or ``dice_max < min_dice``
    """
    if min_dice not in (0, 1):
        raise ValueError(f"Minimum dice value must be 0 or 1, got {min_dice}.")

    if isinstance(dice_max, bool) or not isinstance(dice_max, int):
        raise ValueError(f"dice_max must be an integer, got {type(dice_max).__name__}.")

    if dice_max < max(min_dice, 1):
        raise ValueError(f"dice_max must be at least {max(min_dice, 1)}, got {dice_max}.")

    return min_dice, dice_max
