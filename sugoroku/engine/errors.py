"""
Sugoroku - Engine Exceptions

Typed errors raised by the board engine, the effect parser and the file
loader. Every error derives from ``GameSystemError`` so drivers can handle
them consistently; only ``OutOfRangeDiceError`` is expected during play.
"""


class GameSystemError(Exception):
    """Base exception for all game-related errors."""


class NotFoundPlayerError(GameSystemError):
    """A player name is missing from the status table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Player is not found: {name}")
        self.name = name


class NotFoundAreaTypeError(GameSystemError):
    """An effect specification names an unknown effect kind."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Area type is not found: {name}")
        self.name = name


class DuplicatePlayerError(GameSystemError):
    """The same player name appears twice in a roster."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate player: {name}")
        self.name = name


class NoPlayerError(GameSystemError):
    """The roster is empty."""

    def __init__(self) -> None:
        super().__init__("There is no player")


class OutOfRangeDiceError(GameSystemError):
    """A die value outside ``[minimum, maximum]`` was submitted.

    Raised before any state is touched, so callers can simply ask for
    another value.
    """

    def __init__(self, value: int, minimum: int, maximum: int) -> None:
        super().__init__(
            f"Dice value {value} is out of range. Must be between {minimum} and {maximum}."
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class OutOfRangePositionError(GameSystemError):
    """A player's position does not index an area."""

    def __init__(self, player: str, position: int) -> None:
        super().__init__(f"Position is out of range: {player} {position}")
        self.player = player
        self.position = position


class EffectFormatError(GameSystemError):
    """An effect specification does not match ``Name: key=value, ...``."""

    def __init__(self, spec: str, reason: str) -> None:
        super().__init__(f"Malformed effect specification {spec!r}: {reason}")
        self.spec = spec
        self.reason = reason


class ParameterError(GameSystemError):
    """Base class for effect parameter problems."""

    def __init__(self, effect: str, key: str, message: str) -> None:
        super().__init__(message)
        self.effect = effect
        self.key = key


class DuplicateParameterError(ParameterError):
    def __init__(self, effect: str, key: str) -> None:
        super().__init__(effect, key, f"Duplicate parameter for {effect}: {key}")


class WrongParameterError(ParameterError):
    def __init__(self, effect: str, key: str) -> None:
        super().__init__(effect, key, f"Wrong parameter for {effect}: {key}")


class MissingParameterError(ParameterError):
    def __init__(self, effect: str, key: str) -> None:
        super().__init__(effect, key, f"Missing parameter for {effect}: {key}")


class ParameterParseError(ParameterError):
    def __init__(self, effect: str, key: str, value: str, expected_format: str) -> None:
        super().__init__(
            effect,
            key,
            f"Failed to parse parameter {key}={value!r} of {effect}.\n"
            f"Format: {expected_format}",
        )
        self.value = value
        self.expected_format = expected_format


class WorldFileError(GameSystemError):
    """A board or roster file could not be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidActionError(GameSystemError):
    """An action is not legal in the current session phase."""
