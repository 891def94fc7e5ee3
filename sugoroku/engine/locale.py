"""
Sugoroku - Localized Text

Every phrase shown to players is looked up here by locale and key.
Adding a language means adding one entry to ``MESSAGES``.
"""

from enum import Enum


class Locale(str, Enum):
    """Languages the engine can render text in."""
    ENGLISH = "en"
    JAPANESE = "ja"


DEFAULT_LOCALE = Locale.ENGLISH


MESSAGES: dict[Locale, dict[str, str]] = {
    Locale.ENGLISH: {
        # Effects
        "effect.no_effect": "None.",
        "effect.go_to_start": "The player returns to the start.",
        "effect.skip_self": "The player skips {times} turn(s).",
        "effect.push_self": "The player moves forward {num} square(s).",
        "effect.pull_self": "The player moves back {num} square(s).",
        "effect.push_others_all": "All other players move forward {num} square(s).",
        "effect.pull_others_all": "All other players move back {num} square(s).",
        "area.effects_heading": "Effects",
        # Session
        "prompt.roll": "Roll the dice ({minimum}-{maximum}). >>> ",
        "prompt.enter": "Press Enter.",
        "prompt.finished": "Every player has reached the goal.\nPlease end the game.",
        "message.dice_out_of_range": "The dice value is out of range: {dice}",
        "message.skip": "{player} is resting. Remaining: {skips}",
        "message.turn": "{player}'s turn.",
        "message.arrived": "{player} reached the goal in place {rank}!",
        # Labels
        "label.name": "Name",
        "label.position": "Square",
        "label.skips": "Skips",
        "label.rank": "Goal",
    },
    Locale.JAPANESE: {
        "effect.no_effect": "なし",
        "effect.go_to_start": "プレイヤーはスタートに戻る。",
        "effect.skip_self": "プレイヤーの休みを{times}回追加。",
        "effect.push_self": "プレイヤーは{num} マス進む。",
        "effect.pull_self": "プレイヤーは{num} マス戻る。",
        "effect.push_others_all": "他のプレイヤー全員が{num} マス進む。",
        "effect.pull_others_all": "他のプレイヤー全員が{num} マス戻る。",
        "area.effects_heading": "効果",
        "prompt.roll": "サイコロを振ってください ({minimum}-{maximum})。 >>> ",
        "prompt.enter": "エンターキーを押してください。",
        "prompt.finished": "全員ゴールしました。\nゲームを終了してください。",
        "message.dice_out_of_range": "サイコロの値が範囲外です: {dice}",
        "message.skip": "{player} はお休みです。カウント: {skips}",
        "message.turn": "{player} の番です。",
        "message.arrived": "{player} が{rank}位でゴールしました！",
        "label.name": "名前",
        "label.position": "マス",
        "label.skips": "休み",
        "label.rank": "順位",
    },
}


def text(locale: Locale, key: str, **params: object) -> str:
    """Render the phrase ``key`` in ``locale``, formatted with ``params``.

    Raises:
        KeyError: If the locale has no entry for ``key``.
    """
    return MESSAGES[Locale(locale)][key].format(**params)
