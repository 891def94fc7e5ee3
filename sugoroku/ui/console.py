"""Line-based terminal front end: reads die values from stdin."""

from __future__ import annotations

from typing import Callable

from sugoroku.engine.locale import text
from sugoroku.engine.session import GameSession, Phase

GOAL_MARK = "🏁"
DICE_MARK = "🎲"
QUIT_COMMANDS = {"q", "quit", "exit"}


def render_player_table(session: GameSession) -> str:
    """Player list with goal rank, turn marker, square and skips."""
    locale = session.locale
    header = (
        f"{GOAL_MARK:<3} {'':2} {text(locale, 'label.name'):<16}"
        f"{text(locale, 'label.position'):>8}{text(locale, 'label.skips'):>8}"
    )
    lines = [header]
    for row in session.player_rows():
        rank = f"{row.arrival_rank:>2}" if row.arrival_rank is not None else "  "
        marker = DICE_MARK if row.is_current else "  "
        lines.append(f"{rank:<3} {marker:2} {row.name:<16}{row.position:>8}{row.pending_skips:>8}")
    return "\n".join(lines)


def _ask(input_fn: Callable[[str], str], output_fn: Callable[[str], None], message: str) -> str | None:
    """Print all but the last line of ``message`` and prompt with the last."""
    *head, prompt = message.split("\n")
    if head:
        output_fn("\n".join(head))
    try:
        return input_fn(prompt).strip()
    except EOFError:
        return None


def run_console(
    session: GameSession,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """
    Play ``session`` until everyone has arrived or the user quits.

    An empty line rolls a random die; a number submits that value;
    ``q`` quits.
    """
    locale = session.locale
    output_fn(session.world.title)
    output_fn(session.world.opening_message)
    output_fn(session.main_text)
    if _ask(input_fn, output_fn, text(locale, "prompt.enter")) is None:
        return
    session.start()

    while not session.is_finished:
        output_fn(render_player_table(session))

        if session.phase is Phase.DICE_RESULT:
            output_fn(session.main_text)
            if _ask(input_fn, output_fn, session.message) is None:
                return
            session.acknowledge()
            continue

        answer = _ask(input_fn, output_fn, session.message)
        if answer is None or answer.lower() in QUIT_COMMANDS:
            return
        if answer == "":
            outcome = session.roll()
        elif answer.isascii() and answer.isdigit():
            outcome = session.submit_roll(int(answer))
        else:
            continue

        if outcome.accepted:
            output_fn(f"{DICE_MARK} {outcome.dice}")
            output_fn(session.main_text)

    output_fn(render_player_table(session))
    output_fn(session.message)
