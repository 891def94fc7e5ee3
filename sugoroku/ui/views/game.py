"""Game page — board text, die input and the player list."""

from __future__ import annotations

import streamlit as st

from sugoroku.engine.session import GameSession, Phase
from sugoroku.ui.components.dice_input import render_dice_input
from sugoroku.ui.components.player_list import render_player_list


def render_game_page() -> None:
    """Render the main game page."""
    ss = st.session_state
    session: GameSession | None = ss.get("session")

    if session is None:
        ss["page"] = "home"
        st.rerun()
        return

    if session.is_finished:
        ss["page"] = "results"
        st.rerun()
        return

    st.title(session.world.title)
    st.caption(session.world.opening_message)

    # --- Layout: game area (3) | player list (1) ---
    game_col, list_col = st.columns([3, 1])

    with list_col:
        render_player_list(session)

    with game_col:
        st.text(session.main_text)
        for line in session.message.split("\n"):
            if line.strip():
                st.markdown(line)

        if session.phase is Phase.DICE_RESULT:
            if st.button("OK", key="btn_ack", type="primary"):
                session.acknowledge()
                st.rerun()
            return

        action = render_dice_input(session)
        if action == "roll":
            session.roll()
            st.rerun()
        elif isinstance(action, int):
            session.submit_roll(action)
            st.rerun()
