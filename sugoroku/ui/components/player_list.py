"""Player list component — positions, skips and goal ranks."""

from __future__ import annotations

import streamlit as st

from sugoroku.engine.locale import text
from sugoroku.engine.session import GameSession


def render_player_list(session: GameSession) -> None:
    """Render the player table with a marker on the current player."""
    locale = session.locale
    rows = [
        {
            text(locale, "label.rank"): row.arrival_rank if row.arrival_rank is not None else "",
            "": "🎲" if row.is_current else "",
            text(locale, "label.name"): row.name,
            text(locale, "label.position"): row.position,
            text(locale, "label.skips"): row.pending_skips,
        }
        for row in session.player_rows()
    ]
    st.dataframe(rows, hide_index=True, use_container_width=True)
