"""Results page — final standings."""

from __future__ import annotations

import streamlit as st

from sugoroku.engine.session import GameSession


def _ordinal(rank: int) -> str:
    if rank % 100 in (11, 12, 13):
        return f"{rank}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(rank % 10, "th")
    return f"{rank}{suffix}"


def render_results_page() -> None:
    """Render the results page."""
    ss = st.session_state
    session: GameSession | None = ss.get("session")

    if session is None:
        ss["page"] = "home"
        st.rerun()
        return

    st.title("Game Over")
    st.subheader("Final Standings")

    for rank, name in session.roster.standings():
        st.markdown(f"**{_ordinal(rank)}** — {name}")

    st.divider()
    if st.button("Back to Home", use_container_width=True):
        ss.pop("session", None)
        ss["page"] = "home"
        st.rerun()
