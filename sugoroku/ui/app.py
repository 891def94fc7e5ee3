"""Sugoroku — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from sugoroku.config.log import configure_logging
from sugoroku.config.settings import get_settings


_RULES = """\
**Goal:** Reach the last square!

**Turns:**
- Roll the die (or type the value you rolled) and move forward
- The square you land on fires its effects
- Effects may move you or the other players, or make you rest
- Resting players lose their turn until their skip count runs out
- Players who reach the goal are ranked in arrival order
"""


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Sugoroku",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    configure_logging(get_settings())

    if "page" not in st.session_state:
        st.session_state["page"] = "home"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "home":
        from sugoroku.ui.views.home import render_home_page
        render_home_page()
    elif page == "game":
        from sugoroku.ui.views.game import render_game_page
        render_game_page()
    elif page == "results":
        from sugoroku.ui.views.results import render_results_page
        render_results_page()
    else:
        st.session_state["page"] = "home"
        st.rerun()

    if page == "game":
        with st.sidebar:
            st.markdown("### Rules")
            st.markdown(_RULES)


if __name__ == "__main__":
    main()
