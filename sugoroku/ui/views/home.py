"""Home page — choose a roster and a board, then start."""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from sugoroku.config.loader import parse_player_list, parse_world
from sugoroku.config.settings import get_settings
from sugoroku.engine.errors import GameSystemError
from sugoroku.engine.locale import Locale
from sugoroku.engine.session import GameSession


def _read_source(label: str, default_path: Path | None, key: str) -> tuple[str, str] | None:
    """Return ``(text, source name)`` from an upload or the configured default file."""
    uploaded = st.file_uploader(label, type=["toml"], key=key)
    if uploaded is not None:
        return uploaded.getvalue().decode("utf-8"), uploaded.name
    if default_path is not None and default_path.is_file():
        st.caption(f"Using {default_path}")
        return default_path.read_text(encoding="utf-8"), str(default_path)
    return None


def render_home_page() -> None:
    """Render the home / landing page."""
    settings = get_settings()
    st.title("Sugoroku")
    st.caption("Roll the die, follow the squares, reach the goal")

    locale = Locale(
        st.selectbox(
            "Language",
            options=[locale.value for locale in Locale],
            index=list(Locale).index(settings.locale),
        )
    )
    players = _read_source("Player list", settings.player_list_file, "upload_players")
    world = _read_source("World", settings.world_file, "upload_world")

    if st.button("Start", type="primary", disabled=players is None or world is None):
        try:
            roster = parse_player_list(*players)
            board = parse_world(world[0], source=world[1], min_dice=settings.min_dice)
        except GameSystemError as exc:
            st.error(str(exc))
            return
        session = GameSession(board, roster, locale=locale)
        session.start()
        st.session_state["session"] = session
        st.session_state["page"] = "game"
        st.rerun()
