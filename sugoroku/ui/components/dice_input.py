"""Dice input component — type a rolled value or let the app roll."""

from __future__ import annotations

import streamlit as st

from sugoroku.engine.session import GameSession


def render_dice_input(session: GameSession) -> int | str | None:
    """Render the die value form.

    Returns:
        The typed value, ``"roll"`` for a random roll, or ``None`` if no
        action was taken.
    """
    world = session.world
    cols = st.columns(2)

    with cols[0]:
        value = st.number_input(
            "Dice value",
            min_value=0,
            step=1,
            value=max(world.min_dice, 1),
            key="dice_value",
        )
        if st.button("Submit", key="btn_submit", use_container_width=True):
            return int(value)

    with cols[1]:
        st.caption(f"Range: {world.min_dice}-{world.dice_max}")
        if st.button("Roll Dice", key="btn_roll", use_container_width=True, type="primary"):
            return "roll"

    return None
