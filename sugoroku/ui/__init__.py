"""Presentation layers: Streamlit app and terminal console."""
