"""
Spaced Repetition Review - Main App

Streamlit UI for the SM-2 review engine.

Run with:
    streamlit run app/streamlit_app.py
"""

import streamlit as st
from dotenv import load_dotenv

from app.router import PAGES
from app.state import ensure_session_state
from core.logging_config import configure_logging


load_dotenv()
configure_logging()


# ---- Page Setup ----

st.set_page_config(
    page_title="Spaced Repetition Review",
    page_icon="🧠",
    layout="centered"
)


# ---- Session State Initialization ----

ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


main()
