"""
Streamlit session state and database initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core import sm2


@st.cache_resource
def get_store() -> sm2.SqlAlchemyReviewStore:
    """
    Create the review store and its schema (cached per Streamlit server).
    """
    engine = sm2.get_engine()
    sm2.init_db(engine)
    return sm2.SqlAlchemyReviewStore(engine)


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "user_id" not in st.session_state:
        st.session_state.user_id = sm2.get_default_user_id()
    if "controller" not in st.session_state:
        st.session_state.controller = sm2.ReviewSessionController(
            get_store(),
            limit=sm2.get_session_limit(),
        )
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "session_started" not in st.session_state:
        st.session_state.session_started = False
