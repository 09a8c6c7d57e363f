"""
Session Statistics UI

Renders progress metrics and controls.
"""

import streamlit as st


def render_session_stats() -> bool:
    """
    Render session progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    controller = st.session_state.controller
    if controller.current_item() is None:
        return False

    stats = controller.stats
    col1, col2, col3, col4 = st.columns([2, 2, 2, 1])

    with col1:
        st.metric("Remaining", controller.remaining)

    with col2:
        st.metric("Reviewed", stats.reviewed)

    with col3:
        if stats.accuracy is not None:
            st.metric("Recalled", f"{stats.accuracy * 100:.0f}%")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit session", use_container_width=True):
            return True

    st.divider()
    return False


def render_session_complete():
    """Render session completion message."""
    stats = st.session_state.controller.stats
    if stats.reviewed > 0:
        st.success(f"🎉 Session complete! You reviewed {stats.reviewed} item(s).")
        st.info(f"Recalled: {stats.passed}, forgot: {stats.failed}")
