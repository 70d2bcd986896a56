"""Sidebar navigation and sign-out."""
import streamlit as st

from core.constants import APP_SUBTITLE, APP_TITLE, MENU_ITEMS
from core.services import get_settings
from core.simple_auth import get_current_user, logout


def render_sidebar_menu():
    """Render the sidebar navigation menu and return the selected page label."""
    settings = get_settings()
    st.sidebar.markdown(f"### \U0001F6D2 {settings.company_name or APP_TITLE}")
    st.sidebar.caption(APP_SUBTITLE)

    if (
        "menu_selection" not in st.session_state
        or st.session_state.menu_selection not in MENU_ITEMS
    ):
        st.session_state.menu_selection = MENU_ITEMS[0]
    selected = st.sidebar.radio("Select Page", MENU_ITEMS, key="menu_selection")

    user = get_current_user()
    st.sidebar.markdown("---")
    st.sidebar.caption(f"Signed in as **{user['username']}**")
    if st.sidebar.button("\U0001F6AA Sign out", key="sidebar_logout"):
        logout()
        st.rerun()

    return selected
