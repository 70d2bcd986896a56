"""Static credential gate for the console."""
import hashlib
import hmac
import logging

import streamlit as st

from core import constants
from core.constants import APP_SUBTITLE, APP_TITLE

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash password using SHA-256."""
    return hashlib.sha256((password or "").encode()).hexdigest()


def verify_login(username: str, password: str) -> bool:
    """Compare against the configured console credentials."""
    username = (username or "").strip()
    user_ok = hmac.compare_digest(username.encode(), constants.APP_USERNAME.encode())
    password_ok = hmac.compare_digest(hash_password(password), hash_password(constants.APP_PASSWORD))
    if not (user_ok and password_ok):
        logger.warning("Failed login attempt for user '%s'", username)
        return False
    return True


def login_form():
    """Display the login form."""
    st.markdown(f"## \U0001F6D2 {APP_TITLE}")
    st.caption(APP_SUBTITLE)
    with st.form("login_form", clear_on_submit=False):
        username = st.text_input("Username", placeholder="Enter your username")
        password = st.text_input("Password", type="password", placeholder="Enter your password")
        submit = st.form_submit_button("Sign in", width="stretch")

        if submit:
            if username and password:
                if verify_login(username, password):
                    st.session_state.authenticated = True
                    st.session_state.username = username.strip()
                    logger.info("User '%s' signed in", username.strip())
                    st.rerun()
                else:
                    st.error("❌ Invalid username or password")
            else:
                st.warning("⚠️ Please enter both username and password")

    with st.expander("Test credentials"):
        st.write(f"**Username:** {constants.APP_USERNAME}")
        st.write(f"**Password:** {constants.APP_PASSWORD}")


def logout():
    """Clear authentication session."""
    logger.info("User '%s' signed out", st.session_state.get("username"))
    st.session_state.authenticated = False
    st.session_state.username = None


def require_auth():
    """Check if user is authenticated. Returns True if authenticated, False otherwise."""
    return bool(st.session_state.get("authenticated", False))


def get_current_user():
    """Get current user info."""
    return {"username": st.session_state.get("username")}
