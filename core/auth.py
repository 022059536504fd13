import streamlit as st

from utils.config import ROLE_ADMIN, ROLE_HOME_PAGES


def login(user_data):
    """
    Store the signed-in user (profile fields + token) for this browser session.
    """
    if user_data.get("role") not in ROLE_HOME_PAGES:
        raise ValueError(f"Unknown role: {user_data.get('role')!r}")
    st.session_state.user_info = dict(user_data)


def logout():
    """
    Drop the session and any report state loaded with it.
    """
    st.session_state.user_info = None
    for key in [k for k in st.session_state.keys() if str(k).startswith("report_")]:
        del st.session_state[key]


def get_token():
    user_info = st.session_state.get("user_info")
    if not user_info:
        return None
    return user_info.get("token")


def require_login():
    """
    Check if user is logged in. If not, stop execution and warn.
    Also handles centralized sidebar injection.
    """
    if "user_info" not in st.session_state or not st.session_state.user_info:
        st.warning("⚠️ Please sign in on the Dashboard first!")
        if st.button("🔑 Go to Sign In"):
            st.switch_page("Dashboard.py")
        st.stop()

    from utils.ui_nav import render_sidebar
    render_sidebar(st.session_state.user_info)

    return st.session_state.user_info


def _deny(message):
    st.error(message)
    if st.button("🔙 Back to home"):
        role = st.session_state.user_info.get("role")
        st.switch_page(ROLE_HOME_PAGES.get(role, "Dashboard.py"))
    st.stop()


def require_admin():
    """
    Strict guard for Admin role.
    """
    user_info = require_login()
    if user_info.get("role") != ROLE_ADMIN:
        _deny("⛔ Access denied! This page is for admins only.")
    return user_info


def require_roles(allowed_roles):
    """
    Strict guard for specified roles.
    """
    user_info = require_login()
    if user_info.get("role") not in allowed_roles and user_info.get("role") != ROLE_ADMIN:
        _deny(f"⛔ You do not have access to this page! (Required role: {', '.join(allowed_roles)})")
    return user_info
