import streamlit as st

from utils.config import DEFAULT_PER_PAGE


def init_session_state(defaults: dict, state=None):
    """
    Initialize keys in session state if they do not exist yet.
    """
    if state is None:
        state = st.session_state
    for k, v in defaults.items():
        if k not in state:
            # copy mutable defaults so sessions never share a list
            state[k] = v.copy() if isinstance(v, (list, dict)) else v


# Login screen state
LOGIN_STATE = {
    "is_admin_login": True,
    "login_phone": "",
    "login_password": "",
    "login_error": "",
}

# Updated Tokens Report state (one page window, no cache of other pages)
REPORT_STATE = {
    "report_rows": [],
    "report_current_page": 1,
    "report_per_page": DEFAULT_PER_PAGE,
    "report_total_rows": 0,
    "report_loaded": False,
}
