from core import api_client
from utils.config import (
    LOGIN_FAILED_MESSAGE,
    ROLE_ADMIN,
    ROLE_HOME_PAGES,
    ROLE_OPERATOR,
)


def expected_role(is_admin_login):
    """
    Role the selected login mode accepts.
    """
    return ROLE_ADMIN if is_admin_login else ROLE_OPERATOR


def sign_in(phone, password, is_admin_login, login_fn=None):
    """
    Authenticate against the API and check the role matches the login mode.
    Returns (user_data, error_msg); user_data carries the profile plus token.
    """
    if login_fn is None:
        login_fn = api_client.login_user

    try:
        response = login_fn({"phone": phone, "password": password})
    except Exception as e:
        print(f"Login error: {e}")
        return None, str(e) or LOGIN_FAILED_MESSAGE

    if response.get("status") != "success":
        return None, LOGIN_FAILED_MESSAGE

    user = (response.get("data") or {}).get("user") or {}
    wanted = expected_role(is_admin_login)
    if user.get("role") != wanted:
        return None, f"Invalid credentials for {wanted} login"

    user_data = dict(user)
    user_data["token"] = response.get("token")
    return user_data, None


def home_page_for(role):
    """
    Page to land on after sign-in: admin -> Dashboard ("/"), operator -> "/operator".
    """
    if role not in ROLE_HOME_PAGES:
        raise ValueError(f"No home page for role {role!r}")
    return ROLE_HOME_PAGES[role]


def switch_login_mode(state):
    """
    Toggle admin/operator login and clear the form.
    """
    state["is_admin_login"] = not state.get("is_admin_login", True)
    state["login_phone"] = ""
    state["login_password"] = ""
    state["login_error"] = ""
