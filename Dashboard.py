import streamlit as st
import time

from core.auth import login
from core.services.login_service import sign_in, home_page_for, switch_login_mode
from core.state import init_session_state, LOGIN_STATE
from utils.config import REDIRECT_DELAY_SECONDS, REPORT_PAGE, ROLE_ADMIN, SYSTEM_CHECK_PAGE
from utils.ui_nav import render_sidebar, hide_default_sidebar_nav

# --- PAGE SETUP ---
st.set_page_config(page_title="Token Dashboard", page_icon="🚛", layout="centered", initial_sidebar_state="auto")

# --- HIDE DEFAULT NAV (GLOBAL FIX) ---
hide_default_sidebar_nav()

# --- GLOBAL STYLING (CSS) ---
def local_css():
    st.markdown("""
    <style>
        /* Hide Default Streamlit Elements */
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        /* Branding Colors */
        :root {
            --primary-color: #D4C5A9;
            --primary-dark: #B8A78B;
            --text-color: #5C4A3A;
            --bg-color: #FFF8DE;
        }

        .stApp {
            background: linear-gradient(135deg, #FFF8DE 0%, #F5EDCD 50%, #E8DCBB 100%);
        }

        /* Button Styling */
        .stButton > button, .stFormSubmitButton > button {
            background: #D4C5A9 !important;
            color: #5C4A3A !important;
            border-radius: 1.5rem !important;
            border: none !important;
            font-weight: 600 !important;
            min-height: 3rem;
        }
        .stButton > button:hover, .stFormSubmitButton > button:hover {
            background: linear-gradient(82.3deg, rgba(212, 197, 169, 1) 10.8%, rgba(184, 167, 139, 1) 94.3%) !important;
        }

        /* Input Fields styling */
        .stTextInput > div > div > input {
            border: 1px solid #D4C5A9;
            border-radius: 8px;
        }

        /* Login card header */
        .login-header {
            background: linear-gradient(135deg, #D4C5A9, #B8A78B);
            border-radius: 1.5rem 1.5rem 0 0;
            padding: 2rem;
            text-align: center;
            color: #5C4A3A;
        }
    </style>
    """, unsafe_allow_html=True)

local_css()

# --- UI RENDERER ---
if "user_info" not in st.session_state:
    st.session_state.user_info = None

init_session_state(LOGIN_STATE)

# === VIEW 1: LOGIN SCREEN ===
if st.session_state.user_info is None:
    is_admin_login = st.session_state.is_admin_login
    portal = "Admin Portal" if is_admin_login else "Operator Portal"

    st.markdown(
        f'<div class="login-header">'
        f'<h1 style="margin-bottom: 0.5rem;">Welcome Back!</h1>'
        f'<h3 style="margin: 0;">{portal}</h3>'
        f'</div>',
        unsafe_allow_html=True
    )

    error_box = st.empty()

    # Enter inside the form submits it
    with st.form("login_form"):
        phone = st.text_input("Phone Number", placeholder="Enter your phone number", key="login_phone")
        password = st.text_input("Password", type="password", placeholder="Enter your password",
                                 key="login_password", autocomplete="new-password")

        st.write("") # Spacer
        submit = st.form_submit_button("Sign In", type="primary", use_container_width=True)

    if submit:
        st.session_state.login_error = ""
        with st.spinner("Signing In..."):
            user_data, error = sign_in(phone, password, is_admin_login)

        if error:
            st.session_state.login_error = error
        else:
            login(user_data)
            # let the session settle before leaving the page
            time.sleep(REDIRECT_DELAY_SECONDS)
            st.switch_page(home_page_for(user_data["role"]))

    if st.session_state.login_error:
        error_box.error(st.session_state.login_error)

    st.button(
        f"Switch to {'Operator Login' if is_admin_login else 'Admin Login'}",
        use_container_width=True,
        on_click=switch_login_mode,
        args=(st.session_state,),
    )

# === VIEW 2: ADMIN DASHBOARD ===
else:
    user = st.session_state.user_info
    role = user.get("role")

    if role != ROLE_ADMIN:
        st.switch_page(home_page_for(role))

    render_sidebar(user)

    st.title("📊 Admin Dashboard")
    st.caption(f"Signed in as **{user.get('name') or user.get('phone', '')}**")
    st.divider()

    st.subheader("🚀 Quick access")
    c1, c2 = st.columns(2)
    with c1:
        if st.button("🧾 Updated Tokens Report", use_container_width=True, type="primary"):
            st.switch_page(REPORT_PAGE)
    with c2:
        if st.button("🩺 System Check", use_container_width=True):
            st.switch_page(SYSTEM_CHECK_PAGE)
