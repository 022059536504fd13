import streamlit as st

from core.auth import require_roles
from utils.config import ROLE_OPERATOR

st.set_page_config(page_title="Operator Home", page_icon="🚚", layout="centered")

# --- AUTH CHECK ---
user_info = require_roles([ROLE_OPERATOR])

st.title("🚚 Operator Home")
st.markdown(f"Welcome **{user_info.get('name') or user_info.get('username') or user_info.get('phone', '')}**")
st.divider()

# Profile fields returned by the login endpoint
c1, c2 = st.columns(2)
with c1:
    st.metric("Role", str(user_info.get("role", "")).title())
with c2:
    st.metric("Phone", user_info.get("phone") or "N/A")

if user_info.get("username"):
    st.caption(f"Username: `{user_info['username']}`")
