"""
System check for the backend API.
Validates the API settings, reachability and the shape of the token listing.
"""

import streamlit as st

from core.api_client import get_client, get_updated_tokens, load_api_settings
from core.auth import require_admin
from utils.api_error_handler import handle_api_errors

st.set_page_config(page_title="🩺 System Check", page_icon="🩺", layout="wide")

# --- AUTHENTICATION CHECK ---
require_admin()

st.title("🩺 System Check")
st.markdown("Checks the backend API configuration, connectivity and the token listing format.")

# Fields the Updated Tokens Report reads from each row
REQUIRED_TOKEN_FIELDS = {
    'tokenNo': 'Token No',
    'driverName': 'Driver Name',
    'vehicleNo': 'Vehicle No',
    'quantity': 'Quantity',
    'place': 'Place',
}
OPTIONAL_TOKEN_FIELDS = {
    'vehicleType': 'Vehicle Type',
    'vehicleRate': 'Vehicle Rate',
    'route': 'Route',
    'userId': 'Operator',
    'challanPin': 'Challan Pin',
    'updatedAt': 'Updated Date',
}

# === 1. API SETTINGS ===
st.header("⚙️ 1. API Settings")

settings = load_api_settings()
st.info(f"🌐 Base URL: `{settings['base_url']}`")
st.code(
    "\n".join(f"{k} = {settings[k]}" for k in ("login_path", "updated_tokens_path", "health_path", "timeout")),
    language="toml"
)
with st.expander("How to configure"):
    st.code("""
[api]
base_url = "https://your-backend.example.com/api"
login_path = "/auth/login"
updated_tokens_path = "/tokens/updated"
""", language="toml")

st.divider()

# === 2. CONNECTIVITY ===
st.header("📡 2. Connectivity")

ok, detail = get_client().check_health()
if ok:
    st.success(f"✅ API reachable ({detail})")
else:
    st.error(f"❌ API not reachable: {detail}")

st.divider()

# === 3. TOKEN LISTING ===
st.header("🧾 3. Token Listing")

@handle_api_errors
def fetch_listing_sample():
    return get_updated_tokens({"page": 1, "limit": 1})


result = fetch_listing_sample()
if result is None:
    st.error("❌ Listing request failed.")
else:
    if result.get("status") != "success":
        st.error(f"❌ Unexpected status: {result.get('status')!r}")
    else:
        st.success(f"✅ Listing OK, totalCount = {result.get('totalCount', 0)}")
        rows = result.get("data") or []
        if not rows:
            st.warning("⚠️ No rows returned, field check skipped.")
        else:
            sample = rows[0]
            col1, col2 = st.columns(2)
            with col1:
                st.subheader("Required fields")
                for field, label in REQUIRED_TOKEN_FIELDS.items():
                    if field in sample:
                        st.success(f"✅ {label} ({field})")
                    else:
                        st.error(f"❌ MISSING: {label} ({field})")
            with col2:
                st.subheader("Optional fields")
                for field, label in OPTIONAL_TOKEN_FIELDS.items():
                    if field in sample:
                        st.success(f"✅ {label} ({field})")
                    else:
                        st.warning(f"➖ Shown as N/A: {label} ({field})")

            with st.expander("📋 Sample row"):
                st.json(sample)
