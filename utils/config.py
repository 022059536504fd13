# utils/config.py - Central Configuration for the Token Dashboard

# --- ROLES ---
ROLE_ADMIN = "admin"
ROLE_OPERATOR = "operator"

# --- ROUTES ---
# Home page per role, relative to Dashboard.py
ROLE_HOME_PAGES = {
    ROLE_ADMIN: "Dashboard.py",           # "/"
    ROLE_OPERATOR: "pages/00_operator.py", # "/operator"
}

REPORT_PAGE = "pages/10_update_token_list.py"
SYSTEM_CHECK_PAGE = "pages/99_system_check.py"

# --- API DEFAULTS ---
# Overridable from the [api] table of .streamlit/secrets.toml
API_BASE_URL_ENV = "TOKEN_API_BASE_URL"
API_DEFAULTS = {
    "base_url": "http://localhost:5000/api",
    "login_path": "/auth/login",
    "updated_tokens_path": "/tokens/updated",
    "health_path": "/health",
    "timeout": 15,
}

# --- UI TIMING ---
ERROR_POPUP_SECONDS = 3
REDIRECT_DELAY_SECONDS = 0.1

# --- REPORT ---
DEFAULT_PER_PAGE = 20
ROWS_PER_PAGE_OPTIONS = [10, 20, 25, 50, 100]

DISPLAY_TIMEZONE = "Asia/Kolkata"
NOT_AVAILABLE = "N/A"
INVALID_DATE = "Invalid Date"

# Column order of the Updated Tokens Report
REPORT_COLUMNS = [
    "S.No.",
    "Updated Date",
    "Token No",
    "Driver Name",
    "Vehicle No",
    "Vehicle Type",
    "Vehicle Rate",
    "Quantity",
    "Place",
    "Route",
    "Operator",
    "Challan Pin",
]

# --- MESSAGES ---
LOGIN_FAILED_MESSAGE = "Login failed. Please check your credentials."
FETCH_FAILED_MESSAGE = "Failed to load tokens."
