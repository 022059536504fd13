import streamlit as st

from utils.config import REPORT_PAGE, ROLE_ADMIN, ROLE_HOME_PAGES, ROLE_OPERATOR, SYSTEM_CHECK_PAGE

# ==========================================
# 1. CENTRAL MENU CONFIGURATION
# ==========================================

# roles="all" means everyone.
# If explicit list provided, only those allow-listed (plus admin) can see.
MENU_STRUCTURE = [
    {
        "label": "Overview",
        "icon": "🏠",
        "expanded": True,
        "items": [
            {
                "label": "Admin Dashboard",
                "icon": "📊",
                "path": ROLE_HOME_PAGES[ROLE_ADMIN],
                "roles": [ROLE_ADMIN]
            },
            {
                "label": "Operator Home",
                "icon": "🚚",
                "path": ROLE_HOME_PAGES[ROLE_OPERATOR],
                "roles": [ROLE_OPERATOR]
            }
        ]
    },
    {
        "label": "Token Reports",
        "icon": "📋",
        "expanded": True,
        "items": [
            {
                "label": "Updated Tokens Report",
                "icon": "🧾",
                "path": REPORT_PAGE,
                "roles": [ROLE_ADMIN]
            }
        ]
    },
    {
        "label": "System",
        "icon": "⚙️",
        "expanded": False,
        "items": [
            {
                "label": "System Check",
                "icon": "🩺",
                "path": SYSTEM_CHECK_PAGE,
                "roles": [ROLE_ADMIN]
            }
        ]
    }
]


def visible_items(group, user_role):
    """
    Items of a menu group the role may open. Admin sees everything.
    """
    items = []
    for item in group["items"]:
        allowed_roles = item.get("roles", ["all"])
        if "all" not in allowed_roles and user_role not in allowed_roles and user_role != ROLE_ADMIN:
            continue
        items.append(item)
    return items


# ==========================================
# 2. RENDER FUNCTIONS
# ==========================================
def hide_default_sidebar_nav():
    st.markdown("""
    <style>
        [data-testid="stSidebarNav"] {display: none;}
    </style>
    """, unsafe_allow_html=True)


def render_sidebar(user_info):
    """
    Renders the role-filtered sidebar.
    Call once per script run: Dashboard.py does it directly,
    pages get it through the core.auth guards.
    """
    if not user_info:
        return

    hide_default_sidebar_nav()
    st.markdown("""
    <style>
        .stExpander {
            border: none !important;
            box-shadow: none !important;
        }

        .stExpander > details > summary {
            padding-left: 0 !important;
            border: none !important;
            color: #5C4A3A !important;
            font-weight: 600 !important;
        }
    </style>
    """, unsafe_allow_html=True)

    user_role = user_info.get("role", ROLE_OPERATOR)
    display_name = user_info.get("name") or user_info.get("username") or user_info.get("phone", "")

    with st.sidebar:
        st.markdown("### 🚛 Token Dashboard")
        st.caption(f"User: **{display_name}** | Role: `{user_role}`")
        st.divider()

        for group in MENU_STRUCTURE:
            items = visible_items(group, user_role)
            if not items:
                continue

            with st.expander(f"{group['icon']} {group['label']}", expanded=group.get("expanded", True)):
                for item in items:
                    st.page_link(item["path"], label=item["label"], icon=item.get("icon", "📄"),
                                 use_container_width=True)

        st.divider()
        if st.button("🚪 Sign out", use_container_width=True, key="sidebar_logout"):
            from core.auth import logout
            logout()
            st.switch_page("Dashboard.py")
