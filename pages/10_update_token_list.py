import streamlit as st
import plotly.express as px

from core.auth import require_admin
from core.services.report_service import (
    build_report_frame,
    change_page,
    change_per_page,
    fetch_tokens,
    page_count,
    page_range_label,
    summarize_by_vehicle_type,
)
from core.state import init_session_state, REPORT_STATE
from utils.config import ROWS_PER_PAGE_OPTIONS

# --- PAGE SETUP ---
st.set_page_config(page_title="Updated Tokens Report", page_icon="🧾", layout="wide")

# --- AUTHENTICATION CHECK ---
require_admin()
init_session_state(REPORT_STATE)
state = st.session_state

# --- HEADER ---
st.markdown(
    '<div style="background: linear-gradient(to right, #D4C5A9, #E8DCBB, #F5EDCD); '
    'border-radius: 1rem; padding: 1.2rem; margin-bottom: 1rem; text-align: center;">'
    '<h2 style="color: #5C4A3A; margin: 0;">Updated Tokens Report</h2>'
    '</div>',
    unsafe_allow_html=True
)

# --- LOAD DATA (first visit) ---
if not state.report_loaded:
    with st.spinner("Loading data..."):
        fetch_tokens(state)

# --- PAGINATION CONTROLS ---
# Widget values follow the page that was actually fetched
total_rows = state.report_total_rows
per_page = state.report_per_page
current_page = state.report_current_page
last_page = page_count(total_rows, per_page)

state.report_per_page_select = per_page
state.report_page_input = current_page

c_size, c_prev, c_page, c_next, c_info, c_refresh = st.columns([1.4, 0.6, 1.2, 0.6, 1.6, 0.8])
with c_size:
    st.selectbox(
        "Rows per page",
        ROWS_PER_PAGE_OPTIONS,
        key="report_per_page_select",
        on_change=lambda: change_per_page(state, state.report_per_page_select),
    )
with c_prev:
    st.write("")
    st.button("◀", key="report_prev", disabled=current_page <= 1, use_container_width=True,
              on_click=change_page, args=(state, current_page - 1))
with c_page:
    st.number_input(
        "Page",
        min_value=1,
        max_value=max(last_page, current_page),
        step=1,
        key="report_page_input",
        on_change=lambda: change_page(state, int(state.report_page_input)),
    )
with c_next:
    st.write("")
    st.button("▶", key="report_next", disabled=current_page >= last_page, use_container_width=True,
              on_click=change_page, args=(state, current_page + 1))
with c_info:
    st.write("")
    st.markdown(f"**{page_range_label(current_page, per_page, total_rows)}**")
with c_refresh:
    st.write("")
    st.button("🔄", key="report_refresh", help="Reload this page", use_container_width=True,
              on_click=fetch_tokens, args=(state,))

# --- TABLE ---
df = build_report_frame(state.report_rows, current_page, per_page)

if df.empty:
    st.info("No data available")
else:
    st.dataframe(
        df,
        hide_index=True,
        use_container_width=True,
        column_config={
            "S.No.": st.column_config.NumberColumn(width="small"),
            "Updated Date": st.column_config.TextColumn(width="medium"),
            "Driver Name": st.column_config.TextColumn(width="medium"),
        },
    )

    st.download_button(
        "⬇️ Download this page (CSV)",
        df.to_csv(index=False).encode("utf-8"),
        file_name=f"updated_tokens_page_{current_page}.csv",
        mime="text/csv",
    )

    with st.expander("📈 Page summary by vehicle type"):
        summary = summarize_by_vehicle_type(df)
        fig = px.bar(summary, x='Vehicle Type', y='Total Quantity', text='Tokens',
                     color_discrete_sequence=['#B8A78B'])
        fig.update_layout(height=320, margin=dict(l=10, r=10, t=10, b=10))
        st.plotly_chart(fig, use_container_width=True)
        st.dataframe(summary, hide_index=True, use_container_width=True)
