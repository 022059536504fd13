import math

import pandas as pd

from core import api_client
from core.records import TokenRecord
from utils import api_error_handler
from utils.config import FETCH_FAILED_MESSAGE, REPORT_COLUMNS


def fetch_tokens(state, page=None, fetch_fn=None):
    """
    Request one page of updated tokens and replace the current window with it.
    On failure the popup is shown and the table is emptied.
    """
    if fetch_fn is None:
        fetch_fn = api_client.get_updated_tokens
    if page is None:
        page = state["report_current_page"]

    params = {
        "page": page,
        "limit": state["report_per_page"],
    }

    try:
        result = fetch_fn(params)
        if result.get("status") == "success":
            state["report_rows"] = result.get("data") or []
            state["report_total_rows"] = result.get("totalCount") or 0
            state["report_current_page"] = page
    except Exception as e:
        print(f"Fetch error: {e}")
        api_error_handler.show_error(str(e) or FETCH_FAILED_MESSAGE)
        state["report_rows"] = []
    finally:
        state["report_loaded"] = True


def change_page(state, page, fetch_fn=None):
    fetch_tokens(state, page=page, fetch_fn=fetch_fn)


def change_per_page(state, new_per_page, fetch_fn=None):
    """
    Apply a new page size, keeping the current page when it still exists.
    """
    if new_per_page <= 0:
        raise ValueError(f"Rows per page must be positive, got {new_per_page}")
    last_page = page_count(state["report_total_rows"], new_per_page)
    page = max(1, min(state["report_current_page"], last_page))
    state["report_per_page"] = new_per_page
    fetch_tokens(state, page=page, fetch_fn=fetch_fn)


def page_count(total_rows, per_page):
    return max(1, math.ceil(total_rows / per_page))


def serial_number(index, current_page, per_page):
    return index + 1 + (current_page - 1) * per_page


def page_range_label(current_page, per_page, total_rows):
    """
    e.g. '21-40 of 95'
    """
    if total_rows <= 0:
        return "0-0 of 0"
    start = (current_page - 1) * per_page + 1
    end = min(current_page * per_page, total_rows)
    return f"{start}-{end} of {total_rows}"


def build_report_frame(rows, current_page, per_page):
    """
    Build the display table for the current page window.
    """
    data = [
        TokenRecord.from_api(row).to_display_row(serial_number(i, current_page, per_page))
        for i, row in enumerate(rows)
    ]
    return pd.DataFrame(data, columns=REPORT_COLUMNS)


def summarize_by_vehicle_type(df):
    """
    Token count and total quantity per vehicle type on the current page.
    """
    if df.empty:
        return pd.DataFrame(columns=['Vehicle Type', 'Tokens', 'Total Quantity'])

    quantities = pd.to_numeric(df['Quantity'], errors='coerce').fillna(0)
    summary = (
        df.assign(_qty=quantities)
        .groupby('Vehicle Type')
        .agg(Tokens=('Token No', 'size'), **{'Total Quantity': ('_qty', 'sum')})
        .reset_index()
        .sort_values('Total Quantity', ascending=False)
    )
    return summary
