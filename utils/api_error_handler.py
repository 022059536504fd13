"""
Helper for backend API error handling.
Shows API failures as a short-lived popup instead of a stack trace.
"""
import streamlit as st
from functools import wraps

from core.api_client import ApiError
from utils.config import ERROR_POPUP_SECONDS


def show_error(message, duration=ERROR_POPUP_SECONDS):
    """
    Top-right error popup, dismissed automatically after `duration` seconds.
    """
    st.toast(message, icon="⚠️", duration=duration)


def handle_api_errors(func):
    """
    Decorator that catches ApiError, shows it as a popup and returns None.
    No retry: the user repeats the action if needed.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ApiError as e:
            print(f"API error in {func.__name__}: {e}")
            show_error(e.message)
            return None
    return wrapper
