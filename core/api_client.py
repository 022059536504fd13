"""
HTTP client for the token logistics backend.
All transport and HTTP failures surface as ApiError.
"""
import os

import requests
import streamlit as st

from core.auth import get_token
from utils.config import API_BASE_URL_ENV, API_DEFAULTS


class ApiError(Exception):
    """Raised when the backend cannot be reached or rejects a request."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def load_api_settings():
    """
    Defaults, then TOKEN_API_BASE_URL, then the [api] table of secrets.toml.
    """
    settings = dict(API_DEFAULTS)
    env_url = os.getenv(API_BASE_URL_ENV)
    if env_url:
        settings["base_url"] = env_url
    try:
        settings.update(dict(st.secrets.get("api", {})))
    except FileNotFoundError:
        # no secrets.toml: defaults + environment
        pass
    return settings


class ApiClient:
    def __init__(self, base_url, session=None, timeout=API_DEFAULTS["timeout"],
                 login_path=API_DEFAULTS["login_path"],
                 updated_tokens_path=API_DEFAULTS["updated_tokens_path"],
                 health_path=API_DEFAULTS["health_path"]):
        if not base_url:
            raise ValueError("ApiClient Error: 'base_url' must not be empty.")
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.login_path = login_path
        self.updated_tokens_path = updated_tokens_path
        self.health_path = health_path

    @classmethod
    def from_settings(cls, settings):
        return cls(
            settings["base_url"],
            timeout=float(settings.get("timeout", API_DEFAULTS["timeout"])),
            login_path=settings.get("login_path", API_DEFAULTS["login_path"]),
            updated_tokens_path=settings.get("updated_tokens_path", API_DEFAULTS["updated_tokens_path"]),
            health_path=settings.get("health_path", API_DEFAULTS["health_path"]),
        )

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method, path, token=None, **kwargs):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            resp = self.session.request(method, self._url(path), headers=headers,
                                        timeout=self.timeout, **kwargs)
        except requests.Timeout:
            raise ApiError("Request timed out. Please try again.")
        except requests.RequestException as e:
            raise ApiError(f"Network error: {e}")

        try:
            body = resp.json()
        except ValueError:
            body = None

        if resp.status_code >= 400:
            message = None
            if isinstance(body, dict):
                message = body.get("message") or body.get("error")
            raise ApiError(message or f"Request failed with status code {resp.status_code}",
                           status_code=resp.status_code)

        if not isinstance(body, dict):
            raise ApiError("Unexpected response from server.", status_code=resp.status_code)
        return body

    def login_user(self, phone, password):
        return self._request("POST", self.login_path,
                             json={"phone": phone, "password": password})

    def get_updated_tokens(self, page, limit, token=None):
        return self._request("GET", self.updated_tokens_path, token=token,
                             params={"page": page, "limit": limit})

    def check_health(self):
        """Return (ok, detail) for the system check page."""
        try:
            resp = self.session.get(self._url(self.health_path), timeout=self.timeout)
        except requests.RequestException as e:
            return False, str(e)
        if resp.status_code >= 400:
            return False, f"HTTP {resp.status_code}"
        return True, f"HTTP {resp.status_code} in {resp.elapsed.total_seconds():.2f}s"


@st.cache_resource
def get_client():
    """Initialize the API client from secrets (Cached)."""
    return ApiClient.from_settings(load_api_settings())


def login_user(payload):
    return get_client().login_user(payload["phone"], payload["password"])


def get_updated_tokens(params):
    return get_client().get_updated_tokens(params["page"], params["limit"], token=get_token())
