import sys
import os
import unittest
from unittest.mock import patch

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.api_client import ApiError
from utils.api_error_handler import handle_api_errors, show_error


class TestHandleApiErrors(unittest.TestCase):
    def setUp(self):
        patcher = patch("utils.api_error_handler.st")
        self.mock_st = patcher.start()
        self.addCleanup(patcher.stop)

    def test_passes_result_through(self):
        @handle_api_errors
        def load():
            return {"status": "success"}

        self.assertEqual(load(), {"status": "success"})
        self.mock_st.toast.assert_not_called()

    def test_api_error_becomes_popup_and_none(self):
        @handle_api_errors
        def load():
            raise ApiError("Server unavailable", status_code=503)

        self.assertIsNone(load())
        self.mock_st.toast.assert_called_once_with("Server unavailable", icon="⚠️", duration=3)

    def test_other_errors_propagate(self):
        @handle_api_errors
        def load():
            raise KeyError("data")

        with self.assertRaises(KeyError):
            load()
        self.mock_st.toast.assert_not_called()

    def test_wrapped_name_kept(self):
        @handle_api_errors
        def load_listing():
            return None

        self.assertEqual(load_listing.__name__, "load_listing")

    def test_show_error_duration(self):
        show_error("Token expired", duration=5)
        self.mock_st.toast.assert_called_once_with("Token expired", icon="⚠️", duration=5)


if __name__ == '__main__':
    unittest.main()
