import sys
import os
import unittest
from unittest.mock import MagicMock, patch

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core import auth
from utils.ui_nav import MENU_STRUCTURE, visible_items


class FakeSessionState(dict):
    """dict with attribute access, like st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class TestAuthContext(unittest.TestCase):
    def setUp(self):
        patcher = patch("core.auth.st")
        self.mock_st = patcher.start()
        self.addCleanup(patcher.stop)
        self.mock_st.session_state = FakeSessionState()

    def test_login_stores_user_and_token(self):
        auth.login({"name": "Ravi", "role": "admin", "token": "jwt-1"})

        self.assertEqual(self.mock_st.session_state.user_info["role"], "admin")
        self.assertEqual(auth.get_token(), "jwt-1")

    def test_login_rejects_unknown_role(self):
        with self.assertRaises(ValueError):
            auth.login({"role": "driver", "token": "x"})
        self.assertNotIn("user_info", self.mock_st.session_state)

    def test_logout_clears_session_and_report(self):
        state = self.mock_st.session_state
        state.user_info = {"role": "admin", "token": "jwt-1"}
        state.report_rows = [{"tokenNo": "T-1"}]
        state.report_current_page = 3
        state.is_admin_login = True

        auth.logout()

        self.assertIsNone(state.user_info)
        self.assertNotIn("report_rows", state)
        self.assertNotIn("report_current_page", state)
        self.assertIn("is_admin_login", state)
        self.assertIsNone(auth.get_token())

    def test_require_login_stops_when_signed_out(self):
        self.mock_st.button.return_value = False
        self.mock_st.stop.side_effect = RuntimeError("stopped")

        with self.assertRaises(RuntimeError):
            auth.require_login()
        self.mock_st.warning.assert_called_once()

    @patch("utils.ui_nav.render_sidebar")
    def test_operator_denied_admin_page(self, _sidebar):
        self.mock_st.session_state.user_info = {"role": "operator"}
        self.mock_st.button.return_value = False
        self.mock_st.stop.side_effect = RuntimeError("stopped")

        with self.assertRaises(RuntimeError):
            auth.require_admin()
        self.mock_st.error.assert_called_once()

    @patch("utils.ui_nav.render_sidebar")
    def test_admin_passes_role_guard(self, _sidebar):
        self.mock_st.session_state.user_info = {"role": "admin"}

        user = auth.require_roles(["operator"])

        self.assertEqual(user["role"], "admin")
        self.mock_st.stop.assert_not_called()


class TestMenu(unittest.TestCase):
    def paths_for(self, role):
        return [item["path"] for group in MENU_STRUCTURE for item in visible_items(group, role)]

    def test_operator_menu(self):
        self.assertEqual(self.paths_for("operator"), ["pages/00_operator.py"])

    def test_admin_sees_everything(self):
        paths = self.paths_for("admin")
        self.assertIn("Dashboard.py", paths)
        self.assertIn("pages/10_update_token_list.py", paths)
        self.assertIn("pages/99_system_check.py", paths)


if __name__ == '__main__':
    unittest.main()
