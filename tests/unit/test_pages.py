"""
Tests for page object fallbacks
"""
from unittest.mock import patch

import pytest

from hellobooks_e2e import patterns
from hellobooks_e2e.annotations import AnnotationLog, annotation_context
from hellobooks_e2e.pages import DashboardPage, LoginPage, Navigation
from tests.unit.fakes import make_locator, make_page

BASE_URL = "https://dev.hellobooks.ai"


@pytest.fixture
def notes():
    log = AnnotationLog(scenario="pages")
    with annotation_context(log):
        yield log


class TestDashboardLogout:
    @patch("hellobooks_e2e.actions.expect")
    def test_sidebar_button_used_when_visible(self, mock_expect, notes):
        page = make_page()
        dashboard = DashboardPage(page, BASE_URL)

        assert dashboard.logout_from_sidebar() is True

        page.locator.assert_called_once_with(patterns.SIDEBAR)
        page.get_by_role.assert_not_called()
        assert len(notes) == 0

    @patch("hellobooks_e2e.actions.expect")
    def test_falls_back_to_page_wide_button(self, mock_expect, notes):
        mock_expect.return_value.to_be_visible.side_effect = AssertionError("hidden")
        button = make_locator()
        page = make_page(button)

        assert DashboardPage(page, BASE_URL).logout_from_sidebar() is True

        assert page.get_by_role.call_args[0] == ("button",)
        button.click.assert_called_once_with()
        assert notes.descriptions() == ["Logout button not visible in sidebar footer"]


class TestNavigation:
    def test_go_to_waits_for_page(self, notes):
        page = make_page()

        assert Navigation(page, BASE_URL).go_to("Banking") is True

        page.wait_for_load_state.assert_any_call("domcontentloaded")
        assert len(notes) == 0

    def test_missing_menu_entry_noted(self, notes):
        page = make_page(make_locator(visible=False))

        assert Navigation(page, BASE_URL).go_to("Inventory") is False

        assert notes.descriptions() == ["Menu entry 'Inventory' not found"]
        page.wait_for_load_state.assert_not_called()


class TestLoginPage:
    def test_url_built_from_base(self):
        assert LoginPage(make_page(), BASE_URL + "/").url == f"{BASE_URL}/login"

    def test_is_login_page(self):
        assert LoginPage(make_page(url=f"{BASE_URL}/login?next=/banking"), BASE_URL).is_login_page()
        assert not LoginPage(make_page(), BASE_URL).is_login_page()

    def test_login_reports_missing_submit(self, notes):
        field = make_locator()
        page = make_page(field)
        page.get_by_role.return_value = make_locator(visible=False)

        assert LoginPage(page, BASE_URL).login("user@example.com", "Password123!") is False

        assert notes.descriptions() == ["Sign In button not found on login page"]
        assert field.fill.call_count == 2
