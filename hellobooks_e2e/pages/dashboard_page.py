"""
Dashboard Page Object

Encapsulates the authenticated shell: sidebar, account menu, logout.
"""
from typing import Optional

from playwright.sync_api import Locator, Page

from .. import patterns
from .base_page import BasePage


class DashboardPage(BasePage):
    """Page object for the authenticated application shell."""

    PATH = "/"

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)
        self.url = self.base_url

    # =========================================================================
    # Elements
    # =========================================================================

    @property
    def sidebar(self) -> Locator:
        return self.locator(patterns.SIDEBAR).first

    @property
    def navigation(self) -> Locator:
        return self.locator(patterns.NAVIGATION).first

    @property
    def dashboard_heading(self) -> Locator:
        return self.heading(patterns.DASHBOARD_HEADING)

    @property
    def account_menu(self) -> Locator:
        return self.get_by_role("button", name=patterns.ACCOUNT_MENU).first

    @property
    def logout_menu_item(self) -> Locator:
        return self.get_by_role("menuitem", name=patterns.LOGOUT).first

    # =========================================================================
    # Logout
    # =========================================================================

    def logout_via_account_menu(self) -> bool:
        """Open the account menu and pick its logout item, best-effort."""
        logged_out = False

        def open_menu_and_logout():
            nonlocal logged_out
            self.account_menu.click()
            logged_out = self.try_click(self.logout_menu_item, "Logout menu item not found")

        self.try_action(
            self.account_menu, open_menu_and_logout, "Account menu not found for logout"
        )
        return logged_out

    def logout_from_sidebar(self) -> bool:
        """
        Click the sidebar logout button.

        Falls back to a page-wide logout button when the sidebar one is not
        visible.
        """
        button = self.sidebar.get_by_role("button", name=patterns.any_of("logout")).first
        if self.check_visible(button, "Logout button not visible in sidebar footer"):
            return self.try_click(button, "Could not click logout button in sidebar")
        return self.click_button(
            patterns.any_of("logout"), "Logout button not found outside sidebar"
        )

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_dashboard_loaded(self) -> None:
        """Soft checks that the authenticated shell rendered."""
        self.check_visible(self.dashboard_heading, "Dashboard heading not visible")
        self.check_visible(self.navigation, "Navigation not visible after login")
