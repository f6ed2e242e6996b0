"""
Base Page Object

Provides common functionality for all hellobooks page objects.
"""
import re
from typing import Callable, Optional, Pattern, Union

from playwright.sync_api import Locator, Page, expect

from ..actions import click_button, fill_field, optional_action, safe_expect_visible
from ..config import Config, Timeouts
from ..readiness import goto_and_wait, wait_for_page_ready


class BasePage:
    """Base class for all page objects."""

    PATH = ""
    ROUTE: Optional[Pattern[str]] = None

    def __init__(self, page: Page, base_url: Optional[str] = None):
        self.page = page
        self.base_url = (base_url or Config.BASE_URL).rstrip("/")

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = "", expected_route: Union[str, Pattern[str], None] = None) -> None:
        """Navigate to a path relative to base URL and wait for it to settle."""
        goto_and_wait(self.page, f"{self.base_url}{path}", expected_route)

    def navigate(self):
        """Open this page at its own path."""
        self.goto(self.PATH, self.ROUTE)
        return self

    def reload(self) -> None:
        self.page.reload()
        wait_for_page_ready(self.page)

    def current_url(self) -> str:
        return self.page.url

    def wait_until_ready(self, expected_route: Union[str, Pattern[str], None] = None) -> None:
        wait_for_page_ready(self.page, expected_route)

    # =========================================================================
    # Locators
    # =========================================================================

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    def get_by_role(self, role: str, **kwargs) -> Locator:
        return self.page.get_by_role(role, **kwargs)

    def get_by_text(self, text: Union[str, Pattern[str]], exact: bool = False) -> Locator:
        return self.page.get_by_text(text, exact=exact)

    def heading(self, name: Union[str, Pattern[str]]) -> Locator:
        return self.page.get_by_role("heading", name=name).first

    # =========================================================================
    # Resilient interaction
    # =========================================================================

    def fill(self, selector: str, value: str, field_name: str) -> bool:
        return fill_field(self.page, selector, value, field_name)

    def click_button(self, name: Union[str, Pattern[str]], note_text: str) -> bool:
        return click_button(self.page, name, note_text)

    def try_click(self, locator: Locator, note_text: str) -> bool:
        return optional_action(locator, lambda: locator.first.click(), note_text)

    def try_action(self, locator: Locator, action: Callable[[], None], note_text: str) -> bool:
        return optional_action(locator, action, note_text)

    def check_visible(
        self, locator: Locator, note_text: str, timeout: int = Timeouts.SAFE_VISIBLE
    ) -> bool:
        return safe_expect_visible(locator, note_text, timeout)

    def settle(self, milliseconds: int = Timeouts.SETTLE) -> None:
        """Fixed pause for client-side validation to render (use sparingly)."""
        self.page.wait_for_timeout(milliseconds)

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_url(self, pattern: Union[str, Pattern[str]], timeout: int = Timeouts.REDIRECT) -> None:
        """Assert URL matches pattern."""
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        expect(self.page).to_have_url(pattern, timeout=timeout)

    def expect_not_url(
        self, pattern: Union[str, Pattern[str]], timeout: int = Timeouts.REDIRECT
    ) -> None:
        """Assert URL does not match pattern."""
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        expect(self.page).not_to_have_url(pattern, timeout=timeout)

    # =========================================================================
    # Debugging
    # =========================================================================

    def screenshot(self, path: str = None, full_page: bool = False) -> bytes:
        return self.page.screenshot(path=path, full_page=full_page)
