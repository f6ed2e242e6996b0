"""
Navigation Page Object

Moves between feature areas through the application's menus.
"""
from playwright.sync_api import Locator

from ..patterns import text_regex
from .base_page import BasePage


class Navigation(BasePage):
    """Menu navigation shared by every authenticated page."""

    def menu_entry(self, menu: str) -> Locator:
        """Link, button or menu item labelled ``menu``."""
        name = text_regex(menu)
        return (
            self.get_by_role("link", name=name)
            .or_(self.get_by_role("button", name=name))
            .or_(self.get_by_role("menuitem", name=name))
            .first
        )

    def go_to(self, menu: str) -> bool:
        """Open a menu entry, best-effort. Returns False if it could not be clicked."""
        entry = self.menu_entry(menu)
        opened = self.try_click(entry, f"Menu entry '{menu}' not found")
        if opened:
            self.wait_until_ready()
        return opened
