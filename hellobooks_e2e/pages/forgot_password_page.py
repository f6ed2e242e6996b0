"""
Forgot Password Page Object
"""
from playwright.sync_api import Locator

from .. import patterns
from .base_page import BasePage


class ForgotPasswordPage(BasePage):
    """Page object for the password reset request form."""

    PATH = "/forgot-password"
    ROUTE = patterns.route(r"/forgot|reset")

    EMAIL_INPUT = 'input[name="email"], input[type="email"]'

    @property
    def heading_locator(self) -> Locator:
        return self.heading(patterns.RESET_HEADING)

    @property
    def email_input(self) -> Locator:
        return self.locator(self.EMAIL_INPUT).first

    @property
    def generic_message(self) -> Locator:
        return self.get_by_text(patterns.RESET_GENERIC_MESSAGE).first

    def request_reset(self, email: str) -> bool:
        self.fill(self.EMAIL_INPUT, email, "Reset Email")
        return self.click_button(patterns.RESET_SUBMIT, "Reset Password button not found")
