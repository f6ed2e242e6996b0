"""
Signup Page Object

Encapsulates registration form interactions.
"""
from playwright.sync_api import Locator

from .. import patterns
from .base_page import BasePage


class SignupPage(BasePage):
    """Page object for the registration page."""

    PATH = "/signup"
    ROUTE = patterns.SIGNUP_ROUTE

    EMAIL_INPUT = 'input[type="email"], input[name="email"], input[placeholder*="email"]'
    PASSWORD_INPUT = 'input[type="password"], input[name="password"], input[placeholder*="password"]'

    @property
    def form(self) -> Locator:
        return self.locator("form").first

    @property
    def email_input(self) -> Locator:
        return self.locator(self.EMAIL_INPUT).first

    @property
    def password_input(self) -> Locator:
        return self.locator(self.PASSWORD_INPUT).first

    @property
    def signup_link(self) -> Locator:
        return self.get_by_role("link", name=patterns.SIGN_UP).first

    @property
    def password_length_error(self) -> Locator:
        return self.get_by_text(patterns.PASSWORD_TOO_SHORT).first

    @property
    def password_marked_invalid(self) -> Locator:
        return self.locator(
            'input[type="password"][aria-invalid="true"], input[name="password"][aria-invalid="true"]'
        ).first

    def open_from_landing(self) -> None:
        """Follow a sign-up link, falling back to the direct route."""
        self.try_click(self.signup_link, "Sign Up link not found on landing page")
        if not self.ROUTE.search(self.current_url()):
            self.goto(self.PATH)
        else:
            self.wait_until_ready()

    def enter_email(self, email: str) -> bool:
        return self.fill(self.EMAIL_INPUT, email, "Email")

    def enter_password(self, password: str) -> bool:
        return self.fill(self.PASSWORD_INPUT, password, "Password")

    def click_sign_up(self) -> bool:
        return self.click_button(patterns.SIGN_UP, "Sign Up button not found")

    def register(self, email: str, password: str) -> bool:
        self.enter_email(email)
        self.enter_password(password)
        return self.click_sign_up()
