"""
Login Page Object

Encapsulates login page interactions.
"""
from typing import Optional

from playwright.sync_api import Locator, Page, expect

from .. import patterns
from ..config import Timeouts
from .base_page import BasePage


class LoginPage(BasePage):
    """Page object for the login page."""

    PATH = "/login"
    ROUTE = patterns.LOGIN_ROUTE

    # Selectors
    EMAIL_INPUT = patterns.EMAIL_INPUT
    PASSWORD_INPUT = patterns.PASSWORD_INPUT
    SEED_EMAIL_INPUT = '#email, input[name="email"], input[type="email"]'
    SEED_PASSWORD_INPUT = '#password, input[name="password"], input[type="password"]'
    SUBMIT_BUTTON = 'button[type="submit"]'
    ERROR_MESSAGE = '[role="alert"], .error, .text-red-500'
    FORM_TEXT = patterns.any_of("sign in", "login", "password", "email")

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)
        self.url = f"{self.base_url}{self.PATH}"

    # =========================================================================
    # Elements
    # =========================================================================

    @property
    def email_input(self) -> Locator:
        return self.locator(self.EMAIL_INPUT).first

    @property
    def password_input(self) -> Locator:
        return self.locator(self.PASSWORD_INPUT).first

    @property
    def login_form(self) -> Locator:
        return self.locator("form").filter(has_text=self.FORM_TEXT).first

    @property
    def login_heading(self) -> Locator:
        return self.heading(patterns.LOGIN_HEADING)

    @property
    def forgot_password_link(self) -> Locator:
        return self.get_by_role("link", name=patterns.FORGOT_PASSWORD).first

    def error_message(self, pattern=patterns.INVALID_CREDENTIALS) -> Locator:
        """Inline error element whose text matches ``pattern``."""
        candidates = self.locator(self.ERROR_MESSAGE).or_(self.get_by_text(pattern))
        return candidates.filter(has_text=pattern).first

    # =========================================================================
    # Actions
    # =========================================================================

    def enter_email(self, email: str) -> bool:
        return self.fill(self.EMAIL_INPUT, email, "Email")

    def enter_password(self, password: str) -> bool:
        return self.fill(self.PASSWORD_INPUT, password, "Password")

    def click_sign_in(self) -> bool:
        return self.click_button(patterns.SIGN_IN, "Sign In button not found on login page")

    def login(self, email: str, password: str) -> bool:
        """Fill both fields and submit. Returns False if the submit was not clicked."""
        self.enter_email(email)
        self.enter_password(password)
        return self.click_sign_in()

    def submit_credentials(self, email: str, password: str) -> None:
        """Strict login used for seeding: every step must succeed."""
        self.locator(self.SEED_EMAIL_INPUT).first.fill(email, timeout=Timeouts.SEED_LOGIN)
        self.locator(self.SEED_PASSWORD_INPUT).first.fill(password, timeout=Timeouts.SEED_LOGIN)
        self.locator(self.SUBMIT_BUTTON).first.click(timeout=Timeouts.SEED_LOGIN)

    def open_forgot_password(self) -> bool:
        link = self.forgot_password_link
        return self.try_click(link, "Forgot Password link not found")

    # =========================================================================
    # State
    # =========================================================================

    def is_login_page(self) -> bool:
        return bool(self.ROUTE.search(self.current_url()))

    def password_type(self) -> Optional[str]:
        return self.password_input.get_attribute("type")

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_login_form_visible(self) -> None:
        self.check_visible(self.email_input, "Email field not visible on login page")
        self.check_visible(self.password_input, "Password field not visible on login page")

    def expect_on_login_page(self, timeout: int = Timeouts.REDIRECT) -> None:
        self.expect_url(self.ROUTE, timeout=timeout)

    def expect_password_masked(self) -> None:
        expect(self.password_input).to_have_attribute("type", "password")
