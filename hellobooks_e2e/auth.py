"""
Authentication Setup Helpers

Seed login that every scenario runs first, and a deterministic way to reach
a logged-out state afterwards.

Usage:
    from hellobooks_e2e.auth import ensure_logged_out, login

    login(page)               # authenticated, or the scenario fails here
    ensure_logged_out(page)   # cookies and storage cleared, on /login
"""
import logging
import time
import uuid
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from . import patterns
from .config import Config, Timeouts
from .pages import DashboardPage, LoginPage

logger = logging.getLogger(__name__)


def login(
    page: Page,
    email: Optional[str] = None,
    password: Optional[str] = None,
    base_url: Optional[str] = None,
) -> None:
    """
    Log in with the seed account and wait for the dashboard.

    Raises:
        playwright TimeoutError: if the dashboard route is never reached
    """
    email = email or Config.HELLOBOOKS_SEED_EMAIL
    password = password or Config.HELLOBOOKS_SEED_PASSWORD

    login_page = LoginPage(page, base_url)
    logger.info(f"Seed login as {email} on {login_page.base_url}")
    page.goto(login_page.url)
    login_page.submit_credentials(email, password)
    page.wait_for_url(patterns.DASHBOARD_ROUTE, timeout=Timeouts.SEED_LOGIN)
    logger.info(f"Seed login complete: {page.url}")


def clear_session(page: Page) -> None:
    """Drop cookies and web storage for the current origin."""
    page.context.clear_cookies()
    try:
        page.evaluate("() => { localStorage.clear(); sessionStorage.clear(); }")
    except PlaywrightError as e:
        # about:blank and cross-origin frames have no storage to clear
        logger.debug(f"Storage not cleared on {page.url}: {e}")


def ensure_logged_out(
    page: Page, base_url: Optional[str] = None, ui_logout: bool = True
) -> LoginPage:
    """
    Put the browser in a logged-out state and open the login page.

    The account-menu logout is best-effort so the server session ends too;
    clearing the client session always happens, so the outcome does not
    depend on what the UI showed.
    """
    if ui_logout:
        DashboardPage(page, base_url).logout_via_account_menu()
    clear_session(page)

    login_page = LoginPage(page, base_url)
    login_page.navigate()
    logger.info("Logged-out state established")
    return login_page


def unique_email(prefix: str = "autouser", domain: str = "example.com") -> str:
    """Collision-free address for data the suite never cleans up."""
    return f"{prefix}_{int(time.time() * 1000)}{uuid.uuid4().hex[:4]}@{domain}"
