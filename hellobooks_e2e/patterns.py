"""
Text Patterns

Case-insensitive matchers for element selection and content assertions,
plus the patterns and selectors shared across scenarios.
"""
import re
from typing import Pattern


def text_regex(text: str) -> Pattern[str]:
    """
    Case-insensitive matcher for literal text.

    Every regex metacharacter in ``text`` is escaped, so captions such as
    "Didn't match?" or "if your account exists..." match verbatim.
    """
    return re.compile(re.escape(text), re.IGNORECASE)


def any_of(*alternatives: str) -> Pattern[str]:
    """Case-insensitive alternation of regex fragments."""
    return re.compile("|".join(alternatives), re.IGNORECASE)


def route(fragment: str) -> Pattern[str]:
    """URL matcher for a route fragment such as "/login"."""
    return re.compile(fragment, re.IGNORECASE)


# Routes
LOGIN_ROUTE = route(r"/login")
DASHBOARD_ROUTE = re.compile(r"dashboard")
SIGNUP_ROUTE = route(r"/signup|/register")
AUTH_ROUTES = route(r"/login|/signup|/register")

# Buttons, links and menu items
SIGN_IN = any_of("sign in", "log in", "login")
SIGN_UP = any_of("sign up", "register", "create account")
LOGOUT = any_of("log out", "logout", "sign out")
ACCOUNT_MENU = any_of("profile", "account", "avatar", "user", "settings")
FORGOT_PASSWORD = any_of("forgot password", "reset password")
RESET_SUBMIT = any_of("reset password", "send reset", "send link", "submit")

# Headings
LOGIN_HEADING = any_of("log in", "sign in")
DASHBOARD_HEADING = any_of("dashboard", "overview", "home")
RESET_HEADING = any_of("reset password", "forgot password")

# Messages
INVALID_CREDENTIALS = text_regex("Invalid login credentials")
INVALID_EMAIL = any_of(
    "invalid email", r"email.*valid", r"email.*format", "enter a valid email"
)
PASSWORD_TOO_SHORT = re.compile(r"password.*(6|six).*?(characters|length|minimum)", re.IGNORECASE)
RESET_GENERIC_MESSAGE = any_of(
    r"if.*account.*exist", "check your email", r"instructions.*sent", r"email.*sent"
)
LOGIN_SUCCESS = any_of("success", "logged in", "welcome")
SIGNUP_SUCCESS = any_of("success", "created", "welcome", "verified", "registered")
EMPTY_ROW = any_of("no data", "empty")

# Selectors
EMAIL_INPUT = 'input[type="email"], input[name*="email" i], input[placeholder*="email" i]'
PASSWORD_INPUT = (
    'input[type="password"], input[name*="password" i], input[placeholder*="password" i]'
)
TOAST = '[role="status"], .toast, .sonner-toast, [data-sonner-toast]'
TABLE_ROW = 'table tbody tr, [role="row"]'
SIDEBAR = 'aside, [role="navigation"], .sidebar, .sider'
NAVIGATION = 'nav, [role="navigation"]'
