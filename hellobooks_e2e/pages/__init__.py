"""
Page Object Models for the hellobooks E2E suite

This package provides page objects that encapsulate UI interactions
and provide a clean API for scenario code.
"""

from .base_page import BasePage
from .dashboard_page import DashboardPage
from .forgot_password_page import ForgotPasswordPage
from .login_page import LoginPage
from .navigation import Navigation
from .signup_page import SignupPage

__all__ = [
    "BasePage",
    "DashboardPage",
    "ForgotPasswordPage",
    "LoginPage",
    "Navigation",
    "SignupPage",
]
