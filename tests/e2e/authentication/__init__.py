"""Authentication scenarios: login, session management, password reset, registration."""
