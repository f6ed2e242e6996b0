"""
hellobooks E2E Test Suite

End-to-end browser tests using Playwright.

Structure:
    conftest.py                  - Fixtures and configuration
    authentication/              - Login, registration, password and session scenarios
    test_feature_areas.py        - Feature area smoke tests
    test_interaction_helpers.py  - Helper layer against static markup
"""
