"""
hellobooks E2E Test Suite

Test categories:
- unit/ - helper layer against mocked pages, no browser
- e2e/  - browser scenarios (need --run-e2e or E2E_RUN=true)
"""
