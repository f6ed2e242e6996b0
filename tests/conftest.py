"""
Pytest configuration for the hellobooks E2E suite
"""
import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

E2E_DIR = Path(__file__).parent / "e2e"


def pytest_addoption(parser):
    """Add custom CLI options for E2E tests."""
    # Note: --headed, --browser and --slowmo are provided by pytest-playwright
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run browser scenarios against the configured hellobooks environment",
    )


def pytest_configure(config):
    """Register markers."""
    config.addinivalue_line("markers", "e2e: browser tests (need playwright and --run-e2e)")
    config.addinivalue_line("markers", "smoke: quick checks of critical paths")
    config.addinivalue_line("markers", "auth: authentication scenarios")
    config.addinivalue_line("markers", "slow: marks tests as slow")


def _e2e_enabled(config) -> bool:
    if config.getoption("--run-e2e"):
        return True
    return os.environ.get("E2E_RUN", "false").lower() in ("true", "1", "yes", "on")


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/e2e and skip it unless enabled."""
    enabled = _e2e_enabled(config)

    skip_disabled = pytest.mark.skip(reason="E2E disabled (use --run-e2e or E2E_RUN=true)")

    for item in items:
        if E2E_DIR in Path(item.path).parents:
            item.add_marker(pytest.mark.e2e)

        if "e2e" in item.keywords and not enabled:
            item.add_marker(skip_disabled)
