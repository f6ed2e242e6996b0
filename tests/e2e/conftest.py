"""
Playwright E2E Test Configuration and Fixtures

This module provides shared fixtures, configuration, and utilities
for end-to-end browser testing of hellobooks with Playwright.
"""
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
import requests

# Skip entire module if playwright not installed
pytest.importorskip("playwright")

from playwright.sync_api import Browser, BrowserContext, Page

from hellobooks_e2e.annotations import AnnotationLog, bind_log, unbind_log
from hellobooks_e2e.auth import login
from hellobooks_e2e.config import Config, validate_config
from hellobooks_e2e.scenario import Scenario, ScenarioState

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


class E2EConfig:
    """Browser-level settings derived from the suite configuration."""

    # Timeouts (milliseconds)
    DEFAULT_TIMEOUT = 30000
    NAVIGATION_TIMEOUT = 60000

    # Environment probe (seconds)
    PROBE_TIMEOUT = 10

    VIEWPORT = {"width": 1280, "height": 720}

    @classmethod
    def artifacts_dir(cls) -> Path:
        path = Path(Config.E2E_ARTIFACTS_DIR)
        path.mkdir(parents=True, exist_ok=True)
        return path


def _artifact_name(node_name: str) -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{re.sub(r'[^A-Za-z0-9_.-]+', '_', node_name)}_{timestamp}"


def _failed(request) -> bool:
    report = getattr(request.node, "rep_call", None)
    return report is None or report.failed


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def suite_config() -> Dict[str, Any]:
    """Validated configuration, resolved once per run."""
    validated = validate_config()
    logger.info(f"[E2E] Target environment: {validated['BASE_URL']}")
    logger.debug(f"[E2E] Settings: {Config.to_dict()}")
    return validated


@pytest.fixture(scope="session")
def app_environment(suite_config) -> str:
    """
    Base URL of a reachable hellobooks deployment.

    Skips the dependent tests when the environment cannot be reached.
    """
    base_url = suite_config["BASE_URL"]
    try:
        resp = requests.get(base_url, timeout=E2EConfig.PROBE_TIMEOUT)
    except requests.exceptions.RequestException as e:
        pytest.skip(f"hellobooks environment unreachable at {base_url}: {e}")
    if resp.status_code >= 500:
        pytest.skip(f"hellobooks environment unhealthy at {base_url}: HTTP {resp.status_code}")
    return base_url


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(pytestconfig) -> Dict[str, Any]:
    """Browser launch arguments."""
    headed = pytestconfig.getoption("--headed", default=False)
    return {
        "headless": Config.E2E_HEADLESS and not headed,
        "slow_mo": Config.E2E_SLOW_MO,
    }


@pytest.fixture(scope="session")
def browser_context_args() -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        "viewport": E2EConfig.VIEWPORT,
        "ignore_https_errors": True,
        "base_url": Config.BASE_URL,
    }

    if Config.E2E_RECORD_VIDEO:
        args["record_video_dir"] = str(E2EConfig.artifacts_dir() / "videos-raw")

    return args


@pytest.fixture
def context(browser: Browser, browser_context_args: Dict) -> Generator[BrowserContext, None, None]:
    """Create a fresh browser context (cookies, storage) for each scenario."""
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(E2EConfig.DEFAULT_TIMEOUT)
    context.set_default_navigation_timeout(E2EConfig.NAVIGATION_TIMEOUT)

    yield context

    context.close()


@pytest.fixture
def page(request, context: BrowserContext) -> Generator[Page, None, None]:
    """Create a new page; keep screenshot and video only when the test fails."""
    page = context.new_page()

    yield page

    failed = _failed(request)
    name = _artifact_name(request.node.name)

    if failed and Config.E2E_SCREENSHOT_ON_FAILURE:
        screenshot_path = E2EConfig.artifacts_dir() / f"failure_{name}.png"
        page.screenshot(path=str(screenshot_path))
        logger.info(f"[E2E] Screenshot saved: {screenshot_path}")

    video = page.video
    page.close()

    if video:
        if failed:
            video_path = E2EConfig.artifacts_dir() / f"failure_{name}.webm"
            video.save_as(str(video_path))
            logger.info(f"[E2E] Video saved: {video_path}")
        video.delete()


# =============================================================================
# Scenario Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def notes(request) -> Generator[AnnotationLog, None, None]:
    """Annotation log for the running test, bound for the helper layer."""
    log = AnnotationLog(scenario=request.node.name)
    request.node._annotation_log = log
    token = bind_log(log)

    yield log

    unbind_log(token)


@pytest.fixture
def scenario(request, notes: AnnotationLog) -> Generator[Scenario, None, None]:
    """Scenario bookkeeping, finalised from the test outcome."""
    run = Scenario(name=request.node.name, annotations=notes)

    yield run

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.passed and run.state == ScenarioState.FINAL_ASSERTIONS:
        run.pass_()
    elif report is None or report.failed:
        run.fail(str(report.longrepr) if report is not None else "setup failed")
    logger.info(f"[E2E] {run.to_dict()}")


@pytest.fixture
def authenticated_page(page: Page, app_environment: str, scenario: Scenario) -> Page:
    """Return a page logged in with the seed account."""
    login(page, base_url=app_environment)
    scenario.seeded()
    return page


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for fixtures and attach annotations to the report."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)

    log = getattr(item, "_annotation_log", None)
    if rep.when == "call" and log is not None and len(log):
        rep.sections.append(("annotations", log.render()))
        item.user_properties.append(("annotations", log.descriptions()))
