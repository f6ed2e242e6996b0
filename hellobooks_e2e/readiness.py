"""
Page-Readiness Gate

Waits for a navigation to settle and optionally hard-asserts the route.
"""
import logging
import re
from typing import Optional, Pattern, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, expect

from .config import Timeouts

logger = logging.getLogger(__name__)


def wait_for_page_ready(
    page: Page, expected_route: Optional[Union[str, Pattern[str]]] = None
) -> None:
    """
    Wait for DOM content, then for network quiet, then check the route.

    Network quiet is best-effort: some pages poll forever. The route check
    is not: a URL that never matches ``expected_route`` within 15s fails
    the scenario.
    """
    page.wait_for_load_state("domcontentloaded")
    try:
        page.wait_for_load_state("networkidle")
    except PlaywrightError:
        logger.debug(f"Network never went idle on {page.url}")

    if expected_route is not None:
        if isinstance(expected_route, str):
            expected_route = re.compile(expected_route)
        expect(page).to_have_url(expected_route, timeout=Timeouts.ROUTE)
        logger.info(f"Page ready at {page.url}")


def goto_and_wait(
    page: Page, url: str, expected_route: Optional[Union[str, Pattern[str]]] = None
) -> None:
    """Navigate then gate on readiness."""
    logger.info(f"Navigating to {url}")
    page.goto(url)
    wait_for_page_ready(page, expected_route)
