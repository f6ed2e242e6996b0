"""
Flow Helpers

Row lookup and toast detection built on the action primitives.
"""
import logging
from typing import Optional, Pattern, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from .actions import scroll_into_view
from .config import Timeouts
from .patterns import EMPTY_ROW, TABLE_ROW, TOAST

logger = logging.getLogger(__name__)


def first_row(page: Page, container: Optional[Locator] = None) -> Optional[Locator]:
    """
    First populated table row, or None.

    Rows whose text matches the empty/no-data pattern are skipped. When
    ``container`` is given the search is scoped to it.
    """
    scope = container if container is not None else page
    row = scope.locator(TABLE_ROW).filter(has_not_text=EMPTY_ROW).first
    if row.count():
        scroll_into_view(row)
        return row
    return None


def wait_for_toast(
    page: Page, pattern: Union[str, Pattern[str]], timeout: int = Timeouts.TOAST
) -> bool:
    """
    Wait for a visible toast whose text matches ``pattern``.

    The toast is not queried again once seen; it may already be gone.
    """
    toast = page.locator(TOAST).filter(has_text=pattern).first
    try:
        toast.wait_for(state="visible", timeout=timeout)
    except PlaywrightError:
        return False
    logger.info(f"Toast shown matching {pattern!r}")
    return True
