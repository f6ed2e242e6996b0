"""
Resilient Action Primitives

Each primitive tries one interaction within a bounded wait. On failure it
records an annotation on the running scenario and returns normally, so an
optional step can never abort a scenario. Required checks belong in plain
``expect(...)`` calls, not here.
"""
import logging
from typing import Callable, Pattern, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect

from .annotations import note
from .config import Timeouts
from .patterns import text_regex

logger = logging.getLogger(__name__)

BROWSER_FAILURES = (PlaywrightError, AssertionError)


def scroll_into_view(locator: Locator) -> None:
    """Best-effort scroll; elements that cannot scroll are left alone."""
    try:
        locator.scroll_into_view_if_needed(timeout=Timeouts.OPTIONAL_ACTION)
    except PlaywrightError:
        pass


def optional_action(locator: Locator, action: Callable[[], None], note_text: str) -> bool:
    """
    Run ``action`` once the first match of ``locator`` is visible.

    Waits up to 5s for visibility, scrolls the element into view and calls
    ``action``. Any browser failure along the way records ``note_text``.
    Other exceptions raised by ``action`` propagate unchanged.

    Returns:
        True if the action ran to completion
    """
    target = locator.first
    try:
        target.wait_for(state="visible", timeout=Timeouts.OPTIONAL_ACTION)
        scroll_into_view(target)
        action()
        return True
    except BROWSER_FAILURES as e:
        logger.debug(f"Optional action skipped: {e}")
        note(note_text)
        return False


def safe_expect_visible(
    locator: Locator, note_text: str, timeout: int = Timeouts.SAFE_VISIBLE
) -> bool:
    """Visibility assertion that reports False instead of failing."""
    try:
        expect(locator).to_be_visible(timeout=timeout)
        return True
    except BROWSER_FAILURES:
        note(note_text)
        return False


def soft_expect(assertion: Callable[[], None], note_text: str) -> bool:
    """Run a Playwright assertion, downgrading a failure to a note."""
    try:
        assertion()
        return True
    except BROWSER_FAILURES:
        note(note_text)
        return False


def fill_field(page: Page, selector: str, value: str, field_name: str) -> bool:
    """
    Clear and fill the first field matching ``selector``.

    On failure the field is left as it was and "Could not fill <name>" is
    recorded.
    """
    field = page.locator(selector).first
    try:
        field.wait_for(state="visible", timeout=Timeouts.FIELD)
        scroll_into_view(field)
        field.clear()
        field.fill(value)
        return True
    except BROWSER_FAILURES as e:
        logger.debug(f"Fill {field_name} failed: {e}")
        note(f"Could not fill {field_name}")
        return False


def click_button(page: Page, text_pattern: Union[str, Pattern[str]], note_text: str) -> bool:
    """Click the first button whose accessible name matches ``text_pattern``."""
    button = page.get_by_role("button", name=text_pattern).first
    try:
        button.wait_for(state="visible", timeout=Timeouts.BUTTON)
        scroll_into_view(button)
        button.click()
        return True
    except BROWSER_FAILURES as e:
        logger.debug(f"Click button failed: {e}")
        note(note_text)
        return False


def select_option(page: Page, trigger_selector: str, option_text: str, field_name: str) -> bool:
    """Open a custom dropdown and pick the option named ``option_text``."""
    try:
        trigger = page.locator(trigger_selector).first
        trigger.wait_for(state="visible", timeout=Timeouts.DROPDOWN)
        trigger.click()
        page.wait_for_timeout(Timeouts.DROPDOWN_RENDER)
        option = page.get_by_role("option", name=text_regex(option_text)).first
        option.click(timeout=Timeouts.DROPDOWN)
        return True
    except BROWSER_FAILURES as e:
        logger.debug(f"Select {field_name} failed: {e}")
        note(f"Could not select {field_name}")
        return False
