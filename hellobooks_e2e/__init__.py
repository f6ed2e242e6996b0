"""
hellobooks E2E support library

Shared browser-interaction vocabulary for the hellobooks end-to-end suite:

    patterns     - case-insensitive text matchers and shared selectors
    actions      - resilient action primitives (never raise, annotate instead)
    readiness    - page-readiness gate with a hard route check
    flows        - table row lookup and toast detection
    auth         - seed login and logged-out state
    annotations  - per-scenario note log
    scenario     - scenario state machine and time budget
    config       - environment configuration and named timeouts
    pages        - page objects
"""

from .actions import (
    click_button,
    fill_field,
    optional_action,
    safe_expect_visible,
    select_option,
    soft_expect,
)
from .annotations import Annotation, AnnotationLog, annotation_context, note
from .auth import ensure_logged_out, login, unique_email
from .config import Config, ConfigError, Timeouts
from .flows import first_row, wait_for_toast
from .patterns import text_regex
from .readiness import goto_and_wait, wait_for_page_ready
from .scenario import Scenario, ScenarioBudgetExceeded, ScenarioState, ScenarioStateError

__version__ = "1.0.0"

__all__ = [
    "Annotation",
    "AnnotationLog",
    "Config",
    "ConfigError",
    "Scenario",
    "ScenarioBudgetExceeded",
    "ScenarioState",
    "ScenarioStateError",
    "Timeouts",
    "annotation_context",
    "click_button",
    "ensure_logged_out",
    "fill_field",
    "first_row",
    "goto_and_wait",
    "login",
    "note",
    "optional_action",
    "safe_expect_visible",
    "select_option",
    "soft_expect",
    "text_regex",
    "unique_email",
    "wait_for_page_ready",
    "wait_for_toast",
]
