"""
Scenario Model

A scenario is one linear run: seed, navigate, optionally force a logged-out
state, act, assert. This module tracks where a run is, which steps it has
taken and how much of its time budget is left.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set

from .annotations import AnnotationLog
from .config import Timeouts

logger = logging.getLogger(__name__)


class ScenarioError(Exception):
    """Base class for scenario bookkeeping errors."""

    pass


class ScenarioStateError(ScenarioError):
    """Raised on a transition the scenario model does not allow."""

    pass


class ScenarioBudgetExceeded(ScenarioError):
    """Raised when a step starts after the scenario's time budget ran out."""

    pass


class ScenarioState(str, Enum):
    """Scenario lifecycle states."""

    INIT = "init"
    SEEDED = "seeded"
    NAVIGATED_TO_TARGET = "navigated_to_target"
    LOGGED_OUT_FORK = "logged_out_fork"
    ACTIONS_PERFORMED = "actions_performed"
    FINAL_ASSERTIONS = "final_assertions"
    PASSED = "passed"
    FAILED = "failed"


TERMINAL_STATES = {ScenarioState.PASSED, ScenarioState.FAILED}

TRANSITIONS: Dict[ScenarioState, Set[ScenarioState]] = {
    ScenarioState.INIT: {ScenarioState.SEEDED, ScenarioState.NAVIGATED_TO_TARGET},
    ScenarioState.SEEDED: {ScenarioState.NAVIGATED_TO_TARGET, ScenarioState.LOGGED_OUT_FORK},
    ScenarioState.NAVIGATED_TO_TARGET: {
        ScenarioState.NAVIGATED_TO_TARGET,
        ScenarioState.LOGGED_OUT_FORK,
        ScenarioState.ACTIONS_PERFORMED,
        ScenarioState.FINAL_ASSERTIONS,
    },
    ScenarioState.LOGGED_OUT_FORK: {
        ScenarioState.NAVIGATED_TO_TARGET,
        ScenarioState.ACTIONS_PERFORMED,
    },
    ScenarioState.ACTIONS_PERFORMED: {
        ScenarioState.ACTIONS_PERFORMED,
        ScenarioState.NAVIGATED_TO_TARGET,
        ScenarioState.FINAL_ASSERTIONS,
    },
    ScenarioState.FINAL_ASSERTIONS: set(),
}


@dataclass
class StepRecord:
    """One named step and the state it moved the scenario into."""

    name: str
    state: ScenarioState
    elapsed: float


@dataclass
class Scenario:
    """
    Bookkeeping for one scenario run.

    Any non-terminal state may move to FAILED; only FINAL_ASSERTIONS may
    move to PASSED.
    """

    name: str
    budget: float = Timeouts.SCENARIO_BUDGET
    state: ScenarioState = ScenarioState.INIT
    steps: List[StepRecord] = field(default_factory=list)
    annotations: AnnotationLog = field(default_factory=AnnotationLog)
    error: Optional[str] = None
    started_at: float = field(default_factory=time.monotonic)

    def __post_init__(self):
        if not self.annotations.scenario:
            self.annotations.scenario = self.name

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started_at

    @property
    def remaining(self) -> float:
        return max(0.0, self.budget - self.elapsed)

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def check_budget(self) -> None:
        """Fail the scenario if its budget is spent."""
        if self.elapsed > self.budget:
            message = f"{self.name} exceeded its {self.budget:.0f}s budget"
            self.fail(message)
            raise ScenarioBudgetExceeded(message)

    def advance(self, state: ScenarioState, step: str = "") -> "Scenario":
        """Move to ``state``, recording ``step`` under it."""
        if self.finished:
            raise ScenarioStateError(f"{self.name} already {self.state.value}")
        if state in TERMINAL_STATES:
            raise ScenarioStateError(f"Use pass_() or fail() to reach {state.value}")
        if state not in TRANSITIONS[self.state]:
            raise ScenarioStateError(
                f"{self.name}: cannot move from {self.state.value} to {state.value}"
            )
        self.check_budget()
        self.state = state
        self.steps.append(StepRecord(name=step or state.value, state=state, elapsed=self.elapsed))
        logger.debug(f"{self.name}: {state.value} ({step})")
        return self

    def seeded(self) -> "Scenario":
        return self.advance(ScenarioState.SEEDED, "seed login")

    def navigated(self, target: str) -> "Scenario":
        return self.advance(ScenarioState.NAVIGATED_TO_TARGET, f"navigate {target}")

    def logged_out(self) -> "Scenario":
        return self.advance(ScenarioState.LOGGED_OUT_FORK, "ensure logged out")

    def acted(self, step: str) -> "Scenario":
        return self.advance(ScenarioState.ACTIONS_PERFORMED, step)

    def asserting(self) -> "Scenario":
        return self.advance(ScenarioState.FINAL_ASSERTIONS, "final assertions")

    def pass_(self) -> "Scenario":
        if self.state != ScenarioState.FINAL_ASSERTIONS:
            raise ScenarioStateError(
                f"{self.name}: cannot pass from {self.state.value}, final assertions not reached"
            )
        self.state = ScenarioState.PASSED
        return self

    def fail(self, error: str) -> "Scenario":
        if self.finished:
            return self
        self.state = ScenarioState.FAILED
        self.error = error
        return self

    def to_dict(self) -> Dict:
        """Summary for reports."""
        return {
            "scenario": self.name,
            "state": self.state.value,
            "elapsed": round(self.elapsed, 2),
            "steps": [s.name for s in self.steps],
            "annotations": self.annotations.descriptions(),
            "error": self.error,
        }
