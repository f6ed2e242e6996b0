"""
Scenario Annotations

Non-fatal notes recorded when an optional step could not be completed.
The active log is held in a context variable so helpers deep in a call
chain can record a note without it being threaded through every call.

Usage:
    from hellobooks_e2e.annotations import AnnotationLog, annotation_context, note

    log = AnnotationLog()
    with annotation_context(log):
        note("Logout menu item not found")

    log.descriptions()  # ["Logout menu item not found"]
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)

_current_log: ContextVar[Optional["AnnotationLog"]] = ContextVar("annotation_log", default=None)


@dataclass(frozen=True)
class Annotation:
    """A single note attached to a scenario result."""

    type: str
    description: str

    def __str__(self) -> str:
        return f"[{self.type}] {self.description}"


@dataclass
class AnnotationLog:
    """Annotations accumulated over one scenario."""

    scenario: str = ""
    entries: List[Annotation] = field(default_factory=list)

    def add(self, description: str, type: str = "note") -> Annotation:
        annotation = Annotation(type=type, description=description)
        self.entries.append(annotation)
        logger.warning(f"{self.scenario or 'scenario'}: {annotation}")
        return annotation

    def descriptions(self) -> List[str]:
        return [a.description for a in self.entries]

    def render(self) -> str:
        """Report section body, one annotation per line."""
        return "\n".join(str(a) for a in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return True


def current_log() -> Optional[AnnotationLog]:
    """Return the log bound to the running scenario, if any."""
    return _current_log.get()


def bind_log(log: AnnotationLog):
    """Bind a log for the current context. Returns a token for reset."""
    return _current_log.set(log)


def unbind_log(token) -> None:
    _current_log.reset(token)


@contextmanager
def annotation_context(log: AnnotationLog) -> Iterator[AnnotationLog]:
    """Route notes to ``log`` for the duration of the block."""
    token = bind_log(log)
    try:
        yield log
    finally:
        unbind_log(token)


def note(description: str, type: str = "note") -> Optional[Annotation]:
    """
    Record a note on the active scenario.

    Outside a scenario the note is only logged.
    """
    log = current_log()
    if log is None:
        logger.warning(f"Unbound annotation: [{type}] {description}")
        return None
    return log.add(description, type=type)
