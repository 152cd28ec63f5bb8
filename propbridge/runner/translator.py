"""Verdict to host event translation.

    PASSED          -> SUCCESS
    PROVED          -> SUCCESS
    FAILED          -> FAILURE, cause rendered from the verdict
    EXHAUSTED       -> FAILURE
    PROP_EXCEPTION  -> ERROR, cause raised by the property
"""

from typing import Iterable, Optional

import click

from ..engine.result import CheckResult, Outcome
from ..errors import PropertyFailure
from ..host.protocol import Event, EventHandler, Logger, Selector, Status, TaskDef, TestSelector
from ..reporting.pretty import pretty
from .counters import Counters

_STATUS_BY_OUTCOME = {
    Outcome.PASSED: Status.SUCCESS,
    Outcome.PROVED: Status.SUCCESS,
    Outcome.FAILED: Status.FAILURE,
    Outcome.EXHAUSTED: Status.FAILURE,
    Outcome.PROP_EXCEPTION: Status.ERROR,
}


def translate(result: CheckResult) -> tuple[Status, Optional[BaseException]]:
    """Map a verdict to a host status and optional cause."""
    status = _STATUS_BY_OUTCOME[result.outcome]

    if result.outcome is Outcome.PROP_EXCEPTION:
        return status, result.cause
    if result.outcome is Outcome.FAILED:
        return status, PropertyFailure(pretty(result, 0))
    return status, None


class EventTranslator:
    """Delivers events for verdicts and keeps the session counters current."""

    def __init__(self, counters: Counters, verbosity: int = 0):
        self.counters = counters
        self.verbosity = verbosity

    def emit(
        self,
        task_def: TaskDef,
        name: str,
        result: CheckResult,
        handler: EventHandler,
        loggers: Iterable[Logger],
    ) -> Event:
        """Report the verdict of the property ``name``."""
        status, cause = translate(result)
        event = Event(
            fully_qualified_name=task_def.fully_qualified_name,
            fingerprint=task_def.fingerprint,
            selector=TestSelector(name),
            status=status,
            throwable=cause,
        )

        handler.handle(event)
        self.counters.record(status)

        label = name or task_def.fully_qualified_name
        self._log(result.passed, f"{label}: {pretty(result, self.verbosity)}", loggers)
        return event

    def emit_error(
        self,
        task_def: TaskDef,
        selector: Selector,
        error: BaseException,
        handler: EventHandler,
        loggers: Iterable[Logger],
    ) -> Event:
        """Report a problem that prevented a check from running at all."""
        event = Event(
            fully_qualified_name=task_def.fully_qualified_name,
            fingerprint=task_def.fingerprint,
            selector=selector,
            status=Status.ERROR,
            throwable=error,
        )

        handler.handle(event)
        self.counters.record(Status.ERROR)

        label = (
            selector.test_name if isinstance(selector, TestSelector) and selector.test_name
            else task_def.fully_qualified_name
        )
        self._log(False, f"{label}: {error}", loggers)
        return event

    def _log(self, passed: bool, detail: str, loggers: Iterable[Logger]) -> None:
        line = f"{'+' if passed else '!'} {detail}"
        for logger in loggers:
            if logger.ansi_codes_supported():
                logger.info(click.style(line, fg="green" if passed else "red"))
            else:
                logger.info(line)
