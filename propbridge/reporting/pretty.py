"""Human-readable rendering of verdicts and session summaries."""

import traceback

from ..engine.result import CheckResult, Outcome
from ..messaging.codec import CounterDelta


def pretty(result: CheckResult, verbosity: int = 0) -> str:
    """Render a verdict.

    Verbosity 0 gives the headline plus falsifying arguments, 1 adds the
    exception and Hypothesis notes, 2 adds the traceback.
    """
    lines = [_headline(result)]

    for name, value in result.args.items():
        lines.append(f"> {name}: {value!r}")

    if result.cause is not None and (
        verbosity >= 1 or result.outcome is Outcome.PROP_EXCEPTION
    ):
        lines.append(f"> Exception: {type(result.cause).__name__}: {result.cause}")

    if verbosity >= 1:
        lines.extend(f"> {note}" for note in result.notes)

    if verbosity >= 2 and result.cause is not None:
        lines.append("".join(traceback.format_exception(result.cause)).rstrip())

    return "\n".join(lines)


def _headline(result: CheckResult) -> str:
    if result.outcome is Outcome.PASSED:
        line = f"OK, passed {result.succeeded} tests."
        if result.discarded:
            line += f" {result.discarded} discarded."
        return line
    if result.outcome is Outcome.PROVED:
        return "OK, proved property."
    if result.outcome is Outcome.FAILED:
        return f"Falsified after {result.succeeded} passed tests."
    if result.outcome is Outcome.EXHAUSTED:
        return (
            f"Gave up after only {result.succeeded} passed tests. "
            f"{result.discarded} tests were discarded."
        )
    return f"Exception raised on property evaluation after {result.succeeded} passed tests."


def format_summary(counts: CounterDelta) -> str:
    """Coordinator's final line."""
    heading = "Passed" if counts.all_passed else "Failed"
    return (
        f"{heading}: Total {counts.total}, Failed {counts.failure}, "
        f"Errors {counts.error}, Passed {counts.success}"
    )
