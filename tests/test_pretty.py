"""Tests for verdict rendering and the session summary line."""

from propbridge.engine.result import CheckResult, Outcome
from propbridge.messaging.codec import CounterDelta
from propbridge.reporting.pretty import format_summary, pretty


def test_headlines():
    assert pretty(CheckResult(Outcome.PASSED, succeeded=100)) == "OK, passed 100 tests."
    assert pretty(CheckResult(Outcome.PASSED, succeeded=90, discarded=4)) == "OK, passed 90 tests. 4 discarded."
    assert pretty(CheckResult(Outcome.PROVED, succeeded=1)) == "OK, proved property."
    assert pretty(CheckResult(Outcome.FAILED, succeeded=3)) == "Falsified after 3 passed tests."
    assert pretty(CheckResult(Outcome.EXHAUSTED, succeeded=2, discarded=500)) == (
        "Gave up after only 2 passed tests. 500 tests were discarded."
    )


def test_exception_always_shows_cause():
    text = pretty(CheckResult(Outcome.PROP_EXCEPTION, cause=ValueError("bad input")))

    assert "> Exception: ValueError: bad input" in text


def test_arguments_are_listed():
    text = pretty(CheckResult(Outcome.FAILED, args={"arg0": 10, "name": "x"}))

    assert text.splitlines()[1:] == ["> arg0: 10", "> name: 'x'"]


def test_traceback_at_verbosity_two():
    try:
        raise RuntimeError("deep")
    except RuntimeError as e:
        cause = e

    result = CheckResult(Outcome.PROP_EXCEPTION, cause=cause)

    assert "Traceback" not in pretty(result, 1)
    assert "Traceback" in pretty(result, 2)


def test_summary_heading():
    assert format_summary(CounterDelta(3, 2, 1, 0)) == "Failed: Total 3, Failed 1, Errors 0, Passed 2"
    assert format_summary(CounterDelta(2, 2, 0, 0)) == "Passed: Total 2, Failed 0, Errors 0, Passed 2"
    assert format_summary(CounterDelta()).startswith("Passed")
