"""Tests for verdict translation and event emission."""

import pytest

from fakes import ListLogger, collection_def, prop_def
from propbridge.engine.result import CheckResult, Outcome
from propbridge.errors import PropertyFailure
from propbridge.host.protocol import Status, TestSelector
from propbridge.runner.counters import Counters
from propbridge.runner.translator import EventTranslator, translate


@pytest.mark.parametrize(
    "outcome, status",
    [
        (Outcome.PASSED, Status.SUCCESS),
        (Outcome.PROVED, Status.SUCCESS),
        (Outcome.FAILED, Status.FAILURE),
        (Outcome.EXHAUSTED, Status.FAILURE),
        (Outcome.PROP_EXCEPTION, Status.ERROR),
    ],
)
def test_status_table(outcome, status):
    result = CheckResult(outcome, cause=ValueError("x") if outcome is Outcome.PROP_EXCEPTION else None)

    assert translate(result)[0] is status
    assert translate(result)[0] is status


@pytest.mark.parametrize("outcome", [Outcome.PASSED, Outcome.PROVED, Outcome.EXHAUSTED])
def test_no_cause(outcome):
    assert translate(CheckResult(outcome))[1] is None


def test_failed_cause_is_rendered_verdict():
    _, cause = translate(CheckResult(Outcome.FAILED, succeeded=3, args={"arg0": 10}))

    assert isinstance(cause, PropertyFailure)
    assert str(cause).startswith("Falsified after 3 passed tests.")
    assert "> arg0: 10" in str(cause)


def test_exception_cause_is_passed_through():
    boom = KeyError("boom")

    status, cause = translate(CheckResult(Outcome.PROP_EXCEPTION, cause=boom))

    assert status is Status.ERROR
    assert cause is boom


class TestEventTranslator:

    def test_emit_delivers_event_and_counts(self, handler, logger):
        counters = Counters()
        translator = EventTranslator(counters)

        event = translator.emit(collection_def(), "a", CheckResult(Outcome.PASSED, succeeded=100), handler, [logger])

        assert handler.events == [event]
        assert event.fully_qualified_name == "tests.Suite"
        assert event.selector == TestSelector("a")
        assert event.duration == -1
        assert counters.snapshot().success == 1
        assert logger.info_lines == ["+ a: OK, passed 100 tests."]

    def test_failure_line(self, handler, logger):
        translator = EventTranslator(Counters())

        translator.emit(collection_def(), "b", CheckResult(Outcome.FAILED, succeeded=3), handler, [logger])

        assert logger.info_lines == ["! b: Falsified after 3 passed tests."]

    def test_unnamed_property_logs_subject_name(self, handler, logger):
        translator = EventTranslator(Counters())

        translator.emit(prop_def(), "", CheckResult(Outcome.PROVED, succeeded=1), handler, [logger])

        assert logger.info_lines == ["+ tests.single: OK, proved property."]

    def test_ansi_loggers_get_colour(self, handler):
        plain, ansi = ListLogger(), ListLogger(ansi=True)
        translator = EventTranslator(Counters())

        translator.emit(collection_def(), "a", CheckResult(Outcome.PASSED), handler, [plain, ansi])
        translator.emit(collection_def(), "b", CheckResult(Outcome.FAILED), handler, [plain, ansi])

        assert "\x1b[" not in "".join(plain.info_lines)
        assert ansi.info_lines[0].startswith("\x1b[32m")
        assert ansi.info_lines[1].startswith("\x1b[31m")
        assert ansi.info_lines[0].endswith("\x1b[0m")

    def test_verbosity_controls_detail(self, handler):
        cause = AssertionError("expected 1 == 2")
        result = CheckResult(Outcome.FAILED, succeeded=0, cause=cause, notes=["Falsifying example: p(arg0=1)"])
        quiet, loud = ListLogger(), ListLogger()

        EventTranslator(Counters(), verbosity=0).emit(collection_def(), "p", result, handler, [quiet])
        EventTranslator(Counters(), verbosity=1).emit(collection_def(), "p", result, handler, [loud])

        assert "expected 1 == 2" not in quiet.info_lines[0]
        assert "> Exception: AssertionError: expected 1 == 2" in loud.info_lines[0]
        assert "Falsifying example" in loud.info_lines[0]

    def test_emit_error(self, handler, logger):
        counters = Counters()
        translator = EventTranslator(counters)

        event = translator.emit_error(
            collection_def(), TestSelector("gone"), LookupError("no such property"), handler, [logger]
        )

        assert event.status is Status.ERROR
        assert counters.snapshot().error == 1
        assert logger.info_lines == ["! gone: no such property"]
