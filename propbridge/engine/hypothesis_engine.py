"""Checking engine backed by Hypothesis.

Hypothesis generates and shrinks the inputs; this module only wires a Prop
into a ``@given`` test, applies the session settings and classifies how the
run ended. No exception other than BaseException-only ones escapes ``check``.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Protocol

from hypothesis import HealthCheck, Verbosity, given, seed, settings
from hypothesis.errors import Unsatisfiable, UnsatisfiedAssumption

from .params import CheckParams
from .props import Prop
from .result import CheckResult, Outcome


class CheckingEngine(Protocol):
    """Anything that can turn a property into a verdict."""

    def check(self, params: CheckParams, prop: Prop) -> CheckResult:
        ...


@dataclass
class _Tally:
    """Bookkeeping shared with the generated test body."""
    succeeded: int = 0
    discarded: int = 0
    failing: bool = False
    args: dict[str, Any] = field(default_factory=dict)


class HypothesisEngine:
    """Runs properties with Hypothesis."""

    def check(self, params: CheckParams, prop: Prop) -> CheckResult:
        """Check a property and return its verdict.

        Args:
            params: Session configuration.
            prop: Property to check.

        Returns:
            CheckResult describing how the run ended.
        """
        if not prop.is_generative:
            return self._check_once(prop)

        tally = _Tally()
        test = self._build_test(params, prop, tally)

        try:
            test()
        except Unsatisfiable as e:
            return CheckResult(
                Outcome.EXHAUSTED,
                succeeded=tally.succeeded,
                discarded=tally.discarded,
                notes=_notes(e),
            )
        except Exception as e:
            return CheckResult(
                _classify_failure(e),
                succeeded=tally.succeeded,
                discarded=tally.discarded,
                args=tally.args,
                cause=e,
                notes=_notes(e),
            )

        return CheckResult(
            Outcome.PASSED,
            succeeded=tally.succeeded,
            discarded=tally.discarded,
        )

    def _check_once(self, prop: Prop) -> CheckResult:
        """Evaluate an input-less property a single time."""
        try:
            holds = prop()
        except UnsatisfiedAssumption:
            return CheckResult(Outcome.EXHAUSTED, discarded=1)
        except Exception as e:
            return CheckResult(_classify_failure(e), cause=e, notes=_notes(e))

        if holds is False:
            return CheckResult(Outcome.FAILED)
        return CheckResult(Outcome.PROVED, succeeded=1)

    def _build_test(self, params: CheckParams, prop: Prop, tally: _Tally):
        """Wrap the property body into a configured Hypothesis test."""
        positional = [f"arg{i}" for i in range(len(prop.strategies))]
        strategies = dict(zip(positional, prop.strategies))
        strategies.update(prop.kw_strategies)

        def run(**drawn):
            values = dict(drawn)
            args = [drawn.pop(name) for name in positional]
            try:
                holds = prop(*args, **drawn)
            except UnsatisfiedAssumption:
                tally.discarded += 1
                raise
            except Exception:
                tally.failing = True
                tally.args = values
                raise

            if holds is False:
                tally.failing = True
                tally.args = values
                raise AssertionError("Property returned False")

            if not tally.failing:
                tally.succeeded += 1

        # @given validates keyword strategies against the test's signature
        run.__signature__ = inspect.Signature([
            inspect.Parameter(name, inspect.Parameter.KEYWORD_ONLY)
            for name in strategies
        ])
        run.__name__ = prop.label

        test = given(**strategies)(run)
        test = settings(
            max_examples=params.max_examples,
            deadline=params.deadline_ms,
            derandomize=params.derandomize,
            database=None,
            verbosity=Verbosity.quiet,
            suppress_health_check=[HealthCheck.filter_too_much, HealthCheck.too_slow],
        )(test)

        if params.seed is not None:
            test = seed(params.seed)(test)

        return test


def _classify_failure(error: BaseException) -> Outcome:
    """Assertion failures falsify a property; anything else is an error."""
    if isinstance(error, BaseExceptionGroup):
        _, rest = error.split(AssertionError)
        return Outcome.FAILED if rest is None else Outcome.PROP_EXCEPTION
    if isinstance(error, AssertionError):
        return Outcome.FAILED
    return Outcome.PROP_EXCEPTION


def _notes(error: BaseException) -> list[str]:
    return [str(n) for n in getattr(error, "__notes__", [])]
