"""Verdicts produced by a checking engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Outcome(str, Enum):
    """Raw outcome of one property run."""
    PASSED = "passed"
    PROVED = "proved"
    FAILED = "failed"
    EXHAUSTED = "exhausted"
    PROP_EXCEPTION = "prop_exception"


@dataclass
class CheckResult:
    """Result of checking one property under one configuration.

    succeeded counts generated inputs the property held for before the
    first failure, discarded counts inputs rejected by ``assume``. args holds
    the (shrunk) falsifying arguments for FAILED and PROP_EXCEPTION.
    """
    outcome: Outcome
    succeeded: int = 0
    discarded: int = 0
    args: dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None
    notes: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.outcome in (Outcome.PASSED, Outcome.PROVED)
