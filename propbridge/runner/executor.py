"""Property executor - runs selected properties through the checking engine."""

from typing import Any

from ..discovery.loader import PropertyEntry
from ..engine.hypothesis_engine import CheckingEngine
from ..engine.params import CheckParams
from ..engine.result import CheckResult


class PropertyExecutor:
    """Checks properties by name with the session configuration.

    Engine calls may block for as long as the engine's own limits allow;
    no timeout is added here.
    """

    def __init__(self, engine: CheckingEngine, params: CheckParams, loader: Any = None):
        """Initialize property executor.

        Args:
            engine: Checking engine producing verdicts.
            params: Session configuration.
            loader: Session subject loader, handed to the engine via params.
        """
        self.engine = engine
        self.params = params.with_loader(loader)

    def check(self, entries: list[PropertyEntry], name: str) -> list[CheckResult]:
        """Check every entry named exactly ``name``, in entry order.

        Returns:
            One result per matching entry; empty when nothing matches.
        """
        return [
            self.engine.check(self.params, p)
            for entry_name, p in entries
            if entry_name == name
        ]
