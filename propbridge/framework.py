"""Entry point a test-runner host uses to obtain runners."""

from typing import Any, Callable, Optional, Sequence

from .discovery.classifier import FINGERPRINTS
from .discovery.loader import SubjectLoader
from .engine.hypothesis_engine import CheckingEngine
from .host.protocol import Fingerprint
from .runner.runner import CoordinatorRunner, WorkerRunner


class PropertyFramework:
    """Publishes fingerprints and builds coordinator and worker runners."""

    name = "propbridge"

    def fingerprints(self) -> list[Fingerprint]:
        """Markers the host should look for while discovering subjects."""
        return list(FINGERPRINTS)

    def runner(
        self,
        args: Sequence[str],
        remote_args: Sequence[str],
        loader: SubjectLoader,
        engine: Optional[CheckingEngine] = None,
    ) -> CoordinatorRunner:
        return CoordinatorRunner(args, remote_args, loader, engine)

    def worker_runner(
        self,
        args: Sequence[str],
        remote_args: Sequence[str],
        loader: SubjectLoader,
        send: Callable[[str], Any],
        engine: Optional[CheckingEngine] = None,
    ) -> WorkerRunner:
        return WorkerRunner(args, remote_args, loader, send, engine)
