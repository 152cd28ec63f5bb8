"""Runners - one per session, owning the counters and building tasks.

CoordinatorRunner reports to the host directly and merges summaries sent by
workers. WorkerRunner hands its counts to the coordinator when done.
"""

from typing import Any, Callable, Iterable, Optional, Sequence

from ..discovery.classifier import SubjectClassifier
from ..discovery.loader import PropertyLoader, SubjectLoader
from ..engine.hypothesis_engine import CheckingEngine, HypothesisEngine
from ..engine.params import parse_params
from ..host.protocol import TaskDef
from ..messaging.codec import decode, encode
from ..reporting.pretty import format_summary
from .counters import Counters
from .executor import PropertyExecutor
from .tasks import BaseTask, CheckPropTask, RootTask, TaskContext
from .translator import EventTranslator


class PropertyRunner:
    """Base runner.

    Args are parsed eagerly, so a runner with bad arguments is never built.
    """

    def __init__(
        self,
        args: Sequence[str],
        remote_args: Sequence[str],
        loader: SubjectLoader,
        engine: Optional[CheckingEngine] = None,
        classifier: Optional[SubjectClassifier] = None,
    ):
        """Initialize runner.

        Args:
            args: Checker arguments (see ``parse_params``).
            remote_args: Arguments meant for remote runners; kept as given.
            loader: Resolves subject names to objects.
            engine: Checking engine. Default: HypothesisEngine.
            classifier: Fingerprint classifier. Default: the four published
                        fingerprints.

        Raises:
            ConfigurationError: If ``args`` cannot be parsed.
        """
        self.args = list(args)
        self.remote_args = list(remote_args)
        self.loader = loader
        self.params = parse_params(self.args)
        self.engine = engine or HypothesisEngine()
        self.counters = Counters()
        self.context = TaskContext(
            property_loader=PropertyLoader(loader, classifier),
            executor=PropertyExecutor(self.engine, self.params, loader),
            translator=EventTranslator(self.counters, self.params.verbosity),
        )

    def tasks(self, task_defs: Iterable[TaskDef]) -> list[BaseTask]:
        """Root tasks for freshly discovered subjects."""
        return [RootTask(td, self.context) for td in task_defs]

    def deserialize_task(
        self,
        task: str,
        deserializer: Callable[[str], TaskDef] = TaskDef.from_json,
    ) -> BaseTask:
        """Rebuild a task; definitions with TestSelectors become check tasks."""
        task_def = deserializer(task)
        if not task_def.test_names:
            return RootTask(task_def, self.context)
        return CheckPropTask(task_def, self.context)

    def serialize_task(
        self,
        task: BaseTask,
        serializer: Callable[[TaskDef], str] = TaskDef.to_json,
    ) -> str:
        return serializer(task.task_def)

    def receive_message(self, msg: str) -> Optional[str]:
        raise NotImplementedError

    def done(self) -> str:
        raise NotImplementedError


class CoordinatorRunner(PropertyRunner):
    """Runner that owns the session totals shown to the user."""

    def receive_message(self, msg: str) -> Optional[str]:
        """Merge a worker summary; unknown messages are ignored.

        Raises:
            ProtocolError: If the message is malformed. Counters are untouched.
        """
        delta = decode(msg)
        if delta is not None:
            self.counters.merge(delta)
        return None

    def done(self) -> str:
        return format_summary(self.counters.snapshot())


class WorkerRunner(PropertyRunner):
    """Runner that reports its counts to a coordinator instead of the user."""

    def __init__(
        self,
        args: Sequence[str],
        remote_args: Sequence[str],
        loader: SubjectLoader,
        send: Callable[[str], Any],
        engine: Optional[CheckingEngine] = None,
        classifier: Optional[SubjectClassifier] = None,
    ):
        super().__init__(args, remote_args, loader, engine, classifier)
        self.send = send

    def receive_message(self, msg: str) -> Optional[str]:
        return None

    def done(self) -> str:
        self.send(encode(self.counters.snapshot()))
        return ""
