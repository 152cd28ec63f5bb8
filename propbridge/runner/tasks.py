"""Execution units handed to the host.

A RootTask stands for a whole subject. Executing it yields one CheckPropTask
per distinct property name, so the host learns the property names before
anything is checked and can re-run a single property later. A CheckPropTask
checks the names in its selectors and yields nothing further.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Iterable, Optional

from ..discovery.loader import PropertyEntry, PropertyLoader
from ..errors import DiscoveryError, PropertyNotFoundError
from ..host.protocol import EventHandler, Logger, SuiteSelector, TaskDef, TestSelector
from .executor import PropertyExecutor
from .translator import EventTranslator


@dataclass
class TaskContext:
    """Collaborators shared by every task of one runner."""
    property_loader: PropertyLoader
    executor: PropertyExecutor
    translator: EventTranslator


class BaseTask:
    """Common behaviour of root and check tasks."""

    tags: tuple[str, ...] = ()

    def __init__(self, task_def: TaskDef, context: TaskContext):
        self.task_def = task_def
        self.context = context

    @cached_property
    def props(self) -> list[PropertyEntry]:
        """The subject's entries, derived on first use."""
        return self.context.property_loader.load(self.task_def)

    def execute(
        self, handler: EventHandler, loggers: Iterable[Logger]
    ) -> list["BaseTask"]:
        raise NotImplementedError

    def execute_async(
        self,
        handler: EventHandler,
        loggers: Iterable[Logger],
        continuation: Callable[[list["BaseTask"]], None],
    ) -> None:
        """Continuation-passing variant of ``execute``."""
        continuation(self.execute(handler, loggers))

    def _load(
        self, handler: EventHandler, loggers: Iterable[Logger]
    ) -> Optional[list[PropertyEntry]]:
        """Entries, or None after reporting why the subject is unusable."""
        try:
            return self.props
        except DiscoveryError as e:
            self.context.translator.emit_error(
                self.task_def, SuiteSelector(), e, handler, loggers
            )
            return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.task_def.fully_qualified_name!r}, {self.task_def.test_names})"


class RootTask(BaseTask):
    """Expands a subject into one CheckPropTask per property name."""

    def execute(
        self, handler: EventHandler, loggers: Iterable[Logger]
    ) -> list[BaseTask]:
        loggers = list(loggers)
        entries = self._load(handler, loggers)
        if entries is None:
            return []

        names = dict.fromkeys(name for name, _ in entries)
        for logger in loggers:
            logger.debug(
                f"{self.task_def.fully_qualified_name}: {len(names)} properties"
            )

        return [
            CheckPropTask(self.task_def.select(name), self.context)
            for name in names
        ]


class CheckPropTask(BaseTask):
    """Checks the properties named by its TestSelectors."""

    @property
    def names(self) -> list[str]:
        return self.task_def.test_names

    def execute(
        self, handler: EventHandler, loggers: Iterable[Logger]
    ) -> list[BaseTask]:
        loggers = list(loggers)
        entries = self._load(handler, loggers)
        if entries is None:
            return []

        for name in self.names:
            results = self.context.executor.check(entries, name)

            if not results:
                self.context.translator.emit_error(
                    self.task_def,
                    TestSelector(name),
                    PropertyNotFoundError(self.task_def.fully_qualified_name, name),
                    handler,
                    loggers,
                )
                continue

            for result in results:
                self.context.translator.emit(
                    self.task_def, name, result, handler, loggers
                )

        return []
