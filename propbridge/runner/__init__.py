"""Runner module - task planning, execution and aggregation."""

from .counters import Counters
from .executor import PropertyExecutor
from .runner import CoordinatorRunner, PropertyRunner, WorkerRunner
from .tasks import BaseTask, CheckPropTask, RootTask, TaskContext
from .translator import EventTranslator, translate

__all__ = [
    "Counters",
    "PropertyExecutor",
    "CoordinatorRunner",
    "PropertyRunner",
    "WorkerRunner",
    "BaseTask",
    "CheckPropTask",
    "RootTask",
    "TaskContext",
    "EventTranslator",
    "translate",
]
