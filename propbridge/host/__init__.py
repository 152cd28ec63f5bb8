"""Host module - task definitions, events and logger interfaces."""

from .protocol import (
    Event,
    EventHandler,
    Fingerprint,
    Logger,
    Selector,
    Status,
    SuiteSelector,
    TaskDef,
    TestSelector,
    selector_from_dict,
)

__all__ = [
    "Event",
    "EventHandler",
    "Fingerprint",
    "Logger",
    "Selector",
    "Status",
    "SuiteSelector",
    "TaskDef",
    "TestSelector",
    "selector_from_dict",
]
