"""Host-side vocabulary shared between a test runner host and propbridge.

The host discovers subjects and hands them over as TaskDef objects, then
receives one Event per completed property check. Everything in this module
is plain data or a structural Protocol; no host internals live here.
"""

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Protocol, Union


class Status(str, Enum):
    """Finite outcome vocabulary understood by the host."""
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class SuiteSelector:
    """Selects a whole subject."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "suite"}


@dataclass(frozen=True)
class TestSelector:
    """Selects one named property of a subject."""
    __test__ = False  # not a pytest class

    test_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "test", "name": self.test_name}


Selector = Union[SuiteSelector, TestSelector]


def selector_from_dict(data: dict) -> Selector:
    """Rebuild a selector serialized with ``to_dict``."""
    kind = data.get("type")
    if kind == "suite":
        return SuiteSelector()
    if kind == "test":
        return TestSelector(str(data.get("name", "")))
    raise ValueError(f"Unknown selector type: {kind!r}")


@dataclass(frozen=True)
class Fingerprint:
    """Type marker attached to a discovered subject.

    superclass_name tells what the subject is (a property collection or a
    single property), is_module whether it is a ready-made module-level
    object or a class that must be instantiated.
    """
    superclass_name: str
    is_module: bool
    require_no_arg_constructor: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "superclass": self.superclass_name,
            "module": self.is_module,
            "no_arg_constructor": self.require_no_arg_constructor,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Fingerprint":
        return cls(
            superclass_name=str(data["superclass"]),
            is_module=bool(data["module"]),
            require_no_arg_constructor=bool(data.get("no_arg_constructor", True)),
        )


@dataclass(frozen=True)
class TaskDef:
    """A discovered subject plus the selectors the host attached to it."""
    fully_qualified_name: str
    fingerprint: Fingerprint
    explicitly_specified: bool = False
    selectors: tuple[Selector, ...] = field(default_factory=tuple)

    @property
    def test_names(self) -> list[str]:
        """Names carried by TestSelectors, in selector order."""
        return [s.test_name for s in self.selectors if isinstance(s, TestSelector)]

    def select(self, name: str) -> "TaskDef":
        """Copy of this definition narrowed to a single property name."""
        return replace(self, selectors=(TestSelector(name),))

    def to_json(self) -> str:
        """Serialize for shipping to another process."""
        return json.dumps({
            "name": self.fully_qualified_name,
            "fingerprint": self.fingerprint.to_dict(),
            "explicit": self.explicitly_specified,
            "selectors": [s.to_dict() for s in self.selectors],
        }, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "TaskDef":
        """Rebuild a definition produced by ``to_json``.

        Raises:
            ValueError: If the text is not a serialized TaskDef.
        """
        try:
            data = json.loads(text)
            return cls(
                fully_qualified_name=str(data["name"]),
                fingerprint=Fingerprint.from_dict(data["fingerprint"]),
                explicitly_specified=bool(data.get("explicit", False)),
                selectors=tuple(
                    selector_from_dict(s) for s in data.get("selectors", [])
                ),
            )
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Not a serialized task definition: {e}") from e


@dataclass(frozen=True)
class Event:
    """Outcome of one property check, as delivered to the host."""
    fully_qualified_name: str
    fingerprint: Fingerprint
    selector: Selector
    status: Status
    throwable: Optional[BaseException] = None
    duration: int = -1  # not measured

    @property
    def selector_name(self) -> str:
        if isinstance(self.selector, TestSelector):
            return self.selector.test_name
        return ""


class EventHandler(Protocol):
    """Receives one event per completed check."""

    def handle(self, event: Event) -> None:
        ...


class Logger(Protocol):
    """Host logger; lines may carry ANSI colour when supported."""

    def ansi_codes_supported(self) -> bool:
        ...

    def error(self, msg: str) -> None:
        ...

    def warn(self, msg: str) -> None:
        ...

    def info(self, msg: str) -> None:
        ...

    def debug(self, msg: str) -> None:
        ...
