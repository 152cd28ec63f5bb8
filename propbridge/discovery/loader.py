"""Obtaining live subjects and their (name, property) entries."""

import importlib
import sys
from pathlib import Path
from typing import Any, Iterable, Optional, Protocol

from ..errors import DiscoveryError, SubjectLoadError
from ..host.protocol import TaskDef
from .classifier import Instantiation, Kind, SubjectClassifier

PropertyEntry = tuple[str, Any]


class SubjectLoader(Protocol):
    """Resolves a fully qualified subject name to an object."""

    def resolve(self, name: str) -> Any:
        ...


class ImportLoader:
    """Resolves ``pkg.module:attr`` or ``pkg.module.attr`` through importlib."""

    def __init__(self, search_paths: Iterable[str] = ()):
        """Initialize the loader.

        Args:
            search_paths: Extra directories put in front of sys.path
                          before the first import.
        """
        self.search_paths = [str(Path(p)) for p in search_paths]

    def resolve(self, name: str) -> Any:
        module_name, attr_path = split_name(name)
        self._ensure_paths()

        obj = importlib.import_module(module_name)
        for part in attr_path.split("."):
            obj = getattr(obj, part)
        return obj

    def _ensure_paths(self) -> None:
        for path in reversed(self.search_paths):
            if path not in sys.path:
                sys.path.insert(0, path)


def split_name(name: str) -> tuple[str, str]:
    """Split a subject name into module and attribute path.

    Raises:
        ValueError: If the name has no attribute part.
    """
    if ":" in name:
        module_name, _, attr_path = name.partition(":")
    else:
        module_name, _, attr_path = name.rpartition(".")

    if not module_name or not attr_path:
        raise ValueError(f"Expected 'module:attr' or 'module.attr', got '{name}'")
    return module_name, attr_path


class PropertyLoader:
    """Turns a task definition into the subject's property entries.

    Entries are derived from a fresh subject every time; instantiation may
    have side effects the caller relies on.
    """

    def __init__(self, loader: SubjectLoader, classifier: Optional[SubjectClassifier] = None):
        self.loader = loader
        self.classifier = classifier or SubjectClassifier()

    def instantiate(self, task_def: TaskDef) -> tuple[Kind, Any]:
        """Classify and obtain the live subject.

        Raises:
            ClassificationError: If the fingerprint is unknown.
            SubjectLoadError: If the subject cannot be resolved or built.
        """
        name = task_def.fully_qualified_name
        kind = self.classifier.classify(task_def.fingerprint, name)

        try:
            target = self.loader.resolve(name)
            if kind.instantiation is Instantiation.CONSTRUCTOR:
                return kind, target()
            return kind, target
        except DiscoveryError:
            raise
        except Exception as e:
            raise SubjectLoadError(name, f"{type(e).__name__}: {e}") from e

    def load(self, task_def: TaskDef) -> list[PropertyEntry]:
        """Return the subject's entries; a lone property gets an empty name."""
        kind, subject = self.instantiate(task_def)

        if not kind.is_collection:
            return [("", subject)]

        try:
            return [(str(name), p) for name, p in subject.properties]
        except Exception as e:
            raise SubjectLoadError(
                task_def.fully_qualified_name,
                f"cannot list properties ({type(e).__name__}: {e})",
            ) from e
