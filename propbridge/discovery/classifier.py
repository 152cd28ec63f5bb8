"""Subject classification from host fingerprints.

The framework publishes four fingerprints: a property collection or a
single property, each either as a module-level object or as a class with a
no-argument constructor. Classification is a lookup in an explicit registry;
the subject itself is never inspected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..errors import ClassificationError
from ..host.protocol import Fingerprint


PROPERTIES_SUPERCLASS = "propbridge.Properties"
PROP_SUPERCLASS = "propbridge.Prop"


class SubjectShape(str, Enum):
    """What a subject exposes."""
    COLLECTION = "collection"
    SINGLE = "single"


class Instantiation(str, Enum):
    """How a live subject is obtained."""
    SINGLETON = "singleton"
    CONSTRUCTOR = "constructor"


@dataclass(frozen=True)
class Kind:
    shape: SubjectShape
    instantiation: Instantiation

    @property
    def is_collection(self) -> bool:
        return self.shape is SubjectShape.COLLECTION


DEFAULT_SHAPES: dict[str, SubjectShape] = {
    PROPERTIES_SUPERCLASS: SubjectShape.COLLECTION,
    PROP_SUPERCLASS: SubjectShape.SINGLE,
}

FINGERPRINTS: tuple[Fingerprint, ...] = tuple(
    Fingerprint(superclass_name=name, is_module=is_module)
    for is_module in (False, True)
    for name in (PROPERTIES_SUPERCLASS, PROP_SUPERCLASS)
)


class SubjectClassifier:
    """Maps fingerprints to subject kinds."""

    def __init__(self, shapes: Optional[Mapping[str, SubjectShape]] = None):
        self._shapes = dict(DEFAULT_SHAPES if shapes is None else shapes)

    def classify(self, fingerprint: Fingerprint, subject: str = "<unknown>") -> Kind:
        """Resolve the kind of a subject.

        Raises:
            ClassificationError: If the superclass name is not registered.
        """
        shape = self._shapes.get(fingerprint.superclass_name)
        if shape is None:
            known = ", ".join(sorted(self._shapes))
            raise ClassificationError(
                subject,
                f"unknown fingerprint superclass '{fingerprint.superclass_name}' "
                f"(expected one of: {known})",
            )

        instantiation = (
            Instantiation.SINGLETON if fingerprint.is_module else Instantiation.CONSTRUCTOR
        )
        return Kind(shape, instantiation)
