"""Discovery module - subject classification and property loading."""

from .classifier import (
    FINGERPRINTS,
    PROP_SUPERCLASS,
    PROPERTIES_SUPERCLASS,
    Instantiation,
    Kind,
    SubjectClassifier,
    SubjectShape,
)
from .loader import ImportLoader, PropertyEntry, PropertyLoader, SubjectLoader, split_name
from .manifest import Manifest, SubjectSpec, parse_manifest, parse_manifest_data

__all__ = [
    "FINGERPRINTS",
    "PROP_SUPERCLASS",
    "PROPERTIES_SUPERCLASS",
    "Instantiation",
    "Kind",
    "SubjectClassifier",
    "SubjectShape",
    "ImportLoader",
    "PropertyEntry",
    "PropertyLoader",
    "SubjectLoader",
    "split_name",
    "Manifest",
    "SubjectSpec",
    "parse_manifest",
    "parse_manifest_data",
]
