"""YAML discovery manifest for the propbridge command line.

A manifest lists the subjects to check and the checker arguments:

    args: ["-s", "200"]
    paths: ["src"]
    subjects:
      - name: myproj.props:arithmetic
      - name: myproj.props.SortProps
        singleton: false
      - name: myproj.props:reverse_twice
        kind: prop
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import yaml

from ..host.protocol import Fingerprint, TaskDef
from .classifier import PROP_SUPERCLASS, PROPERTIES_SUPERCLASS

KIND_SUPERCLASSES = {
    "properties": PROPERTIES_SUPERCLASS,
    "prop": PROP_SUPERCLASS,
}


@dataclass
class SubjectSpec:
    """One subject entry of a manifest."""
    name: str
    kind: str = "properties"
    singleton: bool = True

    def __post_init__(self):
        self.kind = str(self.kind).lower()

    def to_task_def(self) -> TaskDef:
        fingerprint = Fingerprint(
            superclass_name=KIND_SUPERCLASSES[self.kind],
            is_module=self.singleton,
        )
        return TaskDef(self.name, fingerprint, explicitly_specified=True)


@dataclass
class Manifest:
    """Parsed manifest."""
    subjects: list[SubjectSpec] = field(default_factory=list)
    args: list[str] = field(default_factory=list)
    paths: list[str] = field(default_factory=list)

    def task_defs(self) -> list[TaskDef]:
        return [s.to_task_def() for s in self.subjects]


def parse_manifest(file_path: Union[str, Path]) -> Manifest:
    """Parse a YAML manifest file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the YAML is malformed or missing required fields.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Manifest file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty manifest file: {file_path}")

    return parse_manifest_data(data, source=str(file_path))


def parse_manifest_data(data: dict, source: str = "<inline>") -> Manifest:
    """Parse a manifest from already loaded YAML.

    Raises:
        ValueError: If required fields are missing or malformed.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Manifest must be a YAML mapping, got {type(data).__name__}")

    if "subjects" not in data:
        raise ValueError(f"Missing required field 'subjects' in {source}")

    subjects_data = data["subjects"]
    if not isinstance(subjects_data, list):
        raise ValueError(f"'subjects' must be a list in {source}")

    subjects = []
    for i, subject_data in enumerate(subjects_data):
        if isinstance(subject_data, str):
            subject_data = {"name": subject_data}
        if not isinstance(subject_data, dict):
            raise ValueError(f"Subject {i} must be a mapping or a name in {source}")
        if "name" not in subject_data:
            raise ValueError(
                f"Missing required field 'name' in subjects[{i}] ({source})"
            )

        subject = SubjectSpec(**{
            k: v for k, v in subject_data.items()
            if k in SubjectSpec.__dataclass_fields__
        })
        if subject.kind not in KIND_SUPERCLASSES:
            raise ValueError(
                f"Invalid kind '{subject.kind}' in subjects[{i}] ({source}). "
                f"Must be one of: {', '.join(sorted(KIND_SUPERCLASSES))}"
            )
        if not isinstance(subject.singleton, bool):
            raise ValueError(
                f"Invalid singleton '{subject.singleton}' in subjects[{i}] ({source}). "
                f"Must be true or false"
            )
        subjects.append(subject)

    args = _string_list(data.get("args", []), "args", source)
    paths = _string_list(data.get("paths", []), "paths", source)

    return Manifest(subjects=subjects, args=args, paths=paths)


def _string_list(value, field_name: str, source: str) -> list[str]:
    """Check that a field is a list and stringify its items."""
    if not isinstance(value, list):
        raise ValueError(f"'{field_name}' must be a list in {source}")
    return [str(v) for v in value]
