"""Shared fixtures for propbridge tests."""

import importlib
import itertools
import textwrap

import pytest

from fakes import FakeEngine, ListLogger
from propbridge.reporting.console import EventRecorder


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def handler():
    return EventRecorder()


@pytest.fixture
def logger():
    return ListLogger()


_module_ids = itertools.count()


@pytest.fixture
def subject_module(tmp_path):
    """Write a throwaway subject module; returns (module_name, search_path)."""
    def write(source):
        name = f"pb_subjects_{next(_module_ids)}"
        (tmp_path / f"{name}.py").write_text(textwrap.dedent(source), encoding="utf-8")
        importlib.invalidate_caches()
        return name, str(tmp_path)
    return write
