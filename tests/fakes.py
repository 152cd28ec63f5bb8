"""Fake host and engine collaborators for propbridge tests."""

from propbridge.discovery.classifier import PROP_SUPERCLASS, PROPERTIES_SUPERCLASS
from propbridge.engine.props import Prop, Properties
from propbridge.engine.result import CheckResult
from propbridge.host.protocol import Fingerprint, TaskDef


class FakeEngine:
    """Engine whose verdict is whatever the property body returns."""

    def __init__(self):
        self.calls = []

    def check(self, params, prop):
        self.calls.append((params, prop))
        return prop()


class DictLoader:
    """Subject loader backed by a dict."""

    def __init__(self, subjects=None):
        self.subjects = dict(subjects or {})
        self.resolved = []

    def resolve(self, name):
        self.resolved.append(name)
        return self.subjects[name]


class ListLogger:
    """Host logger keeping (level, message) pairs."""

    def __init__(self, ansi=False):
        self.ansi = ansi
        self.lines = []

    def ansi_codes_supported(self):
        return self.ansi

    def error(self, msg):
        self.lines.append(("error", msg))

    def warn(self, msg):
        self.lines.append(("warn", msg))

    def info(self, msg):
        self.lines.append(("info", msg))

    def debug(self, msg):
        self.lines.append(("debug", msg))

    @property
    def info_lines(self):
        return [m for level, m in self.lines if level == "info"]


def verdict(outcome, **kwargs):
    """A Prop whose (fake) check yields the given outcome."""
    return Prop(lambda: CheckResult(outcome, **kwargs), label=outcome.value)


def collection(name="Suite", **verdicts):
    """A Properties collection of fake verdict props."""
    props = Properties(name)
    for prop_name, outcome in verdicts.items():
        props.property(prop_name, verdict(outcome))
    return props


def collection_def(name="tests.Suite", is_module=True, selectors=()):
    return TaskDef(name, Fingerprint(PROPERTIES_SUPERCLASS, is_module), selectors=tuple(selectors))


def prop_def(name="tests.single", is_module=True, selectors=()):
    return TaskDef(name, Fingerprint(PROP_SUPERCLASS, is_module), selectors=tuple(selectors))
