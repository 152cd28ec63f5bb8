"""Exception types raised by propbridge.

Everything derives from BridgeError so a host can catch the whole family.
Per-subject and per-property problems are reported as host events; only
ConfigurationError and ProtocolError escape to the caller.
"""


class BridgeError(Exception):
    """Base class for all propbridge errors."""


class ConfigurationError(BridgeError, ValueError):
    """Runner arguments could not be parsed."""


class DiscoveryError(BridgeError):
    """A single subject could not be turned into properties."""

    def __init__(self, subject: str, message: str):
        super().__init__(f"{subject}: {message}")
        self.subject = subject


class ClassificationError(DiscoveryError):
    """The subject's fingerprint is not one this framework publishes."""


class SubjectLoadError(DiscoveryError):
    """The subject could not be imported or instantiated."""


class PropertyNotFoundError(BridgeError, LookupError):
    """A selector names a property the subject does not define."""

    def __init__(self, subject: str, name: str):
        super().__init__(f"No property named '{name}' in {subject}")
        self.subject = subject
        self.name = name


class PropertyFailure(BridgeError, AssertionError):
    """Synthesized cause attached to events of falsified properties."""


class ProtocolError(BridgeError, ValueError):
    """A summary message from a worker was malformed."""

    def __init__(self, message: str, line: str):
        super().__init__(f"{message}: {line!r}")
        self.line = line
