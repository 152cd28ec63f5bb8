"""Single-line messages exchanged between worker and coordinator runners.

Wire format (protocol version 1): one ASCII line whose first character is a
message tag. The only message is a counter delta:

    d<total>,<success>,<failure>,<error>

Lines with an unknown tag (or empty lines) decode to None and are ignored.
A line with a known tag is decoded strictly: either the whole message is
valid or ProtocolError is raised, never a partial result. Each protocol
version has its own set of tags; a version this module does not speak is
rejected with ProtocolError.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..errors import ProtocolError

PROTOCOL_VERSION = 1

_COUNT = re.compile(r"[0-9]+", re.ASCII)


class MessageTag(str, Enum):
    """Leading character identifying a message."""
    COUNTER_DELTA = "d"


@dataclass(frozen=True)
class CounterDelta:
    """Snapshot of a runner's counters, added into the coordinator's."""
    total: int = 0
    success: int = 0
    failure: int = 0
    error: int = 0

    @property
    def all_passed(self) -> bool:
        return self.total == self.success


def encode(message: CounterDelta) -> str:
    """Serialize a message to its wire line."""
    return (
        f"{MessageTag.COUNTER_DELTA.value}"
        f"{message.total},{message.success},{message.failure},{message.error}"
    )


def decode(line: str, version: int = PROTOCOL_VERSION) -> Optional[CounterDelta]:
    """Parse a wire line.

    Args:
        line: Line received from a peer runner.
        version: Protocol version the peer speaks.

    Returns:
        The decoded message, or None for empty lines and unknown tags.

    Raises:
        ProtocolError: If a counter delta line is malformed or the version
                       is not supported.
    """
    decoders = _DECODERS.get(version)
    if decoders is None:
        raise ProtocolError(f"Unsupported protocol version {version}", line)

    if not line:
        return None

    try:
        decoder = decoders.get(MessageTag(line[0]))
    except ValueError:
        return None

    if decoder is None:
        return None
    return decoder(line[1:], line)


def _decode_counter_delta(body: str, line: str) -> CounterDelta:
    fields = body.split(",")
    if len(fields) != 4:
        raise ProtocolError(f"Expected 4 counter fields, got {len(fields)}", line)

    bad = [f for f in fields if not _COUNT.fullmatch(f)]
    if bad:
        raise ProtocolError(f"Non-numeric counter field {bad[0]!r}", line)

    total, success, failure, error = (int(f) for f in fields)
    return CounterDelta(total=total, success=success, failure=failure, error=error)


_DECODERS: dict[int, dict[MessageTag, Callable[[str, str], CounterDelta]]] = {
    PROTOCOL_VERSION: {
        MessageTag.COUNTER_DELTA: _decode_counter_delta,
    },
}
