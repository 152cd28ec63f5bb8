"""Messaging module - worker/coordinator summary protocol."""

from .codec import PROTOCOL_VERSION, CounterDelta, MessageTag, decode, encode
from .udp_channel import DEFAULT_SUMMARY_PORT, SummaryListener, parse_address, udp_sender

__all__ = [
    "PROTOCOL_VERSION",
    "CounterDelta",
    "MessageTag",
    "decode",
    "encode",
    "DEFAULT_SUMMARY_PORT",
    "SummaryListener",
    "parse_address",
    "udp_sender",
]
