"""UDP transport for worker summary lines.

Workers send their summary as a single UTF-8 datagram to the coordinator;
the coordinator collects datagrams until every expected worker reported or
the timeout expires.
"""

import socket
import time
from typing import Callable, Optional

from ..errors import ProtocolError
from .codec import MessageTag


# Default UDP port the coordinator listens on
DEFAULT_SUMMARY_PORT = 51330

# Default collection timeout in seconds
DEFAULT_TIMEOUT = 300


class SummaryListener:
    """Receives summary lines from worker runners."""

    def __init__(self, port: int = DEFAULT_SUMMARY_PORT, host: str = ""):
        """Initialize listener.

        Args:
            port: UDP port to listen on. 0 picks a free port on ``open()``.
            host: Interface to bind. Default: all interfaces.
        """
        self.port = port
        self.host = host
        self._sock: Optional[socket.socket] = None

    def open(self) -> tuple[str, int]:
        """Bind the socket; returns the bound address."""
        if self._sock is None:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self.port))
            sock.settimeout(1.0)  # 1-second polling interval
            self._sock = sock
        return self._sock.getsockname()

    def collect(
        self,
        receive: Callable[[str], Optional[str]],
        expected: int,
        timeout: float = DEFAULT_TIMEOUT,
        on_error: Optional[Callable[[ProtocolError], None]] = None,
    ) -> int:
        """Feed incoming lines to ``receive`` until ``expected`` arrived.

        Args:
            receive: Usually the coordinator runner's ``receive_message``.
            expected: Number of worker summaries to wait for.
            timeout: Maximum time to wait in seconds.
            on_error: Called with malformed messages; they don't count.

        Returns:
            Number of summaries accepted. Fewer than ``expected`` on timeout.
        """
        self.open()
        start_time = time.time()
        accepted = 0

        try:
            while accepted < expected and time.time() - start_time < timeout:
                try:
                    data, _ = self._sock.recvfrom(4096)
                except socket.timeout:
                    continue

                line = data.decode("utf-8", errors="replace").strip()
                try:
                    receive(line)
                except ProtocolError as e:
                    if on_error:
                        on_error(e)
                    continue

                # lines with unknown tags are ignored and don't count
                if line.startswith(MessageTag.COUNTER_DELTA.value):
                    accepted += 1
        finally:
            self.close()

        return accepted

    def close(self) -> None:
        """Close the UDP socket."""
        if self._sock:
            try:
                self._sock.close()
            except OSError:
                pass
            self._sock = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *args):
        self.close()


def udp_sender(host: str, port: int = DEFAULT_SUMMARY_PORT) -> Callable[[str], None]:
    """Return a ``send`` callable delivering one line as one datagram."""
    def send(line: str) -> None:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.sendto(line.encode("utf-8"), (host, port))
    return send


def parse_address(value: str) -> tuple[str, int]:
    """Parse ``HOST:PORT`` (or ``:PORT`` for localhost).

    Raises:
        ValueError: If the port is missing or not a number.
    """
    host, sep, port = value.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Expected HOST:PORT, got '{value}'")
    return host or "127.0.0.1", int(port)
