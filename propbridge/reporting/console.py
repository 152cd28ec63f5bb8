"""Console logger and event collection used by the command line."""

import threading
from typing import Optional

import click

from ..host.protocol import Event


class ConsoleLogger:
    """Host logger writing to the terminal through click.

    click.echo strips ANSI styles when the stream is not a terminal unless
    ``color`` forces them on.
    """

    def __init__(self, color: Optional[bool] = None, debug: bool = False):
        """Initialize console logger.

        Args:
            color: True/False to force colours on/off. None = auto-detect.
            debug: Whether debug lines are printed.
        """
        self.color = color
        self.show_debug = debug

    def ansi_codes_supported(self) -> bool:
        return self.color is not False

    def error(self, msg: str) -> None:
        click.echo(click.style("error: ", fg="red") + msg, err=True, color=self.color)

    def warn(self, msg: str) -> None:
        click.echo(click.style("warning: ", fg="yellow") + msg, err=True, color=self.color)

    def info(self, msg: str) -> None:
        click.echo(msg, color=self.color)

    def debug(self, msg: str) -> None:
        if self.show_debug:
            click.echo(msg, err=True, color=self.color)


class EventRecorder:
    """Event handler that keeps every event it receives."""

    def __init__(self):
        self._lock = threading.Lock()
        self.events: list[Event] = []

    def handle(self, event: Event) -> None:
        with self._lock:
            self.events.append(event)
