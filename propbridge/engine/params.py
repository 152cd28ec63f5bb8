"""Checker configuration built from runner arguments.

Runner arguments arrive as a flat argument list from the host. They are
parsed with a click command used purely as a parser, so the usual click
conventions apply (``-s 200``, ``--max-examples=200``).
"""

from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence

import click

from ..errors import ConfigurationError


@dataclass(frozen=True)
class CheckParams:
    """Engine tunables plus the rendering verbosity."""
    max_examples: int = 100
    verbosity: int = 0
    seed: Optional[int] = None
    deadline_ms: Optional[float] = None
    derandomize: bool = False
    loader: Optional[Any] = None

    def with_loader(self, loader: Any) -> "CheckParams":
        """Copy bound to the session's subject loader."""
        return replace(self, loader=loader)


@click.command(add_help_option=False)
@click.option("-v", "--verbosity", type=click.IntRange(min=0), default=0)
@click.option("-s", "--max-examples", type=click.IntRange(min=1), default=100)
@click.option("--seed", type=int, default=None)
@click.option(
    "--deadline-ms",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
)
@click.option("--derandomize", is_flag=True, default=False)
def checker_options(**kwargs):
    """Checker options; parsed only, never invoked."""


def parse_params(args: Sequence[str]) -> CheckParams:
    """Parse runner arguments into CheckParams.

    Raises:
        ConfigurationError: If the arguments are not recognized.
    """
    try:
        ctx = checker_options.make_context("checker", list(args))
    except click.ClickException as e:
        raise ConfigurationError(
            f"Invalid checker args {list(args)}: {e.format_message()}"
        ) from e

    return CheckParams(**ctx.params)
