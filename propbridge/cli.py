"""CLI entry point for propbridge.

Acts as a minimal host: builds task definitions from the command line or a
manifest, drives the tasks to completion and prints the session summary.

    propbridge check myproj.props:arithmetic --checker "-s 500"
    propbridge check myproj.props:arithmetic --worker 10.0.0.5:51330
    propbridge collect --workers 4
"""

import shlex
import sys
import time
from pathlib import Path
from typing import Iterable, Optional

import click

from . import __version__
from .discovery.classifier import PROP_SUPERCLASS, PROPERTIES_SUPERCLASS
from .discovery.loader import ImportLoader
from .discovery.manifest import parse_manifest
from .errors import ConfigurationError
from .framework import PropertyFramework
from .host.protocol import EventHandler, Fingerprint, Logger, TaskDef, TestSelector
from .messaging.udp_channel import DEFAULT_SUMMARY_PORT, SummaryListener, parse_address, udp_sender
from .reporting.console import ConsoleLogger, EventRecorder
from .reporting.json_reporter import JsonReporter
from .runner.tasks import BaseTask


@click.group()
@click.version_option(__version__, prog_name="propbridge")
def main():
    """propbridge - check Hypothesis property collections."""


@main.command()
@click.argument("subjects", nargs=-1)
@click.option("--single", is_flag=True, help="Subjects are single properties, not collections.")
@click.option("--class", "construct", is_flag=True, help="Subjects are classes built without arguments.")
@click.option("--only", multiple=True, help="Check only this property (repeatable).")
@click.option("--checker", default="", help='Checker arguments, e.g. "-s 500 --seed 1".')
@click.option("--path", "paths", multiple=True, help="Extra import path (repeatable).")
@click.option("--manifest", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--worker", "coordinator", metavar="HOST:PORT", callback=lambda ctx, param, value: _address(value),
              help="Run as a worker and send the summary to this coordinator.")
@click.option("--report", "report_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Save a JSON report to this file.")
@click.option("--color/--no-color", default=None, help="Force coloured output on or off.")
@click.option("--debug", is_flag=True, help="Show debug output.")
def check(subjects, single, construct, only, checker, paths, manifest,
          coordinator, report_path, color, debug):
    """Check the properties of SUBJECTS (module:attr names)."""
    console = ConsoleLogger(color=color, debug=debug)
    task_defs = [_task_def(name, single, construct, only) for name in subjects]
    args = shlex.split(checker)
    paths = list(paths)

    if manifest:
        try:
            parsed = parse_manifest(manifest)
        except (OSError, ValueError) as e:
            _fail(console, f"Failed to parse manifest: {e}")
        task_defs.extend(parsed.task_defs())
        args = parsed.args + args
        paths.extend(parsed.paths)

    if not task_defs:
        _fail(console, "No subjects given.", code=2)

    framework = PropertyFramework()
    loader = ImportLoader(paths)

    try:
        if coordinator:
            runner = framework.worker_runner(args, [], loader, udp_sender(*coordinator))
        else:
            runner = framework.runner(args, [], loader)
    except ConfigurationError as e:
        _fail(console, str(e), code=2)

    tasks = runner.tasks(td for td in task_defs if not td.test_names)
    tasks.extend(
        runner.deserialize_task(td.to_json()) for td in task_defs if td.test_names
    )

    recorder = EventRecorder()
    start_time = time.time()

    try:
        run_tasks(tasks, recorder, [console])
    except KeyboardInterrupt:
        _fail(console, "Interrupted by user", code=130)

    duration_ms = int((time.time() - start_time) * 1000)
    counts = runner.counters.snapshot()

    try:
        summary = runner.done()
    except OSError as e:
        _fail(console, f"Cannot send summary to {coordinator[0]}:{coordinator[1]}: {e}")

    if summary:
        console.info(summary)
    else:
        console.debug(f"Summary sent to {coordinator[0]}:{coordinator[1]}")

    if report_path:
        reporter = JsonReporter()
        report = reporter.generate(counts, recorder.events, duration_ms=duration_ms)
        saved = reporter.save(report, report_path)
        console.debug(f"Report saved: {saved}")

    if not counts.all_passed:
        sys.exit(1)


@main.command()
@click.option("--port", type=int, default=DEFAULT_SUMMARY_PORT, show_default=True)
@click.option("--workers", type=click.IntRange(min=0), default=1, show_default=True,
              help="Number of worker summaries to wait for.")
@click.option("--timeout", type=float, default=300.0, show_default=True)
@click.option("--color/--no-color", default=None)
def collect(port, workers, timeout, color):
    """Coordinate workers: merge their summaries and print the total."""
    console = ConsoleLogger(color=color)
    runner = PropertyFramework().runner([], [], ImportLoader())
    listener = SummaryListener(port)

    console.info(f"Waiting for {workers} worker summaries on UDP port {port}...")
    try:
        received = listener.collect(
            runner.receive_message,
            expected=workers,
            timeout=timeout,
            on_error=lambda e: console.warn(f"Ignored malformed summary: {e}"),
        )
    except OSError as e:
        _fail(console, f"Cannot listen on UDP port {port}: {e}")

    if received < workers:
        console.warn(f"Only {received} of {workers} workers reported within {timeout:.0f}s")

    console.info(runner.done())

    if not runner.counters.snapshot().all_passed:
        sys.exit(1)


def run_tasks(tasks: Iterable[BaseTask], handler: EventHandler, loggers: list[Logger]) -> None:
    """Execute tasks depth-first until no task yields further tasks."""
    pending = list(tasks)
    while pending:
        task = pending.pop(0)
        pending[:0] = task.execute(handler, loggers)


def _task_def(name: str, single: bool, construct: bool, only: Iterable[str]) -> TaskDef:
    fingerprint = Fingerprint(
        superclass_name=PROP_SUPERCLASS if single else PROPERTIES_SUPERCLASS,
        is_module=not construct,
    )
    selectors = tuple(TestSelector(n) for n in only)
    return TaskDef(name, fingerprint, explicitly_specified=True, selectors=selectors)


def _address(value: Optional[str]) -> Optional[tuple[str, int]]:
    if value is None:
        return None
    try:
        return parse_address(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _fail(console: ConsoleLogger, message: str, code: int = 1):
    console.error(message)
    sys.exit(code)


if __name__ == "__main__":
    main()
