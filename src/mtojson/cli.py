"""CLI entry point for mtojson."""

from __future__ import annotations

import sys

import click

from mtojson.generator import DepthLimitError, generate_json, required_capacity
from mtojson.harness import (
    UndetectedOverflowError,
    UnexpectedOverflowError,
    run_all,
    run_scenario,
)
from mtojson.scenarios import SCENARIOS
from mtojson.validator import ValidationError, load_members
from mtojson.writer import write_document


@click.group(context_settings={"auto_envvar_prefix": "MTOJSON"})
def main() -> None:
    """mtojson: bounded-buffer JSON generator."""


@main.command("test")
@click.option(
    "-n",
    "number",
    type=int,
    default=None,
    help="Run only the scenario with this number",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Trace each scenario as it runs",
)
def run_tests(number: int | None, verbose: bool) -> None:
    """Run the built-in rendering scenarios.

    Exit status is the number of failed scenarios, 124 when an exactly-sized
    buffer is refused, or 125 when a too-small buffer goes undetected.
    """
    try:
        if number:
            scenario = SCENARIOS.get(number)
            if scenario is None:
                click.echo("No such test!", err=True)
                sys.exit(1)
            click.echo(f"Running test: {scenario.name:<30} ", nl=not verbose)
            sys.exit(int(run_scenario(scenario, verbose)))

        failed = run_all(verbose)
    except (UndetectedOverflowError, UnexpectedOverflowError) as exc:
        click.echo(f"ERROR: {exc}", err=True)
        sys.exit(exc.exit_code)

    if failed:
        click.echo(f"\nFailed tests: {' '.join(str(n) for n in failed)}", err=True)
    sys.exit(len(failed))


@main.command("render")
@click.option(
    "--members",
    "members_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to MemberList.json",
)
@click.option(
    "--capacity",
    type=click.IntRange(min=0),
    default=None,
    help="Buffer capacity in bytes, terminator included [default: exact fit]",
)
@click.option(
    "--out",
    "out_path",
    type=click.Path(),
    default=None,
    help="Write the document here instead of stdout",
)
def render_members(members_path: str, capacity: int | None, out_path: str | None) -> None:
    """Render a MemberList.json description into a fixed-size buffer."""
    try:
        members = load_members(members_path)
        if capacity is None:
            capacity = required_capacity(members)
        buf = bytearray(capacity)
        length = generate_json(buf, members, capacity)
    except (ValidationError, DepthLimitError) as exc:
        click.echo(f"ERROR: {exc}", err=True)
        sys.exit(1)

    if not length:
        click.echo(f"ERROR: document does not fit in {capacity} bytes", err=True)
        sys.exit(1)

    document = bytes(buf[:length])
    if out_path:
        write_document(document, out_path)
    else:
        click.echo(document.decode("utf-8"))
    sys.exit(0)


@main.command("measure")
@click.option(
    "--members",
    "members_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to MemberList.json",
)
def measure(members_path: str) -> None:
    """Print the buffer capacity a MemberList.json needs, terminator included."""
    try:
        members = load_members(members_path)
        click.echo(required_capacity(members))
    except (ValidationError, DepthLimitError) as exc:
        click.echo(f"ERROR: {exc}", err=True)
        sys.exit(1)
