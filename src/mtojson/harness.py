"""Scenario runner. Every scenario is rendered twice.

The first run gets a capacity one byte short of the document and must be
refused; the second gets the exact capacity and must succeed. Bytes past the
declared capacity are filled with a guard pattern and checked afterwards.
"""

from __future__ import annotations

import click

from mtojson.generator import generate_json
from mtojson.scenarios import SCENARIOS, Scenario

EXIT_UNEXPECTED_OVERFLOW = 124
EXIT_UNDETECTED_OVERFLOW = 125

_GUARD_SIZE = 16
_GUARD_BYTE = 0xA5


class UndetectedOverflowError(Exception):
    """A too-small buffer was accepted, or bytes past the capacity were written."""

    exit_code = EXIT_UNDETECTED_OVERFLOW


class UnexpectedOverflowError(Exception):
    """An exactly-sized buffer was refused."""

    exit_code = EXIT_UNEXPECTED_OVERFLOW


def _guarded_buffer(capacity: int) -> bytearray:
    buf = bytearray(capacity + _GUARD_SIZE)
    buf[capacity:] = bytes([_GUARD_BYTE]) * _GUARD_SIZE
    return buf


def _render(scenario: Scenario, capacity: int) -> tuple[int, bytearray]:
    buf = _guarded_buffer(capacity)
    length = generate_json(buf, scenario.build(), capacity)
    if any(b != _GUARD_BYTE for b in buf[capacity:]):
        raise UndetectedOverflowError(
            f"{scenario.name}: bytes written past capacity {capacity}"
        )
    return length, buf


def run_scenario(scenario: Scenario, verbose: bool = False) -> bool:
    """Run one scenario; return True if its output did not match.

    Raises UndetectedOverflowError / UnexpectedOverflowError when the
    capacity guarantee itself is broken.
    """
    expected = scenario.expected.encode("utf-8")
    exact = len(expected) + 1

    if _render(scenario, exact - 1)[0]:
        if verbose:
            click.echo("UNDETECTED buffer overflow")
        raise UndetectedOverflowError(f"{scenario.name}: capacity {exact - 1} accepted")

    length, buf = _render(scenario, exact)
    if not length:
        if verbose:
            click.echo("NON-EXPECTED buffer overflow")
        raise UnexpectedOverflowError(f"{scenario.name}: capacity {exact} refused")

    generated = bytes(buf[:length])
    if generated != expected or buf[length] != 0:
        click.echo(f"\nFAILED: {scenario.name}", err=True)
        click.echo(f"Expected : {scenario.expected}", err=True)
        click.echo(f"Generated: {generated.decode('utf-8', 'replace')}", err=True)
        return True
    return False


def run_all(verbose: bool = False) -> list[int]:
    """Run every scenario in order; return the ids of those that failed."""
    failed = []
    for number, scenario in SCENARIOS.items():
        if verbose:
            click.echo(f"Running test: {scenario.name:<30} ", nl=False)
        rv = run_scenario(scenario, verbose)
        if verbose:
            click.echo(f"{number}: {int(rv)}")
        if rv:
            failed.append(number)
    return failed
