"""Shell utilities and console output.

Provides the command runner used to invoke the workspace build and publish
tools, plus output formatting helpers for progress messages.
"""

from __future__ import annotations

import shlex
import subprocess
import sys
from typing import Literal, Protocol

import click

from .errors import CommandError

Level = Literal["info", "value", "warn", "success", "error"]

LEVEL_COLORS: dict[str, str] = {
    "info": "blue",
    "value": "yellow",
    "warn": "yellow",
    "success": "green",
    "error": "red",
}


def format_message(message: str, level: Level = "info") -> str:
    """Decorate a message with the ANSI color for its level."""
    return click.style(message, fg=LEVEL_COLORS[level])


def log(label: str, value: str | None = None, level: Level = "info") -> None:
    """Print a status line, optionally followed by a highlighted value.

    Example:
        log("Updating version for: ", "pkg-a") prints the label in blue
        and "pkg-a" in yellow.
    """
    line = format_message(label, level)
    if value is not None:
        line += format_message(value, "value")
    click.echo(line)


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to mark the start and end of the release in terminal output.
    """
    click.echo(format_message(f"=== {msg} ===", "success"))


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Only the CLI calls this; everything else raises ReleaseError.
    """
    click.echo(format_message(f"An error occurred: {msg}", "error"), err=True)
    sys.exit(1)


class CommandRunner(Protocol):
    """Runs an external command, raising CommandError on failure."""

    def run(self, command: str) -> None: ...


class SubprocessRunner:
    """Run commands with the terminal passed straight through.

    Unlike a captured call, output streams directly to the operator so
    they see build progress and can answer interactive prompts (e.g. an
    OTP request from the registry).
    """

    def run(self, command: str) -> None:
        log("Executing: ", command)
        try:
            result = subprocess.run(shlex.split(command), check=False)
        except OSError as exc:
            _report_failure(command)
            raise CommandError(command, None) from exc
        if result.returncode != 0:
            _report_failure(command)
            raise CommandError(command, result.returncode)


def _report_failure(command: str) -> None:
    click.echo(format_message(f"Error executing command: {command}", "error"), err=True)
