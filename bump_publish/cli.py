"""CLI entry point for bump-publish."""

from __future__ import annotations

import click

from bump_publish.errors import ReleaseError
from bump_publish.pipeline import run_release
from bump_publish.shell import fatal


@click.command()
@click.version_option(package_name="bump-publish")
def cli() -> None:
    """Bump the patch version of every public package, then build and publish.

    Run from the workspace root. Takes no arguments.
    """
    try:
        run_release()
    except ReleaseError as exc:
        fatal(str(exc))
