"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from bump_publish.errors import CommandError


class FakeRunner:
    """Records commands instead of running them.

    Commands listed in fail_on raise CommandError with exit code 1.
    """

    def __init__(self, fail_on: tuple[str, ...] = ()) -> None:
        self.fail_on = fail_on
        self.commands: list[str] = []

    def run(self, command: str) -> None:
        self.commands.append(command)
        if command in self.fail_on:
            raise CommandError(command, 1)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    """Factory for runners that fail on chosen commands."""
    return FakeRunner


@pytest.fixture
def tmp_manifest(tmp_path: Path) -> Path:
    """Create a package.json with a mix of fields around the version."""
    content = """\
{
  "name": "@scope/pkg-a",
  "version": "1.2.3",
  "description": "Ünïcode stays as-is",
  "main": "dist/index.js",
  "files": [
    "dist"
  ],
  "scripts": {
    "build": "tsc -p ."
  },
  "dependencies": {},
  "publishConfig": {
    "access": "public"
  }
}
"""
    path = tmp_path / "package.json"
    path.write_text(content, encoding="utf-8")
    return path

