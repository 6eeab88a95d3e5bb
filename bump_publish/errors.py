"""Exception hierarchy for bump-publish.

Every failure the release pipeline can hit is raised as a ReleaseError
subclass. The CLI catches ReleaseError in one place, reports it and exits
non-zero; nothing below the CLI calls sys.exit().
"""

from __future__ import annotations


class ReleaseError(Exception):
    """Base class for all errors that abort a release."""


class ConfigError(ReleaseError):
    """The [tool.bump-publish] table is malformed."""


class WorkspaceError(ReleaseError):
    """The packages directory is missing or cannot be listed."""


class ManifestError(ReleaseError):
    """A package.json could not be read, parsed or written."""


class VersionError(ReleaseError):
    """A manifest version is not a major.minor.patch string."""


class CommandError(ReleaseError):
    """An external command failed to launch or exited non-zero.

    Attributes:
        command: The command string as configured.
        returncode: Exit status, or None if the process never started.
    """

    def __init__(self, command: str, returncode: int | None) -> None:
        self.command = command
        self.returncode = returncode
        if returncode is None:
            msg = f"Command could not be started: {command}"
        else:
            msg = f"Command failed with exit code {returncode}: {command}"
        super().__init__(msg)
