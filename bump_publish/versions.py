"""Version parsing and bumping utilities."""

from __future__ import annotations

import re

import semver

from .errors import VersionError

_CORE_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)(.*)$", re.DOTALL)


def parse_version(version_str: str) -> semver.Version:
    """Parse a major.minor.patch string into a semver.Version.

    Each numeric component is read as a plain integer, so leading zeros
    are accepted ("1.02.3" parses as 1.2.3).

    Raises:
        VersionError: If the string is not a valid three-part version.
    """
    text = str(version_str)
    match = _CORE_RE.match(text)
    if match:
        major, minor, patch, rest = match.groups()
        text = f"{int(major)}.{int(minor)}.{int(patch)}{rest}"
    try:
        return semver.Version.parse(text)
    except (TypeError, ValueError) as exc:
        raise VersionError(f"Invalid version {version_str!r}: {exc}") from exc


def bump_patch(version_str: str) -> str:
    """Increment the patch version and return as a string.

    Prerelease and build metadata are dropped.

    Examples:
        "1.2.3" → "1.2.4"
        "1.2.9" → "1.2.10"
        "1.02.3" → "1.2.4"
        "1.2.3-rc.1" → "1.2.4"
    """
    return str(parse_version(version_str).bump_patch())
