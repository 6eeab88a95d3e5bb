"""Data models for bump-publish.

These Pydantic models represent the records passed between the stages of
the release pipeline.
"""

from __future__ import annotations

from pydantic import BaseModel


class PackageInfo(BaseModel):
    """A package directory found under the packages root.

    Attributes:
        name: Directory name of the package (not the npm package name).
        path: Path to the package directory, relative to the workspace root.
        version: Version string read from package.json at discovery time.
        private: Value of the manifest's "private" field.
    """

    name: str
    path: str
    version: str
    private: bool = False


class VersionBump(BaseModel):
    """Records a version change for a package.

    Attributes:
        old: The version before bumping.
        new: The version after bumping.
    """

    old: str
    new: str
