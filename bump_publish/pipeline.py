"""Release pipeline: discover → bump → build → publish.

This module orchestrates the bump-publish release process:
1. Discover publishable packages under the packages directory
2. Bump the patch version in each package.json
3. Build the whole workspace once
4. Publish the whole workspace once

Any failure raises a ReleaseError and stops the pipeline where it is.
Version bumps already written to disk are not reverted; the operator
inspects the tree and re-runs.
"""

from __future__ import annotations

import os
from pathlib import Path

from .config import ReleaseConfig, load_config
from .errors import WorkspaceError
from .manifest import (
    MANIFEST_NAME,
    get_manifest_version,
    is_private,
    load_manifest,
    save_manifest,
)
from .models import PackageInfo, VersionBump
from .shell import CommandRunner, SubprocessRunner, log, step
from .versions import bump_patch


def discover_packages(root: Path, packages_dir: str = "packages") -> dict[str, PackageInfo]:
    """Find every publishable package under root/packages_dir.

    A subdirectory is publishable if it holds a package.json whose
    "private" field is absent or false. Subdirectories without a manifest
    are skipped. Packages are returned sorted by directory name.

    Raises:
        WorkspaceError: If the packages directory cannot be listed.
        ManifestError: If any manifest is unreadable or not valid JSON.
    """
    base = root / packages_dir
    try:
        entries = sorted(p for p in base.iterdir() if p.is_dir())
    except OSError as exc:
        raise WorkspaceError(f"Cannot list packages directory {base}: {exc}") from exc

    packages: dict[str, PackageInfo] = {}
    for d in entries:
        manifest_path = d / MANIFEST_NAME
        if not manifest_path.exists():
            continue
        data = load_manifest(manifest_path)
        if is_private(data):
            continue
        packages[d.name] = PackageInfo(
            name=d.name,
            path=os.path.relpath(d, root),
            version=get_manifest_version(data, manifest_path),
        )

    log("Packages to publish: ", ", ".join(packages))
    return packages


def bump_version(manifest_path: Path) -> VersionBump:
    """Increment the patch version of a package.json in place."""
    data = load_manifest(manifest_path)
    old = get_manifest_version(data, manifest_path)
    new = bump_patch(old)
    data["version"] = new
    save_manifest(manifest_path, data)

    log("Version updated: ", f"{old} -> {new}", level="success")
    return VersionBump(old=old, new=new)


def bump_versions(root: Path, packages: dict[str, PackageInfo]) -> dict[str, VersionBump]:
    """Bump every discovered package, one at a time, in discovery order."""
    bumped: dict[str, VersionBump] = {}
    for name, info in packages.items():
        log("Updating version for: ", name)
        bumped[name] = bump_version(root / info.path / MANIFEST_NAME)
    return bumped


def build_workspace(runner: CommandRunner, config: ReleaseConfig) -> None:
    """Run the workspace-wide build command."""
    log("Building packages...")
    runner.run(config.build_command)


def publish_workspace(runner: CommandRunner, config: ReleaseConfig) -> None:
    """Run the workspace-wide publish command."""
    log("Publishing packages...")
    runner.run(config.publish_command)


def run_release(
    root: Path | None = None,
    *,
    runner: CommandRunner | None = None,
    config: ReleaseConfig | None = None,
) -> dict[str, VersionBump]:
    """Execute the full release pipeline.

    Build and publish run even when no package is publishable, since both
    commands operate on the whole workspace.

    Args:
        root: Workspace root. Defaults to the current directory.
        runner: Command runner for build/publish. Defaults to a
            SubprocessRunner that streams to the terminal.
        config: Release settings. Defaults to those loaded from
            root/pyproject.toml.

    Returns:
        Map of package name → VersionBump for every bumped package.

    Raises:
        ReleaseError: On the first failure in any stage.
    """
    root = root or Path.cwd()
    if runner is None:
        runner = SubprocessRunner()
    if config is None:
        config = load_config(root)

    step("Starting version bump and publish process")

    packages = discover_packages(root, config.packages_dir)
    bumped = bump_versions(root, packages)
    build_workspace(runner, config)
    publish_workspace(runner, config)

    step("Process completed successfully")
    return bumped
