"""package.json reading and writing utilities.

Manifests are rewritten the way npm and pnpm write them: 2-space indent,
original key order, non-ASCII left as-is and a single trailing newline.
Only the fields we touch change in the diff.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import ManifestError

MANIFEST_NAME = "package.json"


def load_manifest(path: Path) -> dict[str, Any]:
    """Load and parse a package.json file.

    Raises:
        ManifestError: If the file is unreadable or not a JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ManifestError(f"Cannot read {path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{path} does not contain a JSON object")
    return data


def dump_manifest(data: dict[str, Any]) -> str:
    """Serialize a manifest to text with 2-space indent and a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def save_manifest(path: Path, data: dict[str, Any]) -> None:
    """Overwrite a package.json in place."""
    try:
        path.write_text(dump_manifest(data), encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Cannot write {path}: {exc}") from exc


def is_private(data: dict[str, Any]) -> bool:
    """Return True if the manifest opts out of publishing.

    Follows npm's truthiness, so an empty list or object still counts as
    private.
    """
    value = data.get("private", False)
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def get_manifest_version(data: dict[str, Any], path: Path) -> str:
    """Extract the "version" field.

    Raises:
        ManifestError: If the field is missing or not a string.
    """
    version = data.get("version")
    if not isinstance(version, str):
        raise ManifestError(f"{path} has no string \"version\" field")
    return version
