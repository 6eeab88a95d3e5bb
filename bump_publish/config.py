"""Release configuration.

Defaults reproduce a plain pnpm workspace release. A workspace can override
them with a [tool.bump-publish] table in its root pyproject.toml:

    [tool.bump-publish]
    packages-dir = "libs"
    build-command = "pnpm -r build"
    publish-command = "pnpm publish -r --access public --no-git-checks"
"""

from __future__ import annotations

from pathlib import Path

import tomlkit
from pydantic import BaseModel, ConfigDict, ValidationError
from tomlkit.exceptions import ParseError

from .errors import ConfigError

TOOL_TABLE = "bump-publish"


class ReleaseConfig(BaseModel):
    """Settings for a single release run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    packages_dir: str = "packages"
    build_command: str = "pnpm run build"
    publish_command: str = "pnpm publish -r --access public --no-git-checks"


def load_config(root: Path) -> ReleaseConfig:
    """Read [tool.bump-publish] from root/pyproject.toml, if present.

    Keys are written in kebab-case in TOML and mapped to the snake_case
    fields of ReleaseConfig.

    Raises:
        ConfigError: If pyproject.toml is unparsable or the table holds
            unknown keys or values of the wrong type.
    """
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return ReleaseConfig()

    try:
        doc = tomlkit.parse(pyproject.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ParseError) as exc:
        raise ConfigError(f"Cannot read {pyproject}: {exc}") from exc

    table = doc.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        return ReleaseConfig()
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_TABLE}] in {pyproject} must be a table")

    raw = {str(key).replace("-", "_"): value for key, value in table.unwrap().items()}
    try:
        return ReleaseConfig(**raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid [tool.{TOOL_TABLE}] in {pyproject}:\n{exc}") from exc
