"""Tests for bump_publish.manifest."""

from __future__ import annotations

from pathlib import Path

import pytest

from bump_publish.errors import ManifestError
from bump_publish.manifest import (
    dump_manifest,
    get_manifest_version,
    is_private,
    load_manifest,
    save_manifest,
)


class TestLoadSaveManifest:
    def test_load(self, tmp_manifest: Path) -> None:
        data = load_manifest(tmp_manifest)
        assert data["name"] == "@scope/pkg-a"

    def test_save_roundtrip_is_byte_identical(self, tmp_manifest: Path) -> None:
        before = tmp_manifest.read_bytes()
        save_manifest(tmp_manifest, load_manifest(tmp_manifest))
        assert tmp_manifest.read_bytes() == before

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="Cannot read"):
            load_manifest(tmp_path / "package.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text('{"name": "a",')
        with pytest.raises(ManifestError, match="Invalid JSON"):
            load_manifest(path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_bytes(b'{"version": "1.0.0", "description": "\xff"}')
        with pytest.raises(ManifestError, match="Invalid JSON"):
            load_manifest(path)

    def test_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("[]")
        with pytest.raises(ManifestError, match="JSON object"):
            load_manifest(path)


class TestDumpManifest:
    def test_two_space_indent_and_trailing_newline(self) -> None:
        text = dump_manifest({"name": "a", "version": "1.0.0"})
        assert text == '{\n  "name": "a",\n  "version": "1.0.0"\n}\n'

    def test_preserves_key_order(self) -> None:
        text = dump_manifest({"version": "1.0.0", "name": "a"})
        assert text.index('"version"') < text.index('"name"')


class TestIsPrivate:
    def test_true(self) -> None:
        assert is_private({"private": True}) is True

    def test_false(self) -> None:
        assert is_private({"private": False}) is False

    def test_missing(self) -> None:
        assert is_private({"name": "a"}) is False

    def test_empty_containers_count_as_private(self) -> None:
        assert is_private({"private": []}) is True
        assert is_private({"private": {}}) is True

    def test_falsy_scalars_are_public(self) -> None:
        assert is_private({"private": 0}) is False
        assert is_private({"private": ""}) is False
        assert is_private({"private": None}) is False


class TestGetManifestVersion:
    def test_returns_version(self) -> None:
        assert get_manifest_version({"version": "2.0.0"}, Path("package.json")) == "2.0.0"

    def test_missing_version(self) -> None:
        with pytest.raises(ManifestError, match="version"):
            get_manifest_version({"name": "a"}, Path("package.json"))
