"""Tests for locating and loading package.json."""

import json

import pytest

from versioninfo.manifest import find_manifest, load_manifest
from versioninfo.exit_codes import ManifestError, CONFIG_ERROR


def write_manifest(folder, data):
    path = folder / "package.json"
    path.write_text(json.dumps(data))
    return path


class TestFindManifest:
    """Tests for the upward package.json search."""

    def test_in_start_directory(self, tmp_path):
        path = write_manifest(tmp_path, {"name": "widget"})
        assert find_manifest(tmp_path) == path.resolve()

    def test_in_parent_directory(self, tmp_path):
        path = write_manifest(tmp_path, {"name": "widget"})
        nested = tmp_path / "lib" / "versions"
        nested.mkdir(parents=True)
        assert find_manifest(nested) == path.resolve()

    def test_nearest_manifest_wins(self, tmp_path):
        write_manifest(tmp_path, {"name": "outer"})
        inner = tmp_path / "packages" / "inner"
        inner.mkdir(parents=True)
        path = write_manifest(inner, {"name": "inner"})
        assert find_manifest(inner / ".") == path.resolve()

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        path = write_manifest(tmp_path, {"name": "widget"})
        monkeypatch.chdir(tmp_path)
        assert find_manifest() == path.resolve()

    def test_custom_filename(self, tmp_path):
        path = tmp_path / "bower.json"
        path.write_text("{}")
        assert find_manifest(tmp_path, "bower.json") == path.resolve()

    def test_not_found_stops_at_root(self, tmp_path):
        found = find_manifest(tmp_path, "no-such-manifest.json")
        assert found.parent == found.parent.parent
        assert found.name == "no-such-manifest.json"


class TestLoadManifest:
    """Tests for parsing the manifest."""

    def test_load(self, tmp_path):
        write_manifest(tmp_path, {
            "name": "widget",
            "branchVersion": "1.2.x",
            "repository": {"url": "https://github.com/acme/widget.git"},
        })
        manifest = load_manifest(tmp_path)
        assert manifest.name == "widget"
        assert manifest.branch_version == "1.2.x"
        assert manifest.path == (tmp_path / "package.json").resolve()

    def test_missing_manifest(self, tmp_path):
        with pytest.raises(ManifestError) as excinfo:
            load_manifest(tmp_path, "no-such-manifest.json")
        assert excinfo.value.exit_code == CONFIG_ERROR
        assert "no-such-manifest.json" in str(excinfo.value)

    def test_invalid_json(self, tmp_path):
        (tmp_path / "package.json").write_text("{not json")
        with pytest.raises(ManifestError, match="Invalid JSON"):
            load_manifest(tmp_path)

    def test_not_an_object(self, tmp_path):
        (tmp_path / "package.json").write_text("[1, 2, 3]")
        with pytest.raises(ManifestError, match="JSON object"):
            load_manifest(tmp_path)
