"""Tests for ubix.solution.manifest module."""

import json
import os
import re
import stat
from datetime import datetime

import pytest

from ubix.solution.manifest import (
    Manifest,
    ManifestStore,
    SolutionFields,
    format_timestamp,
    root_relative_path,
)
from ubix.utils.errors import (
    ManifestParseError,
    SolutionIOError,
    SolutionNotFoundError,
    WrongTypeError,
)

TIMESTAMP_RE = re.compile(
    r"^[A-Z][a-z]{2} [A-Z][a-z]{2} \d{2} \d{4} \d{2}:\d{2}:\d{2} GMT[+-]\d{4} \(.+\)$"
)


class TestFormatTimestamp:
    """Tests for format_timestamp function."""

    def test_local_time_rendering(self):
        """Naive datetimes are taken as local time."""
        result = format_timestamp(datetime(2026, 10, 19, 10, 0, 0))

        assert result.startswith("Mon Oct 19 2026 10:00:00 GMT")
        assert TIMESTAMP_RE.match(result)

    def test_defaults_to_now(self):
        assert TIMESTAMP_RE.match(format_timestamp())


class TestRootRelativePath:
    """Tests for root_relative_path function."""

    def test_strips_root_anchor(self, tmp_path):
        result = root_relative_path(tmp_path)

        assert not result.startswith("/")
        assert "/" + result == tmp_path.resolve().as_posix()

    def test_relative_paths_resolved(self, workdir):
        (workdir / "sol").mkdir()
        assert root_relative_path(workdir.joinpath("sol").relative_to(workdir)) == (
            root_relative_path(workdir / "sol")
        )


class TestManifest:
    """Tests for Manifest dataclass."""

    def test_from_dict_maps_fields(self, manifest_data):
        manifest = Manifest.from_dict(manifest_data)

        assert manifest.name == "Churn Model"
        assert manifest.version == "1.2.3"
        assert manifest.file_name == "Churn Model"
        assert manifest.last_update == manifest_data["lastUpdate"]
        assert manifest.extra == {"owner": manifest_data["owner"]}

    def test_round_trip_is_identical(self, manifest_data):
        assert Manifest.from_dict(manifest_data).to_dict() == manifest_data

    def test_key_order_preserved(self):
        data = {"owner": "ops", "version": "1.0.0", "name": "X", "notes": [1, 2]}

        result = Manifest.from_dict(data).to_dict()

        assert list(result) == ["owner", "version", "name", "notes"]

    def test_new_known_fields_follow_loaded_keys(self):
        manifest = Manifest.from_dict({"name": "X", "owner": "ops"})
        manifest.version = "0.1.0"
        manifest.extra["ticket"] = "ABC-1"

        assert list(manifest.to_dict()) == ["name", "owner", "version", "ticket"]

    def test_unset_fields_omitted(self):
        assert Manifest(name="X").to_dict() == {"name": "X"}

    def test_null_values_in_document_are_kept(self):
        data = {"name": "X", "author": None}
        assert Manifest.from_dict(data).to_dict() == data

    def test_to_json_format(self):
        manifest = Manifest(name="Modèle", version="1.0.0")

        content = manifest.to_json()

        assert content == '{\n    "name": "Modèle",\n    "version": "1.0.0"\n}\n'

    def test_touch(self):
        manifest = Manifest(name="X")

        manifest.touch(datetime(2026, 10, 19, 10, 0, 0))

        assert manifest.last_update.startswith("Mon Oct 19 2026 10:00:00")


class TestManifestStoreLocate:
    """Tests for ManifestStore.locate."""

    def test_default_is_manifest_in_cwd(self, manifest_file):
        assert ManifestStore().locate().resolve() == manifest_file.resolve()

    def test_explicit_path(self, solution_dir):
        target = solution_dir / "ubix.json"
        assert ManifestStore().locate(str(target)) == target

    def test_missing_file(self):
        with pytest.raises(SolutionNotFoundError, match="Cannot find solution file at ubix.json"):
            ManifestStore().locate()

    def test_directory_is_wrong_type(self, workdir):
        (workdir / "ubix.json").mkdir()

        with pytest.raises(WrongTypeError, match="is wrong type"):
            ManifestStore().locate()

    def test_custom_file_name(self, workdir):
        (workdir / "solution.json").write_text("{}")
        assert ManifestStore("solution.json").locate().name == "solution.json"


class TestManifestStoreLoad:
    """Tests for ManifestStore.load."""

    def test_loads_manifest(self, manifest_file, manifest_data):
        assert ManifestStore().load(manifest_file).to_dict() == manifest_data

    @pytest.mark.parametrize("content", [b"{not json", b"[1, 2]", b'"text"', b"\xff\xfe{}"])
    def test_invalid_content(self, workdir, content):
        path = workdir / "ubix.json"
        path.write_bytes(content)

        with pytest.raises(ManifestParseError, match="Invalid solution manifest file"):
            ManifestStore().load(path)

    def test_unreadable_path(self, workdir):
        with pytest.raises(SolutionIOError, match="Error reading solution file"):
            ManifestStore().load(workdir)


class TestManifestStoreSave:
    """Tests for ManifestStore.save."""

    def test_writes_json(self, workdir):
        path = workdir / "ubix.json"

        ManifestStore().save(path, Manifest(name="X", version="1.0.0"))

        assert json.loads(path.read_text()) == {"name": "X", "version": "1.0.0"}
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_rewrite_keeps_permissions(self, manifest_file):
        os.chmod(manifest_file, 0o600)
        store = ManifestStore()

        store.save(manifest_file, store.load(manifest_file))

        assert stat.S_IMODE(manifest_file.stat().st_mode) == 0o600

    def test_no_temporary_files_left(self, manifest_file, workdir):
        store = ManifestStore()
        store.save(manifest_file, store.load(manifest_file))

        assert sorted(p.name for p in workdir.iterdir()) == ["ubix.json"]

    def test_missing_directory(self, workdir):
        with pytest.raises(SolutionIOError, match="Failed to write solution file"):
            ManifestStore().save(workdir / "missing" / "ubix.json", Manifest(name="X"))


class TestManifestStoreCreate:
    """Tests for ManifestStore.create."""

    def test_creates_manifest(self, workdir):
        target = workdir / "Churn Model"
        target.mkdir()

        manifest = ManifestStore().create(
            target,
            SolutionFields(name="Churn Model", author="Data Team"),
            moment=datetime(2026, 10, 19, 10, 0, 0),
        )

        data = json.loads((target / "ubix.json").read_text())
        assert list(data) == ["name", "author", "version", "api", "path", "fileName", "lastUpdate"]
        assert data["version"] == "0.0.0"
        assert data["api"] == "latest"
        assert data["fileName"] == "Churn Model"
        assert data["path"] == root_relative_path(target)
        assert data["lastUpdate"].startswith("Mon Oct 19 2026 10:00:00")
        assert manifest.to_dict() == data
