"""End-to-end tests for ArchiveWriter: build, persistence and failure handling."""

from __future__ import annotations

import dataclasses
import json
from collections import Counter

import pytest

from omarchive.core.errors import DanglingReferenceError, GUIDConflictError, PersistenceError
from omarchive.core.settings import BuilderSettings
from omarchive.definitions import builtin_catalogue
from omarchive.processors import DEFAULT_STAGES, ProcessorPlan
from omarchive.writer import DEFAULT_ARCHIVE_FILE_NAME, ArchiveWriter

SERVER_TEMPLATE_QN = "PostgreSQL Server:~{serverName}~"


def _assert_well_formed(archive):
    guids = {node.guid for node in archive.nodes}
    assert len(guids) == len(archive.nodes)
    for edge in archive.edges:
        assert edge.end1_guid in guids, f"{edge.type_name} has dangling end1"
        assert edge.end2_guid in guids, f"{edge.type_name} has dangling end2"

    names = Counter(node.qualified_name for node in archive.nodes)
    assert [name for name, count in names.items() if count > 1] == []


class TestBuild:
    """Tests for ArchiveWriter.build."""

    def test_small_catalogue(self, small_catalogue, tmp_path):
        writer = ArchiveWriter(small_catalogue, tmp_path)
        archive = writer.build()

        assert writer.archive is archive
        assert archive.header.name == "TestPack"
        assert archive.node_by_guid("0c0c7e36-1a5b-4f0e-8a2a-000000000008").type_name == "GovernanceActionType"
        assert len(archive.edges_of_type("NextGovernanceActionProcessStep")) == 1
        _assert_well_formed(archive)

    def test_builtin_catalogue(self, tmp_path):
        """The shipped pack compiles into a consistent graph."""
        archive = ArchiveWriter(builtin_catalogue(), tmp_path).build()

        assert archive.header.guid == "09450b83-20ff-4a8b-a8fb-f9b527bbcba6"
        assert archive.header.depends_on == ("OpenMetadataTypes",)
        assert archive.nodes_of_type("ConnectorType")
        assert archive.nodes_of_type("GovernanceActionProcess")
        _assert_well_formed(archive)

    def test_build_is_deterministic(self, small_catalogue, tmp_path):
        """Two builds against the same GUID map produce the same content."""
        first = ArchiveWriter(small_catalogue, tmp_path).build()
        second = ArchiveWriter(small_catalogue, tmp_path).build()
        assert first.fingerprint() == second.fingerprint()

    def test_persisted_guids_are_reused(self, small_catalogue, tmp_path):
        """A GUID stored in the map wins over the derived one."""
        guid_map = tmp_path / "TestPackGUIDMap.json"
        guid_map.write_text(json.dumps({"Test:IntegrationGroup": "group-guid-from-map"}))

        archive = ArchiveWriter(small_catalogue, tmp_path).build()
        assert archive.node_by_qualified_name("Test:IntegrationGroup").guid == "group-guid-from-map"

    def test_guid_map_saved(self, small_catalogue, tmp_path):
        archive = ArchiveWriter(small_catalogue, tmp_path, guid_map_dir=tmp_path / "guids").build()

        guid_map = json.loads((tmp_path / "guids" / "TestPackGUIDMap.json").read_text())
        used = json.loads((tmp_path / "guids" / "TestPackUsedGUIDs.json").read_text())
        assert guid_map[SERVER_TEMPLATE_QN] == "0c0c7e36-1a5b-4f0e-8a2a-000000000003"
        assert set(used) == {n.guid for n in archive.nodes} | {e.guid for e in archive.edges}


class TestBuildFailures:
    """A failed build leaves neither an archive nor a GUID map behind."""

    def test_guid_conflict_names_processor(self, small_catalogue, tmp_path):
        guid_map = tmp_path / "TestPackGUIDMap.json"
        guid_map.write_text(json.dumps({SERVER_TEMPLATE_QN: "stored-guid"}))
        writer = ArchiveWriter(small_catalogue, tmp_path)

        with pytest.raises(GUIDConflictError) as exc:
            writer.write()

        assert exc.value.context.processor == "templates"
        assert exc.value.context.qualified_name == SERVER_TEMPLATE_QN
        assert not writer.archive_path.exists()
        assert not (tmp_path / "TestPackUsedGUIDs.json").exists()
        assert json.loads(guid_map.read_text()) == {SERVER_TEMPLATE_QN: "stored-guid"}
        assert writer.archive is None

    def test_two_templates_one_name(self, small_catalogue, tmp_path):
        """Two templates with one qualified name and different GUIDs conflict."""
        (template,) = small_catalogue.templates
        twin = dataclasses.replace(
            template, template_name="Second PostgreSQL Server Template", guid="0c0c7e36-1a5b-4f0e-8a2a-0000000000ff"
        )
        catalogue = dataclasses.replace(small_catalogue, templates=(template, twin))
        writer = ArchiveWriter(catalogue, tmp_path)

        with pytest.raises(GUIDConflictError) as exc:
            writer.write()

        assert exc.value.context.processor == "templates"
        assert exc.value.context.qualified_name == SERVER_TEMPLATE_QN
        assert list(tmp_path.iterdir()) == []

    def test_out_of_order_plan(self, small_catalogue, tmp_path):
        """Running request types before integration connectors leaves a target unresolved."""
        stages = [s for s in DEFAULT_STAGES if s.name != "integration_connectors"]
        connectors = next(s for s in DEFAULT_STAGES if s.name == "integration_connectors")
        stages.insert(stages.index(next(s for s in stages if s.name == "governance_processes")), connectors)
        writer = ArchiveWriter(small_catalogue, tmp_path, plan=ProcessorPlan(stages, validate=False))

        with pytest.raises(DanglingReferenceError) as exc:
            writer.write()

        assert exc.value.context.processor == "request_types"
        assert list(tmp_path.iterdir()) == []

    def test_archive_move_fails(self, small_catalogue, tmp_path, monkeypatch):
        """If the archive cannot be moved into place the GUID map is not saved."""

        def refuse(src, dst):
            raise OSError("read-only file system")

        monkeypatch.setattr("omarchive.writer.os.replace", refuse)
        writer = ArchiveWriter(small_catalogue, tmp_path)

        with pytest.raises(PersistenceError) as exc:
            writer.write()

        assert exc.value.context.path == str(writer.archive_path)
        assert not writer.archive_path.exists()
        assert not (tmp_path / "TestPackGUIDMap.json").exists()
        assert not (tmp_path / "TestPackUsedGUIDs.json").exists()
        assert list(tmp_path.glob("*.tmp")) == []


class TestWrite:
    """Tests for ArchiveWriter.write and settings."""

    def test_write_builtin(self, tmp_path):
        writer = ArchiveWriter(builtin_catalogue(), tmp_path / "out")
        path = writer.write()

        assert path == tmp_path / "out" / DEFAULT_ARCHIVE_FILE_NAME
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["header"]["archiveGUID"] == "09450b83-20ff-4a8b-a8fb-f9b527bbcba6"
        assert data["header"]["archiveName"] == "CoreContentPack"
        assert data["instanceStore"]["entities"]
        assert data["instanceStore"]["relationships"]
        assert (tmp_path / "out" / "CoreContentPackGUIDMap.json").exists()
        assert [p.name for p in (tmp_path / "out").glob("*.tmp")] == []

    def test_written_file_matches_build(self, small_catalogue, tmp_path):
        from omarchive.core.model import Archive

        writer = ArchiveWriter(small_catalogue, tmp_path, archive_file_name="test.omarchive")
        path = writer.write()
        loaded = Archive.from_dict(json.loads(path.read_text(encoding="utf-8")))
        assert loaded.fingerprint() == writer.archive.fingerprint()

    def test_header(self, small_catalogue, tmp_path):
        header = ArchiveWriter(small_catalogue, tmp_path).header()
        assert header.guid == small_catalogue.archive.guid
        assert header.originator_name == "Test Suite"
        assert header.originator_license == "Apache-2.0"

    def test_from_settings(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = BuilderSettings(
            output_dir=tmp_path / "archives",
            archive_file_name="pack.omarchive",
            guid_map_dir=tmp_path / "guids",
        )
        writer = ArchiveWriter.from_settings(settings)

        assert writer.catalogue.archive.name == "CoreContentPack"
        assert writer.archive_path == tmp_path / "archives" / "pack.omarchive"
        assert writer.guid_map_dir == tmp_path / "guids"
