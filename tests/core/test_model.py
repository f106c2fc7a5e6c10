"""Tests for the archive data model and its JSON layout."""

from __future__ import annotations

from datetime import UTC, datetime

from omarchive.core.model import Archive, ArchiveHeader, Classification, Edge, Node


def _header(**overrides) -> ArchiveHeader:
    fields = {
        "guid": "09450b83-20ff-4a8b-a8fb-f9b527bbcba6",
        "name": "CoreContentPack",
        "description": "Test pack",
        "originator_name": "Test Suite",
        "creation_date": datetime(2024, 1, 1, tzinfo=UTC),
    }
    fields.update(overrides)
    return ArchiveHeader(**fields)


def _archive(header: ArchiveHeader | None = None) -> Archive:
    folder = Node(
        "g-1",
        "FileFolder:template",
        "FileFolder",
        {"qualifiedName": "FileFolder:template", "displayName": "Folder"},
        [Classification("Template", {"name": "Folder Template"})],
    )
    file = Node("g-2", "DataFile:template", "DataFile", {"qualifiedName": "DataFile:template"})
    edge = Edge("e-1", "NestedFile", "g-1", "g-2", {"x": 1})
    return Archive(header=header or _header(), nodes=(folder, file), edges=(edge,))


class TestNode:
    """Tests for Node."""

    def test_to_dict(self):
        """Nodes serialize with GUID, type, properties and classifications."""
        d = _archive().nodes[0].to_dict()
        assert d["guid"] == "g-1"
        assert d["typeName"] == "FileFolder"
        assert d["properties"]["qualifiedName"] == "FileFolder:template"
        assert d["classifications"] == [{"name": "Template", "properties": {"name": "Folder Template"}}]

    def test_from_dict_restores_qualified_name(self):
        """The qualified name is read back from the properties."""
        node = Node.from_dict(_archive().nodes[0].to_dict())
        assert node.qualified_name == "FileFolder:template"
        assert node.display_name == "Folder"

    def test_classification_lookup(self):
        """classification returns None for an absent name."""
        node = _archive().nodes[0]
        assert node.classification("Template").properties["name"] == "Folder Template"
        assert node.classification("Confidentiality") is None


class TestEdge:
    """Tests for Edge."""

    def test_to_dict(self):
        """Edges serialize both end GUIDs."""
        assert _archive().edges[0].to_dict() == {
            "guid": "e-1",
            "typeName": "NestedFile",
            "end1Guid": "g-1",
            "end2Guid": "g-2",
            "properties": {"x": 1},
        }

    def test_same_content_ignores_guid(self):
        """same_content compares everything but the GUID."""
        a = Edge("e-1", "T", "a", "b", {"x": 1})
        assert a.same_content(Edge("e-2", "T", "a", "b", {"x": 1}))
        assert not a.same_content(Edge("e-1", "T", "a", "b", {"x": 2}))


class TestArchiveHeader:
    """Tests for ArchiveHeader."""

    def test_version_number_defaults_to_creation_millis(self):
        """Without an explicit version number the creation time is used."""
        header = _header()
        assert header.effective_version_number == int(datetime(2024, 1, 1, tzinfo=UTC).timestamp() * 1000)

    def test_explicit_version_number(self):
        """An explicit version number wins."""
        assert _header(version_number=7).to_dict()["versionNumber"] == 7

    def test_to_dict_keys(self):
        """The header uses the archive field names."""
        d = _header(depends_on=("OpenMetadataTypes",)).to_dict()
        assert d["archiveGUID"] == "09450b83-20ff-4a8b-a8fb-f9b527bbcba6"
        assert d["archiveName"] == "CoreContentPack"
        assert d["archiveType"] == "CONTENT_PACK"
        assert d["dependsOnArchives"] == ["OpenMetadataTypes"]
        assert d["creationDate"] == "2024-01-01T00:00:00+00:00"


class TestArchive:
    """Tests for Archive serialization and fingerprinting."""

    def test_layout(self):
        """The artifact has a header and an instance store."""
        d = _archive().to_dict()
        assert set(d) == {"header", "instanceStore"}
        assert len(d["instanceStore"]["entities"]) == 2
        assert len(d["instanceStore"]["relationships"]) == 1

    def test_from_dict_round_trip(self):
        """from_dict restores an equal archive."""
        archive = _archive()
        assert Archive.from_dict(archive.to_dict()).to_dict() == archive.to_dict()

    def test_queries(self):
        """Lookup helpers find nodes and edges."""
        archive = _archive()
        assert archive.node_by_guid("g-2").type_name == "DataFile"
        assert archive.node_by_qualified_name("FileFolder:template").guid == "g-1"
        assert archive.node_by_qualified_name("missing") is None
        assert [n.guid for n in archive.nodes_of_type("DataFile")] == ["g-2"]
        assert len(archive.edges_of_type("NestedFile")) == 1

    def test_fingerprint_ignores_creation_time(self):
        """Archives that differ only in creation date share a fingerprint."""
        later = _header(creation_date=datetime(2025, 6, 1, tzinfo=UTC))
        assert _archive().fingerprint() == _archive(later).fingerprint()

    def test_fingerprint_changes_with_content(self):
        """Any content change alters the fingerprint."""
        assert _archive().fingerprint() != _archive(_header(version_name="2.0")).fingerprint()
        assert len(_archive().fingerprint()) == 64
