"""Tests for the valid-value taxonomy."""

from __future__ import annotations

import pytest

from omarchive.core.assembler import GraphAssembler
from omarchive.core.errors import DuplicateTaxonomyNodeError, InvalidTaxonomyKeyError
from omarchive.core.taxonomy import ValidValueTaxonomy


@pytest.fixture
def assembler(registry):
    return GraphAssembler(registry)


@pytest.fixture
def taxonomy(assembler):
    return ValidValueTaxonomy(assembler)


class TestNaming:
    """Tests for the static naming helpers."""

    @pytest.mark.parametrize(
        ("parts", "expected"),
        [
            ((None, None, None, None), "Egeria:ValidMetadataValue"),
            (("DataFile", None, None, None), "Egeria:ValidMetadataValue:DataFile"),
            (("DataFile", "fileType", None, "CSV"), "Egeria:ValidMetadataValue:DataFile:fileType:CSV"),
            ((None, "typeName", None, "Asset"), "Egeria:ValidMetadataValue:typeName:Asset"),
            (
                ("DataFile", "additionalProperties", "encoding", None),
                "Egeria:ValidMetadataValue:DataFile:additionalProperties:encoding",
            ),
        ],
    )
    def test_construct_qualified_name(self, parts, expected):
        """Null parts are skipped."""
        assert ValidValueTaxonomy.construct_qualified_name(*parts) == expected

    def test_construct_category(self):
        """Categories join the non-null parts without the prefix."""
        assert ValidValueTaxonomy.construct_category("DataFile", "fileType", None) == "DataFile:fileType"
        assert ValidValueTaxonomy.construct_category() == ""

    @pytest.mark.parametrize(
        ("key", "parent"),
        [
            (("T", "p", "m"), ("T", "p", None)),
            (("T", "p", None), ("T", None, None)),
            (("T", None, None), (None, None, None)),
            ((None, "p", None), (None, None, None)),
            ((None, None, None), None),
        ],
    )
    def test_parent_key(self, key, parent):
        """The most specific non-null component is stripped."""
        assert ValidValueTaxonomy.parent_key(key) == parent


class TestHierarchy:
    """Tests for get_or_create_category and add_value."""

    def test_creates_ancestors(self, taxonomy, assembler):
        """Asking for a deep set creates every ancestor once."""
        taxonomy.get_or_create_category("DataFile", "fileType", None)
        names = {n.qualified_name for n in assembler.nodes}
        assert names == {
            "Egeria:ValidMetadataValue",
            "Egeria:ValidMetadataValue:DataFile",
            "Egeria:ValidMetadataValue:DataFile:fileType",
        }
        assert len(taxonomy) == 3
        assert all(n.type_name == "ValidValueSet" for n in assembler.nodes)

    def test_ancestors_linked_by_membership(self, taxonomy, assembler):
        """Each set is a ValidValueMember of its parent."""
        leaf = taxonomy.get_or_create_category("DataFile", "fileType", None)
        parent = assembler.resolve("Egeria:ValidMetadataValue:DataFile")
        assert any(
            e.type_name == "ValidValueMember" and e.end1_guid == parent and e.end2_guid == leaf
            for e in assembler.edges
        )

    def test_cached(self, taxonomy, assembler):
        """A second request returns the cached set without new nodes."""
        first = taxonomy.get_or_create_category("DataFile", None, None)
        count = len(assembler)
        assert taxonomy.get_or_create_category("DataFile", None, None) == first
        assert len(assembler) == count
        assert ("DataFile", None, None) in taxonomy

    def test_root_display_name(self, taxonomy, assembler):
        """The root set is named after the prefix; others drop it."""
        taxonomy.get_or_create_category("DataFile", None, None)
        root = assembler.get_node(assembler.resolve("Egeria:ValidMetadataValue"))
        child = assembler.get_node(assembler.resolve("Egeria:ValidMetadataValue:DataFile"))
        assert root.display_name == "Egeria:ValidMetadataValue"
        assert child.display_name == "DataFile"
        assert child.properties["category"] == "DataFile"

    def test_map_name_without_property(self, taxonomy):
        """A map name needs a property name."""
        with pytest.raises(InvalidTaxonomyKeyError):
            taxonomy.get_or_create_category("DataFile", None, "encoding")

    def test_existing_node_outside_cache(self, taxonomy, assembler):
        """A set node added behind the taxonomy's back is reported."""
        assembler.add_node("ValidValueSet", "Egeria:ValidMetadataValue")
        with pytest.raises(DuplicateTaxonomyNodeError):
            taxonomy.get_or_create_category(None, None, None)

    def test_add_value(self, taxonomy, assembler):
        """Values are definitions under their set with taxonomy properties."""
        guid = taxonomy.add_value("DataFile", "fileType", None, "CSV Data File", description="CSV")
        node = assembler.get_node(guid)
        assert node.type_name == "ValidValueDefinition"
        assert node.qualified_name == "Egeria:ValidMetadataValue:DataFile:fileType:CSV Data File"
        assert node.display_name == "CSV Data File"
        assert node.properties["preferredValue"] == "CSV Data File"
        assert node.properties["category"] == "DataFile:fileType"
        assert node.properties["dataType"] == "string"
        set_guid = taxonomy.sets[("DataFile", "fileType", None)]
        assert any(e.end1_guid == set_guid and e.end2_guid == guid for e in assembler.edges)

    def test_add_value_with_declared_guid(self, taxonomy):
        """A declared GUID is honored for values."""
        assert taxonomy.add_value(None, "typeName", None, "Asset", guid="type-guid") == "type-guid"

    def test_sets_returns_copy(self, taxonomy):
        """sets is a snapshot, not the live cache."""
        taxonomy.get_or_create_category(None, None, None)
        snapshot = taxonomy.sets
        snapshot.clear()
        assert len(taxonomy) == 1
