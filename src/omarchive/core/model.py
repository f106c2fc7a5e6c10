"""
Graph data model: nodes, edges, classifications and the archive itself.

An archive is a directed multigraph of typed instances.  Nodes (entities)
carry a qualified name and a property map; edges (relationships) join two
node GUIDs; classifications are typed property bags attached to a node.
The model holds no behaviour beyond serialization: identity is decided by
the identifier registry and integrity by the graph assembler.

Architecture:
    ::

        Archive
        ├── header: ArchiveHeader       (guid, name, originator, version …)
        ├── nodes:  tuple[Node, ...]    (insertion order)
        │     └── classifications: list[Classification]
        └── edges:  tuple[Edge, ...]    (insertion order)

        JSON artifact:
        {
          "header": {...},
          "instanceStore": {
            "entities":      [{"guid", "typeName", "properties", "classifications"}],
            "relationships": [{"guid", "typeName", "end1Guid", "end2Guid", "properties"}]
          }
        }

Examples:
    >>> node = Node("g-1", "FileFolder:template", "FileFolder", {"qualifiedName": "FileFolder:template"})
    >>> node.to_dict()["typeName"]
    'FileFolder'
    >>> Classification("Template", {"name": "x"}).to_dict()
    {'name': 'Template', 'properties': {'name': 'x'}}

Tags:
    data-model, graph, archive, serialization, omarchive
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from omarchive.core.hashing import canonical_json, compute_hash

ARCHIVE_TYPE_CONTENT_PACK = "CONTENT_PACK"


def _utcnow() -> datetime:
    return datetime.now(UTC)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Classification:
    """A named, typed property bag attached to a node."""

    name: str
    properties: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/storage."""
        return {"name": self.name, "properties": dict(self.properties)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Classification:
        """Deserialize from dict."""
        return cls(name=data["name"], properties=dict(data.get("properties", {})))


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class Node:
    """A typed entity in the archive graph.

    ``properties`` always contains ``qualifiedName``; ``displayName`` and
    ``description`` are present when supplied.  Classifications are appended
    by the assembler; nothing else about a node changes once added.
    """

    guid: str
    qualified_name: str
    type_name: str
    properties: dict[str, Any] = field(default_factory=dict)
    classifications: list[Classification] = field(default_factory=list)

    @property
    def display_name(self) -> str | None:
        return self.properties.get("displayName")

    def classification(self, name: str) -> Classification | None:
        """Return the first classification called ``name``, if any."""
        for c in self.classifications:
            if c.name == name:
                return c
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/storage."""
        return {
            "guid": self.guid,
            "typeName": self.type_name,
            "properties": dict(self.properties),
            "classifications": [c.to_dict() for c in self.classifications],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Node:
        """Deserialize from dict."""
        properties = dict(data.get("properties", {}))
        return cls(
            guid=data["guid"],
            qualified_name=properties.get("qualifiedName", ""),
            type_name=data["typeName"],
            properties=properties,
            classifications=[Classification.from_dict(c) for c in data.get("classifications", [])],
        )


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Edge:
    """A typed relationship from ``end1_guid`` to ``end2_guid``."""

    guid: str
    type_name: str
    end1_guid: str
    end2_guid: str
    properties: dict[str, Any] = field(default_factory=dict)

    def same_content(self, other: Edge) -> bool:
        """True when ``other`` differs from this edge at most by GUID."""
        return (
            self.type_name == other.type_name
            and self.end1_guid == other.end1_guid
            and self.end2_guid == other.end2_guid
            and self.properties == other.properties
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/storage."""
        return {
            "guid": self.guid,
            "typeName": self.type_name,
            "end1Guid": self.end1_guid,
            "end2Guid": self.end2_guid,
            "properties": dict(self.properties),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Edge:
        """Deserialize from dict."""
        return cls(
            guid=data["guid"],
            type_name=data["typeName"],
            end1_guid=data["end1Guid"],
            end2_guid=data["end2Guid"],
            properties=dict(data.get("properties", {})),
        )


# ---------------------------------------------------------------------------
# Archive
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ArchiveHeader:
    """Descriptive properties of an archive.

    ``version_number`` defaults to the creation time in epoch milliseconds,
    so each build gets a higher version than the last.
    """

    guid: str
    name: str
    description: str
    originator_name: str
    originator_license: str = "Apache-2.0"
    archive_type: str = ARCHIVE_TYPE_CONTENT_PACK
    creation_date: datetime = field(default_factory=_utcnow)
    version_name: str = "1.0"
    version_number: int | None = None
    depends_on: tuple[str, ...] = ()

    @property
    def effective_version_number(self) -> int:
        if self.version_number is not None:
            return self.version_number
        return int(self.creation_date.timestamp() * 1000)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/storage."""
        return {
            "archiveGUID": self.guid,
            "archiveName": self.name,
            "archiveDescription": self.description,
            "archiveType": self.archive_type,
            "originatorName": self.originator_name,
            "originatorLicense": self.originator_license,
            "creationDate": self.creation_date.isoformat(),
            "versionNumber": self.effective_version_number,
            "versionName": self.version_name,
            "dependsOnArchives": list(self.depends_on),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ArchiveHeader:
        """Deserialize from dict."""
        return cls(
            guid=data["archiveGUID"],
            name=data["archiveName"],
            description=data.get("archiveDescription", ""),
            originator_name=data.get("originatorName", ""),
            originator_license=data.get("originatorLicense", "Apache-2.0"),
            archive_type=data.get("archiveType", ARCHIVE_TYPE_CONTENT_PACK),
            creation_date=datetime.fromisoformat(data["creationDate"]) if "creationDate" in data else _utcnow(),
            version_name=data.get("versionName", "1.0"),
            version_number=data.get("versionNumber"),
            depends_on=tuple(data.get("dependsOnArchives", [])),
        )


# Header fields that change on every build and are left out of fingerprints.
_VOLATILE_HEADER_FIELDS = ("creationDate", "versionNumber")


@dataclass(frozen=True, slots=True)
class Archive:
    """Immutable snapshot of an assembled graph plus its header."""

    header: ArchiveHeader
    nodes: tuple[Node, ...]
    edges: tuple[Edge, ...]

    def node_by_guid(self, guid: str) -> Node | None:
        for node in self.nodes:
            if node.guid == guid:
                return node
        return None

    def node_by_qualified_name(self, qualified_name: str) -> Node | None:
        for node in self.nodes:
            if node.qualified_name == qualified_name:
                return node
        return None

    def edges_of_type(self, type_name: str) -> list[Edge]:
        return [e for e in self.edges if e.type_name == type_name]

    def nodes_of_type(self, type_name: str) -> list[Node]:
        return [n for n in self.nodes if n.type_name == type_name]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON artifact layout."""
        return {
            "header": self.header.to_dict(),
            "instanceStore": {
                "entities": [n.to_dict() for n in self.nodes],
                "relationships": [e.to_dict() for e in self.edges],
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Archive:
        """Deserialize from the JSON artifact layout."""
        store = data.get("instanceStore", {})
        return cls(
            header=ArchiveHeader.from_dict(data["header"]),
            nodes=tuple(Node.from_dict(n) for n in store.get("entities", [])),
            edges=tuple(Edge.from_dict(e) for e in store.get("relationships", [])),
        )

    def fingerprint(self) -> str:
        """Content hash of the archive, ignoring creation time and version number."""
        content = self.to_dict()
        for key in _VOLATILE_HEADER_FIELDS:
            content["header"].pop(key, None)
        return compute_hash(canonical_json(content), length=64)


__all__ = [
    "ARCHIVE_TYPE_CONTENT_PACK",
    "Classification",
    "Node",
    "Edge",
    "ArchiveHeader",
    "Archive",
]
