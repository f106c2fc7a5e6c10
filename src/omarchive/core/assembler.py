"""
Graph assembler: the only way nodes, edges and classifications enter an archive.

The assembler owns the in-memory graph for one build.  It asks the
identifier registry for every GUID, refuses edges whose ends are not yet in
the graph, and refuses a second node with the same GUID.  Because every
mutation goes through these checks, a snapshot taken at the end of a build
has no dangling references by construction.

Manifesto:
    Definition processors should say *what* exists and how it connects, not
    manage identity or integrity.  The assembler gives them three primitives
    (``add_node``, ``add_edge``, ``add_classification``) plus a handful of
    builders for shapes that recur across processors (valid values,
    endpoints, connections, template markers, resource links).

    - **Identity from the registry:** Never invents a GUID itself
    - **Fail fast:** Dangling ends and duplicates raise immediately
    - **Explicit guards:** Declared GUIDs are compared, never asserted
    - **Idempotent edges:** Re-adding an identical edge is a no-op

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                       GraphAssembler                          │
        ├──────────────────────────────────────────────────────────────┤
        │  add_node(type, qn, guid?)                                    │
        │     └── registry.reserve(qn, guid) ─▶ GUIDConflictError       │
        │     └── guid already a node       ─▶ DuplicateInstanceError   │
        │                                                               │
        │  add_edge(type, end1, end2, props, discriminator?)            │
        │     └── end not a node            ─▶ DanglingReferenceError   │
        │     └── registry.reserve("<end1>_to_<end2>_<Type>…")          │
        │     └── same key, other props     ─▶ DuplicateInstanceError   │
        │                                                               │
        │  add_classification(node, c)      ─▶ DanglingReferenceError   │
        │  resolve(qn)                      ─▶ DanglingReferenceError   │
        │                                                               │
        │  snapshot(header) ─▶ Archive (nodes, edges in insertion order)│
        └──────────────────────────────────────────────────────────────┘

Examples:
    >>> from omarchive.core.identifiers import IdentifierRegistry
    >>> registry = IdentifierRegistry("Test", archive_guid="test-archive")
    >>> assembler = GraphAssembler(registry)
    >>> folder = assembler.add_node("FileFolder", "FileFolder:template", display_name="Folder")
    >>> file = assembler.add_node("DataFile", "DataFile:template")
    >>> edge = assembler.add_edge("NestedFile", folder, file)
    >>> assembler.add_edge("NestedFile", folder, file) == edge
    True
    >>> assembler.add_edge("NestedFile", folder, "missing")
    Traceback (most recent call last):
    ...
    DanglingReferenceError: NestedFile edge references unknown node 'missing'

Guardrails:
    ❌ DON'T: Hold a GUID from ``registry.lookup`` and assume the node exists
    ✅ DO: Use ``resolve`` (checks the graph) or rely on ``add_edge`` checks

Tags:
    graph, assembler, integrity, identity, omarchive
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from omarchive.core.errors import (
    DanglingReferenceError,
    DuplicateInstanceError,
    GUIDConflictError,
)
from omarchive.core.identifiers import IdentifierRegistry
from omarchive.core.logging import get_logger
from omarchive.core.model import Archive, ArchiveHeader, Classification, Edge, Node

logger = get_logger(__name__)

# ── Type names used by the built-in builders ─────────────────────
VALID_VALUE_SET = "ValidValueSet"
VALID_VALUE_DEFINITION = "ValidValueDefinition"
VALID_VALUE_MEMBER = "ValidValueMember"
EXTERNAL_REFERENCE = "ExternalReference"
EXTERNAL_REFERENCE_LINK = "ExternalReferenceLink"
ENDPOINT = "Endpoint"
SERVER_ENDPOINT = "ServerEndpoint"
CONNECTION = "Connection"
CONNECTION_CONNECTOR_TYPE = "ConnectionConnectorType"
CONNECTION_ENDPOINT = "ConnectionEndpoint"
CONNECTION_TO_ASSET = "ConnectionToAsset"
RESOURCE_LIST = "ResourceList"
TEMPLATE_CLASSIFICATION = "Template"


def _clean(properties: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop ``None`` values so absent properties are absent in the artifact."""
    if not properties:
        return {}
    return {k: v for k, v in properties.items() if v is not None}


class GraphAssembler:
    """Builds the node/edge graph for one archive.

    Args:
        registry: Identifier registry that assigns every GUID
    """

    def __init__(self, registry: IdentifierRegistry) -> None:
        self.registry = registry
        self._nodes: dict[str, Node] = {}
        self._guids_by_name: dict[str, str] = {}
        self._edges: dict[str, Edge] = {}

    # ── Primitives ───────────────────────────────────────────────

    def add_node(
        self,
        type_name: str,
        qualified_name: str,
        *,
        display_name: str | None = None,
        description: str | None = None,
        properties: Mapping[str, Any] | None = None,
        classifications: Iterable[Classification] | None = None,
        guid: str | None = None,
    ) -> str:
        """Add a node and return its GUID.

        Args:
            type_name: Open metadata type of the node
            qualified_name: Unique name; decides the GUID via the registry
            display_name: Stored as ``displayName`` when given
            description: Stored as ``description`` when given
            properties: Further properties (``None`` values are dropped)
            classifications: Classifications to attach immediately
            guid: Well-known GUID this node must have

        Raises:
            GUIDConflictError: ``guid`` disagrees with the registry
            DuplicateInstanceError: A node with the produced GUID exists
        """
        produced = self.registry.reserve(qualified_name, guid)
        if guid is not None and produced != guid:
            raise GUIDConflictError(qualified_name, guid, produced)

        if produced in self._nodes:
            existing = self._nodes[produced]
            raise DuplicateInstanceError(
                produced,
                f"{type_name} '{qualified_name}' clashes with {existing.type_name} '{existing.qualified_name}'",
            )

        node_properties: dict[str, Any] = {"qualifiedName": qualified_name}
        if display_name is not None:
            node_properties["displayName"] = display_name
        if description is not None:
            node_properties["description"] = description
        node_properties.update(_clean(properties))

        node = Node(
            guid=produced,
            qualified_name=qualified_name,
            type_name=type_name,
            properties=node_properties,
            classifications=list(classifications or ()),
        )
        self._nodes[produced] = node
        self._guids_by_name[qualified_name] = produced

        logger.debug("node_added", type_name=type_name, qualified_name=qualified_name, guid=produced)
        return produced

    @staticmethod
    def edge_key(
        type_name: str,
        end1_guid: str,
        end2_guid: str,
        discriminator: str | None = None,
    ) -> str:
        """Registry key under which an edge's GUID is held."""
        if discriminator:
            return f"{end1_guid}_to_{end2_guid}_{type_name}_{discriminator}_relationship"
        return f"{end1_guid}_to_{end2_guid}_{type_name}_relationship"

    def add_edge(
        self,
        type_name: str,
        end1_guid: str,
        end2_guid: str,
        properties: Mapping[str, Any] | None = None,
        *,
        discriminator: str | None = None,
    ) -> str:
        """Add an edge between two existing nodes and return its GUID.

        ``discriminator`` separates several edges of one type between the
        same two nodes (guard labels, resource uses).

        Raises:
            DanglingReferenceError: Either end is not a node in the graph
            DuplicateInstanceError: Same key already added with other properties
        """
        for end in (end1_guid, end2_guid):
            if end not in self._nodes:
                raise DanglingReferenceError(
                    str(end),
                    f"{type_name} edge references unknown node '{end}'",
                ).with_context(type_name=type_name)

        guid = self.registry.reserve(self.edge_key(type_name, end1_guid, end2_guid, discriminator))
        edge = Edge(
            guid=guid,
            type_name=type_name,
            end1_guid=end1_guid,
            end2_guid=end2_guid,
            properties=_clean(properties),
        )

        existing = self._edges.get(guid)
        if existing is not None:
            if existing.same_content(edge):
                return guid
            raise DuplicateInstanceError(
                guid,
                f"{type_name} from {end1_guid} to {end2_guid} re-added with different properties",
            )

        self._edges[guid] = edge
        logger.debug("edge_added", type_name=type_name, end1=end1_guid, end2=end2_guid, guid=guid)
        return guid

    def add_classification(self, node_guid: str, classification: Classification) -> None:
        """Attach ``classification`` to an existing node.

        Raises:
            DanglingReferenceError: The node is not in the graph
        """
        node = self._nodes.get(node_guid)
        if node is None:
            raise DanglingReferenceError(
                node_guid,
                f"{classification.name} classification references unknown node '{node_guid}'",
            )
        node.classifications.append(classification)

    # ── Queries ──────────────────────────────────────────────────

    def resolve(self, qualified_name: str) -> str:
        """GUID of the node called ``qualified_name``.

        Unlike ``registry.lookup`` this only succeeds once the node is in
        the graph, so it catches references to nodes a later processor
        would have created.

        Raises:
            DanglingReferenceError: No such node in the graph yet
        """
        guid = self._guids_by_name.get(qualified_name)
        if guid is None:
            raise DanglingReferenceError(
                qualified_name,
                f"No node with qualified name '{qualified_name}' has been added",
            ).with_context(qualified_name=qualified_name)
        return guid

    def has_node(self, guid: str) -> bool:
        return guid in self._nodes

    def has_qualified_name(self, qualified_name: str) -> bool:
        return qualified_name in self._guids_by_name

    def get_node(self, guid: str) -> Node:
        node = self._nodes.get(guid)
        if node is None:
            raise DanglingReferenceError(guid)
        return node

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges.values())

    def snapshot(self, header: ArchiveHeader) -> Archive:
        """Freeze the current graph into an ``Archive``."""
        return Archive(header=header, nodes=tuple(self._nodes.values()), edges=tuple(self._edges.values()))

    # ── Builders ─────────────────────────────────────────────────

    def add_valid_value(
        self,
        qualified_name: str,
        *,
        type_name: str = VALID_VALUE_DEFINITION,
        display_name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        usage: str | None = None,
        scope: str | None = None,
        preferred_value: str | None = None,
        data_type: str | None = None,
        is_case_sensitive: bool = False,
        is_deprecated: bool = False,
        parent_set_guid: str | None = None,
        additional_properties: Mapping[str, str] | None = None,
        guid: str | None = None,
    ) -> str:
        """Add a valid-value set or definition, linked under its parent set."""
        value_guid = self.add_node(
            type_name,
            qualified_name,
            display_name=display_name,
            description=description,
            properties={
                "category": category,
                "usage": usage,
                "scope": scope,
                "preferredValue": preferred_value,
                "dataType": data_type,
                "isCaseSensitive": is_case_sensitive,
                "isDeprecated": is_deprecated,
                "additionalProperties": dict(additional_properties) if additional_properties else None,
            },
            guid=guid,
        )
        if parent_set_guid is not None:
            self.add_edge(VALID_VALUE_MEMBER, parent_set_guid, value_guid, {"isDefaultValue": False})
        return value_guid

    def add_external_reference(
        self,
        anchor_guid: str,
        qualified_name: str,
        url: str,
        *,
        display_name: str | None = None,
        description: str | None = None,
        reference_title: str | None = None,
    ) -> str:
        """Add an external reference node and link it from ``anchor_guid``."""
        ref_guid = self.add_node(
            EXTERNAL_REFERENCE,
            qualified_name,
            display_name=display_name,
            description=description,
            properties={"url": url, "referenceTitle": reference_title},
        )
        self.add_edge(EXTERNAL_REFERENCE_LINK, anchor_guid, ref_guid)
        return ref_guid

    def add_endpoint(
        self,
        qualified_name: str,
        network_address: str,
        *,
        display_name: str | None = None,
        description: str | None = None,
        protocol: str | None = None,
        server_guid: str | None = None,
    ) -> str:
        """Add an endpoint, optionally linked from the server that exposes it."""
        endpoint_guid = self.add_node(
            ENDPOINT,
            qualified_name,
            display_name=display_name,
            description=description,
            properties={"networkAddress": network_address, "protocol": protocol},
        )
        if server_guid is not None:
            self.add_edge(SERVER_ENDPOINT, server_guid, endpoint_guid)
        return endpoint_guid

    def add_connection(
        self,
        qualified_name: str,
        connector_type_guid: str,
        *,
        display_name: str | None = None,
        description: str | None = None,
        endpoint_guid: str | None = None,
        asset_guid: str | None = None,
        user_id: str | None = None,
        configuration_properties: Mapping[str, Any] | None = None,
    ) -> str:
        """Add a connection linked to its connector type, endpoint and asset."""
        connection_guid = self.add_node(
            CONNECTION,
            qualified_name,
            display_name=display_name,
            description=description,
            properties={
                "userId": user_id,
                "configurationProperties": dict(configuration_properties) if configuration_properties else None,
            },
        )
        self.add_edge(CONNECTION_CONNECTOR_TYPE, connection_guid, connector_type_guid)
        if endpoint_guid is not None:
            self.add_edge(CONNECTION_ENDPOINT, endpoint_guid, connection_guid)
        if asset_guid is not None:
            self.add_edge(CONNECTION_TO_ASSET, connection_guid, asset_guid)
        return connection_guid

    def add_template_classification(
        self,
        node_guid: str,
        name: str,
        *,
        description: str | None = None,
        version_identifier: str | None = None,
        placeholders: Mapping[str, Any] | None = None,
        replacement_attributes: Iterable[str] | None = None,
    ) -> None:
        """Mark ``node_guid`` as a template."""
        self.add_classification(
            node_guid,
            Classification(
                TEMPLATE_CLASSIFICATION,
                _clean(
                    {
                        "name": name,
                        "description": description,
                        "versionIdentifier": version_identifier,
                        "placeholderProperties": dict(placeholders) if placeholders else None,
                        "replacementAttributes": list(replacement_attributes) if replacement_attributes else None,
                    }
                ),
            ),
        )

    def add_resource_list(
        self,
        parent_guid: str,
        resource_guid: str,
        resource_use: str,
        *,
        description: str | None = None,
        watch_resource: bool = False,
        properties: Mapping[str, Any] | None = None,
    ) -> str:
        """Link ``resource_guid`` as a resource of ``parent_guid``."""
        return self.add_edge(
            RESOURCE_LIST,
            parent_guid,
            resource_guid,
            {
                "resourceUse": resource_use,
                "resourceUseDescription": description,
                "watchResource": watch_resource,
                "resourceUseProperties": dict(properties) if properties else None,
            },
            discriminator=resource_use,
        )

    def __len__(self) -> int:
        return len(self._nodes)


__all__ = ["GraphAssembler"]
