"""Tests for request type bindings and governance action types."""

from __future__ import annotations

import dataclasses

import pytest

from omarchive.core.errors import DanglingReferenceError
from omarchive.processors import DEFAULT_STAGES
from omarchive.processors.base import (
    DEPLOYED_IMPLEMENTATION_TYPES,
    GOVERNANCE_ACTION_TYPES,
    GOVERNANCE_ENGINES,
    GOVERNANCE_SERVICES,
    INTEGRATION_CONNECTORS,
)
from omarchive.processors.request_types import process_request_types

CREATE_SERVER_QN = "Test:GovernanceActionEngine:PostgreSQL:create-server"
CATALOG_SERVER_QN = "Test:GovernanceActionEngine:PostgreSQL:catalog-server"
TEMPLATE_GUID = "0c0c7e36-1a5b-4f0e-8a2a-000000000003"


def _edges(context, type_name, end1=None, end2=None):
    return [
        e
        for e in context.assembler.edges
        if e.type_name == type_name and end1 in (None, e.end1_guid) and end2 in (None, e.end2_guid)
    ]


class TestRequestTypes:
    """Tests for process_request_types on the small catalogue."""

    @pytest.fixture
    def built(self, small_catalogue, build_through):
        return build_through(small_catalogue, "request_types")

    def test_supported_service(self, built):
        """The engine supports the service under the request type name."""
        engine = built.tables.require(GOVERNANCE_ENGINES, "Test:GovernanceActionEngine:PostgreSQL")
        service = built.tables.require(GOVERNANCE_SERVICES, "Test:GovernanceActionService:CreateAsset")
        (edge,) = _edges(built, "SupportedGovernanceService", engine, service)
        assert edge.properties == {
            "requestType": "create-server",
            "requestParameters": {"templateGUID": TEMPLATE_GUID},
        }

    def test_action_type_node(self, built):
        """Action types keep their pre-declared GUID and list the service's capabilities."""
        guid = built.tables.require(GOVERNANCE_ACTION_TYPES, CREATE_SERVER_QN)
        assert guid == "0c0c7e36-1a5b-4f0e-8a2a-000000000008"

        node = built.assembler.get_node(guid)
        assert node.type_name == "GovernanceActionType"
        assert node.display_name == "create-server (Test:GovernanceActionEngine:PostgreSQL)"
        assert node.properties["domainIdentifier"] == 0
        assert node.properties["supportedRequestParameters"] == ["templateGUID"]
        assert node.properties["producedGuards"] == ["asset-created"]
        assert "supportedActionTargets" not in node.properties

    def test_executor_edge(self, built):
        guid = built.tables.require(GOVERNANCE_ACTION_TYPES, CREATE_SERVER_QN)
        engine = built.tables.require(GOVERNANCE_ENGINES, "Test:GovernanceActionEngine:PostgreSQL")
        (edge,) = _edges(built, "GovernanceActionExecutor", guid, engine)
        assert edge.properties["requestType"] == "create-server"
        assert edge.properties["requestParameters"] == {"templateGUID": TEMPLATE_GUID}

    def test_action_target(self, built):
        """Action targets point at the named element."""
        guid = built.tables.require(GOVERNANCE_ACTION_TYPES, CATALOG_SERVER_QN)
        cataloguer = built.tables.require(INTEGRATION_CONNECTORS, "Test:IntegrationGroup:ServerCataloguer")
        (edge,) = _edges(built, "TargetForActionType", guid, cataloguer)
        assert edge.properties == {"actionTargetName": "integrationConnector"}

    def test_supported_technology_link(self, built):
        """A service's supported technology lists the action type as a resource."""
        guid = built.tables.require(GOVERNANCE_ACTION_TYPES, CATALOG_SERVER_QN)
        dit = built.tables.require(DEPLOYED_IMPLEMENTATION_TYPES, "Integration Connector")
        (edge,) = _edges(built, "ResourceList", dit, guid)
        assert edge.properties["resourceUse"] == "Improve Metadata"
        assert edge.properties["resourceUseDescription"] == "Adds a catalog target to an integration connector."
        assert "resourceUseProperties" not in edge.properties

    def test_supported_element_link(self, built):
        """The supported element lists the action type with its request parameters."""
        guid = built.tables.require(GOVERNANCE_ACTION_TYPES, CREATE_SERVER_QN)
        dit = built.tables.require(DEPLOYED_IMPLEMENTATION_TYPES, "PostgreSQL Server")
        (edge,) = _edges(built, "ResourceList", dit, guid)
        assert edge.properties["resourceUseProperties"] == {"templateGUID": TEMPLATE_GUID}


class TestRequestTypeReferences:
    """Tests for request types referring to elements that are not there."""

    def test_action_target_not_yet_added(self, small_catalogue, context):
        """Skipping the integration connectors stage leaves the target unresolved."""
        for stage in DEFAULT_STAGES:
            if stage.name in ("integration_connectors", "request_types", "governance_processes"):
                continue
            stage.func(small_catalogue, context)

        with pytest.raises(DanglingReferenceError) as exc:
            process_request_types(small_catalogue, context)
        assert exc.value.reference == "Test:IntegrationGroup:ServerCataloguer"

    def test_unknown_service(self, small_catalogue, build_through):
        create_server, catalog_server = small_catalogue.request_types
        record = dataclasses.replace(create_server, governance_service="Test:GovernanceActionService:Missing")
        catalogue = dataclasses.replace(small_catalogue, request_types=(record, catalog_server))

        with pytest.raises(DanglingReferenceError) as exc:
            build_through(catalogue, "request_types")
        assert exc.value.context.metadata["lookup_table"] == "governance_services"

    def test_unknown_template(self, small_catalogue, build_through):
        create_server, catalog_server = small_catalogue.request_types
        record = dataclasses.replace(create_server, template="Missing:~{name}~")
        catalogue = dataclasses.replace(small_catalogue, request_types=(record, catalog_server))

        with pytest.raises(DanglingReferenceError) as exc:
            build_through(catalogue, "request_types")
        assert exc.value.context.metadata["lookup_table"] == "templates"
