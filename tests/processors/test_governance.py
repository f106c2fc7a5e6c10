"""Tests for governance engines and services."""

from __future__ import annotations

import dataclasses

import pytest

from omarchive.core.errors import DanglingReferenceError
from omarchive.processors.base import DEPLOYED_IMPLEMENTATION_TYPES, GOVERNANCE_ENGINES, GOVERNANCE_SERVICES


def _catalogue_with_service_type(catalogue, deployed_type):
    create_asset, catalog_target = catalogue.governance_services
    service = dataclasses.replace(create_asset, deployed_implementation_type=deployed_type)
    return dataclasses.replace(catalogue, governance_services=(service, catalog_target))


class TestGovernanceEngines:
    """Tests for process_governance_engines."""

    def test_engine_node(self, small_catalogue, build_through):
        context = build_through(small_catalogue, "governance_engines")
        guid = context.tables.require(GOVERNANCE_ENGINES, "Test:GovernanceActionEngine:PostgreSQL")
        assert guid == small_catalogue.governance_engines[0].guid

        node = context.assembler.get_node(guid)
        assert node.type_name == "GovernanceActionEngine"
        assert node.properties["name"] == "Test:GovernanceActionEngine:PostgreSQL"
        assert node.properties["displayName"] == "PostgreSQL Engine"

    def test_service_node(self, small_catalogue, build_through):
        """Services carry their provider class; unset deployed types are dropped."""
        context = build_through(small_catalogue, "governance_engines")
        guid = context.tables.require(GOVERNANCE_SERVICES, "Test:GovernanceActionService:CreateAsset")
        assert guid == small_catalogue.governance_services[0].guid

        node = context.assembler.get_node(guid)
        assert node.type_name == "GovernanceActionService"
        assert node.properties["connectorProviderClassName"] == "org.example.CreateAssetProvider"
        assert "deployedImplementationType" not in node.properties
        assert not [e for e in context.assembler.edges if e.end2_guid == guid]

    def test_service_deployed_type_link(self, small_catalogue, build_through):
        """A service with a deployed type is listed as that type's resource."""
        catalogue = _catalogue_with_service_type(small_catalogue, "PostgreSQL Server")
        context = build_through(catalogue, "governance_engines")
        dit = context.tables.require(DEPLOYED_IMPLEMENTATION_TYPES, "PostgreSQL Server")
        guid = context.tables.require(GOVERNANCE_SERVICES, "Test:GovernanceActionService:CreateAsset")

        assert context.assembler.get_node(guid).properties["deployedImplementationType"] == "PostgreSQL Server"
        (link,) = [
            e
            for e in context.assembler.edges
            if e.type_name == "ResourceList" and (e.end1_guid, e.end2_guid) == (dit, guid)
        ]
        assert link.properties["resourceUse"] == "Improve Metadata"

    def test_service_unknown_deployed_type(self, small_catalogue, build_through):
        catalogue = _catalogue_with_service_type(small_catalogue, "Oracle Server")
        with pytest.raises(DanglingReferenceError):
            build_through(catalogue, "governance_engines")
