"""
Shared pytest fixtures and configuration for omarchive tests.

This module provides:
- In-memory and on-disk identifier registries
- A fresh BuildContext per test
- A small catalogue that exercises every processor stage

Usage:
    Fixtures are auto-discovered by pytest; request them as arguments.

    def test_something(small_catalogue, context):
        ...
"""

from __future__ import annotations

from pathlib import Path

import pytest

from omarchive.core.identifiers import IdentifierRegistry
from omarchive.definitions.catalogue import ArchiveMetadataRecord, Catalogue
from omarchive.definitions.records import (
    ActionTargetRecord,
    ConnectorCategoryRecord,
    ConnectorDirectoryRecord,
    ConnectorTypeRecord,
    DeployedImplementationTypeRecord,
    GovernanceEngineRecord,
    GovernanceProcessRecord,
    GovernanceServiceRecord,
    IntegrationConnectorRecord,
    IntegrationGroupRecord,
    OpenMetadataTypeRecord,
    PlaceholderRecord,
    ProcessStepRecord,
    ProcessTransitionRecord,
    RequestTypeRecord,
    SupportedTechnologyRecord,
    TemplateKind,
    TemplateRecord,
)
from omarchive.processors import DEFAULT_PLAN, BuildContext

TEST_ARCHIVE_GUID = "3f1a6c2e-5b8d-4e0f-9a7c-1d2e3f4a5b6c"


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(str(item.fspath)).relative_to(Path(__file__).parent)

        if "integration" in test_path.parts or test_path.parts[0] == "cli":
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Registry / Context Fixtures
# =============================================================================


@pytest.fixture
def registry() -> IdentifierRegistry:
    """In-memory registry (never persisted)."""
    return IdentifierRegistry("TestPack", archive_guid=TEST_ARCHIVE_GUID)


@pytest.fixture
def disk_registry(tmp_path: Path) -> IdentifierRegistry:
    """Registry whose GUID map lives under tmp_path."""
    return IdentifierRegistry("TestPack", tmp_path / "guids", archive_guid=TEST_ARCHIVE_GUID)


@pytest.fixture
def context(registry: IdentifierRegistry) -> BuildContext:
    """Fresh build context on the in-memory registry."""
    return BuildContext.create(registry)


@pytest.fixture
def build_through(context: BuildContext):
    """Run the default plan on a catalogue up to and including one stage.

    Usage:
        context = build_through(small_catalogue, "templates")
    """

    def run(catalogue: Catalogue, last_stage: str) -> BuildContext:
        for stage in DEFAULT_PLAN:
            stage.func(catalogue, context)
            if stage.name == last_stage:
                return context
        raise ValueError(f"No stage named {last_stage!r}")

    return run


# =============================================================================
# Sample Catalogue
# =============================================================================


POSTGRES_SERVER = DeployedImplementationTypeRecord(
    "PostgreSQL Server", "SoftwareServer", "A PostgreSQL database server.",
    wiki_url="https://example.org/postgres",
)
POSTGRES_DBMS = DeployedImplementationTypeRecord(
    "PostgreSQL Relational Database Manager", "DatabaseManager", "The DBMS capability.",
)
INTEGRATION_CONNECTOR_TYPE = DeployedImplementationTypeRecord(
    "Integration Connector", "IntegrationConnector", "A metadata synchronization connector.",
)

JDBC_CATEGORY = ConnectorCategoryRecord(
    "TestJDBCCategory", "JDBC Connectors", "Connectors to relational databases.",
    target_technology_source="JDBC", target_technology_name="Relational Database",
)
JDBC_CONNECTOR = ConnectorTypeRecord(
    guid="0c0c7e36-1a5b-4f0e-8a2a-000000000001",
    qualified_name="Test:ConnectorType:JDBC",
    display_name="JDBC Connector",
    description="Reads a database over JDBC.",
    connector_provider_class_name="org.example.JDBCProvider",
    category=JDBC_CATEGORY.qualified_name,
    supported_asset_type_name="SoftwareServer",
    supported_deployed_types=(POSTGRES_SERVER.name,),
)
SERVER_INTEGRATION_CONNECTOR = ConnectorTypeRecord(
    guid="0c0c7e36-1a5b-4f0e-8a2a-000000000002",
    qualified_name="Test:IntegrationConnector:PostgreSQLServer",
    display_name="PostgreSQL Server Integration Connector",
    description="Catalogs databases of a server.",
    connector_provider_class_name="org.example.PostgresServerIntegrationProvider",
    supported_deployed_types=(POSTGRES_SERVER.name,),
)

SERVER_TEMPLATE = TemplateRecord(
    kind=TemplateKind.SOFTWARE_SERVER,
    deployed_implementation_type=POSTGRES_SERVER.name,
    resource_name="~{serverName}~",
    template_name="PostgreSQL Server Template",
    guid="0c0c7e36-1a5b-4f0e-8a2a-000000000003",
    network_address="jdbc:postgresql://~{hostIdentifier}~:5432/postgres",
    protocol="JDBC",
    connector_type=JDBC_CONNECTOR.qualified_name,
    user_id="~{databaseUserId}~",
    capability_type=POSTGRES_DBMS.name,
    capability_name="DBMS",
    placeholders=(
        PlaceholderRecord("serverName", "Name of the server.", example="db1"),
        PlaceholderRecord("hostIdentifier", "Host name.", example="localhost"),
        PlaceholderRecord("databaseUserId", "Database user."),
    ),
    replacement_attributes=("description",),
)

GROUP = IntegrationGroupRecord("Test:IntegrationGroup", "TestGroup", "Connectors for tests.")
SERVER_CATALOGUER = IntegrationConnectorRecord(
    guid="0c0c7e36-1a5b-4f0e-8a2a-000000000004",
    qualified_name="Test:IntegrationGroup:ServerCataloguer",
    display_name="Server Cataloguer",
    description="Catalogs PostgreSQL servers.",
    connector_type=SERVER_INTEGRATION_CONNECTOR.qualified_name,
    connector_name="ServerCataloguer",
    connector_user_id="servercatnpa",
    deployed_implementation_types=(POSTGRES_SERVER.name,),
)

ENGINE = GovernanceEngineRecord(
    guid="0c0c7e36-1a5b-4f0e-8a2a-000000000005",
    name="Test:GovernanceActionEngine:PostgreSQL",
    display_name="PostgreSQL Engine",
    description="Creates and catalogs servers.",
)
CREATE_ASSET = GovernanceServiceRecord(
    guid="0c0c7e36-1a5b-4f0e-8a2a-000000000006",
    name="Test:GovernanceActionService:CreateAsset",
    display_name="Create Asset",
    description="Creates an asset from a template.",
    connector_provider_class_name="org.example.CreateAssetProvider",
    supported_request_parameters=("templateGUID",),
    produced_guards=("asset-created",),
)
CATALOG_TARGET = GovernanceServiceRecord(
    guid="0c0c7e36-1a5b-4f0e-8a2a-000000000007",
    name="Test:GovernanceActionService:CatalogTarget",
    display_name="Catalog Target",
    description="Adds a catalog target to an integration connector.",
    connector_provider_class_name="org.example.CatalogTargetProvider",
    supported_technologies=(SupportedTechnologyRecord(INTEGRATION_CONNECTOR_TYPE.name),),
    supported_action_targets=("integrationConnector",),
    produced_guards=("catalog-target-added",),
)

CREATE_SERVER = RequestTypeRecord(
    ENGINE.name,
    CREATE_ASSET.name,
    "create-server",
    "0c0c7e36-1a5b-4f0e-8a2a-000000000008",
    template=SERVER_TEMPLATE.qualified_name,
    supported_element_qualified_name=POSTGRES_SERVER.qualified_name,
)
CATALOG_SERVER = RequestTypeRecord(
    ENGINE.name,
    CATALOG_TARGET.name,
    "catalog-server",
    "0c0c7e36-1a5b-4f0e-8a2a-000000000009",
    action_targets=(ActionTargetRecord("integrationConnector", SERVER_CATALOGUER.qualified_name),),
)

CREATE_AND_CATALOG = GovernanceProcessRecord(
    qualified_name="Test:CreateAndCatalogServer",
    display_name="Create and Catalog Server",
    governance_engine=ENGINE.name,
    first_step="Create",
    steps=(
        ProcessStepRecord(
            "Create",
            "Create the server",
            request_type="create-server",
            transitions=(ProcessTransitionRecord("asset-created", "Catalog", mandatory=True),),
        ),
        ProcessStepRecord("Catalog", "Catalog the server", request_type="catalog-server"),
    ),
)


@pytest.fixture
def archive_metadata() -> ArchiveMetadataRecord:
    return ArchiveMetadataRecord(
        guid=TEST_ARCHIVE_GUID,
        name="TestPack",
        description="Small pack used by the tests.",
        originator_name="Test Suite",
    )


@pytest.fixture
def small_catalogue(archive_metadata: ArchiveMetadataRecord) -> Catalogue:
    """A catalogue with one record chain through every processor stage."""
    return Catalogue(
        archive=archive_metadata,
        open_metadata_types=(OpenMetadataTypeRecord("SoftwareServer", "A running software server."),),
        deployed_implementation_types=(POSTGRES_SERVER, POSTGRES_DBMS, INTEGRATION_CONNECTOR_TYPE),
        connector_directory=ConnectorDirectoryRecord("TestDirectory", "Test Directory", "Connector types for tests."),
        connector_categories=(JDBC_CATEGORY,),
        connector_types=(JDBC_CONNECTOR, SERVER_INTEGRATION_CONNECTOR),
        templates=(SERVER_TEMPLATE,),
        integration_group=GROUP,
        integration_connectors=(SERVER_CATALOGUER,),
        governance_engines=(ENGINE,),
        governance_services=(CREATE_ASSET, CATALOG_TARGET),
        request_types=(CREATE_SERVER, CATALOG_SERVER),
        governance_processes=(CREATE_AND_CATALOG,),
    )
