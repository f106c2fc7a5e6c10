"""Default integration group and the integration connectors registered in it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from omarchive.core.logging import get_logger
from omarchive.definitions.records import IntegrationConnectorRecord
from omarchive.processors.base import (
    CONNECTOR_TYPES,
    DEPLOYED_IMPLEMENTATION_TYPES,
    INTEGRATION_CONNECTORS,
    BuildContext,
    link_resource,
)

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

logger = get_logger(__name__)

INTEGRATION_GROUP = "IntegrationGroup"
INTEGRATION_CONNECTOR = "IntegrationConnector"
REGISTERED_INTEGRATION_CONNECTOR = "RegisteredIntegrationConnector"


def add_integration_connector(
    record: IntegrationConnectorRecord,
    context: BuildContext,
    group_guid: str | None,
) -> str:
    """Add one integration connector with its connection and registration."""
    assembler = context.assembler
    tables = context.tables
    connector_type_guid = tables.require(CONNECTOR_TYPES, record.connector_type)

    guid = assembler.add_node(
        INTEGRATION_CONNECTOR,
        record.qualified_name,
        display_name=record.display_name,
        description=record.description,
        properties={"usesBlockingCalls": False},
        guid=record.guid,
    )

    endpoint_guid = None
    if record.endpoint_address is not None:
        endpoint_guid = assembler.add_endpoint(
            f"{record.qualified_name}:Endpoint",
            record.endpoint_address,
            display_name=f"{record.display_name} endpoint",
        )
    assembler.add_connection(
        f"{record.qualified_name}:Connection",
        connector_type_guid,
        display_name=f"{record.display_name} connection",
        endpoint_guid=endpoint_guid,
        asset_guid=guid,
        configuration_properties=record.configuration_properties,
    )

    if group_guid is not None:
        assembler.add_edge(
            REGISTERED_INTEGRATION_CONNECTOR,
            group_guid,
            guid,
            {
                "connectorName": record.connector_name,
                "connectorUserId": record.connector_user_id,
                "metadataSourceQualifiedName": record.metadata_source_qualified_name,
                "refreshTimeInterval": record.refresh_time_interval,
            },
        )

    for deployed_type in record.deployed_implementation_types:
        dit_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, deployed_type)
        link_resource(context, dit_guid, guid, record.resource_use)

    tables.record(INTEGRATION_CONNECTORS, record.qualified_name, guid)
    return guid


def process_integration_connectors(catalogue: Catalogue, context: BuildContext) -> None:
    group_guid = None
    group = catalogue.integration_group
    if group is not None:
        group_guid = context.assembler.add_node(
            INTEGRATION_GROUP,
            group.qualified_name,
            display_name=group.display_name,
            description=group.description,
            properties={"name": group.display_name},
        )

    for record in catalogue.integration_connectors:
        add_integration_connector(record, context, group_guid)

    logger.info("integration_connectors_added", connectors=len(catalogue.integration_connectors))


__all__ = ["add_integration_connector", "process_integration_connectors"]
