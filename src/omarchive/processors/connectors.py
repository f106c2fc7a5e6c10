"""Connector type directory, connector categories and connector types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from omarchive.core.logging import get_logger
from omarchive.definitions.records import ConnectorTypeRecord
from omarchive.processors.base import (
    CONNECTOR_CATEGORIES,
    CONNECTOR_TYPES,
    DEPLOYED_IMPLEMENTATION_TYPES,
    BuildContext,
    ResourceUse,
    link_resource,
)

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

logger = get_logger(__name__)

CONNECTOR_TYPE_DIRECTORY = "ConnectorTypeDirectory"
CONNECTOR_CATEGORY = "ConnectorCategory"
CONNECTOR_TYPE = "ConnectorType"
COLLECTION_MEMBERSHIP = "CollectionMembership"
CONNECTOR_IMPLEMENTATION_CHOICE = "ConnectorImplementationChoice"


def add_connector_type(record: ConnectorTypeRecord, context: BuildContext) -> str:
    """Add a connector type, link it to its category and its technologies."""
    tables = context.tables
    guid = context.assembler.add_node(
        CONNECTOR_TYPE,
        record.qualified_name,
        display_name=record.display_name,
        description=record.description,
        properties={
            "connectorProviderClassName": record.connector_provider_class_name,
            "supportedAssetTypeName": record.supported_asset_type_name,
            "supportedDeployedImplementationType": (
                record.supported_deployed_types[0] if record.supported_deployed_types else None
            ),
            "recognizedConfigurationProperties": list(record.recognized_configuration_properties) or None,
            "connectorFrameworkName": record.connector_framework_name,
            "connectorInterfaceLanguage": record.connector_interface_language,
        },
        guid=record.guid,
    )
    if record.category is not None:
        category_guid = tables.require(CONNECTOR_CATEGORIES, record.category)
        context.assembler.add_edge(CONNECTOR_IMPLEMENTATION_CHOICE, category_guid, guid)

    for deployed_type in record.supported_deployed_types:
        dit_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, deployed_type)
        link_resource(context, dit_guid, guid, ResourceUse.HOSTED_CONNECTOR)

    tables.record(CONNECTOR_TYPES, record.qualified_name, guid)
    return guid


def process_connectors(catalogue: Catalogue, context: BuildContext) -> None:
    assembler = context.assembler
    directory_guid = None
    if catalogue.connector_directory is not None:
        directory = catalogue.connector_directory
        directory_guid = assembler.add_node(
            CONNECTOR_TYPE_DIRECTORY,
            directory.qualified_name,
            display_name=directory.display_name,
            description=directory.description,
        )

    for category in catalogue.connector_categories:
        category_guid = assembler.add_node(
            CONNECTOR_CATEGORY,
            category.qualified_name,
            display_name=category.display_name,
            description=category.description,
            properties={
                "targetTechnologySource": category.target_technology_source,
                "targetTechnologyName": category.target_technology_name,
            },
        )
        if directory_guid is not None:
            assembler.add_edge(COLLECTION_MEMBERSHIP, directory_guid, category_guid)
        context.tables.record(CONNECTOR_CATEGORIES, category.qualified_name, category_guid)

    for connector_type in catalogue.connector_types:
        add_connector_type(connector_type, context)

    logger.info(
        "connectors_added",
        categories=len(catalogue.connector_categories),
        connector_types=len(catalogue.connector_types),
    )


__all__ = ["add_connector_type", "process_connectors"]
