"""Deployed implementation types and the software services hosted by them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from omarchive.core.logging import get_logger
from omarchive.definitions.records import DEPLOYED_IMPLEMENTATION_TYPE_PROPERTY, DeployedImplementationTypeRecord
from omarchive.processors.base import DEPLOYED_IMPLEMENTATION_TYPES, BuildContext, ResourceUse, link_resource

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

logger = get_logger(__name__)


def add_deployed_implementation_type(record: DeployedImplementationTypeRecord, context: BuildContext) -> str:
    """Add the valid value for one technology type and return its GUID."""
    guid = context.taxonomy.add_value(
        record.associated_type_name,
        DEPLOYED_IMPLEMENTATION_TYPE_PROPERTY,
        None,
        record.name,
        description=record.description,
        guid=record.guid,
    )
    if record.wiki_url:
        context.assembler.add_external_reference(
            guid,
            f"{record.qualified_name}_wikiLink",
            record.wiki_url,
            display_name=f"More information about deployedImplementationType: {record.name}",
        )
    context.tables.record(DEPLOYED_IMPLEMENTATION_TYPES, record.name, guid)
    return guid


def process_deployed_implementation_types(catalogue: Catalogue, context: BuildContext) -> None:
    for record in catalogue.deployed_implementation_types:
        add_deployed_implementation_type(record, context)

    # Services can name each other as partners, so every service exists
    # before any hosting or calling link is added.
    for service in catalogue.software_services:
        add_deployed_implementation_type(service.as_deployed_type(), context)

    tables = context.tables
    for service in catalogue.software_services:
        service_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, service.name)
        for host in service.hosted_by:
            host_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, host)
            link_resource(context, host_guid, service_guid, ResourceUse.HOSTED_SERVICE)
        if service.partner_service:
            partner_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, service.partner_service)
            link_resource(context, service_guid, partner_guid, ResourceUse.CALLED_SERVICE)

    logger.info(
        "deployed_implementation_types_added",
        types=len(catalogue.deployed_implementation_types),
        services=len(catalogue.software_services),
    )


__all__ = ["add_deployed_implementation_type", "process_deployed_implementation_types"]
